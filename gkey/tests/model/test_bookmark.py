from __future__ import annotations

from gkey.model.bookmark import Bookmark, format_bookmark_tree, walk_bookmarks


def _tree():
    return [
        Bookmark.folder("Friends", [
            Bookmark("Alice's server", uuid="u-1"),
            Bookmark.folder("Old", [Bookmark("Retired", uuid="u-2")]),
        ]),
        Bookmark("Public", uuid="u-3"),
    ]


def test_walk_is_depth_first():
    names = [(d, b.name) for d, b in walk_bookmarks(_tree())]
    assert names == [
        (0, "Friends"),
        (1, "Alice's server"),
        (1, "Old"),
        (2, "Retired"),
        (0, "Public"),
    ]


def test_format_indents_by_depth():
    assert format_bookmark_tree(_tree()) == [
        "Folder: Friends",
        "  Bookmark: Alice's server (u-1)",
        "  Folder: Old",
        "    Bookmark: Retired (u-2)",
        "Bookmark: Public (u-3)",
    ]


def test_format_empty():
    assert format_bookmark_tree([]) == []
