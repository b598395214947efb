# gkey/model/bookmark.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class Bookmark:
    """
    One entry of the host's bookmark tree.

    Folders carry children and no uuid; server bookmarks carry a uuid.
    """
    name: str
    uuid: str = ""
    is_folder: bool = False
    children: Tuple["Bookmark", ...] = field(default_factory=tuple)

    @classmethod
    def folder(cls, name: str, children: List["Bookmark"] | Tuple["Bookmark", ...] = ()) -> "Bookmark":
        return cls(name=name, is_folder=True, children=tuple(children))


def walk_bookmarks(items: List[Bookmark] | Tuple[Bookmark, ...], depth: int = 0) -> Iterator[Tuple[int, Bookmark]]:
    """Depth-first (depth, entry) pairs, folders before their contents."""
    for item in items:
        yield depth, item
        if item.is_folder:
            yield from walk_bookmarks(item.children, depth + 1)


def format_bookmark_tree(items: List[Bookmark] | Tuple[Bookmark, ...]) -> List[str]:
    lines = []
    for depth, item in walk_bookmarks(items):
        indent = "  " * depth
        if item.is_folder:
            lines.append(f"{indent}Folder: {item.name}")
        else:
            lines.append(f"{indent}Bookmark: {item.name} ({item.uuid})")
    return lines
