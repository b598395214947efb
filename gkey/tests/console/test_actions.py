from __future__ import annotations

import pytest

from gkey.console.actions import Action, SPEC_BY_ACTION, VERBS, resolve


@pytest.mark.parametrize(
    "verb,action",
    [
        ("join", Action.JOIN_CHANNEL),
        ("command", Action.SEND_COMMAND),
        ("server", Action.SERVER_INFO),
        ("channel", Action.CHANNEL_INFO),
        ("avatar", Action.AVATAR),
        ("enablemenu", Action.TOGGLE_MENU),
        ("subscribe", Action.SUBSCRIBE_CHANNEL),
        ("unsubscribe", Action.UNSUBSCRIBE_CHANNEL),
        ("subscribeall", Action.SUBSCRIBE_ALL),
        ("unsubscribeall", Action.UNSUBSCRIBE_ALL),
        ("bookmarks", Action.LIST_BOOKMARKS),
    ],
)
def test_resolve_known_verbs(verb, action):
    assert resolve(verb) is action


@pytest.mark.parametrize("verb", ["frobnicate", "JOIN", "Join", "", "join "])
def test_resolve_is_exact_and_case_sensitive(verb):
    assert resolve(verb) is Action.UNRECOGNIZED


def test_every_action_has_exactly_one_verb():
    actions = [s.action for s in VERBS.values()]
    assert len(actions) == len(set(actions))
    assert set(actions) == set(Action) - {Action.UNRECOGNIZED}
    assert set(SPEC_BY_ACTION) == set(actions)
