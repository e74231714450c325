from __future__ import annotations

from hexpeek.core.dispatch import KEYMAP, dispatch, resolve_key
from hexpeek.core.navigation import Command, NavigationState


def test_resolve_known_keys() -> None:
    assert resolve_key("left") is Command.MOVE_LEFT
    assert resolve_key("pagedown") is Command.PAGE_DOWN
    assert resolve_key("e") is Command.TOGGLE_ENDIAN
    assert resolve_key("l") is Command.SET_LITTLE
    assert resolve_key("b") is Command.SET_BIG
    assert resolve_key("escape") is Command.QUIT
    assert resolve_key("G") is Command.END


def test_unknown_key_is_none() -> None:
    assert resolve_key("x") is None
    assert resolve_key("ctrl+z") is None


def test_custom_keymap() -> None:
    assert resolve_key("space", {"space": Command.PAGE_DOWN}) is Command.PAGE_DOWN
    assert resolve_key("left", {}) is None


def test_every_command_reachable() -> None:
    assert set(KEYMAP.values()) == set(Command)


def test_dispatch_mutates_state() -> None:
    st = NavigationState(size=32, rows=2)
    assert dispatch(st, Command.MOVE_DOWN)
    assert st.cursor == 16
    assert not dispatch(st, Command.QUIT)
