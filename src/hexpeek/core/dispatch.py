from __future__ import annotations

from collections.abc import Mapping

from hexpeek.core.navigation import Command, NavigationState

# Key identifiers use Textual's key names
KEYMAP: Mapping[str, Command] = {
    "left": Command.MOVE_LEFT,
    "right": Command.MOVE_RIGHT,
    "up": Command.MOVE_UP,
    "down": Command.MOVE_DOWN,
    "pageup": Command.PAGE_UP,
    "pagedown": Command.PAGE_DOWN,
    "home": Command.HOME,
    "end": Command.END,
    "g": Command.HOME,
    "G": Command.END,
    "e": Command.TOGGLE_ENDIAN,
    "l": Command.SET_LITTLE,
    "b": Command.SET_BIG,
    "q": Command.QUIT,
    "escape": Command.QUIT,
}

# Footer labels for the keys worth advertising
KEY_LABELS: Mapping[str, str] = {
    "e": "Endian",
    "l": "Little",
    "b": "Big",
    "g": "Start",
    "G": "End",
    "q": "Quit",
}


def resolve_key(key: str, keymap: Mapping[str, Command] = KEYMAP) -> Command | None:
    """Map a key identifier to a command, or None for unbound keys."""
    return keymap.get(key)


def dispatch(state: NavigationState, command: Command) -> bool:
    return state.apply(command)
