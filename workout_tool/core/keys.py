"""Keyboard mapping from decoded key codes to dashboard actions."""

from __future__ import annotations

from typing import Literal

Action = Literal[
    "exit",
    "split_up",
    "split_down",
    "increment",
    "decrement",
    "toggle_timer",
]

KEY_BINDINGS: dict[str, Action] = {
    "esc": "exit",
    "q": "exit",
    "up": "split_up",
    "down": "split_down",
    "w": "increment",
    "s": "decrement",
    " ": "toggle_timer",
}

KEY_HELP = "Up/Down split | w/s set | Space timer | Esc quit"


def action_for_key(key: str) -> Action | None:
    return KEY_BINDINGS.get(key)
