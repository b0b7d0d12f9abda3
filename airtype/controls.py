"""Keyboard bindings, key rebinding and the game-state changes they cause."""

from __future__ import annotations

from enum import Enum
from functools import partial
from typing import Callable, Iterable

KEY_SPACE = 32
KEY_ESCAPE = 256
KEY_RIGHT = 262
KEY_LEFT = 263
KEY_DOWN = 264
KEY_UP = 265
KEY_KP_EQUAL = 336


class GameState(Enum):
    """Screens the client can be showing."""

    MENU = "menu"
    GAME = "game"
    PAUSE = "pause"
    SETTINGS = "settings"
    GAMEOVER = "gameover"
    WIN = "win"
    QUIT = "quit"


class Controls:
    """Bound keys, their actions, and the client's game state."""

    def __init__(self) -> None:
        self.state = GameState.MENU
        self.previous_state = GameState.MENU
        self.client_actions: list[str] = []
        self.selected = "Controls"
        self.changing = ""
        self.display_fps = False
        self.bound_keys: dict[int, Callable[[], None]] = {
            KEY_UP: partial(self._add_action, "up"),
            KEY_DOWN: partial(self._add_action, "down"),
            KEY_LEFT: partial(self._add_action, "left"),
            KEY_RIGHT: partial(self._add_action, "right"),
            KEY_SPACE: partial(self._add_action, "shoot"),
            KEY_ESCAPE: self.escape,
        }
        self.keybinds: dict[str, tuple[int, str]] = {
            "Up": (KEY_UP, "Move up"),
            "Down": (KEY_DOWN, "Move down"),
            "Left": (KEY_LEFT, "Move left"),
            "Right": (KEY_RIGHT, "Move right"),
            "Shoot": (KEY_SPACE, "Shoot"),
            "Pause": (KEY_ESCAPE, "Pause/Unpause"),
        }

    def _add_action(self, action: str) -> None:
        self.client_actions.append(action)

    def set_state(self, state: GameState) -> None:
        """Switch screen, remembering the one left."""
        self.previous_state = self.state
        self.state = state

    def escape(self) -> None:
        """Pause, resume, or leave the settings screen."""
        if self.state is GameState.GAME:
            self.set_state(GameState.PAUSE)
        elif self.state is GameState.PAUSE:
            self.set_state(GameState.GAME)
        elif self.state is GameState.SETTINGS:
            self.set_state(self.previous_state)

    def start_rebinding(self, action: str) -> None:
        """Make the next pressed key the new key of an action."""
        if action not in self.keybinds:
            raise KeyError(f"unknown action: {action!r}")
        self.changing = action

    def press_key(self, key: int) -> None:
        """Handle one pressed key: run its handler, or finish a rebinding."""
        if not self.changing:
            handler = self.bound_keys.get(key)
            if handler is not None:
                handler()
            return
        action = self.changing
        old_key, description = self.keybinds[action]
        self.keybinds[action] = (key, description)
        handler = self.bound_keys.pop(old_key, None)
        if handler is None:
            self.bound_keys.pop(key, None)
        else:
            self.bound_keys[key] = handler
        self.changing = ""

    def handle_keys(self, keys: Iterable[int]) -> list[str]:
        """Handle the keys pressed this frame and return the actions they produced."""
        self.client_actions.clear()
        for key in sorted({k for k in keys if KEY_SPACE <= k <= KEY_KP_EQUAL}):
            self.press_key(key)
        return list(self.client_actions)