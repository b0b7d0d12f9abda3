"""Component data attached to game entities, and enemy movement strategies."""

from __future__ import annotations

import math
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable


@dataclass
class Vector2:
    """A point or extent in two dimensions."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Images:
    """Texture used to draw an entity."""

    texture: str = ""


class Keybind:
    """Keys bound to actions, each with a description."""

    def __init__(self, key: int | None = None, action: str | None = None, desc: str = "") -> None:
        self.keybinds: dict[str, tuple[int, str]] = {}
        if key is not None and action is not None:
            self.add_keybind(key, action, desc)

    def add_keybind(self, key: int, action: str, desc: str) -> None:
        """Bind a key to an action, replacing any earlier binding."""
        self.keybinds[action] = (key, desc)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Keybind):
            return NotImplemented
        return self.keybinds == other.keybinds

    def __repr__(self) -> str:
        return f"Keybind({self.keybinds!r})"


@dataclass
class Life:
    health: float = 0.0
    damage_taken: float = 0.0


@dataclass
class Power:
    damage: float = 0.0
    amplifier: float = 0.0


@dataclass
class Spacial:
    position: Vector2 = field(default_factory=Vector2)
    size: Vector2 = field(default_factory=Vector2)


@dataclass
class Speed:
    velocity: float = 0.0
    acceleration: float = 0.0
    vertically: bool = False


@dataclass
class Action:
    type: str = ""


@dataclass
class EntityTypes:
    type: str = ""
    id: int = 0


@dataclass
class Cooldown:
    """Per-kind cooldown times and the moment each was last activated."""

    cooldowns: dict[str, float] = field(default_factory=dict)
    activation: dict[str, tuple[float, float]] = field(default_factory=dict)
    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def add_cooldown(self, kind: str, cooldown_time: float, activation_times: float) -> None:
        """Set a cooldown and restart its timer."""
        self.cooldowns[kind] = cooldown_time
        self.activation[kind] = (activation_times, self.clock())

    def remaining(self, kind: str) -> float:
        """Seconds left before the cooldown ends; 0.0 for unknown kinds."""
        if kind not in self.activation:
            return 0.0
        elapsed = self.clock() - self.activation[kind][1]
        return self.cooldowns[kind] - elapsed


class PathingStrategy(ABC):
    """How an enemy's position changes each step."""

    @abstractmethod
    def update_position(self, position: Vector2, velocity: float) -> None:
        """Move the position in place."""


class LinearPathing(PathingStrategy):
    """Moves left at constant speed."""

    def update_position(self, position: Vector2, velocity: float) -> None:
        position.x -= velocity


class CircularPathing(PathingStrategy):
    """Moves along a wave whose radius is fixed."""

    radius = 100.0

    def update_position(self, position: Vector2, velocity: float) -> None:
        position.x += self.radius * math.cos(position.x * 0.1) * velocity
        position.y += self.radius * math.sin(position.y * 0.1) * velocity


@dataclass
class Pathing:
    """Holds the movement strategy of an enemy."""

    pathing: PathingStrategy | None = None