"""Client-side store of the sprites the server describes, and their animation."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, field
from typing import Callable

from .components import Vector2
from .ecs import MAX_ENTITIES

ANIMATION_DELAY = 0.15
"""Seconds that must pass between two animation frames of a sprite."""

_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

# needle found in the texture path, scale, crop, whether a sound is played
_TEXTURES: tuple[tuple[str, tuple[float, float], tuple[float, float, float, float], bool], ...] = (
    ("player", (86, 48), (66, 0, 33, 16), False),
    ("pata-pata", (66, 72), (0, 0, 33, 36), False),
    ("win", (44, 45), (0, 0, 33, 34), False),
    ("bug", (66.5, 68), (33.25, 0, 33.25, 34), False),
    ("wick", (32, 28), (0, 0, 17, 15), False),
    ("geld", (86, 48), (0, 0, 33, 36), False),
    ("missile", (60, 12), (0, 0, 81, 18), True),
    ("killed", (66, 72), (0, 0, 33, 36), True),
)

# last frame index of sprites whose animation loops back to the first frame
_LOOPING_FRAMES = {"pata-pata": 7, "win": 2, "wick": 3, "missile": 1}
_KILLED_FRAMES = 5
_PLAYER_FRAMES = 4
_PLAYER_ROW_HEIGHT = 35


@dataclass
class Rect:
    """An axis-aligned rectangle."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass
class EntityData:
    """What the client knows of one sprite; a priority of -1 marks an empty slot."""

    name: str = ""
    position: Vector2 = field(default_factory=Vector2)
    scale: Vector2 = field(default_factory=Vector2)
    crop: Rect = field(default_factory=Rect)
    priority: float = -1.0


def _to_float(text: str) -> float:
    match = _FLOAT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


def _field(params: str, key: str) -> str | None:
    index = params.find(key)
    if index == -1:
        return None
    start = index + len(key)
    end = params.find(";", start)
    return params[start:] if end == -1 else params[start:end]


def parse_position(params: str) -> Vector2 | None:
    """The position in a "position:x,y;" field, or None if there is none."""
    values = _field(params, "position:")
    if values is None:
        return None
    x, sep, y = values.partition(",")
    if not sep:
        return None
    return Vector2(_to_float(x), _to_float(y))


def parse_texture(params: str) -> str | None:
    """The texture path in a "texture:path;" field, or None if there is none."""
    return _field(params, "texture:")


class SpriteStore:
    """Sprites indexed by entity id, created and moved from parameter strings."""

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        play_sound: Callable[[str], None] | None = None,
    ) -> None:
        self.entities: dict[int, EntityData] = {}
        self._animation_times: dict[int, float] = {}
        self._clock = clock
        self._play_sound = play_sound

    def __getitem__(self, entity_id: int) -> EntityData:
        return self.entities.get(entity_id, EntityData())

    def __len__(self) -> int:
        return sum(1 for entity in self.entities.values() if entity.priority != -1.0)

    @staticmethod
    def _in_range(entity_id: int) -> bool:
        return 0 <= entity_id < MAX_ENTITIES

    def number_of_players(self) -> int:
        """How many stored sprites are players."""
        return sum(1 for entity in self.entities.values() if entity.name == "player")

    def _apply_texture(self, entity: EntityData, texture: str) -> None:
        for needle, scale, crop, sound in _TEXTURES:
            if needle in texture:
                rect = Rect(*crop)
                if needle == "player":
                    rect.y = _PLAYER_ROW_HEIGHT * self.number_of_players()
                entity.scale = Vector2(*scale)
                entity.crop = rect
                entity.priority = 1.0
                entity.name = needle
                if sound and self._play_sound is not None:
                    self._play_sound(needle)
                return
        entity.scale = Vector2(1, 1)
        entity.crop = Rect(0, 0, 1, 1)
        entity.priority = 0.0

    def create_entity(self, entity_id: int, params: str) -> None:
        """Set up a sprite from its position and texture fields."""
        if not self._in_range(entity_id):
            return
        entity = self.entities.setdefault(entity_id, EntityData())
        if "position:" in params:
            position = parse_position(params)
            if position is not None:
                entity.position = position
        else:
            entity.position = Vector2(0, 0)
        texture = parse_texture(params)
        if texture is not None:
            self._apply_texture(entity, texture)
        self._animation_times[entity_id] = self._clock()

    def update_entity(self, entity_id: int, params: str) -> None:
        """Move a known sprite, or create it if its slot is empty."""
        if not self._in_range(entity_id):
            return
        entity = self.entities.get(entity_id)
        if entity is None or entity.priority == -1.0:
            self.create_entity(entity_id, params)
            return
        position = parse_position(params)
        if position is None:
            return
        old = entity.position
        entity.position = position
        if entity.name == "player" and (old.x != position.x or old.y != position.y):
            self.animate(entity_id, old, position)

    def destroy_entity(self, entity_id: int) -> None:
        """Empty a sprite's slot."""
        if not self._in_range(entity_id):
            return
        entity = self.entities.get(entity_id)
        if entity is None or entity.priority == -1.0:
            return
        del self.entities[entity_id]

    def animate(self, entity_id: int, old_pos: Vector2, new_pos: Vector2) -> bool:
        """Advance the sprite's animation if enough time has passed; True if it did."""
        if entity_id not in self._animation_times:
            return False
        now = self._clock()
        if now - self._animation_times[entity_id] > ANIMATION_DELAY:
            self._animation_times[entity_id] = now
            self.advance_animation(entity_id, old_pos, new_pos)
            return True
        return False

    def advance_animation(self, entity_id: int, old_pos: Vector2, new_pos: Vector2) -> None:
        """Move the sprite's crop to its next frame."""
        entity = self.entities.get(entity_id)
        if entity is None:
            return
        crop = entity.crop
        if entity.name == "player":
            if old_pos.y > new_pos.y:
                if crop.x != crop.width * _PLAYER_FRAMES:
                    crop.x += crop.width
            elif old_pos.y < new_pos.y:
                if crop.x != 0:
                    crop.x -= crop.width
        elif entity.name in _LOOPING_FRAMES:
            if crop.x == crop.width * _LOOPING_FRAMES[entity.name]:
                crop.x = 0
            else:
                crop.x += crop.width
        elif entity.name == "killed":
            if crop.x == crop.width * _KILLED_FRAMES:
                self.destroy_entity(entity_id)
            else:
                crop.x += crop.width