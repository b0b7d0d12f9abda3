"""Wire protocol shared by the game server and its clients."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar


class RequestType(IntEnum):
    """Kinds of request exchanged between server and clients."""

    CLIENT_CONNECTION = 0
    CLIENT_DISCONNECTION = 1
    SERVER_PING = 2
    SERVER_ACCEPTANCE = 3
    SERVER_DENIAL = 4
    ACKNOWLEDGE_REQUEST = 5
    SET_SPRITE_POSITION = 6
    NOTIFY_KILLED_SPRITE = 7
    SET_INPUT = 8
    LAUNCH_GAME = 9


class SpriteType(IntEnum):
    """Kinds of sprite the server can describe."""

    PLAYER = 0
    PATA_PATA = 1
    WIN = 2
    WICK = 3
    GELD = 4
    BUG = 5
    MISSILE = 6
    DEFAULT = 7


class InputAction(IntEnum):
    """Player actions sent from a client to the server."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    SHOOT = 4


_SPRITE_NAMES = {
    "pata-pata": SpriteType.PATA_PATA,
    "win": SpriteType.WIN,
    "wick": SpriteType.WICK,
    "geld": SpriteType.GELD,
    "bug": SpriteType.BUG,
    "player": SpriteType.PLAYER,
    "missile": SpriteType.MISSILE,
}

_ACTION_NAMES = {
    "up": InputAction.UP,
    "down": InputAction.DOWN,
    "left": InputAction.LEFT,
    "right": InputAction.RIGHT,
    "shoot": InputAction.SHOOT,
}


def _little_endian(fmt: str) -> str:
    return fmt if fmt[:1] in "<>!=@" else "<" + fmt


@dataclass
class Request:
    """A request: a typed header, a declared body size and a raw body."""

    id: RequestType = RequestType.CLIENT_CONNECTION
    body: bytearray = field(default_factory=bytearray)
    size: int = 0

    def __post_init__(self) -> None:
        self.body = bytearray(self.body)

    def push(self, fmt: str, *args: Any) -> Request:
        """Append packed values to the end of the body."""
        self.body += struct.pack(_little_endian(fmt), *args)
        self.size = len(self.body)
        return self

    def pop(self, fmt: str) -> tuple:
        """Remove packed values from the end of the body and return them."""
        layout = struct.Struct(_little_endian(fmt))
        if layout.size > len(self.body):
            raise ValueError(
                f"body holds {len(self.body)} bytes, {layout.size} needed"
            )
        start = len(self.body) - layout.size
        values = layout.unpack(bytes(self.body[start:]))
        del self.body[start:]
        self.size = len(self.body)
        return values

    def __str__(self) -> str:
        return f"Request ID: {int(self.id)}, Size: {self.size}"


class _Packed:
    _layout: ClassVar[struct.Struct]

    @classmethod
    def _unpack(cls, data: bytes | bytearray) -> tuple:
        if len(data) < cls._layout.size:
            raise ValueError(
                f"{cls.__name__} needs {cls._layout.size} bytes, got {len(data)}"
            )
        return cls._layout.unpack_from(bytes(data))


@dataclass(frozen=True)
class SpritePositions(_Packed):
    """Type, id and position of a sprite."""

    entity_type: SpriteType
    sprite_id: int
    x: float
    y: float

    _layout: ClassVar[struct.Struct] = struct.Struct("<Iiff")

    def to_bytes(self) -> bytes:
        return self._layout.pack(int(self.entity_type), self.sprite_id, self.x, self.y)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> SpritePositions:
        kind, sprite_id, x, y = cls._unpack(data)
        return cls(SpriteType(kind), sprite_id, x, y)


@dataclass(frozen=True)
class KilledSprite(_Packed):
    """Id and type of a sprite that was destroyed."""

    sprite_id: int
    entity_type: SpriteType

    _layout: ClassVar[struct.Struct] = struct.Struct("<iI")

    def to_bytes(self) -> bytes:
        return self._layout.pack(self.sprite_id, int(self.entity_type))

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> KilledSprite:
        sprite_id, kind = cls._unpack(data)
        return cls(sprite_id, SpriteType(kind))


@dataclass(frozen=True)
class Input(_Packed):
    """An action taken by the player of a client."""

    client_id: int
    action: InputAction

    _layout: ClassVar[struct.Struct] = struct.Struct("<iI")

    def to_bytes(self) -> bytes:
        return self._layout.pack(self.client_id, int(self.action))

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> Input:
        client_id, action = cls._unpack(data)
        return cls(client_id, InputAction(action))


@dataclass
class OwnedRequest:
    """A request together with the connection it came from."""

    request: Request
    remote: Any = None

    def __str__(self) -> str:
        return str(self.request)


def sprite_type_for(name: str) -> SpriteType:
    """Sprite type for an entity name; unknown names map to DEFAULT."""
    return _SPRITE_NAMES.get(name, SpriteType.DEFAULT)


def _with_body(kind: RequestType, body: bytes) -> Request:
    return Request(kind, bytearray(body), len(body))


def create_positions_request(entity_name: str, sprite_id: int, x: float, y: float) -> Request:
    """Build a request carrying a sprite's position."""
    payload = SpritePositions(sprite_type_for(entity_name), sprite_id, x, y)
    return _with_body(RequestType.SET_SPRITE_POSITION, payload.to_bytes())


def create_killed_sprite(sprite_id: int, entity_type: str) -> Request:
    """Build a request notifying that a sprite was killed."""
    payload = KilledSprite(sprite_id, sprite_type_for(entity_type))
    return _with_body(RequestType.NOTIFY_KILLED_SPRITE, payload.to_bytes())


def create_input_request(client_id: int, action: str) -> Request:
    """Build a request carrying a player's action."""
    try:
        kind = _ACTION_NAMES[action]
    except KeyError:
        raise ValueError(f"unknown input action: {action!r}") from None
    return _with_body(RequestType.SET_INPUT, Input(client_id, kind).to_bytes())


def create_connection_accepted(sprite_id: int) -> Request:
    """Build the acceptance request carrying the player's sprite id."""
    return _with_body(RequestType.SERVER_ACCEPTANCE, struct.pack("<i", sprite_id))


def create_launch_game_request() -> Request:
    """Build an empty request that launches the game."""
    return Request(RequestType.LAUNCH_GAME)


def create_client_disconnection() -> Request:
    """Build an empty request announcing a disconnection."""
    return Request(RequestType.CLIENT_DISCONNECTION)


def parse_positions(request: Request) -> SpritePositions:
    return SpritePositions.from_bytes(request.body)


def parse_killed(request: Request) -> KilledSprite:
    return KilledSprite.from_bytes(request.body)


def parse_input(request: Request) -> Input:
    return Input.from_bytes(request.body)


def parse_connection_accepted(request: Request) -> int:
    if len(request.body) < 4:
        raise ValueError("connection acceptance needs 4 bytes")
    return struct.unpack_from("<i", bytes(request.body))[0]