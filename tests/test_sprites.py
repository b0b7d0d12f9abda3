import pytest

from airtype.components import Vector2
from airtype.ecs import MAX_ENTITIES
from airtype.sprites import (
    EntityData,
    Rect,
    SpriteStore,
    parse_position,
    parse_texture,
)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sounds():
    return []


@pytest.fixture
def store(clock, sounds):
    return SpriteStore(clock=clock, play_sound=sounds.append)


def test_parse_position_and_texture():
    params = "position:1.5,2;texture:assets/player.png;"
    assert parse_position(params) == Vector2(1.5, 2.0)
    assert parse_texture(params) == "assets/player.png"


def test_parse_missing_fields():
    assert parse_position("texture:a.png") is None
    assert parse_texture("position:1,2") is None
    assert parse_position("position:12;") is None


def test_parse_position_reads_number_prefix():
    assert parse_position("position: 3abc,4.5xyz") == Vector2(3.0, 4.5)


def test_parse_position_rejects_garbage():
    with pytest.raises(ValueError):
        parse_position("position:abc,1")


def test_create_player(store):
    store.create_entity(3, "position:10,20;texture:player.png;")
    entity = store[3]
    assert entity.name == "player"
    assert entity.position == Vector2(10, 20)
    assert entity.scale == Vector2(86, 48)
    assert entity.crop == Rect(66, 0, 33, 16)
    assert entity.priority == 1.0


def test_second_player_uses_next_row(store):
    store.create_entity(1, "texture:player.png")
    store.create_entity(2, "texture:player.png")
    assert store[2].crop.y == 35
    assert store.number_of_players() == 2


def test_unknown_texture(store):
    store.create_entity(4, "position:1,1;texture:rock.png")
    entity = store[4]
    assert entity.scale == Vector2(1, 1)
    assert entity.crop == Rect(0, 0, 1, 1)
    assert entity.priority == 0.0
    assert entity.name == ""


def test_no_position_means_origin(store):
    store.create_entity(5, "texture:bug.png")
    assert store[5].position == Vector2(0, 0)
    assert store[5].crop == Rect(33.25, 0, 33.25, 34)


def test_out_of_range_ids_ignored(store):
    store.create_entity(-1, "texture:player.png")
    store.create_entity(MAX_ENTITIES, "texture:player.png")
    assert store.entities == {}


def test_missile_and_killed_play_sounds(store, sounds):
    store.create_entity(1, "texture:missile.png")
    store.create_entity(2, "texture:killed.png")
    store.create_entity(3, "texture:wick.png")
    assert sounds == ["missile", "killed"]
    assert store[1].name == "missile"
    assert store[1].crop == Rect(0, 0, 81, 18)
    assert store[2].name == "killed"
    assert store[3].name == "wick"


def test_update_creates_unknown_entity(store):
    store.update_entity(7, "position:5,6;texture:geld.png")
    assert store[7].name == "geld"
    assert store[7].position == Vector2(5, 6)


def test_update_moves_entity(store):
    store.create_entity(7, "position:5,6;texture:win.png")
    store.update_entity(7, "position:8,9")
    assert store[7].position == Vector2(8, 9)
    assert store[7].name == "win"


def test_destroy_empties_slot(store):
    store.create_entity(1, "texture:player.png")
    store.destroy_entity(1)
    assert store[1] == EntityData()
    assert store.number_of_players() == 0
    assert len(store) == 0


def test_player_animates_when_moving_up(store, clock):
    store.create_entity(1, "position:0,50;texture:player.png")
    start = store[1].crop.x
    clock.now = 1.0
    store.update_entity(1, "position:0,40")
    assert store[1].crop.x == start + store[1].crop.width


def test_player_animation_waits_for_delay(store, clock):
    store.create_entity(1, "position:0,50;texture:player.png")
    start = store[1].crop.x
    clock.now = 0.1
    store.update_entity(1, "position:0,40")
    assert store[1].crop.x == start
    assert store[1].position == Vector2(0, 40)


def test_player_crop_is_clamped(store):
    store.create_entity(1, "texture:player.png")
    width = store[1].crop.width
    for _ in range(5):
        store.advance_animation(1, Vector2(0, 10), Vector2(0, 5))
    assert store[1].crop.x == width * 4
    for _ in range(6):
        store.advance_animation(1, Vector2(0, 5), Vector2(0, 10))
    assert store[1].crop.x == 0


def test_pata_pata_cycles(store):
    store.create_entity(1, "texture:pata-pata.png")
    crop = store[1].crop
    store.advance_animation(1, Vector2(), Vector2())
    assert crop.x == crop.width
    for _ in range(7):
        store.advance_animation(1, Vector2(), Vector2())
    assert crop.x == 0


def test_missile_alternates(store):
    store.create_entity(1, "texture:missile.png")
    crop = store[1].crop
    store.advance_animation(1, Vector2(), Vector2())
    assert crop.x == crop.width
    store.advance_animation(1, Vector2(), Vector2())
    assert crop.x == 0


def test_killed_destroys_itself(store):
    store.create_entity(1, "texture:killed.png")
    crop = store[1].crop
    for _ in range(5):
        store.advance_animation(1, Vector2(), Vector2())
    assert crop.x == crop.width * 5
    assert store[1].name == "killed"
    store.advance_animation(1, Vector2(), Vector2())
    assert store[1].priority == -1.0


def test_animate_respects_timer(store, clock):
    store.create_entity(1, "texture:wick.png")
    assert store.animate(1, Vector2(), Vector2()) is False
    clock.now = 0.2
    assert store.animate(1, Vector2(), Vector2()) is True
    assert store.animate(1, Vector2(), Vector2()) is False
    assert store.animate(99, Vector2(), Vector2()) is False