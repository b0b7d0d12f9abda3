# airtype

Building blocks for a small networked side-scrolling shooter, written as a
pure Python library with no dependencies.

## Modules

### `airtype.protocol`

The messages that pass between the game server and its clients.

- Enums `RequestType`, `SpriteType` and `InputAction`.
- `Request`: has an `id`, a `size` and a binary `body`. `push(fmt, *args)`
  packs values with `struct` and adds them to the end of the body.
  `pop(fmt)` takes them back off the end. Formats with no byte-order prefix
  are little-endian. `size` follows the length of the body.
  `str(request)` gives `"Request ID: <id>, Size: <size>"`.
- Fixed-layout payloads `SpritePositions`, `KilledSprite` and `Input`, each
  with `to_bytes()` and `from_bytes(data)`. `from_bytes` raises
  `ValueError` when the data is too short.
- `OwnedRequest` pairs a request with the connection it came from.
- `sprite_type_for(name)` maps an entity name such as `"pata-pata"` or
  `"player"` to its `SpriteType`. Names it does not know give
  `SpriteType.DEFAULT`.
- Builders: `create_positions_request`, `create_killed_sprite`,
  `create_input_request`, `create_connection_accepted`,
  `create_launch_game_request`, `create_client_disconnection`.
  `create_input_request` raises `ValueError` when the action is unknown.
- Readers: `parse_positions`, `parse_killed`, `parse_input`,
  `parse_connection_accepted`.

### `airtype.safequeue`

`ThreadSafeQueue` is a deque guarded by a lock. It offers:

- `push_front` and `push_back`
- `pop_front` and `pop_back`
- `front` and `back`
- `is_empty`, `clear` and `len()`
- `wait(timeout=None)`, which blocks until an item is present and returns
  `False` if the timeout runs out first.

Reading from or popping an empty queue raises `IndexError`.

### `airtype.ecs`

Component storage for an entity-component system. The constants are
`MAX_ENTITIES`, `MAX_COMPONENTS` and `INVALID_ENTITY`.

`ComponentArray` keeps the components of one type packed together. Its
methods are `insert`, `remove`, `get` and `entity_destroyed`.

`ComponentManager` registers component classes with
`register_component`, which returns the type's numeric id. It also provides:

- `get_component_type`
- `add_component`, which stores a component under its own class
- `remove_component`
- `get_component`
- `entity_destroyed`

Misuse raises `ECSError`. Examples of misuse are registering a class twice,
using a class that was never registered, or attaching a second component of
the same type to an entity.

### `airtype.components`

The component data types:

- `Vector2`, `Images`, `Life`, `Power`, `Spacial`, `Speed`, `Action`,
  `EntityTypes`
- `Keybind`, with `add_keybind`
- `Cooldown`, with `add_cooldown` and `remaining`. It takes a `clock`
  callable so tests can control time.
- `Pathing`

The enemy movement strategies all implement
`update_position(position, velocity)` and change the position in place:

- `PathingStrategy` is the abstract base.
- `LinearPathing` moves left at constant speed.
- `CircularPathing` follows a wave with a fixed radius.

### `airtype.sprites`

`SpriteStore` is the client's record of the sprites the server announced.
Each entry is an `EntityData`, which holds a name, a position, a scale, a
crop `Rect` and a priority.

- `create_entity(entity_id, params)` reads a parameter string such as
  `"position:100,200;texture:player.png;"`. It picks the scale and crop
  from the first known name found in the texture path.
- `update_entity(entity_id, params)` moves a known sprite, or creates it
  if the slot is empty.
- `destroy_entity(entity_id)` empties a slot.
- `animate(entity_id, old_pos, new_pos)` moves to the next frame only when
  more than `ANIMATION_DELAY` seconds have passed.
- `advance_animation` moves to the next frame without waiting. A `"killed"`
  sprite removes itself after its last frame.
- `number_of_players()` counts the stored sprites named `"player"`.
- Ids outside `0 <= id < MAX_ENTITIES` are ignored.

The store takes a `clock` and an optional `play_sound` callback. The
callback is called with `"missile"` or `"killed"` when such a sprite is
created.

The helpers `parse_position(params)` and `parse_texture(params)` pull single
fields out of a parameter string.

### `airtype.controls`

`Controls` holds the key handlers (`bound_keys`), the named bindings
(`keybinds`) and the current `GameState`.

- `handle_keys(keys)` takes the keys pressed in one frame and returns the
  actions they produced: `"up"`, `"down"`, `"left"`, `"right"` and
  `"shoot"`.
- `escape()` toggles between game and pause. From the settings screen it
  returns to the previous screen.
- `start_rebinding(action)` makes the next `press_key(key)` become the new
  key for that action.
- `set_state(state)` switches screens and remembers the one left.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from airtype.protocol import create_input_request, parse_input, InputAction

request = create_input_request(2, "shoot")
payload = parse_input(request)
assert payload.client_id == 2
assert payload.action is InputAction.SHOOT
```

```python
from airtype.sprites import SpriteStore

store = SpriteStore()
store.create_entity(7, "position:100,200;texture:player.png;")
store.update_entity(7, "position:100,180;")
assert store[7].name == "player"
```

```python
from airtype.controls import Controls, GameState, KEY_UP, KEY_ESCAPE

controls = Controls()
assert controls.handle_keys([KEY_UP]) == ["up"]
controls.set_state(GameState.GAME)
controls.handle_keys([KEY_ESCAPE])
assert controls.state is GameState.PAUSE
```

## What this package does not do

- It opens no sockets and runs no server or client. It builds and reads
  requests, but sending them is left to the caller.
- It opens no window and draws nothing. There are no menus, no settings
  screen and no sound playback beyond the `play_sound` callback.
- It has no entity manager or coordinator.
- It has no game systems: no movement, collision, damage or enemy waves.
  It provides only the component storage and component types those would
  use.
- It installs no commands.