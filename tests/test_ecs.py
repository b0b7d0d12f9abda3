import pytest

from airtype.ecs import (
    MAX_COMPONENTS,
    ComponentArray,
    ComponentManager,
    ECSError,
)


class Health:
    def __init__(self, value):
        self.value = value


class Tag:
    def __init__(self, name):
        self.name = name


def test_insert_and_get():
    array = ComponentArray()
    array.insert(3, "a")
    array.insert(7, "b")
    assert array.get(3) == "a"
    assert array.get(7) == "b"
    assert len(array) == 2


def test_insert_twice_raises():
    array = ComponentArray()
    array.insert(1, "a")
    with pytest.raises(ECSError):
        array.insert(1, "b")


def test_remove_missing_raises():
    array = ComponentArray()
    with pytest.raises(ECSError):
        array.remove(5)


def test_get_missing_raises():
    array = ComponentArray()
    with pytest.raises(ECSError):
        array.get(5)


def test_remove_keeps_other_entities_reachable():
    array = ComponentArray()
    for entity, value in [(1, "one"), (2, "two"), (3, "three")]:
        array.insert(entity, value)
    array.remove(1)
    assert 1 not in array
    assert array.get(2) == "two"
    assert array.get(3) == "three"
    assert len(array) == 2
    array.remove(3)
    assert array.get(2) == "two"
    assert len(array) == 1


def test_remove_then_reinsert():
    array = ComponentArray()
    array.insert(1, "x")
    array.remove(1)
    array.insert(1, "y")
    assert array.get(1) == "y"


def test_entity_destroyed_ignores_absent_entity():
    array = ComponentArray()
    array.insert(1, "x")
    array.entity_destroyed(9)
    assert len(array) == 1
    array.entity_destroyed(1)
    assert len(array) == 0


def test_register_gives_sequential_ids():
    manager = ComponentManager()
    assert manager.register_component(Health) == 0
    assert manager.register_component(Tag) == 1
    assert manager.get_component_type(Health) == 0
    assert manager.get_component_type(Tag) == 1


def test_register_twice_raises():
    manager = ComponentManager()
    manager.register_component(Health)
    with pytest.raises(ECSError):
        manager.register_component(Health)


def test_unregistered_type_raises():
    manager = ComponentManager()
    with pytest.raises(ECSError):
        manager.get_component_type(Health)
    with pytest.raises(ECSError):
        manager.add_component(1, Health(3))
    with pytest.raises(ECSError):
        manager.get_component(1, Health)


def test_add_get_remove_component():
    manager = ComponentManager()
    manager.register_component(Health)
    component = Health(10)
    manager.add_component(4, component)
    assert manager.get_component(4, Health) is component
    manager.get_component(4, Health).value = 5
    assert manager.get_component(4, Health).value == 5
    manager.remove_component(4, Health)
    with pytest.raises(ECSError):
        manager.get_component(4, Health)


def test_entity_destroyed_clears_all_arrays():
    manager = ComponentManager()
    manager.register_component(Health)
    manager.register_component(Tag)
    manager.add_component(2, Health(1))
    manager.add_component(2, Tag("enemy"))
    manager.add_component(3, Tag("player"))
    manager.entity_destroyed(2)
    with pytest.raises(ECSError):
        manager.get_component(2, Health)
    with pytest.raises(ECSError):
        manager.get_component(2, Tag)
    assert manager.get_component(3, Tag).name == "player"


def test_too_many_component_types():
    manager = ComponentManager()
    kinds = [type(f"Kind{n}", (), {}) for n in range(MAX_COMPONENTS + 1)]
    for kind in kinds[:MAX_COMPONENTS]:
        manager.register_component(kind)
    with pytest.raises(ECSError):
        manager.register_component(kinds[-1])