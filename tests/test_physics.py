from ecsengine.components import ComponentManager
from ecsengine.data import ColliderComponent, Position, Rect
from ecsengine.physics import CollisionSystem, TriggerSystem


def _body(components, entity, x, y, w=10.0, h=10.0, trigger=False):
    collider = ColliderComponent(bounds=Rect(0.0, 0.0, w, h), is_trigger=trigger)
    pos = Position(x, y)
    components.add_component(entity, collider)
    components.add_component(entity, pos)
    return collider, pos


def _world(collider, pos):
    return collider.bounds.translated(pos.x, pos.y)


def test_collision_pushes_along_x_and_separates():
    components = ComponentManager()
    a_col, a_pos = _body(components, 0, 0.0, 0.0)
    b_col, b_pos = _body(components, 1, 8.0, 0.0)
    system = CollisionSystem()
    system.entities.update({0, 1})
    system.update(components, 0.016)
    assert a_pos.x < 0.0
    assert a_pos.y == 0.0
    assert b_pos.x == 8.0
    assert not _world(a_col, a_pos).intersects(_world(b_col, b_pos))


def test_collision_pushes_along_y_when_smaller():
    components = ComponentManager()
    a_col, a_pos = _body(components, 0, 0.0, 0.0)
    b_col, b_pos = _body(components, 1, 0.0, 8.0)
    system = CollisionSystem()
    system.entities.update({0, 1})
    system.update(components, 0.016)
    assert a_pos.y < 0.0
    assert a_pos.x == 0.0
    assert not _world(a_col, a_pos).intersects(_world(b_col, b_pos))


def test_collision_ignores_triggers():
    components = ComponentManager()
    _, a_pos = _body(components, 0, 0.0, 0.0)
    _, b_pos = _body(components, 1, 5.0, 0.0, trigger=True)
    system = CollisionSystem()
    system.entities.update({0, 1})
    system.update(components, 0.016)
    assert (a_pos.x, a_pos.y) == (0.0, 0.0)
    assert (b_pos.x, b_pos.y) == (5.0, 0.0)


def test_collision_skips_entities_without_position():
    components = ComponentManager()
    _, a_pos = _body(components, 0, 0.0, 0.0)
    components.add_component(1, ColliderComponent(bounds=Rect(0.0, 0.0, 10.0, 10.0)))
    system = CollisionSystem()
    system.entities.update({0, 1})
    system.update(components, 0.016)
    assert (a_pos.x, a_pos.y) == (0.0, 0.0)


def test_separated_bodies_do_not_move():
    components = ComponentManager()
    _, a_pos = _body(components, 0, 0.0, 0.0)
    _, b_pos = _body(components, 1, 50.0, 50.0)
    system = CollisionSystem()
    system.entities.update({0, 1})
    system.update(components, 0.016)
    assert (a_pos.x, a_pos.y, b_pos.x, b_pos.y) == (0.0, 0.0, 50.0, 50.0)


def test_trigger_deactivates_on_contact():
    components = ComponentManager()
    trigger, _ = _body(components, 0, 0.0, 0.0, trigger=True)
    solid, _ = _body(components, 1, 5.0, 5.0)
    system = TriggerSystem()
    system.entities.update({0, 1})
    system.update(components, 0.016)
    assert trigger.active is False
    assert solid.active is True


def test_trigger_stays_active_without_contact():
    components = ComponentManager()
    trigger, _ = _body(components, 0, 0.0, 0.0, trigger=True)
    _body(components, 1, 100.0, 100.0)
    system = TriggerSystem()
    system.entities.update({0, 1})
    system.update(components, 0.016)
    assert trigger.active is True


def test_two_triggers_do_not_fire_each_other():
    components = ComponentManager()
    first, _ = _body(components, 0, 0.0, 0.0, trigger=True)
    second, _ = _body(components, 1, 5.0, 5.0, trigger=True)
    system = TriggerSystem()
    system.entities.update({0, 1})
    system.update(components, 0.016)
    assert first.active is True
    assert second.active is True