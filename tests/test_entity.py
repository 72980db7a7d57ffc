import pytest

from sidescroller.entity import Entity, EntityState, Sprite, TextureCoords


@pytest.fixture
def walker():
    entity = Entity("Walker", 100, 2)
    entity.textures = [
        TextureCoords("idle", [45, 62, 47, 66]),
        TextureCoords("walk", list(range(1, 13))),
    ]
    return entity


def test_starts_walking(walker):
    assert walker.speed == walker.walk_speed == 2
    assert walker.is_sprint() is False


def test_sprint_is_three_times_walk(walker):
    walker.set_speed(2)
    assert walker.speed == walker.sprint_speed
    assert walker.sprint_speed == 3 * walker.walk_speed
    assert walker.is_sprint() is True


def test_back_to_walk(walker):
    walker.set_speed(2)
    walker.set_speed(1)
    assert walker.speed == walker.walk_speed
    assert walker.is_sprint() is False


def test_unknown_speed_mode_ignored(walker):
    walker.set_speed(2)
    walker.set_speed(7)
    assert walker.speed == walker.sprint_speed


def test_take_damage_reports_remaining(walker):
    assert walker.take_damage(30) == 70
    assert walker.health == 70


def test_take_damage_floors_at_zero(walker):
    assert walker.take_damage(150) == 0
    assert walker.health == -50


def test_walk_frames_cycle(walker):
    frames, index = walker.next_rect(EntityState.RWALK, 0)
    assert frames[:4] == [1, 2, 3, 4]
    assert index == 1
    frames, index = walker.next_rect(EntityState.LWALK, index)
    assert frames == [5, 6, 7, 8, 9, 10, 11, 12]
    assert index == 2
    frames, index = walker.next_rect(EntityState.RWALK, index)
    assert frames == [9, 10, 11, 12]
    assert index == 0


def test_single_frame_wraps_immediately(walker):
    frames, index = walker.next_rect(EntityState.IDLE, 0)
    assert frames == [45, 62, 47, 66]
    assert index == 0


@pytest.mark.parametrize("state", [EntityState.HIT, EntityState.DEAD, EntityState.RSPRINT])
def test_missing_animation_keeps_index(walker, state):
    assert walker.next_rect(state, 3) == ([], 3)


def test_update_and_animation_leave_entity_unchanged(walker):
    walker.update(4.0)
    walker.animation()
    assert walker.state is EntityState.IDLE
    assert walker.sprite == Sprite()


def test_sprite_move_accumulates():
    sprite = Sprite(x=500, y=300)
    sprite.move(10, -5)
    sprite.move(-10, 5)
    assert sprite.position == (500, 300)