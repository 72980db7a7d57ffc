import pytest

from sidescroller.bullet import MUZZLE_OFFSET, Bullet
from sidescroller.utility import SCREEN_WIDTH


def test_right_bullet_spawns_ahead_of_shooter():
    bullet = Bullet(20, 10, 100, 50, 1)
    assert bullet.x - 100 == 80
    assert bullet.y == 50
    assert bullet.speed == 10


def test_left_bullet_spawns_behind_and_moves_left():
    bullet = Bullet(20, 10, 300, 50, 2)
    assert 300 - bullet.x == 80
    assert bullet.speed == -10


@pytest.mark.parametrize("direction", [0, 1, 3])
def test_non_left_directions_fly_right(direction):
    bullet = Bullet(20, 10, 100, 50, direction)
    assert bullet.speed > 0
    assert bullet.x - 100 == MUZZLE_OFFSET


def test_size_fixed_by_design():
    bullet = Bullet(20, 10, 100, 50, 1)
    assert (bullet.width, bullet.height) == (10, 5)
    assert bullet.rect == (bullet.x, bullet.y, 10, 5)


def test_damage_is_kept():
    assert Bullet(20, 10, 100, 50, 1).damage == 20


def test_update_moves_by_speed_times_tick():
    bullet = Bullet(20, 10, 100, 50, 2)
    before = bullet.x
    bullet.update(2.5)
    assert bullet.x - before == pytest.approx(bullet.speed * 2.5)
    assert bullet.expired is False


def test_expires_past_right_edge():
    bullet = Bullet(20, 10, SCREEN_WIDTH - 20, 50, 1)
    assert bullet.expired is False
    bullet.update(1.0)
    assert bullet.expired is True


def test_expires_past_left_edge():
    bullet = Bullet(20, 10, 50, 50, 2)
    bullet.update(1.0)
    assert bullet.expired is True


def test_stays_alive_mid_screen():
    bullet = Bullet(20, 10, 200, 50, 1)
    for _ in range(5):
        bullet.update(1.0)
    assert bullet.expired is False
    assert 0 <= bullet.x <= SCREEN_WIDTH - bullet.width