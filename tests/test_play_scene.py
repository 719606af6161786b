import math

import pygame
import pytest

from spacewar.components import Color
from spacewar.config import BulletSpecs, Config, PlayerSpecs
from spacewar.play_scene import PlayScene

RED = Color(255, 0, 0)
WHITE = Color(255, 255, 255)


def _config():
    return Config(
        player=PlayerSpecs(
            shape_radius=20,
            collision_radius=20,
            speed=5.0,
            fill_color=RED,
            outline_color=WHITE,
            outline_thickness=2,
            shape_vertices=8,
        ),
        bullet=BulletSpecs(
            shape_radius=5,
            collision_radius=5,
            speed=10.0,
            fill_color=WHITE,
            outline_color=RED,
            outline_thickness=1,
            shape_vertices=6,
            lifespan=90,
        ),
    )


@pytest.fixture
def scene():
    return PlayScene(pygame.Surface((800, 600)), _config())


def _key(kind, key):
    return pygame.event.Event(kind, key=key)


def test_player_starts_in_middle_of_window(scene):
    assert scene.player.transform.position == (400.0, 300.0)
    assert scene.player.special_shoot.bullet_amount == 40
    assert scene.player.special_shoot.cooldown == 600
    assert scene.player.shoot.cooldown == 10


def test_player_added_on_first_step(scene):
    assert scene.manager.get_entities() == []
    scene.step([])
    assert scene.manager.get_entities() == [scene.player]
    assert scene.frame_count == 1


def test_up_key_moves_player_up(scene):
    scene.step([_key(pygame.KEYDOWN, pygame.K_w)])
    x, y = scene.player.transform.position
    assert x == 400.0
    assert y == pytest.approx(300.0 - 5.0)


def test_down_wins_over_up_and_release_stops(scene):
    scene.handle_event(_key(pygame.KEYDOWN, pygame.K_w))
    scene.handle_event(_key(pygame.KEYDOWN, pygame.K_s))
    scene.movement()
    assert scene.player.transform.velocity == (0.0, 5.0)
    scene.handle_event(_key(pygame.KEYUP, pygame.K_s))
    scene.handle_event(_key(pygame.KEYUP, pygame.K_w))
    scene.movement()
    assert scene.player.transform.velocity == (0.0, 0.0)


def test_right_wins_over_left(scene):
    scene.handle_event(_key(pygame.KEYDOWN, pygame.K_a))
    scene.handle_event(_key(pygame.KEYDOWN, pygame.K_d))
    scene.movement()
    assert scene.player.transform.velocity == (5.0, 0.0)


def test_pause_stops_frames(scene):
    scene.step([_key(pygame.KEYDOWN, pygame.K_p)])
    assert scene.is_running is False
    assert scene.frame_count == 0
    scene.step([_key(pygame.KEYDOWN, pygame.K_p)])
    assert scene.is_running is True
    assert scene.frame_count == 1


def test_mouse_ignored_while_paused(scene):
    scene.handle_event(_key(pygame.KEYDOWN, pygame.K_p))
    scene.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 20)))
    assert scene.player.input.left_click is False
    assert scene.player.input.mouse_pos == (0.0, 0.0)


def test_left_click_records_mouse_position(scene):
    scene.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 20)))
    assert scene.player.input.left_click is True
    assert scene.player.input.mouse_pos == (10.0, 20.0)


def test_step_resets_clicks(scene):
    scene.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(0, 0)))
    assert scene.player.input.right_click is True
    scene.step([])
    assert scene.player.input.right_click is False


def test_escape_and_quit_close_the_window(scene):
    scene.handle_event(_key(pygame.KEYDOWN, pygame.K_ESCAPE))
    assert scene.is_open is False
    other = PlayScene(pygame.Surface((100, 100)), _config())
    other.handle_event(pygame.event.Event(pygame.QUIT))
    assert other.is_open is False


def test_spawn_bullet_from_player(scene):
    bullet = scene.spawn_bullet(0.0)
    assert bullet.tag == "Bullet"
    assert bullet.transform.position == scene.player.transform.position
    assert bullet.transform.velocity == pytest.approx((10.0, 0.0))
    assert bullet.lifespan.remaining == 90
    assert bullet.collision.radius == 5


def test_shoot_aims_at_mouse_and_cools_down(scene):
    scene.player.input.left_click = True
    scene.player.input.mouse_pos = (400.0, 500.0)
    scene.shoot()
    scene.manager.update()
    bullets = scene.manager.get_entities("Bullet")
    assert len(bullets) == 1
    assert bullets[0].transform.angle == pytest.approx(math.pi / 2)
    assert scene.player.shoot.remaining_cooldown == scene.player.shoot.cooldown - 1
    scene.shoot()
    scene.manager.update()
    assert len(scene.manager.get_entities("Bullet")) == 1


def test_special_shoot_fires_ring(scene):
    scene.player.input.right_click = True
    scene.special_shoot()
    scene.manager.update()
    assert len(scene.manager.get_entities("Bullet")) == 40
    assert scene.player.special_shoot.remaining_cooldown == 599


def test_no_shot_without_click(scene):
    scene.shoot()
    scene.special_shoot()
    scene.manager.update()
    assert scene.manager.get_entities("Bullet") == []


def test_render_draws_player_and_spins(scene):
    scene.step([])
    assert scene.player.transform.angle == 1.0
    assert tuple(scene.window.get_at((400, 300))) == (255, 0, 0, 255)
    assert tuple(scene.window.get_at((5, 5))) == (0, 0, 0, 255)


def test_no_next_scene(scene):
    assert scene.next_scene() == ""