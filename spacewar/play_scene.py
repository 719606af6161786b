"""The single-player scene: a ship that moves with WASD and fires bullets."""

from __future__ import annotations

import math
from typing import Any, Iterable

import pygame

from .components import Collision, CircleShape, Input, LifeSpan, Shoot, SpecialShoot, Transform
from .config import Config
from .entity import Entity
from .entity_manager import EntityManager
from .scene import Scene

_SPECIAL_BULLETS = 40
_SPECIAL_COOLDOWN = 60 * 10
_SHOOT_COOLDOWN = 10

_PRESS_KEYS = {
    pygame.K_w: "up",
    pygame.K_a: "left",
    pygame.K_s: "down",
    pygame.K_d: "right",
}


class PlayScene(Scene):
    """Gameplay scene driven by pygame events and drawn on a pygame surface."""

    def __init__(self, window: Any, config: Config) -> None:
        super().__init__(window)
        self.config = config
        self.manager = EntityManager()
        self.frame_count = 0
        self.is_running = True
        self._fps = config.window.fps if config.window is not None else 0
        self.player = self._spawn_player()

    def _spawn_player(self) -> Entity:
        specs = self.config.player
        width, height = self.window.get_size()
        player = self.manager.add_entity("Player")
        player.transform = Transform((width / 2.0, height / 2.0), (0.0, 0.0), 0.0)
        player.shape = CircleShape(
            specs.shape_radius,
            specs.shape_vertices,
            specs.fill_color,
            specs.outline_color,
            specs.outline_thickness,
        )
        player.collision = Collision(specs.collision_radius)
        player.input = Input()
        player.special_shoot = SpecialShoot(_SPECIAL_BULLETS, _SPECIAL_COOLDOWN)
        player.shoot = Shoot(_SHOOT_COOLDOWN)
        return player

    def handle_event(self, event: Any) -> None:
        """Apply one pygame event to the player's controls and the scene."""
        controls = self.player.input
        if event.type == pygame.QUIT:
            self.close()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.close()
            elif event.key == pygame.K_p:
                self.is_running = not self.is_running
            elif event.key in _PRESS_KEYS:
                setattr(controls, _PRESS_KEYS[event.key], True)
        elif event.type == pygame.KEYUP:
            if event.key in _PRESS_KEYS:
                setattr(controls, _PRESS_KEYS[event.key], False)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if not self.is_running:
                return
            if event.button == 1:
                controls.left_click = True
                x, y = event.pos
                controls.mouse_pos = (float(x), float(y))
            elif event.button == 3:
                controls.right_click = True

    def spawn_bullet(self, angle: float) -> Entity:
        """Fire a bullet from the player's position in direction ``angle`` (radians)."""
        specs = self.config.bullet
        bullet = self.manager.add_entity("Bullet")
        bullet.shape = CircleShape(
            specs.shape_radius,
            specs.shape_vertices,
            specs.fill_color,
            specs.outline_color,
            specs.outline_thickness,
        )
        bullet.collision = Collision(specs.collision_radius)
        bullet.lifespan = LifeSpan(specs.lifespan)
        velocity = (math.cos(angle) * specs.speed, math.sin(angle) * specs.speed)
        bullet.transform = Transform(self.player.transform.position, velocity, angle)
        return bullet

    def movement(self) -> None:
        """Set the player's velocity from its controls and move every entity."""
        controls = self.player.input
        speed = self.config.player.speed
        if controls.down:
            vy = speed
        elif controls.up:
            vy = -speed
        else:
            vy = 0.0
        if controls.right:
            vx = speed
        elif controls.left:
            vx = -speed
        else:
            vx = 0.0
        self.player.transform.velocity = (vx, vy)

        for entity in self.manager.get_entities():
            if entity.transform is not None:
                x, y = entity.transform.position
                dx, dy = entity.transform.velocity
                entity.transform.position = (x + dx, y + dy)

    def shoot(self) -> None:
        """Fire at the mouse position on a left click, honouring the cooldown."""
        gun = self.player.shoot
        controls = self.player.input
        if controls.left_click and gun.remaining_cooldown == 0:
            px, py = self.player.transform.position
            mx, my = controls.mouse_pos
            self.spawn_bullet(math.atan2(my - py, mx - px))
            gun.remaining_cooldown = gun.cooldown
        if gun.remaining_cooldown > 0:
            gun.remaining_cooldown -= 1

    def special_shoot(self) -> None:
        """Fire a ring of bullets on a right click, honouring the cooldown."""
        special = self.player.special_shoot
        if self.player.input.right_click and special.remaining_cooldown == 0:
            for i in range(special.bullet_amount):
                self.spawn_bullet((360.0 / special.bullet_amount) * i)
            special.remaining_cooldown = special.cooldown
        if special.remaining_cooldown > 0:
            special.remaining_cooldown -= 1

    def render(self) -> None:
        """Clear the window and draw every shaped entity, spinning it by one degree."""
        self.window.fill((0, 0, 0))
        for entity in self.manager.get_entities():
            if entity.shape is None:
                continue
            entity.transform.angle += 1
            points = entity.shape.points(entity.transform.position, entity.transform.angle)
            if len(points) < 3:
                continue
            pygame.draw.polygon(self.window, entity.shape.fill_color.as_tuple(), points)
            thickness = int(entity.shape.thickness)
            if thickness > 0:
                pygame.draw.polygon(
                    self.window, entity.shape.outline_color.as_tuple(), points, thickness
                )

    def step(self, events: Iterable[Any]) -> None:
        """Run one frame: handle ``events`` and, unless paused, advance and draw."""
        self.player.input.left_click = False
        self.player.input.right_click = False
        for event in events:
            self.handle_event(event)
        if self.is_running:
            self.frame_count += 1
            self.manager.update()
            self.movement()
            self.render()

    def update(self) -> None:
        """Run frames until the window closes or another scene is requested."""
        clock = pygame.time.Clock()
        while self.is_open and not self.next_scene():
            self.step(pygame.event.get())
            if pygame.display.get_init() and pygame.display.get_surface() is not None:
                pygame.display.flip()
            clock.tick(self._fps)

    def next_scene(self) -> str:
        return super().next_scene()