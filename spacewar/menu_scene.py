"""The main menu: clickable buttons that lead to the other scenes."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

import pygame

from .components import Input, RectangleShape, Transform, Button
from .config import ButtonSpecs, Config
from .entity import Entity
from .entity_manager import EntityManager
from .scene import Scene

_PRESS_KEYS = {
    pygame.K_w: "up",
    pygame.K_a: "left",
    pygame.K_s: "down",
    pygame.K_d: "right",
}


class MenuScene(Scene):
    """Menu scene with a single-player button that switches to the play scene."""

    def __init__(self, window: Any, config: Config) -> None:
        super().__init__(window)
        self.config = config
        self.manager = EntityManager()
        self.frame_count = 0
        self.is_running = True
        self._fps = config.window.fps if config.window is not None else 0
        self.player = self._spawn_player()
        self._spawn_menu_buttons()

    def _spawn_player(self) -> Entity:
        player = self.manager.add_entity("Player")
        player.input = Input()
        return player

    def _spawn_menu_buttons(self) -> None:
        self.spawn_button(self.config.single_player_button, lambda: self.change_scene("play"))

    def spawn_button(
        self, specs: ButtonSpecs, on_click: Optional[Callable[[], None]]
    ) -> Entity:
        """Create a button entity described by ``specs`` that calls ``on_click``."""
        button = self.manager.add_entity("Button")
        button.transform = Transform((float(specs.x), float(specs.y)), (0.0, 0.0), 0.0)
        button.rectangle = RectangleShape(
            specs.width,
            specs.height,
            specs.outline_thickness,
            specs.outline_color,
            specs.fill_color,
        )
        button.button = Button(
            specs.x,
            specs.x + specs.width,
            specs.y,
            specs.y + specs.height,
            on_click,
        )
        return button

    def handle_event(self, event: Any) -> None:
        """Apply one pygame event to the menu controls."""
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

    def click_buttons(self) -> None:
        """On a left click, trigger the first button under the mouse."""
        controls = self.player.input
        if not controls.left_click:
            return
        mx, my = controls.mouse_pos
        for entity in self.manager.get_entities():
            if entity.button is None or not entity.button.contains(mx, my):
                continue
            if entity.button.on_click is not None:
                entity.button.on_click()
            else:
                print("Button clicked, but onClick function is empty.")
            break

    def render(self) -> None:
        """Clear the window and draw every shape and rectangle."""
        self.window.fill((0, 0, 0))
        for entity in self.manager.get_entities():
            if entity.shape is not None:
                entity.transform.angle += 1
                points = entity.shape.points(entity.transform.position, entity.transform.angle)
                if len(points) >= 3:
                    pygame.draw.polygon(self.window, entity.shape.fill_color.as_tuple(), points)
                    thickness = int(entity.shape.thickness)
                    if thickness > 0:
                        pygame.draw.polygon(
                            self.window, entity.shape.outline_color.as_tuple(), points, thickness
                        )
            if entity.rectangle is not None:
                rectangle = entity.rectangle
                rect = pygame.Rect(rectangle.rect(entity.transform.position))
                thickness = int(rectangle.thickness)
                if thickness > 0:
                    outer = rect.inflate(2 * thickness, 2 * thickness)
                    pygame.draw.rect(self.window, rectangle.outline_color.as_tuple(), outer)
                pygame.draw.rect(self.window, rectangle.fill_color.as_tuple(), rect)

    def step(self, events: Iterable[Any]) -> None:
        """Run one frame: handle ``events`` and, unless paused, update and draw."""
        self.player.input.left_click = False
        self.player.input.right_click = False
        for event in events:
            self.handle_event(event)
        if self.is_running:
            self.frame_count += 1
            self.manager.update()
            self.click_buttons()
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