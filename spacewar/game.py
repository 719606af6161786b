"""The game: opens the window and switches between scenes."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from .config import ConfigError, load_config
from .menu_scene import MenuScene
from .multiplayer_scene import MultiplayerScene
from .play_scene import PlayScene
from .scene import Scene

DEFAULT_CONFIG = "../../config.txt"


class Game:
    """Reads the configuration, opens the window and runs the current scene."""

    def __init__(self, config_file: Union[str, Path]) -> None:
        self.frame_count = 0
        self.is_running = True
        self.config = load_config(config_file)
        if self.config.window is None:
            raise ConfigError(f"{config_file}: no Window section")
        self.window = self._create_window()
        self.current_scene: Optional[Scene] = self.create_scene("menu")

    def _create_window(self) -> pygame.Surface:
        specs = self.config.window
        pygame.display.init()
        if specs.fullscreen:
            window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            pygame.display.set_caption("Space Wars")
        else:
            window = pygame.display.set_mode((specs.width, specs.height))
            pygame.display.set_caption("Space War")
        return window

    def create_scene(self, name: str) -> Optional[Scene]:
        """Build the scene called ``name``, or return None for an unknown name."""
        if name == "menu":
            return MenuScene(self.window, self.config)
        if name == "play":
            return PlayScene(self.window, self.config)
        if name == "multiplayer":
            return MultiplayerScene(self.window)
        return None

    def run(self) -> None:
        """Run scenes until one closes the window without naming a successor."""
        while self.current_scene is not None:
            self.current_scene.update()
            following = self.current_scene.next_scene()
            if following:
                self.current_scene = self.create_scene(following)
            elif not self.current_scene.is_open:
                self.current_scene = None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game with the configuration file given on the command line."""
    parser = argparse.ArgumentParser(prog="spacewar", description="Space War game.")
    parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG, help="configuration file")
    args = parser.parse_args(argv)
    try:
        game = Game(args.config)
    except ConfigError as exc:
        print(f"Current path: {os.getcwd()}")
        print(exc, file=sys.stderr)
        return 1
    try:
        game.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())