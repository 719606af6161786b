"""The base class shared by every scene of the game."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Scene(ABC):
    """A screen of the game that draws to a window and may ask to be replaced."""

    def __init__(self, window: Any) -> None:
        self.window = window
        self.is_open = True
        self._next_scene = ""

    @abstractmethod
    def update(self) -> None:
        """Run the scene until it closes or requests another scene."""

    def next_scene(self) -> str:
        """Name of the scene to switch to, or an empty string to stay."""
        return self._next_scene

    def change_scene(self, name: str) -> None:
        """Request a switch to the scene called ``name``."""
        self._next_scene = name

    def close(self) -> None:
        """Mark the window as closed."""
        self.is_open = False