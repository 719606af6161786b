"""A placeholder multiplayer scene that waits for Enter and returns to the menu."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from .scene import Scene

_PROMPT = "multiplayer Scene: Press Enter to Return to Menu...\n"


class MultiplayerScene(Scene):
    """Prompts on a text stream and goes back to the menu once input arrives."""

    def __init__(
        self,
        window: Any,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        super().__init__(window)
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def update(self) -> None:
        """Print the prompt, skip the rest of the current line, then read one character."""
        self._stdout.write(_PROMPT)
        self._stdout.flush()
        self._stdin.readline()
        self._stdin.read(1)
        self.change_scene("menu")

    def next_scene(self) -> str:
        return super().next_scene()