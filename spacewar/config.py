"""Game settings and the whitespace-separated configuration file format."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Iterator, Optional, Union

from .components import Color


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or parsed."""


@dataclass
class MinMaxF:
    min: float = 0.0
    max: float = 0.0


@dataclass
class MinMaxI:
    min: int = 0
    max: int = 0


@dataclass
class WindowSpecs:
    """Window size and frame limit; a flag other than 1 in the file means fullscreen."""

    width: int = 0
    height: int = 0
    fps: int = 0
    fullscreen: bool = False


@dataclass
class PlayerSpecs:
    shape_radius: int = 0
    collision_radius: int = 0
    speed: float = 0.0
    fill_color: Color = field(default_factory=Color)
    outline_color: Color = field(default_factory=Color)
    outline_thickness: int = 0
    shape_vertices: int = 0


@dataclass
class EnemySpecs:
    shape_radius: int = 0
    collision_radius: int = 0
    speed: MinMaxF = field(default_factory=MinMaxF)
    outline_color: Color = field(default_factory=Color)
    outline_thickness: int = 0
    shape_vertices: MinMaxI = field(default_factory=MinMaxI)
    lifespan: int = 0
    spawn_interval: int = 0


@dataclass
class BulletSpecs:
    shape_radius: int = 0
    collision_radius: int = 0
    speed: float = 0.0
    fill_color: Color = field(default_factory=Color)
    outline_color: Color = field(default_factory=Color)
    outline_thickness: int = 0
    shape_vertices: int = 0
    lifespan: int = 0


@dataclass
class ButtonSpecs:
    width: int = 0
    height: int = 0
    x: int = 0
    y: int = 0
    outline_thickness: int = 0
    outline_color: Color = field(default_factory=Color)
    fill_color: Color = field(default_factory=Color)


@dataclass
class Config:
    """Everything read from a configuration file."""

    window: Optional[WindowSpecs] = None
    player: PlayerSpecs = field(default_factory=PlayerSpecs)
    enemy: EnemySpecs = field(default_factory=EnemySpecs)
    bullet: BulletSpecs = field(default_factory=BulletSpecs)
    single_player_button: ButtonSpecs = field(default_factory=ButtonSpecs)


_UINT16_MAX = 0xFFFF


class _Tokens:
    def __init__(self, text: str, section: str = "") -> None:
        self._it: Iterator[str] = iter(text.split())
        self.section = section

    def __iter__(self) -> Iterator[str]:
        return self._it

    def _next(self, what: str) -> str:
        try:
            return next(self._it)
        except StopIteration:
            raise ConfigError(f"{self.section}: missing value for {what}") from None

    def int(self, what: str, limit: Optional[int] = None) -> int:
        token = self._next(what)
        try:
            value = int(token)
        except ValueError:
            raise ConfigError(f"{self.section}: {what} must be an integer, got {token!r}") from None
        if limit is not None and not 0 <= value <= limit:
            raise ConfigError(f"{self.section}: {what} out of range: {value}")
        return value

    def uint16(self, what: str) -> int:
        return self.int(what, _UINT16_MAX)

    def uint(self, what: str) -> int:
        value = self.int(what)
        if value < 0:
            raise ConfigError(f"{self.section}: {what} must not be negative: {value}")
        return value

    def float(self, what: str) -> float:
        token = self._next(what)
        try:
            return float(token)
        except ValueError:
            raise ConfigError(f"{self.section}: {what} must be a number, got {token!r}") from None

    def color(self, what: str) -> Color:
        r, g, b = (self.int(f"{what} {c}") & 0xFF for c in "rgb")
        return Color(r, g, b)


def _read_window(tokens: _Tokens) -> WindowSpecs:
    width = tokens.uint("width")
    height = tokens.uint("height")
    fps = tokens.uint("fps")
    flag = tokens.int("fullscreen")
    return WindowSpecs(width, height, fps, fullscreen=flag != 1)


def _read_player(tokens: _Tokens) -> PlayerSpecs:
    return PlayerSpecs(
        shape_radius=tokens.uint16("shape radius"),
        collision_radius=tokens.uint16("collision radius"),
        speed=tokens.float("speed"),
        fill_color=tokens.color("fill colour"),
        outline_color=tokens.color("outline colour"),
        outline_thickness=tokens.uint16("outline thickness"),
        shape_vertices=tokens.uint("shape vertices"),
    )


def _read_bullet(tokens: _Tokens) -> BulletSpecs:
    return BulletSpecs(
        shape_radius=tokens.uint16("shape radius"),
        collision_radius=tokens.uint16("collision radius"),
        speed=tokens.float("speed"),
        fill_color=tokens.color("fill colour"),
        outline_color=tokens.color("outline colour"),
        outline_thickness=tokens.uint16("outline thickness"),
        shape_vertices=tokens.uint("shape vertices"),
        lifespan=tokens.uint16("lifespan"),
    )


def _read_button(tokens: _Tokens) -> ButtonSpecs:
    return ButtonSpecs(
        width=tokens.uint16("width"),
        height=tokens.uint16("height"),
        x=tokens.uint16("x"),
        y=tokens.uint16("y"),
        outline_thickness=tokens.uint16("outline thickness"),
        fill_color=tokens.color("fill colour"),
        outline_color=tokens.color("outline colour"),
    )


def parse_config(text: str) -> Config:
    """Parse configuration text; unknown words are skipped one at a time."""
    config = Config()
    tokens = _Tokens(text)
    for identifier in tokens:
        tokens.section = identifier
        if identifier == "Window":
            config.window = _read_window(tokens)
        elif identifier == "Player":
            config.player = _read_player(tokens)
        elif identifier == "Bullet":
            config.bullet = _read_bullet(tokens)
        elif identifier == "SinglePlayerButton":
            config.single_player_button = _read_button(tokens)
    return config


def load_config(path: Union[str, PathLike]) -> Config:
    """Read and parse the configuration file at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise ConfigError(f"Failed to open: {path}") from exc
    return parse_config(text)