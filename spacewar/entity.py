"""Game entities: a tag, an id and optional components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .components import (
    Button,
    CircleShape,
    Collision,
    Input,
    LifeSpan,
    RectangleShape,
    Score,
    Shoot,
    SpecialShoot,
    Transform,
)


@dataclass(eq=False)
class Entity:
    """A thing in the game world; it stays alive until destroyed."""

    tag: str
    id: int
    is_active: bool = field(default=True, init=False)

    transform: Optional[Transform] = None
    shape: Optional[CircleShape] = None
    score: Optional[Score] = None
    collision: Optional[Collision] = None
    lifespan: Optional[LifeSpan] = None
    input: Optional[Input] = None
    special_shoot: Optional[SpecialShoot] = None
    shoot: Optional[Shoot] = None
    rectangle: Optional[RectangleShape] = None
    button: Optional[Button] = None

    def destroy(self) -> None:
        """Mark the entity as dead; the manager drops it on its next update."""
        self.is_active = False