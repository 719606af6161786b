"""Bookkeeping for all entities, with additions deferred to the next update."""

from __future__ import annotations

from typing import Optional

from .entity import Entity


class EntityManager:
    """Owns entities, grouped by tag; new entities appear after ``update``."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []
        self._by_tag: dict[str, list[Entity]] = {}
        self._pending: list[Entity] = []
        self._total = 0

    def update(self) -> None:
        """Add pending entities and drop destroyed ones."""
        for entity in self._pending:
            self._entities.append(entity)
            self._by_tag.setdefault(entity.tag, []).append(entity)
        self._pending.clear()

        self._entities[:] = [e for e in self._entities if e.is_active]
        for entities in self._by_tag.values():
            entities[:] = [e for e in entities if e.is_active]

    def add_entity(self, tag: str) -> Entity:
        """Create an entity with the next id; it is stored on the next update."""
        entity = Entity(tag, self._total)
        self._total += 1
        self._pending.append(entity)
        return entity

    def get_entities(self, tag: Optional[str] = None) -> list[Entity]:
        """All live entities, or those with ``tag``."""
        if tag is None:
            return self._entities
        return self._by_tag.setdefault(tag, [])

    def entity_map(self) -> dict[str, list[Entity]]:
        """The entities grouped by tag."""
        return self._by_tag