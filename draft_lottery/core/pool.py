"""Entity pool: the immutable set of not-yet-drawn entities.

A pool is validated once at construction.  Removal returns a new pool and
leaves the receiver untouched, so any earlier pool can be replayed.
Enumeration order is the order of the original entity list and survives
removal; the draw engine depends on it being stable.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from draft_lottery.core.errors import NotFoundError, ValidationError
from draft_lottery.core.models import Entity


class EntityPool:
    """Ordered, immutable collection of entities with unique ids."""

    __slots__ = ("_entities", "_by_id", "_total_picks")

    def __init__(self, entities: Iterable[Entity]) -> None:
        entities = tuple(entities)
        _validate(entities)
        self._set(entities, len(entities[0].weights))

    @classmethod
    def _from_validated(cls, entities: tuple[Entity, ...], total_picks: int) -> EntityPool:
        # Removal may legitimately produce an empty pool, which __init__ rejects.
        pool = cls.__new__(cls)
        pool._set(entities, total_picks)
        return pool

    def _set(self, entities: tuple[Entity, ...], total_picks: int) -> None:
        self._entities = entities
        self._by_id: Mapping[str, Entity] = MappingProxyType({e.id: e for e in entities})
        self._total_picks = total_picks

    # -- read access --

    @property
    def entities(self) -> tuple[Entity, ...]:
        return self._entities

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(e.id for e in self._entities)

    @property
    def total_picks(self) -> int:
        """Length of every entity's weight vector."""
        return self._total_picks

    def get(self, entity_id: str) -> Entity:
        try:
            return self._by_id[entity_id]
        except KeyError:
            raise NotFoundError(entity_id) from None

    def weights_at(self, pick_index: int) -> tuple[float, ...]:
        return tuple(e.weights[pick_index] for e in self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._by_id

    def __repr__(self) -> str:
        return f"EntityPool(ids={list(self.ids)!r}, total_picks={self._total_picks})"

    # -- removal --

    def remove(self, entity_id: str) -> EntityPool:
        """Return a new pool without *entity_id*."""
        if entity_id not in self._by_id:
            raise NotFoundError(entity_id)
        kept = tuple(e for e in self._entities if e.id != entity_id)
        return EntityPool._from_validated(kept, self._total_picks)


def _validate(entities: tuple[Entity, ...]) -> None:
    if not entities:
        raise ValidationError("a pool needs at least one entity")

    total_picks = len(entities[0].weights)
    if total_picks == 0:
        raise ValidationError(f"entity {entities[0].id!r} has an empty weight vector")

    seen: set[str] = set()
    for entity in entities:
        if entity.id in seen:
            raise ValidationError(f"duplicate entity id {entity.id!r}")
        seen.add(entity.id)

        if len(entity.weights) != total_picks:
            raise ValidationError(
                f"entity {entity.id!r} has {len(entity.weights)} weights, "
                f"expected {total_picks}"
            )
        for pick_index, weight in enumerate(entity.weights):
            if not math.isfinite(weight) or weight < 0:
                raise ValidationError(
                    f"entity {entity.id!r} has invalid weight {weight!r} "
                    f"for pick {pick_index}"
                )


def create_pool(entities: Iterable[Entity]) -> EntityPool:
    """Validate *entities* and build the initial pool."""
    return EntityPool(entities)


def remove(pool: EntityPool, entity_id: str) -> EntityPool:
    return pool.remove(entity_id)


def size(pool: EntityPool) -> int:
    return len(pool)
