"""Core value types: entities, draw results, and serializable pick records."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from pydantic import field_serializer
from pydantic.dataclasses import dataclass as pydantic_dataclass

if TYPE_CHECKING:
    from draft_lottery.core.pool import EntityPool


@pydantic_dataclass(frozen=True)
class Entity:
    """One lottery participant and its per-pick weights.

    ``weights[i]`` is the relative likelihood of winning pick ``i``.
    ``metadata`` holds display fields (odds text, record, ...) that the
    core never reads.
    """

    id: str
    weights: tuple[float, ...]
    metadata: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Private read-only copy; entities are shared across pool snapshots.
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @field_serializer("metadata")
    def _serialize_metadata(self, metadata: Mapping[str, str]) -> dict[str, str]:
        return dict(metadata)

    def weight_at(self, pick_index: int) -> float:
        return self.weights[pick_index]

    @property
    def name(self) -> str:
        return self.metadata.get("name", self.id)


@dataclass(frozen=True, slots=True)
class DrawResult:
    """Outcome of one draw: who won which pick, and what is left."""

    pick_index: int
    winner: Entity
    pool_after: EntityPool

    @property
    def winner_id(self) -> str:
        return self.winner.id

    @property
    def pick_number(self) -> int:
        """1-based pick number, as shown to viewers."""
        return self.pick_index + 1


@pydantic_dataclass(frozen=True)
class PickRecord:
    """Serializable row of a results list (no pool attached)."""

    pick_number: int
    entity: Entity

    @classmethod
    def from_result(cls, result: DrawResult) -> PickRecord:
        return cls(pick_number=result.pick_number, entity=result.winner)
