"""Core data models: entities, pools, and the error taxonomy."""

from draft_lottery.core.enums import DegeneratePolicy, Domain, Phase
from draft_lottery.core.errors import (
    DegenerateWeightsError,
    EmptyPoolError,
    InvalidPickIndexError,
    LotteryError,
    NotFoundError,
    ValidationError,
)
from draft_lottery.core.models import DrawResult, Entity, PickRecord
from draft_lottery.core.pool import EntityPool, create_pool, remove, size
