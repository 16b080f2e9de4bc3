"""Built-in example teams and JSON loading of custom team lists.

The example weights are illustrative, not real league odds.  Each list
entry in a team file looks like::

    {"id": "Dragons", "weights": [250, 200, 150, 100, 50],
     "metadata": {"odds_text": "1 in 4", "record": "25-57"}}
"""

from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter

from draft_lottery.core.models import Entity

_team_list_ta = TypeAdapter(list[Entity])


def _team(name: str, weights: tuple[float, ...], odds_text: str, record: str) -> Entity:
    return Entity(id=name, weights=weights, metadata={"odds_text": odds_text, "record": record})


DEFAULT_TEAMS: tuple[Entity, ...] = (
    _team("Dragons", (250, 200, 150, 100, 50), "1 in 4", "25-57"),
    _team("Sharks", (200, 180, 160, 140, 120), "1 in 5", "28-54"),
    _team("Wolves", (150, 160, 170, 180, 190), "1 in 6", "31-51"),
    _team("Bulls", (100, 120, 140, 160, 180), "1 in 8", "34-48"),
    _team("Eagles", (50, 80, 110, 140, 170), "1 in 10", "38-44"),
)


def load_teams(path: str | Path) -> list[Entity]:
    """Parse a JSON team list.  Pool invariants are checked later by ``create_pool``."""
    return _team_list_ta.validate_json(Path(path).read_bytes())
