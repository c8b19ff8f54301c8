"""
Turns a ShipFilter into a conjunction of simple criteria.

Each criterion is a (field, operator, value) triple naming a Ship attribute.
The repository translates the tuple into a WHERE clause; this module knows
nothing about SQL.
"""
from dataclasses import dataclass
from typing import Any, Callable, Optional

from shipregistry.core.dates import from_epoch_millis
from shipregistry.schemas.ship import ShipFilter

CONTAINS = "contains"
EQ = "eq"
GE = "ge"
LE = "le"


@dataclass(frozen=True)
class Criterion:
    field: str
    op: str
    value: Any


def _same(value):
    return value


# filter attribute -> (Ship attribute, operator, value conversion)
FILTER_RULES: dict[str, tuple[str, str, Callable[[Any], Any]]] = {
    "name": ("name", CONTAINS, _same),
    "planet": ("planet", CONTAINS, _same),
    "ship_type": ("ship_type", EQ, _same),
    "is_used": ("is_used", EQ, _same),
    "after": ("prod_date", GE, from_epoch_millis),
    "before": ("prod_date", LE, from_epoch_millis),
    "min_crew_size": ("crew_size", GE, _same),
    "max_crew_size": ("crew_size", LE, _same),
    "min_speed": ("speed", GE, _same),
    "max_speed": ("speed", LE, _same),
    "min_rating": ("rating", GE, _same),
    "max_rating": ("rating", LE, _same),
}


def compile_filter(ship_filter: Optional[ShipFilter]) -> Optional[tuple[Criterion, ...]]:
    """
    Returns the criteria for every filter field that is set, to be ANDed
    together, or None when nothing is set. A min/max pair yields two
    criteria on the same column, i.e. an inclusive range.
    """
    if ship_filter is None:
        return None

    criteria = []
    for attr, (field, op, convert) in FILTER_RULES.items():
        value = getattr(ship_filter, attr)
        if value is None:
            continue
        criteria.append(Criterion(field, op, convert(value)))

    return tuple(criteria) or None
