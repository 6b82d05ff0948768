"""SkiLifts record shapes.

Three shapes share the single-table key space (``Lift`` partition key,
``Metadata`` sort key):

* ``StaticData``   - permanent lift characteristics, Metadata ``"Static Data"``
* ``DynamicData``  - one row per lift per day, Metadata ``MM/DD/YY``
* ``ResortData``   - one row per day under the reserved ``"Resort Data"`` lift

They are independent models; ``SkiLiftRecord`` unions them only where a
record is written, and ``record_kind`` tells raw items apart by key.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel

from skilifts.core.types import RESORT_LIFT, STATIC_METADATA, JsonDict


class LiftState(str, Enum):
    OPEN = "Open"
    CLOSED = "Closed"
    PENDING = "Pending"


class DangerLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    CONSIDERABLE = "Considerable"
    HIGH = "High"
    EXTREME = "Extreme"


class RecordKind(str, Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"
    RESORT = "resort"


class StaticData(BaseModel):
    """Permanent characteristics of a lift."""

    Lift: str
    Metadata: Literal["Static Data"] = STATIC_METADATA
    ExperiencedRidersOnly: bool
    VerticalFeet: Union[int, float]
    LiftTime: str  # "H:MM" or "HH:MM"

    def to_item(self) -> JsonDict:
        return self.model_dump(mode="json")


class DynamicData(BaseModel):
    """Daily operational metrics for a single lift."""

    Lift: str
    Metadata: str  # "MM/DD/YY"
    TotalUniqueLiftRiders: Union[int, float]
    AverageSnowCoverageInches: Union[int, float]
    LiftStatus: LiftState
    AvalancheDanger: DangerLevel

    def to_item(self) -> JsonDict:
        return self.model_dump(mode="json")


class ResortData(BaseModel):
    """Resort-wide daily aggregate."""

    Lift: Literal["Resort Data"] = RESORT_LIFT
    Metadata: str  # "MM/DD/YY"
    TotalUniqueLiftRiders: Union[int, float]
    AverageSnowCoverageInches: Union[int, float]
    LiftStatus: Optional[LiftState] = None
    AvalancheDanger: DangerLevel
    OpenLifts: list[Union[int, float]]

    def to_item(self) -> JsonDict:
        return self.model_dump(mode="json", exclude_none=True)


SkiLiftRecord = Union[StaticData, DynamicData, ResortData]


def record_kind(item: dict[str, Any]) -> RecordKind:
    """Classify a stored item by its key alone."""
    if item.get("Lift") == RESORT_LIFT:
        return RecordKind.RESORT
    if item.get("Metadata") == STATIC_METADATA:
        return RecordKind.STATIC
    return RecordKind.DYNAMIC


class Page(BaseModel):
    """One page of a scan or query."""

    items: list[JsonDict]
    count: int
    lastEvaluatedKey: Optional[JsonDict] = None

    def to_response(self) -> JsonDict:
        return self.model_dump(exclude_none=True)
