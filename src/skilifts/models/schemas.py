"""Request validation schemas for the SkiLifts API.

Create schemas require every field. Update schemas make every field optional;
absence means "leave unchanged", so an explicit ``null`` is rejected rather
than treated as a value.
"""

from __future__ import annotations

from typing import Annotated, Optional, Union

from pydantic import (
    AfterValidator,
    AllowInfNan,
    BaseModel,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StringConstraints,
    model_validator,
)

from skilifts.core.types import JsonDict
from skilifts.models.records import DangerLevel, LiftState

LIFT_TIME_PATTERN = r"^\d{1,2}:\d{2}$"
DATE_PATTERN = r"^\d{2}/\d{2}/\d{2}$"
DEFAULT_LIMIT = 20
MAX_LIMIT = 100


def _positive(value: Union[int, float]) -> Union[int, float]:
    if value <= 0:
        raise ValueError("must be positive")
    return value


def _non_negative(value: Union[int, float]) -> Union[int, float]:
    if value < 0:
        raise ValueError("must be non-negative")
    return value


FiniteFloat = Annotated[StrictFloat, AllowInfNan(False)]
Number = Union[StrictInt, FiniteFloat]
PositiveNumber = Annotated[Number, AfterValidator(_positive)]
NonNegativeNumber = Annotated[Number, AfterValidator(_non_negative)]
LiftNameStr = Annotated[str, StringConstraints(min_length=1)]
LiftTimeStr = Annotated[str, StringConstraints(pattern=LIFT_TIME_PATTERN)]
DateStr = Annotated[str, StringConstraints(pattern=DATE_PATTERN)]
Limit = Annotated[int, Field(ge=1, le=MAX_LIMIT)]
RiderBound = Annotated[float, Field(ge=0, allow_inf_nan=False)]


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------

class CreateStaticDataInput(BaseModel):
    Lift: LiftNameStr
    ExperiencedRidersOnly: StrictBool
    VerticalFeet: PositiveNumber
    LiftTime: LiftTimeStr


class CreateDynamicDataInput(BaseModel):
    Lift: LiftNameStr
    Metadata: DateStr
    TotalUniqueLiftRiders: NonNegativeNumber
    AverageSnowCoverageInches: NonNegativeNumber
    LiftStatus: LiftState
    AvalancheDanger: DangerLevel


class CreateResortDataInput(BaseModel):
    Metadata: DateStr
    TotalUniqueLiftRiders: NonNegativeNumber
    AverageSnowCoverageInches: NonNegativeNumber
    LiftStatus: Optional[LiftState] = None
    AvalancheDanger: DangerLevel
    OpenLifts: list[Number]


# ---------------------------------------------------------------------------
# Partial update
# ---------------------------------------------------------------------------

class PartialUpdate(BaseModel):
    """Base for update payloads; tracks which fields the caller sent."""

    @model_validator(mode="after")
    def _reject_explicit_null(self) -> "PartialUpdate":
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def provided_fields(self) -> JsonDict:
        """Fields explicitly present in the payload, in declaration order."""
        if not self.model_fields_set:
            return {}
        return self.model_dump(mode="json", include=set(self.model_fields_set))


class UpdateStaticDataInput(PartialUpdate):
    ExperiencedRidersOnly: Optional[StrictBool] = None
    VerticalFeet: Optional[PositiveNumber] = None
    LiftTime: Optional[LiftTimeStr] = None


class UpdateDynamicDataInput(PartialUpdate):
    TotalUniqueLiftRiders: Optional[NonNegativeNumber] = None
    AverageSnowCoverageInches: Optional[NonNegativeNumber] = None
    LiftStatus: Optional[LiftState] = None
    AvalancheDanger: Optional[DangerLevel] = None


# ---------------------------------------------------------------------------
# Query strings
# ---------------------------------------------------------------------------

class LiftQuery(BaseModel):
    limit: Limit = DEFAULT_LIMIT


class ListQuery(BaseModel):
    limit: Limit = DEFAULT_LIMIT
    lastEvaluatedLift: Optional[str] = None
    lastEvaluatedMetadata: Optional[str] = None


class RidersQuery(BaseModel):
    minRiders: Optional[RiderBound] = None
    maxRiders: Optional[RiderBound] = None
    limit: Limit = DEFAULT_LIMIT

    @model_validator(mode="after")
    def _check_range(self) -> "RidersQuery":
        if self.minRiders is not None and self.maxRiders is not None and self.minRiders > self.maxRiders:
            raise ValueError("minRiders must not exceed maxRiders")
        return self
