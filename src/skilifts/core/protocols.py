"""Protocol interfaces for the SkiLifts persistence seam.

Routes depend on ``ISkiLiftStore`` only: structural typing, no inheritance
required, easy to swap for a test double.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from skilifts.core.types import JsonDict
from skilifts.models.records import DynamicData, Page, ResortData, StaticData
from skilifts.models.schemas import (
    CreateDynamicDataInput,
    CreateResortDataInput,
    CreateStaticDataInput,
    ListQuery,
    RidersQuery,
    UpdateDynamicDataInput,
    UpdateStaticDataInput,
)


@runtime_checkable
class ISkiLiftStore(Protocol):
    """Single-table ski lift record store."""

    @property
    def table_name(self) -> str: ...

    def create_static(self, data: CreateStaticDataInput) -> StaticData: ...

    def create_dynamic(self, data: CreateDynamicDataInput) -> DynamicData: ...

    def create_resort(self, data: CreateResortDataInput) -> ResortData: ...

    def get(self, lift: str, metadata: str) -> JsonDict: ...

    def query_by_lift(self, lift: str, limit: int = 20) -> Page: ...

    def list(self, query: ListQuery) -> Page: ...

    def query_by_riders(self, lift: str, query: RidersQuery) -> Page: ...

    def update_static(self, lift: str, data: UpdateStaticDataInput) -> JsonDict: ...

    def update_dynamic(self, lift: str, metadata: str, data: UpdateDynamicDataInput) -> JsonDict: ...

    def delete(self, lift: str, metadata: str) -> None: ...

    def check_ready(self) -> str: ...
