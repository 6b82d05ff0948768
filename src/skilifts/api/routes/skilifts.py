"""Ski lift CRUD endpoints.

Metadata path segments are dates such as ``01/15/24``, so the generic
``{metadata}`` routes use the ``path`` converter and are registered after the
literal ``by-riders`` and ``static`` routes.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status

from skilifts.core.exceptions import InvalidInputError
from skilifts.core.protocols import ISkiLiftStore
from skilifts.core.types import JsonDict
from skilifts.models.records import RecordKind, record_kind
from skilifts.models.schemas import (
    CreateDynamicDataInput,
    CreateResortDataInput,
    CreateStaticDataInput,
    LiftQuery,
    ListQuery,
    RidersQuery,
    UpdateDynamicDataInput,
    UpdateStaticDataInput,
)

router = APIRouter(prefix="/api/skilifts", tags=["skilifts"])


def get_store(request: Request) -> ISkiLiftStore:
    return request.app.state.store


Store = Annotated[ISkiLiftStore, Depends(get_store)]
LiftParam = Annotated[str, Path(min_length=1)]
MetadataParam = Annotated[str, Path(min_length=1)]


# ---- create ----

@router.post("/static", status_code=status.HTTP_201_CREATED)
def create_static(data: CreateStaticDataInput, store: Store) -> JsonDict:
    return store.create_static(data).to_item()


@router.post("/dynamic", status_code=status.HTTP_201_CREATED)
def create_dynamic(data: CreateDynamicDataInput, store: Store) -> JsonDict:
    return store.create_dynamic(data).to_item()


@router.post("/resort", status_code=status.HTTP_201_CREATED)
def create_resort(data: CreateResortDataInput, store: Store) -> JsonDict:
    return store.create_resort(data).to_item()


# ---- read ----

@router.get("")
def list_skilifts(query: Annotated[ListQuery, Query()], store: Store) -> JsonDict:
    """Scan the table one page at a time."""
    return store.list(query).to_response()


@router.get("/{lift}/by-riders")
def query_by_riders(lift: LiftParam, query: Annotated[RidersQuery, Query()],
                    store: Store) -> JsonDict:
    """Rows for a lift from the rider index, highest rider count first."""
    return store.query_by_riders(lift, query).to_response()


@router.get("/{lift}/{metadata:path}")
def get_skilift(lift: LiftParam, metadata: MetadataParam, store: Store) -> JsonDict:
    return store.get(lift, metadata)


@router.get("/{lift}")
def query_lift(lift: LiftParam, query: Annotated[LiftQuery, Query()], store: Store) -> JsonDict:
    return store.query_by_lift(lift, query.limit).to_response()


# ---- update ----

@router.put("/{lift}/static")
def update_static(lift: LiftParam, data: UpdateStaticDataInput, store: Store) -> JsonDict:
    return store.update_static(lift, data)


@router.put("/{lift}/{metadata:path}")
def update_dynamic(lift: LiftParam, metadata: MetadataParam, data: UpdateDynamicDataInput,
                   store: Store) -> JsonDict:
    if record_kind({"Lift": lift, "Metadata": metadata}) is RecordKind.STATIC:
        raise InvalidInputError("Static Data records are updated through PUT /api/skilifts/{lift}/static")
    return store.update_dynamic(lift, metadata, data)


# ---- delete ----

@router.delete("/{lift}/{metadata:path}", status_code=status.HTTP_204_NO_CONTENT)
def delete_skilift(lift: LiftParam, metadata: MetadataParam, store: Store) -> Response:
    store.delete(lift, metadata)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
