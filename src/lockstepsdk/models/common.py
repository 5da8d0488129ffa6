"""Shared model plumbing and generic result types."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")
S = TypeVar("S")

# Money stays a Decimal. JSON dumps carry it as exact text; request bodies
# write the same digits as a JSON number.
Amount = Annotated[Decimal, PlainSerializer(str, return_type=str, when_used="json")]


class LockstepModel(BaseModel):
    """Base class for every Lockstep Platform data model.

    Attributes are snake_case in Python and camelCase on the wire. Fields the
    server returns but the model does not declare are preserved.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class FetchResult(LockstepModel, Generic[T]):
    """One page of results from a query endpoint."""

    records: list[T] | None = None
    total_count: int | None = None
    page_size: int | None = None
    page_number: int | None = None


class AgingModel(LockstepModel):
    """Outstanding balance falling into one aging bucket."""

    group_key: UUID | None = None
    bucket: int | None = None
    currency_code: str | None = None
    outstanding_balance: Amount | None = None
    invoice_count: int | None = None


class SummaryFetchResult(LockstepModel, Generic[T, S]):
    """A page of results that also carries totals for the whole query."""

    records: list[T] | None = None
    total_count: int | None = None
    page_size: int | None = None
    page_number: int | None = None
    summary: S | None = None
    aging_summary: list[AgingModel] | None = None


class ActionResultModel(LockstepModel):
    """Result of an action such as disabling or archiving a record."""

    messages: list[str] | None = None


class DeleteResult(LockstepModel):
    """Result of a delete call."""

    messages: list[str] | None = None


class BulkDeleteRequestModel(LockstepModel):
    """Identifiers of the records a bulk delete should remove."""

    ids_to_delete: list[UUID] = Field(default_factory=list)
