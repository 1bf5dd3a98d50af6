# backend/hrdash/schemas/base.py
"""
Shared pieces for the request/response schemas.

- Timestamps are normalized to UTC: naive input is taken as UTC, offset-aware
  input is converted. Values read back from SQLite come out naive and are
  tagged as UTC the same way.
- Money is validated as Decimal within NUMERIC(12, 2) and written to JSON
  as a plain number.
- Row ids must fit the Integer primary key column.
"""
from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, ClassVar, FrozenSet, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

from hrdash.db import MAX_DB_ID

RowId = Annotated[int, Field(ge=1, le=MAX_DB_ID)]
Money = Annotated[Decimal, Field(max_digits=12, decimal_places=2)]
# wide enough for any percentage derived from two Money values
Percentage = Annotated[Decimal, Field(max_digits=18, decimal_places=2)]


def to_utc(v: Optional[datetime]) -> Optional[datetime]:
    if v is None:
        return v
    if v.tzinfo is None or v.tzinfo.utcoffset(v) is None:
        return v.replace(tzinfo=timezone.utc)
    return v.astimezone(timezone.utc)


UTCDateTime = Annotated[datetime, AfterValidator(to_utc)]


def money_out(v: Optional[Decimal | float]) -> Optional[float]:
    return float(v) if v is not None else None


class ORMRead(BaseModel):
    """Base for response DTOs built straight from ORM rows."""

    model_config = ConfigDict(from_attributes=True)


class PartialUpdate(BaseModel):
    """
    Patch-style input: only fields the caller actually sent are applied.

    Fields named in ``non_nullable`` may be omitted but not sent as null;
    everything else optional may be explicitly nulled to clear it.
    """

    non_nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_explicit_nulls(self):
        for name in self.model_fields_set & self.non_nullable:
            if getattr(self, name) is None:
                raise ValueError(f"{name} may be omitted but cannot be null")
        return self

    def changes(self, *, exclude: FrozenSet[str] = frozenset({"id"})) -> dict:
        """Supplied fields only (explicit nulls included)."""
        return self.model_dump(exclude_unset=True, exclude=set(exclude))
