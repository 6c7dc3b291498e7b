"""
Transaction validity window.

Both bounds are seconds since the Unix epoch. A `max_time` of 0 means the
transaction has no upper bound.
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from .codec.writer import UINT64_MAX
from .xdr.common import XdrTimeBounds


class TimeBounds(BaseModel):
    """
    Validity window for a transaction.

    Accepts integers or `datetime` values; naive datetimes are taken as UTC.
    """
    min_time: int = Field(ge=0, le=UINT64_MAX, alias="minTime", description="Earliest valid close time")
    max_time: int = Field(ge=0, le=UINT64_MAX, alias="maxTime", description="Latest valid close time, 0 for none")

    model_config = {"populate_by_name": True, "frozen": True}

    def __init__(self, min_time: Any = None, max_time: Any = None, **data: Any):
        if min_time is not None:
            data["min_time"] = min_time
        if max_time is not None:
            data["max_time"] = max_time
        super().__init__(**data)

    @field_validator("min_time", "max_time", mode="before")
    @classmethod
    def parse_time(cls, v: Any) -> Any:
        """Convert datetimes to epoch seconds."""
        if isinstance(v, datetime):
            if v.tzinfo is None:
                v = v.replace(tzinfo=timezone.utc)
            return int(v.timestamp())
        return v

    @model_validator(mode="after")
    def check_window(self) -> TimeBounds:
        if self.max_time != 0 and self.max_time < self.min_time:
            raise ValueError(f"max_time ({self.max_time}) must be >= min_time ({self.min_time}) or 0")
        return self

    def to_xdr(self) -> XdrTimeBounds:
        return XdrTimeBounds(self.min_time, self.max_time)

    @classmethod
    def from_xdr(cls, xdr: XdrTimeBounds) -> TimeBounds:
        # Wire values are taken as-is; the network judges the window.
        return cls.model_construct(min_time=xdr.min_time, max_time=xdr.max_time)
