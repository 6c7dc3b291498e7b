"""
Transaction building options.

Typed defaults consumed by TransactionBuilder: fee per operation, operation
limit and default timeout.
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from .xdr.transaction import MAX_OPS_PER_TX

MIN_BASE_FEE = 100


class TransactionOptions(BaseModel):
    """
    Options for building transactions.

    `base_fee` is only a default multiplier; it is never enforced as a
    minimum.
    """
    base_fee: int = Field(
        default=MIN_BASE_FEE,
        ge=0,
        le=0xFFFFFFFF,
        alias="baseFee",
        description="Fee per operation in stroops"
    )
    max_operations: int = Field(
        default=MAX_OPS_PER_TX,
        ge=1,
        le=MAX_OPS_PER_TX,
        alias="maxOperations",
        description="Maximum operations per transaction"
    )
    timeout: Optional[int] = Field(
        default=None,
        ge=0,
        description="Seconds from build time until the transaction expires"
    )

    model_config = {"populate_by_name": True}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, omitting unset optional values."""
        result: Dict[str, Any] = {
            "baseFee": self.base_fee,
            "maxOperations": self.max_operations,
        }
        if self.timeout is not None:
            result["timeout"] = self.timeout
        return result
