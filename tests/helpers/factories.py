"""
Test factories for creating test data consistently.

Provides deterministic keypairs, accounts and small transactions.
"""

from __future__ import annotations
import secrets
from typing import List, Optional, Union

from stellar_client import (
    Asset,
    KeyPair,
    Memo,
    PaymentOperation,
    TimeBounds,
    Transaction,
)

# Well-known all-zero ed25519 key.
ZERO_ACCOUNT_ID = "GAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAWHF"
# Same key muxed with id 1234.
ZERO_MUXED_1234 = "MAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAE2KA2I"


def mk_keypair(seed: Union[int, bytes, None] = None) -> KeyPair:
    """
    Create an ed25519 keypair for testing.

    Args:
        seed: int or 32 bytes for a deterministic key, None for a random one
    """
    if seed is None:
        seed_bytes = secrets.token_bytes(32)
    elif isinstance(seed, int):
        seed_bytes = seed.to_bytes(32, "big")
    else:
        seed_bytes = seed
    return KeyPair.from_raw_seed(seed_bytes)


def mk_payment(destination: str = ZERO_ACCOUNT_ID, amount: str = "10") -> PaymentOperation:
    return PaymentOperation(destination, Asset.native(), amount)


def mk_transaction(source: str = ZERO_ACCOUNT_ID, sequence_number: int = 100,
                   operations: Optional[List] = None, memo: Optional[Memo] = None,
                   time_bounds: Optional[TimeBounds] = None, fee: Optional[int] = None) -> Transaction:
    if operations is None:
        operations = [mk_payment()]
    return Transaction(source, sequence_number, operations, memo, time_bounds, fee)
