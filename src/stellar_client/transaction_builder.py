"""
Transaction builder.

Collects operations, memo and time bounds for a source account, then
produces a Transaction using the account's next sequence number. Building
advances the account's sequence number so consecutive builds do not collide.
"""

from __future__ import annotations
import logging
import time
from typing import Iterable, List, Optional, Union

from .crypto.keypair import KeyPair
from .memo import Memo
from .muxed_account import MuxedAccount
from .operations import AbstractOperation
from .options import TransactionOptions
from .runtime.errors import (
    InvalidOperationList,
    InvalidOperationType,
    TooManyOperations,
    ValidationError,
)
from .time_bounds import TimeBounds
from .transaction import Transaction

logger = logging.getLogger(__name__)


class Account:
    """
    A source account with a locally tracked sequence number.

    Args:
        account_id: G... or M... address
        sequence_number: Current sequence number as reported by the network
    """

    def __init__(self, account_id: Union[str, MuxedAccount], sequence_number: int):
        if isinstance(sequence_number, bool) or not isinstance(sequence_number, int):
            raise ValidationError(f"Sequence number must be an integer, got {type(sequence_number).__name__}")
        if not isinstance(account_id, MuxedAccount):
            account_id = MuxedAccount.from_account_id(account_id)
        self._muxed_account = account_id
        self._sequence_number = sequence_number

    @property
    def muxed_account(self) -> MuxedAccount:
        return self._muxed_account

    @property
    def account_id(self) -> str:
        return self._muxed_account.account_id

    @property
    def keypair(self) -> KeyPair:
        """Public-only keypair for the underlying G... account."""
        return KeyPair.from_account_id(self._muxed_account.account_id)

    @property
    def sequence_number(self) -> int:
        return self._sequence_number

    def get_incremented_sequence_number(self) -> int:
        return self._sequence_number + 1

    def increment_sequence_number(self) -> None:
        self._sequence_number += 1

    def __repr__(self) -> str:
        return f"Account('{self._muxed_account}', sequence_number={self._sequence_number})"


class TransactionBuilder:
    """
    Fluent builder for Transaction.

    Every setter returns the builder, so calls can be chained:

        tx = (TransactionBuilder(account)
              .add_operation(op)
              .add_memo(Memo.text("hello"))
              .set_timeout(30)
              .build())
    """

    def __init__(self, source_account: Account, options: Optional[TransactionOptions] = None):
        self._source_account = source_account
        self._options = options or TransactionOptions()
        self._operations: List[AbstractOperation] = []
        self._memo: Optional[Memo] = None
        self._time_bounds: Optional[TimeBounds] = None
        self._max_operation_fee = self._options.base_fee
        if self._options.timeout is not None:
            self.set_timeout(self._options.timeout)

    @property
    def operations(self) -> List[AbstractOperation]:
        return list(self._operations)

    def add_operation(self, operation: AbstractOperation) -> TransactionBuilder:
        """
        Append an operation.

        Raises:
            InvalidOperationType: If `operation` is not an AbstractOperation
            TooManyOperations: If the configured operation limit is exceeded
        """
        if not isinstance(operation, AbstractOperation):
            raise InvalidOperationType(details={"type": type(operation).__name__})
        if len(self._operations) >= self._options.max_operations:
            raise TooManyOperations(
                f"A transaction can hold at most {self._options.max_operations} operations"
            )
        self._operations.append(operation)
        return self

    def add_operations(self, operations: Iterable[AbstractOperation]) -> TransactionBuilder:
        for operation in operations:
            self.add_operation(operation)
        return self

    def add_memo(self, memo: Memo) -> TransactionBuilder:
        """Set the memo; a transaction holds at most one."""
        if self._memo is not None:
            raise ValidationError("Memo has already been set")
        self._memo = memo
        return self

    def set_time_bounds(self, time_bounds: TimeBounds) -> TransactionBuilder:
        self._time_bounds = time_bounds
        return self

    def set_timeout(self, seconds: int, now: Optional[int] = None) -> TransactionBuilder:
        """
        Expire the transaction `seconds` from now.

        A timeout of 0 removes the upper bound. An existing lower bound is
        kept.

        Args:
            seconds: Seconds until expiry
            now: Current time in epoch seconds (defaults to the wall clock)
        """
        if seconds < 0:
            raise ValidationError(f"Timeout must be non-negative, got {seconds}")
        min_time = self._time_bounds.min_time if self._time_bounds is not None else 0
        max_time = 0 if seconds == 0 else int(now if now is not None else time.time()) + seconds
        self._time_bounds = TimeBounds(min_time, max_time)
        return self

    def set_max_operation_fee(self, fee: int) -> TransactionBuilder:
        """Fee per operation in stroops; not checked against the network minimum."""
        self._max_operation_fee = fee
        return self

    def build(self) -> Transaction:
        """
        Build the transaction and advance the source account's sequence number.

        Raises:
            InvalidOperationList: If no operation was added
        """
        if not self._operations:
            raise InvalidOperationList()
        fee = self._max_operation_fee * len(self._operations)
        transaction = Transaction(
            self._source_account.muxed_account,
            self._source_account.get_incremented_sequence_number(),
            self._operations,
            self._memo,
            self._time_bounds,
            fee,
        )
        self._source_account.increment_sequence_number()
        logger.debug(
            f"Built transaction for {self._source_account.account_id} "
            f"seq={transaction.sequence_number} ops={len(self._operations)} fee={fee}"
        )
        return transaction
