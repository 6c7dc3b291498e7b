"""
TransactionBuilder and Account tests.
"""

import pydantic
import pytest

from helpers import ZERO_ACCOUNT_ID, ZERO_MUXED_1234, mk_payment

from stellar_client import (
    Account,
    Memo,
    TimeBounds,
    Transaction,
    TransactionBuilder,
    TransactionOptions,
)
from stellar_client.runtime.errors import (
    InvalidOperationList,
    InvalidOperationType,
    TooManyOperations,
    ValidationError,
)


@pytest.fixture
def account():
    return Account(ZERO_ACCOUNT_ID, 99)


class TestAccount:
    def test_sequence_tracking(self, account):
        assert account.sequence_number == 99
        assert account.get_incremented_sequence_number() == 100
        assert account.sequence_number == 99
        account.increment_sequence_number()
        assert account.sequence_number == 100

    def test_muxed_address(self):
        account = Account(ZERO_MUXED_1234, 1)
        assert account.account_id == ZERO_ACCOUNT_ID
        assert account.muxed_account.id == 1234
        assert not account.keypair.can_sign()

    def test_non_integer_sequence(self):
        with pytest.raises(ValidationError):
            Account(ZERO_ACCOUNT_ID, "1")


class TestTransactionBuilder:
    """Test builder defaults, limits and sequence handling."""

    def test_build_matches_reference_transaction(self, account, simple_transaction):
        tx = TransactionBuilder(account).add_operation(mk_payment()).build()
        assert tx == simple_transaction
        assert tx.to_xdr().to_bytes() == simple_transaction.to_xdr().to_bytes()

    def test_build_advances_sequence(self, account):
        first = TransactionBuilder(account).add_operation(mk_payment()).build()
        second = TransactionBuilder(account).add_operation(mk_payment()).build()
        assert first.sequence_number == 100
        assert second.sequence_number == 101
        assert account.sequence_number == 101

    def test_fee_scales_with_operations(self, account):
        tx = (TransactionBuilder(account)
              .add_operations([mk_payment(), mk_payment()])
              .set_max_operation_fee(250)
              .build())
        assert tx.fee == 500

    def test_options_base_fee(self, account):
        options = TransactionOptions(base_fee=300)
        tx = TransactionBuilder(account, options).add_operation(mk_payment()).build()
        assert tx.fee == 300

    def test_empty_build_fails(self, account):
        with pytest.raises(InvalidOperationList):
            TransactionBuilder(account).build()
        assert account.sequence_number == 99

    def test_rejects_non_operation(self, account):
        with pytest.raises(InvalidOperationType):
            TransactionBuilder(account).add_operation("payment")

    def test_operation_limit(self, account):
        options = TransactionOptions(max_operations=2)
        builder = TransactionBuilder(account, options).add_operations([mk_payment(), mk_payment()])
        with pytest.raises(TooManyOperations):
            builder.add_operation(mk_payment())
        assert len(builder.operations) == 2

    def test_memo(self, account):
        tx = (TransactionBuilder(account)
              .add_operation(mk_payment())
              .add_memo(Memo.text("hello"))
              .build())
        assert tx.memo == Memo.text("hello")

    def test_memo_only_once(self, account):
        builder = TransactionBuilder(account).add_memo(Memo.id(1))
        with pytest.raises(ValidationError):
            builder.add_memo(Memo.id(2))

    def test_timeout(self, account):
        tx = (TransactionBuilder(account)
              .add_operation(mk_payment())
              .set_timeout(30, now=1_000)
              .build())
        assert tx.time_bounds == TimeBounds(0, 1_030)

    def test_timeout_keeps_min_time(self, account):
        tx = (TransactionBuilder(account)
              .add_operation(mk_payment())
              .set_time_bounds(TimeBounds(500, 600))
              .set_timeout(0)
              .build())
        assert tx.time_bounds == TimeBounds(500, 0)

    def test_negative_timeout(self, account):
        with pytest.raises(ValidationError):
            TransactionBuilder(account).set_timeout(-1)

    def test_transaction_builder_factory(self, account):
        builder = Transaction.builder(account, TransactionOptions(base_fee=200))
        assert isinstance(builder, TransactionBuilder)
        tx = builder.add_operation(mk_payment()).build()
        assert tx.fee == 200
        assert tx.sequence_number == 100

    def test_options_timeout(self, account):
        options = TransactionOptions(timeout=60)
        tx = TransactionBuilder(account, options).add_operation(mk_payment()).build()
        assert tx.time_bounds is not None
        assert tx.time_bounds.min_time == 0
        assert tx.time_bounds.max_time > 60


class TestTransactionOptions:
    def test_defaults(self):
        options = TransactionOptions()
        assert options.base_fee == 100
        assert options.max_operations == 100
        assert options.timeout is None
        assert options.to_dict() == {"baseFee": 100, "maxOperations": 100}

    def test_aliases_and_to_dict(self):
        options = TransactionOptions(baseFee=200, maxOperations=10, timeout=5)
        assert options.to_dict() == {
            "baseFee": 200,
            "maxOperations": 10,
            "timeout": 5,
        }

    @pytest.mark.parametrize("kwargs", [
        {"base_fee": -1},
        {"max_operations": 0},
        {"max_operations": 101},
        {"timeout": -5},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(pydantic.ValidationError):
            TransactionOptions(**kwargs)
