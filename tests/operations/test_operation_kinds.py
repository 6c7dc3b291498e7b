"""
Operation construction, validation and XDR dispatch.
"""

import pytest

from helpers import ZERO_ACCOUNT_ID, ZERO_KEY_HEX, ZERO_MUXED_1234

from stellar_client import (
    AbstractOperation,
    Asset,
    BumpSequenceOperation,
    CreateAccountOperation,
    ManageDataOperation,
    MuxedAccount,
    PaymentOperation,
)
from stellar_client.runtime.errors import (
    InvalidAmountError,
    InvalidStrKeyError,
    ValidationError,
    XdrDecodingError,
)
from stellar_client.xdr import XdrBumpSequenceOp, XdrOperation, XdrOperationType


def _roundtrip(operation: AbstractOperation) -> AbstractOperation:
    return AbstractOperation.from_xdr(XdrOperation.from_bytes(operation.to_xdr().to_bytes()))


class TestPayment:
    def test_amount_normalized(self):
        op = PaymentOperation(ZERO_ACCOUNT_ID, Asset.native(), "10.000")
        assert op.amount == "10"

    def test_muxed_destination(self):
        op = PaymentOperation(ZERO_MUXED_1234, Asset.native(), "1")
        assert op.destination == MuxedAccount(ZERO_ACCOUNT_ID, 1234)
        assert _roundtrip(op) == op

    def test_invalid_amount(self):
        with pytest.raises(InvalidAmountError):
            PaymentOperation(ZERO_ACCOUNT_ID, Asset.native(), "1.00000001")

    def test_xdr_bytes(self):
        op = PaymentOperation(ZERO_ACCOUNT_ID, Asset.native(), "10")
        assert op.to_xdr().to_bytes().hex() == (
            "00000000" + "00000001" + "00000000" + ZERO_KEY_HEX + "00000000" + "0000000005f5e100"
        )


class TestCreateAccount:
    def test_roundtrip(self):
        op = CreateAccountOperation(ZERO_ACCOUNT_ID, "2.5", source_account=ZERO_MUXED_1234)
        decoded = _roundtrip(op)
        assert isinstance(decoded, CreateAccountOperation)
        assert decoded == op
        assert decoded.source_account.id == 1234

    def test_requires_plain_account(self):
        with pytest.raises(InvalidStrKeyError):
            CreateAccountOperation(ZERO_MUXED_1234, "1")


class TestManageData:
    def test_string_value_encoded(self):
        op = ManageDataOperation("name", "value")
        assert op.value == b"value"
        assert _roundtrip(op) == op

    def test_delete(self):
        op = ManageDataOperation("name")
        encoded = op.to_xdr().to_bytes().hex()
        assert encoded.endswith("00000004" + b"name".hex() + "00000000")

    @pytest.mark.parametrize("key,value", [
        ("", None),
        ("k" * 65, None),
        ("k", b"v" * 65),
    ])
    def test_limits(self, key, value):
        with pytest.raises(ValidationError):
            ManageDataOperation(key, value)


class TestBumpSequence:
    def test_xdr(self):
        op = BumpSequenceOperation(200)
        assert op.to_xdr().to_bytes().hex() == "00000000" "0000000b" "00000000000000c8"

    @pytest.mark.parametrize("bump_to", [-1, 2 ** 63, "5"])
    def test_invalid(self, bump_to):
        with pytest.raises(ValidationError):
            BumpSequenceOperation(bump_to)


class TestDispatch:
    def test_equality_is_type_sensitive(self):
        assert BumpSequenceOperation(1) == BumpSequenceOperation(1)
        assert BumpSequenceOperation(1) != BumpSequenceOperation(2)
        assert BumpSequenceOperation(1) != ManageDataOperation("k")

    def test_unregistered_type(self):
        record = XdrOperation(XdrOperationType.SET_OPTIONS, XdrBumpSequenceOp(1))
        with pytest.raises(XdrDecodingError):
            AbstractOperation.from_xdr(record)
