"""
Value type tests: memo, time bounds, assets, amounts and muxed accounts.
"""

from datetime import datetime, timezone

import pydantic
import pytest

from helpers import ZERO_ACCOUNT_ID, ZERO_KEY_HEX, ZERO_MUXED_1234

from stellar_client import Asset, Memo, MuxedAccount, Network, TimeBounds
from stellar_client.asset import from_stroops, to_stroops
from stellar_client.runtime.errors import (
    InvalidAmountError,
    InvalidAssetError,
    InvalidKeyError,
    InvalidMemoError,
    InvalidStrKeyError,
)
from stellar_client.xdr import XdrMemo, XdrMemoType, XdrMuxedAccount


class TestMemo:
    """Test memo construction and wire encoding."""

    def test_none(self):
        memo = Memo.none()
        assert memo.is_none()
        assert memo.to_xdr().to_bytes().hex() == "00000000"

    def test_text_xdr(self):
        assert Memo.text("hi").to_xdr().to_bytes().hex() == "00000001" "00000002" "68690000"

    def test_text_limit(self):
        Memo.text("x" * 28)
        with pytest.raises(InvalidMemoError):
            Memo.text("x" * 29)
        # 28 characters but 56 bytes
        with pytest.raises(InvalidMemoError):
            Memo.text("é" * 28)

    def test_text_bytes(self):
        memo = Memo.text(b"\xff\xfeabc")
        assert memo.to_xdr().to_bytes().hex() == "00000001" "00000005" "fffe616263000000"
        assert Memo.from_xdr(XdrMemo.from_bytes(memo.to_xdr().to_bytes())) == memo
        with pytest.raises(InvalidMemoError):
            Memo.text(b"\x00" * 29)

    def test_utf8_bytes_decode_to_str(self):
        decoded = Memo.from_xdr(XdrMemo.from_bytes(Memo.text("héllo".encode("utf-8")).to_xdr().to_bytes()))
        assert decoded.value == "héllo"

    def test_id_xdr(self):
        assert Memo.id(1).to_xdr().to_bytes().hex() == "00000002" "0000000000000001"

    @pytest.mark.parametrize("value", [-1, 2 ** 64, "1", True])
    def test_id_rejects_out_of_range(self, value):
        with pytest.raises(InvalidMemoError):
            Memo.id(value)

    def test_hash_from_hex_is_padded(self):
        memo = Memo.hash("abcd")
        assert memo.value == bytes.fromhex("abcd") + b"\x00" * 30
        assert memo.to_xdr().to_bytes().hex() == "00000003" + "abcd" + "00" * 30

    def test_return_hash(self):
        memo = Memo.return_hash(b"\x01" * 32)
        assert memo.type == XdrMemoType.MEMO_RETURN

    @pytest.mark.parametrize("value", [b"\x01" * 31, "zz"])
    def test_bad_hash(self, value):
        with pytest.raises(InvalidMemoError):
            Memo.hash(value)

    def test_from_xdr(self):
        for memo in [Memo.none(), Memo.text("hello"), Memo.id(42), Memo.hash(b"\x02" * 32)]:
            decoded = Memo.from_xdr(XdrMemo.from_bytes(memo.to_xdr().to_bytes()))
            assert decoded == memo


class TestTimeBounds:
    """Test time bounds validation."""

    def test_positional_and_keyword(self):
        assert TimeBounds(1, 2) == TimeBounds(min_time=1, max_time=2)
        assert TimeBounds(minTime=1, maxTime=2).max_time == 2

    def test_zero_max_means_unbounded(self):
        tb = TimeBounds(500, 0)
        assert tb.to_xdr().to_bytes().hex() == "00000000000001f4" "0000000000000000"

    def test_max_before_min_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            TimeBounds(10, 5)

    def test_negative_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            TimeBounds(-1, 0)

    def test_datetime_input(self):
        start = datetime(2020, 1, 1, tzinfo=timezone.utc)
        end = datetime(2020, 1, 2)
        tb = TimeBounds(start, end)
        assert tb.min_time == 1577836800
        assert tb.max_time == 1577836800 + 86400

    def test_frozen(self):
        tb = TimeBounds(1, 2)
        with pytest.raises(pydantic.ValidationError):
            tb.min_time = 3


class TestAmounts:
    """Test decimal amount to stroop conversion."""

    @pytest.mark.parametrize("amount,stroops", [
        ("10", 100_000_000),
        ("0.0000001", 1),
        ("1.5", 15_000_000),
        (3, 30_000_000),
        ("922337203685.4775807", 2 ** 63 - 1),
    ])
    def test_to_stroops(self, amount, stroops):
        assert to_stroops(amount) == stroops

    @pytest.mark.parametrize("amount", ["0.00000001", "-1", "abc", 1.5, "922337203685.4775808"])
    def test_to_stroops_rejects(self, amount):
        with pytest.raises(InvalidAmountError):
            to_stroops(amount)

    @pytest.mark.parametrize("stroops,text", [
        (100_000_000, "10"),
        (1, "0.0000001"),
        (15_000_000, "1.5"),
        (0, "0"),
    ])
    def test_from_stroops(self, stroops, text):
        assert from_stroops(stroops) == text


class TestAsset:
    """Test native and credit assets."""

    def test_native(self):
        asset = Asset.native()
        assert asset.is_native()
        assert asset.code == "XLM"
        assert asset.to_xdr().to_bytes().hex() == "00000000"

    def test_alphanum4(self):
        asset = Asset.credit("USD", ZERO_ACCOUNT_ID)
        expected = "00000001" + "55534400" + "00000000" + ZERO_KEY_HEX
        assert asset.to_xdr().to_bytes().hex() == expected
        assert Asset.from_xdr(asset.to_xdr()) == asset

    def test_alphanum12(self):
        asset = Asset.credit("LONGCODE", ZERO_ACCOUNT_ID)
        encoded = asset.to_xdr().to_bytes().hex()
        assert encoded.startswith("00000002" + b"LONGCODE".hex() + "00000000")
        assert Asset.from_xdr(asset.to_xdr()) == asset

    @pytest.mark.parametrize("code,issuer", [
        ("", ZERO_ACCOUNT_ID),
        ("THIRTEENCHARS", ZERO_ACCOUNT_ID),
        ("US-D", ZERO_ACCOUNT_ID),
        ("USD", "GBAD"),
        ("USD", None),
    ])
    def test_invalid(self, code, issuer):
        with pytest.raises(InvalidAssetError):
            Asset(code, issuer)


class TestMuxedAccount:
    """Test muxed account parsing and encoding."""

    def test_plain_account(self):
        account = MuxedAccount.from_account_id(ZERO_ACCOUNT_ID)
        assert account.id is None
        assert account.muxed_account_id == ZERO_ACCOUNT_ID
        assert account.to_xdr().to_bytes().hex() == "00000000" + ZERO_KEY_HEX

    def test_muxed_xdr(self):
        account = MuxedAccount(ZERO_ACCOUNT_ID, 1234)
        assert account.muxed_account_id == ZERO_MUXED_1234
        assert account.to_xdr().to_bytes().hex() == "00000100" "00000000000004d2" + ZERO_KEY_HEX

    def test_parse_m_address(self):
        account = MuxedAccount.from_account_id(ZERO_MUXED_1234)
        assert account.account_id == ZERO_ACCOUNT_ID
        assert account.id == 1234
        assert str(account) == ZERO_MUXED_1234

    def test_from_xdr(self):
        xdr = XdrMuxedAccount.from_bytes(bytes.fromhex("00000100" "00000000000004d2" + ZERO_KEY_HEX))
        assert MuxedAccount.from_xdr(xdr) == MuxedAccount(ZERO_ACCOUNT_ID, 1234)

    def test_equality_includes_id(self):
        assert MuxedAccount(ZERO_ACCOUNT_ID) != MuxedAccount(ZERO_ACCOUNT_ID, 0)
        assert hash(MuxedAccount(ZERO_ACCOUNT_ID, 5)) == hash(MuxedAccount(ZERO_ACCOUNT_ID, 5))

    def test_invalid_id(self):
        with pytest.raises(InvalidKeyError):
            MuxedAccount(ZERO_ACCOUNT_ID, -1)

    def test_invalid_account(self):
        with pytest.raises(InvalidStrKeyError):
            MuxedAccount("GBAD")


class TestNetwork:
    def test_constants(self):
        assert Network.TESTNET == Network.testnet()
        assert Network.PUBLIC != Network.TESTNET
        assert Network.TESTNET.network_id().hex() == (
            "cee0302d59844d32bdca915c8203dd44b33fbb7edc19051ea37abedf28ecd472"
        )
