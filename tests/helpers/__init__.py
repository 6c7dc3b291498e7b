from .factories import ZERO_ACCOUNT_ID, ZERO_MUXED_1234, mk_keypair, mk_payment, mk_transaction
from .parity import assert_hex_equal
from .vectors import BODY_HEX, TESTNET_ID_HEX, TX_HASH_HEX, ZERO_KEY_HEX

__all__ = [
    "ZERO_ACCOUNT_ID",
    "ZERO_MUXED_1234",
    "mk_keypair",
    "mk_payment",
    "mk_transaction",
    "assert_hex_equal",
    "BODY_HEX",
    "TESTNET_ID_HEX",
    "TX_HASH_HEX",
    "ZERO_KEY_HEX",
]
