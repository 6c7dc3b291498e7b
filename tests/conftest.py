"""
Shared fixtures: deterministic keys, the test network and a minimal
transaction.
"""
import pathlib
import sys

import pytest

# Make the helpers package importable from every test directory.
TESTS_DIR = pathlib.Path(__file__).parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from helpers import ZERO_ACCOUNT_ID, mk_keypair, mk_transaction  # noqa: E402

from stellar_client import Network  # noqa: E402


@pytest.fixture
def testnet():
    return Network.TESTNET


@pytest.fixture
def keypair():
    """Deterministic keypair with seed 0x00..01."""
    return mk_keypair(1)


@pytest.fixture
def other_keypair():
    return mk_keypair(2)


@pytest.fixture
def zero_account_id():
    return ZERO_ACCOUNT_ID


@pytest.fixture
def simple_transaction():
    """Zero-key source, sequence 100, one native payment of 10 to the zero key."""
    return mk_transaction()
