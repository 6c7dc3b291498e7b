"""Network passphrases and identifiers."""

from __future__ import annotations

from .codec.hashes import network_id

PUBLIC_NETWORK_PASSPHRASE = "Public Global Stellar Network ; September 2015"
TESTNET_NETWORK_PASSPHRASE = "Test SDF Network ; September 2015"


class Network:
    """A network is identified by the SHA-256 of its passphrase."""

    PUBLIC: "Network"
    TESTNET: "Network"

    def __init__(self, network_passphrase: str):
        self.network_passphrase = network_passphrase

    def network_id(self) -> bytes:
        return network_id(self.network_passphrase)

    @classmethod
    def public(cls) -> Network:
        return cls(PUBLIC_NETWORK_PASSPHRASE)

    @classmethod
    def testnet(cls) -> Network:
        return cls(TESTNET_NETWORK_PASSPHRASE)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Network):
            return NotImplemented
        return self.network_passphrase == other.network_passphrase

    def __hash__(self) -> int:
        return hash(self.network_passphrase)

    def __repr__(self) -> str:
        return f"Network('{self.network_passphrase}')"


Network.PUBLIC = Network.public()
Network.TESTNET = Network.testnet()
