"""Common type definitions for eoshd."""

from typing import NewType, Union
from decimal import Decimal

__all__ = [
    "HexStr",
    "PrivateKeyBytes",
    "PublicKeyBytes",
    "ChainCode",
    "Fingerprint",
    "Address",
    "Signature",
    "AccountName",
    "TxId",
    "Timestamp",
    "AmountLike",
]

# Basic types
HexStr = NewType("HexStr", str)
"""Hexadecimal string representation."""

Timestamp = NewType("Timestamp", int)
"""Unix timestamp in whole seconds."""

# Crypto types
PrivateKeyBytes = NewType("PrivateKeyBytes", bytes)
"""32-byte private key."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""33-byte compressed public key."""

ChainCode = NewType("ChainCode", bytes)
"""32-byte BIP32 chain code."""

Fingerprint = NewType("Fingerprint", bytes)
"""4-byte BIP32 key fingerprint."""

Address = NewType("Address", str)
"""Public key string such as ``EOS6MRy...``."""

Signature = NewType("Signature", str)
"""Signature string such as ``SIG_K1_...``."""

# Chain types
AccountName = NewType("AccountName", str)
"""Chain account name (up to 13 characters)."""

TxId = NewType("TxId", str)
"""Transaction ID (hex sha256 of the packed transaction)."""

# Type aliases
AmountLike = Union[str, int, Decimal]
"""Amount accepted when building an asset string."""
