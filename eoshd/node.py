"""
Key nodes and the constructors that produce them.

A key node is one of three variants:

- ``SeedDerived``: master node built from a seed, keeps the seed.
- ``ExtendedKeyDerived``: node parsed from an extended key or produced by
  derivation. It is public-only when built from an xpub.
- ``RawKeyDerived``: a bare key pair. It has no chain code and cannot derive
  children or export extended keys.

All variants are immutable.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .crypto.bip39 import generate_mnemonic as _generate_mnemonic, mnemonic_to_seed
from .crypto.hd import ExtendedKey
from .crypto.keys import PrivateKey, PublicKey
from .exceptions import UnsupportedOperation
from .utils.validation import validate_seed_hex

__all__ = [
    "SeedDerived",
    "ExtendedKeyDerived",
    "RawKeyDerived",
    "KeyNode",
    "from_seed",
    "from_extended_key",
    "from_private_key",
    "from_wif_encoded",
    "generate_mnemonic",
    "from_mnemonic",
    "public_key_of",
    "private_key_of",
    "variant_name",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedDerived:
    """Master node that retains its seed."""
    seed: bytes
    state: ExtendedKey

    def __repr__(self) -> str:
        return f"SeedDerived({self.state!r})"


@dataclass(frozen=True)
class ExtendedKeyDerived:
    """Derivable node without a seed."""
    state: ExtendedKey


@dataclass(frozen=True)
class RawKeyDerived:
    """Terminal node holding only a key pair."""
    private_key: PrivateKey
    public_key: PublicKey


KeyNode = Union[SeedDerived, ExtendedKeyDerived, RawKeyDerived]


def from_seed(seed_hex: str) -> SeedDerived:
    """
    Build the master node from a hex seed.

    Raises:
        InvalidSeed: If the seed is malformed or yields an invalid master key
    """
    seed = validate_seed_hex(seed_hex)
    node = SeedDerived(seed=seed, state=ExtendedKey.from_seed(seed))
    logger.debug("Created master node from seed")
    return node


def from_extended_key(xkey: str) -> ExtendedKeyDerived:
    """
    Build a node from a serialized xprv or xpub.

    Raises:
        InvalidExtendedKey: On bad checksum or format
    """
    state = ExtendedKey.from_string(xkey)
    logger.debug(f"Created node from extended key at depth {state.depth}")
    return ExtendedKeyDerived(state=state)


def from_private_key(raw_key: bytes) -> RawKeyDerived:
    """
    Build a terminal node from a 32-byte private key.

    Raises:
        InvalidPrivateKey: If length or scalar range is invalid
    """
    private_key = PrivateKey(raw_key)
    return RawKeyDerived(private_key=private_key, public_key=private_key.public_key())


def from_wif_encoded(wif: str) -> RawKeyDerived:
    """
    Build a terminal node from a WIF string.

    Raises:
        InvalidWIF: If the string cannot be decoded
    """
    private_key = PrivateKey.from_wif(wif)
    return RawKeyDerived(private_key=private_key, public_key=private_key.public_key())


def generate_mnemonic(strength: int = 128) -> str:
    """Generate a BIP39 mnemonic phrase."""
    return _generate_mnemonic(strength)


def from_mnemonic(phrase: str, passphrase: str = "") -> SeedDerived:
    """
    Build the master node from a BIP39 mnemonic.

    Raises:
        InvalidMnemonic: If the phrase fails validation
    """
    return from_seed(mnemonic_to_seed(phrase, passphrase).hex())


def variant_name(node: KeyNode) -> str:
    match node:
        case SeedDerived():
            return "seed-derived"
        case ExtendedKeyDerived():
            return "extended-key-derived"
        case RawKeyDerived():
            return "raw-key"
    raise TypeError(f"Not a key node: {type(node).__name__}")


def public_key_of(node: KeyNode) -> PublicKey:
    """Public key of any node variant."""
    match node:
        case SeedDerived(state=state) | ExtendedKeyDerived(state=state):
            return PublicKey(state.public_key)
        case RawKeyDerived(public_key=public_key):
            return public_key
    raise TypeError(f"Not a key node: {type(node).__name__}")


def private_key_of(node: KeyNode, operation: str = "access the private key") -> PrivateKey:
    """
    Private key of a node.

    Raises:
        UnsupportedOperation: If the node is public-only
    """
    secret: Optional[bytes]
    match node:
        case SeedDerived(state=state) | ExtendedKeyDerived(state=state):
            secret = state.private_key
        case RawKeyDerived(private_key=private_key):
            return private_key
        case _:
            raise TypeError(f"Not a key node: {type(node).__name__}")

    if secret is None:
        raise UnsupportedOperation(operation, "public-only")
    return PrivateKey(secret)
