"""String encodings of key nodes: address, WIF and extended keys."""

from .constants import KEY_PREFIX
from .crypto.keys import PublicKey
from .exceptions import UnsupportedOperation
from .node import (
    ExtendedKeyDerived,
    KeyNode,
    RawKeyDerived,
    SeedDerived,
    private_key_of,
    public_key_of,
    variant_name,
)
from .types.common import Address

__all__ = [
    "private_extended_key",
    "public_extended_key",
    "address",
    "private_key_wif",
    "public_key_from_address",
]


def private_extended_key(node: KeyNode) -> str:
    """
    Serialize the node as an xprv string.

    Raises:
        UnsupportedOperation: For raw-key or public-only nodes
    """
    match node:
        case SeedDerived(state=state) | ExtendedKeyDerived(state=state):
            return state.to_xprv()
        case RawKeyDerived():
            raise UnsupportedOperation("export a private extended key", variant_name(node))
    raise TypeError(f"Not a key node: {type(node).__name__}")


def public_extended_key(node: KeyNode) -> str:
    """
    Serialize the node as an xpub string.

    Raises:
        UnsupportedOperation: For raw-key nodes
    """
    match node:
        case SeedDerived(state=state) | ExtendedKeyDerived(state=state):
            return state.to_xpub()
        case RawKeyDerived():
            raise UnsupportedOperation("export a public extended key", variant_name(node))
    raise TypeError(f"Not a key node: {type(node).__name__}")


def address(node: KeyNode, prefix: str = KEY_PREFIX) -> Address:
    """Public key string of the node, e.g. ``EOS6MRy...``."""
    return public_key_of(node).to_string(prefix)


def private_key_wif(node: KeyNode) -> str:
    """
    WIF of the node's private key (version ``0x80``, uncompressed).

    Raises:
        UnsupportedOperation: For public-only nodes
    """
    return private_key_of(node, "export a WIF private key").wif()


def public_key_from_address(value: str) -> PublicKey:
    """Parse an ``EOS...`` or ``PUB_K1_...`` string."""
    return PublicKey.from_string(value)
