"""Child key derivation over key nodes."""

import logging

from .crypto.hd import ExtendedKey
from .exceptions import InvalidDerivationPath, UnsupportedOperation
from .node import ExtendedKeyDerived, KeyNode, RawKeyDerived, SeedDerived, variant_name

__all__ = ["derive_path", "derive_child"]

logger = logging.getLogger(__name__)


def _derivable_state(node: KeyNode, operation: str) -> ExtendedKey:
    match node:
        case SeedDerived(state=state) | ExtendedKeyDerived(state=state):
            return state
        case RawKeyDerived():
            raise UnsupportedOperation(operation, variant_name(node))
    raise TypeError(f"Not a key node: {type(node).__name__}")


def derive_path(node: KeyNode, path: str) -> ExtendedKeyDerived:
    """
    Derive the descendant at ``path`` (``m/44'/194'/0'/0/0`` form).

    The given node is not modified.

    Raises:
        UnsupportedOperation: For raw-key nodes, or hardened steps from a
            public-only node
        InvalidDerivationPath: If the path is malformed
    """
    state = _derivable_state(node, "derive a path")
    child = state.derive_path(path)
    logger.debug(f"Derived {path} to depth {child.depth}")
    return ExtendedKeyDerived(state=child)


def derive_child(node: KeyNode, index: int) -> ExtendedKeyDerived:
    """
    Derive a single child; ``index >= 2**31`` is hardened.

    Raises:
        UnsupportedOperation: For raw-key nodes, or a hardened index from a
            public-only node
        InvalidDerivationPath: If index is outside ``[0, 2**32)``
    """
    state = _derivable_state(node, "derive a child")
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidDerivationPath(f"Child index must be an integer, got {index!r}")
    child = state.derive(index)
    logger.debug(f"Derived child {index} at depth {child.depth}")
    return ExtendedKeyDerived(state=child)
