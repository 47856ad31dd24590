"""Object-style facade over key nodes."""

from typing import Any, Mapping, Optional, Union

from . import derivation, encoder, node as keynode
from .config import ChainConfig, DEFAULT_CONFIG
from .modules.transaction import TransactionAuthor
from .node import KeyNode
from .types.common import Address
from .types.transaction import AccountRegistrationParams, SignedTransaction, TransferParams

__all__ = ["HDNode"]


class HDNode:
    """
    HD key node with derivation, key export and offline transaction authoring.

    Every method that derives returns a new ``HDNode``; the receiver keeps its
    key material.
    """

    def __init__(self, node: KeyNode, config: Optional[ChainConfig] = None) -> None:
        """
        Wrap a key node.

        Args:
            node: Any key node variant
            config: Target chain settings used for addresses and transactions
        """
        self._node = node
        self._config = config or DEFAULT_CONFIG

    @property
    def node(self) -> KeyNode:
        return self._node

    @property
    def config(self) -> ChainConfig:
        return self._config

    @property
    def is_derivable(self) -> bool:
        return not isinstance(self._node, keynode.RawKeyDerived)

    # Construction

    @staticmethod
    def generate_mnemonic(strength: int = 128) -> str:
        return keynode.generate_mnemonic(strength)

    @classmethod
    def from_mnemonic(
        cls,
        mnemonic: str,
        passphrase: str = "",
        config: Optional[ChainConfig] = None
    ) -> "HDNode":
        return cls(keynode.from_mnemonic(mnemonic, passphrase), config)

    @classmethod
    def from_seed(cls, seed: str, config: Optional[ChainConfig] = None) -> "HDNode":
        """Master node from a hex seed."""
        return cls(keynode.from_seed(seed), config)

    from_master_seed = from_seed

    @classmethod
    def from_extended_key(cls, extended_key: str, config: Optional[ChainConfig] = None) -> "HDNode":
        return cls(keynode.from_extended_key(extended_key), config)

    @classmethod
    def from_private_key(cls, wif: str, config: Optional[ChainConfig] = None) -> "HDNode":
        """Terminal node from a WIF string."""
        return cls(keynode.from_wif_encoded(wif), config)

    @classmethod
    def from_raw_private_key(cls, key: bytes, config: Optional[ChainConfig] = None) -> "HDNode":
        """Terminal node from 32 raw private key bytes."""
        return cls(keynode.from_private_key(key), config)

    # Derivation

    def derive_path(self, path: str) -> "HDNode":
        return HDNode(derivation.derive_path(self._node, path), self._config)

    def derive_child(self, index: int) -> "HDNode":
        return HDNode(derivation.derive_child(self._node, index), self._config)

    # Encoding

    def get_private_extended_key(self) -> str:
        return encoder.private_extended_key(self._node)

    def get_public_extended_key(self) -> str:
        return encoder.public_extended_key(self._node)

    def get_address(self) -> Address:
        return encoder.address(self._node, self._config.key_prefix)

    def get_private_key(self) -> str:
        """WIF-encoded private key."""
        return encoder.private_key_wif(self._node)

    # Transactions

    def generate_transaction(
        self,
        params: Union[TransferParams, Mapping[str, Any]],
        now: Optional[float] = None
    ) -> SignedTransaction:
        """Offline-signed token transfer; see ``TransactionAuthor.generate_transfer``."""
        return TransactionAuthor(self._config).generate_transfer(params, self._node, now=now)

    def register_account(
        self,
        params: Union[AccountRegistrationParams, Mapping[str, Any]],
        now: Optional[float] = None
    ) -> SignedTransaction:
        """Offline-signed account registration."""
        return TransactionAuthor(self._config).generate_account_registration(
            params, self._node, now=now
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HDNode):
            return False
        return self._node == other._node and self._config == other._config

    def __repr__(self) -> str:
        return f"HDNode({keynode.variant_name(self._node)}, {self.get_address()})"
