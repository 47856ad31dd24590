"""
eoshd

Hierarchical deterministic keys and offline-signed transactions for
EOSIO-family chains. Nothing in this package talks to the network: signed
transactions are returned for a separate client to broadcast.
"""

from .config import ChainConfig, DEFAULT_CONFIG
from .crypto import PrivateKey, PublicKey
from .derivation import derive_child, derive_path
from .encoder import address, private_extended_key, private_key_wif, public_extended_key
from .exceptions import (
    EosHDError,
    ValidationError,
    InvalidSeed,
    InvalidExtendedKey,
    InvalidPrivateKey,
    InvalidWIF,
    InvalidMnemonic,
    InvalidDerivationPath,
    InvalidAmountOrSymbol,
    InvalidAccountName,
    UnsupportedOperation,
    CryptoError,
)
from .hdnode import HDNode
from .modules import TransactionAuthor, TransactionHeaderBuilder
from .modules import build_header, generate_account_registration, generate_transfer
from .node import (
    ExtendedKeyDerived,
    KeyNode,
    RawKeyDerived,
    SeedDerived,
    from_extended_key,
    from_mnemonic,
    from_private_key,
    from_seed,
    from_wif_encoded,
    generate_mnemonic,
)
from .types import AccountRegistrationParams, SignedTransaction, TransferParams

__version__ = "1.0.0"

__all__ = [
    # Facade
    "HDNode",

    # Config
    "ChainConfig",
    "DEFAULT_CONFIG",

    # Key material
    "KeyNode",
    "SeedDerived",
    "ExtendedKeyDerived",
    "RawKeyDerived",
    "from_seed",
    "from_extended_key",
    "from_private_key",
    "from_wif_encoded",
    "generate_mnemonic",
    "from_mnemonic",

    # Derivation
    "derive_path",
    "derive_child",

    # Encoding
    "address",
    "private_extended_key",
    "public_extended_key",
    "private_key_wif",

    # Transactions
    "TransactionHeaderBuilder",
    "TransactionAuthor",
    "build_header",
    "generate_transfer",
    "generate_account_registration",
    "TransferParams",
    "AccountRegistrationParams",
    "SignedTransaction",

    # Crypto
    "PrivateKey",
    "PublicKey",

    # Exceptions
    "EosHDError",
    "ValidationError",
    "InvalidSeed",
    "InvalidExtendedKey",
    "InvalidPrivateKey",
    "InvalidWIF",
    "InvalidMnemonic",
    "InvalidDerivationPath",
    "InvalidAmountOrSymbol",
    "InvalidAccountName",
    "UnsupportedOperation",
    "CryptoError",
]
