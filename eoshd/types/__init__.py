"""Type definitions for eoshd."""

# Common types
from ..types.common import (
    HexStr,
    PrivateKeyBytes,
    PublicKeyBytes,
    ChainCode,
    Fingerprint,
    Address,
    Signature,
    AccountName,
    TxId,
    Timestamp,
    AmountLike,
)

# Transaction types
from ..types.transaction import (
    PermissionLevel,
    Action,
    TransactionHeader,
    Transaction,
    SignedTransaction,
    TransferParams,
    AccountRegistrationParams,
)

__all__ = [
    # Common
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

    # Transaction
    "PermissionLevel",
    "Action",
    "TransactionHeader",
    "Transaction",
    "SignedTransaction",
    "TransferParams",
    "AccountRegistrationParams",
]
