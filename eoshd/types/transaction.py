"""Transaction-related type definitions for eoshd."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Tuple

from ..constants import DEFAULT_CREATOR, ACTIVE_PERMISSION
from ..exceptions import ValidationError
from ..types.common import AccountName, HexStr, Signature, Timestamp, TxId

__all__ = [
    "PermissionLevel",
    "Action",
    "TransactionHeader",
    "Transaction",
    "SignedTransaction",
    "TransferParams",
    "AccountRegistrationParams",
]


@dataclass(frozen=True)
class PermissionLevel:
    """Authorization entry ``actor@permission``."""
    actor: AccountName
    permission: str = ACTIVE_PERMISSION

    def to_dict(self) -> Dict[str, str]:
        return {"actor": self.actor, "permission": self.permission}

    def __str__(self) -> str:
        return f"{self.actor}@{self.permission}"


@dataclass(frozen=True)
class Action:
    """Contract action with both decoded and ABI-packed data."""
    account: AccountName
    name: str
    authorization: Tuple[PermissionLevel, ...]
    data: Mapping[str, Any]
    hex_data: HexStr

    def to_dict(self) -> Dict[str, Any]:
        return {
            "account": self.account,
            "name": self.name,
            "authorization": [auth.to_dict() for auth in self.authorization],
            "data": dict(self.data),
            "hex_data": self.hex_data,
        }


@dataclass(frozen=True)
class TransactionHeader:
    """
    Header fields needed to sign a transaction offline.

    ``region`` is kept for compatibility with older tooling and is not part
    of the packed transaction.
    """
    expiration: Timestamp
    ref_block_num: int
    ref_block_prefix: int
    region: int = 0
    max_net_usage_words: int = 0
    max_cpu_usage_ms: int = 0
    delay_sec: int = 0
    context_free_actions: Tuple[Action, ...] = ()

    @property
    def expiration_iso(self) -> str:
        """Expiration as ``YYYY-MM-DDTHH:MM:SS`` (UTC)."""
        moment = datetime.fromtimestamp(self.expiration, tz=timezone.utc)
        return moment.strftime("%Y-%m-%dT%H:%M:%S")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "expiration": self.expiration_iso,
            "region": self.region,
            "ref_block_num": self.ref_block_num,
            "ref_block_prefix": self.ref_block_prefix,
            "max_net_usage_words": self.max_net_usage_words,
            "max_cpu_usage_ms": self.max_cpu_usage_ms,
            "delay_sec": self.delay_sec,
            "context_free_actions": [a.to_dict() for a in self.context_free_actions],
        }


@dataclass(frozen=True)
class Transaction:
    """Unsigned transaction: header plus ordered actions."""
    header: TransactionHeader
    actions: Tuple[Action, ...]
    transaction_extensions: Tuple[Any, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        result = self.header.to_dict()
        result["actions"] = [a.to_dict() for a in self.actions]
        result["transaction_extensions"] = list(self.transaction_extensions)
        return result


@dataclass(frozen=True)
class SignedTransaction:
    """Signed transaction ready for a later broadcast step."""
    transaction: Transaction
    signatures: Tuple[Signature, ...]
    packed_trx: HexStr
    transaction_id: TxId
    chain_id: HexStr

    @property
    def header(self) -> TransactionHeader:
        return self.transaction.header

    @property
    def actions(self) -> Tuple[Action, ...]:
        return self.transaction.actions

    def to_dict(self) -> Dict[str, Any]:
        """Structure returned by offline eosjs ``transaction`` calls."""
        return {
            "transaction_id": self.transaction_id,
            "transaction": {
                "compression": "none",
                "transaction": self.transaction.to_dict(),
                "signatures": list(self.signatures),
            },
        }

    def to_push_dict(self) -> Dict[str, Any]:
        """Body for the chain's ``push_transaction`` endpoint."""
        return {
            "signatures": list(self.signatures),
            "compression": "none",
            "packed_context_free_data": "",
            "packed_trx": self.packed_trx,
        }


def _params_from_mapping(data: Mapping[str, Any], aliases: Mapping[str, str]) -> Dict[str, Any]:
    if not isinstance(data, Mapping):
        raise ValidationError("Transaction parameters must be a mapping")
    return {aliases.get(key, key): value for key, value in data.items()}


@dataclass(frozen=True)
class TransferParams:
    """Parameters of a token transfer."""
    from_account: str
    to: str
    amount: Any
    symbol: str
    ref_block_num: int
    ref_block_prefix: int
    expiration: int
    memo: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TransferParams":
        """Build from a mapping; ``from`` maps to ``from_account``."""
        values = _params_from_mapping(data, {
            "from": "from_account",
            "refBlockNum": "ref_block_num",
            "refBlockPrefix": "ref_block_prefix",
        })
        try:
            return cls(**values)
        except TypeError as e:
            raise ValidationError(f"Invalid transfer parameters: {e}") from e


@dataclass(frozen=True)
class AccountRegistrationParams:
    """Parameters of a new account registration."""
    account_name: str
    ref_block_num: int
    ref_block_prefix: int
    expiration: int
    creator: str = DEFAULT_CREATOR

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AccountRegistrationParams":
        values = _params_from_mapping(data, {
            "accountName": "account_name",
            "refBlockNum": "ref_block_num",
            "refBlockPrefix": "ref_block_prefix",
        })
        try:
            return cls(**values)
        except TypeError as e:
            raise ValidationError(f"Invalid registration parameters: {e}") from e
