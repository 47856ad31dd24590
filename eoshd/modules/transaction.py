"""Offline authoring of signed transfer and account registration transactions."""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from ..config import ChainConfig, DEFAULT_CONFIG
from ..constants import ACTIVE_PERMISSION
from ..crypto.keys import PrivateKey, PublicKey
from ..crypto.signature import recover_all, sign_digest
from ..exceptions import UnsupportedOperation
from ..modules.header import TransactionHeaderBuilder
from ..node import KeyNode, private_key_of, variant_name
from ..types.common import AccountName, HexStr, TxId
from ..types.transaction import (
    AccountRegistrationParams,
    Action,
    PermissionLevel,
    SignedTransaction,
    Transaction,
    TransferParams,
)
from ..utils.encoding import bytes_to_hex, sha256
from ..utils.serialization import (
    encode_buyrambytes,
    encode_delegatebw,
    encode_newaccount,
    encode_transfer,
    pack_transaction,
)
from ..utils.validation import to_asset_string, validate_account_name, validate_memo

__all__ = [
    "TransactionAuthor",
    "generate_transfer",
    "generate_account_registration",
    "signing_digest",
    "recover_signers",
]

logger = logging.getLogger(__name__)

TransferInput = Union[TransferParams, Mapping[str, Any]]
RegistrationInput = Union[AccountRegistrationParams, Mapping[str, Any]]


def signing_digest(chain_id: bytes, packed_trx: bytes) -> bytes:
    """sha256(chain_id + packed transaction + empty context-free data hash)."""
    return sha256(chain_id + packed_trx + bytes(32))


def recover_signers(signed: SignedTransaction) -> List[PublicKey]:
    """Public keys that produced the transaction's signatures."""
    digest = signing_digest(bytes.fromhex(signed.chain_id), bytes.fromhex(signed.packed_trx))
    return recover_all(list(signed.signatures), digest)


class TransactionAuthor:
    """
    Assembles and signs transactions without contacting the chain.

    Nothing is broadcast; the caller receives a :class:`SignedTransaction`.
    """

    def __init__(
        self,
        config: Optional[ChainConfig] = None,
        header_builder: Optional[TransactionHeaderBuilder] = None
    ) -> None:
        """
        Initialize transaction author.

        Args:
            config: Target chain settings
            header_builder: Header builder (system clock by default)
        """
        self._config = config or DEFAULT_CONFIG
        self._headers = header_builder or TransactionHeaderBuilder()
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def config(self) -> ChainConfig:
        return self._config

    def generate_transfer(
        self,
        params: TransferInput,
        node: KeyNode,
        now: Optional[float] = None
    ) -> SignedTransaction:
        """
        Build and sign a token transfer.

        Args:
            params: Transfer parameters (dataclass or mapping with ``from``)
            node: Key node whose private key authorizes ``from@active``
            now: Current Unix time override

        Returns:
            Signed transaction with a single ``transfer`` action

        Raises:
            InvalidAmountOrSymbol: If amount or symbol is invalid
            InvalidAccountName: If an account name is invalid
            UnsupportedOperation: If the node has no private key
        """
        if not isinstance(params, TransferParams):
            params = TransferParams.from_dict(params)

        private_key = self._signing_key(node)
        from_account = validate_account_name(params.from_account)
        to = validate_account_name(params.to)
        quantity = to_asset_string(params.amount, params.symbol, self._config.precision)
        memo = validate_memo(params.memo)

        header = self._headers.build(
            params.expiration, params.ref_block_num, params.ref_block_prefix, now=now
        )
        data = {"from": from_account, "to": to, "quantity": quantity, "memo": memo}
        action = self._action(
            self._config.token_contract,
            "transfer",
            from_account,
            data,
            encode_transfer(from_account, to, quantity, memo),
        )

        signed = self._sign(Transaction(header=header, actions=(action,)), private_key)
        self._logger.info(f"Authored transfer {signed.transaction_id}: {from_account} -> {to} {quantity}")
        return signed

    def generate_account_registration(
        self,
        params: RegistrationInput,
        node: KeyNode,
        now: Optional[float] = None
    ) -> SignedTransaction:
        """
        Build and sign a new account registration.

        Emits, in order, ``newaccount`` (owner and active both the node's
        single key), ``buyrambytes`` and ``delegatebw``, all authorized by
        ``creator@active``. The node's key must control the creator account.

        Args:
            params: Registration parameters (dataclass or mapping)
            node: Key node used for the new account's key and for signing
            now: Current Unix time override

        Returns:
            Signed transaction with three actions

        Raises:
            InvalidAccountName: If ``account_name`` or ``creator`` is invalid
            UnsupportedOperation: If the node has no private key
        """
        if not isinstance(params, AccountRegistrationParams):
            params = AccountRegistrationParams.from_dict(params)

        private_key = self._signing_key(node)
        name = validate_account_name(params.account_name)
        creator = validate_account_name(params.creator)
        public_key = private_key.public_key()

        header = self._headers.build(
            params.expiration, params.ref_block_num, params.ref_block_prefix, now=now
        )
        cfg = self._config
        stake_net = to_asset_string(cfg.stake_net, cfg.core_symbol, cfg.precision)
        stake_cpu = to_asset_string(cfg.stake_cpu, cfg.core_symbol, cfg.precision)
        # Owner and active share one single-key authority
        key = public_key.to_string(cfg.key_prefix)
        packed_authority = _single_key_authority(public_key)

        actions = (
            self._action(
                cfg.system_contract,
                "newaccount",
                creator,
                {
                    "creator": creator,
                    "name": name,
                    "owner": _single_key_authority(key),
                    "active": _single_key_authority(key),
                },
                encode_newaccount(creator, name, packed_authority, packed_authority),
            ),
            self._action(
                cfg.system_contract,
                "buyrambytes",
                creator,
                {"payer": creator, "receiver": name, "bytes": cfg.ram_bytes},
                encode_buyrambytes(creator, name, cfg.ram_bytes),
            ),
            self._action(
                cfg.system_contract,
                "delegatebw",
                creator,
                {
                    "from": creator,
                    "receiver": name,
                    "stake_net_quantity": stake_net,
                    "stake_cpu_quantity": stake_cpu,
                    "transfer": 0,
                },
                encode_delegatebw(creator, name, stake_net, stake_cpu, transfer=False),
            ),
        )

        signed = self._sign(Transaction(header=header, actions=actions), private_key)
        self._logger.info(f"Authored registration {signed.transaction_id}: {creator} creates {name}")
        return signed

    def _signing_key(self, node: KeyNode) -> PrivateKey:
        try:
            return private_key_of(node, "sign a transaction")
        except UnsupportedOperation:
            self._logger.debug(f"Refusing to sign with public-only {variant_name(node)} node")
            raise

    def _action(
        self,
        account: str,
        name: str,
        actor: AccountName,
        data: Dict[str, Any],
        packed: bytes
    ) -> Action:
        return Action(
            account=AccountName(account),
            name=name,
            authorization=(PermissionLevel(actor=actor, permission=ACTIVE_PERMISSION),),
            data=data,
            hex_data=bytes_to_hex(packed),
        )

    def _sign(self, tx: Transaction, private_key: PrivateKey) -> SignedTransaction:
        packed = pack_transaction(tx)
        digest = signing_digest(self._config.chain_id_bytes, packed)
        signature = sign_digest(private_key, digest)
        return SignedTransaction(
            transaction=tx,
            signatures=(signature,),
            packed_trx=bytes_to_hex(packed),
            transaction_id=TxId(sha256(packed).hex()),
            chain_id=HexStr(self._config.chain_id.lower()),
        )


def _single_key_authority(key: Union[str, PublicKey]) -> Dict[str, Any]:
    return {
        "threshold": 1,
        "keys": [{"key": key, "weight": 1}],
        "accounts": [],
        "waits": [],
    }


def generate_transfer(
    params: TransferInput,
    node: KeyNode,
    config: Optional[ChainConfig] = None,
    now: Optional[float] = None
) -> SignedTransaction:
    """Build and sign a transfer with a one-off :class:`TransactionAuthor`."""
    return TransactionAuthor(config).generate_transfer(params, node, now=now)


def generate_account_registration(
    params: RegistrationInput,
    node: KeyNode,
    config: Optional[ChainConfig] = None,
    now: Optional[float] = None
) -> SignedTransaction:
    """Build and sign an account registration with a one-off :class:`TransactionAuthor`."""
    return TransactionAuthor(config).generate_account_registration(params, node, now=now)
