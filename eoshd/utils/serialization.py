"""ABI binary serialization of transactions and system actions."""

import struct
from typing import Any, Iterable, Mapping

from ..crypto.keys import PublicKey
from ..exceptions import SerializationError, ValidationError
from ..types.transaction import Action, PermissionLevel, Transaction
from ..utils.encoding import encode_varuint32, hex_to_bytes, string_to_name
from ..utils.validation import parse_asset, validate_uint

__all__ = [
    "pack_name",
    "pack_asset",
    "pack_string",
    "pack_public_key",
    "pack_authority",
    "pack_permission_level",
    "pack_action",
    "pack_transaction",
    "encode_transfer",
    "encode_newaccount",
    "encode_buyrambytes",
    "encode_delegatebw",
]


def pack_name(name: str) -> bytes:
    """Pack an account/action/permission name as uint64 little-endian."""
    return struct.pack("<Q", string_to_name(name))


def pack_asset(asset: str) -> bytes:
    """
    Pack an asset string such as ``"1.0000 SYS"``.

    Layout: int64 amount, then uint64 symbol (precision byte followed by the
    symbol code, zero padded to 7 bytes).
    """
    amount, precision, code = parse_asset(asset)
    symbol = bytes([precision]) + code.encode("ascii").ljust(7, b"\x00")
    return struct.pack("<q", amount) + symbol


def pack_string(value: str) -> bytes:
    data = value.encode("utf-8")
    return encode_varuint32(len(data)) + data


def pack_public_key(key: Any) -> bytes:
    """Pack a public key as variant index 0 (K1) plus 33 compressed bytes."""
    if not isinstance(key, PublicKey):
        try:
            key = PublicKey.from_string(key)
        except ValidationError as e:
            raise SerializationError(f"Cannot pack public key: {e}") from e
    return encode_varuint32(0) + key.point


def pack_authority(authority: Mapping[str, Any]) -> bytes:
    """Pack a permission authority (threshold, keys, accounts, waits)."""
    s = bytearray()
    s.extend(struct.pack("<I", authority["threshold"]))

    keys = authority.get("keys", [])
    s.extend(encode_varuint32(len(keys)))
    for key_weight in keys:
        s.extend(pack_public_key(key_weight["key"]))
        s.extend(struct.pack("<H", key_weight["weight"]))

    accounts = authority.get("accounts", [])
    s.extend(encode_varuint32(len(accounts)))
    for account_weight in accounts:
        permission = account_weight["permission"]
        s.extend(pack_name(permission["actor"]))
        s.extend(pack_name(permission["permission"]))
        s.extend(struct.pack("<H", account_weight["weight"]))

    waits = authority.get("waits", [])
    s.extend(encode_varuint32(len(waits)))
    for wait in waits:
        s.extend(struct.pack("<I", wait["wait_sec"]))
        s.extend(struct.pack("<H", wait["weight"]))

    return bytes(s)


def pack_permission_level(level: PermissionLevel) -> bytes:
    return pack_name(level.actor) + pack_name(level.permission)


def pack_action(action: Action) -> bytes:
    """Pack one action; ``hex_data`` is already ABI encoded."""
    data = hex_to_bytes(action.hex_data)

    s = bytearray()
    s.extend(pack_name(action.account))
    s.extend(pack_name(action.name))
    s.extend(_pack_vector(action.authorization, pack_permission_level))
    s.extend(encode_varuint32(len(data)))
    s.extend(data)
    return bytes(s)


def pack_transaction(tx: Transaction) -> bytes:
    """
    Pack a transaction for signing and broadcast.

    Header layout: expiration uint32, ref_block_num uint16,
    ref_block_prefix uint32, max_net_usage_words varuint32,
    max_cpu_usage_ms uint8, delay_sec varuint32.
    """
    header = tx.header
    try:
        validate_uint(header.expiration, 32, "expiration")
        validate_uint(header.ref_block_num, 16, "ref_block_num")
        validate_uint(header.ref_block_prefix, 32, "ref_block_prefix")
        validate_uint(header.max_cpu_usage_ms, 8, "max_cpu_usage_ms")
    except ValidationError as e:
        raise SerializationError(str(e)) from e

    s = bytearray()
    s.extend(struct.pack("<IHI", header.expiration, header.ref_block_num, header.ref_block_prefix))
    s.extend(encode_varuint32(header.max_net_usage_words))
    s.append(header.max_cpu_usage_ms)
    s.extend(encode_varuint32(header.delay_sec))
    s.extend(_pack_vector(header.context_free_actions, pack_action))
    s.extend(_pack_vector(tx.actions, pack_action))
    if tx.transaction_extensions:
        raise SerializationError("Transaction extensions are not supported")
    s.extend(encode_varuint32(0))
    return bytes(s)


def encode_transfer(from_account: str, to: str, quantity: str, memo: str) -> bytes:
    """``eosio.token::transfer`` action data."""
    return pack_name(from_account) + pack_name(to) + pack_asset(quantity) + pack_string(memo)


def encode_newaccount(
    creator: str,
    name: str,
    owner: Mapping[str, Any],
    active: Mapping[str, Any]
) -> bytes:
    """``eosio::newaccount`` action data."""
    return pack_name(creator) + pack_name(name) + pack_authority(owner) + pack_authority(active)


def encode_buyrambytes(payer: str, receiver: str, num_bytes: int) -> bytes:
    """``eosio::buyrambytes`` action data."""
    return pack_name(payer) + pack_name(receiver) + struct.pack("<I", num_bytes)


def encode_delegatebw(
    from_account: str,
    receiver: str,
    stake_net_quantity: str,
    stake_cpu_quantity: str,
    transfer: bool
) -> bytes:
    """``eosio::delegatebw`` action data."""
    return (
        pack_name(from_account)
        + pack_name(receiver)
        + pack_asset(stake_net_quantity)
        + pack_asset(stake_cpu_quantity)
        + bytes([1 if transfer else 0])
    )


def _pack_vector(items: Iterable[Any], pack_item) -> bytes:
    items = list(items)
    return encode_varuint32(len(items)) + b"".join(pack_item(item) for item in items)
