"""Encoding and decoding utilities for eoshd."""

import hashlib
from typing import Tuple, Union

import base58
from Crypto.Hash import RIPEMD160

from ..exceptions import SerializationError, ValidationError
from ..types.common import HexStr

__all__ = [
    "hex_to_bytes",
    "bytes_to_hex",
    "sha256",
    "ripemd160",
    "hash160",
    "encode_base58",
    "decode_base58",
    "encode_base58_check",
    "decode_base58_check",
    "encode_ripemd_check",
    "decode_ripemd_check",
    "encode_varuint32",
    "decode_varuint32",
    "string_to_name",
    "name_to_string",
]

NAME_CHARSET = ".12345abcdefghijklmnopqrstuvwxyz"


def hex_to_bytes(hex_str: Union[HexStr, str]) -> bytes:
    """
    Convert hex string to bytes.

    Args:
        hex_str: Hex string with or without 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValidationError: If hex string is invalid
    """
    try:
        if isinstance(hex_str, str) and hex_str.startswith("0x"):
            hex_str = hex_str[2:]
        return bytes.fromhex(hex_str)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"Invalid hex string: {hex_str!r}") from e


def bytes_to_hex(data: bytes, prefix: bool = False) -> HexStr:
    """Convert bytes to hex string."""
    hex_str = data.hex()
    if prefix:
        hex_str = f"0x{hex_str}"
    return HexStr(hex_str)


def sha256(data: bytes) -> bytes:
    """Single SHA256."""
    return hashlib.sha256(data).digest()


def ripemd160(data: bytes) -> bytes:
    """RIPEMD160 digest."""
    return RIPEMD160.new(data).digest()


def hash160(data: bytes) -> bytes:
    """Perform RIPEMD160(SHA256(data))."""
    return ripemd160(sha256(data))


def encode_base58(data: bytes) -> str:
    """Encode bytes as a Base58 string."""
    return base58.b58encode(data).decode("ascii")


def decode_base58(encoded: str) -> bytes:
    """
    Decode a Base58 string.

    Raises:
        ValidationError: If the string contains non-Base58 characters
    """
    try:
        return base58.b58decode(encoded)
    except ValueError as e:
        raise ValidationError(f"Invalid Base58 string: {e}") from e


def encode_base58_check(data: bytes) -> str:
    """Encode bytes with a double-SHA256 checksum (Base58Check)."""
    return base58.b58encode_check(data).decode("ascii")


def decode_base58_check(encoded: str) -> bytes:
    """
    Decode a Base58Check string and verify its checksum.

    Raises:
        ValidationError: If the string or checksum is invalid
    """
    if not isinstance(encoded, str) or not encoded:
        raise ValidationError("Base58Check string cannot be empty")
    try:
        return base58.b58decode_check(encoded)
    except ValueError as e:
        raise ValidationError(f"Invalid Base58Check string: {e}") from e


def encode_ripemd_check(data: bytes, suffix: bytes = b"") -> str:
    """
    Encode bytes with a 4-byte RIPEMD160 checksum, as used by EOS keys.

    Args:
        data: Payload (public key or compact signature)
        suffix: Key type tag mixed into the checksum (``b"K1"`` for the
            ``PUB_K1_``/``SIG_K1_`` formats, empty for legacy ``EOS`` keys)

    Returns:
        Base58 string without prefix
    """
    checksum = ripemd160(data + suffix)[:4]
    return encode_base58(data + checksum)


def decode_ripemd_check(encoded: str, suffix: bytes = b"") -> bytes:
    """
    Decode a RIPEMD160-checksummed Base58 string.

    Raises:
        ValidationError: If decoding fails or the checksum does not match
    """
    raw = decode_base58(encoded)
    if len(raw) < 5:
        raise ValidationError("Encoded key material too short")
    data, checksum = raw[:-4], raw[-4:]
    if ripemd160(data + suffix)[:4] != checksum:
        raise ValidationError("Checksum mismatch")
    return data


def encode_varuint32(n: int) -> bytes:
    """
    Encode integer as LEB128 variable length uint32.

    Args:
        n: Integer to encode

    Returns:
        Encoded bytes

    Raises:
        SerializationError: If value does not fit uint32
    """
    if n < 0 or n > 0xFFFFFFFF:
        raise SerializationError(f"varuint32 out of range: {n}")

    result = bytearray()
    while True:
        byte = n & 0x7F
        n >>= 7
        if n:
            result.append(byte | 0x80)
        else:
            result.append(byte)
            return bytes(result)


def decode_varuint32(data: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode LEB128 variable length uint32.

    Returns:
        Tuple of (value, new_offset)
    """
    value = 0
    shift = 0
    while True:
        if offset >= len(data):
            raise SerializationError("Truncated varuint32")
        byte = data[offset]
        offset += 1
        value |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return value, offset
        shift += 7
        if shift > 35:
            raise SerializationError("varuint32 too long")


def _char_to_symbol(c: str) -> int:
    if "a" <= c <= "z":
        return ord(c) - ord("a") + 6
    if "1" <= c <= "5":
        return ord(c) - ord("1") + 1
    return 0


def string_to_name(name: str) -> int:
    """
    Encode an account or action name as its uint64 value.

    The name is expected to be validated already; characters outside the
    name alphabet encode as ``.``.
    """
    value = 0
    for i in range(13):
        c = _char_to_symbol(name[i]) if i < len(name) else 0
        if i < 12:
            c &= 0x1F
            c <<= 64 - 5 * (i + 1)
        else:
            c &= 0x0F
        value |= c
    return value


def name_to_string(value: int) -> str:
    """Decode a uint64 name value back to its string form."""
    chars = []
    tmp = value
    for i in range(13):
        mask = 0x0F if i == 0 else 0x1F
        chars.append(NAME_CHARSET[tmp & mask])
        tmp >>= 4 if i == 0 else 5
    return "".join(reversed(chars)).rstrip(".")
