"""Validation utilities for eoshd."""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Tuple, Union

from ..constants import (
    ASSET_PRECISION,
    CURVE_ORDER,
    MAX_ASSET_AMOUNT,
    MAX_MEMO_BYTES,
    MAX_SEED_BYTES,
    MIN_SEED_BYTES,
)
from ..exceptions import (
    InvalidAccountName,
    InvalidAmountOrSymbol,
    InvalidPrivateKey,
    InvalidSeed,
    ValidationError,
)
from ..types.common import AccountName, AmountLike

__all__ = [
    "is_valid_private_key",
    "validate_private_key",
    "is_valid_public_key",
    "validate_public_key",
    "validate_seed_hex",
    "is_valid_account_name",
    "validate_account_name",
    "validate_symbol",
    "to_asset_string",
    "parse_asset",
    "validate_memo",
    "validate_uint",
]

# Regex patterns
HEX_PATTERN = re.compile(r"[0-9a-fA-F]*")
ACCOUNT_NAME_PATTERN = re.compile(r"[.1-5a-z]{0,12}[.1-5a-j]?")
SYMBOL_PATTERN = re.compile(r"[A-Z]{1,7}")
ASSET_PATTERN = re.compile(r"([0-9]+)(?:\.([0-9]+))? ([A-Z]{1,7})")


def is_valid_private_key(key: Union[str, bytes]) -> bool:
    """Check if a private key is a valid secp256k1 scalar."""
    try:
        validate_private_key(key)
        return True
    except InvalidPrivateKey:
        return False


def validate_private_key(key: Union[str, bytes]) -> bytes:
    """
    Validate private key and return it as bytes.

    Length is checked before the scalar range, so a short or long key never
    reaches the curve library.

    Args:
        key: Private key as 32 bytes or 64-character hex string

    Returns:
        32-byte private key

    Raises:
        InvalidPrivateKey: If key is invalid
    """
    if isinstance(key, str):
        if not HEX_PATTERN.fullmatch(key):
            raise InvalidPrivateKey("Private key must be hexadecimal")
        try:
            key = bytes.fromhex(key)
        except ValueError as e:
            raise InvalidPrivateKey(f"Invalid hex private key: {e}") from e
    elif isinstance(key, (bytearray, memoryview)):
        key = bytes(key)
    elif not isinstance(key, bytes):
        raise InvalidPrivateKey(f"Unsupported private key type: {type(key).__name__}")

    if len(key) != 32:
        raise InvalidPrivateKey(f"Private key must be 32 bytes, got {len(key)}")

    key_int = int.from_bytes(key, "big")
    if key_int == 0:
        raise InvalidPrivateKey("Private key cannot be zero")
    if key_int >= CURVE_ORDER:
        raise InvalidPrivateKey("Private key exceeds curve order")

    return key


def is_valid_public_key(key: Union[str, bytes]) -> bool:
    """Check if a public key has a valid compressed encoding."""
    try:
        validate_public_key(key)
        return True
    except ValidationError:
        return False


def validate_public_key(key: Union[str, bytes]) -> bytes:
    """
    Validate compressed public key encoding.

    Only the prefix and length are checked here; the curve library rejects
    points that are not on the curve.

    Raises:
        ValidationError: If key format is invalid
    """
    if isinstance(key, str):
        if not HEX_PATTERN.fullmatch(key):
            raise ValidationError("Public key must be hexadecimal")
        try:
            key = bytes.fromhex(key)
        except ValueError as e:
            raise ValidationError(f"Invalid hex public key: {e}") from e

    if len(key) != 33:
        raise ValidationError(f"Public key must be 33 bytes, got {len(key)}")
    if key[0] not in (0x02, 0x03):
        raise ValidationError("Compressed public key must start with 0x02 or 0x03")

    return bytes(key)


def validate_seed_hex(seed_hex: str) -> bytes:
    """
    Decode and validate a hex-encoded seed.

    Raises:
        InvalidSeed: If the seed is not even-length hex of 16..64 bytes
    """
    if not isinstance(seed_hex, str) or not seed_hex:
        raise InvalidSeed("Seed must be a non-empty hex string")
    if len(seed_hex) % 2 or not HEX_PATTERN.fullmatch(seed_hex):
        raise InvalidSeed("Seed must be an even-length hex string")

    try:
        seed = bytes.fromhex(seed_hex)
    except ValueError as e:
        raise InvalidSeed(f"Invalid hex seed: {e}") from e
    if not MIN_SEED_BYTES <= len(seed) <= MAX_SEED_BYTES:
        raise InvalidSeed(
            f"Seed must be between {MIN_SEED_BYTES} and {MAX_SEED_BYTES} bytes, got {len(seed)}"
        )
    return seed


def is_valid_account_name(name: str) -> bool:
    """Check if a string is a valid account name."""
    return (
        isinstance(name, str)
        and 0 < len(name) <= 13
        and not name.endswith(".")
        and bool(ACCOUNT_NAME_PATTERN.fullmatch(name))
    )


def validate_account_name(name: str) -> AccountName:
    """
    Validate an account name.

    Raises:
        InvalidAccountName: If name is invalid
    """
    if not is_valid_account_name(name):
        raise InvalidAccountName(f"Invalid account name: {name!r}")
    return AccountName(name)


def validate_symbol(symbol: str) -> str:
    """
    Validate a token symbol code (1-7 uppercase letters).

    Raises:
        InvalidAmountOrSymbol: If symbol is invalid
    """
    if not isinstance(symbol, str) or not SYMBOL_PATTERN.fullmatch(symbol):
        raise InvalidAmountOrSymbol(f"Invalid symbol: {symbol!r}")
    return symbol


def to_asset_string(
    amount: AmountLike,
    symbol: str,
    precision: int = ASSET_PRECISION
) -> str:
    """
    Convert amount and symbol to a fixed-precision asset string.

    Amounts are rounded half-up to ``precision`` decimals.

    Args:
        amount: Decimal string, int or Decimal
        symbol: Token symbol code
        precision: Decimal places of the token

    Returns:
        Asset string such as ``"1.0000 SYS"``

    Raises:
        InvalidAmountOrSymbol: If amount is not a positive finite number,
            exceeds the asset range, or symbol is invalid
    """
    symbol = validate_symbol(symbol)

    if isinstance(amount, bool) or not isinstance(amount, (str, int, Decimal)):
        raise InvalidAmountOrSymbol(f"Unsupported amount type: {type(amount).__name__}")
    try:
        value = Decimal(amount.strip() if isinstance(amount, str) else amount)
    except InvalidOperation as e:
        raise InvalidAmountOrSymbol(f"Invalid amount: {amount!r}") from e

    if not value.is_finite():
        raise InvalidAmountOrSymbol(f"Invalid amount: {amount!r}")

    quantum = Decimal(1).scaleb(-precision)
    value = value.quantize(quantum, rounding=ROUND_HALF_UP)
    if value <= 0:
        raise InvalidAmountOrSymbol(f"Amount must be positive: {amount!r}")
    if value.scaleb(precision) > MAX_ASSET_AMOUNT:
        raise InvalidAmountOrSymbol(f"Amount out of range: {amount!r}")

    return f"{value:.{precision}f} {symbol}"


def parse_asset(asset: str) -> Tuple[int, int, str]:
    """
    Parse an asset string.

    Returns:
        Tuple of (amount in smallest units, precision, symbol)

    Raises:
        InvalidAmountOrSymbol: If asset string is malformed
    """
    match = ASSET_PATTERN.fullmatch(asset) if isinstance(asset, str) else None
    if not match:
        raise InvalidAmountOrSymbol(f"Invalid asset: {asset!r}")

    whole, fraction, symbol = match.groups()
    fraction = fraction or ""
    amount = int(whole + fraction)
    if amount > MAX_ASSET_AMOUNT:
        raise InvalidAmountOrSymbol(f"Asset amount out of range: {asset!r}")
    return amount, len(fraction), symbol


def validate_memo(memo: str) -> str:
    """
    Validate transfer memo length.

    Raises:
        ValidationError: If memo is not a string or exceeds 256 bytes
    """
    if not isinstance(memo, str):
        raise ValidationError("Memo must be a string")
    if len(memo.encode("utf-8")) > MAX_MEMO_BYTES:
        raise ValidationError(f"Memo exceeds {MAX_MEMO_BYTES} bytes")
    return memo


def validate_uint(value: int, bits: int, field_name: str) -> int:
    """
    Validate an unsigned integer field.

    Raises:
        ValidationError: If value is not an int in [0, 2**bits)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer")
    if not 0 <= value < (1 << bits):
        raise ValidationError(f"{field_name} out of range for uint{bits}: {value}")
    return value
