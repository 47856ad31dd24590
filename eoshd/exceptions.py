"""eoshd exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
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
    "SerializationError",
]


class EosHDError(Exception):
    """Base exception for all eoshd errors."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(EosHDError):
    """Raised when an input fails validation."""
    pass


class InvalidSeed(ValidationError):
    """Raised when a seed is not valid hex or has an unusable length."""
    pass


class InvalidExtendedKey(ValidationError):
    """Raised when an extended key has a bad checksum or format."""
    pass


class InvalidPrivateKey(ValidationError):
    """Raised when a raw private key is not a valid secp256k1 scalar."""
    pass


class InvalidWIF(ValidationError):
    """Raised when a WIF string cannot be decoded."""
    pass


class InvalidMnemonic(ValidationError):
    """Raised when a mnemonic phrase fails BIP39 validation."""
    pass


class InvalidDerivationPath(ValidationError):
    """Raised when a derivation path or child index is malformed."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message, data=path)
        self.path = path


class InvalidAmountOrSymbol(ValidationError):
    """Raised when an amount/symbol pair cannot form an asset."""
    pass


class InvalidAccountName(ValidationError):
    """Raised when an account name is not a valid chain name."""
    pass


class UnsupportedOperation(EosHDError):
    """Raised when a key node variant does not support an operation."""

    def __init__(self, operation: str, variant: str) -> None:
        super().__init__(f"Cannot {operation} on a {variant} node")
        self.operation = operation
        self.variant = variant


class CryptoError(EosHDError):
    """Raised when a cryptographic operation fails."""
    pass


class SerializationError(EosHDError):
    """Raised when ABI serialization fails."""
    pass
