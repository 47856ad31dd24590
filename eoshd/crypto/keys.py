"""Key management for eoshd."""

from typing import Optional, Union

from coincurve import PrivateKey as SecpPrivateKey, PublicKey as SecpPublicKey
# cffi handle for the extra-entropy nonce buffer; private module, coincurve pinned <22 in pyproject.toml
from coincurve._libsecp256k1 import ffi

from ..constants import KEY_PREFIX, K1_PUBLIC_PREFIX, K1_SUFFIX, WIF_VERSION
from ..exceptions import CryptoError, InvalidPrivateKey, InvalidWIF, ValidationError
from ..types.common import Address, PrivateKeyBytes, PublicKeyBytes
from ..utils.encoding import (
    decode_base58_check,
    decode_ripemd_check,
    encode_base58_check,
    encode_ripemd_check,
    hash160,
)
from ..utils.validation import validate_private_key, validate_public_key

__all__ = ["PrivateKey", "PublicKey"]


class PrivateKey:
    """
    secp256k1 private key wrapper.

    Handles public key derivation, WIF import/export and low-level ECDSA
    signing. Chain signatures are produced by :mod:`eoshd.crypto.signature`.
    """

    def __init__(self, key: Union[bytes, str, "PrivateKey"]) -> None:
        """
        Initialize private key.

        Args:
            key: Private key as 32 bytes, hex string, or another PrivateKey

        Raises:
            InvalidPrivateKey: If key length or scalar range is invalid
        """
        if isinstance(key, PrivateKey):
            self._secret = key._secret
            self._key = key._key
            return

        # Validate before handing the secret to the curve library
        self._secret = PrivateKeyBytes(validate_private_key(key))
        self._key = SecpPrivateKey(self._secret)

    @classmethod
    def from_wif(cls, wif: str) -> "PrivateKey":
        """
        Import private key from WIF.

        Both the uncompressed form and the compressed form (trailing
        ``0x01``) are accepted; the version byte must be ``0x80``.

        Args:
            wif: Wallet Import Format string

        Returns:
            PrivateKey instance

        Raises:
            InvalidWIF: If WIF is invalid
        """
        try:
            data = decode_base58_check(wif)
        except ValidationError as e:
            raise InvalidWIF(f"Invalid WIF format: {e}") from e

        if len(data) not in (33, 34):
            raise InvalidWIF(f"Invalid WIF length: {len(data)}")
        if data[0] != WIF_VERSION:
            raise InvalidWIF(f"Unknown WIF version: {data[0]:#x}")
        if len(data) == 34 and data[33] != 0x01:
            raise InvalidWIF(f"Invalid compression flag: {data[33]:#x}")

        try:
            return cls(data[1:33])
        except InvalidPrivateKey as e:
            raise InvalidWIF(f"WIF holds an invalid private key: {e}") from e

    @property
    def secret(self) -> PrivateKeyBytes:
        """Get private key as bytes."""
        return self._secret

    def hex(self) -> str:
        """Get private key as hex string."""
        return self._secret.hex()

    def wif(self) -> str:
        """
        Export private key in Wallet Import Format.

        Returns:
            WIF string (version ``0x80``, uncompressed convention)
        """
        return encode_base58_check(bytes([WIF_VERSION]) + self._secret)

    def public_key(self) -> "PublicKey":
        """Get corresponding compressed public key."""
        return PublicKey(self._key.public_key.format(compressed=True))

    def sign_digest(self, digest: bytes, extra_entropy: Optional[bytes] = None) -> bytes:
        """
        Sign a 32-byte digest with RFC 6979 nonces.

        Args:
            digest: 32-byte hash to sign
            extra_entropy: Optional 32 bytes mixed into nonce generation,
                giving a different deterministic signature per value

        Returns:
            DER-encoded signature

        Raises:
            CryptoError: If signing fails
        """
        if len(digest) != 32:
            raise ValueError("Digest must be 32 bytes")

        try:
            if extra_entropy is None:
                return self._key.sign(digest, hasher=None)
            if len(extra_entropy) != 32:
                raise ValueError("Extra entropy must be 32 bytes")
            nonce = (ffi.NULL, ffi.new("unsigned char[32]", list(extra_entropy)))
            return self._key.sign(digest, hasher=None, custom_nonce=nonce)
        except ValueError:
            raise
        except Exception as e:
            raise CryptoError(f"Signing failed: {e}") from e

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrivateKey):
            return False
        return self._secret == other._secret

    def __hash__(self) -> int:
        return hash(self._secret)

    def __repr__(self) -> str:
        # Show first and last 4 chars of hex only
        hex_str = self.hex()
        return f"PrivateKey({hex_str[:4]}...{hex_str[-4:]})"


class PublicKey:
    """
    Compressed secp256k1 public key wrapper.

    Handles the chain's public key string formats and signature checks.
    """

    def __init__(self, key: Union[bytes, str, "PublicKey"]) -> None:
        """
        Initialize public key.

        Args:
            key: 33-byte compressed key, its hex string, or another PublicKey

        Raises:
            ValidationError: If key format is invalid or not on the curve
        """
        if isinstance(key, PublicKey):
            self._point = key._point
            self._key = key._key
            return

        key_bytes = validate_public_key(key)
        try:
            self._key = SecpPublicKey(key_bytes)
        except ValueError as e:
            raise ValidationError(f"Public key is not on the curve: {e}") from e
        self._point = PublicKeyBytes(key_bytes)

    @classmethod
    def from_string(cls, address: str) -> "PublicKey":
        """
        Parse a public key string.

        Args:
            address: ``EOS...`` legacy string or ``PUB_K1_...`` string

        Raises:
            ValidationError: If the string is malformed or its checksum fails
        """
        if not isinstance(address, str):
            raise ValidationError("Public key string must be str")

        if address.startswith(K1_PUBLIC_PREFIX):
            data = decode_ripemd_check(address[len(K1_PUBLIC_PREFIX):], K1_SUFFIX)
        elif address.startswith(KEY_PREFIX):
            data = decode_ripemd_check(address[len(KEY_PREFIX):])
        else:
            raise ValidationError(f"Unknown public key prefix: {address[:7]!r}")
        return cls(data)

    @classmethod
    def from_secp(cls, key: SecpPublicKey) -> "PublicKey":
        """Wrap a coincurve public key."""
        return cls(key.format(compressed=True))

    @property
    def point(self) -> PublicKeyBytes:
        """Get compressed public key bytes."""
        return self._point

    def hex(self) -> str:
        return self._point.hex()

    def hash160(self) -> bytes:
        """Get HASH160 of public key (BIP32 fingerprint source)."""
        return hash160(self._point)

    def to_string(self, prefix: str = KEY_PREFIX) -> Address:
        """
        Encode as a legacy public key string.

        Args:
            prefix: Chain key prefix

        Returns:
            ``EOS`` + base58(point + ripemd160(point)[:4])
        """
        return Address(prefix + encode_ripemd_check(self._point))

    def to_k1_string(self) -> str:
        """Encode as a ``PUB_K1_`` string."""
        return K1_PUBLIC_PREFIX + encode_ripemd_check(self._point, K1_SUFFIX)

    def add_tweak(self, tweak: bytes) -> "PublicKey":
        """
        Return ``self + tweak*G``.

        Raises:
            CryptoError: If the result is the point at infinity or the tweak
                is out of range
        """
        try:
            return PublicKey.from_secp(self._key.add(tweak))
        except ValueError as e:
            raise CryptoError(f"Public key tweak failed: {e}") from e

    def verify(self, signature: bytes, digest: bytes) -> bool:
        """
        Verify a DER-encoded signature over a 32-byte digest.

        Returns:
            True if signature is valid
        """
        if len(digest) != 32:
            return False
        try:
            return self._key.verify(signature, digest, hasher=None)
        except ValueError:
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return False
        return self._point == other._point

    def __hash__(self) -> int:
        return hash(self._point)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"PublicKey({self.to_string()})"
