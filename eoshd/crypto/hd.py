"""Hierarchical Deterministic key derivation (BIP32) for eoshd."""

import hmac
import hashlib
import struct
from dataclasses import dataclass
from typing import List, Optional

from ..constants import (
    BIP32_SEED_KEY,
    CURVE_ORDER,
    EXTENDED_KEY_LENGTH,
    HARDENED_OFFSET,
    MAX_DEPTH,
    XPRV_VERSION,
    XPUB_VERSION,
)
from ..crypto.keys import PrivateKey, PublicKey
from ..exceptions import (
    CryptoError,
    InvalidDerivationPath,
    InvalidExtendedKey,
    InvalidSeed,
    UnsupportedOperation,
    ValidationError,
)
from ..types.common import ChainCode, Fingerprint, PrivateKeyBytes, PublicKeyBytes
from ..utils.encoding import decode_base58_check, encode_base58_check, hash160

__all__ = ["ExtendedKey", "parse_path"]

N = CURVE_ORDER
ZERO_FINGERPRINT = Fingerprint(b"\x00\x00\x00\x00")


@dataclass(frozen=True)
class ExtendedKey:
    """Immutable BIP32 node state."""

    private_key: Optional[PrivateKeyBytes]
    public_key: PublicKeyBytes
    chain_code: ChainCode
    depth: int = 0
    parent_fingerprint: Fingerprint = ZERO_FINGERPRINT
    index: int = 0

    @classmethod
    def from_seed(cls, seed: bytes) -> "ExtendedKey":
        """Create master node from seed."""
        h = hmac.new(BIP32_SEED_KEY, seed, hashlib.sha512).digest()

        private_key_bytes = h[:32]
        chain_code = h[32:]

        key_int = int.from_bytes(private_key_bytes, "big")
        if key_int == 0 or key_int >= N:
            raise InvalidSeed("Seed produces an invalid master key")

        public_key = PrivateKey(private_key_bytes).public_key().point
        return cls(
            private_key=PrivateKeyBytes(private_key_bytes),
            public_key=public_key,
            chain_code=ChainCode(chain_code),
        )

    @classmethod
    def from_string(cls, xkey: str) -> "ExtendedKey":
        """
        Parse a serialized xprv/xpub string.

        Raises:
            InvalidExtendedKey: If checksum, length, version or key data is bad
        """
        try:
            data = decode_base58_check(xkey)
        except ValidationError as e:
            raise InvalidExtendedKey(f"Invalid extended key encoding: {e}") from e

        if len(data) != EXTENDED_KEY_LENGTH:
            raise InvalidExtendedKey(f"Extended key must be {EXTENDED_KEY_LENGTH} bytes, got {len(data)}")

        version, depth = struct.unpack_from(">IB", data, 0)
        parent_fingerprint = data[5:9]
        index = struct.unpack_from(">I", data, 9)[0]
        chain_code = data[13:45]
        key_data = data[45:78]

        if depth == 0 and (parent_fingerprint != ZERO_FINGERPRINT or index != 0):
            raise InvalidExtendedKey("Master key with non-zero parent fingerprint or index")

        if version == XPRV_VERSION:
            if key_data[0] != 0x00:
                raise InvalidExtendedKey("Private extended key must have 0x00 key prefix")
            try:
                private_key = PrivateKey(key_data[1:])
            except ValidationError as e:
                raise InvalidExtendedKey(f"Invalid private key in extended key: {e}") from e
            secret = private_key.secret
            public_key = private_key.public_key().point
        elif version == XPUB_VERSION:
            try:
                public_key = PublicKey(key_data).point
            except ValidationError as e:
                raise InvalidExtendedKey(f"Invalid public key in extended key: {e}") from e
            secret = None
        else:
            raise InvalidExtendedKey(f"Unknown extended key version: {version:#010x}")

        return cls(
            private_key=secret,
            public_key=public_key,
            chain_code=ChainCode(chain_code),
            depth=depth,
            parent_fingerprint=Fingerprint(parent_fingerprint),
            index=index,
        )

    @property
    def fingerprint(self) -> Fingerprint:
        return Fingerprint(hash160(self.public_key)[:4])

    def derive(self, index: int) -> "ExtendedKey":
        """Derive child node; the receiver is left unchanged."""
        if not 0 <= index <= 0xFFFFFFFF:
            raise InvalidDerivationPath(f"Child index out of range: {index}")
        if self.depth >= MAX_DEPTH:
            raise InvalidDerivationPath(f"Maximum depth {MAX_DEPTH} reached")

        if index >= HARDENED_OFFSET:
            if self.private_key is None:
                raise UnsupportedOperation("derive a hardened child", "public-only")
            data = b"\x00" + self.private_key + index.to_bytes(4, "big")
        else:
            data = self.public_key + index.to_bytes(4, "big")

        h = hmac.new(self.chain_code, data, hashlib.sha512).digest()
        tweak = h[:32]
        child_chain_code = h[32:]

        tweak_int = int.from_bytes(tweak, "big")
        if tweak_int >= N:
            return self._skip_invalid(index)

        if self.private_key is not None:
            child_private_int = (int.from_bytes(self.private_key, "big") + tweak_int) % N
            if child_private_int == 0:
                return self._skip_invalid(index)
            child_private_key = PrivateKeyBytes(child_private_int.to_bytes(32, "big"))
            child_public_key = PrivateKey(child_private_key).public_key().point
        else:
            try:
                child_public_key = PublicKey(self.public_key).add_tweak(tweak).point
            except CryptoError:
                return self._skip_invalid(index)
            child_private_key = None

        return ExtendedKey(
            private_key=child_private_key,
            public_key=child_public_key,
            chain_code=ChainCode(child_chain_code),
            depth=self.depth + 1,
            parent_fingerprint=self.fingerprint,
            index=index,
        )

    def _skip_invalid(self, index: int) -> "ExtendedKey":
        # BIP32: an invalid child moves on to the next index
        if index in (HARDENED_OFFSET - 1, 0xFFFFFFFF):
            raise CryptoError(f"No valid child key at or after index {index}")
        return self.derive(index + 1)

    def derive_path(self, path: str) -> "ExtendedKey":
        """Derive using BIP32 path like m/44'/194'/0'/0/0."""
        node = self
        for index in parse_path(path):
            node = node.derive(index)
        return node

    def to_xprv(self) -> str:
        if self.private_key is None:
            raise UnsupportedOperation("export a private extended key", "public-only")
        return self._serialize(XPRV_VERSION, b"\x00" + self.private_key)

    def to_xpub(self) -> str:
        return self._serialize(XPUB_VERSION, self.public_key)

    def _serialize(self, version: int, key_data: bytes) -> str:
        payload = (
            struct.pack(">IB", version, self.depth)
            + self.parent_fingerprint
            + struct.pack(">I", self.index)
            + self.chain_code
            + key_data
        )
        return encode_base58_check(payload)

    def __repr__(self) -> str:
        kind = "private" if self.private_key is not None else "public"
        return f"ExtendedKey({kind}, depth={self.depth}, index={self.index})"


def parse_path(path: str) -> List[int]:
    """
    Parse a derivation path into child indices.

    ``'`` or ``h`` after a segment marks it hardened. ``m`` or ``M`` alone
    yields an empty list.

    Raises:
        InvalidDerivationPath: If path is malformed
    """
    if not isinstance(path, str):
        raise InvalidDerivationPath("Path must be a string", path=None)

    segments = path.split("/")
    if segments[0] not in ("m", "M"):
        raise InvalidDerivationPath('Path must start with "m" or "M"', path=path)

    indices = []
    for component in segments[1:]:
        hardened = component.endswith(("'", "h"))
        digits = component[:-1] if hardened else component
        if not digits.isdigit() or not digits.isascii():
            raise InvalidDerivationPath(f"Invalid path segment: {component!r}", path=path)

        index = int(digits)
        if index >= HARDENED_OFFSET:
            raise InvalidDerivationPath(f"Path index out of range: {component!r}", path=path)
        indices.append(index + HARDENED_OFFSET if hardened else index)

    return indices
