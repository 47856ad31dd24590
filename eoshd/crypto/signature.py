"""Signature utilities for eoshd."""

import logging
from typing import List, Tuple

from coincurve import PublicKey as SecpPublicKey

from ..constants import K1_SIGNATURE_PREFIX, K1_SUFFIX, MAX_SIGNING_ATTEMPTS
from ..crypto.keys import PrivateKey, PublicKey
from ..exceptions import CryptoError, ValidationError
from ..types.common import Signature
from ..utils.encoding import decode_ripemd_check, encode_ripemd_check, sha256

__all__ = [
    "sign_digest",
    "recover_public_key",
    "verify_signature",
    "recover_all",
    "is_canonical",
    "encode_signature",
    "decode_signature",
    "parse_der_signature",
]

logger = logging.getLogger(__name__)

# Header byte of a compact signature: 27 + 4 (compressed) + recovery id
COMPACT_HEADER_BASE = 31


def sign_digest(private_key: PrivateKey, digest: bytes) -> Signature:
    """
    Produce a canonical chain signature over a 32-byte digest.

    The first attempt uses plain RFC 6979 nonces; later attempts feed a
    counter-derived value as extra entropy until the compact form is
    canonical. The result is deterministic for a given key and digest.

    Args:
        private_key: Signing key
        digest: 32-byte digest

    Returns:
        ``SIG_K1_`` signature string

    Raises:
        CryptoError: If no canonical signature is found
    """
    public_key = private_key.public_key()

    for attempt in range(MAX_SIGNING_ATTEMPTS):
        entropy = None if attempt == 0 else sha256(digest + attempt.to_bytes(4, "big"))
        der = private_key.sign_digest(digest, extra_entropy=entropy)
        r, s = parse_der_signature(der)
        rs = r.to_bytes(32, "big") + s.to_bytes(32, "big")
        compact = bytes([COMPACT_HEADER_BASE + _recovery_id(rs, digest, public_key)]) + rs
        if is_canonical(compact):
            if attempt:
                logger.debug(f"Canonical signature found after {attempt + 1} attempts")
            return encode_signature(compact)

    raise CryptoError(f"No canonical signature after {MAX_SIGNING_ATTEMPTS} attempts")


def is_canonical(compact: bytes) -> bool:
    """Check the chain's canonical form of a 65-byte compact signature."""
    return (
        not compact[1] & 0x80
        and not (compact[1] == 0 and not compact[2] & 0x80)
        and not compact[33] & 0x80
        and not (compact[33] == 0 and not compact[34] & 0x80)
    )


def encode_signature(compact: bytes) -> Signature:
    """Encode a 65-byte compact signature as ``SIG_K1_...``."""
    if len(compact) != 65:
        raise ValidationError(f"Compact signature must be 65 bytes, got {len(compact)}")
    return Signature(K1_SIGNATURE_PREFIX + encode_ripemd_check(compact, K1_SUFFIX))


def decode_signature(signature: str) -> bytes:
    """
    Decode a ``SIG_K1_...`` string to its 65-byte compact form.

    Raises:
        ValidationError: If the prefix, checksum or length is wrong
    """
    if not isinstance(signature, str) or not signature.startswith(K1_SIGNATURE_PREFIX):
        raise ValidationError("Signature must start with SIG_K1_")
    compact = decode_ripemd_check(signature[len(K1_SIGNATURE_PREFIX):], K1_SUFFIX)
    if len(compact) != 65:
        raise ValidationError(f"Compact signature must be 65 bytes, got {len(compact)}")
    return compact


def recover_public_key(signature: str, digest: bytes) -> PublicKey:
    """
    Recover the signing public key from a signature and digest.

    Raises:
        ValidationError: If the signature string is malformed
        CryptoError: If recovery fails
    """
    compact = decode_signature(signature)
    recid = compact[0] - 27
    if recid >= 4:
        recid -= 4
    if not 0 <= recid <= 3:
        raise ValidationError(f"Invalid signature header byte: {compact[0]}")

    try:
        key = SecpPublicKey.from_signature_and_message(
            compact[1:] + bytes([recid]), digest, hasher=None
        )
    except ValueError as e:
        raise CryptoError(f"Public key recovery failed: {e}") from e
    return PublicKey.from_secp(key)


def verify_signature(signature: str, digest: bytes, public_key: PublicKey) -> bool:
    """Check that ``signature`` over ``digest`` was made by ``public_key``."""
    try:
        return recover_public_key(signature, digest) == public_key
    except (ValidationError, CryptoError):
        return False


def recover_all(signatures: List[str], digest: bytes) -> List[PublicKey]:
    """Recover the public key behind each signature."""
    return [recover_public_key(sig, digest) for sig in signatures]


def parse_der_signature(signature: bytes) -> Tuple[int, int]:
    """
    Parse DER-encoded signature.

    Args:
        signature: DER-encoded signature

    Returns:
        Tuple of (r, s)

    Raises:
        CryptoError: If signature format is invalid
    """
    try:
        if signature[0] != 0x30:
            raise ValueError("missing sequence tag")

        length = signature[1]
        if length + 2 != len(signature):
            raise ValueError("incorrect length")

        if signature[2] != 0x02:
            raise ValueError("missing r integer tag")
        r_length = signature[3]
        r = int.from_bytes(signature[4:4 + r_length], "big")

        s_offset = 4 + r_length
        if signature[s_offset] != 0x02:
            raise ValueError("missing s integer tag")
        s_length = signature[s_offset + 1]
        s = int.from_bytes(signature[s_offset + 2:s_offset + 2 + s_length], "big")

        return r, s

    except (IndexError, ValueError) as e:
        raise CryptoError(f"Invalid DER signature: {e}") from e


def _recovery_id(rs: bytes, digest: bytes, public_key: PublicKey) -> int:
    """Find the recovery id that maps ``rs`` back to ``public_key``."""
    for recid in range(4):
        try:
            candidate = SecpPublicKey.from_signature_and_message(
                rs + bytes([recid]), digest, hasher=None
            )
        except ValueError:
            continue
        if candidate.format(compressed=True) == public_key.point:
            return recid
    raise CryptoError("Could not determine signature recovery id")
