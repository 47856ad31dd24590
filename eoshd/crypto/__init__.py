"""Cryptographic utilities for eoshd."""

from ..crypto.keys import PrivateKey, PublicKey
from ..crypto.hd import ExtendedKey, parse_path
from ..crypto.bip39 import generate_mnemonic, validate_mnemonic, mnemonic_to_seed
from ..crypto.signature import (
    sign_digest,
    recover_public_key,
    verify_signature,
    encode_signature,
    decode_signature,
)

__all__ = [
    # Keys
    "PrivateKey",
    "PublicKey",

    # BIP32
    "ExtendedKey",
    "parse_path",

    # BIP39
    "generate_mnemonic",
    "validate_mnemonic",
    "mnemonic_to_seed",

    # Signatures
    "sign_digest",
    "recover_public_key",
    "verify_signature",
    "encode_signature",
    "decode_signature",
]
