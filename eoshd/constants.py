"""Constants for EOS HD key management and offline transaction authoring."""

__all__ = [
    "CURVE_ORDER",
    "HARDENED_OFFSET",
    "MAX_DEPTH",
    "BIP32_SEED_KEY",
    "MIN_SEED_BYTES",
    "MAX_SEED_BYTES",
    "XPRV_VERSION",
    "XPUB_VERSION",
    "EXTENDED_KEY_LENGTH",
    "WIF_VERSION",
    "KEY_PREFIX",
    "K1_PUBLIC_PREFIX",
    "K1_SIGNATURE_PREFIX",
    "K1_SUFFIX",
    "MNEMONIC_LANGUAGE",
    "MNEMONIC_STRENGTHS",
    "DEFAULT_CHAIN_ID",
    "CORE_SYMBOL",
    "TOKEN_CONTRACT",
    "SYSTEM_CONTRACT",
    "ASSET_PRECISION",
    "MAX_ASSET_AMOUNT",
    "MAX_MEMO_BYTES",
    "REGISTRATION_RAM_BYTES",
    "REGISTRATION_STAKE",
    "DEFAULT_CREATOR",
    "ACTIVE_PERMISSION",
    "MAX_SIGNING_ATTEMPTS",
]

# secp256k1 group order
CURVE_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141

# BIP32
HARDENED_OFFSET = 0x80000000
MAX_DEPTH = 255
BIP32_SEED_KEY = b"Bitcoin seed"
MIN_SEED_BYTES = 16
MAX_SEED_BYTES = 64
XPRV_VERSION = 0x0488ADE4
XPUB_VERSION = 0x0488B21E
EXTENDED_KEY_LENGTH = 78

# Key and signature string formats
WIF_VERSION = 0x80
KEY_PREFIX = "EOS"
K1_PUBLIC_PREFIX = "PUB_K1_"
K1_SIGNATURE_PREFIX = "SIG_K1_"
K1_SUFFIX = b"K1"

# BIP39
MNEMONIC_LANGUAGE = "english"
MNEMONIC_STRENGTHS = (128, 160, 192, 224, 256)

# Chain defaults (offline eosjs chain id)
DEFAULT_CHAIN_ID = "cf057bbfb72640471fd910bcb67639c22df9f92470936cddc1ade0e2f2e7dc4f"
CORE_SYMBOL = "SYS"
TOKEN_CONTRACT = "eosio.token"
SYSTEM_CONTRACT = "eosio"
ASSET_PRECISION = 4
MAX_ASSET_AMOUNT = (1 << 62) - 1
MAX_MEMO_BYTES = 256

# Account registration
REGISTRATION_RAM_BYTES = 8192
REGISTRATION_STAKE = "1.0000"
DEFAULT_CREATOR = "eosio"
ACTIVE_PERMISSION = "active"

# Canonical signature search
MAX_SIGNING_ATTEMPTS = 256
