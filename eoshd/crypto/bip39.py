"""BIP39 mnemonic helpers backed by the ``mnemonic`` package."""

from mnemonic import Mnemonic

from ..constants import MNEMONIC_LANGUAGE, MNEMONIC_STRENGTHS
from ..exceptions import InvalidMnemonic

__all__ = ["generate_mnemonic", "validate_mnemonic", "mnemonic_to_seed"]

_mnemo = Mnemonic(MNEMONIC_LANGUAGE)


def generate_mnemonic(strength: int = 128) -> str:
    """Generate BIP39 mnemonic phrase."""
    if strength not in MNEMONIC_STRENGTHS:
        raise ValueError("Strength must be 128, 160, 192, 224, or 256")
    return _mnemo.generate(strength=strength)


def validate_mnemonic(mnemonic: str) -> bool:
    """Check word list membership and checksum."""
    if not isinstance(mnemonic, str):
        return False
    return _mnemo.check(" ".join(mnemonic.split()))


def mnemonic_to_seed(mnemonic: str, passphrase: str = "") -> bytes:
    """
    Convert mnemonic to a 64-byte seed (PBKDF2-HMAC-SHA512).

    Raises:
        InvalidMnemonic: If the phrase fails BIP39 validation
    """
    if not validate_mnemonic(mnemonic):
        raise InvalidMnemonic("Mnemonic failed BIP39 word list or checksum validation")
    return Mnemonic.to_seed(" ".join(mnemonic.split()), passphrase=passphrase)
