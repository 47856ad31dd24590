import pytest

from eoshd import node as keynode
from eoshd.crypto.bip39 import mnemonic_to_seed, validate_mnemonic
from eoshd.encoder import address, private_extended_key
from eoshd.exceptions import (
    InvalidExtendedKey,
    InvalidMnemonic,
    InvalidPrivateKey,
    InvalidSeed,
    InvalidWIF,
    UnsupportedOperation,
)
from eoshd.node import (
    ExtendedKeyDerived,
    RawKeyDerived,
    SeedDerived,
    private_key_of,
    public_key_of,
    variant_name,
)

# BIP39 reference vector with passphrase "TREZOR"
ABANDON_PHRASE = " ".join(["abandon"] * 11 + ["about"])
ABANDON_SEED = (
    "c55257c360c07c72029aebc1b53c05ed0362ada38ead3e3e9efa3708e53495531"
    "f09a6987599d18264c1e1c92f2cf141630c7a3c4ab7c81b2f001698e7463b04"
)


def test_from_seed_keeps_seed(seed_hex):
    node = keynode.from_seed(seed_hex)
    assert isinstance(node, SeedDerived)
    assert node.seed.hex() == seed_hex
    assert node.state.depth == 0


def test_from_seed_is_deterministic(seed_hex):
    assert keynode.from_seed(seed_hex) == keynode.from_seed(seed_hex)
    assert keynode.from_seed(seed_hex) != keynode.from_seed("ff" * 16)


@pytest.mark.parametrize("seed", ["", "xyz", "0", "00" * 8, "00" * 65, "00" * 16 + "0\n", "00" * 16 + "\n"])
def test_from_seed_rejects(seed):
    with pytest.raises(InvalidSeed):
        keynode.from_seed(seed)


def test_from_extended_key(master):
    node = keynode.from_extended_key(private_extended_key(master))
    assert isinstance(node, ExtendedKeyDerived)
    assert address(node) == address(master)


def test_from_extended_key_rejects_garbage():
    with pytest.raises(InvalidExtendedKey):
        keynode.from_extended_key("xprvgarbage")


def test_from_private_key():
    node = keynode.from_private_key(bytes.fromhex("01" * 32))
    assert isinstance(node, RawKeyDerived)
    assert public_key_of(node) == node.private_key.public_key()


@pytest.mark.parametrize("raw", [b"", b"\x01" * 31, b"\x01" * 33, b"\x00" * 32])
def test_from_private_key_rejects(raw):
    with pytest.raises(InvalidPrivateKey):
        keynode.from_private_key(raw)


def test_from_wif(raw_node, dev_wif, dev_address):
    assert isinstance(raw_node, RawKeyDerived)
    assert address(raw_node) == dev_address
    with pytest.raises(InvalidWIF):
        keynode.from_wif_encoded(dev_wif[:-2])


def test_mnemonic_reference_vector():
    assert validate_mnemonic(ABANDON_PHRASE)
    assert mnemonic_to_seed(ABANDON_PHRASE, "TREZOR").hex() == ABANDON_SEED
    node = keynode.from_mnemonic(ABANDON_PHRASE, "TREZOR")
    assert node == keynode.from_seed(ABANDON_SEED)


def test_mnemonic_whitespace_is_normalized():
    spaced = "  " + ABANDON_PHRASE.replace(" ", "   ") + "\n"
    assert keynode.from_mnemonic(spaced) == keynode.from_mnemonic(ABANDON_PHRASE)


def test_generated_mnemonic_roundtrip():
    for strength, words in ((128, 12), (256, 24)):
        phrase = keynode.generate_mnemonic(strength)
        assert len(phrase.split()) == words
        assert validate_mnemonic(phrase)
        assert isinstance(keynode.from_mnemonic(phrase), SeedDerived)


def test_generate_mnemonic_rejects_strength():
    with pytest.raises(ValueError):
        keynode.generate_mnemonic(100)


@pytest.mark.parametrize("phrase", [
    "",
    "abandon abandon abandon",
    " ".join(["abandon"] * 12),
    " ".join(["notaword"] * 12),
    None,
])
def test_invalid_mnemonic(phrase):
    assert not validate_mnemonic(phrase)
    with pytest.raises(InvalidMnemonic):
        keynode.from_mnemonic(phrase)


def test_variant_names(master, raw_node, public_only):
    assert variant_name(master) == "seed-derived"
    assert variant_name(public_only) == "extended-key-derived"
    assert variant_name(raw_node) == "raw-key"
    with pytest.raises(TypeError):
        variant_name("not a node")


def test_private_key_of_public_only(public_only):
    with pytest.raises(UnsupportedOperation) as exc:
        private_key_of(public_only, "sign")
    assert exc.value.variant == "public-only"


def test_nodes_are_immutable(master):
    with pytest.raises(AttributeError):
        master.seed = b""
