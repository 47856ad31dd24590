import pytest

from eoshd.constants import HARDENED_OFFSET
from eoshd.crypto.hd import ExtendedKey, parse_path
from eoshd.derivation import derive_child, derive_path
from eoshd.encoder import address, private_extended_key, public_extended_key
from eoshd.exceptions import InvalidDerivationPath, InvalidExtendedKey, UnsupportedOperation
from eoshd.node import ExtendedKeyDerived, SeedDerived, from_extended_key, from_seed

# BIP32 test vector 1
VECTOR1 = {
    "m": (
        "xprv9s21ZrQH143K3QTDL4LXw2F7HEK3wJUD2nW2nRk4stbPy6cq3jPPqjiChkVvvNKmPGJxWUtg6LnF5kejMRNNU3TGtRBeJgk33yuGBxrMPHi",
        "xpub661MyMwAqRbcFtXgS5sYJABqqG9YLmC4Q1Rdap9gSE8NqtwybGhePY2gZ29ESFjqJoCu1Rupje8YtGqsefD265TMg7usUDFdp6W1EGMcet8",
    ),
    "m/0'": (
        "xprv9uHRZZhk6KAJC1avXpDAp4MDc3sQKNxDiPvvkX8Br5ngLNv1TxvUxt4cV1rGL5hj6KCesnDYUhd7oWgT11eZG7XnxHrnYeSvkzY7d2bhkJ7",
        "xpub68Gmy5EdvgibQVfPdqkBBCHxA5htiqg55crXYuXoQRKfDBFA1WEjWgP6LHhwBZeNK1VTsfTFUHCdrfp1bgwQ9xv5ski8PX9rL2dZXvgGDnw",
    ),
    "m/0'/1": (
        "xprv9wTYmMFdV23N2TdNG573QoEsfRrWKQgWeibmLntzniatZvR9BmLnvSxqu53Kw1UmYPxLgboyZQaXwTCg8MSY3H2EU4pWcQDnRnrVA1xe8fs",
        "xpub6ASuArnXKPbfEwhqN6e3mwBcDTgzisQN1wXN9BJcM47sSikHjJf3UFHKkNAWbWMiGj7Wf5uMash7SyYq527Hqck2AxYysAA7xmALppuCkwQ",
    ),
}


def test_master_from_vector1(master):
    xprv, xpub = VECTOR1["m"]
    assert isinstance(master, SeedDerived)
    assert private_extended_key(master) == xprv
    assert public_extended_key(master) == xpub


@pytest.mark.parametrize("path", ["m/0'", "m/0'/1"])
def test_vector1_paths(master, path):
    xprv, xpub = VECTOR1[path]
    child = derive_path(master, path)
    assert isinstance(child, ExtendedKeyDerived)
    assert private_extended_key(child) == xprv
    assert public_extended_key(child) == xpub


def test_derive_child_matches_path(master):
    stepwise = derive_child(derive_child(master, HARDENED_OFFSET), 1)
    assert stepwise == derive_path(master, "m/0'/1")
    assert derive_path(master, "m/0h/1") == stepwise


def test_derivation_is_deterministic(seed_hex):
    a = derive_path(from_seed(seed_hex), "m/44'/194'/0'/0/0")
    b = derive_path(from_seed(seed_hex), "m/44'/194'/0'/0/0")
    assert a == b
    assert address(a) == address(b)


def test_derivation_does_not_modify_parent(master):
    before = private_extended_key(master)
    derive_path(master, "m/44'/194'/0'/0/0")
    derive_child(master, 7)
    assert private_extended_key(master) == before


def test_root_path_keeps_key(master):
    root = derive_path(master, "m")
    assert private_extended_key(root) == private_extended_key(master)


def test_xprv_roundtrip(account_node):
    xprv = private_extended_key(account_node)
    restored = from_extended_key(xprv)
    assert private_extended_key(restored) == xprv
    assert derive_child(restored, 3) == derive_child(account_node, 3)


def test_public_derivation_matches_private(master):
    parent = derive_path(master, "m/44'/194'/0'/0")
    public_parent = from_extended_key(public_extended_key(parent))
    for index in (0, 1, 42):
        private_child = derive_child(parent, index)
        public_child = derive_child(public_parent, index)
        assert public_extended_key(public_child) == public_extended_key(private_child)
        assert address(public_child) == address(private_child)


def test_public_only_refuses_hardened(public_only):
    with pytest.raises(UnsupportedOperation):
        derive_child(public_only, HARDENED_OFFSET)
    with pytest.raises(UnsupportedOperation):
        derive_path(public_only, "m/0/1'")


@pytest.mark.parametrize("path", ["m", "m/0", "m/44'/194'/0'/0/0"])
def test_raw_key_cannot_derive_path(raw_node, path):
    with pytest.raises(UnsupportedOperation) as exc:
        derive_path(raw_node, path)
    assert "raw-key" in str(exc.value)


@pytest.mark.parametrize("index", [0, 1, HARDENED_OFFSET, HARDENED_OFFSET + 5])
def test_raw_key_cannot_derive_child(raw_node, index):
    with pytest.raises(UnsupportedOperation):
        derive_child(raw_node, index)


@pytest.mark.parametrize("path", [
    "",
    "0/1",
    "m/",
    "m//1",
    "m/a",
    "m/1''",
    "m/-1",
    "m/2147483648",
    "m/1/x'",
    "n/0",
    None,
])
def test_invalid_paths(master, path):
    with pytest.raises(InvalidDerivationPath):
        derive_path(master, path)


@pytest.mark.parametrize("index", [-1, 1 << 32, "1", 1.0, True])
def test_invalid_child_index(master, index):
    with pytest.raises(InvalidDerivationPath):
        derive_child(master, index)


def test_parse_path():
    assert parse_path("m") == []
    assert parse_path("M/44'/194h/0") == [44 + HARDENED_OFFSET, 194 + HARDENED_OFFSET, 0]


@pytest.mark.parametrize("xkey", [
    "",
    "xprv-not-base58",
    VECTOR1["m"][0][:-1] + ("1" if VECTOR1["m"][0][-1] != "1" else "2"),
    "1111111111",
])
def test_invalid_extended_keys(xkey):
    with pytest.raises(InvalidExtendedKey):
        ExtendedKey.from_string(xkey)


def test_public_only_export(public_only):
    with pytest.raises(UnsupportedOperation):
        private_extended_key(public_only)
    assert public_extended_key(public_only) == VECTOR1["m"][1]


def test_repeated_single_step_path(master):
    first = derive_path(master, "m/0")
    second = derive_path(master, "m/0")
    assert private_extended_key(first) == private_extended_key(second)
    assert public_extended_key(first) == public_extended_key(second)
