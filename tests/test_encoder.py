import pytest

from eoshd import node as keynode
from eoshd.encoder import (
    address,
    private_extended_key,
    private_key_wif,
    public_extended_key,
    public_key_from_address,
)
from eoshd.exceptions import UnsupportedOperation, ValidationError
from eoshd.node import private_key_of, public_key_of


def test_address_format(account_node):
    addr = address(account_node)
    assert addr.startswith("EOS")
    assert len(addr) == 53
    assert public_key_from_address(addr) == public_key_of(account_node)


def test_address_prefix(account_node):
    default = address(account_node)
    custom = address(account_node, prefix="FIO")
    assert custom.startswith("FIO")
    assert custom[3:] == default[3:]


def test_wif_roundtrip(account_node):
    wif = private_key_wif(account_node)
    assert wif.startswith("5")
    restored = keynode.from_wif_encoded(wif)
    assert restored.private_key == private_key_of(account_node)
    assert address(restored) == address(account_node)


def test_raw_key_encodings(raw_node, dev_wif, dev_address):
    assert private_key_wif(raw_node) == dev_wif
    assert address(raw_node) == dev_address
    with pytest.raises(UnsupportedOperation):
        private_extended_key(raw_node)
    with pytest.raises(UnsupportedOperation):
        public_extended_key(raw_node)


def test_public_only_encodings(public_only, master):
    assert address(public_only) == address(master)
    assert public_extended_key(public_only) == public_extended_key(master)
    with pytest.raises(UnsupportedOperation):
        private_key_wif(public_only)
    with pytest.raises(UnsupportedOperation):
        private_extended_key(public_only)


def test_extended_key_prefixes(account_node):
    assert private_extended_key(account_node).startswith("xprv")
    assert public_extended_key(account_node).startswith("xpub")


def test_public_key_from_address_rejects():
    with pytest.raises(ValidationError):
        public_key_from_address("EOS1111")
