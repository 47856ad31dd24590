import pytest

from eoshd import HDNode
from eoshd.config import ChainConfig
from eoshd.exceptions import UnsupportedOperation

ACCOUNT_PATH = "m/44'/194'/0'/0/0"


@pytest.fixture
def hd(seed_hex):
    return HDNode.from_seed(seed_hex)


def test_constructors_agree(hd, seed_hex):
    xprv = hd.get_private_extended_key()
    assert HDNode.from_extended_key(xprv).get_address() == hd.get_address()
    assert HDNode.from_master_seed(seed_hex) == hd

    child = hd.derive_path(ACCOUNT_PATH)
    wif = child.get_private_key()
    assert HDNode.from_private_key(wif).get_address() == child.get_address()


def test_mnemonic_constructor():
    phrase = HDNode.generate_mnemonic()
    node = HDNode.from_mnemonic(phrase)
    assert node.is_derivable
    assert node.derive_path(ACCOUNT_PATH) == HDNode.from_mnemonic(phrase).derive_path(ACCOUNT_PATH)


def test_derive_returns_new_node(hd):
    before = hd.get_private_extended_key()
    child = hd.derive_child(0)
    assert child is not hd
    assert hd.get_private_extended_key() == before
    assert child != hd


def test_raw_key_node(dev_wif, dev_address):
    node = HDNode.from_private_key(dev_wif)
    assert not node.is_derivable
    assert node.get_address() == dev_address
    assert node.get_private_key() == dev_wif
    assert HDNode.from_raw_private_key(node.node.private_key.secret) == node
    with pytest.raises(UnsupportedOperation):
        node.derive_path("m/0")
    with pytest.raises(UnsupportedOperation):
        node.get_public_extended_key()


def test_public_only_node(hd):
    watch = HDNode.from_extended_key(hd.get_public_extended_key())
    assert watch.derive_child(5).get_address() == hd.derive_child(5).get_address()
    with pytest.raises(UnsupportedOperation):
        watch.get_private_key()
    with pytest.raises(UnsupportedOperation):
        watch.get_private_extended_key()


def test_config_key_prefix(seed_hex):
    config = ChainConfig(key_prefix="FIO")
    node = HDNode.from_seed(seed_hex, config)
    assert node.get_address().startswith("FIO")
    assert node.derive_child(1).config is config


def test_generate_transaction(hd, now):
    node = hd.derive_path(ACCOUNT_PATH)
    signed = node.generate_transaction({
        "from": "alice",
        "to": "bob",
        "amount": "2",
        "symbol": "SYS",
        "refBlockNum": 1,
        "refBlockPrefix": 2,
        "expiration": 60,
    }, now=now)
    assert signed.actions[0].data["quantity"] == "2.0000 SYS"
    assert signed.header.expiration == now + 60


def test_register_account(hd, now):
    node = hd.derive_path(ACCOUNT_PATH)
    signed = node.register_account({
        "accountName": "newuser12345",
        "refBlockNum": 1,
        "refBlockPrefix": 2,
        "expiration": 60,
    }, now=now)
    assert len(signed.actions) == 3
    assert signed.actions[0].data["owner"]["keys"][0]["key"] == node.get_address()


def test_repr(hd):
    assert repr(hd).startswith("HDNode(seed-derived, EOS")
