"""
Shared pytest fixtures for the eoshd test suite.
"""

import pytest

from eoshd import node as keynode
from eoshd.types.transaction import AccountRegistrationParams, TransferParams

# BIP32 test vector 1
VECTOR1_SEED = "000102030405060708090a0b0c0d0e0f"

# Well-known development key pair
DEV_WIF = "5KQwrPbwdL6PhXujxW37FSSQZ1JiwsST4cqQzDeyXtP79zkvFD3"
DEV_ADDRESS = "EOS6MRyAjQq8ud7hVNYcfnVPJqcVpscN5So8BhtHuGYqET5GDW5CV"

# 2020-09-13T12:26:40Z
NOW = 1_600_000_000


@pytest.fixture
def seed_hex():
    return VECTOR1_SEED


@pytest.fixture
def master(seed_hex):
    """Master node built from test vector 1."""
    return keynode.from_seed(seed_hex)


@pytest.fixture
def account_node(master):
    """Node at the chain's BIP44 account path."""
    from eoshd.derivation import derive_path
    return derive_path(master, "m/44'/194'/0'/0/0")


@pytest.fixture
def raw_node(dev_wif):
    return keynode.from_wif_encoded(dev_wif)


@pytest.fixture
def public_only(master):
    from eoshd.encoder import public_extended_key
    return keynode.from_extended_key(public_extended_key(master))


@pytest.fixture
def transfer_params():
    return TransferParams(
        from_account="alice",
        to="bob",
        amount="1.0000",
        symbol="SYS",
        memo="",
        ref_block_num=100,
        ref_block_prefix=200,
        expiration=60,
    )


@pytest.fixture
def registration_params():
    return AccountRegistrationParams(
        account_name="newuser12345",
        ref_block_num=100,
        ref_block_prefix=200,
        expiration=60,
    )


@pytest.fixture
def dev_wif():
    return DEV_WIF


@pytest.fixture
def dev_address():
    return DEV_ADDRESS


@pytest.fixture
def now():
    """Fixed clock value for reproducible headers."""
    return NOW
