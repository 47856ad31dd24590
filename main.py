"""
eoshd Usage Examples

This file demonstrates key features of the eoshd library. Everything runs
offline; signed transactions are printed instead of broadcast.
"""

import json
import logging

from eoshd import ChainConfig, EosHDError, HDNode, TransferParams

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

ACCOUNT_PATH = "m/44'/194'/0'/0/0"


def key_management_example():
    """Example 1: Mnemonic, derivation and key export."""
    print("\n=== Key Management Example ===")

    mnemonic = HDNode.generate_mnemonic()
    print(f"Mnemonic: {mnemonic}")

    master = HDNode.from_mnemonic(mnemonic)
    print(f"Master xprv: {master.get_private_extended_key()}")
    print(f"Master xpub: {master.get_public_extended_key()}")

    account = master.derive_path(ACCOUNT_PATH)
    print(f"Address: {account.get_address()}")
    print(f"WIF: {account.get_private_key()}")

    # Watch-only node derives the same non-hardened children
    watch = HDNode.from_extended_key(master.derive_path("m/44'/194'/0'/0").get_public_extended_key())
    print(f"Watch-only child 0: {watch.derive_child(0).get_address()}")


def transfer_example():
    """Example 2: Offline-signed token transfer."""
    print("\n=== Transfer Example ===")

    node = HDNode.from_seed("000102030405060708090a0b0c0d0e0f").derive_path(ACCOUNT_PATH)
    params = TransferParams(
        from_account="alice",
        to="bob",
        amount="1.5",
        symbol="SYS",
        memo="offline transfer",
        ref_block_num=1234,
        ref_block_prefix=987654321,
        expiration=60,
    )
    signed = node.generate_transaction(params)
    print(json.dumps(signed.to_dict(), indent=2))
    print(f"push_transaction body: {json.dumps(signed.to_push_dict())}")


def registration_example():
    """Example 3: Account registration on a custom chain."""
    print("\n=== Registration Example ===")

    config = ChainConfig.from_env()
    node = HDNode.from_seed("000102030405060708090a0b0c0d0e0f", config).derive_path(ACCOUNT_PATH)
    signed = node.register_account({
        "accountName": "newuser12345",
        "refBlockNum": 1234,
        "refBlockPrefix": 987654321,
        "expiration": 60,
    })
    for action in signed.actions:
        print(f"{action.account}::{action.name} {json.dumps(dict(action.data))}")
    print(f"Transaction ID: {signed.transaction_id}")


def main():
    """Run all examples."""
    examples = [
        key_management_example,
        transfer_example,
        registration_example,
    ]

    for example in examples:
        try:
            example()
        except EosHDError as e:
            print(f"Error in {example.__name__}: {e}")


if __name__ == "__main__":
    main()
