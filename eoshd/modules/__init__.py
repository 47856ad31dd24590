"""eoshd transaction modules."""

from ..modules.header import TransactionHeaderBuilder, build_header
from ..modules.transaction import (
    TransactionAuthor,
    generate_transfer,
    generate_account_registration,
    recover_signers,
    signing_digest,
)

__all__ = [
    # Header
    "TransactionHeaderBuilder",
    "build_header",

    # Authoring
    "TransactionAuthor",
    "generate_transfer",
    "generate_account_registration",
    "recover_signers",
    "signing_digest",
]
