"""
Chain configuration for offline transaction authoring.

Defaults match the offline chain id used by eosjs and the ``SYS`` core
token. Environment variables override the defaults:

    EOSHD_CHAIN_ID, EOSHD_CORE_SYMBOL, EOSHD_TOKEN_CONTRACT,
    EOSHD_SYSTEM_CONTRACT, EOSHD_KEY_PREFIX, EOSHD_RAM_BYTES,
    EOSHD_STAKE_NET, EOSHD_STAKE_CPU

Usage:
    from eoshd.config import ChainConfig
    cfg = ChainConfig.from_env()
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, fields
from typing import Mapping, Optional

from .constants import (
    ASSET_PRECISION,
    CORE_SYMBOL,
    DEFAULT_CHAIN_ID,
    KEY_PREFIX,
    REGISTRATION_RAM_BYTES,
    REGISTRATION_STAKE,
    SYSTEM_CONTRACT,
    TOKEN_CONTRACT,
)
from .exceptions import ValidationError

__all__ = ["ChainConfig", "DEFAULT_CONFIG"]

_CHAIN_ID_PATTERN = re.compile(r"[0-9a-fA-F]{64}")
_ENV_PREFIX = "EOSHD_"


@dataclass(frozen=True)
class ChainConfig:
    """Target chain settings."""
    chain_id: str = DEFAULT_CHAIN_ID
    core_symbol: str = CORE_SYMBOL
    token_contract: str = TOKEN_CONTRACT
    system_contract: str = SYSTEM_CONTRACT
    key_prefix: str = KEY_PREFIX
    precision: int = ASSET_PRECISION
    # Fixed account registration resources
    ram_bytes: int = REGISTRATION_RAM_BYTES
    stake_net: str = REGISTRATION_STAKE
    stake_cpu: str = REGISTRATION_STAKE

    def __post_init__(self) -> None:
        if not _CHAIN_ID_PATTERN.fullmatch(self.chain_id):
            raise ValidationError(f"chain_id must be 32 bytes of hex, got {self.chain_id!r}")
        if self.ram_bytes <= 0:
            raise ValidationError("ram_bytes must be positive")

    @property
    def chain_id_bytes(self) -> bytes:
        return bytes.fromhex(self.chain_id)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ChainConfig:
        """Build a config, overriding defaults with ``EOSHD_*`` variables."""
        environ = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            raw = environ.get(_ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            if f.type in ("int", int):
                try:
                    overrides[f.name] = int(raw)
                except ValueError as e:
                    raise ValidationError(f"{_ENV_PREFIX}{f.name.upper()} must be an integer") from e
            else:
                overrides[f.name] = raw
        return cls(**overrides)


DEFAULT_CONFIG = ChainConfig()
