"""Transaction header assembly for offline signing."""

import time
from typing import Callable, Optional

from ..exceptions import ValidationError
from ..types.common import Timestamp
from ..types.transaction import TransactionHeader
from ..utils.validation import validate_uint

__all__ = ["TransactionHeaderBuilder", "build_header"]


class TransactionHeaderBuilder:
    """
    Builds transaction headers from an expiration offset and reference block.

    The clock is injectable so headers can be reproduced in tests.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock

    def build(
        self,
        expiration: int,
        ref_block_num: int,
        ref_block_prefix: int,
        now: Optional[float] = None
    ) -> TransactionHeader:
        """
        Build a header.

        Args:
            expiration: Seconds from now until the transaction expires
            ref_block_num: Low 16 bits of the reference block number
            ref_block_prefix: Reference block id prefix (uint32)
            now: Current Unix time; the builder's clock when omitted

        Returns:
            TransactionHeader with zero resource limits, no delay and no
            context-free actions

        Raises:
            ValidationError: If a field is out of range
        """
        if isinstance(expiration, bool) or not isinstance(expiration, int) or expiration < 0:
            raise ValidationError(f"Expiration offset must be a non-negative integer, got {expiration!r}")
        validate_uint(ref_block_num, 16, "ref_block_num")
        validate_uint(ref_block_prefix, 32, "ref_block_prefix")

        current = self._clock() if now is None else now
        absolute = int(current) + expiration
        validate_uint(absolute, 32, "expiration")

        return TransactionHeader(
            expiration=Timestamp(absolute),
            ref_block_num=ref_block_num,
            ref_block_prefix=ref_block_prefix,
        )


_default_builder = TransactionHeaderBuilder()


def build_header(
    expiration: int,
    ref_block_num: int,
    ref_block_prefix: int,
    now: Optional[float] = None
) -> TransactionHeader:
    """Build a header with the system clock."""
    return _default_builder.build(expiration, ref_block_num, ref_block_prefix, now=now)
