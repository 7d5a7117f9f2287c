"""Curve-membership test for program derived addresses."""

from __future__ import annotations

from typing import Callable

from solders.pubkey import Pubkey

CurveCheck = Callable[[bytes], bool]


def is_on_curve(data: bytes) -> bool:
    """True if ``data`` decompresses to a point on the ed25519 curve.

    Uses the same decompression as the validator (curve25519-dalek), which
    accepts non-canonical encodings and small-order points. Anything that
    decompresses could have a private key, so it must not be used as a PDA.
    """
    if len(data) != 32:
        return False
    return Pubkey.from_bytes(bytes(data)).is_on_curve()
