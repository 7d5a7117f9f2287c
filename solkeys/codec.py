"""Base58 text codec (Bitcoin alphabet, no checksum)."""

from __future__ import annotations

import base58

from .errors import FormatError


def b58encode(data: bytes) -> str:
    """Encode raw bytes as base58 text.

    Leading zero bytes map to leading ``1`` characters, so a 32-byte
    key always encodes to a non-empty string.
    """
    return base58.b58encode(bytes(data)).decode("ascii")


def b58decode(text: str) -> bytes:
    """Decode base58 text to raw bytes.

    Raises FormatError on characters outside the alphabet.
    """
    try:
        return base58.b58decode(text)
    except ValueError as exc:
        raise FormatError(f"invalid base58 string {text!r}: {exc}") from exc
