"""Keygen files: a secret key stored as a JSON array of byte values."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import FileDecodeError

if TYPE_CHECKING:
    from .keys import PrivateKey

logger = logging.getLogger(__name__)

KEYGEN_KEY_LENGTH = 64


def decode_keygen(content: bytes | str) -> bytes:
    """Parse keygen file content into raw secret-key bytes.

    Raises FileDecodeError on malformed JSON, non-byte elements or a
    wrong element count.
    """
    try:
        values = json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise FileDecodeError(f"decode keygen file: {exc}") from exc

    if not isinstance(values, list):
        raise FileDecodeError("decode keygen file: expected a JSON array")
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
            raise FileDecodeError(f"decode keygen file: {value!r} is not a byte value")
    if len(values) != KEYGEN_KEY_LENGTH:
        raise FileDecodeError(
            f"decode keygen file: expected {KEYGEN_KEY_LENGTH} values, got {len(values)}"
        )
    return bytes(values)


def encode_keygen(secret_key: bytes) -> str:
    """Serialize raw secret-key bytes in keygen file format."""
    return json.dumps(list(bytes(secret_key)))


def read_keygen_file(path: str | Path) -> "PrivateKey":
    """Load a private key from a keygen file on disk."""
    from .keys import PrivateKey

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Keygen file not found: {path}")
    key = PrivateKey.from_keygen_bytes(path.read_bytes())
    logger.debug("Read keygen file %s for %s", path, key.public_key())
    return key


def write_keygen_file(path: str | Path, private_key: "PrivateKey") -> Path:
    """Write a private key as a keygen file. Returns the file path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(private_key.to_keygen_json())
    logger.debug("Wrote keygen file %s for %s", path, private_key.public_key())
    return path
