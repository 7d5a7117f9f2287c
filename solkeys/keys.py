"""PublicKey, PrivateKey and Signature value types."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from .codec import b58decode, b58encode
from .errors import FormatError
from .keygen import decode_keygen, encode_keygen
from .signature import (
    PUBLIC_KEY_LENGTH,
    SECRET_KEY_LENGTH,
    SIGNATURE_LENGTH,
    generate_secret_key,
    public_key_from_secret,
    sign_message,
    verify_message,
)

logger = logging.getLogger(__name__)


def _as_bytes(data) -> bytes:
    if isinstance(data, int):
        raise TypeError(f"key data must be bytes-like, not {type(data).__name__}")
    return bytes(data)


@dataclass(frozen=True)
class PublicKey:
    """A 32-byte account address.

    The bytes are opaque: a PublicKey may be an ed25519 verification key,
    a program derived address, or any other 32-byte identifier.
    """

    data: bytes = bytes(PUBLIC_KEY_LENGTH)

    def __post_init__(self) -> None:
        data = _as_bytes(self.data)
        if len(data) != PUBLIC_KEY_LENGTH:
            raise FormatError(
                f"invalid length, expected {PUBLIC_KEY_LENGTH}, got {len(data)}"
            )
        object.__setattr__(self, "data", data)

    @classmethod
    def from_bytes(cls, data: bytes) -> "PublicKey":
        """Build a key from arbitrary bytes, truncating or zero-padding to 32."""
        raw = bytes(data[:PUBLIC_KEY_LENGTH])
        return cls(raw.ljust(PUBLIC_KEY_LENGTH, b"\x00"))

    @classmethod
    def from_base58(cls, text: str) -> "PublicKey":
        """Decode a base58 address. The decoded value must be exactly 32 bytes."""
        raw = b58decode(text)
        if len(raw) != PUBLIC_KEY_LENGTH:
            raise FormatError(
                f"invalid length, expected {PUBLIC_KEY_LENGTH}, got {len(raw)}"
            )
        return cls(raw)

    @classmethod
    def from_json(cls, data: str | bytes) -> "PublicKey":
        """Decode a JSON string holding a base58 address."""
        try:
            text = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise FormatError(f"invalid public key JSON: {exc}") from exc
        if not isinstance(text, str):
            raise FormatError(f"invalid public key {text!r}: expected a JSON string")
        try:
            return cls.from_base58(text)
        except FormatError as exc:
            raise FormatError(f"invalid public key {text!r}: {exc}") from exc

    def to_base58(self) -> str:
        return b58encode(self.data)

    def to_json(self) -> str:
        return json.dumps(self.to_base58())

    def equals(self, other: "PublicKey") -> bool:
        return self.data == other.data

    def is_zero(self) -> bool:
        """True for the all-zero key (which is also the System Program ID)."""
        return self.data == bytes(PUBLIC_KEY_LENGTH)

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.to_base58()

    def __repr__(self) -> str:
        return f"PublicKey({self.to_base58()!r})"


@dataclass(frozen=True)
class Signature:
    """A 64-byte ed25519 signature."""

    data: bytes

    def __post_init__(self) -> None:
        data = _as_bytes(self.data)
        if len(data) != SIGNATURE_LENGTH:
            raise FormatError(
                f"invalid signature length, expected {SIGNATURE_LENGTH}, got {len(data)}"
            )
        object.__setattr__(self, "data", data)

    @classmethod
    def from_base58(cls, text: str) -> "Signature":
        return cls(b58decode(text))

    def verify(self, public_key: PublicKey, message: bytes) -> bool:
        """Check this signature over ``message`` against ``public_key``."""
        return verify_message(bytes(public_key), message, self.data)

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return b58encode(self.data)

    def __repr__(self) -> str:
        return f"Signature({str(self)!r})"


@dataclass(frozen=True)
class PrivateKey:
    """An ed25519 secret key in the 64-byte seed + public key layout."""

    data: bytes = field(repr=False)

    def __post_init__(self) -> None:
        data = _as_bytes(self.data)
        if len(data) != SECRET_KEY_LENGTH:
            raise FormatError(
                f"invalid private key length, expected {SECRET_KEY_LENGTH}, got {len(data)}"
            )
        object.__setattr__(self, "data", data)

    @classmethod
    def generate(cls, random_bytes: Callable[[int], bytes] = os.urandom) -> "PrivateKey":
        """Generate a new random key. Raises RandomSourceError without entropy."""
        key = cls(generate_secret_key(random_bytes))
        logger.debug("Generated keypair %s", key.public_key())
        return key

    @classmethod
    def from_base58(cls, text: str) -> "PrivateKey":
        """Import a base58 secret key, as printed by wallets and ``str(key)``."""
        return cls(b58decode(text))

    @classmethod
    def from_keygen_bytes(cls, content: bytes | str) -> "PrivateKey":
        """Import the contents of a keygen file (a JSON array of byte values)."""
        return cls(decode_keygen(content))

    @classmethod
    def from_json(cls, data: str | bytes) -> "PrivateKey":
        try:
            text = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise FormatError(f"invalid private key JSON: {exc}") from exc
        if not isinstance(text, str):
            raise FormatError("invalid private key: expected a JSON string")
        return cls.from_base58(text)

    def public_key(self) -> PublicKey:
        return PublicKey(public_key_from_secret(self.data))

    def sign(self, message: bytes) -> Signature:
        """Sign ``message``. The signature verifies against ``public_key()``."""
        return Signature(sign_message(self.data, message))

    def to_base58(self) -> str:
        return b58encode(self.data)

    def to_json(self) -> str:
        return json.dumps(self.to_base58())

    def to_keygen_json(self) -> str:
        return encode_keygen(self.data)

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.to_base58()


@dataclass(frozen=True)
class Wallet:
    """A private key together with its public address."""

    private_key: PrivateKey

    @classmethod
    def new(cls, random_bytes: Callable[[int], bytes] = os.urandom) -> "Wallet":
        return cls(PrivateKey.generate(random_bytes))

    @classmethod
    def from_base58(cls, text: str) -> "Wallet":
        return cls(PrivateKey.from_base58(text))

    @property
    def public_key(self) -> PublicKey:
        return self.private_key.public_key()


class PublicKeyList(list):
    """An ordered list of public keys with membership helpers."""

    def __init__(self, keys: Iterable[PublicKey] = ()) -> None:
        super().__init__(keys)

    def has(self, key: PublicKey) -> bool:
        return any(k.equals(key) for k in self)

    def unique_append(self, key: PublicKey) -> bool:
        """Append ``key`` unless already present. Returns True if appended."""
        if self.has(key):
            return False
        self.append(key)
        return True


def json_default(obj: Any) -> str:
    """``json.dumps(default=...)`` hook that writes keys as base58 strings."""
    if isinstance(obj, (PublicKey, PrivateKey, Signature)):
        return str(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def must_public_key_from_base58(text: str) -> PublicKey:
    """Decode a hard-coded base58 address.

    Only for trusted literals in source code: a bad value raises
    RuntimeError, never a recoverable FormatError.
    """
    try:
        return PublicKey.from_base58(text)
    except FormatError as exc:
        raise RuntimeError(f"invalid public key literal {text!r}") from exc


def must_private_key_from_base58(text: str) -> PrivateKey:
    """Decode a hard-coded base58 secret key. Trusted literals only."""
    try:
        return PrivateKey.from_base58(text)
    except FormatError as exc:
        raise RuntimeError("invalid private key literal") from exc
