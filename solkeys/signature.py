"""Ed25519 key generation, signing and verification.

Uses PyNaCl (libsodium) as the primary backend, with fallback to
the cryptography package if PyNaCl is unavailable. Set
``SOLKEYS_ED25519_BACKEND`` to ``nacl`` or ``cryptography`` to prefer one.

Secret keys use the 64-byte layout shared by libsodium and the Solana
tooling: the 32-byte seed followed by the 32-byte public key.
"""

from __future__ import annotations

import logging
import os
from typing import Callable

from .errors import FormatError, RandomSourceError

logger = logging.getLogger(__name__)

BACKEND_ENV = "SOLKEYS_ED25519_BACKEND"

SEED_LENGTH = 32
PUBLIC_KEY_LENGTH = 32
SECRET_KEY_LENGTH = 64
SIGNATURE_LENGTH = 64


def _load_nacl():
    """Try to load PyNaCl (libsodium)."""
    try:
        from nacl.signing import SigningKey, VerifyKey
        from nacl.exceptions import BadSignatureError
        return SigningKey, VerifyKey, BadSignatureError
    except ImportError:
        return None


def _load_crypto():
    """Try to load cryptography package as fallback."""
    try:
        from cryptography.exceptions import InvalidSignature
        from cryptography.hazmat.primitives.asymmetric.ed25519 import (
            Ed25519PrivateKey,
            Ed25519PublicKey,
        )
        from cryptography.hazmat.primitives.serialization import (
            Encoding,
            PublicFormat,
        )
        return Ed25519PrivateKey, Ed25519PublicKey, InvalidSignature, Encoding, PublicFormat
    except ImportError:
        return None


_LOADERS = {
    "nacl": _load_nacl,
    "cryptography": _load_crypto,
}


def _get_backend():
    """Get the preferred, or else the best available, Ed25519 backend."""
    preferred = os.environ.get(BACKEND_ENV)
    if preferred:
        if preferred not in _LOADERS:
            raise ValueError(
                f"{BACKEND_ENV} must be one of {sorted(_LOADERS)}, got {preferred!r}"
            )
        backend = _LOADERS[preferred]()
        if backend is not None:
            return preferred, backend
        logger.warning("Ed25519 backend %r is not installed, falling back", preferred)

    for name, loader in _LOADERS.items():
        backend = loader()
        if backend is not None:
            return name, backend
    return None, None


def _require_backend():
    name, backend = _get_backend()
    if backend is None:
        raise ImportError(
            "Ed25519 signatures require 'PyNaCl' or 'cryptography'. "
            "Install with: pip install PyNaCl"
        )
    return name, backend


def backend_name() -> str:
    """Name of the backend that signing calls will use."""
    name, _ = _require_backend()
    return name


def _check_secret(secret_key: bytes) -> None:
    if len(secret_key) != SECRET_KEY_LENGTH:
        raise FormatError(
            f"invalid secret key length, expected {SECRET_KEY_LENGTH}, got {len(secret_key)}"
        )


def public_key_from_seed(seed: bytes) -> bytes:
    """Compute the 32-byte public key for a 32-byte ed25519 seed."""
    if len(seed) != SEED_LENGTH:
        raise FormatError(f"invalid seed length, expected {SEED_LENGTH}, got {len(seed)}")
    name, backend = _require_backend()

    if name == "nacl":
        SigningKey = backend[0]
        return bytes(SigningKey(seed).verify_key)

    Ed25519PrivateKey, _, _, Encoding, PublicFormat = backend
    key = Ed25519PrivateKey.from_private_bytes(seed)
    return key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)


def generate_secret_key(random_bytes: Callable[[int], bytes] = os.urandom) -> bytes:
    """Generate a fresh 64-byte ed25519 secret key (seed + public key).

    ``random_bytes`` must be a cryptographically secure source. Raises
    RandomSourceError if it fails or returns short output.
    """
    try:
        seed = random_bytes(SEED_LENGTH)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError(f"secure random source unavailable: {exc}") from exc
    if seed is None or len(seed) != SEED_LENGTH:
        raise RandomSourceError(
            f"secure random source returned {0 if seed is None else len(seed)} bytes, "
            f"expected {SEED_LENGTH}"
        )
    return bytes(seed) + public_key_from_seed(bytes(seed))


def public_key_from_secret(secret_key: bytes) -> bytes:
    """Return the public half cached in a 64-byte secret key."""
    _check_secret(secret_key)
    return bytes(secret_key[SEED_LENGTH:])


def sign_message(secret_key: bytes, message: bytes) -> bytes:
    """Sign ``message`` and return the 64-byte signature.

    Signing is deterministic (RFC 8032): the nonce is derived from the
    secret key and the message, so no entropy is consumed here.
    """
    _check_secret(secret_key)
    name, backend = _require_backend()
    seed = bytes(secret_key[:SEED_LENGTH])

    if name == "nacl":
        SigningKey = backend[0]
        return SigningKey(seed).sign(bytes(message)).signature

    Ed25519PrivateKey = backend[0]
    return Ed25519PrivateKey.from_private_bytes(seed).sign(bytes(message))


def verify_message(public_key: bytes, message: bytes, signature: bytes) -> bool:
    """Verify an Ed25519 signature. Returns False for any mismatch."""
    name, backend = _require_backend()
    if len(public_key) != PUBLIC_KEY_LENGTH or len(signature) != SIGNATURE_LENGTH:
        return False

    if name == "nacl":
        _, VerifyKey, BadSignatureError = backend
        try:
            VerifyKey(bytes(public_key)).verify(bytes(message), bytes(signature))
            return True
        except (BadSignatureError, ValueError):
            return False

    _, Ed25519PublicKey, InvalidSignature, _, _ = backend
    try:
        Ed25519PublicKey.from_public_bytes(bytes(public_key)).verify(
            bytes(signature), bytes(message)
        )
        return True
    except (InvalidSignature, ValueError):
        return False
