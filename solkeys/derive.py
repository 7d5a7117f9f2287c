"""Seeded addresses and program derived addresses (PDAs).

A PDA is ``sha256(seeds || program_id || "ProgramDerivedAddress")``,
accepted only if the digest is *not* a valid ed25519 point, so no
private key can ever sign for it. ``find_program_address`` walks the
bump seed down from 255 and returns the first (canonical) hit.
"""

from __future__ import annotations

import hashlib
import logging
from typing import Sequence, Union

from .curve import CurveCheck, is_on_curve as _default_is_on_curve
from .errors import (
    IllegalOwnerError,
    InvalidSeedsError,
    ProgramAddressNotFoundError,
    SeedTooLongError,
    SolkeysError,
    TooManySeedsError,
)
from .keys import PublicKey
from .programs import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    TOKEN_METADATA_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
    is_native_program_id,
)

logger = logging.getLogger(__name__)

MAX_SEED_LENGTH = 32
MAX_SEEDS = 16
PDA_MARKER = b"ProgramDerivedAddress"
MAX_BUMP_SEED = 255

Seed = Union[bytes, bytearray, memoryview, PublicKey]


def _seed_bytes(seed) -> bytes:
    if isinstance(seed, str):
        return seed.encode("utf-8")
    if isinstance(seed, int):
        raise TypeError(f"seed must be bytes-like, not {type(seed).__name__}")
    return bytes(seed)


def create_with_seed(base: PublicKey, seed: str | bytes, owner: PublicKey) -> PublicKey:
    """Derive ``sha256(base || seed || owner)``.

    No curve check is made: the result may coincide with a signable key.
    """
    raw = _seed_bytes(seed)
    if len(raw) > MAX_SEED_LENGTH:
        raise SeedTooLongError(
            f"max seed length exceeded: {len(raw)} > {MAX_SEED_LENGTH}"
        )
    digest = hashlib.sha256(bytes(base) + raw + bytes(owner)).digest()
    return PublicKey(digest)


def create_program_address(
    seeds: Sequence[Seed],
    program_id: PublicKey,
    *,
    is_on_curve: CurveCheck = _default_is_on_curve,
) -> PublicKey:
    """Derive the program address for ``seeds`` under ``program_id``.

    Raises TooManySeedsError, SeedTooLongError, IllegalOwnerError for a
    native program owner, or InvalidSeedsError if the digest is on the curve.
    """
    if len(seeds) > MAX_SEEDS:
        raise TooManySeedsError(f"max seeds exceeded: {len(seeds)} > {MAX_SEEDS}")

    hasher = hashlib.sha256()
    for seed in seeds:
        raw = _seed_bytes(seed)
        if len(raw) > MAX_SEED_LENGTH:
            raise SeedTooLongError(
                f"max seed length exceeded: {len(raw)} > {MAX_SEED_LENGTH}"
            )
        hasher.update(raw)

    if is_native_program_id(program_id):
        raise IllegalOwnerError(f"illegal owner: {program_id} is a native program")

    hasher.update(bytes(program_id))
    hasher.update(PDA_MARKER)
    digest = hasher.digest()

    if is_on_curve(digest):
        raise InvalidSeedsError("invalid seeds; address must fall off the curve")
    return PublicKey(digest)


def find_program_address(
    seeds: Sequence[Seed],
    program_id: PublicKey,
    *,
    is_on_curve: CurveCheck = _default_is_on_curve,
) -> tuple[PublicKey, int]:
    """Find the canonical program address and its bump seed.

    Bumps are tried strictly from 255 down to 1; the first off-curve
    address wins. Every client must agree on this order. A bump whose
    attempt fails for any reason (on-curve digest, illegal owner, too many
    seeds) counts as not found, so exhaustion always raises
    ProgramAddressNotFoundError chained from the last attempt.
    """
    base = list(seeds)
    last_error: SolkeysError | None = None
    for bump in range(MAX_BUMP_SEED, 0, -1):
        try:
            address = create_program_address(
                base + [bytes([bump])], program_id, is_on_curve=is_on_curve
            )
        except SolkeysError as exc:
            last_error = exc
            continue
        logger.debug(
            "Found program address %s with bump %d after %d attempts",
            address, bump, MAX_BUMP_SEED - bump + 1,
        )
        return address, bump
    raise ProgramAddressNotFoundError(
        f"unable to find a valid program address: {last_error}"
    ) from last_error


def find_associated_token_address(
    wallet: PublicKey,
    mint: PublicKey,
) -> tuple[PublicKey, int]:
    """Associated token account of ``wallet`` for ``mint``."""
    return find_program_address(
        [bytes(wallet), bytes(TOKEN_PROGRAM_ID), bytes(mint)],
        ASSOCIATED_TOKEN_PROGRAM_ID,
    )


def find_token_metadata_address(mint: PublicKey) -> tuple[PublicKey, int]:
    """Metaplex token metadata account for ``mint``."""
    return find_program_address(
        [b"metadata", bytes(TOKEN_METADATA_PROGRAM_ID), bytes(mint)],
        TOKEN_METADATA_PROGRAM_ID,
    )


# Wrappers for hard-coded inputs only; failures raise RuntimeError.

def must_create_with_seed(base: PublicKey, seed: str | bytes, owner: PublicKey) -> PublicKey:
    try:
        return create_with_seed(base, seed, owner)
    except SolkeysError as exc:
        raise RuntimeError(f"create_with_seed failed on trusted input: {exc}") from exc


def must_create_program_address(seeds: Sequence[Seed], program_id: PublicKey) -> PublicKey:
    try:
        return create_program_address(seeds, program_id)
    except SolkeysError as exc:
        raise RuntimeError(f"create_program_address failed on trusted input: {exc}") from exc


def must_find_program_address(
    seeds: Sequence[Seed], program_id: PublicKey
) -> tuple[PublicKey, int]:
    try:
        return find_program_address(seeds, program_id)
    except SolkeysError as exc:
        raise RuntimeError(f"find_program_address failed on trusted input: {exc}") from exc
