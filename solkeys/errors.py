"""Exception types raised by solkeys."""

from __future__ import annotations


class SolkeysError(Exception):
    """Base class for every error raised by solkeys."""


class FormatError(SolkeysError, ValueError):
    """Malformed or incorrectly sized base58 text or key material."""


class FileDecodeError(SolkeysError, ValueError):
    """A keygen file could not be decoded into a private key."""


class SeedTooLongError(SolkeysError, ValueError):
    """A derivation seed is longer than ``MAX_SEED_LENGTH`` bytes."""


class TooManySeedsError(SolkeysError, ValueError):
    """More than ``MAX_SEEDS`` seeds were passed to a derivation."""


class IllegalOwnerError(SolkeysError, ValueError):
    """A reserved native program or sysvar was used as a PDA owner."""


class InvalidSeedsError(SolkeysError, ValueError):
    """The candidate program address lies on the ed25519 curve."""


class ProgramAddressNotFoundError(SolkeysError):
    """No bump seed in 255..1 produced an off-curve address."""


class RandomSourceError(SolkeysError, OSError):
    """The secure entropy source is unavailable."""
