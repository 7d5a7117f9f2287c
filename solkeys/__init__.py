"""solkeys — ed25519 keys, base58 addresses and program derived addresses."""

import logging

from .codec import b58decode, b58encode
from .curve import is_on_curve
from .derive import (
    MAX_SEED_LENGTH,
    MAX_SEEDS,
    create_program_address,
    create_with_seed,
    find_associated_token_address,
    find_program_address,
    find_token_metadata_address,
    must_create_program_address,
    must_create_with_seed,
    must_find_program_address,
)
from .errors import (
    FileDecodeError,
    FormatError,
    IllegalOwnerError,
    InvalidSeedsError,
    ProgramAddressNotFoundError,
    RandomSourceError,
    SeedTooLongError,
    SolkeysError,
    TooManySeedsError,
)
from .keygen import read_keygen_file, write_keygen_file
from .keys import (
    PrivateKey,
    PublicKey,
    PublicKeyList,
    Signature,
    Wallet,
    json_default,
    must_private_key_from_base58,
    must_public_key_from_base58,
)
from .programs import NATIVE_PROGRAM_IDS, is_native_program_id

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "PublicKey",
    "PrivateKey",
    "Signature",
    "Wallet",
    "PublicKeyList",
    "json_default",
    "must_public_key_from_base58",
    "must_private_key_from_base58",
    "b58encode",
    "b58decode",
    "read_keygen_file",
    "write_keygen_file",
    "is_on_curve",
    "NATIVE_PROGRAM_IDS",
    "is_native_program_id",
    "MAX_SEED_LENGTH",
    "MAX_SEEDS",
    "create_with_seed",
    "create_program_address",
    "find_program_address",
    "find_associated_token_address",
    "find_token_metadata_address",
    "must_create_with_seed",
    "must_create_program_address",
    "must_find_program_address",
    "SolkeysError",
    "FormatError",
    "FileDecodeError",
    "SeedTooLongError",
    "TooManySeedsError",
    "IllegalOwnerError",
    "InvalidSeedsError",
    "ProgramAddressNotFoundError",
    "RandomSourceError",
]
