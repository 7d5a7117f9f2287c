"""Well-known program IDs and the reserved native program set."""

from __future__ import annotations

from .keys import PublicKey, must_public_key_from_base58

SYSTEM_PROGRAM_ID = must_public_key_from_base58("11111111111111111111111111111111")
CONFIG_PROGRAM_ID = must_public_key_from_base58("Config1111111111111111111111111111111111111")
STAKE_PROGRAM_ID = must_public_key_from_base58("Stake11111111111111111111111111111111111111")
VOTE_PROGRAM_ID = must_public_key_from_base58("Vote111111111111111111111111111111111111111")
FEATURE_PROGRAM_ID = must_public_key_from_base58("Feature111111111111111111111111111111111111")
SECP256K1_PROGRAM_ID = must_public_key_from_base58("KeccakSecp256k11111111111111111111111111111")

BPF_LOADER_DEPRECATED_PROGRAM_ID = must_public_key_from_base58(
    "BPFLoader1111111111111111111111111111111111"
)
BPF_LOADER_PROGRAM_ID = must_public_key_from_base58("BPFLoader2111111111111111111111111111111111")
BPF_LOADER_UPGRADEABLE_PROGRAM_ID = must_public_key_from_base58(
    "BPFLoaderUpgradeab1e11111111111111111111111"
)

TOKEN_PROGRAM_ID = must_public_key_from_base58("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
ASSOCIATED_TOKEN_PROGRAM_ID = must_public_key_from_base58(
    "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"
)
TOKEN_METADATA_PROGRAM_ID = must_public_key_from_base58(
    "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"
)

# Sysvars
SYSVAR_CLOCK_PUBKEY = must_public_key_from_base58("SysvarC1ock11111111111111111111111111111111")
SYSVAR_EPOCH_SCHEDULE_PUBKEY = must_public_key_from_base58(
    "SysvarEpochSchedu1e111111111111111111111111"
)
SYSVAR_FEES_PUBKEY = must_public_key_from_base58("SysvarFees111111111111111111111111111111111")
SYSVAR_INSTRUCTIONS_PUBKEY = must_public_key_from_base58(
    "Sysvar1nstructions1111111111111111111111111"
)
SYSVAR_RECENT_BLOCKHASHES_PUBKEY = must_public_key_from_base58(
    "SysvarRecentB1ockHashes11111111111111111111"
)
SYSVAR_RENT_PUBKEY = must_public_key_from_base58("SysvarRent111111111111111111111111111111111")
SYSVAR_REWARDS_PUBKEY = must_public_key_from_base58("SysvarRewards111111111111111111111111111111")
SYSVAR_SLOT_HASHES_PUBKEY = must_public_key_from_base58(
    "SysvarS1otHashes111111111111111111111111111"
)
SYSVAR_SLOT_HISTORY_PUBKEY = must_public_key_from_base58(
    "SysvarS1otHistory11111111111111111111111111"
)
SYSVAR_STAKE_HISTORY_PUBKEY = must_public_key_from_base58(
    "SysvarStakeHistory1111111111111111111111111"
)

# Protocol-managed namespaces that cannot own program derived addresses.
# The upgradeable loader is not reserved.
NATIVE_PROGRAM_IDS: frozenset[PublicKey] = frozenset({
    BPF_LOADER_PROGRAM_ID,
    BPF_LOADER_DEPRECATED_PROGRAM_ID,
    FEATURE_PROGRAM_ID,
    CONFIG_PROGRAM_ID,
    STAKE_PROGRAM_ID,
    VOTE_PROGRAM_ID,
    SECP256K1_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    SYSVAR_CLOCK_PUBKEY,
    SYSVAR_EPOCH_SCHEDULE_PUBKEY,
    SYSVAR_FEES_PUBKEY,
    SYSVAR_INSTRUCTIONS_PUBKEY,
    SYSVAR_RECENT_BLOCKHASHES_PUBKEY,
    SYSVAR_RENT_PUBKEY,
    SYSVAR_REWARDS_PUBKEY,
    SYSVAR_SLOT_HASHES_PUBKEY,
    SYSVAR_SLOT_HISTORY_PUBKEY,
    SYSVAR_STAKE_HISTORY_PUBKEY,
})


def is_native_program_id(key: PublicKey) -> bool:
    return key in NATIVE_PROGRAM_IDS
