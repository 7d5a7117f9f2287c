"""Tests for seeded addresses and program derived addresses."""

import pytest

from solkeys import (
    IllegalOwnerError,
    InvalidSeedsError,
    ProgramAddressNotFoundError,
    PublicKey,
    SeedTooLongError,
    TooManySeedsError,
    Wallet,
    create_program_address,
    create_with_seed,
    find_associated_token_address,
    find_program_address,
    find_token_metadata_address,
    is_native_program_id,
    is_on_curve,
    must_create_program_address,
    must_create_with_seed,
    must_find_program_address,
)
from solkeys.programs import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    BPF_LOADER_UPGRADEABLE_PROGRAM_ID,
    CONFIG_PROGRAM_ID,
    NATIVE_PROGRAM_IDS,
    SYSTEM_PROGRAM_ID,
    SYSVAR_RENT_PUBKEY,
    TOKEN_METADATA_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
)

PROGRAM_ID = PublicKey.from_base58("BPFLoaderUpgradeab1e11111111111111111111111")
SEED_PUBKEY = PublicKey.from_base58("SeedPubey1111111111111111111111111111111111")


class TestCreateWithSeed:
    def test_known_address(self):
        got = create_with_seed(PublicKey(), "limber chicken: 4/45", PublicKey())
        assert got == PublicKey.from_base58("9h1HyLCW5dZnBVap8C5egQ9Z6pHyjsh5MNy83iPqqRuq")

    def test_max_length_seed(self):
        got = create_with_seed(PublicKey(), "x" * 32, PublicKey())
        assert len(bytes(got)) == 32

    def test_seed_too_long(self):
        with pytest.raises(SeedTooLongError):
            create_with_seed(PublicKey(), "x" * 33, PublicKey())

    def test_seed_length_counts_bytes(self):
        # 11 three-byte characters = 33 bytes
        with pytest.raises(SeedTooLongError):
            create_with_seed(PublicKey(), "☉" * 11, PublicKey())

    def test_deterministic(self):
        a = create_with_seed(SEED_PUBKEY, "stake:0", TOKEN_PROGRAM_ID)
        b = create_with_seed(SEED_PUBKEY, "stake:0", TOKEN_PROGRAM_ID)
        assert a == b
        assert a != create_with_seed(SEED_PUBKEY, "stake:1", TOKEN_PROGRAM_ID)

    def test_native_owner_allowed(self):
        create_with_seed(SEED_PUBKEY, "vote", SYSTEM_PROGRAM_ID)

    def test_must_variant(self):
        assert must_create_with_seed(PublicKey(), "limber chicken: 4/45", PublicKey()) == (
            PublicKey.from_base58("9h1HyLCW5dZnBVap8C5egQ9Z6pHyjsh5MNy83iPqqRuq")
        )
        with pytest.raises(RuntimeError):
            must_create_with_seed(PublicKey(), "x" * 33, PublicKey())


class TestCreateProgramAddress:
    def test_empty_and_one(self):
        got = create_program_address([b"", bytes([1])], PROGRAM_ID)
        assert got == PublicKey.from_base58("BwqrghZA2htAcqq8dzP1WDAhTXYTYWj7CHxF5j7TDBAe")

    def test_unicode_seed(self):
        got = create_program_address(["☉".encode("utf-8"), bytes([0])], PROGRAM_ID)
        assert got == PublicKey.from_base58("13yWmRpaTR4r5nAktwLqMpRNr28tnVUZw26rTvPSSB19")

    def test_text_seeds(self):
        got = create_program_address([b"Talking", b"Squirrels"], PROGRAM_ID)
        assert got == PublicKey.from_base58("2fnQrngrQT4SeLcdToJAD96phoEjNL2man2kfRLCASVk")

    def test_public_key_seed(self):
        got = create_program_address([SEED_PUBKEY, bytes([1])], PROGRAM_ID)
        assert got == PublicKey.from_base58("976ymqVnfE32QFe6NfGDctSvVa36LWnvYxhU6G2232YL")

    def test_deterministic(self):
        a = create_program_address([b"Talking", b"Squirrels"], PROGRAM_ID)
        b = create_program_address([b"Talking", b"Squirrels"], PROGRAM_ID)
        assert a == b

    def test_result_is_off_curve(self):
        got = create_program_address([b"Talking", b"Squirrels"], PROGRAM_ID)
        assert is_on_curve(bytes(got)) is False

    def test_seed_order_matters(self):
        off_curve = lambda d: False
        a = create_program_address([b"Talking", b"Squirrels"], PROGRAM_ID, is_on_curve=off_curve)
        b = create_program_address([b"Squirrels", b"Talking"], PROGRAM_ID, is_on_curve=off_curve)
        assert a != b

    def test_max_seed_length(self):
        create_program_address([b"\x01" * 32], PROGRAM_ID, is_on_curve=lambda d: False)
        with pytest.raises(SeedTooLongError):
            create_program_address([b"\x01" * 33], PROGRAM_ID)

    def test_max_seeds(self):
        create_program_address([b"s"] * 16, PROGRAM_ID, is_on_curve=lambda d: False)
        with pytest.raises(TooManySeedsError):
            create_program_address([b"s"] * 17, PROGRAM_ID)

    @pytest.mark.parametrize("owner", sorted(NATIVE_PROGRAM_IDS, key=bytes))
    def test_native_owner_rejected(self, owner):
        with pytest.raises(IllegalOwnerError):
            create_program_address([b"seed"], owner, is_on_curve=lambda d: False)

    def test_int_seed_rejected(self):
        with pytest.raises(TypeError):
            create_program_address([5], PROGRAM_ID, is_on_curve=lambda d: False)
        with pytest.raises(TypeError):
            create_with_seed(PublicKey(), 5, PublicKey())

    def test_on_curve_rejected(self):
        with pytest.raises(InvalidSeedsError):
            create_program_address([b"seed"], PROGRAM_ID, is_on_curve=lambda d: True)

    def test_curve_check_receives_digest(self):
        seen = []

        def record(digest):
            seen.append(digest)
            return False

        got = create_program_address([b"Talking", b"Squirrels"], PROGRAM_ID, is_on_curve=record)
        assert seen == [bytes(got)]

    def test_must_variant(self):
        assert must_create_program_address([b"Talking", b"Squirrels"], PROGRAM_ID) == (
            PublicKey.from_base58("2fnQrngrQT4SeLcdToJAD96phoEjNL2man2kfRLCASVk")
        )
        with pytest.raises(RuntimeError):
            must_create_program_address([b"seed"], SYSTEM_PROGRAM_ID)


class TestNativePrograms:
    def test_membership(self):
        assert is_native_program_id(CONFIG_PROGRAM_ID)
        assert is_native_program_id(SYSTEM_PROGRAM_ID)
        assert is_native_program_id(SYSVAR_RENT_PUBKEY)
        assert not is_native_program_id(BPF_LOADER_UPGRADEABLE_PROGRAM_ID)
        assert not is_native_program_id(TOKEN_PROGRAM_ID)

    def test_size(self):
        assert len(NATIVE_PROGRAM_IDS) == 18

    def test_immutable(self):
        assert isinstance(NATIVE_PROGRAM_IDS, frozenset)


class TestFindProgramAddress:
    def test_rederivation_with_random_owners(self):
        for _ in range(1_000):
            program_id = Wallet.new().public_key
            address, bump = find_program_address([b"Lil'", b"Bits"], program_id)
            got = create_program_address([b"Lil'", b"Bits", bytes([bump])], program_id)
            assert got == address
            assert 1 <= bump <= 255

    def test_returns_highest_bump(self):
        address, bump = find_program_address([b"Lil'", b"Bits"], PROGRAM_ID)
        for higher in range(bump + 1, 256):
            with pytest.raises(InvalidSeedsError):
                create_program_address([b"Lil'", b"Bits", bytes([higher])], PROGRAM_ID)
        assert not is_on_curve(bytes(address))

    def test_descending_order(self):
        tried = []

        def reject_first_three(digest):
            tried.append(digest)
            return len(tried) <= 3

        _, bump = find_program_address([b"seed"], PROGRAM_ID, is_on_curve=reject_first_three)
        assert bump == 252

    def test_exhaustion(self):
        calls = []

        def always_on_curve(digest):
            calls.append(digest)
            return True

        with pytest.raises(ProgramAddressNotFoundError):
            find_program_address([b"seed"], PROGRAM_ID, is_on_curve=always_on_curve)
        assert len(calls) == 255

    def test_native_owner_not_found(self):
        with pytest.raises(ProgramAddressNotFoundError) as exc_info:
            find_program_address([b"seed"], SYSTEM_PROGRAM_ID)
        assert isinstance(exc_info.value.__cause__, IllegalOwnerError)

    def test_too_many_seeds_with_bump_not_found(self):
        # The bump counts as a seed
        with pytest.raises(ProgramAddressNotFoundError) as exc_info:
            find_program_address([b"s"] * 16, PROGRAM_ID)
        assert isinstance(exc_info.value.__cause__, TooManySeedsError)

    def test_seed_too_long_not_found(self):
        with pytest.raises(ProgramAddressNotFoundError) as exc_info:
            find_program_address([b"\x01" * 33], PROGRAM_ID)
        assert isinstance(exc_info.value.__cause__, SeedTooLongError)

    def test_does_not_mutate_seeds(self):
        seeds = [b"Lil'", b"Bits"]
        find_program_address(seeds, PROGRAM_ID)
        assert seeds == [b"Lil'", b"Bits"]

    def test_must_variant(self):
        assert must_find_program_address([b"Lil'", b"Bits"], PROGRAM_ID) == (
            find_program_address([b"Lil'", b"Bits"], PROGRAM_ID)
        )
        with pytest.raises(RuntimeError):
            must_find_program_address([b"seed"], SYSTEM_PROGRAM_ID)


class TestDerivedConventions:
    def test_token_metadata_address(self):
        mint = PublicKey.from_base58("77K8mr457qxUSSNSfi4sSj5euP8DyuJJWHAUQVW8QCp3")
        address, bump = find_token_metadata_address(mint)
        assert address == PublicKey.from_base58("GfihrEYCPrvUyrMyMQPdhGEStxa9nKEK2Wfn9iK4AZq2")
        assert bump == 0xFD

    def test_token_metadata_seeds(self):
        mint = PublicKey.from_base58("77K8mr457qxUSSNSfi4sSj5euP8DyuJJWHAUQVW8QCp3")
        assert find_token_metadata_address(mint) == find_program_address(
            [b"metadata", TOKEN_METADATA_PROGRAM_ID, mint], TOKEN_METADATA_PROGRAM_ID
        )

    def test_associated_token_address(self):
        wallet = Wallet.new().public_key
        mint = Wallet.new().public_key
        address, bump = find_associated_token_address(wallet, mint)
        expected = create_program_address(
            [wallet, TOKEN_PROGRAM_ID, mint, bytes([bump])], ASSOCIATED_TOKEN_PROGRAM_ID
        )
        assert address == expected
        assert not is_on_curve(bytes(address))

    def test_associated_token_address_per_wallet(self):
        mint = Wallet.new().public_key
        a, _ = find_associated_token_address(Wallet.new().public_key, mint)
        b, _ = find_associated_token_address(Wallet.new().public_key, mint)
        assert a != b
