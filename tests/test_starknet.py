"""Tests for calldata encoding and function selectors."""

from unittest.mock import patch

import pytest
from Crypto.Hash import keccak as pycryptodome_keccak

from cosmic_gateway import starknet
from cosmic_gateway.starknet import (
    COSMIC_TRADER_FUNCTIONS,
    KNOWN_SELECTORS,
    SELECTOR_MASK,
    TradeDirection,
    compute_selector,
    format_address,
    get_function_selector,
    split_uint256,
    to_felt,
    trade_direction_to_felt,
    uint256_calldata,
)


def reference_selector(name: str) -> str:
    """Selector computed with pycryptodome instead of eth-hash."""
    digest = pycryptodome_keccak.new(digest_bits=256, data=name.encode("utf-8")).digest()
    return hex(int.from_bytes(digest, "big") & SELECTOR_MASK)


class TestSelectors:
    """Tests for selector resolution."""

    def test_transfer_selector_matches_known_value(self):
        assert compute_selector("transfer") == (
            "0x83afd3f4caedc6eebf44246fe54e38c95e3179a5ec9ea81740eca5b482d12e"
        )

    @pytest.mark.parametrize("name", sorted(KNOWN_SELECTORS))
    def test_fallback_table_matches_independent_hash(self, name):
        assert KNOWN_SELECTORS[name] == reference_selector(name)

    @pytest.mark.parametrize("name", sorted(KNOWN_SELECTORS))
    def test_primary_path_matches_fallback_table(self, name):
        assert get_function_selector(name) == KNOWN_SELECTORS[name]

    def test_resolution_is_stable(self):
        assert get_function_selector("place_mock_trade") == get_function_selector(
            "place_mock_trade"
        )

    def test_selector_fits_250_bits(self):
        assert int(compute_selector("register_user"), 16) <= SELECTOR_MASK

    def test_table_covers_every_listed_function(self):
        listed = {name for group in COSMIC_TRADER_FUNCTIONS.values() for name in group}

        assert listed == set(KNOWN_SELECTORS)

    def test_fallback_used_when_hashing_fails(self):
        with patch.object(starknet, "keccak", side_effect=RuntimeError("no backend")):
            assert get_function_selector("add_xp") == KNOWN_SELECTORS["add_xp"]
            assert get_function_selector("not_a_function") == "0x0"


class TestFeltEncoding:
    """Tests for felt conversions."""

    def test_hex_string_passes_through(self):
        assert to_felt("0xdeadbeef") == "0xdeadbeef"

    def test_short_string_is_utf8_hex(self):
        assert to_felt("ETH") == "0x455448"

    def test_integer_is_hex(self):
        assert to_felt(255) == "0xff"

    def test_negative_integer_rejected(self):
        with pytest.raises(ValueError):
            to_felt(-1)

    def test_direction_codes(self):
        assert trade_direction_to_felt("Long") == "0x0"
        assert trade_direction_to_felt("Short") == "0x1"
        assert trade_direction_to_felt(TradeDirection.SHORT) == "0x1"

    @pytest.mark.parametrize("direction", ["Up", "long", "SHORT", ""])
    def test_other_directions_rejected(self, direction):
        with pytest.raises(ValueError):
            trade_direction_to_felt(direction)


class TestAddresses:
    """Tests for address normalization."""

    def test_bare_hex_gets_one_prefix(self):
        assert format_address("abc") == "0xabc"

    def test_prefixed_address_unchanged(self):
        assert format_address("0xabc") == "0xabc"

    def test_idempotent(self):
        once = format_address("1234")
        assert format_address(once) == once


class TestUint256Split:
    """Tests for low/high word splitting."""

    @pytest.mark.parametrize(
        "value",
        [0, 1, 2**128 - 1, 2**128, 2**128 + 5, 3 * 2**128 + 7, 2**256 - 1],
    )
    def test_split_recombines(self, value):
        low, high = split_uint256(value)
        assert 0 <= low < 2**128
        assert value == high * 2**128 + low

    def test_split_order(self):
        assert uint256_calldata(2**128 + 9) == ["9", "1"]

    @pytest.mark.parametrize("value", [-1, 2**256])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError):
            split_uint256(value)
