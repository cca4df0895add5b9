"""Tests for mixed-radix encoding and decoding."""

import logging

import pytest

from noid.domain.alphabet import DIGIT, DIGTYPES, XDIGIT
from noid.domain.codec import decode_noid, generate_noid
from noid.domain.masks import get_noid_range


class TestGenerateNoid:
    def test_decimal_identity(self) -> None:
        for n, symbol in enumerate(DIGIT):
            assert generate_noid("d", n) == symbol

    def test_extended_identity(self) -> None:
        for n, symbol in enumerate(XDIGIT):
            assert generate_noid("e", n) == symbol

    def test_most_significant_first(self) -> None:
        assert generate_noid("ddd", 123) == "123"
        assert generate_noid("ee", 100) == "1H"

    def test_zero_pads_to_mask_length(self) -> None:
        assert generate_noid("dddd", 7) == "0007"

    def test_mixed_radix(self) -> None:
        # 1234 -> d:4, d:3, e:12 ('c'), e:0
        assert generate_noid("zeeddk", 1234) == "0c34"

    def test_markers_are_not_encoded(self) -> None:
        assert generate_noid("sdk", 5) == "5"
        assert generate_noid("rdd", 42) == "42"

    def test_length_matches_digit_positions(self) -> None:
        mask = "zedek"
        for n in (0, 1, 57, 580, get_noid_range(mask) - 1):
            assert len(generate_noid(mask, n)) == 3


class TestRollover:
    def test_decimal(self) -> None:
        assert generate_noid("zd", len(DIGIT)) == "10"

    def test_extended(self) -> None:
        assert generate_noid("ze", len(XDIGIT)) == "10"

    def test_expands_on_first_digit_radix(self) -> None:
        capacity = get_noid_range("zeeddk")
        assert generate_noid("zeeddk", capacity) == "10000"
        assert generate_noid("zeeddk", capacity * len(XDIGIT)) == "100000"

    def test_decimal_expansion_of_extended_mask(self) -> None:
        # expansion uses the radix of the first digit position only
        assert generate_noid("zde", 10 * 58 * 10 + 1) == "1001"

    def test_keeps_growing(self) -> None:
        assert generate_noid("zd", 12345) == "12345"


class TestOverflow:
    def test_decimal(self) -> None:
        assert generate_noid("d", len(DIGIT)) == ""
        assert generate_noid("d", len(DIGIT) + 1) == ""

    def test_extended(self) -> None:
        assert generate_noid("e", len(XDIGIT)) == ""

    def test_sequential_mask_does_not_expand(self) -> None:
        assert generate_noid("sdd", 100) == ""

    def test_last_index_fits(self) -> None:
        assert generate_noid("dd", 99) == "99"

    def test_overflow_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="noid"):
            generate_noid("d", 10)
        assert "Cannot mint" in caplog.text

    def test_corrupt_expansion_character(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="noid"):
            assert generate_noid("zk", 1) == ""
        assert "corrupt" in caplog.text


class TestRandom:
    @pytest.mark.parametrize("mask", ["zeek", "reek", "seek", "eek", "zddd", "d"])
    def test_random_stays_in_namespace(self, mask: str) -> None:
        digit_count = sum(1 for char in mask if char in DIGTYPES)
        for _ in range(50):
            noid = generate_noid(mask, -1)
            assert len(noid) == digit_count
            index = decode_noid(mask, noid)
            assert index is not None
            assert 0 <= index < get_noid_range(mask)

    def test_random_varies(self) -> None:
        noids = {generate_noid("zeeeeee", -1) for _ in range(20)}
        assert len(noids) > 1


class TestDecodeNoid:
    @pytest.mark.parametrize("mask", ["d", "e", "zedek", "reddee", "sdddd", "eek"])
    def test_round_trip_samples(self, mask: str) -> None:
        capacity = get_noid_range(mask)
        for n in {0, 1, capacity // 3, capacity // 2, capacity - 1}:
            assert decode_noid(mask, generate_noid(mask, n)) == n

    def test_round_trip_small_namespace_exhaustively(self) -> None:
        for n in range(get_noid_range("de")):
            assert decode_noid("de", generate_noid("de", n)) == n

    def test_round_trip_through_rollover(self) -> None:
        for n in (580, 5800, 10**9, 58**7 + 3):
            assert decode_noid("zedk", generate_noid("zedk", n)) == n

    def test_known_value(self) -> None:
        assert decode_noid("eek", "1H") == 100

    def test_too_short(self) -> None:
        assert decode_noid("ddd", "12") is None

    def test_extra_symbols_need_z(self) -> None:
        assert decode_noid("dd", "123") is None
        assert decode_noid("zdd", "123") == 123

    def test_leading_zero_rollover_rejected(self) -> None:
        # generate_noid never pads a rolled-over noid with zeros
        assert decode_noid("zd", "5") == 5
        assert decode_noid("zd", "05") is None
        assert decode_noid("zd", "0005") is None
        assert decode_noid("zd", "10") == 10

    def test_unknown_symbol(self) -> None:
        assert decode_noid("ee", "l0") is None

    def test_symbol_exceeds_radix(self) -> None:
        assert decode_noid("d", "a") is None
