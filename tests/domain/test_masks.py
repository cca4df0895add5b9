"""Tests for mask validation, namespace size, and template splitting."""

import pytest

from noid.domain.alphabet import DIGIT, XDIGIT
from noid.domain.masks import get_noid_range, is_expandable, remove_prefix, validate_mask


class TestValidateMask:
    @pytest.mark.parametrize(
        "mask",
        [
            "zek",
            "ze",
            "zdk",
            "zd",
            "zededededdeeddk",
            "zededededdeedd",
            "rek",
            "re",
            "rdk",
            "rd",
            "rededededdeeddk",
            "rededededdeedd",
            "sek",
            "se",
            "sdk",
            "sd",
            "sededededdeeddk",
            "sededededdeedd",
            "ek",
            "e",
            "dk",
            "d",
            "ededededdeeddk",
            "ededededdeedd",
        ],
    )
    def test_valid(self, mask: str) -> None:
        assert validate_mask(mask)

    @pytest.mark.parametrize(
        "mask",
        [
            "a",
            "aa",
            "zeeedddl",  # bad last character
            "zeeedtddl",
            "zeeedtdd",  # bad middle character
            "adddeeew",
            "",
            "k",
            "z",
            "zz",
            "zk",  # no digit positions
            "rk",
            "sk",
            "kd",  # check digit first
            "zdkd",  # check digit in the middle
            "dzd",  # generator in the middle
            "ZEK",  # case sensitive
        ],
    )
    def test_invalid(self, mask: str) -> None:
        assert not validate_mask(mask)


class TestGetNoidRange:
    def test_mixed(self) -> None:
        assert get_noid_range("zedek") == len(XDIGIT) ** 2 * len(DIGIT)

    def test_decimal(self) -> None:
        assert get_noid_range("zddddk") == len(DIGIT) ** 4

    def test_extended(self) -> None:
        assert get_noid_range("zeeeek") == len(XDIGIT) ** 4

    def test_sequential_marker_ignored(self) -> None:
        assert get_noid_range("seee") == len(XDIGIT) ** 3

    def test_random_marker_ignored(self) -> None:
        assert get_noid_range("rddee") == len(DIGIT) ** 2 * len(XDIGIT) ** 2

    def test_multiplicative(self) -> None:
        assert get_noid_range("de") == get_noid_range("d") * get_noid_range("e")

    def test_no_digit_positions(self) -> None:
        assert get_noid_range("zk") == 1
        assert get_noid_range("") == 1


class TestRemovePrefix:
    @pytest.mark.parametrize(
        "template,expected",
        [
            ("something.eedeede", ("something.", "eedeede")),
            ("eedeede", ("", "eedeede")),
            ("something.eedeedek", ("something.", "eedeedek")),
            ("eedeedek", ("", "eedeedek")),
            ("something.reddek", ("something.", "reddek")),
            ("reddek", ("", "reddek")),
        ],
    )
    def test_split(self, template: str, expected: tuple[str, str]) -> None:
        assert remove_prefix(template) == expected

    def test_splits_on_last_dot(self) -> None:
        assert remove_prefix("a.b.zek") == ("a.b.", "zek")

    def test_trailing_dot_leaves_empty_mask(self) -> None:
        assert remove_prefix("prefix.") == ("prefix.", "")


class TestIsExpandable:
    def test_z_expands(self) -> None:
        assert is_expandable("zeek")

    @pytest.mark.parametrize("mask", ["reek", "seek", "eek"])
    def test_others_do_not(self, mask: str) -> None:
        assert not is_expandable(mask)
