from __future__ import annotations

import sys

import pytest

from semrange.core import parse_version
from semrange.parsers.errors import ParseError
from semrange.parsers.version_range import VersionRangeParser


def parse(text: str):
    return VersionRangeParser(text).parse()


def test_unbounded_interval():
    version_range = parse("(,)")

    assert version_range.start is None
    assert version_range.end is None
    assert not version_range.start_inclusive
    assert not version_range.end_inclusive
    assert version_range.is_satisfied_by("0.0.0")
    assert version_range.is_satisfied_by("999999999999999999999999999.0.0")
    assert version_range.format() == "(,)"


def test_closed_unbounded_interval_keeps_brackets():
    version_range = parse("[,]")

    assert version_range.start_inclusive and version_range.end_inclusive
    assert version_range.format() == "[,]"


def test_exclusive_lower_bound():
    version_range = parse("(1.2.3,)")

    assert version_range.start == parse_version("1.2.3")
    assert version_range.is_satisfied_by("1.2.4")
    assert version_range.is_satisfied_by("840438590432.87921312.98721341")
    assert not version_range.is_satisfied_by("1.2.3")
    assert not version_range.is_satisfied_by("0.0.0")


def test_inclusive_lower_bound():
    version_range = parse("[1.2.3,]")

    assert version_range.is_satisfied_by("1.2.3")
    assert version_range.is_satisfied_by("1.98712318972.90842")
    assert not version_range.is_satisfied_by("1.2.2")
    assert version_range.end is None


def test_exclusive_upper_bound():
    version_range = parse("(,4.5.6)")

    assert version_range.is_satisfied_by("4.5.5")
    assert version_range.is_satisfied_by("4.4.99999999999999999999999999999999")
    assert not version_range.is_satisfied_by("4.5.6")
    assert not version_range.is_satisfied_by("5.0.0")


def test_inclusive_upper_bound():
    version_range = parse("(,4.5.6]")

    assert version_range.is_satisfied_by("4.5.6")
    assert not version_range.is_satisfied_by("4.6.0")


def test_bounded_interval_with_pre_release_bounds():
    version_range = parse("[1.0.0-beta,2.0.0+build)")

    assert version_range.start == parse_version("1.0.0-beta")
    assert version_range.end == parse_version("2.0.0+build")
    assert version_range.is_satisfied_by("1.5.0")
    assert version_range.format() == "[1.0.0-beta,2.0.0+build)"


@pytest.mark.parametrize(
    ("text", "normalised"),
    [
        (">1.0.0", "(1.0.0,]"),
        (">=1.0.0", "[1.0.0,]"),
        ("<2.0.0", "[,2.0.0)"),
        ("<=2.0.0", "[,2.0.0]"),
    ],
)
def test_comparisons_normalise_to_intervals(text, normalised):
    assert parse(text).format() == normalised


def test_greater_than_excludes_its_version():
    version_range = parse(">1.0.0")

    assert not version_range.is_satisfied_by("1.0.0")
    assert version_range.is_satisfied_by("1.0.1")
    assert version_range.is_satisfied_by("100.0.0")


def test_less_or_equal_includes_its_version():
    version_range = parse("<=2.0.0")

    assert version_range.is_satisfied_by("2.0.0")
    assert version_range.is_satisfied_by("0.0.0")
    assert not version_range.is_satisfied_by("2.0.1")


def test_caret_on_major():
    version_range = parse("^1.2.3")

    assert version_range.format() == "[1.2.3,2.0.0)"
    assert version_range.is_satisfied_by("1.2.3")
    assert version_range.is_satisfied_by("1.9.9")
    assert not version_range.is_satisfied_by("2.0.0")
    assert not version_range.is_satisfied_by("1.2.2")


def test_caret_on_minor():
    version_range = parse("^0.1.2")

    assert version_range.format() == "[0.1.2,0.2.0)"
    assert version_range.is_satisfied_by("0.1.3")
    assert not version_range.is_satisfied_by("0.2.0")


def test_caret_on_patch():
    assert parse("^0.0.3").format() == "[0.0.3,0.0.4)"
    assert parse("^0.0.0").format() == "[0.0.0,0.0.1)"


def test_caret_upper_bound_drops_pre_release():
    version_range = parse("^1.2.3-beta.1")

    assert version_range.start == parse_version("1.2.3-beta.1")
    assert version_range.end == parse_version("2.0.0")


def test_exact_glob():
    version_range = parse("1.2.3")

    assert version_range.start == parse_version("1.2.3")
    assert version_range.end == parse_version("1.2.4")
    assert version_range.start_inclusive
    assert not version_range.end_inclusive
    assert version_range.is_satisfied_by("1.2.3")
    assert not version_range.is_satisfied_by("1.2.4")
    assert not version_range.is_satisfied_by("1.2.2")


def test_patch_glob():
    version_range = parse("1.2.+")

    assert version_range.format() == "[1.2.0,1.3.0)"
    assert version_range.is_satisfied_by("1.2.0")
    assert version_range.is_satisfied_by("1.2.9999")
    assert not version_range.is_satisfied_by("1.3.0")


def test_minor_glob():
    version_range = parse("1.+")

    assert version_range.format() == "[1.0.0,2.0.0)"
    assert version_range.is_satisfied_by("1.9999.0")
    assert not version_range.is_satisfied_by("0.99.99")
    assert not version_range.is_satisfied_by("2.0.0")


@pytest.mark.parametrize("text", ["+", "*"])
def test_match_everything_glob_has_no_bounds(text):
    version_range = parse(text)

    assert version_range.start is None
    assert version_range.end is None
    assert version_range.format() == "[,)"
    assert version_range.is_satisfied_by("0.0.0")
    assert version_range.is_satisfied_by("0.0.0-alpha")
    assert version_range.is_satisfied_by("9999.9999.9999")


def test_pre_release_versions_satisfy_by_core():
    version_range = parse("0.1.+")

    assert version_range.is_satisfied_by("0.1.0-BETA")
    assert version_range.is_satisfied_by("0.1.9999999999999-BETA")
    assert not version_range.is_satisfied_by("0.2.0-BETA")


def test_leading_whitespace_is_skipped():
    assert parse("  ^1.0.0").format() == "[1.0.0,2.0.0)"


@pytest.mark.parametrize("text", ["01.+", "1.01.+", "1.2.03"])
def test_glob_rejects_leading_zeros(text):
    with pytest.raises(ParseError) as exc:
        parse(text)
    assert "leading zeros" in exc.value.message


@pytest.mark.parametrize(
    ("text", "column", "message"),
    [
        ("", 0, "Numeric identifier expected."),
        ("1.2.3 ", 5, "Illegal character. End of input expected."),
        ("1.2.+.3", 5, "Illegal character. End of input expected."),
        ("1.x", 2, "Numeric identifier expected."),
        ("[1.0.0", 6, "Found end of input while parsing version range string."),
        ("[1.0.0,2.0.0", 12, "Found end of input while parsing version range string."),
        ("[1.0.0,2.0.0]x", 13, "Illegal character. End of input expected."),
        (">=", 2, "Found end of input while parsing version range string."),
        ("^", 1, "Found end of input while parsing version range string."),
        ("*1", 1, "Illegal character. End of input expected."),
    ],
)
def test_errors_carry_column(text, column, message):
    with pytest.raises(ParseError) as exc:
        parse(text)
    assert exc.value.message == message
    assert exc.value.position == column


def test_embedded_version_errors_are_rebased():
    with pytest.raises(ParseError) as exc:
        parse("[1.0.0,2.0.x)")

    error = exc.value
    assert error.source == "[1.0.0,2.0.x)"
    assert error.position == 11
    assert error.message == "Numeric identifier expected."
    assert error.cause is not None
    assert error.cause.source == "2.0.x"
    assert error.cause.position == 4
    assert error.__cause__ is error.cause
    assert error.render().splitlines()[-1] == " " * 11 + "^"


def test_embedded_version_errors_in_caret_are_rebased():
    with pytest.raises(ParseError) as exc:
        parse("^1.02.0")

    assert exc.value.position == 3
    assert exc.value.cause.position == 2


@pytest.mark.parametrize(
    "text, message",
    [
        ("1.2.+\0junk", "Illegal character. End of input expected."),
        ("*\0", "Illegal character. End of input expected."),
        ("[1.0.0,2.0.0)\0", "Illegal character. End of input expected."),
    ],
)
def test_nul_character_is_not_end_of_input(text, message):
    with pytest.raises(ParseError) as exc:
        parse(text)

    assert exc.value.message == message
    assert exc.value.position == text.index("\0")


def test_nul_character_in_embedded_version_is_rebased():
    with pytest.raises(ParseError) as exc:
        parse(">=1.0.0\0")

    assert exc.value.message == "Expected end of version. Illegal character found."
    assert exc.value.position == 7


needs_int_digit_limit = pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits") or sys.get_int_max_str_digits() == 0,
    reason="interpreter has no int/str conversion limit",
)


@needs_int_digit_limit
@pytest.mark.parametrize("template, column", [("{}.+", 0), ("1.{}.+", 2), ("^1.{}.0", 3)])
def test_oversized_numbers_are_parse_errors(template, column):
    digits = "1" * (sys.get_int_max_str_digits() + 1)

    with pytest.raises(ParseError) as exc:
        parse(template.format(digits))

    assert exc.value.message == "Numeric identifier too large."
    assert exc.value.position == column
