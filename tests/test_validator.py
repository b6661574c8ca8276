import re

import pytest

from greenlight.core.validator import EMAIL_RX, Validator, matches, permitted_value, unique


def test_new_validator_is_valid() -> None:
    v = Validator()

    assert v.valid is True
    assert v.errors == {}


def test_first_message_for_a_key_wins() -> None:
    v = Validator()
    v.check(False, "k", "m")
    v.check(False, "k", "m2")
    v.add_error("k", "m3")

    assert v.errors == {"k": "m"}
    assert v.valid is False


def test_passing_checks_record_nothing() -> None:
    v = Validator()
    v.check(True, "title", "must be provided")
    v.check(1 + 1 == 2, "year", "must be provided")

    assert v.valid is True


def test_errors_are_kept_per_field() -> None:
    v = Validator()
    v.check(False, "title", "must be provided")
    v.add_error("year", "must be provided")

    assert v.errors == {"title": "must be provided", "year": "must be provided"}


@pytest.mark.parametrize(
    "values",
    [[], ["drama"], ["drama", "romance"], ["a", "b", "c", "d", "e"], [1, 2, 3]],
)
def test_unique_without_duplicates(values: list) -> None:
    assert unique(values) is True


@pytest.mark.parametrize(
    "values",
    [["drama", "drama"], ["a", "b", "c", "a"], ["x", "y", "y", "z", "w"]],
)
def test_unique_with_duplicates(values: list) -> None:
    assert unique(values) is False


def test_unique_accepts_any_iterable() -> None:
    assert unique(iter(["war", "drama"])) is True
    assert unique(g for g in ["war", "war"]) is False


def test_permitted_value() -> None:
    assert permitted_value("asc", "asc", "desc") is True
    assert permitted_value("up", "asc", "desc") is False
    assert permitted_value(3, 1, 2, 3) is True
    assert permitted_value("anything") is False


def test_matches_finds_pattern_anywhere_unless_anchored() -> None:
    assert matches("alice@example.com", EMAIL_RX) is True
    assert matches("alice@mail.example.co.uk", EMAIL_RX) is True
    assert matches("alice@", EMAIL_RX) is False
    assert matches("not an email", EMAIL_RX) is False
    assert matches("abc123", re.compile(r"[a-z]+")) is True
    assert matches("abc123", re.compile(r"^[a-z]+$")) is False
    assert matches("123", re.compile(r"[a-z]+")) is False
