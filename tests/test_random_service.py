"""Tests for the configurable random number generator."""

import pytest

from services.random_service import generate_random_number, read_random_range


def _draw(n: int = 300) -> list[int]:
    return [generate_random_number() for _ in range(n)]


def test_defaults_without_env(clean_random_env) -> None:
    assert read_random_range() == (1, 100)
    assert all(1 <= v <= 100 for v in _draw())


def test_configured_range(clean_random_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RANDOM_MIN", "10")
    monkeypatch.setenv("RANDOM_MAX", "20")

    assert all(10 <= v <= 20 for v in _draw())


def test_inverted_bounds_are_swapped(clean_random_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RANDOM_MIN", "5")
    monkeypatch.setenv("RANDOM_MAX", "3")

    assert read_random_range() == (3, 5)
    values = _draw(500)
    assert all(3 <= v <= 5 for v in values)
    assert {3, 5} <= set(values)


@pytest.mark.parametrize(
    "low, high",
    [
        ("abc", "def"),
        ("abc", None),
        (None, "x1"),
        ("1_0", None),
        (" 5 ", None),
        ("", None),
        (str(2 ** 31), None),
        (None, "-2147483649"),
    ],
)
def test_invalid_values_fall_back_to_defaults(
    clean_random_env, monkeypatch: pytest.MonkeyPatch, low, high
) -> None:
    if low is not None:
        monkeypatch.setenv("RANDOM_MIN", low)
    if high is not None:
        monkeypatch.setenv("RANDOM_MAX", high)

    assert read_random_range() == (1, 100)
    assert all(1 <= v <= 100 for v in _draw())


def test_single_value_range(clean_random_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RANDOM_MIN", "-7")
    monkeypatch.setenv("RANDOM_MAX", "-7")

    assert set(_draw(20)) == {-7}


def test_range_is_reread_each_call(clean_random_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RANDOM_MIN", "1")
    monkeypatch.setenv("RANDOM_MAX", "1")
    assert generate_random_number() == 1

    monkeypatch.setenv("RANDOM_MIN", "2")
    monkeypatch.setenv("RANDOM_MAX", "2")
    assert generate_random_number() == 2


def test_signed_32_bit_extremes_accepted(clean_random_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RANDOM_MIN", "-2147483648")
    monkeypatch.setenv("RANDOM_MAX", "+2147483647")

    assert read_random_range() == (-2147483648, 2147483647)
