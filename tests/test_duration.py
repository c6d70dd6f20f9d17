"""Tests for the Duration value type."""

from datetime import timedelta
from decimal import Decimal
from fractions import Fraction

import pytest

from humanise import Duration, InvalidDuration


def test_of_seconds_is_exact():
    """Test that numbers become exact fractions of seconds."""
    assert Duration.of(90).seconds == Fraction(90)
    assert Duration.of(0.1).seconds == Fraction(1, 10)
    assert Duration.of(Decimal("2.25")).seconds == Fraction(9, 4)


def test_of_other_units():
    """Test numbers counted in units other than seconds."""
    assert Duration.of(1500, "millisecond").seconds == Fraction(3, 2)
    assert Duration.of(2, "hour").seconds == Fraction(7200)
    assert Duration.of(1, "year").in_units("day") == Fraction(1461, 4)


def test_of_invalid_unit():
    """Test that unknown unit names are rejected."""
    with pytest.raises(ValueError, match="fortnight"):
        Duration.of(1, "fortnight")


def test_of_passes_through_duration_and_timedelta():
    """Test Duration and timedelta inputs keep their own scale."""
    duration = Duration.of(5)
    assert Duration.of(duration) is duration
    assert Duration.of(timedelta(minutes=1), "millisecond").seconds == 60


def test_from_timedelta_keeps_microseconds():
    """Test that timedelta conversion is exact."""
    delta = timedelta(days=1, seconds=1, microseconds=1)
    assert Duration.from_timedelta(delta).seconds == Fraction(86401) + Fraction(
        1, 10**6
    )


def test_constructor_normalises_and_validates():
    """Test that the constructor stores a Fraction and rejects negatives."""
    assert Duration(seconds=5).seconds == Fraction(5)
    assert isinstance(Duration(seconds=5).seconds, Fraction)
    with pytest.raises(InvalidDuration) as excinfo:
        Duration(seconds=Fraction(-1))
    assert excinfo.value.value == -1


def test_invalid_duration_message():
    """Test that the error message names the problem and the input."""
    with pytest.raises(InvalidDuration) as excinfo:
        Duration.of(float("nan"))
    message = str(excinfo.value)
    assert "not finite" in message
    assert "nan" in message


def test_str():
    """Test the human-friendly string form."""
    assert str(Duration.of(90)) == "Duration(90s)"
    assert Duration.of(1500, "millisecond").total_seconds() == 1.5
