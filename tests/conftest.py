"""Shared test fixtures."""

import sys

import pytest

from pytimeutil import Duration


@pytest.fixture
def zero():
    return Duration()


@pytest.fixture
def sample():
    return Duration(days=5, hours=3, minutes=7, seconds=9, milliseconds=42)


@pytest.fixture
def end_of_day():
    return Duration(hours=23, minutes=59, seconds=59, milliseconds=999)


@pytest.fixture
def digit_limit():
    """Pin the interpreter's int/str conversion limit to its default."""
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(previous)
