"""Tests for configuration value parsing."""
import pytest

from marketplace_notifications.utils.parsing import parse_bool, to_bool


@pytest.mark.parametrize("value, expected", [
    ("true", True),
    ("True", True),
    (" FALSE ", False),
    ("false", False),
])
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


@pytest.mark.parametrize("value", ["yes", "1", "", None])
def test_parse_bool_rejects_other_values(value):
    with pytest.raises(ValueError):
        parse_bool(value)


@pytest.mark.parametrize("value, expected", [
    (None, False),
    (True, True),
    (False, False),
    (1, True),
    (0, False),
    ("true", True),
    ("False", False),
])
def test_to_bool(value, expected):
    assert to_bool(value) is expected
