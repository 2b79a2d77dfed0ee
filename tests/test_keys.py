"""Tests for argv2object.keys."""

import pytest

from argv2object.errors import InvalidCasingError, InvalidKeyTypeError
from argv2object.keys import Casing, format_key


class TestFormatKey:
    def test_strips_single_dash(self):
        assert format_key("-v", Casing.SNAKE) == "v"

    def test_strips_double_dash(self):
        assert format_key("--help") == "help"

    def test_strips_at_most_two_dashes(self):
        assert format_key("---x") == "-x"

    def test_snake(self):
        assert format_key("--output-format", Casing.SNAKE) == "output_format"

    def test_camel(self):
        assert format_key("--output-format", Casing.CAMEL) == "outputFormat"

    def test_camel_many_segments(self):
        assert format_key("a-b-c", Casing.CAMEL) == "aBC"

    def test_none_keeps_hyphens(self):
        assert format_key("--enable-logging", Casing.NONE) == "enable-logging"

    def test_plain_key_without_dashes(self):
        assert format_key("is-admin", Casing.SNAKE) == "is_admin"

    def test_casing_given_as_string(self):
        assert format_key("--is-admin", "camel") == "isAdmin"

    def test_non_string_key(self):
        with pytest.raises(InvalidKeyTypeError) as info:
            format_key(12, Casing.SNAKE)
        assert isinstance(info.value, TypeError)
        assert str(info.value) == "Key must be a string"


class TestCasingCoerce:
    @pytest.mark.parametrize("spelling, expected", [
        (Casing.CAMEL, Casing.CAMEL),
        ("snake", Casing.SNAKE),
        ("SNAKE", Casing.SNAKE),
        ("snakecase", Casing.SNAKE),
        ("camelcase", Casing.CAMEL),
        ("none", Casing.NONE),
    ])
    def test_accepted(self, spelling, expected):
        assert Casing.coerce(spelling) is expected

    @pytest.mark.parametrize("spelling", [
        "kebab", "case", "nonecase", "NONECASE", "snake_case", "", None, 3,
    ])
    def test_rejected(self, spelling):
        with pytest.raises(InvalidCasingError):
            Casing.coerce(spelling)
