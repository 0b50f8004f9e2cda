"""Tests for the scalar codec: formatting, parsing and the omitempty predicate."""

import math

import pytest

from pyjprop import InvalidValueError, UnsupportedTypeError, uint
from pyjprop.codec import (
    format_scalar,
    is_empty_value,
    is_hook_type,
    parse_scalar,
)


class Upper:
    def __init__(self, text: str = '') -> None:
        self.text = text

    def marshal_to_text(self) -> str:
        return self.text.upper()


class Plain:
    pass


# ---------------------------------------------------------------------------
# format_scalar
# ---------------------------------------------------------------------------

class TestFormat:
    def test_bool(self):
        assert format_scalar(True) == 'true'
        assert format_scalar(False) == 'false'

    def test_int(self):
        assert format_scalar(30) == '30'
        assert format_scalar(-7) == '-7'

    def test_float_drops_trailing_zero(self):
        assert format_scalar(2.0) == '2'
        assert format_scalar(0.5) == '0.5'
        assert format_scalar(-0.25) == '-0.25'

    def test_float_shortest_round_trip(self):
        assert format_scalar(0.1) == '0.1'
        assert float(format_scalar(1 / 3)) == 1 / 3

    def test_float_fixed_notation(self):
        assert format_scalar(1e16) == '10000000000000000'
        assert format_scalar(1.5e20) == '150000000000000000000'
        assert format_scalar(1e-05) == '0.00001'
        assert format_scalar(-2.5e-10) == '-0.00000000025'

    def test_float_zero_and_non_finite(self):
        assert format_scalar(0.0) == '0'
        assert format_scalar(float('inf')) == 'inf'
        assert format_scalar(float('-inf')) == '-inf'
        assert format_scalar(float('nan')) == 'nan'

    def test_str_verbatim(self):
        assert format_scalar('John Doe') == 'John Doe'
        assert format_scalar('') == ''

    def test_hook_used_verbatim(self):
        assert format_scalar(Upper('custom')) == 'CUSTOM'

    def test_unsupported(self):
        with pytest.raises(UnsupportedTypeError) as exc:
            format_scalar(Plain(), 'x')
        assert exc.value.key == 'x'
        assert exc.value.type is Plain

    def test_unsupported_is_type_error(self):
        with pytest.raises(TypeError):
            format_scalar(1j)


# ---------------------------------------------------------------------------
# parse_scalar
# ---------------------------------------------------------------------------

class TestParse:
    def test_str(self):
        assert parse_scalar(' kept as is ', str) == ' kept as is '

    @pytest.mark.parametrize('text', ['1', 't', 'T', 'TRUE', 'true', 'True'])
    def test_bool_true(self, text):
        assert parse_scalar(text, bool) is True

    @pytest.mark.parametrize('text', ['0', 'f', 'F', 'FALSE', 'false', 'False'])
    def test_bool_false(self, text):
        assert parse_scalar(text, bool) is False

    def test_bool_invalid(self):
        with pytest.raises(InvalidValueError) as exc:
            parse_scalar('notabool', bool, 'active')
        assert exc.value.key == 'active'
        assert exc.value.text == 'notabool'

    def test_int(self):
        assert parse_scalar('30', int) == 30
        assert parse_scalar('-30', int) == -30
        assert parse_scalar('+5', int) == 5

    def test_int_invalid(self):
        with pytest.raises(InvalidValueError):
            parse_scalar('invalid', int, 'age')

    @pytest.mark.parametrize('text', ['1.5', '1_000', ' 1', ''])
    def test_int_rejects_non_decimal(self, text):
        with pytest.raises(InvalidValueError):
            parse_scalar(text, int)

    def test_int_64bit_range(self):
        assert parse_scalar('9223372036854775807', int) == 2**63 - 1
        assert parse_scalar('-9223372036854775808', int) == -(2**63)
        with pytest.raises(InvalidValueError):
            parse_scalar('9223372036854775808', int)

    def test_uint(self):
        assert parse_scalar('18446744073709551615', uint) == 2**64 - 1

    @pytest.mark.parametrize('text', ['-1', '+1', '18446744073709551616'])
    def test_uint_invalid(self, text):
        with pytest.raises(InvalidValueError):
            parse_scalar(text, uint)

    def test_float(self):
        assert parse_scalar('0.5', float) == 0.5
        assert parse_scalar('1e3', float) == 1000.0
        assert parse_scalar('-2', float) == -2.0
        assert math.isinf(parse_scalar('inf', float))

    @pytest.mark.parametrize('text', ['abc', ' 1.0', '1_0.5', ''])
    def test_float_invalid(self, text):
        with pytest.raises(InvalidValueError):
            parse_scalar(text, float)

    def test_invalid_value_is_value_error(self):
        with pytest.raises(ValueError, match='cannot parse'):
            parse_scalar('x', float, 'ratio')

    def test_unsupported(self):
        with pytest.raises(UnsupportedTypeError):
            parse_scalar('1', complex, 'x')


# ---------------------------------------------------------------------------
# Type helpers & omitempty predicate
# ---------------------------------------------------------------------------

class TestTypeHelpers:
    def test_hook_type(self):
        assert is_hook_type(Upper)
        assert not is_hook_type(Plain)
        assert not is_hook_type(uint)


class TestIsEmpty:
    @pytest.mark.parametrize('value', [None, False, 0, 0.0, '', [], {}, ()])
    def test_empty(self, value):
        assert is_empty_value(value)

    @pytest.mark.parametrize('value', [True, 1, -1, 0.1, 'x', [''], {'': ''}])
    def test_not_empty(self, value):
        assert not is_empty_value(value)

    def test_objects_never_empty(self):
        assert not is_empty_value(Plain())
        assert not is_empty_value(Upper(''))
