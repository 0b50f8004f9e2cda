# -*- encoding: utf-8 -*-
# @File   : codec.py
# @Time   : 2024/10/14 22:10:37
# @Author : Kariko Lin

"""Scalar codec: text <-> leaf values.

Leaf universe is `str`, `bool`, `int`, `uint` and `float`,
plus whatever offers the marshal / unmarshal hooks.
Integers go through a 64-bit range check to keep the text
interchangeable with fixed width readers.
"""

from decimal import Decimal
from math import isfinite
from re import compile as regex
from typing import NewType, get_origin

from .abstract import PropertiesMarshaler, PropertiesUnmarshaler
from .errors import InvalidValueError, UnsupportedTypeError

uint = NewType('uint', int)

INT64_MIN, INT64_MAX = -(1 << 63), (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1

_INT = regex(r'[+-]?[0-9]+')
_UINT = regex(r'[0-9]+')
_BOOLS = {
    '1': True, 't': True, 'T': True, 'TRUE': True, 'true': True, 'True': True,
    '0': False, 'f': False, 'F': False,
    'FALSE': False, 'false': False, 'False': False,
}


def is_hook_type(typ: object) -> bool:
    return isinstance(typ, type) and get_origin(typ) is None and (
        issubclass(typ, PropertiesMarshaler)
        or issubclass(typ, PropertiesUnmarshaler))


def format_scalar(value: object, key: str = '') -> str:
    """Render a leaf value as the text right of `=`.

    Floats use the shortest digits that read back to the same value,
    in fixed notation (`2.0` -> `2`, `1e16` -> `10000000000000000`,
    `1e-05` -> `0.00001`). `inf` and `nan` are kept as such.
    """
    if isinstance(value, PropertiesMarshaler):
        return value.marshal_to_text()
    match value:
        case bool():
            return 'true' if value else 'false'
        case int():
            return '%d' % value
        case float():
            if not isfinite(value):
                return float.__repr__(value)
            # shortest round-trip digits, laid out without exponent.
            text = format(Decimal(float.__repr__(value)), 'f')
            return text.rstrip('0').rstrip('.') if '.' in text else text
        case str():
            return value
    raise UnsupportedTypeError(type(value), key)


def parse_scalar(text: str, typ: object, key: str = '') -> object:
    """Coerce `text` into `typ`. `key` only serves error messages."""
    if typ is str:
        return text
    if typ is bool:
        try:
            return _BOOLS[text]
        except KeyError:
            raise InvalidValueError(key, text, bool) from None
    if typ is uint:
        if not _UINT.fullmatch(text) or int(text) > UINT64_MAX:
            raise InvalidValueError(key, text, uint)
        return int(text)
    if typ is int:
        if not _INT.fullmatch(text) or not INT64_MIN <= int(text) <= INT64_MAX:
            raise InvalidValueError(key, text, int)
        return int(text)
    if typ is float:
        # float() itself would accept ' 1_0 '.
        if text != text.strip() or '_' in text:
            raise InvalidValueError(key, text, float)
        try:
            return float(text)
        except ValueError:
            raise InvalidValueError(key, text, float) from None
    raise UnsupportedTypeError(typ, key)


def is_empty_value(value: object) -> bool:
    """The `omitempty` predicate. Records are never empty."""
    match value:
        case None:
            return True
        case bool() | int() | float():
            return not value
        case str() | list() | tuple() | dict():
            return len(value) == 0
    return False
