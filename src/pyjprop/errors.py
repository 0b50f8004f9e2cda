# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/14 21:03:12
# @Author : Kariko Lin

"""Errors raised while binding `.properties` text to records."""


class PropertiesError(Exception):
    """Base error for this package."""


class InvalidLineError(PropertiesError, ValueError):
    """A non-blank, non-comment line that is not a `key=value` pair."""
    def __init__(self, lineno: int, line: str) -> None:
        super().__init__(f'line {lineno}: expected "key=value", got {line!r}')
        self.lineno = lineno
        self.line = line


class InvalidValueError(PropertiesError, ValueError):
    def __init__(self, key: str, text: str, expected: type) -> None:
        super().__init__(
            f'"{key}": cannot parse {text!r} as {expected.__name__}')
        self.key = key
        self.text = text
        self.expected = expected


class UnsupportedTypeError(PropertiesError, TypeError):
    def __init__(self, typ: object, key: str = '') -> None:
        name = getattr(typ, '__name__', repr(typ))
        where = f' at "{key}"' if key else ''
        super().__init__(f'unsupported type: {name}{where}')
        self.type = typ
        self.key = key


class ShapeMismatchError(PropertiesError):
    """Key path and field shape disagree,
    like `name.sub=x` for a scalar `name`, or `inner=x` for a record."""
    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f'"{key}": {reason}')
        self.key = key


class UnknownKeyError(PropertiesError, KeyError):
    """Only raised in strict mode. Unknown keys are ignored otherwise."""
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f'no field matches "{self.key}"'
