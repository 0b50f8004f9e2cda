# -*- encoding: utf-8 -*-
# @File   : encoder.py
# @Time   : 2024/10/15 20:16:02
# @Author : Kariko Lin

"""Record -> `.properties` text.

Fields are written depth-first in declared order,
keys being the dotted path of effective names, e.g.

    ```properties
    name=John
    server.port=8080
    tags[0]=a
    tags[1]=b
    props.editor=vscode
    ```
"""

from collections.abc import Mapping
from io import StringIO
from typing import Any

from .abstract import PropertiesMarshaler
from .codec import format_scalar, is_empty_value
from .config import DEFAULT_OPTIONS, Options, SequenceStyle
from .errors import UnsupportedTypeError
from .fields import FieldKind, is_record, resolve_fields

__all__ = ['marshal', 'marshal_text']


def _kind_of(value: Any) -> FieldKind:
    # hooks win over any structural shape.
    if isinstance(value, PropertiesMarshaler):
        return FieldKind.SCALAR
    if is_record(value):
        return FieldKind.RECORD
    if isinstance(value, (list, tuple)):
        return FieldKind.SEQUENCE
    if isinstance(value, Mapping):
        return FieldKind.MAPPING
    return FieldKind.SCALAR


def _format_elem(value: Any, key: str) -> str:
    return '' if value is None else format_scalar(value, key)


def _write_sequence(
    buf: StringIO, key: str, items: list | tuple, opts: Options
) -> None:
    if opts.sequence_style is SequenceStyle.JOINED:
        if items:
            buf.write(f'{key}=')
            buf.write(','.join(_format_elem(v, key) for v in items))
            buf.write('\n')
        return
    for idx, v in enumerate(items):
        elem_key = f'{key}[{idx}]'
        buf.write(f'{elem_key}={_format_elem(v, elem_key)}\n')


def _write_mapping(buf: StringIO, key: str, entries: Mapping) -> None:
    for k, v in entries.items():
        if not isinstance(k, str):
            raise UnsupportedTypeError(type(k), key)
        entry_key = f'{key}.{k}'
        buf.write(f'{entry_key}={_format_elem(v, entry_key)}\n')


def _write_value(buf: StringIO, key: str, value: Any, opts: Options) -> None:
    if value is None:
        return
    match _kind_of(value):
        case FieldKind.RECORD:
            _write_record(buf, value, key + '.', opts)
        case FieldKind.SEQUENCE:
            _write_sequence(buf, key, value, opts)
        case FieldKind.MAPPING:
            _write_mapping(buf, key, value)
        case FieldKind.SCALAR:
            buf.write(f'{key}={format_scalar(value, key)}\n')


def _write_record(
    buf: StringIO, record: Any, prefix: str, opts: Options
) -> None:
    for f in resolve_fields(type(record), opts.tag):
        if f.skip:
            continue
        value = getattr(record, f.declared_name)
        if f.omit_empty and is_empty_value(value):
            continue
        _write_value(buf, prefix + f.name, value, opts)


def marshal_text(v: Any, *, options: Options | None = None) -> str:
    """Serialize a dataclass record (or a flat `str` keyed dict) to text."""
    opts = options or DEFAULT_OPTIONS
    buf = StringIO()
    if is_record(v) and not isinstance(v, type):
        _write_record(buf, v, '', opts)
    elif isinstance(v, Mapping):
        for k, val in v.items():
            if not isinstance(k, str):
                raise UnsupportedTypeError(type(k))
            buf.write(f'{k}={_format_elem(val, k)}\n')
    else:
        raise UnsupportedTypeError(type(v))
    return buf.getvalue()


def marshal(v: Any, *, options: Options | None = None) -> bytes:
    """Serialize `v` to `.properties` bytes, encoded as `options.encoding`.

    Raises:
        UnsupportedTypeError: a leaf is none of the scalar kinds
            and has no `marshal_to_text()`.
        Whatever `marshal_to_text()` raises, unchanged.
    """
    opts = options or DEFAULT_OPTIONS
    return marshal_text(v, options=opts).encode(opts.encoding)
