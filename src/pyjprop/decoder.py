# -*- encoding: utf-8 -*-
# @File   : decoder.py
# @Time   : 2024/10/16 01:27:44
# @Author : Kariko Lin

"""`.properties` text -> record.

Each `key=value` line is applied on its own, walking the dotted key
down the record: the first segment picks a field, the rest goes on
into nested records, or becomes the entry key of a `dict` field.

Lists come as one comma separated line (`tags=a,b`), or as the
indexed lines the encoder writes (`tags[0]=a`).
"""

import logging
from re import compile as regex
from typing import Any, Iterator, NamedTuple, TypeVar

from chardet import detect as guess_codec

from .abstract import PropertiesUnmarshaler
from .codec import is_hook_type, parse_scalar
from .config import DEFAULT_OPTIONS, Options
from .errors import (
    InvalidLineError,
    ShapeMismatchError,
    UnknownKeyError
)
from .fields import FieldDescriptor, FieldKind, find_field, is_record

T = TypeVar('T')

__all__ = ['PropertyLine', 'parse_lines', 'apply_property', 'unmarshal',
           'decode_bytes']

_INDEXED = regex(r'(.+)\[([0-9]+)\]')


class PropertyLine(NamedTuple):
    lineno: int
    key: str
    value: str


def decode_bytes(raw: bytes, encoding: str = 'utf-8') -> str:
    """Decode with `encoding` first, then fall back to `chardet`,
    and `gbk` at last."""
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        logging.debug(f'Not {encoding} encoded ({e}), guessing.')

    codec = guess_codec(raw)
    if codec['encoding'] is None or codec['confidence'] < 0.8:
        logging.warning(
            f'Unable to tell the encoding (guess: {codec}), trying gbk.')
        return raw.decode('gbk')
    try:
        return raw.decode(codec['encoding'])
    except UnicodeDecodeError:
        return raw.decode('gbk')


def parse_lines(text: str) -> Iterator[PropertyLine]:
    """Yield every `key=value` pair, skipping blanks and `#` comments.

    Raises:
        InvalidLineError: a line without `=`, or with nothing left of it.
    """
    for lineno, raw in enumerate(text.split('\n'), 1):
        line = raw.strip()  # `\r` included
        if not line or line[0] == '#':
            continue
        key, sep, value = line.partition('=')
        key = key.strip()
        if not sep or not key:
            raise InvalidLineError(lineno, raw)
        yield PropertyLine(lineno, key, value.strip())


def _parse_leaf(text: str, typ: Any, current: Any, key: str) -> Any:
    if is_hook_type(typ) and issubclass(typ, PropertiesUnmarshaler):
        target = current if isinstance(current, typ) else typ()
        target.unmarshal_from_text(text)
        return target
    if typ is Any or typ is object:
        return text
    return parse_scalar(text, typ, key)


def _locate(
    cls: type, head: str, tag: str
) -> tuple[FieldDescriptor | None, int | None]:
    if (f := find_field(cls, head, tag)) is not None:
        return f, None
    if (m := _INDEXED.fullmatch(head)) is not None:
        return find_field(cls, m[1], tag), int(m[2])
    return None, None


def _set_sequence(
    record: Any, f: FieldDescriptor, index: int | None, value: str, key: str
) -> None:
    if index is None:
        # no append semantic: each line replaces the whole list.
        items = [_parse_leaf(i.strip(), f.elem_type, None, key)
                 for i in value.split(',')]
    else:
        items = list(getattr(record, f.declared_name) or ())
        # replace in place or append, never leave holes.
        if index > len(items):
            raise ShapeMismatchError(
                key, f'index {index} skips past the end of '
                f'"{f.name}" ({len(items)} items)')
        if index == len(items):
            items.append(_parse_leaf(value, f.elem_type, None, key))
        else:
            items[index] = _parse_leaf(value, f.elem_type, items[index], key)
    setattr(record, f.declared_name, items)


def _set_mapping(
    record: Any, f: FieldDescriptor, entry: str, value: str, key: str
) -> None:
    entries = getattr(record, f.declared_name)
    if entries is None:
        entries = {}
        setattr(record, f.declared_name, entries)
    entries[entry] = _parse_leaf(value, f.elem_type, None, key)


def apply_property(
    record: Any, key: str, value: str, *,
    options: Options | None = None, _parent: str = ''
) -> None:
    """Assign one `key=value` pair onto `record`."""
    opts = options or DEFAULT_OPTIONS
    fullkey = _parent + key
    head, _, rest = key.partition('.')
    f, index = _locate(type(record), head, opts.tag)
    if f is None:
        if opts.strict:
            raise UnknownKeyError(fullkey)
        logging.debug(f'Ignoring unknown key "{fullkey}".')
        return

    match f.kind:
        case FieldKind.SCALAR:
            if rest or index is not None:
                raise ShapeMismatchError(
                    fullkey, f'"{f.name}" is a scalar field')
            current = getattr(record, f.declared_name)
            setattr(record, f.declared_name,
                    _parse_leaf(value, f.type, current, fullkey))
        case FieldKind.RECORD:
            if not rest or index is not None:
                raise ShapeMismatchError(
                    fullkey, f'"{f.name}" is a record, '
                    f'expecting "{f.name}.<field>"')
            inner = getattr(record, f.declared_name)
            if inner is None:
                inner = f.type()
                setattr(record, f.declared_name, inner)
            apply_property(inner, rest, value, options=opts,
                           _parent=f'{_parent}{head}.')
        case FieldKind.SEQUENCE:
            if rest:
                raise ShapeMismatchError(
                    fullkey, f'"{f.name}" is a list field')
            _set_sequence(record, f, index, value, fullkey)
        case FieldKind.MAPPING:
            if index is not None:
                raise ShapeMismatchError(
                    fullkey, f'"{f.name}" is a mapping field')
            _set_mapping(record, f, rest, value, fullkey)


def unmarshal(
    data: bytes | bytearray | str, v: T, *, options: Options | None = None
) -> T:
    """Populate `v` (a dataclass instance, or a plain `dict`)
    from `.properties` text and return it.

    Keys matching no field are ignored unless `options.strict` is set.
    The first error aborts; fields assigned before it are kept.
    """
    opts = options or DEFAULT_OPTIONS
    text = data if isinstance(data, str) else decode_bytes(
        bytes(data), opts.encoding)
    if isinstance(v, dict):
        for line in parse_lines(text):
            v[line.key] = line.value
        return v
    if isinstance(v, type) or not is_record(v):
        raise TypeError(
            f'expecting a dataclass instance or a dict, got {v!r}')
    for line in parse_lines(text):
        apply_property(v, line.key, line.value, options=opts)
    return v
