# -*- encoding: utf-8 -*-
# @File   : fields.py
# @Time   : 2024/10/15 00:41:56
# @Author : Kariko Lin

"""Field descriptor resolver.

A record is a dataclass. Each field may carry a tag string
in its metadata (`jprop` by default), like

    ```python
    @dataclass
    class Editor:
        name: str = prop('editor')             # key "editor"
        tabs: int = prop(',omitempty', default=0)  # key "tabs", elided if 0
        token: str = prop('-', default='')     # never read nor written
    ```

Tag grammar: `name[,option...]`. Unknown options are ignored.
"""

import dataclasses
import logging
from enum import Enum
from functools import cache
from types import NoneType, UnionType
from typing import Any, NamedTuple, Union, get_args, get_origin, get_type_hints

from .codec import is_hook_type
from .errors import UnsupportedTypeError

DEFAULT_TAG = 'jprop'


class FieldKind(Enum):
    SCALAR = 'scalar'
    RECORD = 'record'
    SEQUENCE = 'sequence'
    MAPPING = 'mapping'


class TagOptions(NamedTuple):
    name: str
    omit_empty: bool = False
    skip: bool = False


@dataclasses.dataclass(frozen=True)
class FieldDescriptor:
    declared_name: str
    name: str
    kind: FieldKind
    type: Any
    # element type of sequences and mappings, `None` otherwise.
    elem_type: Any = None
    key_type: Any = None
    omit_empty: bool = False
    skip: bool = False


def prop(tag: str, *, tag_key: str = DEFAULT_TAG, **kwargs) -> Any:
    """`dataclasses.field()` with the tag string attached."""
    metadata = dict(kwargs.pop('metadata', None) or {})
    metadata[tag_key] = tag
    return dataclasses.field(metadata=metadata, **kwargs)


def parse_tag(tag: str | None) -> TagOptions:
    if not tag:
        return TagOptions('')
    name, *opts = tag.split(',')
    if name == '-':
        return TagOptions('', skip=True)
    omit_empty = False
    for i in opts:
        if i == 'omitempty':
            omit_empty = True
        elif i:
            logging.debug(f'Ignoring unknown tag option "{i}" in {tag!r}.')
    return TagOptions(name, omit_empty)


def is_record(obj: object) -> bool:
    """Dataclass types or instances, unless they bring their own hooks."""
    typ = obj if isinstance(obj, type) else type(obj)
    return dataclasses.is_dataclass(typ) and not is_hook_type(typ)


def _unwrap_optional(typ: Any) -> Any:
    if get_origin(typ) in (Union, UnionType):
        args = [i for i in get_args(typ) if i is not NoneType]
        if len(args) == 1:
            return args[0]
    return typ


def _classify(typ: Any) -> tuple[FieldKind, Any, Any]:
    """-> (kind, elem_type, key_type)"""
    typ = _unwrap_optional(typ)
    if is_hook_type(typ):
        return FieldKind.SCALAR, None, None
    if is_record(typ):
        return FieldKind.RECORD, None, None
    origin = get_origin(typ) or typ
    if origin is list:
        args = get_args(typ)
        return FieldKind.SEQUENCE, _unwrap_optional(args[0]) if args else Any, None
    if origin is dict:
        args = get_args(typ)
        key_type, elem_type = args if args else (Any, Any)
        if key_type not in (str, Any):
            raise UnsupportedTypeError(typ)
        return FieldKind.MAPPING, _unwrap_optional(elem_type), key_type
    # anything else is checked by the scalar codec when it gets used.
    return FieldKind.SCALAR, None, None


@cache
def resolve_fields(
    cls: type, tag: str = DEFAULT_TAG
) -> tuple[FieldDescriptor, ...]:
    """Descriptors of all fields of record type `cls`, in declared order.

    Memoised per `(cls, tag)`.

    Raises:
        UnsupportedTypeError: a visible `dict` field keyed by non-`str`.
    """
    if not is_record(cls):
        raise TypeError(f'{cls!r} is not a dataclass record')
    hints = get_type_hints(cls)
    ret: list[FieldDescriptor] = []
    for f in dataclasses.fields(cls):
        opts = parse_tag(f.metadata.get(tag))
        typ = hints.get(f.name, Any)
        # skipped fields may hold anything.
        kind, elem_type, key_type = (
            (FieldKind.SCALAR, None, None) if opts.skip else _classify(typ))
        ret.append(FieldDescriptor(
            declared_name=f.name,
            name=opts.name or f.name,
            kind=kind,
            type=_unwrap_optional(typ),
            elem_type=elem_type,
            key_type=key_type,
            omit_empty=opts.omit_empty,
            skip=opts.skip))
    return tuple(ret)


@cache
def _field_index(cls: type, tag: str) -> dict[str, FieldDescriptor]:
    index: dict[str, FieldDescriptor] = {}
    for i in resolve_fields(cls, tag):
        if not i.skip:
            # first declared wins on duplicated names.
            index.setdefault(i.name, i)
    return index


def find_field(
    cls: type, name: str, tag: str = DEFAULT_TAG
) -> FieldDescriptor | None:
    """The visible field whose effective name is `name`."""
    return _field_index(cls, tag).get(name)
