# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2024/10/14 21:20:45
# @Author : Kariko Lin

from dataclasses import dataclass
from enum import Enum


class SequenceStyle(str, Enum):
    INDEXED = 'indexed'  # tags[0]=a
    JOINED = 'joined'    # tags=a,b


@dataclass(frozen=True, kw_only=True)
class Options:
    """Knobs shared by `marshal()`, `unmarshal()` and `PropertiesFile`.

    - `tag`: the dataclass metadata key holding the field tag string.
    - `strict`: raise `UnknownKeyError` rather than ignoring
    keys that match no field.
    - `sequence_style`: how the encoder writes lists.
    The decoder always accepts both forms.
    - `encoding`: output bytes encoding, and the first guess for input bytes.
    """
    tag: str = 'jprop'
    strict: bool = False
    sequence_style: SequenceStyle = SequenceStyle.INDEXED
    encoding: str = 'utf-8'


DEFAULT_OPTIONS = Options()
