# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/14 20:58:30
# @Author : Kariko Lin

import logging

from .abstract import PropertiesMarshaler, PropertiesUnmarshaler
from .codec import uint
from .config import Options, SequenceStyle
from .decoder import unmarshal
from .encoder import marshal, marshal_text
from .errors import (
    PropertiesError,
    InvalidLineError,
    InvalidValueError,
    UnsupportedTypeError,
    ShapeMismatchError,
    UnknownKeyError
)
from .fields import prop
from .parser import PropertiesFile, load, dump

__all__ = [
    'marshal', 'marshal_text', 'unmarshal', 'load', 'dump',
    'PropertiesFile', 'Options', 'SequenceStyle', 'prop', 'uint',
    'PropertiesMarshaler', 'PropertiesUnmarshaler',
    'PropertiesError', 'InvalidLineError', 'InvalidValueError',
    'UnsupportedTypeError', 'ShapeMismatchError', 'UnknownKeyError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
