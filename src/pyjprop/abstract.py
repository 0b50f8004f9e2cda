# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/10/14 21:32:08
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

T = TypeVar('T')


def _defines(cls: type, method: str) -> bool:
    for base in cls.__mro__:
        if method in base.__dict__:
            return base.__dict__[method] is not None
    return False


class PropertiesMarshaler(metaclass=ABCMeta):
    """Any type defining `marshal_to_text()` is one,
    no need to inherit from here.

    The returned text is written verbatim as the value of its key.
    """
    __slots__ = ()

    @abstractmethod
    def marshal_to_text(self) -> str:
        raise NotImplementedError

    @classmethod
    def __subclasshook__(cls, C: type) -> bool:
        if cls is PropertiesMarshaler:
            return _defines(C, 'marshal_to_text') or NotImplemented
        return NotImplemented


class PropertiesUnmarshaler(metaclass=ABCMeta):
    """Any type defining `unmarshal_from_text(text)` is one.

    The decoder hands it the raw value text,
    and keeps whatever state the method leaves behind.
    """
    __slots__ = ()

    @abstractmethod
    def unmarshal_from_text(self, text: str) -> None:
        raise NotImplementedError

    @classmethod
    def __subclasshook__(cls, C: type) -> bool:
        if cls is PropertiesUnmarshaler:
            return _defines(C, 'unmarshal_from_text') or NotImplemented
        return NotImplemented


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str) -> None:
        self._fn = filename

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
