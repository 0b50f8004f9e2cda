# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/16 23:05:19
# @Author : Kariko Lin

"""File level helpers on top of `marshal()` / `unmarshal()`.

The core functions never touch the disk, these do.
Files without an explicit encoding are decoded as `options.encoding`,
else as the `chardet` guess, else as gbk.
"""

from dataclasses import replace
from io import TextIOBase
from typing import IO, Any, Callable, TypeVar

from .abstract import FileHandler
from .config import DEFAULT_OPTIONS, Options
from .decoder import decode_bytes, unmarshal
from .encoder import marshal

__all__ = ['PropertiesFile', 'load', 'dump']

T = TypeVar('T')


class PropertiesFile(FileHandler[T]):
    """Bind a `.properties` file to a record type.

        ```python
        cfg = PropertiesFile('app.properties', AppConfig).read()
        cfg.port = 8080
        PropertiesFile('app.properties', AppConfig).write(cfg)
        ```

    `record_type` must be constructible without arguments.
    """
    def __init__(
        self, filename: str, record_type: Callable[[], T],
        encoding: str | None = None, *, options: Options | None = None
    ) -> None:
        super().__init__(filename)
        self._type = record_type
        self._codec = encoding
        self._opts = options or DEFAULT_OPTIONS

    @staticmethod
    def readstream(
        buf: TextIOBase, instance: Any, options: Options | None = None
    ) -> Any:
        """Unmarshal an already decoded text stream into `instance`."""
        return unmarshal(buf.read(), instance, options=options)

    def read(self) -> T:
        """May raise `OSError`, or any decoding error of `unmarshal()`."""
        with open(self._fn, 'rb') as fp:
            raw = fp.read()
        text = (raw.decode(self._codec) if self._codec is not None
                else decode_bytes(raw, self._opts.encoding))
        return unmarshal(text, self._type(), options=self._opts)

    def write(self, instance: T) -> None:
        with open(self._fn, 'wb') as fp:
            fp.write(marshal(instance, options=self.__write_options()))

    def __write_options(self) -> Options:
        if self._codec is None:
            return self._opts
        return replace(self._opts, encoding=self._codec)

    def __str__(self) -> str:
        name = getattr(self._type, '__name__', self._type)
        return f'{super().__str__()} ({name}, {self._codec or "auto"})'


def load(fp: IO[bytes], instance: T, *,
            options: Options | None = None) -> T:
    """`unmarshal()` the whole content of a binary file object."""
    return unmarshal(fp.read(), instance, options=options)


def dump(instance: Any, fp: IO[bytes], *,
         options: Options | None = None) -> None:
    fp.write(marshal(instance, options=options))
