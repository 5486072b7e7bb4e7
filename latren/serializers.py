"""Reading and writing serialised files and registries of named items."""

from __future__ import annotations

import abc
import enum
import json
from os import PathLike
from pathlib import Path
from types import MappingProxyType
from typing import IO, Any, Generic, Mapping, MutableMapping, TypeVar, Union

T = TypeVar("T")


class SerializationStatus(enum.Enum):
    OK = enum.auto()
    FAILED = enum.auto()


class FileSerializer(abc.ABC):
    """Reads and writes ``data`` through a file at ``path``.

    Set ``binary`` on a subclass to open files in binary mode.
    """

    binary = False

    def __init__(self, path: Union[str, PathLike] = "") -> None:
        super().__init__()
        self.path = path
        self.data: Any = None
        self.status = SerializationStatus.FAILED

    def _mode(self, base: str) -> str:
        return base + ("b" if self.binary else "")

    def _open(self, base: str) -> IO[Any]:
        if self.binary:
            return open(self.path, self._mode(base))
        return open(self.path, self._mode(base), encoding="utf-8")

    def deserialize_file(self, path: Union[str, PathLike, None] = None) -> bool:
        """Read ``data`` from the file; return whether it succeeded."""
        if path is not None:
            self.path = path
        try:
            with self._open("r") as stream:
                ok = bool(self.stream_read(stream))
        except OSError:
            ok = False
        self.status = SerializationStatus.OK if ok else SerializationStatus.FAILED
        return ok

    def serialize_file(self, path: Union[str, PathLike, None] = None) -> bool:
        """Write ``data`` to the file; return whether it succeeded."""
        if path is not None:
            self.path = path
        try:
            with self._open("w") as stream:
                ok = bool(self.stream_write(stream))
        except OSError:
            ok = False
        self.status = SerializationStatus.OK if ok else SerializationStatus.FAILED
        return ok

    @abc.abstractmethod
    def stream_read(self, stream: IO[Any]) -> bool:
        """Fill ``data`` from an open stream; return False on bad input."""

    @abc.abstractmethod
    def stream_write(self, stream: IO[Any]) -> bool:
        """Write ``data`` to an open stream."""

    def success(self) -> bool:
        return self.status is SerializationStatus.OK


class ItemRegistry(Generic[T]):
    """Named items produced by a serializer."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self._items: dict[str, T] = {}
        super().__init__(*args, **kwargs)

    def items(self) -> Mapping[str, T]:
        return MappingProxyType(self._items)

    def item(self, name: str) -> T:
        try:
            return self._items[name]
        except KeyError:
            raise KeyError(f"no item named {name!r}") from None

    def has_item(self, name: str) -> bool:
        return name in self._items

    def register(self, container: MutableMapping[str, T]) -> None:
        """Copy every item into ``container``, keeping entries it already has."""
        for name, value in self._items.items():
            container.setdefault(name, value)


class JSONFileSerializer(FileSerializer):
    """A file serializer for JSON; subclasses interpret ``data`` in ``parse_json``."""

    indent = 4

    def stream_read(self, stream: IO[Any]) -> bool:
        try:
            self.data = json.load(stream)
        except json.JSONDecodeError:
            return False
        return bool(self.parse_json())

    def stream_write(self, stream: IO[Any]) -> bool:
        json.dump(self.data, stream, indent=self.indent)
        return True

    @abc.abstractmethod
    def parse_json(self) -> bool:
        """Interpret the freshly read ``data``; return False if it is invalid."""


def _as_path(path: Union[str, PathLike]) -> Path:
    return Path(path)