"""Loading resources of one kind into a case-insensitive table by id."""

from __future__ import annotations

import abc
import enum
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Generic, Iterator, TypeVar, Union

from latren.resourcepath import PathInput, PathVariables, ResourcePath, resource_dir
from latren.resourcetypes import ResourceType

T = TypeVar("T")

logger = logging.getLogger(__name__)

AdditionalImportData = list[Union[str, float, int]]


class ResourceLoadEvent(enum.Enum):
    """Events sent while imports are loaded."""

    IMPORTS_INDEXED = enum.auto()
    ON_IMPORT_LOAD = enum.auto()


@dataclass
class Import:
    """One resource to import; an empty id means the path names it."""

    path: ResourcePath
    id: str = ""
    additional_data: AdditionalImportData = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.path, ResourcePath):
            self.path = ResourcePath(self.path)


@dataclass
class ShaderImport:
    """A shader program made of vertex, fragment and optional geometry sources."""

    id: str
    vertex_path: ResourcePath
    fragment_path: ResourcePath
    geometry_path: ResourcePath = field(default_factory=ResourcePath)


@dataclass
class Imports:
    """Imports of one resource type below a parent path.

    Without a parent path the default directory of the type is used.
    """

    resource_type: ResourceType
    parent_path: ResourcePath | None = None
    imports: list[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.parent_path is None:
            self.parent_path = resource_dir(self.resource_type)
        elif not isinstance(self.parent_path, ResourcePath):
            self.parent_path = ResourcePath(self.parent_path)


def _relative(target: Path, start: Path) -> str:
    try:
        return Path(os.path.relpath(target, start)).as_posix()
    except ValueError:
        return target.as_posix()


class ResourceTypeManager(abc.ABC, Generic[T]):
    """Loads and keeps resources of one kind; ids compare case-insensitively.

    Subclasses implement ``load_resource``, returning None on failure, and may
    set ``value_factory`` to make the default value for ``manager[id]``.
    """

    value_factory: Callable[[], Any] | None = None

    def __init__(self, default_path: PathInput, type_name: str = "resource") -> None:
        self.default_path = ResourcePath(default_path)
        self.path = self.default_path
        self.type_name = type_name
        self.variables: PathVariables | None = None
        self.item_id = ""
        self.additional_data: AdditionalImportData = []
        self.on_resource_load: list[Callable[[str], None]] = []
        self._items: dict[str, tuple[str, T]] = {}

    @abc.abstractmethod
    def load_resource(self, path: ResourcePath) -> T | None:
        """Load one resource from ``path``; return None if it cannot be loaded."""

    def _parse(self, path: ResourcePath) -> Path:
        return path.parsed(self.variables)

    def make_import_path(self, path: PathInput) -> ResourcePath:
        """Place ``path`` under the current path.

        A leading ``!!`` makes the rest a path of its own; ``\\!`` escapes a
        leading ``!``.
        """
        raw = ResourcePath(path).unparsed()
        if len(raw) >= 2 and raw[1] == "!":
            if raw[0] == "\\":
                return ResourcePath(self.path, raw[1:])
            if raw[0] == "!":
                return ResourcePath(raw[2:])
        return ResourcePath(self.path, raw)

    def load(self, path: PathInput) -> None:
        """Load the file at ``path`` under the current item id."""
        item_id = self.item_id
        for callback in list(self.on_resource_load):
            callback(item_id)
        if self.has_loaded(item_id):
            return
        import_path = self._parse(ResourcePath(path))
        file_name = _relative(import_path, self._parse(self.path).parent)
        logger.info("Loading %s '%s'", self.type_name, file_name)
        resource = self.load_resource(ResourcePath(import_path.absolute()))
        logger.debug("  (id: %s)", item_id)
        if resource is not None:
            self.set(item_id, resource)
        else:
            logger.info("Failed loading %s '%s'", self.type_name, file_name)

    def load_import(self, entry: Import) -> None:
        """Load one import relative to the current path."""
        import_path = self.make_import_path(entry.path)
        if entry.id:
            self.item_id = entry.id
        else:
            self.item_id = _relative(self._parse(import_path), self._parse(self.path))
        self.additional_data = list(entry.additional_data)
        self.load(import_path)

    def set_path(self, path: PathInput) -> None:
        self.path = ResourcePath(path)

    def restore_default_path(self) -> None:
        self.path = self.default_path

    def load_directory(self) -> None:
        """Load every file in the current directory, named by its file name."""
        directory = self._parse(self.path)
        for entry in sorted(directory.iterdir()):
            if not entry.is_file():
                continue
            self.item_id = _relative(entry, directory)
            self.additional_data = []
            self.load(ResourcePath(entry))

    def load_imports(self, imports: Imports) -> None:
        """Load every import below the parent path of ``imports``."""
        self.set_path(imports.parent_path)
        try:
            for entry in imports.imports:
                self.load_import(entry)
        finally:
            self.restore_default_path()

    def get(self, item: str) -> T:
        try:
            return self._items[item.lower()][1]
        except KeyError:
            raise KeyError(f"{self.type_name} {item!r} is not loaded") from None

    def has_loaded(self, item: str) -> bool:
        return item.lower() in self._items

    def __getitem__(self, item: str) -> T:
        if not self.has_loaded(item):
            factory = self.value_factory
            self.set(item, factory() if factory is not None else None)
        return self.get(item)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, str) and self.has_loaded(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items())

    def items(self) -> dict[str, T]:
        """All items, ordered by id without regard to case."""
        return {
            key: value
            for lowered, (key, value) in sorted(self._items.items(), key=lambda kv: kv[0])
        }

    def set(self, item: str, value: T) -> None:
        """Store ``value``; an id already present keeps its original spelling."""
        lowered = item.lower()
        key = self._items[lowered][0] if lowered in self._items else item
        self._items[lowered] = (key, value)