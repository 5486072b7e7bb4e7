"""Resource paths with ``${variable}`` placeholders and their expansion."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path, PurePath
from typing import Mapping, Union

from latren.resourcetypes import ResourceType

_VARIABLE = re.compile(r"\$\{([^}]*)\}")
_CWD = "cwd"


class ResourcePath:
    """An unparsed path that may hold ``${name}`` variables."""

    __slots__ = ("_path",)

    def __init__(self, *args: PathInput) -> None:
        if not args:
            self._path = ""
        elif len(args) == 1:
            self._path = _to_text(args[0])
        elif len(args) == 2:
            self._path = f"{_to_text(args[0])}/{_to_text(args[1])}"
        else:
            raise TypeError("ResourcePath takes at most two path parts")

    def unparsed(self) -> str:
        """The path text as given, variables not expanded."""
        return self._path

    def is_empty(self) -> bool:
        return not self._path

    def parsed(self, variables: PathVariables | None = None) -> Path:
        """The path with every variable expanded."""
        table = variables if variables is not None else PathVariables()
        return Path(table.expand(self))

    def parsed_str(self, variables: PathVariables | None = None) -> str:
        return self.parsed(variables).as_posix()

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"ResourcePath({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResourcePath):
            return self._path == other._path
        if isinstance(other, str):
            return self._path == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._path)


PathInput = Union[str, PathLike, ResourcePath]


def _to_text(value: PathInput) -> str:
    if isinstance(value, ResourcePath):
        return value.unparsed()
    if isinstance(value, PurePath):
        return value.as_posix()
    if isinstance(value, str):
        return value
    if isinstance(value, PathLike):
        return PurePath(value).as_posix()
    raise TypeError(f"cannot make a resource path from {type(value).__name__}")


DEFAULT_PATH_VARS: Mapping[str, str] = {
    "gamedir": "${cwd}",
    "res": "${gamedir}/res",
    "core_res": "${res}/.latren",
    "usr": "${gamedir}/usr",
    "shaders": "${res}/shaders",
    "textures": "${res}/textures",
    "fonts": "${res}/fonts",
    "stages": "${res}/stages",
    "models": "${res}/models",
    "audio": "${res}/audio",
    "data": "${res}/data",
    "data_bin": "${data}",
    "data_text": "${data}",
    "data_json": "${data}",
    "data_cfg": "${data}",
    "core_shaders": "${core_res}/shaders",
    "core_textures": "${core_res}/textures",
    "core_fonts": "${core_res}/fonts",
    "core_stages": "${core_res}/stages",
    "core_models": "${core_res}/models",
    "core_audio": "${core_res}/audio",
    "core_data": "${core_res}/data",
    "core_data_bin": "${core_data}",
    "core_data_text": "${core_data}",
    "core_data_json": "${core_data}",
    "core_data_cfg": "${core_data}",
    "imports.cfg": "${res}/imports.cfg",
    "materials.json": "${res}/materials.json",
    "objects.json": "${res}/objects.json",
    "blueprints.json": "${res}/blueprints.json",
    "video.cfg": "${usr}/video.cfg",
    "savedata": "${usr}/savedata",
}

RESOURCE_DIRS: Mapping[ResourceType, str] = {
    ResourceType.SHADER: "${shaders}",
    ResourceType.TEXTURE: "${textures}",
    ResourceType.FONT: "${fonts}",
    ResourceType.STAGE: "${stages}",
    ResourceType.MODEL: "${models}",
    ResourceType.AUDIO: "${audio}",
    ResourceType.DATA: "${data}",
    ResourceType.TEXT: "${data_text}",
    ResourceType.BINARY: "${data_bin}",
    ResourceType.JSON: "${data_json}",
    ResourceType.CFG: "${data_cfg}",
}


class PathVariables:
    """A table of path variables; ``${cwd}`` is always the working directory."""

    def __init__(self, defaults: Mapping[str, PathInput] | None = None) -> None:
        source = DEFAULT_PATH_VARS if defaults is None else defaults
        self._vars: dict[str, ResourcePath] = {
            name: ResourcePath(value) for name, value in source.items()
        }

    def get(self, name: str) -> ResourcePath:
        """Return the value of ``name``; raise KeyError if it is not set."""
        try:
            return self._vars[name]
        except KeyError:
            raise KeyError(f"path variable {name!r} is not defined") from None

    def set(self, name: str, path: PathInput) -> None:
        self._vars[name] = ResourcePath(path)

    def listing(self) -> list[tuple[str, ResourcePath]]:
        """All variables as pairs, ordered by name."""
        return sorted(self._vars.items(), key=lambda item: item[0])

    def expand(self, path: PathInput) -> str:
        """Replace every ``${name}`` in ``path`` until none remain."""
        return self._expand(_to_text(path), ())

    def _expand(self, text: str, seen: tuple[str, ...]) -> str:
        def replace(match: re.Match[str]) -> str:
            name = match.group(1)
            if name == _CWD and name not in self._vars:
                return Path.cwd().as_posix()
            if name in seen:
                chain = " -> ".join((*seen, name))
                raise ValueError(f"cyclic path variable: {chain}")
            return self._expand(self.get(name).unparsed(), (*seen, name))

        return _VARIABLE.sub(replace, text)


def resource_dir(resource_type: ResourceType) -> ResourcePath:
    """The default directory for a kind of resource."""
    try:
        return ResourcePath(RESOURCE_DIRS[resource_type])
    except KeyError:
        raise KeyError(f"no resource directory for {resource_type!r}") from None