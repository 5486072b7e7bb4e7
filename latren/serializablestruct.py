"""Structs whose members are recorded in order, with comments and blank lines."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterable

BASE_WINDOW_WIDTH = 1280
BASE_WINDOW_HEIGHT = 720


class MetaType(enum.Enum):
    NONE = enum.auto()
    COMMENT = enum.auto()
    NEWLINE = enum.auto()


@dataclass(frozen=True)
class MemberData:
    """Description of one member: a data field, a comment or a blank line."""

    name: str
    value_type: type | None
    meta_type: MetaType = MetaType.NONE
    meta_data: str = ""

    @property
    def is_field(self) -> bool:
        return self.meta_type is MetaType.NONE


class SerializableStruct:
    """Base for structs that list their fields for serialisation."""

    def __init__(self) -> None:
        self._members: list[MemberData] = []
        self._values: dict[str, Any] = {}
        self._meta_counter = 0

    def _field(self, name: str, value_type: type, default: Any) -> None:
        self._add_member(MemberData(name, value_type))
        self._values[name] = _coerce(name, value_type, default)

    def _newline(self) -> None:
        self._add_member(MemberData(self._meta_name(), None, MetaType.NEWLINE))

    def _comment(self, text: str) -> None:
        self._add_member(MemberData(self._meta_name(), None, MetaType.COMMENT, text))

    def _meta_name(self) -> str:
        name = f"_meta_{self._meta_counter}"
        self._meta_counter += 1
        return name

    def _add_member(self, member: MemberData) -> None:
        self._members.append(member)

    def members(self) -> tuple[MemberData, ...]:
        return tuple(self._members)

    def member_data(self, name: str) -> MemberData:
        """Return the description of ``name``; raise KeyError if absent."""
        for member in self._members:
            if member.name == name:
                return member
        raise KeyError(f"no member named {name!r}")

    def get_member(self, name: str) -> Any:
        self._require_field(name)
        return self._values[name]

    def set_member(self, name: str, value: Any) -> None:
        member = self._require_field(name)
        self._values[name] = _coerce(name, member.value_type, value)

    def _require_field(self, name: str) -> MemberData:
        member = self.member_data(name)
        if not member.is_field:
            raise KeyError(f"member {name!r} holds no value")
        return member

    def copy_from(self, other: SerializableStruct) -> None:
        """Copy values shared with ``other``; take over members this lacks."""
        own = {member.name: index for index, member in enumerate(self._members)}
        for member in other.members():
            index = own.get(member.name)
            if member.is_field and index is not None and self._members[index].is_field:
                self.set_member(member.name, other.get_member(member.name))
                continue
            if index is not None:
                self._members[index] = member
            else:
                own[member.name] = len(self._members)
                self._members.append(member)
            if member.is_field:
                self._values[member.name] = other.get_member(member.name)
            else:
                self._values.pop(member.name, None)

    def __iter__(self) -> Iterable[tuple[str, Any]]:
        return iter([(m.name, self._values[m.name]) for m in self._members if m.is_field])


def _coerce(name: str, value_type: type | None, value: Any) -> Any:
    if value_type is None:
        return value
    if value_type is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    if value_type is tuple and isinstance(value, list):
        return tuple(value)
    if value_type is not bool and isinstance(value, bool) and value_type in (int, float):
        raise TypeError(f"member {name!r} expects {value_type.__name__}, got bool")
    if not isinstance(value, value_type):
        raise TypeError(
            f"member {name!r} expects {value_type.__name__}, got {type(value).__name__}"
        )
    return value


class VideoSettings(SerializableStruct):
    """User video settings stored in the video config file."""

    def __init__(self) -> None:
        super().__init__()
        self._field("gamma", float, 1.0)
        self._field("contrast", float, 1.0)
        self._field("brightness", float, 1.0)
        self._field("saturation", float, 1.0)
        self._newline()
        self._field("fov", float, 60.0)
        self._newline()
        self._field("useVsync", bool, True)
        self._field("fullscreen", bool, False)
        self._newline()
        self._field("resolution", tuple, (BASE_WINDOW_WIDTH, BASE_WINDOW_HEIGHT))
        self._comment("-1 -1 for auto")
        self._field("fullscreenResolution", tuple, (-1, -1))