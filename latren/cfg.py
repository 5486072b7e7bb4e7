"""Fields, templates and type rules of the CFG configuration format."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Sequence


class CFGFieldType(enum.Enum):
    """Kinds of values a CFG field can hold.

    NUMBER accepts integer and float input and keeps the original type;
    FLOAT accepts integers too, but they are meant to become floats.
    """

    STRING = enum.auto()
    NUMBER = enum.auto()
    INTEGER = enum.auto()
    FLOAT = enum.auto()
    ARRAY = enum.auto()
    STRUCT = enum.auto()
    STRUCT_MEMBER_REQUIRED = enum.auto()
    RAW = enum.auto()
    CUSTOM = enum.auto()


CONTAINER_TYPES = frozenset({CFGFieldType.ARRAY, CFGFieldType.STRUCT})


def is_valid_type(actual: CFGFieldType, expected: CFGFieldType) -> bool:
    """True if a value of type ``actual`` may stand where ``expected`` is wanted."""
    if actual is expected or expected is CFGFieldType.RAW:
        return True
    if expected is CFGFieldType.FLOAT:
        return actual is CFGFieldType.INTEGER
    if expected is CFGFieldType.NUMBER:
        return actual in (CFGFieldType.INTEGER, CFGFieldType.FLOAT)
    return False


class CFGStringLiteral(enum.Enum):
    APOSTROPHES = enum.auto()
    QUOTES = enum.auto()


@dataclass(frozen=True)
class CFGFormatting:
    """How a CFG document is written out."""

    indents: int = 2
    string_literal: CFGStringLiteral = CFGStringLiteral.APOSTROPHES


STANDARD_FORMATTING = CFGFormatting(2, CFGStringLiteral.APOSTROPHES)


@dataclass
class StructuredField:
    """One expected field of a CFG file template.

    A field either lists the value types it accepts or, when ``is_object``
    is set, the nested fields of the object it holds.
    """

    name: str
    types: list[CFGFieldType] = field(default_factory=list)
    required: bool = False
    is_object: bool = False
    object_params: list[StructuredField] = field(default_factory=list)


def _structured(name: str, required: bool, args: Sequence[Any]) -> StructuredField:
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        items = list(args[0])
        if items and all(isinstance(item, StructuredField) for item in items):
            return StructuredField(name, [], required, True, items)
        args = items
    if not all(isinstance(item, CFGFieldType) for item in args):
        raise TypeError(
            "a structured field takes field types or a list of structured fields"
        )
    return StructuredField(name, list(args), required)


def mandatory(name: str, *args: Any) -> StructuredField:
    """A required template field; ``args`` are types or one list of nested fields."""
    return _structured(name, True, args)


def optional(name: str, *args: Any) -> StructuredField:
    """An optional template field; ``args`` are types or one list of nested fields."""
    return _structured(name, False, args)


@dataclass
class CFGField:
    """A value in a CFG document; ARRAY and STRUCT fields hold child fields."""

    type: CFGFieldType
    value: Any = None
    name: str | None = None
    type_annotation: str = ""
    automatically_created: bool = False
    parent: CFGField | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.value is None and self.type in CONTAINER_TYPES:
            self.value = []

    @property
    def is_object(self) -> bool:
        return isinstance(self.value, list)

    def items(self) -> list[CFGField]:
        """The child fields; raise TypeError if this field holds no children."""
        if not self.is_object:
            raise TypeError(f"a {self.type.name} field has no items")
        return self.value

    def add_item(self, field: CFGField) -> None:
        self.items().append(field)
        field.parent = self

    def item_by_name(self, name: str) -> CFGField | None:
        return next(
            (item for item in self.items() if item is not None and item.name == name),
            None,
        )

    def item_by_index(self, index: int) -> CFGField | None:
        children = self.items()
        if index < 0 or index >= len(children):
            return None
        return children[index]

    def object_by_name(self, name: str) -> CFGField | None:
        """The named child if it holds children itself, else None."""
        item = self.item_by_name(name)
        if item is None or not item.is_object:
            return None
        return item

    def values(self) -> list[Any]:
        return [item.value for item in self.items()]

    def item_values(self, name: str) -> list[Any]:
        """Values of the children of the named child object; empty if absent."""
        obj = self.object_by_name(name)
        return [] if obj is None else obj.values()

    def has_type(self, value_type: type) -> bool:
        """True if the stored value is exactly of ``value_type``."""
        return type(self.value) is value_type


_DEFAULT_VALUES = {
    CFGFieldType.STRING: str,
    CFGFieldType.NUMBER: float,
    CFGFieldType.FLOAT: float,
    CFGFieldType.INTEGER: int,
    CFGFieldType.ARRAY: list,
    CFGFieldType.STRUCT: list,
}


def create_field(
    field_type: CFGFieldType | None = None, copy_from: CFGField | None = None
) -> CFGField:
    """Create a field of ``field_type``, copying value and name from ``copy_from``.

    Without ``field_type`` the type of ``copy_from`` is used.
    """
    if field_type is None:
        if copy_from is None:
            raise ValueError("a field type or a field to copy is required")
        field_type = copy_from.type
    factory = _DEFAULT_VALUES.get(field_type)
    if factory is None:
        raise ValueError(f"cannot create a field of type {field_type.name}")
    if copy_from is None:
        return CFGField(field_type, factory())
    return CFGField(
        field_type,
        factory(copy_from.value),
        name=copy_from.name,
        automatically_created=copy_from.automatically_created,
    )


_CFG_TYPES: dict[type, tuple[CFGFieldType, ...]] = {
    str: (CFGFieldType.STRING,),
    int: (CFGFieldType.INTEGER,),
    float: (CFGFieldType.FLOAT, CFGFieldType.NUMBER),
    list: (CFGFieldType.ARRAY, CFGFieldType.STRUCT),
}


def cfg_types_for(value_type: type) -> tuple[CFGFieldType, ...]:
    """The CFG field types a Python type maps to, preferred first."""
    try:
        return _CFG_TYPES[value_type]
    except KeyError:
        raise KeyError(f"no CFG type for {value_type.__name__}") from None


@dataclass
class CFGFileTemplate:
    """Expected fields of a CFG file and the custom types it may use."""

    fields: list[StructuredField] = field(default_factory=list)
    types: dict[str, list[CFGFieldType]] = field(default_factory=dict)


class CFGFileTemplateFactory:
    """Base for classes that describe a CFG file; override the define methods."""

    def define_fields(self) -> list[StructuredField]:
        return []

    def define_custom_types(self) -> dict[str, list[CFGFieldType]]:
        return {}

    def create_template(self) -> CFGFileTemplate:
        return CFGFileTemplate(self.define_fields(), self.define_custom_types())