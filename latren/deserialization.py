"""Turning parsed JSON and CFG values into typed Python values."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Iterable, Sequence

from latren.cfg import CFGField, CFGFieldType, cfg_types_for, is_valid_type

DeserializerFunction = Callable[..., bool]


class ContainerType(enum.Enum):
    """Whether a field holds one value or a list of them."""

    SINGLE = enum.auto()
    VECTOR = enum.auto()


@dataclass
class FieldValue:
    """A deserialised field: its element type, container kind and value."""

    value_type: type
    container_type: ContainerType = ContainerType.SINGLE
    value: Any = None


class DeserializationContext:
    """Receives what a deserializer function produces.

    With a ``field`` the value is stored in it; otherwise it lands in ``result``.
    Inside ``deserialize_sequence`` single values are gathered into a list that
    is delivered once the last item arrives.
    """

    def __init__(self, field: FieldValue | None = None, entity_id: str = "") -> None:
        self.field = field
        self.entity_id = entity_id
        self.result: Any = None
        self._item_index = -1
        self._item_count = 0
        self._items: list[Any] = []

    def deserialize(self, fn: DeserializerFunction, *args: Any) -> bool:
        """Run ``fn`` once with this context and ``args``."""
        self._item_index = -1
        return bool(fn(self, *args))

    def deserialize_sequence(
        self, fn: DeserializerFunction, params_list: Sequence[Any]
    ) -> bool:
        """Run ``fn`` for each entry; tuples are spread into arguments.

        Stops at the first entry ``fn`` rejects and returns False.
        """
        self._item_count = len(params_list)
        self._item_index = 0
        for params in params_list:
            args = params if isinstance(params, tuple) else (params,)
            if not fn(self, *args):
                return False
            self._item_index += 1
        return True

    def return_value(self, value: Any) -> None:
        """Deliver a value produced by a deserializer."""
        if self._item_index != -1 and not isinstance(value, list):
            if self._item_index == 0:
                self._items = [None] * self._item_count
            self._items[self._item_index] = value
            if self._item_index == len(self._items) - 1:
                self._item_index = -1
                self.return_value(list(self._items))
            return
        if self.field is not None:
            self.field.value = value
        else:
            self.result = value


class ValueDeserializer:
    """A deserializer function and the value types it produces."""

    def __init__(self, fn: DeserializerFunction, types: Iterable[type]) -> None:
        self.fn = fn
        self.types = tuple(types)

    def has_type(self, value_type: type) -> bool:
        return value_type in self.types

    def matches_field(self, field: FieldValue) -> bool:
        """True if this deserializer produces the element type of ``field``."""
        return field.value_type in self.types


class DeserializerRegistry:
    """Deserializers by value type; the latest one assigned for a type wins."""

    def __init__(self) -> None:
        self._deserializers: list[ValueDeserializer] = []

    def assign(self, fn: DeserializerFunction, *args: type) -> ValueDeserializer:
        """Register ``fn`` as producing the value types ``args``."""
        if not args:
            raise ValueError("a deserializer needs at least one value type")
        deserializer = ValueDeserializer(fn, args)
        self._deserializers.append(deserializer)
        return deserializer

    def assign_enum(self, enum_type: type[enum.Enum]) -> ValueDeserializer:
        """Register a deserializer reading ``enum_type`` members by name."""

        def read_enum(context: DeserializationContext, value: Any) -> bool:
            if not isinstance(value, str):
                return False
            try:
                member = enum_type[value]
            except KeyError:
                return False
            context.return_value(member)
            return True

        return self.assign(read_enum, enum_type)

    def deserialize_value(self, value_type: type, param: Any) -> Any:
        """Deserialise ``param`` into a ``value_type`` value.

        Raises KeyError if no deserializer produces the type and ValueError
        if the deserializer rejects the input.
        """
        for deserializer in reversed(self._deserializers):
            if deserializer.has_type(value_type):
                context = DeserializationContext()
                if not context.deserialize(deserializer.fn, param):
                    raise ValueError(
                        f"cannot deserialise {param!r} as {value_type.__name__}"
                    )
                return context.result
        raise KeyError(f"no deserializer for {value_type.__name__}")


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def deserialize_json_number(context: DeserializationContext, value: Any) -> bool:
    """Accept a JSON number as it is."""
    if not _is_number(value):
        return False
    context.return_value(value)
    return True


def json_vector_deserializer(size: int) -> DeserializerFunction:
    """A deserializer for float vectors of ``size`` components.

    It takes a single number, filling every component, or a list of exactly
    ``size`` numbers.
    """
    if size <= 0:
        raise ValueError("vector size must be positive")

    def read_vector(context: DeserializationContext, value: Any) -> bool:
        if _is_number(value):
            vector = (float(value),) * size
        elif isinstance(value, list) and len(value) == size:
            if not all(_is_number(v) for v in value):
                return False
            vector = tuple(float(v) for v in value)
        else:
            return False
        context.return_value(vector)
        return True

    return read_vector


def cfg_vector_deserializer(
    size: int, element_type: type, field_type: CFGFieldType | None = None
) -> DeserializerFunction:
    """A deserializer for vectors read from a CFG struct or array field.

    Each of the ``size`` children must be valid for ``field_type``; without it
    the preferred CFG type of ``element_type`` is used.
    """
    if size <= 0:
        raise ValueError("vector size must be positive")
    expected = cfg_types_for(element_type)[0] if field_type is None else field_type

    def read_vector(context: DeserializationContext, field: CFGField) -> bool:
        if field.type not in (CFGFieldType.STRUCT, CFGFieldType.ARRAY):
            return False
        children = field.items()
        if len(children) != size:
            return False
        values = []
        for child in children:
            if child is None or not is_valid_type(child.type, expected):
                return False
            values.append(element_type(child.value))
        context.return_value(tuple(values))
        return True

    return read_vector