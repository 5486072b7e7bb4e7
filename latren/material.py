"""Materials: a shader, a texture and a set of uniforms to apply."""

from __future__ import annotations

from numbers import Real
from types import MappingProxyType
from typing import Any, Mapping, Protocol, Union

TEXTURE_NONE = 0

UniformValue = Union[int, float, tuple]


class ShaderProgram(Protocol):
    """What a material needs from the shader it is applied to."""

    def use(self) -> None: ...

    def set_uniform(self, name: str, value: Any) -> None: ...

    def bind_texture(self, texture: int) -> None: ...

    def set_face_culling(self, enabled: bool) -> None: ...


def _is_number(value: Any) -> bool:
    return isinstance(value, Real)


def _normalize_uniform(name: str, value: Any) -> UniformValue:
    if _is_number(value):
        return value
    if isinstance(value, (str, bytes)):
        raise TypeError(f"uniform {name!r} cannot hold {type(value).__name__}")
    try:
        items = list(value)
    except TypeError:
        raise TypeError(f"uniform {name!r} cannot hold {type(value).__name__}") from None
    if 2 <= len(items) <= 4 and all(_is_number(v) for v in items):
        return tuple(float(v) for v in items)
    if 2 <= len(items) <= 4 and all(
        not isinstance(row, (str, bytes)) and hasattr(row, "__len__") and len(row) == len(items)
        and all(_is_number(v) for v in row)
        for row in items
    ):
        return tuple(tuple(float(v) for v in row) for row in items)
    raise TypeError(f"uniform {name!r} must be a number, vector or square matrix")


class Material:
    """A shader with uniforms that are set under the ``material.`` prefix."""

    def __init__(self, shader: Any) -> None:
        self.shader = shader
        self.texture = TEXTURE_NONE
        self.cull_faces = True
        self._uniforms: dict[str, UniformValue] = {}
        self.restore_default_uniforms()

    def set_uniform(self, name: str, value: Any) -> None:
        """Set an int, float, 2-4 vector or 2x2-4x4 matrix uniform."""
        self._uniforms[name] = _normalize_uniform(name, value)

    def restore_default_uniforms(self) -> None:
        self.set_uniform("color", (1.0, 1.0, 1.0))
        self.set_uniform("tint", (0.0, 0.0, 0.0))
        self.set_uniform("ambientColor", (0.0, 0.0, 0.0))
        self.set_uniform("tiling", (1.0, 1.0))
        self.set_uniform("offset", (0.0, 0.0))

    def clear_uniforms(self) -> None:
        self._uniforms.clear()

    def set_texture(self, texture: int) -> None:
        self.texture = texture

    def uniforms(self) -> Mapping[str, UniformValue]:
        return MappingProxyType(self._uniforms)

    def use(self, shader: ShaderProgram | None = None) -> None:
        """Activate ``shader`` (default: this material's) and apply everything."""
        target = self.shader if shader is None else shader
        target.use()
        target.set_uniform("material.hasTexture", self.texture != TEXTURE_NONE)
        target.bind_texture(self.texture)
        for name, value in self._uniforms.items():
            target.set_uniform(f"material.{name}", value)
        target.set_face_culling(self.cull_faces)