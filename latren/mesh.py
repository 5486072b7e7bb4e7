"""Triangle mesh geometry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from latren.frustum import AABB

_IDENTITY = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


@dataclass
class Mesh:
    """Flat vertex, index, texture-coordinate and normal lists of one mesh."""

    vertices: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    tex_coords: list[float] = field(default_factory=list)
    normals: list[float] = field(default_factory=list)
    id: str = ""
    aabb: AABB = field(default_factory=AABB)
    material: Any = None
    cull_faces: bool = True
    transform_matrix: tuple = _IDENTITY

    @classmethod
    def from_geometry(
        cls,
        vertices: Sequence[float],
        indices: Sequence[int],
        tex_coords: Sequence[float] | None = None,
        normals: Sequence[float] | None = None,
        mesh_id: str = "",
    ) -> Mesh:
        """Build a mesh; missing texture coordinates are zero, missing normals
        are the vertex positions."""
        verts = list(vertices)
        coords = [0.0] * (2 * (len(verts) // 3)) if tex_coords is None else list(tex_coords)
        norms = list(verts) if normals is None else list(normals)
        return cls(verts, list(indices), coords, norms, mesh_id)

    def copy(self) -> Mesh:
        """A new mesh with copies of the geometry and id; material is not copied."""
        return Mesh(
            list(self.vertices),
            list(self.indices),
            list(self.tex_coords),
            list(self.normals),
            self.id,
        )

    def vertex_count(self) -> int:
        return len(self.vertices) // 3