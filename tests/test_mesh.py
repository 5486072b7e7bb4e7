from latren.frustum import AABB
from latren.mesh import Mesh

VERTS = [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0]


def test_defaults_for_missing_attributes():
    mesh = Mesh.from_geometry(VERTS, [0, 1, 2])
    assert mesh.vertex_count() == 3
    assert len(mesh.tex_coords) == 2 * mesh.vertex_count()
    assert all(c == 0.0 for c in mesh.tex_coords)
    assert mesh.normals == VERTS


def test_explicit_attributes_kept():
    coords = [0.0, 0.0, 1.0, 0.0, 0.0, 1.0]
    normals = [0.0, 0.0, 1.0] * 3
    mesh = Mesh.from_geometry(VERTS, [0, 1, 2], coords, normals, mesh_id="tri")
    assert mesh.tex_coords == coords
    assert mesh.normals == normals
    assert mesh.id == "tri"


def test_tex_coords_without_normals_use_vertices():
    mesh = Mesh.from_geometry(VERTS, [0, 1, 2], [0.5] * 6)
    assert mesh.normals == VERTS


def test_input_lists_not_shared():
    verts = list(VERTS)
    mesh = Mesh.from_geometry(verts, [0, 1, 2])
    verts.append(9.0)
    assert mesh.vertices == VERTS


def test_copy_is_independent_and_drops_material():
    mesh = Mesh.from_geometry(VERTS, [0, 1, 2], mesh_id="tri")
    mesh.material = "mat"
    mesh.aabb = AABB.from_min_max((0.0, 0.0, 0.0), (1.0, 1.0, 0.0))
    dup = mesh.copy()
    assert dup.vertices == mesh.vertices and dup.indices == mesh.indices
    assert dup.id == "tri"
    assert dup.material is None
    assert dup.aabb == AABB()
    dup.vertices[0] = 5.0
    assert mesh.vertices[0] == 0.0