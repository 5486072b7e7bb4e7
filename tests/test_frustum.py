import math

import pytest

from latren.frustum import AABB, Camera, FrustumPlane, ViewFrustum


def test_min_max_round_trip():
    box = AABB.from_min_max((-1.0, 2.0, -3.0), (5.0, 4.0, 3.0))
    assert box.minimum() == pytest.approx((-1.0, 2.0, -3.0))
    assert box.maximum() == pytest.approx((5.0, 4.0, 3.0))


def test_extents_are_non_negative_for_ordered_bounds():
    box = AABB.from_min_max((-2.0, -2.0, -2.0), (2.0, 6.0, 0.0))
    assert all(e >= 0 for e in box.extents)


def test_plane_normal_is_normalised():
    plane = FrustumPlane.from_point_normal((0.0, 3.0, 0.0), (0.0, 5.0, 0.0))
    assert math.isclose(sum(n * n for n in plane.normal), 1.0)
    assert plane.signed_distance((0.0, 3.0, 0.0)) == pytest.approx(0.0)


def test_zero_normal_rejected():
    with pytest.raises(ValueError):
        FrustumPlane.from_point_normal((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))


def test_is_on_plane():
    frustum = ViewFrustum()
    plane = FrustumPlane.from_point_normal((0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    below = AABB((0.0, -5.0, 0.0), (1.0, 1.0, 1.0))
    straddling = AABB((0.0, -0.5, 0.0), (1.0, 1.0, 1.0))
    assert frustum.is_on_plane(below, plane) is False
    assert frustum.is_on_plane(straddling, plane) is True


def _camera():
    cam = Camera()
    cam.update_frustum()
    return cam


def test_box_in_front_of_camera_is_visible():
    cam = _camera()
    assert cam.frustum.is_on_frustum(AABB((0.0, 0.0, -10.0), (1.0, 1.0, 1.0)))


def test_box_behind_camera_is_culled():
    cam = _camera()
    assert not cam.frustum.is_on_frustum(AABB((0.0, 0.0, 10.0), (1.0, 1.0, 1.0)))


def test_box_beyond_far_plane_is_culled():
    cam = _camera()
    far = -2.0 * cam.clipping_far
    assert not cam.frustum.is_on_frustum(AABB((0.0, 0.0, far), (1.0, 1.0, 1.0)))


def test_box_far_to_the_side_is_culled():
    cam = _camera()
    assert not cam.frustum.is_on_frustum(AABB((500.0, 0.0, -1.0), (1.0, 1.0, 1.0)))
    assert not cam.frustum.is_on_frustum(AABB((-500.0, 0.0, -1.0), (1.0, 1.0, 1.0)))
    assert not cam.frustum.is_on_frustum(AABB((0.0, 500.0, -1.0), (1.0, 1.0, 1.0)))
    assert not cam.frustum.is_on_frustum(AABB((0.0, -500.0, -1.0), (1.0, 1.0, 1.0)))


def test_moved_camera_follows_position():
    cam = Camera(pos=(100.0, 0.0, 0.0))
    cam.update_frustum()
    assert cam.frustum.is_on_frustum(AABB((100.0, 0.0, -10.0), (1.0, 1.0, 1.0)))
    assert not cam.frustum.is_on_frustum(AABB((0.0, 0.0, -10.0), (1.0, 1.0, 1.0)))