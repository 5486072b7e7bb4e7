"""Axis-aligned boxes, view frustum planes and the camera that builds them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

Vec3 = tuple[float, float, float]


def _add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _scale(a: Vec3, s: float) -> Vec3:
    return (a[0] * s, a[1] * s, a[2] * s)


def _neg(a: Vec3) -> Vec3:
    return (-a[0], -a[1], -a[2])


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(a: Vec3) -> Vec3:
    length = math.sqrt(_dot(a, a))
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return _scale(a, 1.0 / length)


@dataclass(frozen=True)
class AABB:
    """An axis-aligned bounding box given by its centre and half-extents."""

    center: Vec3 = (0.0, 0.0, 0.0)
    extents: Vec3 = (0.0, 0.0, 0.0)

    @classmethod
    def from_min_max(cls, minimum: Vec3, maximum: Vec3) -> AABB:
        center = _scale(_add(minimum, maximum), 0.5)
        return cls(center, _sub(maximum, center))

    def minimum(self) -> Vec3:
        return _sub(self.center, self.extents)

    def maximum(self) -> Vec3:
        return _add(self.center, self.extents)


@dataclass(frozen=True)
class FrustumPlane:
    """A plane as a unit normal and its signed distance from the origin."""

    normal: Vec3 = (0.0, 1.0, 0.0)
    dist: float = 0.0

    @classmethod
    def from_point_normal(cls, point: Vec3, normal: Vec3) -> FrustumPlane:
        unit = _normalize(normal)
        return cls(unit, _dot(unit, point))

    def signed_distance(self, point: Vec3) -> float:
        return _dot(self.normal, point) - self.dist


@dataclass
class ViewFrustum:
    """Six planes whose normals point into the visible volume."""

    top: FrustumPlane = field(default_factory=FrustumPlane)
    bottom: FrustumPlane = field(default_factory=FrustumPlane)
    right: FrustumPlane = field(default_factory=FrustumPlane)
    left: FrustumPlane = field(default_factory=FrustumPlane)
    far_clipping_plane: FrustumPlane = field(default_factory=FrustumPlane)
    near_clipping_plane: FrustumPlane = field(default_factory=FrustumPlane)

    def is_on_plane(self, aabb: AABB, plane: FrustumPlane) -> bool:
        """True if any part of the box lies on the inner side of the plane."""
        radius = sum(e * abs(n) for e, n in zip(aabb.extents, plane.normal))
        return -radius <= plane.signed_distance(aabb.center)

    def is_on_frustum(self, aabb: AABB) -> bool:
        planes = (
            self.left,
            self.right,
            self.top,
            self.bottom,
            self.near_clipping_plane,
            self.far_clipping_plane,
        )
        return all(self.is_on_plane(aabb, plane) for plane in planes)


@dataclass
class Camera:
    """A perspective camera; ``update_frustum`` rebuilds its view frustum."""

    pos: Vec3 = (0.0, 0.0, 0.0)
    front: Vec3 = (0.0, 0.0, -1.0)
    up: Vec3 = (0.0, 1.0, 0.0)
    right: Vec3 = (1.0, 0.0, 0.0)
    fov: float = 60.0
    aspect_ratio: float = 16.0 / 9.0
    clipping_near: float = 0.1
    clipping_far: float = 1000.0
    frustum: ViewFrustum = field(default_factory=ViewFrustum)

    def update_frustum(self) -> ViewFrustum:
        perspective_up = _normalize(_cross(self.right, self.front))
        half_v = self.clipping_far * math.tan(math.radians(self.fov) * 0.5)
        half_h = half_v * self.aspect_ratio
        front_far = _scale(self.front, self.clipping_far)
        right_h = _scale(self.right, half_h)
        up_v = _scale(perspective_up, half_v)
        plane = FrustumPlane.from_point_normal

        self.frustum = ViewFrustum(
            near_clipping_plane=plane(
                _add(self.pos, _scale(self.front, self.clipping_near)), self.front
            ),
            far_clipping_plane=plane(_add(self.pos, front_far), _neg(self.front)),
            right=plane(self.pos, _cross(_sub(front_far, right_h), perspective_up)),
            left=plane(self.pos, _cross(perspective_up, _add(front_far, right_h))),
            top=plane(self.pos, _cross(self.right, _sub(front_far, up_v))),
            bottom=plane(self.pos, _cross(_add(front_far, up_v), self.right)),
        )
        return self.frustum