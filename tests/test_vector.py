"""Tests for vector algebra, polar conversion and color packing."""

import math

import pytest

from core.vector import Vector3
from core.utils import (cartesian_to_polar_phi, cartesian_to_polar_theta, clamp,
                        polar_to_cartesian, reflect)
from core.color import from_int_rgb, gray_scale, to_int_rgb
from core.bases import Orientable, Positionable


class TestVector3:

    def test_arithmetic(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert a * b == Vector3(4, 10, 18)
        assert b / 2 == Vector3(2, 2.5, 3)
        assert -a == Vector3(-1, -2, -3)

    def test_dot_and_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)
        assert y.cross(x) == Vector3(0, 0, -1)

    def test_length_and_normalize(self):
        v = Vector3(3, 4, 0)
        assert v.length() == 5
        assert v.length_squared() == 25
        assert v.normalize().is_close(Vector3(0.6, 0.8, 0))

    def test_normalize_zero_vector(self):
        assert Vector3.zero().normalize() == Vector3(0, 0, 0)


class TestMathHelpers:

    def test_clamp(self):
        assert clamp(1.5, 0, 1) == 1
        assert clamp(-0.5, 0, 1) == 0
        assert clamp(0.25, 0, 1) == 0.25

    def test_reflect(self):
        v = Vector3(1, -1, 0)
        n = Vector3(0, 1, 0)
        assert reflect(v, n) == Vector3(1, 1, 0)

    @pytest.mark.parametrize("theta,phi", [
        (math.pi / 2, 0.0),
        (0.3, 1.2),
        (2.5, -2.0),
        (1.0, math.pi / 2),
    ])
    def test_polar_round_trip(self, theta, phi):
        p = polar_to_cartesian(1, theta, phi)
        assert p.length() == pytest.approx(1)
        assert cartesian_to_polar_theta(p) == pytest.approx(theta)
        assert cartesian_to_polar_phi(p) == pytest.approx(phi)

    def test_polar_axes(self):
        assert polar_to_cartesian(1, math.pi / 2, 0).is_close(Vector3(0, 1, 0))
        assert polar_to_cartesian(1, math.pi / 2, math.pi / 2).is_close(Vector3(1, 0, 0))
        assert polar_to_cartesian(2, 0, 0).is_close(Vector3(0, 0, 2))

    def test_phi_on_pole_is_zero(self):
        assert cartesian_to_polar_phi(Vector3(0, 0, 1)) == 0
        assert cartesian_to_polar_theta(Vector3(0, 0, -3)) == pytest.approx(math.pi)


class TestColor:

    def test_pack(self):
        assert to_int_rgb(Vector3(1, 0.5, 0)) == 0xFF7F00
        assert to_int_rgb(gray_scale(0)) == 0

    def test_pack_clamps_channels(self):
        assert to_int_rgb(Vector3(2, -1, 0.5)) == 0xFF007F

    def test_unpack(self):
        assert from_int_rgb(0xFF0000) == Vector3(1, 0, 0)
        c = from_int_rgb(0x00FF7F)
        assert c.x == 0
        assert c.y == 1
        assert c.z == pytest.approx(127 / 255)


class TestBases:

    def test_positionable_helpers(self):
        p = Positionable(Vector3(1, 1, 1))
        target = Vector3(1, 4, 5)
        assert p.direction_to(target) == Vector3(0, 3, 4)
        assert p.distance_to(target) == 5
        assert p.orientation_to(target).is_close(Vector3(0, 0.6, 0.8))
        p.translocate_by(Vector3(1, 0, 0))
        assert p.position == Vector3(2, 1, 1)

    def test_orientable_helpers(self):
        o = Orientable(Vector3(0, 0, 0), Vector3(0, 1, 0))
        assert o.extended_by(3) == Vector3(0, 3, 0)
        o.extend_by(2)
        assert o.position == Vector3(0, 2, 0)
        o.orientate_to(Vector3(0, 2, 5))
        assert o.orientation.is_close(Vector3(0, 0, 1))
