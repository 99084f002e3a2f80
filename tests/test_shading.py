"""Tests for diffuse shading, shadows and mirror recursion."""

import pytest

from core.vector import Vector3
from core.ray import Ray
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.light import Light
from materials.presets import ColorPresets


def primary_hit(scene, origin=Vector3(0, 0, 0), direction=Vector3(0, 1, 0)):
    ray = Ray(origin, direction)
    return scene.intersect(ray)


def channels(c):
    return (c >> 16) & 0xFF, (c >> 8) & 0xFF, c & 0xFF


class TestDiffuse:

    def test_lit_sphere(self, lit_scene):
        hit = primary_hit(lit_scene)
        color = hit.resolve_color(lit_scene, Vector3(0, 0, 0), 0)
        # 1/4 attenuation of red diffuse plus a 0.1 gloss highlight.
        assert color == hit.color
        assert channels(color) == (70, 6, 6)

    def test_occluded_light_leaves_ambient(self):
        target = Sphere(Vector3(0, 5, 0), 1.0, ColorPresets.RED)
        blocker = Sphere(Vector3(0, -1, 0), 0.5, ColorPresets.BLUE)
        light = Light(Vector3(0, -2, 0), ColorPresets.WHITE)
        scene = Scene([target, blocker], [light], ambient_intensity=0.2)

        hit = primary_hit(scene)
        assert hit.primitive is target
        assert hit.resolve_color(scene, Vector3(0, 0, 0), 0) == 51 << 16

    def test_unoccluded_light_adds_to_ambient(self):
        target = Sphere(Vector3(0, 5, 0), 1.0, ColorPresets.RED)
        light = Light(Vector3(0, -2, 0), ColorPresets.WHITE)
        scene = Scene([target], [light], ambient_intensity=0.2)

        hit = primary_hit(scene)
        red, _, blue = channels(hit.resolve_color(scene, Vector3(0, 0, 0), 0))
        assert red == 97
        assert blue > 0

    def test_light_behind_surface_adds_nothing(self):
        target = Sphere(Vector3(0, 5, 0), 1.0, ColorPresets.RED)
        light = Light(Vector3(0, 10, 0), ColorPresets.WHITE)
        scene = Scene([target], [light], ambient_intensity=0.2)

        hit = primary_hit(scene)
        assert hit.resolve_color(scene, Vector3(0, 0, 0), 0) == 51 << 16
        # The shadow ray reaches the far side of the sphere first.
        assert hit.shadow_rays[0].intersection.position.is_close(Vector3(0, 6, 0))

    def test_one_shadow_ray_per_light(self, unit_sphere):
        lights = [
            Light(Vector3(0, 0, 0), ColorPresets.WHITE),
            # Sits exactly on the hit point, so no shadow ray can be aimed.
            Light(Vector3(0, 4, 0), ColorPresets.WHITE),
        ]
        scene = Scene([unit_sphere], lights, ambient_intensity=0.0)
        hit = primary_hit(scene)
        color = hit.resolve_color(scene, Vector3(0, 0, 0), 0)

        assert len(hit.shadow_rays) == 2
        assert hit.shadow_rays[0] is not None
        assert hit.shadow_rays[1] is None
        assert channels(color) == (70, 6, 6)

    def test_color_stays_in_range_with_bright_lights(self, unit_sphere):
        lights = [Light(Vector3(0, 3.5, 0), ColorPresets.WHITE * 50)]
        scene = Scene([unit_sphere], lights)
        hit = primary_hit(scene)
        assert channels(hit.resolve_color(scene, Vector3(0, 0, 0), 0)) == (255, 255, 255)

    def test_primitive_outside_scene_is_rejected(self, lit_scene):
        stranger = Sphere(Vector3(0, 5, 0), 1.0, ColorPresets.RED)
        hit = stranger.intersect(Ray(Vector3(0, 0, 0), Vector3(0, 1, 0)))
        with pytest.raises(RuntimeError):
            hit.resolve_color(lit_scene, Vector3(0, 0, 0), 3)


class TestMirror:

    @pytest.fixture
    def facing_mirrors(self):
        upper = Sphere(Vector3(0, 3, 0), 1.0, ColorPresets.WHITE, is_mirror=True)
        lower = Sphere(Vector3(0, -3, 0), 1.0, ColorPresets.WHITE, is_mirror=True)
        return Scene([upper, lower], [Light(Vector3(5, 0, 0), ColorPresets.WHITE)])

    def test_no_bounces_left_keeps_default(self, facing_mirrors):
        hit = primary_hit(facing_mirrors)
        assert hit.resolve_color(facing_mirrors, Vector3(0, 0, 0), 0) == 0
        assert hit.secondary_ray is None
        assert hit.shadow_rays is None

    @pytest.mark.parametrize("bounces", [1, 3, 6])
    def test_recursion_depth_is_bounded(self, facing_mirrors, bounces):
        hit = primary_hit(facing_mirrors)
        hit.resolve_color(facing_mirrors, Vector3(0, 0, 0), bounces)

        depth = 0
        current = hit
        while current is not None and current.secondary_ray is not None:
            depth += 1
            current = current.secondary_ray.intersection
        assert depth == bounces
        assert hit.color == 0

    def test_secondary_ray_is_mirrored_and_offset(self, facing_mirrors):
        hit = primary_hit(facing_mirrors)
        hit.resolve_color(facing_mirrors, Vector3(0, 0, 0), 1)
        secondary = hit.secondary_ray
        assert secondary.direction.is_close(Vector3(0, -1, 0))
        assert secondary.origin.y < hit.position.y
        assert secondary.intersection.position.is_close(Vector3(0, -2, 0))

    def test_mirror_tints_reflected_color(self):
        mirror = Sphere(Vector3(0, 5, 0), 1.0, ColorPresets.ORANGE, is_mirror=True)
        target = Sphere(Vector3(0, -3, 0), 1.0, ColorPresets.WHITE)
        scene = Scene([mirror, target], [Light(Vector3(0, 0, 0), ColorPresets.WHITE)])

        hit = primary_hit(scene)
        assert hit.primitive is mirror
        red, green, blue = channels(hit.resolve_color(scene, Vector3(0, 0, 0), 2))
        assert red > green > 0
        assert blue == 0
        assert hit.secondary_ray.intersection.primitive is target

    def test_mirror_facing_nothing_stays_black(self):
        mirror = Sphere(Vector3(0, 5, 0), 1.0, ColorPresets.WHITE, is_mirror=True)
        scene = Scene([mirror], [Light(Vector3(0, 0, 0), ColorPresets.WHITE)])
        hit = primary_hit(scene)
        assert hit.resolve_color(scene, Vector3(0, 0, 0), 5) == 0
        assert hit.secondary_ray.intersection is None
