"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Make the packages under src/ importable without installing the project.
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

from core.vector import Vector3  # noqa: E402
from geometry.sphere import Sphere  # noqa: E402
from geometry.plane import Plane  # noqa: E402
from geometry.world import Scene  # noqa: E402
from materials.light import Light  # noqa: E402
from materials.presets import ColorPresets  # noqa: E402


@pytest.fixture
def unit_sphere():
    """A diffuse red sphere of radius 1 centred at (0, 5, 0)."""
    return Sphere(Vector3(0, 5, 0), 1.0, ColorPresets.RED)


@pytest.fixture
def lit_scene(unit_sphere):
    """The unit sphere lit from the camera side, with no ambient light."""
    light = Light(Vector3(0, 0, 0), ColorPresets.WHITE)
    return Scene([unit_sphere], [light], ambient_intensity=0.0)


@pytest.fixture
def small_scene():
    """A checkered floor, a diffuse sphere, a mirror sphere and one light."""
    primitives = [
        Plane(Vector3(0, 0, -1), Vector3(0, 0, 1), ColorPresets.WHITE, has_checkers_texture=True),
        Sphere(Vector3(-1, 5, 0), 0.8, ColorPresets.GREEN),
        Sphere(Vector3(1, 5, 0), 0.8, ColorPresets.WHITE, is_mirror=True),
    ]
    lights = [Light(Vector3(0, 3, 4), ColorPresets.WHITE)]
    return Scene(primitives, lights)
