from geometry.primitive import Primitive
from geometry.intersection import Intersection
from geometry.sphere import Sphere
from geometry.plane import Plane
from geometry.world import Scene

__all__ = [
    "Primitive",
    "Intersection",
    "Sphere",
    "Plane",
    "Scene",
]
