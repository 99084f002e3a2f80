# src/geometry/world.py
import logging
from typing import List, Optional, Sequence
from core.vector import Vector3
from core.ray import Ray
from core.color import to_int_rgb
from geometry.primitive import Primitive
from geometry.intersection import Intersection

logger = logging.getLogger(__name__)

AMBIENT_INTENSITY = 0.2

class Scene:
    """
    The primitives and lights of a render, plus its background color.
    Both lists are fixed for the lifetime of the scene and are never
    mutated while tracing.
    """
    def __init__(self, primitives: Sequence[Primitive], lights: Sequence,
                 background: Vector3 = Vector3(0, 0, 0),
                 ambient_intensity: float = AMBIENT_INTENSITY):
        self.primitives: List[Primitive] = list(primitives)
        self.lights = list(lights)
        self.background = to_int_rgb(background)
        self.ambient_intensity = ambient_intensity
        self._primitive_ids = {id(p) for p in self.primitives}
        logger.debug("Scene with %d primitives and %d lights",
                     len(self.primitives), len(self.lights))

    def contains(self, primitive: Primitive) -> bool:
        return id(primitive) in self._primitive_ids

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """
        Scans every primitive and keeps the nearest hit as the ray's
        intersection. Ties keep the hit that was recorded first.
        """
        for prim in self.primitives:
            intersection = prim.intersect(ray)
            if ray.is_closer_intersection(intersection):
                ray.intersection = intersection
        return ray.intersection

    def ambient_light_at(self, primitive: Primitive, point: Vector3) -> Vector3:
        return primitive.color_at(point) * self.ambient_intensity
