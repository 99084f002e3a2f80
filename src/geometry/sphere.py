# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.primitive import Primitive
from geometry.intersection import Intersection

class Sphere(Primitive):
    """
    Represents a sphere defined by its center, radius, color and mirror flag.
    """
    def __init__(self, center: Vector3, radius: float, color: Vector3,
                 is_mirror: bool = False):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        super().__init__(center, Vector3.zero(), color, is_mirror)
        self.radius = radius

    @property
    def center(self) -> Vector3:
        return self.position

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        # Project the center onto the ray; assumes the ray starts outside the sphere.
        centered = self.position - ray.position
        tca = centered.dot(ray.orientation)
        d2 = (centered - ray.orientation * tca).length_squared()
        r2 = self.radius * self.radius
        if d2 > r2:
            return None

        distance = tca - math.sqrt(r2 - d2)
        if distance < 0:
            return None
        return Intersection(ray.extended_by(distance), distance, self)

    def outward_normal_at(self, point: Vector3) -> Vector3:
        return self.orientation_to(point)

    def color_at(self, point: Vector3) -> Vector3:
        return self.color

    def __repr__(self) -> str:
        return f"Sphere(center={self.position!r}, radius={self.radius}, mirror={self.is_mirror})"
