# geometry/primitive.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.bases import Orientable

class Primitive(Orientable):
    """
    Abstract base for the intersectable shapes of a scene (spheres and planes).
    A primitive has a base color and is either diffuse or a mirror.
    """
    def __init__(self, position: Vector3, orientation: Vector3,
                 color: Vector3, is_mirror: bool = False):
        super().__init__(position, orientation)
        self.color = color
        self.is_mirror = is_mirror

    def intersect(self, ray: Ray) -> Optional["Intersection"]:
        """
        Returns the intersection with the ray, or None on a miss.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def outward_normal_at(self, point: Vector3) -> Vector3:
        raise NotImplementedError("outward_normal_at() must be implemented by subclasses.")

    def color_at(self, point: Vector3) -> Vector3:
        raise NotImplementedError("color_at() must be implemented by subclasses.")
