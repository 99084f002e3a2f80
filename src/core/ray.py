# core/ray.py
from core.vector import Vector3
from core.bases import Orientable

class Ray(Orientable):
    """
    Represents a ray in 3D space with an origin and a unit direction.
    Used for primary, secondary (reflection) and shadow rays.

    The ray keeps the nearest intersection found so far; it is replaced,
    not accumulated, while a scene is scanned.
    """
    def __init__(self, origin: Vector3, direction: Vector3):
        super().__init__(origin, direction)
        self.intersection = None

    @property
    def origin(self) -> Vector3:
        return self.position

    @property
    def direction(self) -> Vector3:
        return self.orientation

    def at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.position + self.orientation * t

    def is_closer_intersection(self, intersection) -> bool:
        """
        True if intersection exists and is strictly closer than the current one.
        """
        return intersection is not None and (
            self.intersection is None or intersection.distance < self.intersection.distance)

    def update(self, origin: Vector3, direction: Vector3):
        """
        Re-aims the ray in-place and forgets its previous intersection.
        """
        self.position = origin
        self.orientation = direction
        self.intersection = None

    def __repr__(self) -> str:
        return f"Ray({self.position!r}, {self.orientation!r})"
