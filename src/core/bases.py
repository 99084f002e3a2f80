# core/bases.py
from core.vector import Vector3

class Positionable:
    """
    Something with a position in 3-space that can be moved around.
    """
    def __init__(self, position: Vector3):
        self.position = position

    def direction_to(self, p: Vector3) -> Vector3:
        return p - self.position

    def distance_to(self, p: Vector3) -> float:
        return self.direction_to(p).length()

    def orientation_to(self, p: Vector3) -> Vector3:
        """Unit vector from this position towards p."""
        return self.direction_to(p).normalize()

    def translocated_by(self, direction: Vector3) -> Vector3:
        return self.position + direction

    def translocate_by(self, direction: Vector3):
        """Moves the position in-place."""
        self.position = self.translocated_by(direction)


class Orientable(Positionable):
    """
    A positionable with a forward orientation (unit vector).
    """
    def __init__(self, position: Vector3, orientation: Vector3):
        super().__init__(position)
        self.orientation = orientation

    def extended_by(self, distance: float) -> Vector3:
        """
        Returns the point reached by travelling distance along the orientation.
        """
        return self.translocated_by(self.orientation * distance)

    def orientate_to(self, p: Vector3):
        self.orientation = self.orientation_to(p)

    def extend_by(self, distance: float):
        self.position = self.extended_by(distance)
