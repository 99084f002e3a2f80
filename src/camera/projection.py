# camera/projection.py
from core.vector import Vector3
from core.bases import Orientable

class ProjectionSurface(Orientable):
    """
    The rectangular plane in front of the camera that view rays are shot
    through. It is described by its left-upper corner and the two edge
    vectors spanning it downwards and to the right. The plane is two units
    high (the up vector above and below its center) and 2 * aspect wide.
    """
    def __init__(self, camera, distance: float, width: int, height: int):
        super().__init__(camera.extended_by(distance), camera.orientation)
        self.width = width
        self.height = height
        self.left_upper = Vector3.zero()
        self.down_direction = Vector3.zero()
        self.right_direction = Vector3.zero()
        self.update_projection(camera, distance)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def half_width(self) -> float:
        return self.right_direction.length() / 2

    def translocate_by(self, direction: Vector3):
        super().translocate_by(direction)
        self.left_upper = self.left_upper + direction

    def update_projection(self, camera, distance: float):
        """Re-derives the plane from the camera basis and projection distance."""
        a = self.aspect_ratio
        self.position = camera.position + camera.orientation * distance
        self.orientation = camera.orientation
        self.left_upper = self.position + camera.up - camera.right * a
        right_upper = self.position + camera.up + camera.right * a
        left_lower = self.position - camera.up - camera.right * a
        self.right_direction = right_upper - self.left_upper
        self.down_direction = left_lower - self.left_upper

    def start_point(self) -> Vector3:
        """Center of the pixel at grid index (0, 0)."""
        return (self.left_upper
                + self.down_direction / (2 * self.height)
                + self.right_direction / (2 * self.width))

    def offset_point(self, i: float, j: float) -> Vector3:
        """Offset of pixel (i, j) relative to the start point."""
        return self.down_direction * (i / self.height) + self.right_direction * (j / self.width)
