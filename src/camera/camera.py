import logging
import math
from typing import List, Optional
from core.vector import Vector3
from core.bases import Orientable
from core.ray import Ray
from core.utils import (cartesian_to_polar_phi, cartesian_to_polar_theta,
                        polar_to_cartesian)
from camera.projection import ProjectionSurface

logger = logging.getLogger(__name__)

MAX_REFLECTION_BOUNCES = 25
MOVEMENT_SPEED = 2.5
ROTATION_SPEED = math.pi / 720

class Camera(Orientable):
    """
    A movable, rotatable camera owning the grid of view rays.

    The forward and up vectors are kept as polar angles and re-derived from
    them after every rotation, so the basis does not drift or denormalise
    over many small updates. Any state change sets has_changed, which tells
    the owner to re-trace the view rays.
    """
    def __init__(self, position: Vector3, orientation: Vector3, up: Vector3,
                 projection_distance: float, width: int, height: int,
                 max_reflection_bounces: int = MAX_REFLECTION_BOUNCES,
                 movement_speed: float = MOVEMENT_SPEED,
                 rotation_speed: float = ROTATION_SPEED):
        if projection_distance <= 0:
            raise ValueError(f"Projection distance must be positive, got {projection_distance}")
        if width < 1 or height < 1:
            raise ValueError(f"Projection resolution must be at least 1x1, got {width}x{height}")
        if orientation.length() == 0:
            raise ValueError("Camera orientation must be non-zero")

        self.theta = cartesian_to_polar_theta(orientation)
        self.phi = cartesian_to_polar_phi(orientation)
        super().__init__(position, polar_to_cartesian(1, self.theta, self.phi).normalize())

        # The up vector lies in the vertical plane of the forward vector,
        # a quarter turn away from it; the hint only picks the sign.
        self._up_phi = self.phi
        self._up_theta = self.theta - math.pi / 2
        if polar_to_cartesian(1, self._up_theta, self._up_phi).dot(up) < 0:
            self._up_theta = self.theta + math.pi / 2
        self.up = polar_to_cartesian(1, self._up_theta, self._up_phi).normalize()
        self.right = self.orientation.cross(self.up).normalize()

        self.max_reflection_bounces = max_reflection_bounces
        self.movement_speed = movement_speed
        self.rotation_speed = rotation_speed

        self.projection = ProjectionSurface(self, projection_distance, width, height)
        self.projection_distance = projection_distance
        self.fov = self.distance_to_fov(projection_distance)
        self.view_rays: Optional[List[List[Ray]]] = None
        self.has_changed = False

    @property
    def fov_degrees(self) -> float:
        return math.degrees(self.fov)

    # Translation

    def move_left(self, dt: float):
        self.translocate_by(self.right * (-self.movement_speed * dt))

    def move_right(self, dt: float):
        self.translocate_by(self.right * (self.movement_speed * dt))

    def move_forward(self, dt: float):
        self.translocate_by(self.orientation * (self.movement_speed * dt))

    def move_backward(self, dt: float):
        self.translocate_by(self.orientation * (-self.movement_speed * dt))

    def translocate_by(self, direction: Vector3):
        super().translocate_by(direction)
        self.projection.translocate_by(direction)
        self.has_changed = True

    def extend_by(self, distance: float):
        self.translocate_by(self.orientation * distance)

    # Rotation

    def rotate_around_z(self, d_phi: float):
        """Yaw by d_phi input units."""
        self._change_orientation(self.theta, self.phi + self.rotation_speed * d_phi)

    def rotate_around_x(self, d_theta: float):
        """Pitch by d_theta input units."""
        self._change_orientation(self.theta + self.rotation_speed * d_theta, self.phi)

    def orientate_to(self, p: Vector3):
        direction = self.orientation_to(p)
        if direction.length() == 0:
            return
        self._change_orientation(cartesian_to_polar_theta(direction),
                                 cartesian_to_polar_phi(direction))

    def _change_orientation(self, new_theta: float, new_phi: float):
        # Shift the up angles by the same deltas to keep the basis orthogonal.
        self._up_theta += new_theta - self.theta
        self._up_phi += new_phi - self.phi
        self.theta = new_theta
        self.phi = new_phi

        self.orientation = polar_to_cartesian(1, self.theta, self.phi).normalize()
        self.up = polar_to_cartesian(1, self._up_theta, self._up_phi).normalize()
        self.right = self.orientation.cross(self.up).normalize()

        self.projection.update_projection(self, self.projection_distance)
        self.has_changed = True

    # Zoom

    def zoom(self, d_angle: float):
        self.change_fov(self.fov_degrees + d_angle)

    def change_fov(self, degrees: float):
        """
        Sets the field of view; values outside (0, 180) degrees are ignored.
        """
        if not 0 < degrees < 180:
            return
        self.fov = math.radians(degrees)
        self.projection_distance = self.fov_to_distance(self.fov)
        self.projection.update_projection(self, self.projection_distance)
        self.has_changed = True

    def fov_to_distance(self, rad: float) -> float:
        return self.projection.half_width / math.tan(rad / 2)

    def distance_to_fov(self, distance: float) -> float:
        return 2 * math.atan(self.projection.half_width / distance)

    def resize(self, width: int, height: int):
        if width < 1 or height < 1:
            return
        self.projection.width = width
        self.projection.height = height
        self.projection.update_projection(self, self.projection_distance)
        self.fov = self.distance_to_fov(self.projection_distance)
        self.has_changed = True

    # Ray generation

    def generate_rays(self, scene):
        """
        Allocates a fresh grid of view rays and traces each of them.
        """
        h, w = self.projection.height, self.projection.width
        p0 = self.projection.start_point()
        rays = []
        for i in range(h):
            row = []
            for j in range(w):
                p = p0 + self.projection.offset_point(i, j)
                ray = Ray(self.position, self.orientation_to(p))
                self._trace(scene, ray)
                row.append(ray)
            rays.append(row)
        self.view_rays = rays
        logger.debug("Generated %dx%d view rays", w, h)

    def regenerate_rays(self, scene):
        """
        Re-aims and re-traces the existing view rays in place. Falls back
        to generate_rays when the grid does not match the resolution.
        """
        h, w = self.projection.height, self.projection.width
        if self.view_rays is None or len(self.view_rays) != h or len(self.view_rays[0]) != w:
            self.generate_rays(scene)
            return

        p0 = self.projection.start_point()
        for i, row in enumerate(self.view_rays):
            for j, ray in enumerate(row):
                p = p0 + self.projection.offset_point(i, j)
                ray.update(self.position, self.orientation_to(p))
                self._trace(scene, ray)

    def _trace(self, scene, ray: Ray):
        scene.intersect(ray)
        if ray.intersection is not None:
            ray.intersection.resolve_color(scene, ray.position, self.max_reflection_bounces)
