# geometry/plane.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.primitive import Primitive
from geometry.intersection import Intersection
from materials.textures import CheckerTexture

class Plane(Primitive):
    """
    An infinite plane through a reference point with a constant normal.
    Can be a mirror and can carry a checkerboard texture.
    """
    def __init__(self, point: Vector3, normal: Vector3, color: Vector3,
                 is_mirror: bool = False, has_checkers_texture: bool = False):
        if normal.length() == 0:
            raise ValueError("Plane normal must be non-zero")
        super().__init__(point, normal.normalize(), color, is_mirror)
        self.has_checkers_texture = has_checkers_texture
        self.texture = CheckerTexture(Vector3.zero(), color) if has_checkers_texture else None

    @property
    def normal(self) -> Vector3:
        return self.orientation

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        upper = (self.position - ray.position).dot(self.orientation)
        lower = ray.orientation.dot(self.orientation)
        if lower == 0:
            return None
        distance = upper / lower
        if distance < 0:
            return None
        return Intersection(ray.extended_by(distance), distance, self)

    def outward_normal_at(self, point: Vector3) -> Vector3:
        return self.orientation

    def color_at(self, point: Vector3) -> Vector3:
        if self.texture is None:
            return self.color
        u, v = self.texture_coordinates(point)
        return self.texture.sample(u, v)

    def texture_coordinates(self, point: Vector3):
        """
        Integer tile coordinates of a point on the plane.

        Offsets from the reference point are scaled by the normal's weight in
        the xz and yz planes. This only approximates a proper mapping for
        planes tilted away from the major axes.
        """
        d = self.direction_to(point)
        n = self.orientation
        u = math.sqrt(d.x * d.x + d.z * d.z)
        v = math.sqrt(d.y * d.y + d.z * d.z)
        u_scale = math.sqrt(n.x * n.x + n.z * n.z)
        v_scale = math.sqrt(n.y * n.y + n.z * n.z)
        if u_scale > 0:
            u /= u_scale
        if v_scale > 0:
            v /= v_scale
        return int(u), int(v)

    def __repr__(self) -> str:
        return (f"Plane(point={self.position!r}, normal={self.orientation!r}, "
                f"mirror={self.is_mirror}, checkers={self.has_checkers_texture})")
