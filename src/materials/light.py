# materials/light.py
from typing import Optional
from core.vector import Vector3
from core.bases import Positionable
from core.color import gray_scale
from core.ray import Ray
from core.utils import reflect

class Light(Positionable):
    """
    An omnidirectional point light with a color.
    """
    def __init__(self, position: Vector3, color: Vector3, gloss: float = 0.1):
        super().__init__(position)
        self.color = color
        self.gloss_color = gray_scale(gloss)

    def cast_shadow_ray(self, scene, intersection) -> Optional[Ray]:
        """
        Creates a ray from this light towards the intersection and
        intersects it with the scene. Returns None when the light sits
        exactly on the intersection point.
        """
        if self.distance_to(intersection.position) == 0:
            return None
        shadow_ray = Ray(self.position, self.orientation_to(intersection.position))
        scene.intersect(shadow_ray)
        return shadow_ray

    def diffuse_color_at(self, intersection, shadow_ray: Ray, viewer_position: Vector3) -> Vector3:
        """
        Lambertian plus gloss contribution of this light at an unobstructed
        intersection, attenuated by the shadow ray's hit distance.
        """
        prim = intersection.primitive
        point = intersection.position
        attenuated = self.color / max(shadow_ray.intersection.distance, 1e-6)

        # N faces inward, so it points along the incoming light for lit surfaces.
        n = -prim.outward_normal_at(point)
        l = self.orientation_to(point)
        diffuse = prim.color_at(point) * max(0.0, l.dot(n))

        v = intersection.orientation_to(viewer_position)
        r = reflect(l, n).normalize()
        glossy = self.gloss_color * (max(0.0, v.dot(r)) ** 2)

        return attenuated * (diffuse + glossy)

    def __repr__(self) -> str:
        return f"Light({self.position!r}, color={self.color!r})"
