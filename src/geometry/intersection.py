# geometry/intersection.py
from typing import List, Optional
from core.vector import Vector3
from core.bases import Positionable
from core.color import from_int_rgb, to_int_rgb
from core.ray import Ray
from core.utils import reflect

# Tolerance of the shadow test: how much closer than the light distance the
# shadow ray may hit the same primitive and still count as unobstructed.
SHADOW_EPSILON = 0.01
# Secondary rays start this far along their direction, so a mirror plane
# does not re-hit itself at distance zero.
REFLECTION_OFFSET = 1e-4

class Intersection(Positionable):
    """
    Records where a ray hit a primitive.

    Once shaded, a diffuse hit holds one shadow ray per scene light
    (entries may be None) and a mirror hit holds its secondary ray.
    The resolved color is a packed 0xRRGGBB integer.
    """
    def __init__(self, position: Vector3, distance: float, primitive):
        super().__init__(position)
        self.distance = distance
        self.primitive = primitive  # not owned; primitives outlive intersections
        self.shadow_rays: Optional[List[Optional[Ray]]] = None
        self.secondary_ray: Optional[Ray] = None
        self.color = 0x000000

    def intersects_at_equal_object(self, other: Optional["Intersection"]) -> bool:
        return other is not None and other.primitive is self.primitive

    def intersects_at_equal_distance(self, distance: float, error: float = SHADOW_EPSILON) -> bool:
        return self.distance >= distance - error

    def resolve_color(self, scene, viewer_position: Vector3, remaining_bounces: int) -> int:
        """
        Computes the illuminated color of this intersection and stores it.

        Diffuse primitives are shaded from the scene lights; mirrors spawn a
        secondary ray while bounces remain. A mirror without bounces left
        keeps the default color.
        """
        if not scene.contains(self.primitive):
            raise RuntimeError(f"Intersection references a primitive outside the scene: {self.primitive!r}")

        if not self.primitive.is_mirror:
            self._resolve_diffuse_color(scene, viewer_position)
        elif remaining_bounces > 0:
            self._resolve_reflective_color(scene, viewer_position, remaining_bounces)
        return self.color

    def _resolve_diffuse_color(self, scene, viewer_position: Vector3):
        c = scene.ambient_light_at(self.primitive, self.position)
        self.shadow_rays = []

        for light in scene.lights:
            shadow_ray = light.cast_shadow_ray(scene, self)
            self.shadow_rays.append(shadow_ray)
            if shadow_ray is None or not self.intersects_at_equal_object(shadow_ray.intersection):
                continue

            light_distance = light.distance_to(self.position)
            if light_distance < 0:
                raise RuntimeError(f"Negative light distance {light_distance}")
            if not shadow_ray.intersection.intersects_at_equal_distance(light_distance):
                continue
            c = c + light.diffuse_color_at(self, shadow_ray, viewer_position)

        self.color = to_int_rgb(c)

    def _resolve_reflective_color(self, scene, viewer_position: Vector3, remaining_bounces: int):
        # V is the incident direction, from the viewer towards this point.
        v = -self.orientation_to(viewer_position)
        n = self.primitive.outward_normal_at(self.position)
        reflection = reflect(v, n).normalize()

        self.secondary_ray = Ray(self.position + reflection * REFLECTION_OFFSET, reflection)
        scene.intersect(self.secondary_ray)
        hit = self.secondary_ray.intersection
        if hit is None:
            return

        hit.resolve_color(scene, self.secondary_ray.position, remaining_bounces - 1)
        local = self.primitive.color_at(self.position)
        self.color = to_int_rgb(local * from_int_rgb(hit.color))

    def __repr__(self) -> str:
        return f"Intersection({self.position!r}, distance={self.distance}, color={self.color:#08x})"
