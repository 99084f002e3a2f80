# renderer/raytracer.py
import logging
from core.vector import Vector3
from core.ray import Ray
from core.color import gray_scale
from camera.camera import Camera, MAX_REFLECTION_BOUNCES
from geometry.sphere import Sphere
from geometry.world import Scene
from renderer.display import DisplayFrame

logger = logging.getLogger(__name__)

# Rays whose hit lies further away than this are drawn as open-ended lines.
MAX_DEBUG_RAY_LENGTH = 1000.0
OPEN_DEBUG_RAY_LENGTH = 150.0

class RayTracer:
    """
    Ties the display, scene and camera together: re-traces the camera's
    view rays when it changed and fills the display's pixel buffers.
    """
    def __init__(self, display: DisplayFrame, scene: Scene,
                 camera_position: Vector3, camera_orientation: Vector3,
                 camera_up: Vector3, projection_distance: float,
                 max_bounces: int = MAX_REFLECTION_BOUNCES):
        self.display = display
        self.scene = scene
        self.camera = Camera(camera_position, camera_orientation, camera_up,
                             projection_distance, display.width, display.height,
                             max_reflection_bounces=max_bounces)
        logger.info("Tracing initial %dx%d view", display.width, display.height)
        self.camera.generate_rays(scene)

    def tick(self) -> bool:
        """
        Re-traces the view rays if the camera changed. Returns True if it did.
        """
        if not self.camera.has_changed:
            return False
        self.camera.regenerate_rays(self.scene)
        self.camera.has_changed = False
        return True

    def resize(self, width: int, height: int):
        """
        Changes the resolution of both views. The camera rebuilds its ray
        grid on the next tick.
        """
        self.display.resize(width, height)
        self.camera.resize(width, height)
        logger.info("Resized views to %dx%d", width, height)

    def render_camera_view(self):
        """Copies the resolved color of every hit view ray to its pixel."""
        display = self.display
        display.clear_camera_pixels(self.scene.background)
        # The grid and the buffers only disagree in size if the camera was
        # resized on its own; pixels outside the buffer are dropped.
        for i, row in enumerate(self.camera.view_rays[:display.height]):
            for j, ray in enumerate(row[:display.width]):
                if ray.intersection is not None:
                    display.put_camera_pixel(i, j, ray.intersection.color)

    def render_debug_view(self, n_rays: int = 8):
        """
        Draws a top-down schematic: sphere silhouettes, a sample of view rays
        with their shadow or reflection rays, the camera, its projection
        plane and the lights.
        """
        display = self.display
        display.clear_debug_pixels(display.debug_background)

        for prim in self.scene.primitives:
            if isinstance(prim, Sphere):
                display.draw_debug_sphere(prim.position, prim.radius, prim.color)

        self._draw_debug_view_rays(n_rays)

        projection = self.camera.projection
        display.draw_debug_sphere(self.camera.position, 0.05, gray_scale(0.0))
        display.draw_debug_line(projection.left_upper,
                                projection.left_upper + projection.right_direction,
                                gray_scale(1.0))

        for light in self.scene.lights:
            display.draw_debug_sphere(light.position, 0.05, gray_scale(1.0))

    def render_frame(self) -> DisplayFrame:
        self.tick()
        self.render_debug_view()
        self.render_camera_view()
        return self.display

    def _draw_debug_view_rays(self, n_rays: int):
        # Sample the middle row of view rays.
        rays = self.camera.view_rays[:self.display.height]
        row = rays[len(rays) // 2][:self.display.width]
        step = max(1, len(row) // n_rays - 1)
        for j in range(0, len(row), step):
            primary = row[j]
            self._draw_debug_ray(primary, self.display.debug_primary_ray_color)
            if primary.intersection is not None:
                self._draw_debug_non_viewing_rays(primary.intersection)

    def _draw_debug_non_viewing_rays(self, intersection):
        if not intersection.primitive.is_mirror:
            for shadow_ray in intersection.shadow_rays or []:
                if shadow_ray is not None:
                    self._draw_debug_ray(shadow_ray, self.display.debug_shadow_ray_color)
            return

        secondary = intersection.secondary_ray
        while secondary is not None:
            self._draw_debug_ray(secondary, self.display.debug_secondary_ray_color)
            if secondary.intersection is None:
                break
            secondary = secondary.intersection.secondary_ray

    def _draw_debug_ray(self, ray: Ray, color: Vector3):
        hit = ray.intersection
        if hit is not None and ray.distance_to(hit.position) < MAX_DEBUG_RAY_LENGTH:
            self.display.draw_debug_line(ray.position, hit.position, color)
        else:
            self.display.draw_debug_line(ray.position, ray.extended_by(OPEN_DEBUG_RAY_LENGTH),
                                         gray_scale(1.0))
