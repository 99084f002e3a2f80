# main.py
import argparse
import logging
from typing import Optional
import pygame
from core.vector import Vector3
from geometry.world import Scene
from geometry.sphere import Sphere
from geometry.plane import Plane
from materials.presets import ColorPresets, LightPresets
from camera.camera import MAX_REFLECTION_BOUNCES
from renderer.display import DisplayFrame
from renderer.raytracer import RayTracer

logger = logging.getLogger("raytracer")

CAMERA_POSITION = Vector3(0, 1, 0)
CAMERA_ORIENTATION = Vector3(0, 1, 0)
CAMERA_UP = Vector3(0, 0, 1)
PROJECTION_DISTANCE = 0.8

def create_world() -> Scene:
    """The fixed demo scene: a checkered floor, colored and mirror spheres, two lights."""
    c = ColorPresets
    primitives = [
        Plane(Vector3(25, 25, -1), Vector3(0, 0, 1), c.WHITE, has_checkers_texture=True),
        Sphere(Vector3(-3, 5, 0), 0.8, c.RED),
        Sphere(Vector3(0, 5, 0), 0.8, c.GREEN),
        Sphere(Vector3(3, 5, 0), 0.8, c.BLUE),
        Sphere(Vector3(-2, 7, 2), 0.8, c.YELLOW),
        Sphere(Vector3(0, 9, 4), 0.8, c.PURPLE),
        Sphere(Vector3(2, 7, 2), 0.8, c.CYAN),
        Sphere(Vector3(0, 7, 1.5), 0.8, c.WHITE, is_mirror=True),
        Sphere(Vector3(-4, 7, 2), 0.8, c.ORANGE, is_mirror=True),
        Sphere(Vector3(4, 7, 2), 0.8, c.ORANGE, is_mirror=True),
    ]
    lights = [
        LightPresets.white_light(Vector3(-1.5, 6, 4)),
        LightPresets.white_light(Vector3(1.5, 6, 4)),
    ]
    return Scene(primitives, lights, background=c.BLACK)

def create_tracer(width: int, height: int, max_bounces: int = MAX_REFLECTION_BOUNCES,
                  fov: Optional[float] = None) -> RayTracer:
    display = DisplayFrame(width, height)
    tracer = RayTracer(display, create_world(), CAMERA_POSITION, CAMERA_ORIENTATION,
                       CAMERA_UP, PROJECTION_DISTANCE, max_bounces=max_bounces)
    if fov is not None:
        tracer.camera.change_fov(fov)
        tracer.tick()
    return tracer

class Application:
    """
    pygame window showing the debug view (left) next to the camera view (right).
    Arrow keys move, the mouse rotates, the wheel zooms, F12 saves a screenshot.
    """
    def __init__(self, tracer: RayTracer, scale: int = 4):
        pygame.init()
        self.tracer = tracer
        self.scale = scale
        self.view_width = tracer.display.width * scale
        self.view_height = tracer.display.height * scale
        self.screen = pygame.display.set_mode((self.view_width * 2, self.view_height))
        pygame.display.set_caption("Ray Tracer")
        pygame.event.set_grab(True)
        self.clock = pygame.time.Clock()
        self.first_mouse_move = True
        self.screenshots = 0

    def handle_events(self) -> bool:
        """Processes queued events. Returns False when the app should quit."""
        camera = self.tracer.camera
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_F12:
                    self.save_screenshot()
            elif event.type == pygame.MOUSEMOTION:
                # The first event carries the jump to the initial cursor position.
                if self.first_mouse_move:
                    self.first_mouse_move = False
                    continue
                dx, dy = event.rel
                camera.rotate_around_x(dy)
                camera.rotate_around_z(dx)
            elif event.type == pygame.MOUSEWHEEL:
                camera.zoom(-event.y)
        return True

    def handle_keys(self, dt: float):
        keys = pygame.key.get_pressed()
        camera = self.tracer.camera
        if keys[pygame.K_RIGHT]:
            camera.move_right(dt)
        elif keys[pygame.K_LEFT]:
            camera.move_left(dt)
        elif keys[pygame.K_UP]:
            camera.move_forward(dt)
        elif keys[pygame.K_DOWN]:
            camera.move_backward(dt)

    def draw(self):
        display = self.tracer.render_frame()
        # surfarray expects (width, height, 3)
        debug = pygame.surfarray.make_surface(display.debug_rgb().swapaxes(0, 1))
        cam = pygame.surfarray.make_surface(display.camera_rgb().swapaxes(0, 1))
        size = (self.view_width, self.view_height)
        self.screen.blit(pygame.transform.scale(debug, size), (0, 0))
        self.screen.blit(pygame.transform.scale(cam, size), (self.view_width, 0))
        pygame.display.flip()

    def save_screenshot(self):
        path = f"screenshot_{self.screenshots:03d}.png"
        self.tracer.display.save_camera_view(path)
        self.screenshots += 1
        logger.info("Saved %s", path)

    def run(self):
        try:
            running = True
            while running:
                dt = self.clock.tick(30) / 1000.0
                running = self.handle_events()
                self.handle_keys(dt)
                self.draw()
        finally:
            print("Cleaning up...")
            pygame.quit()

def render_to_file(tracer: RayTracer, output: str, debug_output: Optional[str] = None):
    display = tracer.render_frame()
    display.save_camera_view(output)
    logger.info("Wrote camera view to %s", output)
    if debug_output:
        display.save_debug_view(debug_output)
        logger.info("Wrote debug view to %s", debug_output)

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive Whitted-style ray tracer")
    parser.add_argument("--width", type=int, default=128, help="horizontal resolution of each view")
    parser.add_argument("--height", type=int, default=128, help="vertical resolution of each view")
    parser.add_argument("--scale", type=int, default=4, help="window pixels per traced pixel")
    parser.add_argument("--bounces", type=int, default=MAX_REFLECTION_BOUNCES,
                        help="maximum number of mirror reflections per ray")
    parser.add_argument("--fov", type=float, default=None, help="initial field of view in degrees")
    parser.add_argument("--output", default=None, help="render one frame to this image file and exit")
    parser.add_argument("--debug-output", default=None, help="also save the debug view (with --output)")
    parser.add_argument("--log-level", default="INFO", help="logging level")
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO),
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    print("\n=== Initializing Ray Tracer ===")
    print(f"Resolution: {args.width}x{args.height}")
    print(f"Max bounces: {args.bounces}")

    tracer = create_tracer(args.width, args.height, args.bounces, args.fov)
    if args.output:
        render_to_file(tracer, args.output, args.debug_output)
        return

    app = Application(tracer, scale=args.scale)
    try:
        app.run()
    except Exception:
        logger.exception("Error during execution")
        raise

if __name__ == "__main__":
    main()
