# renderer/display.py
import math
import numpy as np
from numba import njit
from PIL import Image
from core.vector import Vector3
from core.color import gray_scale, to_int_rgb

# Orthographic window of the top-down debug view, in world x/y.
DEBUG_X_MIN = -5.0
DEBUG_X_MAX = 5.0
DEBUG_Y_MIN = 0.0
DEBUG_Y_MAX = 10.0

@njit
def unpack_rgb(packed, out):
    """
    Unpacks an (H, W) array of 0xRRGGBB integers into an (H, W, 3) uint8 array.
    """
    h, w = packed.shape
    for i in range(h):
        for j in range(w):
            c = packed[i, j]
            out[i, j, 0] = (c >> 16) & 0xFF
            out[i, j, 1] = (c >> 8) & 0xFF
            out[i, j, 2] = c & 0xFF

def to_rgb_array(packed: np.ndarray) -> np.ndarray:
    out = np.empty((packed.shape[0], packed.shape[1], 3), dtype=np.uint8)
    unpack_rgb(packed, out)
    return out

class DisplayFrame:
    """
    Pixel buffers handed to the presentation layer: the camera view and a
    top-down debug view, both (height, width) arrays of packed 0xRRGGBB
    integers.
    """
    def __init__(self, width: int, height: int,
                 debug_background: Vector3 = gray_scale(0.3)):
        self.resize(width, height)
        self.debug_background = to_int_rgb(debug_background)
        self.debug_primary_ray_color = gray_scale(0.7)
        self.debug_secondary_ray_color = gray_scale(0.7)
        self.debug_shadow_ray_color = gray_scale(0.4)

    def resize(self, width: int, height: int):
        """Reallocates both buffers at the new resolution, cleared to black."""
        if width < 1 or height < 1:
            raise ValueError(f"Display must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.camera_pixels = np.zeros((height, width), dtype=np.int32)
        self.debug_pixels = np.zeros((height, width), dtype=np.int32)

    # World to debug-view pixel mapping. Rows grow downwards, opposite to y.

    def to_debug_column(self, x: float) -> int:
        return int(self.width * (x - DEBUG_X_MIN) / (DEBUG_X_MAX - DEBUG_X_MIN))

    def to_debug_row(self, y: float) -> int:
        return self.height - int(self.height * (y - DEBUG_Y_MIN) / (DEBUG_Y_MAX - DEBUG_Y_MIN))

    def in_bounds(self, i: int, j: int) -> bool:
        return 0 <= i < self.height and 0 <= j < self.width

    def clear_camera_pixels(self, c: int):
        self.camera_pixels.fill(c)

    def clear_debug_pixels(self, c: int):
        self.debug_pixels.fill(c)

    def put_camera_pixel(self, i: int, j: int, c: int):
        self.camera_pixels[i, j] = c

    def put_debug_pixel(self, i: int, j: int, c: int):
        if self.in_bounds(i, j):
            self.debug_pixels[i, j] = c

    def draw_debug_sphere(self, center: Vector3, radius: float, color: Vector3):
        """
        Draws the top-down silhouette of a sphere as a circle, only when the
        whole circle fits in the debug window.
        """
        if not (self.to_debug_row(center.y + radius) >= 0
                and self.to_debug_row(center.y - radius) < self.height
                and self.to_debug_column(center.x - radius) >= 0
                and self.to_debug_column(center.x + radius) < self.width):
            return

        c = to_int_rgb(color)
        for degree in range(360):
            a = math.radians(degree)
            x = center.x + radius * math.cos(a)
            y = center.y + radius * math.sin(a)
            self.put_debug_pixel(self.to_debug_row(y), self.to_debug_column(x), c)

    def draw_debug_line(self, p1: Vector3, p2: Vector3, color: Vector3):
        """
        Draws the x/y projection of a line segment by stepping one pixel at a
        time along its major axis; stops once the line leaves the view.
        """
        c = to_int_rgb(color)
        j1, j2 = self.to_debug_column(p1.x), self.to_debug_column(p2.x)
        i1, i2 = self.to_debug_row(p1.y), self.to_debug_row(p2.y)
        dx = j2 - j1
        dy = i2 - i1
        steps = max(abs(dx), abs(dy))
        if steps == 0:
            return

        dx /= steps
        dy /= steps
        i, j = float(i1), float(j1)
        for _ in range(steps):
            row, col = math.floor(i), math.floor(j)
            if not self.in_bounds(row, col):
                break
            self.debug_pixels[row, col] = c
            i += dy
            j += dx

    def camera_rgb(self) -> np.ndarray:
        return to_rgb_array(self.camera_pixels)

    def debug_rgb(self) -> np.ndarray:
        return to_rgb_array(self.debug_pixels)

    def save_camera_view(self, path: str):
        Image.fromarray(self.camera_rgb()).save(path)

    def save_debug_view(self, path: str):
        Image.fromarray(self.debug_rgb()).save(path)
