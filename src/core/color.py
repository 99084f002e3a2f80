# core/color.py
from core.vector import Vector3
from core.utils import clamp

def gray_scale(gray: float) -> Vector3:
    """Creates a color from a gray value in [0, 1]."""
    return Vector3(gray, gray, gray)

def clamped(color: Vector3) -> Vector3:
    return Vector3(clamp(color.x, 0.0, 1.0),
                   clamp(color.y, 0.0, 1.0),
                   clamp(color.z, 0.0, 1.0))

def to_int_rgb(color: Vector3) -> int:
    """
    Packs a color with channels in [0, 1] into a 24-bit 0xRRGGBB integer.
    Channels are clamped first.
    """
    c = clamped(color)
    return (int(c.x * 0xFF) << 16) | (int(c.y * 0xFF) << 8) | int(c.z * 0xFF)

def from_int_rgb(c: int) -> Vector3:
    """Unpacks a 0xRRGGBB integer into a color with channels in [0, 1]."""
    return Vector3(
        (0xFF & (c >> 16)) / 0xFF,
        (0xFF & (c >> 8)) / 0xFF,
        (0xFF & c) / 0xFF
    )
