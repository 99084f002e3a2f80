# core/utils.py
import math
from core.vector import Vector3

def clamp(v: float, lo: float, hi: float) -> float:
    """
    Limits a value between lo and hi.
    """
    return max(lo, min(v, hi))

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def polar_to_cartesian(r: float, theta: float, phi: float) -> Vector3:
    """
    Converts polar coordinates to a cartesian vector.

    theta is measured from the +z pole, phi is the azimuth measured
    from +y towards +x.
    """
    sin_theta = math.sin(theta)
    return Vector3(
        r * sin_theta * math.sin(phi),
        r * sin_theta * math.cos(phi),
        r * math.cos(theta)
    )

def cartesian_to_polar_theta(p: Vector3) -> float:
    """
    Polar angle of p, measured from the +z pole.
    """
    return math.acos(clamp(p.z / p.length(), -1.0, 1.0))

def cartesian_to_polar_phi(p: Vector3) -> float:
    """
    Azimuth of p; zero when p lies on the pole.
    """
    if p.x == 0 and p.y == 0:
        return 0.0
    return math.atan2(p.x, p.y)
