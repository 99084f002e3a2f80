# materials/presets.py
from core.vector import Vector3
from materials.light import Light

class ColorPresets:
    """Common color presets for primitives and lights."""

    WHITE = Vector3(1.0, 1.0, 1.0)
    BLACK = Vector3(0.0, 0.0, 0.0)
    RED = Vector3(1.0, 0.0, 0.0)
    GREEN = Vector3(0.0, 1.0, 0.0)
    BLUE = Vector3(0.0, 0.0, 1.0)
    YELLOW = Vector3(1.0, 1.0, 0.0)
    PURPLE = Vector3(1.0, 0.0, 1.0)
    CYAN = Vector3(0.0, 1.0, 1.0)
    ORANGE = Vector3(1.0, 0.5, 0.0)

class LightPresets:
    """Predefined point lights."""

    @staticmethod
    def white_light(position: Vector3, intensity: float = 1.0) -> Light:
        return Light(position, ColorPresets.WHITE * intensity)

