from core.vector import Vector3

class Texture:
    """Base class for textures sampled at integer tile coordinates."""
    def sample(self, u: int, v: int) -> Vector3:
        raise NotImplementedError("sample() must be implemented by texture subclasses.")

class CheckerTexture(Texture):
    """
    A checker pattern: even tiles get color1, odd tiles get color2.
    """
    def __init__(self, color1: Vector3, color2: Vector3):
        self.color1 = color1
        self.color2 = color2

    def sample(self, u: int, v: int) -> Vector3:
        is_even = (u + v) % 2 == 0
        return self.color1 if is_even else self.color2
