"""Raster textures backed by Pillow images."""

from io import BytesIO

import numpy as np
import PIL.Image


class Texture:
    """A named raster image that is written to ``textures/blocks/<name>.png``."""

    def __init__(self, name, image):
        self.name = name
        self.image = image.convert("RGBA")

    @classmethod
    def from_file(cls, name, path):
        with PIL.Image.open(path) as image:
            return cls(name, image)

    @property
    def file_name(self):
        return f"{self.name}.png"

    @property
    def size(self):
        return self.image.size

    def serialize(self):
        buffer = BytesIO()
        self.image.save(buffer, format="PNG")
        return buffer.getvalue()

    def __repr__(self):
        return f"Texture({self.name!r}, size={self.image.size})"


class ColorizedTexture:
    """Builds tinted textures by interpolating between a white and a black variant.

    Each channel of the output is ``(white - black) * coefficient + black``, so
    a coefficient of 1 reproduces the white variant and 0 the black one.
    """

    def __init__(self, white_texture, black_texture):
        if white_texture.size != black_texture.size:
            raise ValueError(
                f"White and black variants must have the same size, "
                f"got {white_texture.size} and {black_texture.size}"
            )

        self.white_texture = white_texture.convert("RGBA")
        self.black_texture = black_texture.convert("RGBA")

    @classmethod
    def from_files(cls, white_source, black_source):
        with PIL.Image.open(white_source) as white, PIL.Image.open(
            black_source
        ) as black:
            return cls(white, black)

    def create_texture(self, name, r, g, b, a=0.5):
        white = np.asarray(self.white_texture, dtype=float)
        black = np.asarray(self.black_texture, dtype=float)
        coefficients = np.array([r, g, b, a], dtype=float)

        data = (white - black) * coefficients + black
        data = np.clip(np.rint(data), 0, 255).astype(np.uint8)

        return Texture(name, PIL.Image.fromarray(data))

    def create_texture_for_color(self, name, color, a=0.5):
        srgb = color.srgb
        return self.create_texture(name, srgb["r"], srgb["g"], srgb["b"], a)
