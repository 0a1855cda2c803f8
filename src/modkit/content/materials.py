import itertools
import threading

from modkit.constants import DEFAULT_MATERIAL_FILE

from .textures import Texture

_material_counter = itertools.count()
_material_counter_lock = threading.Lock()


def _next_material_id():
    with _material_counter_lock:
        return f"m_{next(_material_counter)}"


class Material:
    """A uniquely identified reference to a texture, used to paint cuboid faces.

    Identity is the generated id: two materials wrapping the same texture are
    still distinct entries in a model's texture table.

    Args:
        texture: A Texture, or a plain file name for textures that ship with
            the game and are never written by the Writer
    """

    def __init__(self, texture):
        self.id = _next_material_id()

        if isinstance(texture, Texture):
            self.texture = texture
            self.file_name = texture.file_name
        else:
            self.texture = None
            self.file_name = texture

    @property
    def has_raster(self):
        return self.texture is not None

    def serialize(self):
        return {"fileName": self.file_name}

    def __repr__(self):
        return f"Material({self.id!r}, file_name={self.file_name!r})"


DEFAULT_MATERIAL = Material(DEFAULT_MATERIAL_FILE)
