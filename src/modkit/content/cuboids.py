"""Cuboids: the axis-aligned boxes that block models are built from.

Face naming:
- Each cuboid has six faces: west (-X), east (+X), down (-Y), up (+Y),
  south (-Z) and north (+Z)
- In serialized output the faces are keyed by local axis instead of compass
  name (localNegX, localPosY, ...)

UV Coordinates:
- Origin (0,0) is at top-left of texture, (16,16) is bottom-right
- UVs are derived from the box bounds so a texture maps 1:1 onto block space
- V increases downward, which is why most V values are ``16 - y``

Culling:
- A face is marked cullable when it lies on the boundary of the block
  (min == 0 or max == 16 on its axis), so the engine can skip it when the
  neighbouring block is opaque
"""

from modkit.constants import FACE, FACE_NAMES

from .geometry import Box
from .materials import DEFAULT_MATERIAL


def _face_name(face):
    if isinstance(face, FACE):
        return face.value

    name = getattr(face, "name", face)
    if name not in FACE_NAMES:
        raise ValueError(f"Unknown cuboid face {name!r}, expected one of {FACE_NAMES}")
    return name


class ModelCuboid:
    def __init__(self, box):
        self.box = box
        self.ambient_occlusion = False
        self.materials = {face: DEFAULT_MATERIAL for face in FACE_NAMES}
        self.visible = {face: True for face in FACE_NAMES}

    @classmethod
    def from_bounds(cls, x1, y1, z1, x2, y2, z2):
        return cls(Box((x1, y1, z1), (x2, y2, z2)))

    def set_ambient_occlusion_enabled(self, ambient_occlusion_enabled):
        self.ambient_occlusion = ambient_occlusion_enabled
        return self

    def set_all_materials(self, material):
        for face in FACE_NAMES:
            self.materials[face] = material
        return self

    def set_individual_materials(self, west, east, down, up, north, south):
        self.materials = {
            "west": west,
            "east": east,
            "down": down,
            "up": up,
            "north": north,
            "south": south,
        }
        return self

    def set_face_material(self, face, material):
        """Set the material of one face, given a Direction or a face name."""
        self.materials[_face_name(face)] = material
        return self

    def set_west_material(self, material):
        return self.set_face_material("west", material)

    def set_east_material(self, material):
        return self.set_face_material("east", material)

    def set_down_material(self, material):
        return self.set_face_material("down", material)

    def set_up_material(self, material):
        return self.set_face_material("up", material)

    def set_north_material(self, material):
        return self.set_face_material("north", material)

    def set_south_material(self, material):
        return self.set_face_material("south", material)

    def get_materials(self):
        return [self.materials[face] for face in FACE_NAMES]

    def set_all_visible(self, visible):
        for face in FACE_NAMES:
            self.visible[face] = visible
        return self

    def set_individual_visible(self, west, east, down, up, north, south):
        self.visible = {
            "west": west,
            "east": east,
            "down": down,
            "up": up,
            "north": north,
            "south": south,
        }
        return self

    def set_face_visible(self, face, visible):
        self.visible[_face_name(face)] = visible
        return self

    def set_west_visible(self, visible):
        return self.set_face_visible("west", visible)

    def set_east_visible(self, visible):
        return self.set_face_visible("east", visible)

    def set_down_visible(self, visible):
        return self.set_face_visible("down", visible)

    def set_up_visible(self, visible):
        return self.set_face_visible("up", visible)

    def set_north_visible(self, visible):
        return self.set_face_visible("north", visible)

    def set_south_visible(self, visible):
        return self.set_face_visible("south", visible)

    @property
    def visible_faces(self):
        return sum(1 for face in FACE_NAMES if self.visible[face])

    def apply_matrix_transform(self, matrix):
        self.box.apply_matrix(matrix)
        return self

    def clone(self):
        cuboid = ModelCuboid(self.box.clone())
        cuboid.set_ambient_occlusion_enabled(self.ambient_occlusion)
        cuboid.materials.update(self.materials)
        cuboid.visible.update(self.visible)
        return cuboid

    def _serialize_face(self, face, uv, cull_face):
        if not self.visible[face]:
            return None

        return {
            "uv": uv,
            "ambientocclusion": self.ambient_occlusion,
            "cullFace": cull_face,
            "texture": self.materials[face].id,
        }

    def serialize(self):
        min_x, min_y, min_z, max_x, max_y, max_z = self.box.to_list()

        faces = {
            "localNegX": self._serialize_face(
                "west", [min_z, 16 - max_y, max_z, 16 - min_y], min_x == 0
            ),
            "localNegY": self._serialize_face(
                "down", [16 - min_x, max_z, 16 - max_x, min_z], min_y == 0
            ),
            "localNegZ": self._serialize_face(
                "south",
                [16 - min_x, 16 - max_y, 16 - max_x, 16 - min_y],
                min_z == 0,
            ),
            "localPosX": self._serialize_face(
                "east",
                [16 - max_z, 16 - max_y, 16 - min_z, 16 - min_y],
                max_x == 16,
            ),
            "localPosY": self._serialize_face(
                "up",
                [16 - min_x, 16 - min_z, 16 - max_x, 16 - max_z],
                max_y == 16,
            ),
            "localPosZ": self._serialize_face(
                "north", [min_x, 16 - max_y, max_x, 16 - min_y], max_z == 16
            ),
        }

        return {
            "localBounds": [min_x, min_y, min_z, max_x, max_y, max_z],
            # invisible faces are left out entirely rather than written as null
            "faces": {key: face for key, face in faces.items() if face is not None},
        }

    def __repr__(self):
        return f"ModelCuboid({self.box!r})"


class FrontBackCuboid:
    """A cuboid whose materials follow the direction it is facing.

    The front material lands on the face pointing in the requested direction,
    the back material on the opposite face, and the four side materials are
    rotated to match.
    """

    def __init__(
        self,
        cuboid,
        front_material,
        back_material,
        side_material_up,
        side_material_right,
        side_material_down,
        side_material_left,
    ):
        self.cuboid = cuboid
        self.front_material = front_material
        self.back_material = back_material
        self.side_material_up = side_material_up
        self.side_material_right = side_material_right
        self.side_material_down = side_material_down
        self.side_material_left = side_material_left

    def get_for_direction(self, direction):
        """Return a clone of the cuboid re-materialed to face a cardinal direction."""
        cuboid = self.cuboid.clone()

        if direction.matches("up"):
            cuboid.set_all_materials(self.side_material_up)
        if direction.matches("down"):
            cuboid.set_all_materials(self.side_material_down)

        if direction.matches("east"):
            cuboid.set_up_material(self.side_material_left)
            cuboid.set_down_material(self.side_material_left)
            cuboid.set_north_material(self.side_material_right)
            cuboid.set_south_material(self.side_material_left)
        if direction.matches("west"):
            cuboid.set_up_material(self.side_material_right)
            cuboid.set_down_material(self.side_material_right)
            cuboid.set_north_material(self.side_material_left)
            cuboid.set_south_material(self.side_material_right)
        if direction.matches("north"):
            cuboid.set_up_material(self.side_material_up)
            cuboid.set_down_material(self.side_material_down)
            cuboid.set_east_material(self.side_material_left)
            cuboid.set_west_material(self.side_material_right)
        if direction.matches("south"):
            cuboid.set_up_material(self.side_material_down)
            cuboid.set_down_material(self.side_material_up)
            cuboid.set_east_material(self.side_material_right)
            cuboid.set_west_material(self.side_material_left)

        cuboid.set_face_material(direction, self.front_material)
        cuboid.set_face_material(direction.inverse(), self.back_material)

        return cuboid
