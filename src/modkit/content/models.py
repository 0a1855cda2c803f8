"""Block models: ordered collections of cuboids forming one visual variant.

Transformations:
- translate / rotate / scale act on every cuboid's box
- rotate_centered / scale_centered pivot around the block centre (8, 8, 8)
- Rotating a cuboid re-bounds it, the result is always axis-aligned, so
  only multiples of 90 degrees keep the shape intact
"""

from typing import List

from .cuboids import ModelCuboid
from .geometry import rotation_matrix, scale_matrix, translation_matrix
from .materials import Material

BLOCK_CENTER = (8, 8, 8)


class BlockModel:
    def __init__(self, name):
        self.name = name
        self.cuboids: List[ModelCuboid] = []

    def set_ambient_occlusion_enabled(self, enable_ambient_occlusion):
        for cuboid in self.cuboids:
            cuboid.set_ambient_occlusion_enabled(enable_ambient_occlusion)
        return self

    def add_cuboid(self, cuboid):
        self.cuboids.append(cuboid)
        return self

    def add_cuboids(self, *cuboids):
        self.cuboids.extend(cuboids)
        return self

    def set_all_materials(self, material):
        for cuboid in self.cuboids:
            cuboid.set_all_materials(material)
        return self

    def get_all_materials(self) -> List[Material]:
        """Every distinct material used by the cuboids, in first-seen order."""
        materials = {}
        for cuboid in self.cuboids:
            for material in cuboid.get_materials():
                materials.setdefault(material.id, material)
        return list(materials.values())

    def append(self, other):
        for cuboid in other.cuboids:
            self.add_cuboid(cuboid.clone())
        return self

    def clone(self, name=None):
        model = BlockModel(self.name if name is None else name)
        for cuboid in self.cuboids:
            model.add_cuboid(cuboid.clone())
        return model

    def apply_matrix_transform(self, matrix):
        for cuboid in self.cuboids:
            cuboid.apply_matrix_transform(matrix)
        return self

    def translate(self, x, y, z):
        return self.apply_matrix_transform(translation_matrix(x, y, z))

    def rotate(self, x, y, z):
        """Rotate by XYZ Euler angles in degrees around the origin."""
        return self.apply_matrix_transform(rotation_matrix(x, y, z))

    def scale(self, x, y, z):
        return self.apply_matrix_transform(scale_matrix(x, y, z))

    def rotate_centered(self, x, y, z):
        cx, cy, cz = BLOCK_CENTER
        return self.translate(-cx, -cy, -cz).rotate(x, y, z).translate(cx, cy, cz)

    def scale_centered(self, x, y, z):
        cx, cy, cz = BLOCK_CENTER
        return self.translate(-cx, -cy, -cz).scale(x, y, z).translate(cx, cy, cz)

    def serialize(self):
        textures = {
            material.id: material.serialize() for material in self.get_all_materials()
        }

        return {
            "textures": textures,
            "cuboids": [
                cuboid.serialize()
                for cuboid in self.cuboids
                if cuboid.visible_faces > 0
            ],
        }

    def __repr__(self):
        return f"BlockModel({self.name!r}, cuboids={len(self.cuboids)})"


class ToggleableModel:
    """Builds models out of a base model plus any number of named parts.

    Typical use is a connecting block: the base is the post and each
    category is the arm towards one direction.
    """

    def __init__(self):
        self.models = {}
        self.base_model = None

    def set_base_model(self, model):
        self.base_model = model

    def set_model(self, category, model):
        self.models[category] = model

    def get_model(self, category):
        return self.models.get(category)

    def create(self, categories, name):
        if self.base_model is None:
            model = BlockModel(name)
        else:
            model = self.base_model.clone(name)

        for category in categories:
            model.append(self.models[str(category)])

        return model
