"""Box and affine transform helpers for cuboid models.

Coordinates are in local block space, where one block spans 0-16 on every
axis and the block centre is (8, 8, 8).

Rotations:
- Angles are given in degrees
- Euler rotations use XYZ order, the combined matrix is Rx @ Ry @ Rz
- Positive angles rotate counter-clockwise when looking down the axis
  towards the origin
"""

import itertools
from math import cos, radians, sin

import numpy as np

PRECISION = 9


class Box:
    """An axis-aligned box given by its minimum and maximum corners."""

    def __init__(self, min=(0, 0, 0), max=(16, 16, 16)):
        self.min = np.array(min, dtype=float)
        self.max = np.array(max, dtype=float)

    def apply_matrix(self, matrix):
        """Transform every corner by a 4x4 matrix and re-bound the result."""
        corners = np.array(
            [
                [x, y, z, 1.0]
                for x, y, z in itertools.product(
                    (self.min[0], self.max[0]),
                    (self.min[1], self.max[1]),
                    (self.min[2], self.max[2]),
                )
            ]
        )
        transformed = (np.asarray(matrix, dtype=float) @ corners.T).T[:, :3]

        # float noise from trigonometry would break the 0/16 culling checks
        transformed = np.round(transformed, PRECISION)
        self.min = transformed.min(axis=0)
        self.max = transformed.max(axis=0)
        return self

    def clone(self):
        return Box(self.min.copy(), self.max.copy())

    def to_list(self):
        return [to_number(v) for v in (*self.min, *self.max)]

    def __repr__(self):
        return f"Box(min={self.min.tolist()}, max={self.max.tolist()})"


def to_number(value):
    """Convert a numpy scalar to a plain JSON number, int when integral."""
    value = round(float(value), PRECISION)
    if value.is_integer():
        return int(value)
    return value


def translation_matrix(x, y, z):
    matrix = np.identity(4)
    matrix[:3, 3] = [x, y, z]
    return matrix


def scale_matrix(x, y, z):
    return np.diag([x, y, z, 1.0])


def create_rotation_matrix(axis, angle_degrees):
    """Create a 4x4 rotation matrix for the given axis and angle."""
    angle = radians(angle_degrees)
    c = cos(angle)
    s = sin(angle)

    if axis == "x":
        rotation = np.array([[1, 0, 0], [0, c, -s], [0, s, c]])
    elif axis == "y":
        rotation = np.array([[c, 0, s], [0, 1, 0], [-s, 0, c]])
    elif axis == "z":
        rotation = np.array([[c, -s, 0], [s, c, 0], [0, 0, 1]])
    else:
        raise ValueError(f"Unknown rotation axis {axis!r}")

    matrix = np.identity(4)
    matrix[:3, :3] = rotation
    return matrix


def rotation_matrix(x, y, z):
    """Create a rotation matrix from XYZ Euler angles in degrees."""
    return (
        create_rotation_matrix("x", x)
        @ create_rotation_matrix("y", y)
        @ create_rotation_matrix("z", z)
    )
