"""Named unit-vector directions and sets of them.

Minecraft-like coordinate convention:
- +X = east (right)
- +Y = up
- +Z = north (front)
"""

import numpy as np


class Direction:
    def __init__(self, name, x, y, z):
        self.direction_map = None
        self.name = name
        self.vector = np.array([x, y, z], dtype=float)

    def __iter__(self):
        return iter(self.vector.tolist())

    def set_direction_map(self, direction_map):
        self.direction_map = direction_map

    @property
    def x(self):
        return self.vector[0]

    @property
    def y(self):
        return self.vector[1]

    @property
    def z(self):
        return self.vector[2]

    @property
    def uppercase_name(self):
        return self.name[0].upper() + self.name[1:]

    def matches(self, name):
        return self.name.lower() == name.lower()

    def inverse(self):
        return self.direction_map.inverse(self)

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"Direction({self.name!r}, {self.vector.tolist()})"


class DirectionList:
    """An insertion-ordered set of directions."""

    def __init__(self, directions=()):
        self.directions = {}
        for direction in directions:
            self.add(direction)

    def __iter__(self):
        return iter(list(self.directions))

    def __len__(self):
        return len(self.directions)

    def add(self, direction):
        self.directions[direction] = None

    def remove(self, direction):
        self.directions.pop(direction, None)

    def has(self, direction):
        return direction in self.directions

    __contains__ = has

    @property
    def size(self):
        return len(self.directions)

    def has_direction(self, name):
        return any(direction.matches(name) for direction in self.directions)

    def remove_direction(self, name):
        for direction in list(self.directions):
            if direction.matches(name):
                self.remove(direction)

    def create_bitmask(self, direction_map):
        bitmask = 0
        for i, direction in enumerate(direction_map.values()):
            if direction in self.directions:
                bitmask |= 1 << i
        return bitmask

    def invert(self, direction_map):
        return DirectionList(
            direction for direction in direction_map if direction not in self.directions
        )

    def clone(self):
        return DirectionList(self)

    def __str__(self):
        if not self.directions:
            return "none"
        return "-".join(direction.name for direction in self.directions)


class DirectionMap:
    def __init__(self, directions=()):
        self.directions = {}
        for direction in directions:
            self.add_direction(direction)

    def __iter__(self):
        return iter(self.directions.values())

    def __len__(self):
        return len(self.directions)

    def add_direction(self, direction):
        direction.set_direction_map(self)
        self.directions[direction.name] = direction

    def get_direction(self, name):
        return self.directions.get(name.lower())

    def values(self):
        return self.directions.values()

    def keys(self):
        return self.directions.keys()

    def inverse(self, direction):
        return self.vector_to_direction(direction.vector * -1)

    def vector_to_direction(self, vector):
        """Return the direction whose normalized vector is closest to ``vector``."""
        target = _normalize(np.asarray(vector, dtype=float))

        lowest_distance = float("inf")
        lowest_distance_direction = None
        for direction in self.directions.values():
            distance = np.linalg.norm(_normalize(direction.vector) - target)
            if distance < lowest_distance:
                lowest_distance = distance
                lowest_distance_direction = direction

        return lowest_distance_direction

    def combinations(self):
        """Every subset of the map's directions, in binary counting order.

        The first direction of the map is the most significant bit, so the
        empty list comes first and the full list comes last.
        """
        keys = list(self.directions)
        combinations = []
        for i in range(2 ** len(keys)):
            bits = format(i, "b").zfill(len(keys))
            combinations.append(
                DirectionList(
                    self.directions[key] for key, bit in zip(keys, bits) if bit == "1"
                )
            )
        return combinations


def _normalize(vector):
    length = np.linalg.norm(vector)
    return vector / (length or 1)


class Directions:
    @staticmethod
    def capitalize(direction):
        return direction[0].upper() + direction[1:]

    @staticmethod
    def uncapitalize(direction):
        return direction.lower()

    cardinals = DirectionMap(
        [
            Direction("north", 0, 0, 1),
            Direction("east", 1, 0, 0),
            Direction("south", 0, 0, -1),
            Direction("west", -1, 0, 0),
            Direction("up", 0, 1, 0),
            Direction("down", 0, -1, 0),
        ]
    )
    relative = DirectionMap(
        [
            Direction("front", 0, 0, 1),
            Direction("right", 1, 0, 0),
            Direction("back", 0, 0, -1),
            Direction("left", -1, 0, 0),
            Direction("top", 0, 1, 0),
            Direction("bottom", 0, -1, 0),
        ]
    )
    simple_block = DirectionMap(
        [
            Direction("front", 0, 0, 1),
            Direction("back", 0, 0, -1),
            Direction("side", 0, 0, 0),
        ]
    )
