import math

from modkit.constants import MAX_LIGHT_LEVEL


class Color:
    """A named color with 0-15 channels, the same scale as block light levels."""

    def __init__(self, name, r, g, b):
        self.name = name
        self.r = r
        self.g = g
        self.b = b

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"Color({self.name!r}, {self.r}, {self.g}, {self.b})"

    @property
    def srgb(self):
        return {
            "r": self.r / MAX_LIGHT_LEVEL,
            "g": self.g / MAX_LIGHT_LEVEL,
            "b": self.b / MAX_LIGHT_LEVEL,
        }

    @property
    def srgb255(self):
        return {
            "r": math.floor(self.r / MAX_LIGHT_LEVEL * 255),
            "g": math.floor(self.g / MAX_LIGHT_LEVEL * 255),
            "b": math.floor(self.b / MAX_LIGHT_LEVEL * 255),
        }


class ColorList:
    def __init__(self, colors=None):
        self.colors = {}
        if colors:
            self.add_color(*colors)

    def __iter__(self):
        return iter(self.colors.values())

    def __len__(self):
        return len(self.colors)

    def keys(self):
        return self.colors.keys()

    def values(self):
        return self.colors.values()

    def get_color(self, name):
        return self.colors.get(name.lower())

    def get_color_at_index(self, index):
        return list(self.colors.values())[index]

    def add_color(self, *colors):
        for color in colors:
            self.colors[color.name] = color


class Colors:
    cr_colors = ColorList(
        [
            Color("white", 15, 15, 15),
            Color("red", 15, 0, 0),
            Color("orange", 13, 7, 0),
            Color("yellow", 13, 13, 0),
            Color("lime", 7, 13, 0),
            Color("green", 0, 15, 0),
            Color("spring_green", 0, 13, 7),
            Color("cyan", 0, 13, 13),
            Color("azure", 0, 7, 13),
            Color("blue", 0, 0, 15),
            Color("violet", 7, 0, 13),
            Color("magenta", 13, 0, 13),
            Color("rose", 13, 0, 7),
        ]
    )
