import enum


class FACE(enum.Enum):
    WEST = "west"
    EAST = "east"
    DOWN = "down"
    UP = "up"
    NORTH = "north"
    SOUTH = "south"


# Order matters: it is the order of get_materials() and of the setters that
# take one argument per face.
FACE_NAMES = [face.value for face in FACE]

BASE_TRIGGER_SHEET_ID = "base:block_events_default"
DEFAULT_STATE_LABEL = "default"
DEFAULT_NAMESPACE = "default"
DEFAULT_MATERIAL_FILE = "debug.png"

MAX_LIGHT_LEVEL = 15

# Removed and recreated by Writer.create_output_dir on every run
CLEANED_DIRECTORIES = [
    ("models", "blocks"),
    ("blocks",),
    ("block_events",),
    ("textures", "blocks"),
]

OUTPUT_DIRECTORIES = [
    (),
    ("models",),
    ("models", "blocks"),
    ("blocks",),
    ("block_events",),
    ("textures",),
    ("textures", "blocks"),
]
