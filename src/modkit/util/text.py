import re

UNSAFE_NAME_CHARACTERS = re.compile(r"[^A-Za-z0-9_\-]")


def to_file_name(id: str) -> str:
    """Replace every character that is not safe in a file name with an underscore."""
    return UNSAFE_NAME_CHARACTERS.sub("_", id)


def parse_state_string(text: str) -> dict:
    """Split a canonical state string (``key=value,key=value``) into a dict.

    The empty string is the default state and parses to an empty dict.
    """
    if not text:
        return {}

    result = {}
    for pair in text.split(","):
        key, _, value = pair.partition("=")
        result[key] = value
    return result
