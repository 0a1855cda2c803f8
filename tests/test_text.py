import pytest

from modkit.util.text import parse_state_string, to_file_name


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", {}),
        ("lit=true", {"lit": "true"}),
        ("facing=north,lit=false", {"facing": "north", "lit": "false"}),
        ("mode=", {"mode": ""}),
    ],
)
def test_parse_state_string(text, expected):
    assert parse_state_string(text) == expected


def test_to_file_name():
    assert to_file_name("ns:glass pane") == "ns_glass_pane"
    assert to_file_name("Stone_2-b") == "Stone_2-b"
