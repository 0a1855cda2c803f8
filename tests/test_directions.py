import pytest

from modkit.content.directions import DirectionList, Directions

cardinals = Directions.cardinals


@pytest.mark.parametrize(
    "name, inverse",
    [
        ("north", "south"),
        ("south", "north"),
        ("east", "west"),
        ("west", "east"),
        ("up", "down"),
        ("down", "up"),
    ],
)
def test_inverse(name, inverse):
    assert cardinals.get_direction(name).inverse().name == inverse


def test_get_direction_is_case_insensitive():
    assert cardinals.get_direction("North") is cardinals.get_direction("north")
    assert cardinals.get_direction("nowhere") is None


def test_vector_to_direction_picks_nearest():
    assert cardinals.vector_to_direction([0.9, 0.1, 0.2]).name == "east"
    assert cardinals.vector_to_direction([0, -5, 0]).name == "down"


def test_direction_list():
    north = cardinals.get_direction("north")
    east = cardinals.get_direction("east")
    directions = DirectionList([north, east, north])

    assert directions.size == 2
    assert directions.has(north)
    assert east in directions
    assert directions.has_direction("EAST")
    assert str(directions) == "north-east"

    directions.remove_direction("north")
    assert not directions.has(north)
    assert str(DirectionList()) == "none"


def test_bitmask_and_invert():
    north = cardinals.get_direction("north")
    west = cardinals.get_direction("west")
    directions = DirectionList([north, west])

    assert directions.create_bitmask(cardinals) == 0b1001
    assert str(directions.invert(cardinals)) == "east-south-up-down"


def test_clone_is_independent():
    directions = DirectionList([cardinals.get_direction("up")])
    clone = directions.clone()
    clone.add(cardinals.get_direction("down"))

    assert len(directions) == 1
    assert len(clone) == 2


def test_combinations():
    combinations = Directions.simple_block.combinations()

    assert len(combinations) == 8
    assert str(combinations[0]) == "none"
    assert str(combinations[1]) == "side"
    assert str(combinations[4]) == "front"
    assert str(combinations[7]) == "front-back-side"


def test_capitalize():
    assert Directions.capitalize("north") == "North"
    assert Directions.uncapitalize("North") == "north"
    assert cardinals.get_direction("up").uppercase_name == "Up"
