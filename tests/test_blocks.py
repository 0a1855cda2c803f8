import pydantic
import pytest

from modkit.content.blocks import BlockStateSettings, DuplicateStateError
from modkit.content.cuboids import ModelCuboid
from modkit.content.mod import Mod
from modkit.content.models import BlockModel
from modkit.content.triggers import TriggerSheet
from modkit.writer import Writer


@pytest.fixture
def mod(tmp_path):
    return Mod("test", Writer(tmp_path))


@pytest.fixture
def model():
    return BlockModel("cube").add_cuboid(ModelCuboid.from_bounds(0, 0, 0, 16, 16, 16))


def test_block_without_state_keys_serializes_default(mod, model):
    block = mod.create_block("stone")
    block.create_block_state(model)

    output = block.serialize()

    assert output["stringId"] == "test:stone"
    assert output["defaultParams"] == {}
    assert list(output["blockStates"]) == ["default"]


def test_block_with_state_keys_uses_state_strings(mod, model):
    block = mod.create_block("lamp")
    block.default_state.add("lit", "false").add("facing", "north")
    block.create_block_state(model)
    block.create_block_state(model, state={"lit": "true"})

    output = block.serialize()

    assert output["defaultParams"] == {"lit": "false", "facing": "north"}
    assert list(output["blockStates"]) == [
        "lit=false,facing=north",
        "lit=true,facing=north",
    ]


def test_duplicate_state_strings_are_rejected(mod, model):
    block = mod.create_block("lamp")
    block.default_state.add("lit", "false")
    block.create_block_state(model)
    block.create_block_state(model)

    assert len(block.states) == 2
    with pytest.raises(DuplicateStateError, match="lit=false"):
        block.serialize()


def test_state_serialization_defaults(mod, model):
    state = mod.create_block("stone").create_block_state(model)

    assert state.serialize() == {
        "modelName": "model_test_cube",
        "isOpaque": True,
        "isTransparent": False,
        "lightAttenuation": 15,
        "generateSlabs": False,
        "lightLevelRed": 0,
        "lightLevelGreen": 0,
        "lightLevelBlue": 0,
        "catalogHidden": False,
    }


def test_state_serialization_with_settings(mod, model):
    sheet = TriggerSheet("lamp_events")
    state = mod.create_block("lamp").create_block_state(
        model,
        {"opaque": False, "light_level_red": 12, "trigger_sheet": sheet},
    )

    output = state.serialize()

    assert output["isOpaque"] is False
    assert output["lightLevelRed"] == 12
    assert output["blockEventsId"] == "test:lamp_events"


def test_model_name_is_sanitized(mod):
    state = mod.create_block("stone").create_block_state(BlockModel("stone/top"))

    assert state.serialize()["modelName"] == "model_test_stone_top"


@pytest.mark.parametrize(
    "field", ["light_attenuation", "light_level_red", "light_level_green"]
)
@pytest.mark.parametrize("value", [-1, 16])
def test_light_levels_are_validated(field, value):
    with pytest.raises(pydantic.ValidationError):
        BlockStateSettings(**{field: value})


def test_settings_are_frozen():
    settings = BlockStateSettings()

    with pytest.raises(pydantic.ValidationError):
        settings.opaque = False


def test_full_ids(mod, model):
    stone = mod.create_block("stone")
    stone_state = stone.create_block_state(model)
    lamp = mod.create_block("lamp")
    lamp.default_state.add("lit", "false")
    lamp_state = lamp.create_block_state(model, state={"lit": "true"})

    assert stone_state.get_full_id() == "test:stone[]"
    assert stone.get_string_for_state(stone_state) == "default"
    assert lamp_state.get_full_id() == "test:lamp[lit=true]"
    assert mod.get_block_state_id(lamp_state) == "test:lamp[lit=true]"
    assert lamp.get_default_as_string() == "lit=false"
    assert lamp.get_string_for_state(lamp_state) == "lit=true"


def test_state_clone_shares_trigger_sheet(mod, model):
    sheet = TriggerSheet("events")
    block = mod.create_block("lamp")
    block.default_state.add("lit", "false")
    state = block.create_block_state(model, BlockStateSettings(trigger_sheet=sheet))

    clone = state.clone()
    clone.id.set("lit", "true")

    assert clone.trigger_sheet is sheet
    assert clone.model is not state.model
    assert str(state.id) == "lit=false"
