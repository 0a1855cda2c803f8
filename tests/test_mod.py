import asyncio
import json
import os

import PIL.Image
import pytest

from modkit.content.cuboids import ModelCuboid
from modkit.content.materials import Material
from modkit.content.mod import Mod
from modkit.content.models import BlockModel
from modkit.content.textures import Texture
from modkit.content.triggers import BlockAction, TriggerSheet
from modkit.writer import Writer


@pytest.fixture(autouse=True)
def quiet_progress(monkeypatch):
    monkeypatch.setenv("MODKIT_SHOW_PROGRESS", "false")


def read_json(path):
    with open(path) as f:
        return json.load(f)


def build_lamp_mod(directory, is_release=False):
    mod = Mod("lamps", Writer(directory), is_release=is_release)

    glow = Material(Texture("glow", PIL.Image.new("RGBA", (16, 16), (255, 200, 0, 255))))
    off = Material("lamp_off.png")
    on_model = BlockModel("lamp_on").add_cuboid(
        ModelCuboid.from_bounds(0, 0, 0, 16, 16, 16).set_all_materials(glow)
    )
    off_model = BlockModel("lamp_off").add_cuboid(
        ModelCuboid.from_bounds(0, 0, 0, 16, 16, 16).set_all_materials(off)
    )

    toggle = TriggerSheet("lamp_toggle").add_action(
        "onInteract", BlockAction.set_block_state_params(0, 0, 0, {"lit": "toggle"})
    )
    on_events = TriggerSheet("lamp_on_events", toggle)

    lamp = mod.create_block("lamp")
    lamp.default_state.add("lit", "false")
    lamp.create_block_state(off_model, {"trigger_sheet": toggle})
    lamp.create_block_state(
        on_model,
        {"light_level_red": 15, "light_level_green": 12, "trigger_sheet": on_events},
        state={"lit": "true"},
    )

    frame = mod.create_block("frame")
    frame.create_block_state(off_model, {"opaque": False})

    return mod


def test_write_produces_every_file(tmp_path):
    mod = build_lamp_mod(tmp_path)

    asyncio.run(mod.write())

    assert sorted(os.listdir(tmp_path / "blocks")) == [
        "block_lamps_frame.json",
        "block_lamps_lamp.json",
    ]
    assert sorted(os.listdir(tmp_path / "models" / "blocks")) == [
        "model_lamps_lamp_off.json",
        "model_lamps_lamp_on.json",
    ]
    assert sorted(os.listdir(tmp_path / "block_events")) == [
        "block_event_lamps_lamp_on_events.json",
        "block_event_lamps_lamp_toggle.json",
    ]
    assert os.listdir(tmp_path / "textures" / "blocks") == ["glow.png"]


def test_written_files_reference_each_other(tmp_path):
    asyncio.run(build_lamp_mod(tmp_path).write())

    lamp = read_json(tmp_path / "blocks" / "block_lamps_lamp.json")
    on_state = lamp["blockStates"]["lit=true"]
    events = read_json(tmp_path / "block_events" / "block_event_lamps_lamp_on_events.json")
    model = read_json(tmp_path / "models" / "blocks" / "model_lamps_lamp_on.json")

    assert lamp["stringId"] == "lamps:lamp"
    assert lamp["defaultParams"] == {"lit": "false"}
    assert on_state["modelName"] == "model_lamps_lamp_on"
    assert on_state["blockEventsId"] == "lamps:lamp_on_events"
    assert on_state["lightLevelGreen"] == 12
    assert events["stringId"] == "lamps:lamp_on_events"
    assert events["parent"] == "lamps:lamp_toggle"
    assert list(events["triggers"]) == ["onPlace", "onBreak", "onInteract"]
    assert [texture["fileName"] for texture in model["textures"].values()] == ["glow.png"]


def test_frame_block_has_default_state(tmp_path):
    asyncio.run(build_lamp_mod(tmp_path).write())

    frame = read_json(tmp_path / "blocks" / "block_lamps_frame.json")

    assert list(frame["blockStates"]) == ["default"]
    assert frame["blockStates"]["default"]["isOpaque"] is False
    assert "blockEventsId" not in frame["blockStates"]["default"]


@pytest.mark.parametrize("is_release, indented", [(False, True), (True, False)])
def test_release_writes_compact_json(tmp_path, is_release, indented):
    asyncio.run(build_lamp_mod(tmp_path, is_release=is_release).write())

    with open(tmp_path / "blocks" / "block_lamps_frame.json") as f:
        text = f.read()

    assert ("\n" in text) is indented


def test_write_cleans_stale_output(tmp_path):
    os.makedirs(tmp_path / "blocks")
    with open(tmp_path / "blocks" / "block_lamps_old.json", "w") as f:
        f.write("{}")

    asyncio.run(build_lamp_mod(tmp_path).write())

    assert "block_lamps_old.json" not in os.listdir(tmp_path / "blocks")


def test_write_without_clean_keeps_existing_files(tmp_path):
    os.makedirs(tmp_path / "blocks")
    with open(tmp_path / "blocks" / "block_lamps_old.json", "w") as f:
        f.write("{}")

    asyncio.run(build_lamp_mod(tmp_path).write(clean=False))

    assert "block_lamps_old.json" in os.listdir(tmp_path / "blocks")
    assert "block_lamps_lamp.json" in os.listdir(tmp_path / "blocks")


def test_shared_entities_are_collected_once(tmp_path):
    mod = build_lamp_mod(tmp_path)

    assert [model.name for model in mod.get_models()] == ["lamp_off", "lamp_on"]
    assert [sheet.id for sheet in mod.get_trigger_sheets()] == [
        "lamp_toggle",
        "lamp_on_events",
    ]


def test_block_ids(tmp_path):
    mod = Mod("ns", Writer(tmp_path))
    block = mod.create_block("stone")

    assert mod.get_block_id(block) == "ns:stone"
    assert mod.get_block_id("dirt") == "ns:dirt"
    assert block.parent_mod is mod
    assert mod.blocks == {"stone": block}


def test_write_concurrency_must_be_positive(tmp_path, monkeypatch):
    monkeypatch.setenv("MODKIT_WRITE_CONCURRENCY", "0")

    with pytest.raises(ValueError):
        asyncio.run(build_lamp_mod(tmp_path).write())


@pytest.mark.parametrize("clean", [True, False])
def test_writing_twice_produces_the_same_files(tmp_path, clean):
    mod = build_lamp_mod(tmp_path)

    def snapshot():
        return {
            folder: sorted(os.listdir(tmp_path / folder))
            for folder in ("blocks", "block_events", "models/blocks", "textures/blocks")
        }

    asyncio.run(mod.write())
    first = snapshot()
    asyncio.run(mod.write(clean=clean))

    assert snapshot() == first
    assert first["block_events"] == [
        "block_event_lamps_lamp_on_events.json",
        "block_event_lamps_lamp_toggle.json",
    ]
    assert first["textures/blocks"] == ["glow.png"]


def test_same_mod_written_to_a_new_writer(tmp_path):
    mod = build_lamp_mod(tmp_path / "a")
    asyncio.run(mod.write())
    mod.writer = Writer(tmp_path / "c")

    asyncio.run(mod.write())

    assert len(os.listdir(tmp_path / "c" / "block_events")) == 2
    assert os.listdir(tmp_path / "c" / "textures" / "blocks") == ["glow.png"]
