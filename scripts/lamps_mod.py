"""
Sample mod: colored lamps and a connecting pipe.

    python -m modkit scripts/lamps_mod.py --namespace lamps --output output
"""

import PIL.Image
import PIL.ImageDraw

from modkit import (
    BlockAction,
    BlockModel,
    ColorizedTexture,
    Colors,
    DirectionList,
    Directions,
    FrontBackCuboid,
    Material,
    ModelCuboid,
    Texture,
    ToggleableModel,
    TriggerSheet,
)


def make_lamp_texture(fill):
    image = PIL.Image.new("RGBA", (16, 16), fill)
    draw = PIL.ImageDraw.Draw(image)
    draw.rectangle((0, 0, 15, 15), outline=(40, 40, 40, 255))
    return image


def build_lamps(mod):
    colorizer = ColorizedTexture(
        make_lamp_texture((255, 255, 255, 255)), make_lamp_texture((0, 0, 0, 255))
    )
    toggle = TriggerSheet("lamp_toggle").add_action(
        "onInteract", BlockAction.set_block_state_params(0, 0, 0, {"lit": "toggle"})
    )

    for color in Colors.cr_colors:
        material = Material(colorizer.create_texture_for_color(f"lamp_{color}", color, 1))
        model = BlockModel(f"lamp_{color}").add_cuboid(
            ModelCuboid.from_bounds(0, 0, 0, 16, 16, 16).set_all_materials(material)
        )
        lit_events = TriggerSheet(f"lamp_{color}_lit", toggle).add_action(
            "onInteract", BlockAction.play_sound_2d("lamp-click.ogg", volume=0.5)
        )

        block = mod.create_block(f"lamp_{color}")
        block.default_state.add("lit", "false")
        block.create_block_state(model, {"trigger_sheet": toggle})
        block.create_block_state(
            model,
            {
                "light_level_red": color.r,
                "light_level_green": color.g,
                "light_level_blue": color.b,
                "trigger_sheet": lit_events,
            },
            state={"lit": "true"},
        )


def build_pipe(mod):
    metal = Material(Texture("pipe", PIL.Image.new("RGBA", (16, 16), (120, 120, 130, 255))))
    cap = Material(Texture("pipe_cap", PIL.Image.new("RGBA", (16, 16), (60, 60, 70, 255))))

    pipes = ToggleableModel()
    pipes.set_base_model(
        BlockModel("pipe_core").add_cuboid(
            ModelCuboid.from_bounds(5, 5, 5, 11, 11, 11).set_all_materials(metal)
        )
    )
    arm = FrontBackCuboid(
        ModelCuboid.from_bounds(5, 5, 11, 11, 11, 16), cap, metal, metal, metal, metal, metal
    )
    for direction in Directions.cardinals:
        arm_model = BlockModel(f"pipe_arm_{direction}").add_cuboid(
            arm.get_for_direction(Directions.cardinals.get_direction("north"))
        )
        if not direction.matches("north"):
            arm_model = _point_arm(arm_model, direction)
        pipes.set_model(str(direction), arm_model)

    block = mod.create_block("pipe")
    horizontal = [Directions.cardinals.get_direction(name) for name in ("north", "east")]
    for name in ("north", "east"):
        block.default_state.add(name, "false")

    for connections in _combinations(horizontal):
        model = pipes.create(connections, f"pipe_{connections}")
        block.create_block_state(
            model,
            {"opaque": False},
            state={str(direction): "true" for direction in connections},
        )


def _point_arm(model, direction):
    rotations = {
        "east": (0, 90, 0),
        "south": (0, 180, 0),
        "west": (0, 270, 0),
        "up": (-90, 0, 0),
        "down": (90, 0, 0),
    }
    return model.rotate_centered(*rotations[direction.name])


def _combinations(directions):
    return [
        DirectionList(
            direction for i, direction in enumerate(directions) if mask & (1 << i)
        )
        for mask in range(2 ** len(directions))
    ]


def build(mod):
    build_lamps(mod)
    build_pipe(mod)
