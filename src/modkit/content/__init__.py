from .blocks import Block, BlockState, BlockStateSettings, DuplicateStateError
from .colors import Color, ColorList, Colors
from .cuboids import FrontBackCuboid, ModelCuboid
from .directions import Direction, DirectionList, DirectionMap, Directions
from .materials import DEFAULT_MATERIAL, Material
from .mod import Mod
from .models import BlockModel, ToggleableModel
from .states import StateId, StateIdBase, StateKey, StateKeyError, StateLockedError
from .textures import ColorizedTexture, Texture
from .triggers import (
    BlockAction,
    LockedSheetError,
    TriggerSheet,
    UnknownTriggerError,
    base_trigger_sheet,
)

__all__ = [
    "Block",
    "BlockAction",
    "BlockModel",
    "BlockState",
    "BlockStateSettings",
    "Color",
    "ColorList",
    "Colors",
    "ColorizedTexture",
    "DEFAULT_MATERIAL",
    "Direction",
    "DirectionList",
    "DirectionMap",
    "Directions",
    "DuplicateStateError",
    "FrontBackCuboid",
    "LockedSheetError",
    "Material",
    "Mod",
    "ModelCuboid",
    "StateId",
    "StateIdBase",
    "StateKey",
    "StateKeyError",
    "StateLockedError",
    "Texture",
    "ToggleableModel",
    "TriggerSheet",
    "UnknownTriggerError",
    "base_trigger_sheet",
]
