from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from modkit.constants import MAX_LIGHT_LEVEL
from modkit.util.text import parse_state_string

from .models import BlockModel
from .states import StateId, StateIdBase
from .triggers import TriggerSheet


class DuplicateStateError(ValueError):
    def __init__(self, block_id, state_string):
        super().__init__(
            f"Block {block_id!r} has more than one state with id {state_string!r}"
        )
        self.block_id = block_id
        self.state_string = state_string


class BlockStateSettings(BaseModel):
    """Behavioral and rendering settings of one block state."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    opaque: bool = True
    transparent: bool = False
    light_attenuation: int = Field(default=MAX_LIGHT_LEVEL, ge=0, le=MAX_LIGHT_LEVEL)
    generate_slabs: bool = False
    light_level_red: int = Field(default=0, ge=0, le=MAX_LIGHT_LEVEL)
    light_level_green: int = Field(default=0, ge=0, le=MAX_LIGHT_LEVEL)
    light_level_blue: int = Field(default=0, ge=0, le=MAX_LIGHT_LEVEL)
    hidden: bool = False
    trigger_sheet: Optional[TriggerSheet] = None


class BlockState:
    def __init__(self, id: StateId, model: BlockModel, settings, parent_block):
        self.id = id
        self.model = model
        self.settings = settings
        self.parent_block = parent_block

    @property
    def opaque(self):
        return self.settings.opaque

    @property
    def transparent(self):
        return self.settings.transparent

    @property
    def light_attenuation(self):
        return self.settings.light_attenuation

    @property
    def generate_slabs(self):
        return self.settings.generate_slabs

    @property
    def light_level_red(self):
        return self.settings.light_level_red

    @property
    def light_level_green(self):
        return self.settings.light_level_green

    @property
    def light_level_blue(self):
        return self.settings.light_level_blue

    @property
    def hidden(self):
        return self.settings.hidden

    @property
    def trigger_sheet(self) -> Optional[TriggerSheet]:
        return self.settings.trigger_sheet

    @property
    def namespace(self):
        return self.parent_block.parent_mod.id

    def serialize(self):
        writer = self.parent_block.parent_mod.writer
        output = {
            "modelName": f"model_{self.namespace}_{writer.get_name(self.model.name)}",
            "isOpaque": self.opaque,
            "isTransparent": self.transparent,
            "lightAttenuation": self.light_attenuation,
            "generateSlabs": self.generate_slabs,
            "lightLevelRed": self.light_level_red,
            "lightLevelGreen": self.light_level_green,
            "lightLevelBlue": self.light_level_blue,
            "catalogHidden": self.hidden,
        }

        if self.trigger_sheet is not None:
            output["blockEventsId"] = f"{self.namespace}:{self.trigger_sheet.id}"

        return output

    def get_full_id(self):
        return f"{self.parent_block.get_full_id()}[{self.id}]"

    def clone(self, id=None):
        """Copy this state with a cloned id and model. The trigger sheet stays shared."""
        return BlockState(
            self.id.clone() if id is None else id,
            self.model.clone(),
            self.settings,
            self.parent_block,
        )

    def __repr__(self):
        return f"BlockState({self.get_full_id()!r})"


class Block:
    """A placeable block: one StateIdBase plus a BlockState per minted StateId.

    States are keyed by StateId identity, in creation order. Two states
    whose ids render to the same string are allowed while building but
    rejected at serialization time.
    """

    def __init__(self, id, parent_mod):
        self.id = id
        self.parent_mod = parent_mod
        self.default_state = StateIdBase()
        self.states: Dict[StateId, BlockState] = {}

    def create_block_state(self, model, settings=None, state=None):
        """Mint a StateId, wrap it with ``model`` and register the new state.

        Args:
            model: The BlockModel rendered for this state
            settings: A BlockStateSettings, or a mapping of its fields
            state: Optional mapping of state key -> value applied to the new id

        Returns:
            The registered BlockState
        """
        if settings is None:
            settings = BlockStateSettings()
        elif not isinstance(settings, BlockStateSettings):
            settings = BlockStateSettings(**settings)

        state_id = self.default_state.create_state_id()
        for key, value in (state or {}).items():
            state_id.set(key, value)

        block_state = BlockState(state_id, model, settings, self)
        self.states[state_id] = block_state
        return block_state

    def get_full_id(self):
        return self.parent_mod.get_block_id(self)

    def get_default_as_string(self):
        return str(self.default_state)

    def get_string_for_state(self, state):
        if isinstance(state, BlockState):
            state = state.id
        return state.key().label

    def serialize(self):
        block_states = {}
        for state_id, block_state in self.states.items():
            label = self.get_string_for_state(state_id)
            if label in block_states:
                raise DuplicateStateError(self.id, label)
            block_states[label] = block_state.serialize()

        return {
            "stringId": self.get_full_id(),
            "defaultParams": parse_state_string(self.get_default_as_string()),
            "blockStates": block_states,
        }

    def __repr__(self):
        return f"Block({self.id!r}, states={len(self.states)})"
