"""Trigger sheets: ordered, inheritable action lists keyed by trigger name.

Inheritance:
- A sheet created with a parent copies the parent's actions at construction
  time; later changes to the parent do not reach the child
- The parent reference is kept only so the Writer can emit the parent id
  and make sure the parent file is written too
- Every serialized sheet is flattened on top of the base sheet
  (``base:block_events_default``), the implicit root of all chains, so the
  output is self-contained even when no parent was declared
"""

import copy
import functools

from modkit.constants import BASE_TRIGGER_SHEET_ID


class UnknownTriggerError(KeyError):
    def __init__(self, trigger):
        super().__init__(trigger)
        self.trigger = trigger

    def __str__(self):
        return f"Trigger sheet has no trigger {self.trigger!r}"


class LockedSheetError(RuntimeError):
    """Raised when mutating the process-wide base trigger sheet."""


class BlockAction:
    """One parameterized effect a trigger runs. Treat as a value: clone before mutating."""

    def __init__(self, type, parameters=None):
        self.type = type
        self.parameters = dict(parameters or {})

    @classmethod
    def replace_block(cls, x, y, z, block):
        return cls(
            "base:replace_block_state",
            {"xOff": x, "yOff": y, "zOff": z, "blockStateId": block},
        )

    @classmethod
    def explode(cls, x, y, z, block):
        return cls(
            "base:explode",
            {"xOff": x, "yOff": y, "zOff": z, "blockStateId": block},
        )

    @classmethod
    def set_block_state_params(cls, x, y, z, params):
        return cls(
            "base:set_block_state_params",
            {"xOff": x, "yOff": y, "zOff": z, "params": params},
        )

    @classmethod
    def run_trigger(cls, x, y, z, trigger):
        return cls(
            "base:run_trigger",
            {"xOff": x, "yOff": y, "zOff": z, "triggerId": trigger},
        )

    @classmethod
    def play_sound_2d(cls, sound, volume=1, pitch=1, pan=0):
        return cls(
            "base:play_sound_2d",
            {"sound": sound, "volume": volume, "pitch": pitch, "pan": pan},
        )

    def serialize(self):
        return {"actionId": self.type, "parameters": copy.deepcopy(self.parameters)}

    def clone(self):
        return BlockAction(self.type, copy.deepcopy(self.parameters))

    def __repr__(self):
        return f"BlockAction({self.type!r}, {self.parameters!r})"


class TriggerSheet:
    def __init__(self, id, parent=None):
        self.id = id
        self.parent = parent
        self.triggers = {}
        self._locked = False

        if parent is not None and parent.triggers:
            self.append(parent)

    def _check_unlocked(self):
        if self._locked:
            raise LockedSheetError(f"Trigger sheet {self.id!r} cannot be modified")

    def add_action(self, trigger, action, index=None):
        """Insert one action into a trigger's list, at the end unless ``index`` is given."""
        self._check_unlocked()
        if isinstance(action, (list, tuple)):
            raise TypeError("Use add_actions() to add a list of actions")

        actions = self.triggers.setdefault(trigger, [])
        if index is None:
            actions.append(action)
        else:
            actions.insert(index, action)
        return self

    def add_actions(self, triggers, actions):
        """Add every action in ``actions`` to each trigger in ``triggers``."""
        if isinstance(actions, BlockAction):
            raise TypeError("Use add_action() to add a single action")
        if isinstance(triggers, str):
            triggers = [triggers]

        for trigger in triggers:
            for action in actions:
                self.add_action(trigger, action)
        return self

    def remove_trigger(self, trigger):
        self._check_unlocked()
        self.triggers.pop(trigger, None)
        return self

    def remove_action_by_comparison(self, comparator):
        for trigger in list(self.triggers):
            self.remove_trigger_action_by_comparison(trigger, comparator)
        return self

    def remove_trigger_action_by_comparison(self, trigger, comparator):
        self._check_unlocked()
        if trigger not in self.triggers:
            raise UnknownTriggerError(trigger)

        self.triggers[trigger] = [
            action for action in self.triggers[trigger] if not comparator(action)
        ]
        return self

    def append(self, other):
        self._check_unlocked()
        for trigger, actions in other.triggers.items():
            for action in actions:
                self.add_action(trigger, action.clone())
        return self

    def clone(self, id=None):
        # the parent's actions are already part of self.triggers, so the
        # clone must not copy them in a second time through the constructor
        sheet = TriggerSheet(self.id if id is None else id)
        sheet.parent = self.parent
        sheet.append(self)
        return sheet

    def flatten(self):
        """Return a new sheet holding the base sheet's actions followed by this sheet's."""
        output = TriggerSheet(self.id, base_trigger_sheet())
        output.append(self)
        return output

    def get_parent_id(self, namespace):
        if self.parent is None or self.parent is base_trigger_sheet():
            return BASE_TRIGGER_SHEET_ID
        return f"{namespace}:{self.parent.id}"

    def serialize(self, namespace):
        output = self.flatten()
        return {
            "parent": self.get_parent_id(namespace),
            "stringId": f"{namespace}:{output.id}",
            "triggers": {
                trigger: [action.serialize() for action in actions]
                for trigger, actions in output.triggers.items()
            },
        }

    def __repr__(self):
        return f"TriggerSheet({self.id!r}, triggers={list(self.triggers)})"


@functools.lru_cache(maxsize=None)
def base_trigger_sheet():
    """The locked root of every trigger sheet chain, built once per process."""
    sheet = TriggerSheet(BASE_TRIGGER_SHEET_ID)
    sheet.add_action("onPlace", BlockAction.replace_block(0, 0, 0, "self"))
    sheet.add_action("onPlace", BlockAction.play_sound_2d("block-place.ogg"))
    sheet.add_action(
        "onBreak", BlockAction.replace_block(0, 0, 0, "base:air[default]")
    )
    sheet.add_action("onBreak", BlockAction.play_sound_2d("block-break.ogg"))

    sheet._locked = True
    return sheet
