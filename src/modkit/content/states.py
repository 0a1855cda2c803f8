"""
State identity for blocks.

A block declares its variant axes once on a StateIdBase (ordered key ->
default value). Every StateId minted from that base covers exactly the same
keys in the same order, and renders to a canonical string:

    facing=north,lit=false

The first StateId minted locks the base, so ids created earlier can never
become incomplete because a key was added later. A base with no keys has a
single state whose canonical string is empty; in the block catalog that
state is labeled "default" (see StateKey).
"""

import enum
from dataclasses import dataclass
from typing import Dict

from modkit.constants import DEFAULT_STATE_LABEL


class StateKeyError(KeyError):
    """Raised when a state key is not declared on the StateIdBase."""

    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return f"Cannot find state with key {self.key!r}"


class StateLockedError(RuntimeError):
    """Raised when adding a key to a StateIdBase that already minted ids."""


class StateIdBase:
    def __init__(self):
        self.keys: Dict[str, str] = {}
        self.locked = False

    def get_defaults(self) -> Dict[str, str]:
        return dict(self.keys)

    def add(self, key, default_value):
        if self.locked:
            raise StateLockedError(
                f"Cannot add key {key!r}: state id base has already created ids"
            )
        self.keys[key] = default_value
        return self

    def create_state_id(self):
        """Mint a StateId holding every default value. Locks this base."""
        self.locked = True
        return StateId(self)

    @property
    def has_states(self):
        return len(self.keys) > 0

    def __str__(self):
        return _to_state_string(self.keys)

    def __repr__(self):
        return f"StateIdBase({self.keys!r}, locked={self.locked})"


class StateId:
    def __init__(self, base):
        self.base = base
        self.states: Dict[str, str] = {}
        self.reset()

    def reset(self):
        self.states = self.base.get_defaults()
        return self

    def set(self, key, value):
        if key not in self.states:
            raise StateKeyError(key)

        self.states[key] = value
        return self

    def reset_key(self, key):
        if key not in self.states:
            raise StateKeyError(key)

        self.states[key] = self.base.keys[key]
        return self

    def clone(self):
        state_id = StateId(self.base)
        for key, value in self.states.items():
            state_id.set(key, value)
        return state_id

    def as_dict(self):
        return dict(self.states)

    def key(self):
        return StateKey.for_state_id(self)

    def __str__(self):
        return _to_state_string(self.states)

    def __repr__(self):
        return f"StateId({str(self)!r})"


def _to_state_string(states):
    return ",".join(f"{key}={value}" for key, value in states.items())


class StateKeyKind(enum.Enum):
    DEFAULT = "DEFAULT"
    EXPLICIT = "EXPLICIT"


@dataclass(frozen=True)
class StateKey:
    """Catalog key of a block state.

    DEFAULT is the only state of a block without state keys; EXPLICIT carries
    the canonical string. Blocks with state keys never produce DEFAULT, even
    when a state holds only default values.
    """

    kind: StateKeyKind
    value: str = ""

    @classmethod
    def for_state_id(cls, state_id):
        if not state_id.base.has_states:
            return cls(StateKeyKind.DEFAULT)
        return cls(StateKeyKind.EXPLICIT, str(state_id))

    @property
    def label(self):
        if self.kind is StateKeyKind.DEFAULT:
            return DEFAULT_STATE_LABEL
        return self.value
