# Copyright (c) 2022 Daniel Pereira
#
# SPDX-License-Identifier: Apache-2.0

from collections import namedtuple
from enum import Enum
from .errors import ConfigError


class ActionId(Enum):
    """
    The five power actions a menu offers. Declaration order is the canonical order: it is the order
    buttons are displayed in and the order trigger keys are scanned in.
    """

    SHUTDOWN = "shutdown"
    REBOOT = "reboot"
    EXIT = "exit"
    LOCK = "lock"
    SUSPEND = "suspend"


ActionSpec = namedtuple("ActionSpec", ["action", "label", "command", "key"], defaults=[None])
ActionSpec.__doc__ = """
One configurable menu entry. `key` is a single character shortcut, or None for a button-only
action.
"""


class ActionRegistry:
    """
    The fixed, ordered set of five actions. It is built once at startup and never changes afterwards.
    """

    def __init__(self, specs: dict[ActionId, ActionSpec]):
        missing = [action.value for action in ActionId if action not in specs]
        if missing:
            raise ConfigError(f"Missing actions: {', '.join(missing)}")

        unknown = [str(action) for action in specs if not isinstance(action, ActionId)]
        if unknown:
            raise ConfigError(f"Unknown actions: {', '.join(unknown)}")

        self._specs = tuple(specs[action] for action in ActionId)

    def __iter__(self):
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __getitem__(self, action: ActionId) -> ActionSpec:
        return self._specs[list(ActionId).index(action)]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ActionRegistry):
            return NotImplemented
        return self._specs == other._specs

    def __repr__(self) -> str:
        return f"ActionRegistry({list(self._specs)!r})"

    def find_by_key(self, char: str) -> ActionSpec | None:
        """
        Returns the first action, in canonical order, whose trigger key matches `char` regardless
        of case. When two actions share a key, the earlier one always wins.
        """
        char = char.lower()
        for spec in self._specs:
            if spec.key is not None and spec.key.lower() == char:
                return spec
        return None

    def duplicate_keys(self) -> dict[str, list[ActionId]]:
        """
        Lists trigger keys bound to more than one action, along with the actions sharing them.
        """
        bindings = {}
        for spec in self._specs:
            if spec.key is not None:
                bindings.setdefault(spec.key.lower(), []).append(spec.action)

        return {key: actions for key, actions in bindings.items() if len(actions) > 1}


def build(entries: dict[ActionId, dict]) -> ActionRegistry:
    """
    Builds the registry out of raw `label`/`command`/`key` entries for each action.
    """
    return ActionRegistry({
        action: ActionSpec(action, entry["label"], entry["command"], entry.get("key"))
        for action, entry in entries.items()
    })
