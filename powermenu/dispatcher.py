# Copyright (c) 2022 Daniel Pereira
#
# SPDX-License-Identifier: Apache-2.0

import logging
from collections import namedtuple
from enum import Enum
from .actions import ActionId, ActionRegistry

logger = logging.getLogger(__name__)

# Raw input events, as forwarded by the presentation shell
KeyPress = namedtuple("KeyPress", ["name", "char", "is_modifier"], defaults=[None, False])
PointerPress = namedtuple("PointerPress", ["x", "y", "width", "height"])
ButtonClick = namedtuple("ButtonClick", ["action"])
FocusOut = namedtuple("FocusOut", [])

ESCAPE_KEY_NAME = "Escape"
RESERVED_DISMISS_CHAR = "q"


class State(Enum):
    """The state the menu is in after an event has been handled"""

    IDLE = "idle"
    DISMISSED = "dismissed"
    EXECUTING = "executing"


class Transition(namedtuple("Transition", ["state", "command", "handled"])):
    """
    The outcome of a single event. `command` is only set when executing, and `handled` tells the
    toolkit whether the event must stop propagating to the widgets underneath.
    """

    @classmethod
    def idle(cls, handled: bool = False) -> "Transition":
        return cls(State.IDLE, None, handled)

    @classmethod
    def dismissed(cls) -> "Transition":
        return cls(State.DISMISSED, None, True)

    @classmethod
    def executing(cls, command: str) -> "Transition":
        return cls(State.EXECUTING, command, True)


class InputDispatcher:
    """
    Maps every input event the menu receives to one transition: stay idle, dismiss the menu, or run
    a command then dismiss it.

    Escape and `q` always dismiss, even if an action is bound to `q`. A printable key runs the first
    action bound to it, in canonical order, and any other key dismisses the menu unless
    `dismiss_on_unmatched_key` is turned off. A modifier pressed alone is ignored. Losing focus only
    dismisses when `dismiss_on_focus_out` is set.
    """

    def __init__(
            self,
            registry: ActionRegistry,
            dismiss_on_unmatched_key: bool = True,
            dismiss_on_focus_out: bool = False,
        ):
        self.registry = registry
        self.dismiss_on_unmatched_key = dismiss_on_unmatched_key
        self.dismiss_on_focus_out = dismiss_on_focus_out

    def handle(self, event) -> Transition:
        if isinstance(event, KeyPress):
            return self.handle_key(event)
        if isinstance(event, PointerPress):
            return self.handle_pointer(event)
        if isinstance(event, ButtonClick):
            return self.handle_click(event)
        if isinstance(event, FocusOut):
            return self.handle_focus_out(event)

        raise TypeError(f"Unsupported event type {type(event).__name__}")

    def handle_key(self, event: KeyPress) -> Transition:
        if event.name == ESCAPE_KEY_NAME:
            return Transition.dismissed()

        # Holding Shift alone must not close the menu before the shortcut key arrives
        if event.is_modifier:
            return Transition.idle(handled=True)

        char = (event.char or "").lower()
        if char == RESERVED_DISMISS_CHAR:
            return Transition.dismissed()

        # Return, Tab, arrows and other keys without a printable character never match an action
        spec = self.registry.find_by_key(char) if char and char.isprintable() else None
        if spec:
            logger.debug("Key %r matches action %s", event.char, spec.action.value)
            return Transition.executing(spec.command)

        if self.dismiss_on_unmatched_key:
            return Transition.dismissed()
        return Transition.idle(handled=True)

    def handle_pointer(self, event: PointerPress) -> Transition:
        # Presses inside the window fall through to the button underneath, if any
        if event.x < 0 or event.y < 0 or event.x > event.width or event.y > event.height:
            return Transition.dismissed()
        return Transition.idle()

    def handle_click(self, event: ButtonClick) -> Transition:
        spec = self.registry[ActionId(event.action)]
        return Transition.executing(spec.command)

    # pylint: disable-next=unused-argument
    def handle_focus_out(self, event: FocusOut) -> Transition:
        if self.dismiss_on_focus_out:
            return Transition.dismissed()
        return Transition.idle()
