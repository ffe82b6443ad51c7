# Copyright (c) 2022 Daniel Pereira
#
# SPDX-License-Identifier: Apache-2.0

import logging
from . import config
from .actions import ActionRegistry
from .dispatcher import InputDispatcher, State
from .errors import PowerMenuFatalError
from .settings import ShellSettings
from .utils import process

logger = logging.getLogger(__name__)

class App:
    """
    Orchestrate the application functionality into a single unit.

    Instantiate then hit `start()` to have the menu presented. One instance presents the menu once:
    any action or dismissal terminates the process.
    """
    def __init__(
            self,
            config_file: str = None,
            verbose: bool = False,
            dismiss_on_unmatched_key: bool = True,
            dismiss_on_focus_out: bool = False,
            settings: ShellSettings = None,
            shell_factory: callable = None,
        ):
        self.config_file = config_file or config.CONFIG_FILE
        self.verbose = verbose
        self.dismiss_on_unmatched_key = dismiss_on_unmatched_key
        self.dismiss_on_focus_out = dismiss_on_focus_out
        self.settings = settings or ShellSettings()
        self.shell_factory = shell_factory
        self.registry = None
        self.dispatcher = None

    def setup_logging(self):
        """
        Setup the global application logging
        """
        log_level = "DEBUG" if self.verbose else "INFO"
        log_format = "[%(levelname)s] [%(filename)s:%(funcName)s():L%(lineno)d] %(message)s"
        logging.basicConfig(level = log_level, format = log_format)

    def load_registry(self) -> ActionRegistry:
        """
        Loads the actions from the config file and warns about keys bound more than once. Those are
        kept as they are: the first action in menu order wins.
        """
        registry = config.load(self.config_file)
        for key, actions in registry.duplicate_keys().items():
            names = ", ".join(action.value for action in actions)
            logger.warning("Key '%s' is bound to multiple actions (%s). Only %s will be triggered.",
                           key, names, actions[0].value)
        return registry

    def create_shell(self):
        """
        Instantiate the presentation shell. GTK is only imported here so that the rest of the
        application does not depend on it.
        """
        factory = self.shell_factory
        if factory is None:
            try:
                from .shell import GtkShell  # pylint: disable=import-outside-toplevel
            except (ImportError, ValueError) as err:
                raise PowerMenuFatalError("GTK 3 bindings (PyGObject) are not available") from err
            factory = GtkShell

        return factory(self.settings, self.registry, self.handle_event)

    def handle_event(self, event) -> bool:
        """
        Runs an input event through the dispatcher and carries out the resulting transition.
        Returns whether the event has been fully handled.
        """
        transition = self.dispatcher.handle(event)

        if transition.state is State.EXECUTING:
            logger.debug("Executing '%s'", transition.command)
            process.execute_and_exit(transition.command)
        elif transition.state is State.DISMISSED:
            logger.debug("Dismissed by %s", type(event).__name__)
            process.dismiss()

        return transition.handled

    def start(self) -> int:
        """
        Load the actions, then present the menu until an action is chosen or the menu is dismissed.

        Returns the exit status, only non-zero when the menu could not be presented at all.
        """
        self.setup_logging()
        self.registry = self.load_registry()
        self.dispatcher = InputDispatcher(
            self.registry,
            dismiss_on_unmatched_key=self.dismiss_on_unmatched_key,
            dismiss_on_focus_out=self.dismiss_on_focus_out,
        )

        try:
            return self.create_shell().run() or 0
        except PowerMenuFatalError as err:
            logger.error(str(err))
            return 1
