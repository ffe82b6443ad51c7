# Copyright (c) 2022 Daniel Pereira
#
# SPDX-License-Identifier: Apache-2.0

import logging
from pathlib import Path
import toml
from .actions import ActionId, ActionRegistry, build
from .errors import ConfigError, ConfigMissingError, ConfigParseError, ConfigWriteError

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.toml"

DEFAULT_COMMANDS = {
    ActionId.SHUTDOWN: {"label": "(s) Shutdown", "command": "systemctl poweroff", "key": "s"},
    ActionId.REBOOT: {"label": "(r) Reboot", "command": "systemctl reboot", "key": "r"},
    ActionId.EXIT: {"label": "(e) Exit", "command": "swaymsg exit", "key": "e"},
    ActionId.LOCK: {"label": "(l) Lock", "command": "swaylock", "key": "l"},
    ActionId.SUSPEND: {"label": "(h) Suspend", "command": "systemctl suspend", "key": "h"},
}


def defaults() -> ActionRegistry:
    """
    The registry used whenever there's no usable configuration file.
    """
    return build(DEFAULT_COMMANDS)


def dumps(registry: ActionRegistry) -> str:
    """
    Serializes the registry into the TOML document format. Actions without a trigger key simply
    have no `key` field.
    """
    commands = {}
    for spec in registry:
        entry = {"label": spec.label, "command": spec.command}
        if spec.key is not None:
            entry["key"] = spec.key
        commands[spec.action.value] = entry

    return toml.dumps({"commands": commands})


def loads(document: str) -> ActionRegistry:
    """
    Parses a TOML document into a registry. Only the structure is checked: labels may be empty and
    keys may be shared between actions.

    Raises ConfigParseError describing the first problem found.
    """
    try:
        data = toml.loads(document)
    except toml.TomlDecodeError as err:
        raise ConfigParseError(f"invalid TOML: {err}") from err

    commands = data.get("commands")
    if not isinstance(commands, dict):
        raise ConfigParseError("missing table `commands`")

    entries = {}
    for action in ActionId:
        entries[action] = _parse_entry(action, commands.get(action.value))

    try:
        return build(entries)
    except ConfigError as err:
        raise ConfigParseError(str(err)) from err


def _parse_entry(action: ActionId, entry: object) -> dict:
    table = f"commands.{action.value}"
    if not isinstance(entry, dict):
        raise ConfigParseError(f"missing table `{table}`")

    for field in ["label", "command"]:
        if not isinstance(entry.get(field), str):
            raise ConfigParseError(f"`{table}.{field}` must be a string")

    key = entry.get("key")
    if key is not None and (not isinstance(key, str) or len(key) != 1):
        raise ConfigParseError(f"`{table}.key` must be a single character, got {key!r}")

    return {"label": entry["label"], "command": entry["command"], "key": key}


def read(path: str | Path) -> ActionRegistry:
    """
    Reads and parses the configuration file.

    Raises ConfigMissingError when there's no file and ConfigParseError when it can't be used.
    """
    try:
        document = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as err:
        raise ConfigMissingError(f"Configuration file {path} not found") from err
    except UnicodeDecodeError as err:
        raise ConfigParseError(f"not valid UTF-8: {err}") from err
    except OSError as err:
        raise ConfigParseError(f"unable to read file: {err.strerror}") from err

    return loads(document)


def save(registry: ActionRegistry, path: str | Path):
    """
    Writes the registry to `path`, refusing to replace a file that already exists.

    Raises ConfigWriteError when the file can't be written.
    """
    try:
        with open(path, "x", encoding="utf-8") as out:
            out.write(dumps(registry))
    except OSError as err:
        raise ConfigWriteError(f"Failed to write configuration file {path}: {err}") from err


def load(path: str | Path = CONFIG_FILE) -> ActionRegistry:
    """
    Loads the registry from the configuration file, falling back to the defaults whenever the file
    is missing or unusable. Never fails.

    A missing file gets the defaults written to it. A malformed file is left untouched so that the
    user can fix it.
    """
    try:
        registry = read(path)
        logger.info("Loaded configuration from %s", path)
        return registry
    except ConfigMissingError:
        logger.info("Configuration file %s not found. Creating default configuration.", path)
        registry = defaults()
        try:
            save(registry, path)
            logger.info("Created default configuration file: %s", path)
        except ConfigWriteError as err:
            logger.error(str(err))
        return registry
    except ConfigParseError as err:
        logger.error("Error parsing %s: %s. Using default configuration.", path, err)
        return defaults()
