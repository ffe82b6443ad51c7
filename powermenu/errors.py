# Copyright (c) 2022 Daniel Pereira
#
# SPDX-License-Identifier: Apache-2.0

class PowerMenuError(Exception):
    """
    Base exception used for all module-based errors. These are recovered locally, logged, and the
    menu is still presented with whatever defaults apply.
    """
    pass

class PowerMenuFatalError(PowerMenuError):
    """
    This exception is, as the name implies, fatal, therefore will stop the application when raised.
    """
    pass

class ConfigError(PowerMenuError):
    """
    Base exception class for all configuration related errors
    """

class ConfigMissingError(ConfigError):
    """
    There is no configuration file at the expected path
    """

class ConfigParseError(ConfigError):
    """
    The configuration file exists but could not be structurally parsed
    """

class ConfigWriteError(ConfigError):
    """
    The configuration could not be persisted to disk
    """

class StylingLoadError(PowerMenuError):
    """
    The stylesheet could not be read or the toolkit refused to parse it
    """
