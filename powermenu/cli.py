# Copyright (c) 2022 Daniel Pereira
#
# SPDX-License-Identifier: Apache-2.0

import sys
from argparse import ArgumentParser
from . import __version__, config
from .app import App
from .settings import DEFAULT_CSS_FILE, WINDOW_WIDTH, ShellSettings


def main(argv: list[str] = None):
    """
    powermenu is a minimal power menu for tiling window managers.

    It shows a small floating panel to shutdown, reboot, exit the session, lock the screen or
    suspend. Pick an action with its key or a click, and dismiss it with Escape, `q` or a click
    outside of it.
    """

    parser = ArgumentParser(description=main.__doc__)
    parser.add_argument(
        "-c", "--config-file", default=config.CONFIG_FILE,
        help=f"user config file path (default: {config.CONFIG_FILE})"
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--verbose", action="store_true", help="increase the log verbosity"
    )
    parser.add_argument(
        "--dismiss-on-focus-out", action="store_true",
        help="close the menu when it loses the input focus"
    )
    parser.add_argument(
        "--keep-open-on-unmatched-key", action="store_true",
        help="ignore keys that are not bound to any action instead of closing the menu"
    )
    parser.add_argument(
        "--css-file", default=DEFAULT_CSS_FILE, help="stylesheet used to theme the menu"
    )
    parser.add_argument(
        "--width", type=int, default=WINDOW_WIDTH, help="window width in pixels"
    )
    parser.add_argument(
        "--no-dark-theme", action="store_true", help="do not ask GTK for its dark theme variant"
    )
    parser.add_argument(
        "--print-default-config", action="store_true",
        help="print the default configuration and exit"
    )

    args = parser.parse_args(argv)

    if args.print_default_config:
        sys.stdout.write(config.dumps(config.defaults()))
        sys.exit(0)

    settings = ShellSettings(
        width=args.width,
        prefer_dark_theme=not args.no_dark_theme,
        css_file=args.css_file,
    )
    sys.exit(App(
        config_file=args.config_file,
        verbose=args.verbose,
        dismiss_on_unmatched_key=not args.keep_open_on_unmatched_key,
        dismiss_on_focus_out=args.dismiss_on_focus_out,
        settings=settings,
    ).start())
