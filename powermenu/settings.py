# Copyright (c) 2022 Daniel Pereira
#
# SPDX-License-Identifier: Apache-2.0

from collections import namedtuple
from pathlib import Path
from .errors import StylingLoadError

APP_ID = "com.example.PowerMenu"
WINDOW_TITLE = "Power Menu"
WINDOW_WIDTH = 300
DEFAULT_CSS_FILE = Path(__file__).parent / "styles" / "kanagawa.css"

ShellSettings = namedtuple(
    "ShellSettings",
    ["app_id", "title", "width", "prefer_dark_theme", "css_file"],
    defaults=[APP_ID, WINDOW_TITLE, WINDOW_WIDTH, True, DEFAULT_CSS_FILE],
)
ShellSettings.__doc__ = """
Toolkit-wide presentation settings. Created once at startup and handed to the presentation shell,
which is the only place that applies them to the toolkit.
"""


def read_stylesheet(path: str | Path) -> bytes:
    """
    Reads the stylesheet contents, raising StylingLoadError when it can't be read.
    """
    try:
        return Path(path).read_bytes()
    except OSError as err:
        raise StylingLoadError(f"Unable to read stylesheet {path}: {err.strerror}") from err
