# Copyright (c) 2022 Daniel Pereira
#
# SPDX-License-Identifier: Apache-2.0

import os
import sys
import subprocess
from logging import getLogger

logger = getLogger(__name__)

SHELL = "/bin/sh"

def spawn_detached(cmd: str, shell: str = SHELL) -> subprocess.Popen | None:
    """
    Starts a shell command in the background and returns right away, without waiting for it nor
    capturing its output.

    The child runs in its own session so that it keeps running once this process is gone and does
    not get the signals sent to our process group. Launch failures are ignored and return None.
    """
    try:
        proc = subprocess.Popen(
            [shell, "-c", cmd],
            stdin=subprocess.DEVNULL,
            start_new_session=True,
            close_fds=True,
        )
    except OSError as err:
        logger.debug(f"Unable to start '{cmd}': {err}")
        return None

    logger.debug(f"Command '{cmd}' started with pid {proc.pid}.")
    return proc

def fast_exit(status: int = 0):
    """
    Terminates the process immediately, skipping the toolkit teardown and any exit handlers.
    """
    sys.stdout.flush()
    sys.stderr.flush()
    os._exit(status)  # pylint: disable=protected-access

def execute_and_exit(cmd: str):
    """
    Runs the command in the background then exits with status 0. The command's own status is never
    observed.
    """
    spawn_detached(cmd)
    fast_exit(0)

def dismiss():
    """
    Closes the menu without running anything.
    """
    fast_exit(0)
