import logging

import pytest

from powermenu import config
from powermenu.settings import ShellSettings


@pytest.fixture
def shell_module():
    try:
        from powermenu import shell
    except (ImportError, ValueError):
        pytest.skip("GTK 3 bindings are not available")
    return shell


def test_broken_stylesheet_is_logged_and_not_fatal(shell_module, tmp_path, caplog):
    settings = ShellSettings(css_file=tmp_path / "missing.css", prefer_dark_theme=False)
    gtk_shell = shell_module.GtkShell(settings, config.defaults(), lambda event: True)

    with caplog.at_level(logging.WARNING):
        gtk_shell.apply_theme()

    assert "Failed to load CSS" in caplog.text
    assert "missing.css" in caplog.text
