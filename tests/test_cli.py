import pytest

from powermenu import __version__, cli, config
from powermenu.settings import DEFAULT_CSS_FILE, WINDOW_WIDTH


class FakeApp:
    kwargs = None

    def __init__(self, **kwargs):
        FakeApp.kwargs = kwargs

    def start(self):
        return 0


@pytest.fixture
def fake_app(monkeypatch):
    FakeApp.kwargs = None
    monkeypatch.setattr(cli, "App", FakeApp)
    return FakeApp


def test_defaults(fake_app):
    with pytest.raises(SystemExit) as exited:
        cli.main([])

    assert exited.value.code == 0
    assert fake_app.kwargs["config_file"] == "config.toml"
    assert fake_app.kwargs["verbose"] is False
    assert fake_app.kwargs["dismiss_on_unmatched_key"] is True
    assert fake_app.kwargs["dismiss_on_focus_out"] is False
    settings = fake_app.kwargs["settings"]
    assert settings.width == WINDOW_WIDTH
    assert settings.prefer_dark_theme is True
    assert settings.css_file == DEFAULT_CSS_FILE


def test_options_are_forwarded(fake_app):
    with pytest.raises(SystemExit):
        cli.main([
            "-c", "/tmp/menu.toml", "--verbose", "--dismiss-on-focus-out",
            "--keep-open-on-unmatched-key", "--width", "400", "--no-dark-theme",
            "--css-file", "/tmp/menu.css",
        ])

    assert fake_app.kwargs["config_file"] == "/tmp/menu.toml"
    assert fake_app.kwargs["verbose"] is True
    assert fake_app.kwargs["dismiss_on_unmatched_key"] is False
    assert fake_app.kwargs["dismiss_on_focus_out"] is True
    settings = fake_app.kwargs["settings"]
    assert settings.width == 400
    assert settings.prefer_dark_theme is False
    assert settings.css_file == "/tmp/menu.css"


def test_print_default_config(fake_app, capsys):
    with pytest.raises(SystemExit) as exited:
        cli.main(["--print-default-config"])

    assert exited.value.code == 0
    assert config.loads(capsys.readouterr().out) == config.defaults()
    assert fake_app.kwargs is None


def test_version(capsys):
    with pytest.raises(SystemExit) as exited:
        cli.main(["--version"])

    assert exited.value.code == 0
    assert __version__ in capsys.readouterr().out
