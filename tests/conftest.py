"""Shared fixtures for the power menu tests."""
import pytest

from powermenu.utils import process


class FakeShell:
    """Stands in for the GTK shell: records what would be rendered and replays scripted events."""

    events = []

    def __init__(self, settings, registry, on_event):
        self.settings = settings
        self.registry = registry
        self.on_event = on_event
        self.labels = [spec.label for spec in registry]
        self.results = []
        FakeShell.instance = self

    def run(self):
        for event in self.events:
            self.results.append(self.on_event(event))
        return 0


class ExitRecorder:
    """Records what the menu asked the process controller to do instead of exiting."""

    def __init__(self):
        self.executed = []
        self.dismissed = 0

    def execute_and_exit(self, cmd):
        self.executed.append(cmd)

    def dismiss(self):
        self.dismissed += 1


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Run the test from inside an empty directory, where `config.toml` is looked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fake_shell():
    FakeShell.events = []
    FakeShell.instance = None
    yield FakeShell
    FakeShell.events = []


@pytest.fixture
def exit_recorder(monkeypatch):
    recorder = ExitRecorder()
    monkeypatch.setattr(process, "execute_and_exit", recorder.execute_and_exit)
    monkeypatch.setattr(process, "dismiss", recorder.dismiss)
    return recorder
