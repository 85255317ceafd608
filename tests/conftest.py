"""Shared test fixtures."""

import subprocess

import pytest

from greasy.models.core import Marker
from greasy.models.state import RunConfig


@pytest.fixture(autouse=True)
def isolate_global_config(tmp_path_factory, monkeypatch):
    """Keep the developer's ~/.config/greasy/config.yaml out of tests."""
    import greasy.config.settings as settings

    missing = tmp_path_factory.mktemp("home") / "config.yaml"
    monkeypatch.setattr(settings, "GLOBAL_CONFIG", missing)


@pytest.fixture(autouse=True)
def isolate_debug_log(tmp_path_factory, monkeypatch):
    import greasy.utils.debug as debug_mod

    monkeypatch.setattr(debug_mod, "DEBUG_LOG", tmp_path_factory.mktemp("cache") / "debug.log")


@pytest.fixture
def reset_loaded_sources():
    import greasy.config.settings as settings

    settings._loaded_sources = []
    yield
    settings._loaded_sources = []


@pytest.fixture
def make_tree(tmp_path):
    """Create files under tmp_path: make_tree("a/b/package.json", "a/c/")."""

    def _make(*paths: str):
        for rel in paths:
            target = tmp_path / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text("")
        return tmp_path

    return _make


@pytest.fixture
def odd_markers():
    """Markers no real ancestor of tmp_path will contain."""
    return [
        Marker("greasy-first.marker", ("first-tool",)),
        Marker("greasy-second.marker", ("second-tool", "go")),
    ]


@pytest.fixture
def mock_subprocess(mocker):
    """Mock subprocess.run returning success by default."""
    mock = mocker.patch("greasy.dispatch.runner.subprocess.run")
    mock.return_value = subprocess.CompletedProcess([], 0, stdout="", stderr="")
    return mock


@pytest.fixture
def sample_run_config(tmp_path):
    """Minimal RunConfig rooted at tmp_path."""
    return RunConfig(command="run", start_dir=str(tmp_path))
