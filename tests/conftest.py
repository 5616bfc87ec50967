import subprocess

import pytest

from src.config.paths import FrameworkPaths
from src.setup.initializer import initialize_environment


@pytest.fixture
def paths(tmp_path):
    return FrameworkPaths.from_root(tmp_path / "fw")


@pytest.fixture
def initialized(paths):
    """Framework tree built once, no pause."""
    logger = initialize_environment(paths, pause_s=0)
    return paths, logger


@pytest.fixture
def fake_run(monkeypatch):
    """Replace subprocess.run in the runner; records each argv."""
    calls = []

    def _run(args, *a, **kw):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, 0)

    monkeypatch.setattr("src.runner.execution.subprocess.run", _run)
    return calls
