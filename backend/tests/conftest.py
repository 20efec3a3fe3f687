import tempfile

import pytest

from execution import sandbox
from execution.config import ExecutionConfig


@pytest.fixture
def config():
    return ExecutionConfig(timeout_ms=5000, max_buffer_size=1024 * 1024)


@pytest.fixture
def created_workspaces(monkeypatch):
    """Record every workspace directory the sandbox creates"""
    created = []
    real_mkdtemp = tempfile.mkdtemp

    def tracking_mkdtemp(*args, **kwargs):
        path = real_mkdtemp(*args, **kwargs)
        created.append(path)
        return path

    monkeypatch.setattr(sandbox.tempfile, "mkdtemp", tracking_mkdtemp)
    return created
