import pytest

from config import Config
from tools import OperationExecutor


@pytest.fixture
def make_config(monkeypatch):
    """Build a Config from a clean environment plus the given overrides."""

    def _make(**env):
        for name in ("OPERATOR_NAME", "HOST", "PORT", "TRANSPORT", "FACTORIAL_LIMIT", "DEBUG", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        env.setdefault("OPERATOR_NAME", "Ada Lovelace")
        for name, value in env.items():
            monkeypatch.setenv(name, str(value))
        return Config()

    return _make


@pytest.fixture
def cfg(make_config):
    return make_config(PORT=9123)


@pytest.fixture
def executor(cfg):
    return OperationExecutor(cfg)
