import logging

import pytest

from reliadist.core.config import ReliaDistConfiguration


@pytest.fixture
def reset_singleton(monkeypatch):
    """Returns a function forcing the next call to a singleton class to create a new instance."""
    def reset(cls):
        monkeypatch.setattr(cls, "_Singleton__instance", None)
    return reset


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch, reset_singleton):
    """Run each test with default configuration, out of the user home folder."""
    config_dir = tmp_path_factory.mktemp("reliadist.d")
    monkeypatch.setenv("RELIADIST_CONFIG_DIR", str(config_dir))
    reset_singleton(ReliaDistConfiguration)
    return config_dir


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level modified by `set_log`."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    try:
        yield root
    finally:
        for handler in root.handlers[:]:
            if handler not in handlers:
                handler.close()
                root.removeHandler(handler)
        root.setLevel(level)
