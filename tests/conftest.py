import logging

import pytest

from patternbook.config.schemas import DemoConfig
from patternbook.singleton import (
    DoubleCheckedChocolateBoiler,
    SimpleChocolateBoiler,
    SingletonRegistry,
    SynchronizedChocolateBoiler,
)

LAZY_BOILERS = (SimpleChocolateBoiler, SynchronizedChocolateBoiler, DoubleCheckedChocolateBoiler)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Every test starts without lazily created singletons."""
    for boiler in LAZY_BOILERS:
        boiler.reset_instance()
        boiler.creation_delay = 0.0
    SingletonRegistry.get_instance().reset()
    yield
    for boiler in LAZY_BOILERS:
        boiler.reset_instance()
        boiler.creation_delay = 0.0
    SingletonRegistry.get_instance().reset()


@pytest.fixture(autouse=True)
def clean_patternbook_env(monkeypatch):
    """Keep the caller's environment out of configuration loading."""
    monkeypatch.delenv("PATTERNBOOK_CONFIG", raising=False)
    monkeypatch.delenv("PATTERNBOOK_LOG_LEVEL", raising=False)


@pytest.fixture
def demo_config():
    """Demo settings that never block on stdin and keep races short."""
    return DemoConfig(race_delay_seconds=0.01, coffee_answer="no")


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers and level changes made by setup_logging."""
    root = logging.getLogger()
    level = root.level
    handlers = root.handlers[:]
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
