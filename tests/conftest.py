import logging

import pytest

from design_patterns.creational.counting_factory import FactoryGameObjects
from design_patterns.creational.extensible_factory import GameObjectFactory
from design_patterns.creational.threaded_singleton import Singleton
from design_patterns.domain.game_objects import Ant, Boat, Plane
from design_patterns.infrastructure.logging.logger import DetailedFormatter
from design_patterns.infrastructure.patterns.singleton_registry import SingletonRegistry

ENV_VARS = (
    "DESIGN_PATTERNS_CONFIG",
    "DESIGN_PATTERNS_LOG_LEVEL",
    "DESIGN_PATTERNS_LEVEL_FILE",
    "DESIGN_PATTERNS_THREAD_DELAY",
)


@pytest.fixture(autouse=True)
def isolated_state(tmp_path, monkeypatch):
    """Reset class-level pattern state and keep tests away from real config files."""
    for env_var in ENV_VARS:
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.chdir(tmp_path)

    root_logger = logging.getLogger()
    saved_level = root_logger.level

    SingletonRegistry.get_instance().clear()
    Singleton.reset_instance()
    FactoryGameObjects.reset_counts()
    GameObjectFactory.clear_registrations()
    for object_class in (Plane, Boat, Ant):
        object_class.reset_count()

    yield

    # Drop handlers installed by setup_logging; pytest manages its own
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, DetailedFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(saved_level)


@pytest.fixture
def level_file(tmp_path):
    """Create a level file with the given lines."""
    def _create(*lines, name="level1.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _create


@pytest.fixture
def fast_singleton_race(monkeypatch):
    """Make the threaded singleton demo race without the default one second sleep."""
    monkeypatch.setenv("DESIGN_PATTERNS_THREAD_DELAY", "0")
