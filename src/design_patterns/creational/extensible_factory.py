"""Extensible factory: object types are registered at runtime.

New game object types can be added by registering a creation callback under
a type name, without touching the factory itself. A level file of
newline-delimited type names then drives which objects get created.
"""

import threading
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from design_patterns.config.manager import get_config_manager
from design_patterns.domain.core.exceptions import ValidationError
from design_patterns.domain.game_objects import Ant, Boat, GameObject, Plane
from design_patterns.infrastructure.logging.logger import get_logger

CreateObjectCallback = Callable[[], GameObject]

logger = get_logger(__name__)


class GameObjectFactory:
    """
    Registry of creation callbacks keyed by type name.

    All state is class-level, so every caller shares one registry.
    """

    _objects: Dict[str, CreateObjectCallback] = {}
    _lock = threading.RLock()

    @classmethod
    def register_object(cls, type_name: str, callback: CreateObjectCallback) -> None:
        """
        Register a creation callback for ``type_name``.

        Registering an existing name replaces its callback.

        Raises:
            ValidationError: If the name is empty or the callback is not callable
        """
        if not isinstance(type_name, str) or not type_name:
            raise ValidationError("Object type name must be a non-empty string", type_name)
        if not callable(callback):
            raise ValidationError(f"Creation callback for '{type_name}' is not callable", callback)

        with cls._lock:
            if type_name in cls._objects:
                logger.info(f"Replacing creation callback for object type: {type_name}")
            cls._objects[type_name] = callback
        logger.debug(f"Registered object type: {type_name}")

    @classmethod
    def unregister_object(cls, type_name: str) -> None:
        """Remove ``type_name`` from the registry; unknown names are ignored."""
        with cls._lock:
            if cls._objects.pop(type_name, None) is not None:
                logger.debug(f"Unregistered object type: {type_name}")

    @classmethod
    def create_single_object(cls, type_name: str) -> Optional[GameObject]:
        """
        Create an object of the registered ``type_name``.

        Returns:
            The new object, or None if the type is not registered
        """
        with cls._lock:
            callback = cls._objects.get(type_name)
        if callback is None:
            logger.debug(f"No creation callback registered for object type: {type_name!r}")
            return None
        return callback()

    @classmethod
    def is_registered(cls, type_name: str) -> bool:
        return type_name in cls._objects

    @classmethod
    def registered_types(cls) -> List[str]:
        with cls._lock:
            return list(cls._objects)

    @classmethod
    def clear_registrations(cls) -> None:
        with cls._lock:
            cls._objects.clear()


def load_level(path: Union[str, Path]) -> List[Optional[GameObject]]:
    """
    Create one game object per line of a level file.

    Trailing whitespace is stripped from each line and blank lines are skipped.
    Unknown type names produce None entries, exactly as the factory returns
    them. A missing file produces an empty list.

    Args:
        path: Level file with one object type name per line

    Returns:
        The created objects, in file order

    Raises:
        ValidationError: If the file exists but cannot be read as UTF-8 text
    """
    level_path = Path(path)
    if not level_path.is_file():
        logger.warning(f"Level file not found: {level_path}")
        return []

    try:
        with open(level_path, "r", encoding="utf-8") as f:
            type_names = [line.rstrip() for line in f]
    except (OSError, UnicodeDecodeError) as e:
        raise ValidationError(f"Failed to read level file {level_path}: {e}", details=str(level_path)) from e

    game_objects: List[Optional[GameObject]] = []
    for type_name in type_names:
        if not type_name:
            continue
        game_objects.append(GameObjectFactory.create_single_object(type_name))

    logger.debug(f"Loaded {len(game_objects)} objects from {level_path}")
    return game_objects


def register_default_objects() -> None:
    GameObjectFactory.register_object("plane", Plane.create)
    GameObjectFactory.register_object("boat", Boat.create)
    GameObjectFactory.register_object("ant", Ant.create)


def main(level_file: Optional[str] = None) -> None:
    register_default_objects()

    if level_file is None:
        level_file = get_config_manager().factory.level_file

    game_object_collection = load_level(level_file)

    for game_object in game_object_collection:
        if game_object is None:
            logger.warning("Skipping unknown object type in level file")
            continue
        game_object.update()
        game_object.render()


if __name__ == "__main__":
    main()
