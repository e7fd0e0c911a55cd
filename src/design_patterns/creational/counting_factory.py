"""Factory Method wrapped in a class that only exposes class-level state.

``FactoryGameObjects`` cannot be instantiated or copied; it keeps a count of
every object it has built.
"""

import threading
from typing import Any, Dict, Optional

from design_patterns.domain.game_objects import Boat, GameObject, ObjectType, Plane


class FactoryGameObjects:
    """Creates planes and boats and counts how many of each were made."""

    _plane_count = 0
    _boat_count = 0
    _lock = threading.Lock()

    def __new__(cls, *args, **kwargs):
        raise TypeError(f"{cls.__name__} cannot be instantiated; use its class methods")

    @classmethod
    def create_object(cls, object_type: Any) -> Optional[GameObject]:
        """
        Create a game object and count it.

        Returns:
            A new ``Plane`` or ``Boat``, or None for any other key
        """
        with cls._lock:
            if object_type is ObjectType.PLANE:
                cls._plane_count += 1
                return Plane()
            elif object_type is ObjectType.BOAT:
                cls._boat_count += 1
                return Boat()
        return None

    @classmethod
    def counts(cls) -> Dict[ObjectType, int]:
        return {ObjectType.PLANE: cls._plane_count, ObjectType.BOAT: cls._boat_count}

    @classmethod
    def print_counts(cls) -> None:
        print(f"planes: {cls._plane_count}")
        print(f"boats: {cls._boat_count}")

    @classmethod
    def reset_counts(cls) -> None:
        with cls._lock:
            cls._plane_count = 0
            cls._boat_count = 0


def main() -> None:
    FactoryGameObjects.create_object(ObjectType.PLANE)
    FactoryGameObjects.create_object(ObjectType.BOAT)
    FactoryGameObjects.create_object(ObjectType.BOAT)

    FactoryGameObjects.print_counts()


if __name__ == "__main__":
    main()
