"""Factory Method keyed by an enum.

The factory hides which concrete class is built: callers only ever see the
``GameObject`` interface.
"""

from typing import Any, Optional

from design_patterns.domain.game_objects import Boat, GameObject, ObjectType, Plane


def make_object(object_type: Any) -> Optional[GameObject]:
    """
    Create the game object for ``object_type``.

    Args:
        object_type: An ``ObjectType`` member

    Returns:
        A new ``Plane`` or ``Boat``, or None for any other key
    """
    if object_type is ObjectType.PLANE:
        return Plane()
    elif object_type is ObjectType.BOAT:
        return Boat()
    return None


def main() -> None:
    my_object = make_object(ObjectType.PLANE)
    my_object2 = make_object(ObjectType.BOAT)
    print(f"Created {my_object!r}")
    print(f"Created {my_object2!r}")


if __name__ == "__main__":
    main()
