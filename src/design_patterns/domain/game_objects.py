"""Game objects created by the factory demos."""

from abc import ABC, abstractmethod
from enum import Enum


class ObjectType(Enum):
    """Object kinds understood by the enum-keyed factories. Plain strings are not keys."""
    PLANE = "plane"
    BOAT = "boat"


class GameObject(ABC):
    """
    Interface every game object implements.

    Subclasses count their own constructions in ``objects_created`` and
    provide ``create()`` as the creation callback used by the factories.
    """

    objects_created = 0

    def __init__(self, x: int = 0, y: int = 0):
        self.x = x
        self.y = y
        # Increment on the concrete class so each variant keeps its own count
        type(self).objects_created += 1

    @classmethod
    def create(cls) -> "GameObject":
        """Creation callback: build an object at the origin."""
        return cls(0, 0)

    @classmethod
    def reset_count(cls) -> None:
        cls.objects_created = 0

    @abstractmethod
    def play_default_animation(self) -> None:
        pass

    @abstractmethod
    def move_in_game(self) -> None:
        pass

    @abstractmethod
    def update(self) -> None:
        pass

    @abstractmethod
    def render(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x}, y={self.y})"


class Plane(GameObject):
    objects_created = 0

    def play_default_animation(self) -> None:
        pass

    def move_in_game(self) -> None:
        pass

    def update(self) -> None:
        pass

    def render(self) -> None:
        print("plane")


class Boat(GameObject):
    objects_created = 0

    def play_default_animation(self) -> None:
        pass

    def move_in_game(self) -> None:
        pass

    def update(self) -> None:
        pass

    def render(self) -> None:
        print("boat")


class Ant(GameObject):
    """Registered at runtime only; the enum-keyed factories know nothing about it."""

    objects_created = 0

    def play_default_animation(self) -> None:
        pass

    def move_in_game(self) -> None:
        pass

    def update(self) -> None:
        pass

    def render(self) -> None:
        print("ant")
