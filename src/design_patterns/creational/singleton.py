"""Singleton: one shared message log, created lazily on first access."""

from typing import List, Tuple

from design_patterns.infrastructure.patterns.singleton_access import get_singleton

# Only get_instance holds this, so direct construction is rejected
_CREATION_TOKEN = object()


class MessageLogger:
    """
    Collects messages in the single shared instance.

    Always obtain it through ``MessageLogger.get_instance()``.
    """

    def __init__(self, _token: object = None):
        if _token is not _CREATION_TOKEN:
            raise TypeError("MessageLogger is a singleton; use MessageLogger.get_instance()")
        self._messages: List[str] = []
        print("Logger was created")

    @classmethod
    def get_instance(cls) -> "MessageLogger":
        """Retrieve the single instance, creating it on the first call."""
        return get_singleton(cls, _CREATION_TOKEN)

    @property
    def messages(self) -> Tuple[str, ...]:
        return tuple(self._messages)

    def add_message(self, message: str) -> None:
        self._messages.append(message)

    def print_messages(self) -> None:
        print("Accessing the log")
        for message in self._messages:
            print(message)


def main() -> None:
    MessageLogger.get_instance().add_message("Hello")
    MessageLogger.get_instance().add_message("World")
    MessageLogger.get_instance().print_messages()


if __name__ == "__main__":
    main()
