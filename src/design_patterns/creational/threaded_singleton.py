"""Thread-safe Singleton.

Two threads race to create the instance with different values. The
check-and-create step runs under a lock, so whichever thread acquires it
first wins and both threads end up with the same instance.
"""

import threading
import time
from typing import List, Optional

from design_patterns.config.manager import get_config_manager
from design_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

_print_lock = threading.Lock()

# Only get_instance holds this, so direct construction is rejected
_CREATION_TOKEN = object()

HEADER = (
    "If you see the same value, then singleton was reused (yay!\n"
    "If you see different values, then 2 singletons were created (booo!!)\n\n"
    "RESULT:"
)


class Singleton:
    """A singleton holding the value it was first created with."""

    _instance: Optional["Singleton"] = None
    _lock = threading.Lock()

    def __init__(self, value: str, _token: object = None):
        if _token is not _CREATION_TOKEN:
            raise TypeError("Singleton cannot be constructed directly; use Singleton.get_instance()")
        self._value = value

    def __copy__(self):
        raise TypeError("Singleton instances cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("Singleton instances cannot be copied")

    @classmethod
    def get_instance(cls, value: str) -> "Singleton":
        """
        Get the singleton instance.

        The first call creates it with ``value``; later calls return the
        existing instance and ignore their argument.
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(value, _CREATION_TOKEN)
                    logger.debug(f"Singleton created with value {value!r}")
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None

    @property
    def value(self) -> str:
        return self._value

    def some_business_logic(self) -> None:
        pass


def _thread_body(value: str, delay: float, results: List[str]) -> None:
    time.sleep(delay)
    singleton = Singleton.get_instance(value)
    with _print_lock:
        results.append(singleton.value)
        print(singleton.value)


def main(delay: Optional[float] = None) -> List[str]:
    """
    Race threads for the singleton and print the value each one sees.

    Returns:
        The values observed by the threads, in completion order
    """
    settings = get_config_manager().singleton
    if delay is None:
        delay = settings.thread_delay_seconds

    print(HEADER)

    results: List[str] = []
    threads = [
        threading.Thread(target=_thread_body, args=(value, delay, results), name=f"Thread{value.title()}")
        for value in settings.thread_values
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return results


if __name__ == "__main__":
    main()
