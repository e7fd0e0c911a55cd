"""Strategy: interchangeable algorithms behind a common interface.

The ``Context`` delegates the work to whichever strategy it currently holds
and never needs to know the concrete class.
"""

from abc import ABC, abstractmethod
from typing import Optional

from design_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Strategy(ABC):
    """Operations common to all supported versions of the algorithm."""

    @abstractmethod
    def do_algorithm(self, data: str) -> str:
        pass


class ConcreteStrategyA(Strategy):
    """Normal sorting."""

    def do_algorithm(self, data: str) -> str:
        return "".join(sorted(data))


class ConcreteStrategyB(Strategy):
    """Reverse sorting."""

    def do_algorithm(self, data: str) -> str:
        return "".join(sorted(data, reverse=True))


class Context:
    """
    The interface of interest to clients.

    Holds at most one strategy. It is usually passed to the constructor but
    can be replaced at runtime.
    """

    def __init__(self, strategy: Optional[Strategy] = None):
        self._strategy = strategy

    @property
    def strategy(self) -> Optional[Strategy]:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: Optional[Strategy]) -> None:
        self.set_strategy(strategy)

    def set_strategy(self, strategy: Optional[Strategy]) -> None:
        if strategy is not None and not isinstance(strategy, Strategy):
            raise TypeError(f"Expected a Strategy, got {type(strategy).__name__}")
        logger.debug(f"Context strategy set to {type(strategy).__name__}")
        self._strategy = strategy

    def do_some_business_logic(self, data: str) -> Optional[str]:
        """Run the current strategy over ``data`` and print the result."""
        if self._strategy is None:
            print("Context: Strategy isn't set")
            return None

        print("Context: Sorting data using the strategy (not sure how it'll do it)")
        result = self._strategy.do_algorithm(data)
        print(result)
        return result


def main() -> None:
    context = Context(ConcreteStrategyA())
    print("Client: Strategy is set to normal sorting.")
    context.do_some_business_logic("aecbd")
    print()

    print("Client: Strategy is set to reverse sorting.")
    context.set_strategy(ConcreteStrategyB())
    context.do_some_business_logic("aecbd")


if __name__ == "__main__":
    main()
