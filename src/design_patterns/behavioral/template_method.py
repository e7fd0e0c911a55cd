"""Template Method: a fixed sequence of steps, some supplied by subclasses."""

from abc import ABC, abstractmethod


class AbstractClass(ABC):
    """
    Defines the skeleton of the algorithm in ``template_method``.

    Subclasses implement the required operations and may override the hooks,
    but leave ``template_method`` itself intact.
    """

    def template_method(self) -> None:
        self.base_operation1()
        self.required_operations1()
        self.base_operation2()
        self.hook1()
        self.required_operation2()
        self.base_operation3()
        self.hook2()

    def base_operation1(self) -> None:
        print("AbstractClass says: I am doing the bulk of the work")

    def base_operation2(self) -> None:
        print("AbstractClass says: But I let subclasses override some operations")

    def base_operation3(self) -> None:
        print("AbstractClass says: But I am doing the bulk of the work anyway")

    @abstractmethod
    def required_operations1(self) -> None:
        pass

    @abstractmethod
    def required_operation2(self) -> None:
        pass

    # Hooks: optional extension points, empty by default
    def hook1(self) -> None:
        pass

    def hook2(self) -> None:
        pass


class ConcreteClass1(AbstractClass):
    def required_operations1(self) -> None:
        print("ConcreteClass1 says: Implemented Operation1")

    def required_operation2(self) -> None:
        print("ConcreteClass1 says: Implemented Operation2")


class ConcreteClass2(AbstractClass):
    """Overrides only a fraction of the base class operations."""

    def required_operations1(self) -> None:
        print("ConcreteClass2 says: Implemented Operation1")

    def required_operation2(self) -> None:
        print("ConcreteClass2 says: Implemented Operation2")

    def hook1(self) -> None:
        print("ConcreteClass2 says: Overridden Hook1")


def client_code(abstract_class: AbstractClass) -> None:
    """Works with any subclass through the base class interface."""
    abstract_class.template_method()


def main() -> None:
    print("Same client code can work with different subclasses:")
    client_code(ConcreteClass1())
    print()
    print("Same client code can work with different subclasses:")
    client_code(ConcreteClass2())


if __name__ == "__main__":
    main()
