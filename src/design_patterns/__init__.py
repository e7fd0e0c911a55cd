"""Design Patterns - Root Package.

A collection of small, self-contained object-oriented design pattern
demonstrations. Each demo module exposes a ``main()`` function that prints
illustrative output to standard output.

Key Components:
    - creational: Factory Method, counting factory, extensible factory, Singleton
    - behavioral: Strategy and Template Method
    - domain: game objects shared by the factory demos and the error types
    - config: typed configuration loaded from JSON/YAML files and the environment
    - infrastructure: logging setup and generic singleton support
    - cli: the ``design-patterns`` command that runs a demo by name

Usage:
    >>> design-patterns list
    >>> design-patterns extensible-factory --level level1.txt
"""

from ._version import __version__

__author__ = "Design Patterns Contributors"
__package_name__ = "design-patterns"
