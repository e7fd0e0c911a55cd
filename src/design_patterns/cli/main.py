"""
Main CLI module with argument parsing and demo dispatch.

This module provides the ``design-patterns`` command:
- Command line argument parsing
- Configuration and logging setup
- Routing to the selected demo's ``main()``
"""
import argparse
import os
import sys
from typing import Callable, Dict, List, Optional, Tuple

from design_patterns._version import __version__
from design_patterns.behavioral import strategy, template_method
from design_patterns.config.manager import get_config_manager
from design_patterns.config.schemas import LogLevel
from design_patterns.creational import (
    counting_factory,
    extensible_factory,
    factory_method,
    singleton,
    threaded_singleton,
)
from design_patterns.domain.core.exceptions import DesignPatternsError
from design_patterns.infrastructure.logging.logger import get_logger, setup_logging

DemoRunner = Callable[[argparse.Namespace], None]

DEMOS: Dict[str, Tuple[str, DemoRunner]] = {
    "factory-method": (
        "Factory Method keyed by an enum",
        lambda args: factory_method.main(),
    ),
    "counting-factory": (
        "Factory wrapped in a class that counts created objects",
        lambda args: counting_factory.main(),
    ),
    "extensible-factory": (
        "Runtime-registered factory driven by a level file",
        lambda args: extensible_factory.main(args.level),
    ),
    "singleton": (
        "Lazily created single message log",
        lambda args: singleton.main(),
    ),
    "threaded-singleton": (
        "Singleton guarded by a lock against concurrent first access",
        lambda args: threaded_singleton.main(args.delay),
    ),
    "strategy": (
        "Interchangeable sorting strategies held by a context",
        lambda args: strategy.main(),
    ),
    "template-method": (
        "Fixed operation sequence with overridable steps",
        lambda args: template_method.main(),
    ),
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "design-patterns",
        description="Run object-oriented design pattern demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                                      # List available demos
  %(prog)s strategy                                  # Run the Strategy demo
  %(prog)s extensible-factory --level level1.txt     # Build objects from a level file
  %(prog)s threaded-singleton --delay 0.1            # Race two threads for the singleton
        """,
    )

    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        help="Override the configured logging level",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="demo", help="Available demos")

    subparsers.add_parser("list", help="List available demos")

    for name, (help_text, _) in DEMOS.items():
        demo_parser = subparsers.add_parser(name, help=help_text)
        if name == "extensible-factory":
            demo_parser.add_argument("--level", help="Level file (default: from configuration)")
        elif name == "threaded-singleton":
            demo_parser.add_argument(
                "--delay",
                type=float,
                help="Seconds each thread sleeps before racing (default: from configuration)",
            )

    return parser.parse_args(argv)


def list_demos() -> None:
    width = max(len(name) for name in DEMOS)
    for name, (help_text, _) in DEMOS.items():
        print(f"{name.ljust(width)}  {help_text}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = parse_args(argv)
    logger = get_logger(__name__)

    if not args.demo:
        print("Error: No demo specified. Use --help for usage information.")
        sys.exit(1)

    try:
        config_manager = get_config_manager(args.config)
        logging_config = config_manager.logging
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": args.log_level})
        setup_logging(logging_config)
    except DesignPatternsError as e:
        logger.error(f"Failed to initialize: {e}")
        print(f"Error: {e}")
        sys.exit(1)

    if args.demo == "list":
        list_demos()
        return

    _, runner = DEMOS[args.demo]
    try:
        logger.debug(f"Running demo: {args.demo}")
        runner(args)
    except DesignPatternsError as e:
        logger.error(f"Demo {args.demo} failed: {e}")
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
