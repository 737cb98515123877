"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Logging and configuration bootstrap
- Running one or all examples
"""
import argparse
import sys
from typing import List, Optional

from pattern_catalog import __version__
from pattern_catalog.cli.examples import EXAMPLES
from pattern_catalog.config.manager import get_config_manager
from pattern_catalog.config.schemas import LogLevel
from pattern_catalog.domain.core.exceptions import DomainException
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="pattern-catalog",
        description="Run classic design pattern and SOLID examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                 # List available examples
  %(prog)s run factory          # Run the factory example
  %(prog)s run all              # Run every example
        """,
    )

    parser.add_argument("--config", help="Configuration file path")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured logging level",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    subparsers.add_parser("list", help="List available examples")

    run_parser = subparsers.add_parser("run", help="Run an example")
    run_parser.add_argument("example", choices=[*EXAMPLES, "all"], help="Example to run")

    return parser.parse_args(argv)


def _configure(args: argparse.Namespace) -> None:
    config = get_config_manager(args.config).app_config
    logging_config = config.logging
    if args.log_level:
        logging_config = logging_config.model_copy(update={"level": LogLevel(args.log_level)})
    elif config.debug:
        logging_config = logging_config.model_copy(update={"level": LogLevel.DEBUG})
    setup_logging(logging_config)


def _list_examples() -> None:
    width = max(len(name) for name in EXAMPLES)
    for name, example in EXAMPLES.items():
        print(f"{name.ljust(width)}  {example.description}")


def _run_examples(name: str) -> None:
    names = list(EXAMPLES) if name == "all" else [name]
    for example_name in names:
        if len(names) > 1:
            print(f"== {example_name} ==")
        logger.info("Running example", example=example_name)
        EXAMPLES[example_name].run()


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Returns:
        Process exit code
    """
    args = parse_args(argv)

    try:
        _configure(args)
        if args.command == "list":
            _list_examples()
        else:
            _run_examples(args.example)
    except DomainException as e:
        logger.error("Command failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
