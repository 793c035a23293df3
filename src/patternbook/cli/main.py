"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Configuration and logging bootstrap
"""
import argparse
import os
import sys
from typing import List, Optional

from patternbook._version import __version__
from patternbook.config.manager import ConfigurationManager
from patternbook.config.schemas import AppConfig, LogLevel
from patternbook.core.exceptions import PatternbookError, ValidationError
from patternbook.infrastructure.logging.logger import get_logger, setup_logging
from patternbook.registry import get_demo, load_demos

from .formatters import format_output

FORMATS = ["json", "yaml", "table", "list"]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "patternbook",
        description="Narrated, runnable walkthroughs of the classic design patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                       # List all demos
  %(prog)s list --format table        # Display as table
  %(prog)s explain observer           # Read the narration of a pattern
  %(prog)s run decorator factory      # Run two demos
  %(prog)s run --all                  # Run every demo in reading order
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (YAML or JSON)")
    parser.add_argument(
        "--log-level", choices=[level.value for level in LogLevel], help="Override the logging level"
    )
    parser.add_argument("--format", choices=FORMATS, default="table", help="Output format for list")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser("list", help="List the available demos")
    list_parser.add_argument("--format", choices=FORMATS, dest="list_format", help="Output format")

    explain_parser = subparsers.add_parser("explain", help="Print the narrated explanation of a pattern")
    explain_parser.add_argument("pattern", help="Pattern name, see 'list'")

    run_parser = subparsers.add_parser("run", help="Run one or more demos")
    run_parser.add_argument("patterns", nargs="*", help="Pattern names, see 'list'")
    run_parser.add_argument("--all", action="store_true", help="Run every demo in reading order")

    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command line overrides."""
    config = ConfigurationManager(args.config).get_config()
    if args.log_level:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"level": args.log_level})}
        )
    return config


def execute_command(args: argparse.Namespace, config: AppConfig) -> None:
    """Execute the selected command."""
    catalog = load_demos()

    if args.command == "list":
        output_format = args.list_format or args.format
        print(format_output({"demos": [entry.to_dict() for entry in catalog]}, output_format))

    elif args.command == "explain":
        print(get_demo(args.pattern).narration)

    elif args.command == "run":
        if args.all:
            entries = catalog
        elif args.patterns:
            # Resolve every name before running anything
            entries = [get_demo(name) for name in args.patterns]
        else:
            raise ValidationError("Name at least one pattern to run, or pass --all")

        for index, entry in enumerate(entries):
            if index:
                print()
            print(f"===== {entry.name} =====")
            entry.run(config.demo)

    else:
        raise ValidationError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config(args)
        setup_logging(config.logging)
        logger = get_logger(__name__)

        try:
            execute_command(args, config)
        except PatternbookError as e:
            logger.error(f"{type(e).__name__}: {e}")
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)
    except PatternbookError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
