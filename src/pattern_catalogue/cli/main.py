"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Output formatting
"""
import argparse
import os
import sys
from typing import Any, Callable, Dict, List, Optional

from pattern_catalogue._package import __version__
from pattern_catalogue.application.runner import DemoRunner
from pattern_catalogue.bootstrap import create_container
from pattern_catalogue.cli.formatters import format_output
from pattern_catalogue.config.manager import ConfigurationManager
from pattern_catalogue.config.schemas import OUTPUT_FORMATS, AppConfig
from pattern_catalogue.config.schemas.logging_schema import VALID_LEVELS
from pattern_catalogue.domain.exceptions import PatternError
from pattern_catalogue.infrastructure.di import DIContainer
from pattern_catalogue.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalogue.infrastructure.registry import DemoRegistry

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "pattern-catalogue",
        description="Pattern Catalogue - classic design patterns as runnable demonstrations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                          # List all patterns
  %(prog)s run singleton factory         # Run two demos
  %(prog)s run --all                     # Run every enabled demo
  %(prog)s --format table run --all      # Display results as a table
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (YAML or JSON)')
    parser.add_argument('--log-level', choices=VALID_LEVELS, help='Set logging level')
    parser.add_argument('--format', choices=OUTPUT_FORMATS, help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('list', help='List registered patterns')

    run_parser = subparsers.add_parser('run', help='Run pattern demonstrations')
    run_parser.add_argument('patterns', nargs='*', help='Pattern names to run')
    run_parser.add_argument('--all', action='store_true', help='Run every enabled pattern')

    subparsers.add_parser('config', help='Show the effective configuration')

    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command line overrides."""
    config = ConfigurationManager(args.config).app_config
    if args.log_level:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"level": args.log_level})}
        )
    if args.format:
        config = config.model_copy(
            update={"output": config.output.model_copy(update={"format": args.format})}
        )
    return config


def execute_command(args: argparse.Namespace, container: DIContainer) -> Dict[str, Any]:
    """Execute the selected command and return data for formatting."""
    registry = container.get(DemoRegistry)

    if args.command == 'list':
        return {"patterns": [d.to_dict() for d in registry.definitions()]}

    if args.command == 'config':
        return container.get(AppConfig).model_dump()

    if args.command == 'run':
        runner = container.get(DemoRunner)
        if args.all:
            results = runner.run_all(container.get(AppConfig).demos.enabled)
        elif args.patterns:
            results = runner.run_many(args.patterns)
        else:
            raise PatternError("No patterns given. Name one or more patterns, or use --all.")
        return {"results": [r.to_dict() for r in results]}

    raise PatternError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None, out: Callable[[str], None] = print) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when omitted
        out: Receives the formatted output

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args)
        setup_logging(config.logging)
        container = create_container(config)

        result = execute_command(args, container)
        out(format_output(result, config.output.format))
        return 0

    except PatternError as e:
        logger.error("Command failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
