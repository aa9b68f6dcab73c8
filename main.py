#!/usr/bin/env python3
"""
Main Application Entry Point

Command-line interface for running the algorithm demonstrations and
ad-hoc sorts and searches.
"""

import argparse
import sys
from typing import List, Optional

from algokit.services.demonstration_service import DemonstrationService, SEARCH_MODES
from algokit.core.exceptions import ConfigurationError
from algokit.core.logging_config import configure_from_settings, get_logger
from algokit.config.settings import get_settings, parse_int_list

logger = get_logger(__name__)

DEMOS = ('all', 'linked-list', 'quick-sort', 'binary-search')


def int_list(raw: str) -> List[int]:
    """
    Argparse type converter for comma-separated integers.

    Args:
        raw: Text such as "5,3,1"

    Returns:
        List of parsed integers

    Raises:
        argparse.ArgumentTypeError: If an entry is not an integer
    """
    try:
        return parse_int_list(raw)
    except ConfigurationError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def run_demo(service: DemonstrationService, demo: str) -> bool:
    """
    Run one demonstration (or all of them) and print its output.

    Args:
        service: Demonstration service
        demo: Demonstration name from DEMOS

    Returns:
        True if the demonstration succeeded, False otherwise
    """
    runners = {
        'all': service.run_all,
        'linked-list': service.demonstrate_linked_list,
        'quick-sort': service.demonstrate_quick_sort,
        'binary-search': service.demonstrate_binary_search,
    }
    result = runners[demo]()

    if result.is_failure():
        logger.error(result.get_error())
        return False

    print('\n'.join(result.get_value()))
    return True


def run_sort(service: DemonstrationService, values: List[int]) -> bool:
    """
    Sort integers and print the result.

    Args:
        service: Demonstration service
        values: Values to sort

    Returns:
        True on success, False otherwise
    """
    result = service.sort_values(values)

    if result.is_failure():
        logger.error(result.get_error())
        return False

    print(f"[{', '.join(str(value) for value in result.get_value())}]")
    return True


def run_search(service: DemonstrationService, values: List[int], target: int, mode: str) -> bool:
    """
    Search integers for a target and print the index.

    Args:
        service: Demonstration service
        values: Ascending values
        target: Value to find
        mode: Search variant

    Returns:
        True on success (found or not), False on failure
    """
    result = service.search_values(values, target, mode)

    if result.is_failure():
        logger.error(result.get_error())
        return False

    index = result.get_value()
    if index == -1:
        print(f"Element {target} not found")
    else:
        print(f"Element {target} found at index {index}")
    return True


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        description='Demonstrate a linked list, quick sort and binary search'
    )

    parser.add_argument(
        '--demo',
        choices=DEMOS,
        default='all',
        help='Demonstration to run (default: all)'
    )

    operation = parser.add_mutually_exclusive_group()

    operation.add_argument(
        '--sort',
        type=int_list,
        metavar='VALUES',
        help='Sort comma-separated integers instead of running a demonstration'
    )

    operation.add_argument(
        '--search',
        type=int,
        metavar='TARGET',
        help='Search --values for TARGET instead of running a demonstration'
    )

    parser.add_argument(
        '--values',
        type=int_list,
        help='Ascending comma-separated integers searched by --search'
    )

    parser.add_argument(
        '--mode',
        choices=SEARCH_MODES,
        default='iterative',
        help='Binary search variant used by --search (default: iterative)'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        help='Override LOG_LEVEL from the environment'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.search is not None and args.values is None:
        parser.error('--search requires --values')

    try:
        settings = get_settings()
        configure_from_settings(settings, level=args.log_level)

        if not settings.validate():
            logger.error("Invalid settings: demonstration search data must be non-empty and sorted ascending")
            return 1

        service = DemonstrationService(settings=settings)

        if args.sort is not None:
            success = run_sort(service, args.sort)
        elif args.search is not None:
            success = run_search(service, args.values, args.search, args.mode)
        else:
            success = run_demo(service, args.demo)

        return 0 if success else 1

    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {str(e)}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Fatal error: {str(e)}", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
