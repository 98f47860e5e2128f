# main.py
# Command-line entry point: prints every conflict-free schedule for a class catalog.

import argparse
import logging
import sys

from catalog import DEFAULT_OPTIONS_FILE, ConfigError, load_options
from schedule_finder import generate_schedules
from schedule_printer import print_schedule

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="List every conflict-free weekly class schedule.")
    parser.add_argument("path", nargs="?", default=DEFAULT_OPTIONS_FILE,
                        help="class catalog (.toml or .json), default: %(default)s")
    parser.add_argument("--limit", type=int, default=None, help="stop after this many schedules")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)
    if args.limit is not None and args.limit < 1:
        parser.error("--limit must be at least 1")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        options = load_options(args.path)
    except ConfigError as e:
        logger.error("%s", e)
        return 1

    count = generate_schedules(options, print_schedule, limit=args.limit)
    if count:
        logger.info("Found %d valid schedules", count)
    else:
        logger.info("No valid schedules found")
    return 0


if __name__ == "__main__":
    sys.exit(main())
