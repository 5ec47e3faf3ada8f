"""
Command line interface for recordkit.

Usage:
    recordkit ordinal 22
    recordkit demo --count 5
    recordkit --verbose demo
"""

import sys

import fire
from loguru import logger

from recordkit.records.collection import RecordCollection
from recordkit.text.ordinal import with_ordinal


def configure_logging(verbose: bool = False) -> None:
    """Send recordkit logs to stderr, at DEBUG level when verbose."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")
    logger.enable("recordkit")


class Commands:
    """recordkit command line tools."""

    def __init__(self, verbose: bool = False):
        configure_logging(verbose)

    def ordinal(self, value: int) -> str:
        """Print a number with its ordinal suffix, e.g. 22 -> 22nd."""
        return with_ordinal(value)

    def demo(self, count: int = 10) -> None:
        """Populate a record collection and log a few lookups on it."""
        uncles = RecordCollection.populate(
            count,
            lambda index: {
                "index": index,
                "label": f"is your {with_ordinal(index)} favourite uncle",
            },
        )
        logger.info(f"Populated {len(uncles)} records")

        for row in uncles.extract_map("index", "label"):
            logger.info(f"{row['index']}: {row['label']}")

        logger.info(f"Last record: {uncles.last}")
        logger.info(f"Record with index {count - 1}: {uncles.find_by('index', count - 1)}")


def main() -> None:
    fire.Fire(Commands)


if __name__ == "__main__":
    main()
