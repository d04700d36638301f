"""Command-line demo that replays cache operations."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass

from pydantic import ValidationError as ConfigValidationError

from ...config import DEMO_CAPACITY, DEMO_READS, DEMO_WRITES, CapacityPolicy
from ...domain.entities.cache import RecencyCache
from ...domain.value_objects.config import CacheConfig
from ...exceptions import RecencyCacheError
from ...utils.env import setup_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Operation:
    """A single write (KEY=VALUE) or read (KEY)."""
    key: int
    value: str | None = None

    @property
    def is_write(self) -> bool:
        return self.value is not None


def parse_operation(text: str) -> Operation:
    """Parse KEY=VALUE into a write and KEY into a read."""
    key_text, sep, value = text.partition("=")
    try:
        key = int(key_text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid operation {text!r}: key must be an integer"
        ) from None
    return Operation(key, value if sep else None)


def demo_operations() -> list[Operation]:
    """Operations of the reference demonstration."""
    ops = [Operation(key, value) for key, value in DEMO_WRITES]
    ops.extend(Operation(key) for key in DEMO_READS)
    return ops


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="recency-cache",
        description="Replay writes and reads against a write-recency cache",
        epilog="Use '--' before operations whose key is negative, e.g. -- -5=x -5"
    )

    parser.add_argument(
        "operations",
        nargs="*",
        type=parse_operation,
        metavar="OP",
        help="KEY=VALUE to write, KEY to read (default: the built-in demo)"
    )

    parser.add_argument(
        "-c", "--capacity",
        type=int,
        default=DEMO_CAPACITY,
        help=f"Maximum number of entries (default: {DEMO_CAPACITY})"
    )

    parser.add_argument(
        "--policy",
        choices=[p.value for p in CapacityPolicy],
        default=CapacityPolicy.STRICT.value,
        help="Handling of capacity <= 0: strict fails, clamp runs unbounded (default: strict)"
    )

    parser.add_argument(
        "--log-file",
        help="Also write logs to this file"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    return parser


def run(cache: RecencyCache, operations: list[Operation]) -> list[str]:
    """Apply operations in order and return the result of every read."""
    results = []
    for op in operations:
        if op.is_write:
            cache.write(op.key, op.value)
        else:
            results.append(cache.read(op.key))
    return results


def main(args: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    setup_logging(
        logging.DEBUG if parsed.verbose else logging.WARNING,
        log_file=parsed.log_file
    )

    try:
        config = CacheConfig(capacity=parsed.capacity, policy=CapacityPolicy(parsed.policy))
        cache = RecencyCache.from_config(config)
    except (ConfigValidationError, RecencyCacheError) as e:
        logger.error(f"Failed to create cache: {e}")
        return 1

    operations = parsed.operations or demo_operations()
    logger.debug(f"Replaying {len(operations)} operation(s) on {cache!r}")

    print(f"The size of this LRU Cache is : {cache.capacity_limit()}")
    for value in run(cache, operations):
        print(value)

    logger.debug(f"Finished with {cache!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
