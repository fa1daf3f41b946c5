"""Print freshly generated identifiers in every supported encoding.

Usage:
    python -m examples.encoding [--wide] [--json-logs] [--verbose]
"""

import argparse
import logging
import sys
from typing import ClassVar, Optional, Sequence

from pythonjsonlogger import jsonlogger

from auid import Uid, WideUid, available_encodings
from auid.clock import SystemClock

logger = logging.getLogger("auid.examples")


class ColorFormatter(logging.Formatter):
    """A logging formatter that adds color to the output."""

    grey = "\x1b[38;20m"
    blue = "\x1b[34;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    reset = "\x1b[0m"

    format_str = "%(asctime)s - [%(levelname)s] - %(name)s - %(message)s"

    FORMATS: ClassVar[dict[int, str]] = {
        logging.DEBUG: grey + format_str + reset,
        logging.INFO: blue + format_str + reset,
        logging.WARNING: yellow + format_str + reset,
        logging.ERROR: red + format_str + reset,
    }

    def format(self, record: logging.LogRecord) -> str:
        log_fmt = self.FORMATS.get(record.levelno, self.format_str)
        formatter = logging.Formatter(log_fmt, datefmt="%Y-%m-%d %H:%M:%S")
        return formatter.format(record)


def setup_logging(json_logs: bool = False, verbose: bool = False) -> None:
    """Send log records to stderr, as JSON or coloured text.

    Args:
        json_logs: Emit one JSON object per record instead of coloured text.
        verbose: Lower the threshold to DEBUG, which includes the library's
            decode diagnostics.
    """
    handler = logging.StreamHandler(sys.stderr)
    if json_logs:
        handler.setFormatter(
            jsonlogger.JsonFormatter(
                "%(asctime)s %(levelname)s %(name)s %(message)s",
                rename_fields={"asctime": "@timestamp", "levelname": "level", "name": "logger"},
            )
        )
    else:
        handler.setFormatter(ColorFormatter())

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


def print_uid(uid: Uid) -> None:
    print(f"10: {uid}")
    print(f"16: {uid.to_int() & ((1 << 64) - 1):X}")
    print(f"58: {uid.to_base58()}")
    print(f"64: {uid.to_base64()}")
    for encoding in available_encodings():
        print(f"{encoding.value}: {uid.encode(encoding)}")


def print_wide_uid(wide: WideUid, clock: SystemClock) -> None:
    print(f"wide: {wide}")
    print(f"checksum: {wide.checksum()}")
    print(f"created: {clock.format(wide.created_at)}")
    for encoding in available_encodings():
        print(f"{encoding.value}: {wide.encode(encoding)}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Generate identifiers and print their encodings."""
    parser = argparse.ArgumentParser(description="Print a new identifier in every encoding.")
    parser.add_argument("--wide", action="store_true", help="only print a 128-bit identifier")
    parser.add_argument("--json-logs", action="store_true", help="log as JSON")
    parser.add_argument("--verbose", action="store_true", help="log at DEBUG level")
    args = parser.parse_args(argv)

    setup_logging(json_logs=args.json_logs, verbose=args.verbose)
    clock = SystemClock()

    if not args.wide:
        uid = Uid.new()
        logger.info("generated uid", extra={"uid": uid.serialize()})
        print_uid(uid)
        print()

    wide = WideUid.new()
    logger.info("generated wide uid", extra={"uid": wide.serialize(), "checksum": wide.checksum()})
    print_wide_uid(wide, clock)
    return 0


if __name__ == "__main__":
    sys.exit(main())
