"""logevent — decode serialized log events (YAML or JSON) and print them."""

import logging
import sys
from argparse import ArgumentParser
from dataclasses import replace

from logevent.config import SUPPORTED_FORMATS, load_config
from logevent.errors import DecodeError, InputError
from logevent.formatter import get_formatter
from logevent.models import Level
from logevent.parser import get_parser

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="logevent",
        description="Decode serialized log events and print them as text.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Event file path(s), one event per file (default: read stdin)",
    )
    parser.add_argument(
        "--format",
        choices=SUPPORTED_FORMATS,
        help="Document syntax of the input (default: yaml, or LOGEVENT_FORMAT)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--require",
        action="append",
        default=[],
        metavar="FIELD",
        help="Document field that must be present (repeatable)",
    )
    parser.add_argument(
        "--level",
        help="Only print events at this level or more severe (e.g. WARN)",
    )
    parser.add_argument(
        "--color",
        action="store_true",
        help="Colorize output by log level (ANSI)",
    )
    return parser


def _decode_file(event_parser, path):
    with open(path, "rb") as f:
        return event_parser.parse_from_stream(f)


def run(args) -> int:
    """Decode every input and print it. Returns the process exit status."""
    try:
        config = load_config(args.config)
    except ValueError as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return 2
    if args.format:
        config = replace(config, input_format=args.format)
    if args.require:
        config = replace(config, required_fields=config.required_fields + tuple(args.require))

    logging.getLogger().setLevel(config.log_level.upper())

    min_level = None
    if args.level:
        try:
            min_level = Level.from_name(args.level)
        except KeyError:
            print(f"Error: unknown level '{args.level}'", file=sys.stderr)
            return 2

    event_parser = get_parser(config)
    formatter = get_formatter(color=args.color)
    failures = 0

    sources = args.files or ["-"]
    for path in sources:
        try:
            if path == "-":
                event = event_parser.parse_from_stream(sys.stdin.buffer)
            else:
                event = _decode_file(event_parser, path)
        except (DecodeError, InputError, OSError) as exc:
            failures += 1
            print(f"{path}: {type(exc).__name__}: {exc}", file=sys.stderr)
            continue

        if min_level is not None and (
            event.level is None or not event.level.is_more_specific_than(min_level)
        ):
            continue
        print(formatter(event))

    logger.info("Decoded %d of %d input(s)", len(sources) - failures, len(sources))
    return 1 if failures else 0


def main():
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [LOGEVENT] %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    parser = build_parser()
    args = parser.parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
