"""Command-line interface for bibicode.

WHY: Users need to convert numbers from the terminal and in shell
pipelines: "bibicode -f dec -t bibi 2000" or "cat ids.txt | bibicode
-f hex -t base58". The CLI wires the system provider, the Coder and the
multi-number front end behind a single command.

HOW: Uses argparse for options. Systems are resolved through a
SystemProvider built from the catalog and the user data directory. Numbers
come from positional arguments, or from stdin line by line when none are
given. Each input line produces one output line on stdout. Errors go to
stderr and exit with status 1.

RULES:
- Positional arguments: numbers to convert (all printed on one line)
- No positional arguments: read stdin, one output line per input line
  that contains at least one number
- --from/--to take a catalog name, a JSON file path, or a data-dir name
- --from auto picks the source system per number from its prefix,
  falling back to dec
- --concat writes the target prefix once and glues the outputs together
- --list and --describe print information and exit without converting
- Results go to stdout, errors and log records to stderr
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import re
import sys
from collections.abc import Callable, Iterator
from typing import Dict, List, Optional, Pattern

from bibicode.config import (
    AUTODETECT_NAME,
    DEFAULT_FROM,
    DEFAULT_OUTPUT_SEPARATOR,
    DEFAULT_TO,
    LOG_LEVEL,
    data_dir,
)
from bibicode.core.coder import Coder
from bibicode.core.numeral import NumeralSystem, autodetect
from bibicode.errors import BibicodeError
from bibicode.frontend import OutputFormat, join_outputs, split_numbers
from bibicode.systems.provider import SystemProvider

logger = logging.getLogger(__name__)

_FALLBACK_SOURCE = "dec"
_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _error(msg: str) -> None:
    """Print an error message to stderr."""
    print("Error: {}".format(msg), file=sys.stderr, flush=True)


def _build_converter(
    provider: SystemProvider,
    from_name: str,
    target: NumeralSystem,
    width: int,
) -> Callable[[str], str]:
    """Return a function converting one number string to the target system.

    WHY: With a fixed source system one Coder does all the work. With
    --from auto, each number may belong to a different system, so the
    source is detected per number and one Coder is kept per source.

    RULES:
    - Autodetect candidates are the provider's catalog systems with a prefix
    - Numbers without a recognized prefix are read as decimal
    """
    if from_name != AUTODETECT_NAME:
        coder = Coder(provider.resolve(from_name), target)
        logger.info(
            "Converting from %s (base %d) to base %d",
            from_name, coder.source.base, target.base,
        )
        return lambda number: coder.swap(number, width)

    candidates = [
        provider.resolve(name)
        for name, definition in provider.catalog.items()
        if definition.prefix
    ]
    fallback = provider.resolve(_FALLBACK_SOURCE)
    coders: Dict[NumeralSystem, Coder] = {}

    def convert(number: str) -> str:
        source = autodetect(number, candidates) or fallback
        coder = coders.get(source)
        if coder is None:
            coder = coders[source] = Coder(source, target)
        logger.debug("Detected base %d for %s", source.base, number)
        return coder.swap(number, width)

    return convert


def _iter_inputs(
    numbers: List[str],
    regex: Optional[Pattern[str]],
) -> Iterator[List[str]]:
    """Yield the numbers of each output line.

    Positional numbers form one line. Without them, stdin is read line by
    line and lines holding no number are skipped.
    """
    if numbers:
        if regex is None:
            yield list(numbers)
        else:
            yield [n for arg in numbers for n in split_numbers(arg, regex)]
        return

    for line in sys.stdin:
        found = split_numbers(line, regex)
        if found:
            yield found


def _print_systems(provider: SystemProvider) -> None:
    """Print one line per available system; broken user files are skipped."""
    for name in provider.available():
        try:
            system = provider.resolve(name)
        except BibicodeError as e:
            logger.warning("Skipping numeral system %s: %s", name, e)
            continue
        prefix = " (prefix {})".format(system.prefix) if system.prefix else ""
        print("{:<10} base {}{}".format(name, system.base, prefix))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Kept separate from main() so tests can inspect the parser.
    """
    parser = argparse.ArgumentParser(
        prog="bibicode",
        description="Convert natural numbers of any length from one numeral "
                    "system to another. Numeral systems are built-in names "
                    "(dec, hex, bin, oct, bibi, budu, utf8, base58), JSON "
                    "definition files, or files in the user data directory.",
    )

    parser.add_argument(
        "numbers",
        nargs="*",
        metavar="NUMBER",
        help="Numbers to convert. If none are given, read from standard input.",
    )

    parser.add_argument(
        "-f", "--from",
        dest="from_system",
        default=DEFAULT_FROM,
        metavar="SYSTEM",
        help="Numeral system of the input numbers, or '{}' to detect it from "
             "the prefix (default: %(default)s).".format(AUTODETECT_NAME),
    )

    parser.add_argument(
        "-t", "--to",
        dest="to_system",
        default=DEFAULT_TO,
        metavar="SYSTEM",
        help="Numeral system of the output numbers (default: %(default)s).",
    )

    parser.add_argument(
        "-c", "--concat",
        action="store_true",
        help="Concatenate the outputs into one number when several are given.",
    )

    parser.add_argument(
        "-s", "--outseparator",
        default=DEFAULT_OUTPUT_SEPARATOR,
        help="Separator between printed numbers (default: a space).",
    )

    parser.add_argument(
        "-p", "--outprefix",
        default="",
        help="Text printed before the result.",
    )

    parser.add_argument(
        "-x", "--outsuffix",
        default="",
        help="Text printed after the result.",
    )

    parser.add_argument(
        "-r", "--regex",
        default=None,
        help="Regular expression matching the numbers to convert in the input.",
    )

    parser.add_argument(
        "-w", "--width",
        type=int,
        default=0,
        help="Minimum number of output digits, padded with the zero digit.",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available numeral systems and exit.",
    )

    parser.add_argument(
        "--describe",
        default=None,
        metavar="SYSTEM",
        help="Print the JSON definition of a numeral system and exit.",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL if LOG_LEVEL in _LOG_LEVELS else "WARNING",
        choices=_LOG_LEVELS,
        help="Logging level for diagnostics on stderr (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Any BibicodeError or bad --regex exits with status 1
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    provider = SystemProvider(directory=data_dir())

    try:
        if args.list:
            _print_systems(provider)
            return
        if args.describe:
            print(provider.definition(args.describe).to_json())
            return

        regex = re.compile(args.regex) if args.regex else None
        target = provider.resolve(args.to_system)
        output_target = dataclasses.replace(target, prefix="") if args.concat else target
        convert = _build_converter(provider, args.from_system, output_target, args.width)
        fmt = OutputFormat(
            separator=args.outseparator,
            prefix=args.outprefix,
            suffix=args.outsuffix,
            concat=args.concat,
        )

        for numbers in _iter_inputs(args.numbers, regex):
            outputs = [convert(number) for number in numbers]
            print(join_outputs(outputs, fmt, system_prefix=target.prefix))
    except re.error as e:
        _error("invalid regular expression: {}".format(e))
        sys.exit(1)
    except BibicodeError as e:
        _error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
