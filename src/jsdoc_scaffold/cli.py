"""Command-line entry point.

Usage:
    jsdoc-scaffold <file/folder path> [<flag> <value>]...

Arguments after the path come in flag/value pairs, so a valid invocation
always has an odd number of arguments.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from pathlib import Path

from .errors import MalformedArgumentsError, PathAccessError
from .files import generate_comments
from .models import GeneratorOptions

log = logging.getLogger(__name__)

USAGE = """\
Usage: jsdoc-scaffold <file/folder path> [<options>]...
Options:
   -s, --suffix <value,value,...>
       Only add comments to file with assigned suffixes. Default: .js,.ts
   -o, --output <value>
       The output path of files with comments. Default: ./out
   -e, --exclude <value,value,...>
       Exclude files/folders with assigned patterns. Default: node_modules"""

EXIT_OK = 0
EXIT_PATH_ERROR = 1
EXIT_USAGE = 2


def show_help() -> None:
    """Print usage of this tool."""
    print(USAGE)


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(value.split(","))


def parse_args(args: list[str]) -> tuple[Path, GeneratorOptions]:
    """Parse ``<path> [<flag> <value>]...`` into an input path and options.

    Raises:
        MalformedArgumentsError: On an even argument count, an unknown flag
            or an exclude pattern that is not a valid regular expression.
    """
    if len(args) % 2 == 0:
        raise MalformedArgumentsError(
            f"Expected a path followed by flag/value pairs, got {len(args)} argument(s)"
        )

    input_path = Path(args[0])
    options = GeneratorOptions()

    for index in range(1, len(args), 2):
        key, value = args[index], args[index + 1]
        if key in ("-s", "--suffix"):
            options.suffixes = _split_csv(value)
        elif key in ("-o", "--output"):
            options.output = Path(value)
        elif key in ("-e", "--exclude"):
            options.excludes = _split_csv(value)
        else:
            raise MalformedArgumentsError(f"Unknown option: {key}")

    for pattern in options.excludes:
        try:
            re.compile(pattern)
        except re.error as e:
            raise MalformedArgumentsError(
                f"Invalid exclude pattern {pattern!r}: {e}"
            ) from e

    return input_path, options


def _log_level() -> str:
    """Level name from JSDOC_SCAFFOLD_LOG_LEVEL, INFO when unset or unknown."""
    level = os.environ.get("JSDOC_SCAFFOLD_LOG_LEVEL", "INFO").upper()
    # getLevelName maps known names to ints and anything else to "Level <name>"
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level


def _configure_logging() -> None:
    logging.basicConfig(
        level=_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Annotate the given file or directory. Returns the process exit code."""
    _configure_logging()
    args = sys.argv[1:] if argv is None else argv

    try:
        input_path, options = parse_args(args)
    except MalformedArgumentsError as e:
        log.debug("%s", e)
        show_help()
        return EXIT_USAGE

    try:
        summary = generate_comments(input_path, options)
    except PathAccessError as e:
        log.error("%s", e)
        return EXIT_PATH_ERROR

    print(
        f"\nDone! {summary.scaffolds} comment(s) added to {len(summary.files)} file(s)"
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
