"""Signature and parameter extraction for JavaScript/TypeScript sources.

Declarations are found with regular expressions, not a parser. Two shapes
are recognized:

    function name(params)       NAMED_FUNCTION
    name = function (params)    ASSIGNED_FUNCTION

Each pattern also captures the tail of the preceding line, so callers can
tell whether the declaration is already documented, and the indentation of
the declaration line, so generated comments line up with it.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from .models import ScanResult, SignatureShape

# Horizontal whitespace only; \s would run into the next line.
_HSPACE = r"[\f\r\t\v ]"

# `^` (without MULTILINE) lets a declaration on the first line match with
# an empty `previous` and `newline`. A non-empty token in `previous` and the
# assigned name must start at a token boundary, otherwise every offset inside
# a long token (minified bundles) is retried and scanning goes quadratic.
_LINE_START = (
    rf"(?P<previous>(?<!\S)\S*\s*|\s*)(?P<newline>\n|^)(?P<indent>{_HSPACE}*)"
)

# e.g. export function name(a, b)
NAMED_FUNCTION = SignatureShape(
    name="named",
    pattern=re.compile(
        _LINE_START + r"[^\n]*function\s+(?P<name>\S+)\s*\((?P<params>.*)\)"
    ),
)

# e.g. let name = function (a, b)
ASSIGNED_FUNCTION = SignatureShape(
    name="assigned",
    pattern=re.compile(
        _LINE_START
        + rf"[^\n]*?(?<!\S)(?P<name>\S+){_HSPACE}*={_HSPACE}*function\s*\("
        + r"(?P<params>.*)\)"
    ),
)

# Order matters: assigned functions are scanned after named ones have been
# annotated.
SHAPES: tuple[SignatureShape, ...] = (NAMED_FUNCTION, ASSIGNED_FUNCTION)

_DEFAULT_PARAM = re.compile(r",\s*(\S+)\s*=")


def _to_scan_result(match: re.Match[str]) -> ScanResult:
    return ScanResult(
        previous=match.group("previous"),
        newline=match.group("newline"),
        indent=match.group("indent"),
        name=match.group("name"),
        params_text=match.group("params"),
        start=match.start(),
    )


def find_signatures(
    text: str, shape: SignatureShape, cursor: int = 0
) -> Iterator[ScanResult]:
    """Lazily yield non-overlapping declarations of one shape, left to right.

    Args:
        text: Source text to scan
        shape: Declaration shape to look for
        cursor: Offset to start scanning from

    Returns:
        Iterator of ScanResult. A fresh iterator is returned on every call;
        no scanning state is shared between calls.
    """
    for match in shape.pattern.finditer(text, cursor):
        yield _to_scan_result(match)


def find_next_signature(
    text: str, shape: SignatureShape, cursor: int = 0
) -> ScanResult | None:
    """Return the first declaration at or after cursor, or None."""
    return next(find_signatures(text, shape, cursor), None)


def parse_params(params_text: str) -> list[str]:
    """Parse the text between a declaration's parentheses into names.

    Only the text before the first ``=`` is split on commas; names of later
    default-valued parameters are recovered from ``, name =`` occurrences.
    A plain parameter that follows a default-valued one is not recovered.

    Example:
        parse_params("a, b = 1, c = 2")  # ["a", "b", "c"]
    """
    first_default = params_text.find("=")
    if first_default == -1:
        names = params_text.split(",")
    else:
        names = params_text[:first_default].split(",")
        # Search from the first "=" so the first default-valued parameter,
        # already in names, is not matched again.
        for match in _DEFAULT_PARAM.finditer(params_text, first_default):
            names.append(match.group(1))

    params: list[str] = []
    for name in names:
        name = name.strip()
        if name and name not in params:
            params.append(name)
    return params
