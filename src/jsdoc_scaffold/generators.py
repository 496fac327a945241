"""Comment scaffold injection."""

from __future__ import annotations

import logging

from .extractors import SHAPES, find_signatures, parse_params
from .models import CommentBlock, SignatureShape

log = logging.getLogger(__name__)

BOM = "\ufeff"


def generate_comments_by_shape(code: str, shape: SignatureShape) -> tuple[str, int]:
    """Insert a comment block above every undocumented declaration of one shape.

    Text outside the inserted blocks is copied unchanged, including the
    declaration lines themselves.

    Args:
        code: Source text
        shape: Declaration shape to annotate

    Returns:
        Tuple of (annotated text, number of blocks inserted)
    """
    pieces: list[str] = []
    last = 0
    added = 0

    for scan in find_signatures(code, shape):
        if scan.is_documented:
            continue

        block = CommentBlock(scan.indent, parse_params(scan.params_text)).render()
        insert_at = scan.insert_at
        if scan.newline:
            block = "\n" + block
        else:
            # First line of the text: nothing precedes the declaration but a BOM
            if code.startswith(BOM):
                insert_at = len(BOM)
            block = block + "\n"
        pieces.append(code[last:insert_at])
        pieces.append(block)
        last = insert_at
        added += 1

    pieces.append(code[last:])
    log.debug("Inserted %d %s function comment(s)", added, shape.name)
    return "".join(pieces), added


def annotate_code(code: str) -> tuple[str, int]:
    """Run every shape over the text in turn.

    Each shape scans the output of the previous one, so offsets shifted by
    earlier insertions are handled and earlier blocks count as documentation.
    """
    total = 0
    for shape in SHAPES:
        code, added = generate_comments_by_shape(code, shape)
        total += added
    return code, total


def generate_comments_in_code(code: str) -> str:
    """Return the text with comment scaffolds inserted."""
    return annotate_code(code)[0]
