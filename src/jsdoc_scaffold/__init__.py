"""Insert JSDoc comment scaffolds above JavaScript/TypeScript functions."""

from jsdoc_scaffold.errors import (
    MalformedArgumentsError,
    PathAccessError,
    ScaffoldError,
)
from jsdoc_scaffold.extractors import (
    ASSIGNED_FUNCTION,
    NAMED_FUNCTION,
    SHAPES,
    find_next_signature,
    find_signatures,
    parse_params,
)
from jsdoc_scaffold.files import generate_comments, generate_comments_in_file
from jsdoc_scaffold.generators import (
    annotate_code,
    generate_comments_by_shape,
    generate_comments_in_code,
)
from jsdoc_scaffold.models import (
    CommentBlock,
    GenerationSummary,
    GeneratorOptions,
    ScanResult,
    SignatureShape,
)

__all__ = [
    "ASSIGNED_FUNCTION",
    "CommentBlock",
    "GenerationSummary",
    "GeneratorOptions",
    "MalformedArgumentsError",
    "NAMED_FUNCTION",
    "PathAccessError",
    "SHAPES",
    "ScaffoldError",
    "ScanResult",
    "SignatureShape",
    "annotate_code",
    "find_next_signature",
    "find_signatures",
    "generate_comments",
    "generate_comments_by_shape",
    "generate_comments_in_code",
    "generate_comments_in_file",
    "parse_params",
]
