"""Data models for signature scanning and comment generation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

DESCRIPTION_TODO = "function_description_todo"
PARAM_TYPE_TODO = "param_type_todo"
PARAM_DESCRIPTION_TODO = "param_description_todo"
RETURNS_TYPE_TODO = "returns_type_todo"
RETURNS_DESCRIPTION_TODO = "returns_description_todo"

COMMENT_CLOSE = "*/"


@dataclass(frozen=True)
class SignatureShape:
    """A recognizable function declaration form.

    The pattern must define the named groups ``previous``, ``newline``,
    ``indent``, ``name`` and ``params``.
    """

    name: str
    pattern: re.Pattern[str]


@dataclass(frozen=True)
class ScanResult:
    """One function declaration found in source text."""

    previous: str  # Tail of the preceding line, plus whitespace
    newline: str  # "\n", or "" when the declaration is on the first line
    indent: str  # Indentation of the declaration line
    name: str  # Function or variable name (not used by the template)
    params_text: str  # Raw text between the parentheses
    start: int  # Offset where the match begins

    @property
    def insert_at(self) -> int:
        """Offset where a comment block goes (before the declaration's newline)."""
        return self.start + len(self.previous)

    @property
    def is_documented(self) -> bool:
        """True when the preceding line already closes a block comment."""
        return self.previous.rstrip().endswith(COMMENT_CLOSE)


@dataclass
class CommentBlock:
    """Placeholder JSDoc block for a single function."""

    indent: str
    params: list[str] = field(default_factory=list)

    def render(self) -> str:
        """Render the block, every line prefixed with the indentation.

        Parameters that are empty after trimming get no @param line.
        """
        indent = self.indent
        lines = [f"{indent}/**", f"{indent}* {DESCRIPTION_TODO}"]
        for param in self.params:
            name = param.strip()
            if name:
                lines.append(
                    f"{indent}* @param {{{PARAM_TYPE_TODO}}} {name}"
                    f" - {PARAM_DESCRIPTION_TODO}"
                )
        lines.append(
            f"{indent}* @returns {{{RETURNS_TYPE_TODO}}} {RETURNS_DESCRIPTION_TODO}"
        )
        lines.append(f"{indent}{COMMENT_CLOSE}")
        return "\n".join(lines)


@dataclass
class GeneratorOptions:
    """Settings for one run over a file or directory tree."""

    output: Path = Path("out")
    suffixes: tuple[str, ...] = (".js", ".ts")
    excludes: tuple[str, ...] = ("node_modules",)


@dataclass
class GenerationSummary:
    """Results from one run."""

    files: list[Path] = field(default_factory=list)  # Output files written
    scaffolds: int = 0  # Comment blocks inserted across all files
