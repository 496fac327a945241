"""Walk a file or directory tree and write annotated copies."""

from __future__ import annotations

import logging
import re
import stat
from pathlib import Path

from .errors import PathAccessError
from .generators import annotate_code
from .models import GenerationSummary, GeneratorOptions

log = logging.getLogger(__name__)


def _access_error(action: str, path: Path, e: OSError) -> PathAccessError:
    return PathAccessError(f"Cannot {action} {path}: {e.strerror or e}", path)


def is_excluded(path: Path | str, excludes: tuple[str, ...] | list[str]) -> bool:
    """Check whether any exclude pattern matches anywhere in the path."""
    return any(re.search(pattern, str(path)) for pattern in excludes)


def generate_comments_in_file(
    file: Path, output_dir: Path, summary: GenerationSummary | None = None
) -> Path:
    """Annotate one file and write it to output_dir under the same name.

    Missing output directories are created and an existing output file is
    overwritten.

    Returns:
        Path of the written file

    Raises:
        PathAccessError: If the file cannot be read or the output written.
    """
    file = Path(file)
    output_file = Path(output_dir) / file.name

    # newline="" and surrogateescape keep untouched bytes exactly as they were
    try:
        with open(file, encoding="utf-8", errors="surrogateescape", newline="") as f:
            code = f.read()
    except OSError as e:
        raise _access_error("read", file, e) from e

    annotated, added = annotate_code(code)

    log.info("Add comments to %s", output_file)
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise _access_error("create directory", output_file.parent, e) from e
    try:
        with open(
            output_file, "w", encoding="utf-8", errors="surrogateescape", newline=""
        ) as f:
            f.write(annotated)
    except OSError as e:
        raise _access_error("write", output_file, e) from e

    if summary is not None:
        summary.files.append(output_file)
        summary.scaffolds += added
    return output_file


def _generate(
    path: Path, output_dir: Path, options: GeneratorOptions, summary: GenerationSummary
) -> None:
    if is_excluded(path, options.excludes):
        log.debug("Skipping excluded path %s", path)
        return

    try:
        mode = path.stat().st_mode
    except OSError as e:
        raise _access_error("stat", path, e) from e

    if stat.S_ISDIR(mode):
        try:
            entries = sorted(path.iterdir())
        except OSError as e:
            raise _access_error("list directory", path, e) from e
        # Mirror the input structure: children land under <output>/<dir name>.
        # ".." has no usable name and would escape the output root.
        name = path.resolve().name if path.name == ".." else path.name
        child_output = output_dir / name
        for entry in entries:
            _generate(entry, child_output, options, summary)
    elif path.suffix in options.suffixes:
        generate_comments_in_file(path, output_dir, summary)
    else:
        log.debug("Skipping %s (suffix not in %s)", path, ",".join(options.suffixes))


def generate_comments(
    input_path: Path | str, options: GeneratorOptions | None = None
) -> GenerationSummary:
    """Annotate a file, or every matching file below a directory.

    Paths matching an exclude pattern are skipped at every depth, directories
    included. Processing is depth-first in sorted order and stops at the first
    file-system error.

    Args:
        input_path: File or directory to annotate
        options: Output root, suffixes and exclude patterns (defaults if None)

    Returns:
        GenerationSummary with the files written and blocks inserted

    Raises:
        PathAccessError: On the first stat/readdir/read/mkdir/write failure.
    """
    options = options or GeneratorOptions()
    summary = GenerationSummary()
    _generate(Path(input_path), Path(options.output), options, summary)
    return summary
