"""
Ignore rules for dirliner.

Patterns come from an optional ignore file and from the command line. They
use gitignore wildmatch syntax (via ``pathspec``) and are matched
case-insensitively against paths relative to the source directory.
"""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from .errors import ConfigFileError, PatternError

try:
    import pathspec  # type: ignore
except ImportError:  # pragma: no cover
    sys.stderr.write(
        "Error: 'pathspec' library is required. Install via 'pip install pathspec'.\n"
    )
    sys.exit(1)

PathLike = Union[str, "os.PathLike[str]"]


def normalize_pattern(pattern: str) -> str:
    """
    Normalize a single ignore pattern.

    Returns an empty string for blank lines, comments and negations. A
    trailing ``/`` becomes ``/**`` so the rule covers the directory and
    everything beneath it.
    """
    normalized = pattern.strip()

    # Skip empty patterns and comments
    if not normalized or normalized.startswith("#"):
        return ""

    # Negations never re-include a path
    if normalized.startswith("!"):
        return ""

    # Handle directory patterns
    if normalized.endswith("/"):
        normalized = f"{normalized}**"

    return normalized


def _read_ignore_file(ignore_file: Path) -> List[str]:
    try:
        with ignore_file.open("r", encoding="utf-8") as fh:
            return fh.read().split("\n")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(f"Could not read ignore file '{ignore_file}': {e}")


def parse_ignore_patterns(
    patterns: Iterable[str] = (),
    ignore_file: Optional[PathLike] = None,
    logger=None,
) -> List[str]:
    """
    Combine ignore-file patterns and explicit patterns into one list.

    Ignore-file patterns come first, then explicit ones. Duplicates are
    dropped, keeping the first occurrence. A missing ignore file contributes
    nothing; one that exists but cannot be read raises ``ConfigFileError``.
    """
    raw: List[str] = []
    if ignore_file is not None:
        ignore_path = Path(ignore_file)
        if ignore_path.is_file():
            raw.extend(_read_ignore_file(ignore_path))
        elif ignore_path.exists():
            raise ConfigFileError(f"'{ignore_path}' is not a file")
    raw.extend(patterns)

    result: List[str] = []
    for line in raw:
        normalized = normalize_pattern(line)
        if not normalized:
            if logger is not None and line.strip().startswith("!"):
                logger.debug(f"Dropping negation pattern: {line.strip()}")
            continue
        if normalized not in result:
            result.append(normalized)
    return result


def _compile(patterns: Iterable[str]) -> "pathspec.PathSpec":
    compiled = []
    for pattern in patterns:
        try:
            spec = pathspec.PathSpec.from_lines("gitwildmatch", [pattern.lower()])
        except (ValueError, re.error) as e:
            raise PatternError(f"Invalid ignore pattern '{pattern}': {e}")
        compiled.extend(spec.patterns)
    return pathspec.PathSpec(compiled)


def create_ignore_checker(
    patterns: Iterable[str],
    source_dir: PathLike,
) -> Callable[[PathLike], bool]:
    """
    Build a predicate telling whether a path under *source_dir* is ignored.

    A path is ignored when its relative path matches a pattern. Directories
    are also tested in their ``name/`` form and through every ancestor
    prefix, so a rule like ``node_modules/`` catches the directory itself.
    The source directory itself is never ignored.
    """
    spec = _compile(p for p in patterns if p)
    source = os.fspath(source_dir)

    def _matches(rel: str) -> bool:
        return spec.match_file(rel.lower())

    def is_ignored(item_path: PathLike) -> bool:
        item = os.fspath(item_path)
        rel = os.path.relpath(item, source).replace(os.sep, "/")
        if rel == ".":
            return False

        if _matches(rel):
            return True

        # For directories, also check the directory form of every prefix
        if os.path.isdir(item):
            parts = rel.split("/")
            for i in range(1, len(parts) + 1):
                prefix = "/".join(parts[:i])
                if _matches(prefix) or _matches(prefix + "/"):
                    return True

        return False

    return is_ignored
