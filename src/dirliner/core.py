"""
Core logic for dirliner package.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set, Tuple, Union

from .errors import (
    ConfigFileError,
    DirlinerError,
    InvalidRootError,
    OutputError,
    PatternError,
)
from .ignore import create_ignore_checker, parse_ignore_patterns

__all__ = [
    "ConfigFileError",
    "DirLiner",
    "DirLinerResult",
    "DirlinerError",
    "Flattener",
    "InvalidRootError",
    "NullLogger",
    "OutputError",
    "PatternError",
    "ProcessedFile",
    "Statistics",
    "transform_file_name",
]

# Defaults
DEFAULT_SOURCE = "./"
DEFAULT_TARGET = "./output"
DEFAULT_IGNORE_FILE = ".dirlinerignore"


# Data model
@dataclass(frozen=True)
class ProcessedFile:
    source: Path
    target: Path


@dataclass
class Statistics:
    files_processed: int = 0
    directories_processed: int = 0
    files_ignored: int = 0
    directories_ignored: int = 0
    files_overwritten: int = 0
    total_size: int = 0


@dataclass(frozen=True)
class DirLinerResult:
    success: bool
    processed: Tuple[ProcessedFile, ...] = ()
    error: Optional[str] = None
    stats: Statistics = field(default_factory=Statistics)


class NullLogger:
    """Logger that discards everything; used when output is not wanted."""

    def debug(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


# Helpers
def transform_file_name(file_path: str) -> str:
    """Turn a relative path into a flat file name: ``./a/b/c.txt`` -> ``a-b-c.txt``."""
    clean = file_path[2:] if file_path.startswith("./") else file_path
    return clean.replace("/", "-")


# Traversal
class Flattener:
    """
    Depth-first walk of *source* that copies every non-ignored file into
    *target* under its flattened name.

    Uses an explicit work stack instead of recursion. Children are pushed in
    reverse so they are visited in enumeration order, and a subdirectory's
    files land in the result at the subdirectory's position.

    Name collisions are resolved by "last write wins": when two source files
    flatten to the same name within one run, the later copy replaces the
    earlier one and ``stats.files_overwritten`` is incremented.
    """

    def __init__(
        self,
        source: Path,
        target: Path,
        is_ignored: Callable[[Path], bool],
        logger=None,
    ) -> None:
        self.source = source
        self.target = target
        self.is_ignored = is_ignored
        self.logger = logger or NullLogger()
        self.stats = Statistics()
        self._written: Set[Path] = set()

    def traverse(self) -> List[ProcessedFile]:
        processed: List[ProcessedFile] = []
        stack: List[Tuple[Path, bool]] = [(self.source, True)]

        while stack:
            path, is_dir = stack.pop()

            # Output directory inside the source is skipped and not counted
            if is_dir and path == self.target and path != self.source:
                self.logger.debug(f"Skipping target directory: {path}")
                continue

            if self.is_ignored(path):
                if is_dir:
                    self.stats.directories_ignored += 1
                    self.logger.warning(f"Ignoring directory: {path}")
                else:
                    self.stats.files_ignored += 1
                    self.logger.warning(f"Ignoring file: {path}")
                continue

            if is_dir:
                self.stats.directories_processed += 1
                self.logger.info(f"Processing directory: {path}")
                stack.extend(reversed(self._list_children(path)))
            else:
                processed.append(self._copy(path))

        return processed

    def _list_children(self, directory: Path) -> List[Tuple[Path, bool]]:
        with os.scandir(directory) as it:
            return [(Path(entry.path), entry.is_dir()) for entry in it]

    def _ensure_dir(self, directory: Path) -> None:
        if directory.exists():
            return
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputError(f"Could not create directory '{directory}': {e}")
        self.logger.info(f"Created directory: {directory}")

    def _copy(self, path: Path) -> ProcessedFile:
        rel = path.relative_to(self.source).as_posix()
        target_path = self.target / transform_file_name(rel)

        self._ensure_dir(target_path.parent)

        if target_path in self._written:
            self.stats.files_overwritten += 1
            self.logger.warning(
                f"Name collision: {path} overwrites earlier copy at {target_path}"
            )

        size = path.stat().st_size
        shutil.copyfile(path, target_path)
        self._written.add(target_path)
        self.stats.files_processed += 1
        self.stats.total_size += size

        self.logger.success(f"Copied {path} → {target_path} ({size} bytes)")
        return ProcessedFile(source=path, target=target_path)


# Orchestrator
class DirLiner:
    """
    Flatten *source* into *target*, honoring ignore patterns.

    ``ignore_file`` defaults to ``.dirlinerignore`` (relative to the current
    directory); pass ``None`` to skip it. ``verbose`` is informational only;
    pass a *logger* to receive progress messages.
    """

    def __init__(
        self,
        source: Union[str, Path] = DEFAULT_SOURCE,
        target: Union[str, Path] = DEFAULT_TARGET,
        ignore_patterns: Iterable[str] = (),
        ignore_file: Optional[Union[str, Path]] = DEFAULT_IGNORE_FILE,
        verbose: bool = False,
        logger=None,
    ) -> None:
        self.source = Path(source)
        self.target = Path(target)
        self.ignore_patterns = list(ignore_patterns)
        self.ignore_file = ignore_file
        self.verbose = verbose
        self.logger = logger or NullLogger()
        self.patterns: List[str] = []

    def _resolve_source(self) -> Path:
        try:
            source = self.source.resolve()
        except (OSError, RuntimeError) as e:
            raise InvalidRootError(f"Could not resolve source path '{self.source}': {e}")
        if not source.exists():
            raise InvalidRootError(f"Source directory '{self.source}' does not exist")
        if not source.is_dir():
            raise InvalidRootError(f"Source path '{self.source}' is not a directory")
        return source

    def execute(self) -> DirLinerResult:
        flattener: Optional[Flattener] = None
        try:
            self.logger.info("Starting DirLiner")
            source = self._resolve_source()
            target = self.target.resolve()

            self.patterns = parse_ignore_patterns(
                self.ignore_patterns, self.ignore_file, logger=self.logger
            )

            is_ignored = create_ignore_checker(self.patterns, source)
            flattener = Flattener(source, target, is_ignored, logger=self.logger)
            processed = flattener.traverse()
        except (DirlinerError, OSError) as e:
            self.logger.error(f"Error: {e}")
            stats = replace(flattener.stats) if flattener else Statistics()
            return DirLinerResult(success=False, error=str(e), stats=stats)

        self.logger.success("Processing completed successfully!")
        return DirLinerResult(
            success=True,
            processed=tuple(processed),
            stats=replace(flattener.stats),
        )
