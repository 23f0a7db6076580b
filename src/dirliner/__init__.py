"""
DirLiner - Transform directory structures into flat files.

This package walks a directory tree, skips files and directories matched by
gitignore-style ignore rules, and copies every remaining file into a single
output directory under a name that encodes its original relative path.
"""

__version__ = "1.0.0"
__author__ = "DirLiner Team"

from .core import DirLiner, DirLinerResult, ProcessedFile, Statistics  # noqa: E402

__all__ = ["DirLiner", "DirLinerResult", "ProcessedFile", "Statistics", "__version__"]
