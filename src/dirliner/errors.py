"""
Exceptions raised by dirliner.
"""


class DirlinerError(Exception):
    """Base exception for dirliner errors."""


class InvalidRootError(DirlinerError):
    """Raised when the source directory is missing or not a directory."""


class ConfigFileError(DirlinerError):
    """Raised when an existing ignore file cannot be read."""


class PatternError(DirlinerError):
    """Raised when an ignore pattern is not a valid glob."""


class OutputError(DirlinerError):
    """Raised when the target directory cannot be created."""
