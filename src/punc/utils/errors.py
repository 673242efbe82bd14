"""Typed exceptions for argument validation and file I/O failures."""


class PuncError(Exception):
    """Base class for all errors raised by the package."""


class InvalidArgumentError(PuncError, ValueError):
    """Raised when a path or options value has an unsupported shape.

    Always raised before any file is opened.
    """


class SourceUnavailableError(PuncError, OSError):
    """Raised when the input cannot be opened, read or decoded."""


class DestinationUnwritableError(PuncError, OSError):
    """Raised when an output file cannot be created or written."""


__all__ = [
    "PuncError",
    "InvalidArgumentError",
    "SourceUnavailableError",
    "DestinationUnwritableError",
]
