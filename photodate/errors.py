"""Exceptions raised by :mod:`photodate`.

Only configuration and traversal-root problems are raised to the caller;
failures on individual entries are reported as outcomes instead.
"""


class PhotodateError(Exception):
    """Base error for the project."""


class ConfigurationError(PhotodateError):
    pass


class PatternError(ConfigurationError):
    """The filename pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class TraversalError(PhotodateError):
    """The source root could not be read."""

    def __init__(self, path, cause: OSError):
        super().__init__(f"error walking path {path}: {cause}")
        self.path = path
        self.cause = cause
