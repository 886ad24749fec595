"""Exceptions raised by the pagination core."""


class PaginationError(Exception):
    """Base class for pagination errors."""


class InvalidConfigError(PaginationError):
    """A pagination config is missing required keys or holds illegal values."""


class TypeMismatchError(PaginationError):
    """Content is not an ordered collection, or a config is not a mapping."""


class UnknownCommandError(PaginationError):
    """The command channel received an event it does not handle."""
