from __future__ import annotations


class PathMapError(Exception):
    """Base class for errors raised by path_map."""


class ContainerTypeError(PathMapError, TypeError):
    """A container was required but something else was supplied.

    Also raised when a list is addressed with a segment that cannot be
    used as an index for writing.
    """
