# Path: checktree/core/errors.py
"""
Checktree Exceptions

Most tree problems are recovered locally and only logged (missing
identity, unknown keys, deprecated fields). These exceptions cover the
few cases a caller explicitly opts into.
"""


class CheckTreeError(Exception):
    """Base exception for the checktree module."""
    pass


class DuplicateKeyError(CheckTreeError):
    """Two distinct nodes resolved to the same key under the 'error' policy."""

    def __init__(self, key, first_pos: str, second_pos: str):
        self.key = key
        self.first_pos = first_pos
        self.second_pos = second_pos
        super().__init__(
            f"Duplicate key {key!r} at positions {first_pos} and {second_pos}"
        )


__all__ = ['CheckTreeError', 'DuplicateKeyError']
