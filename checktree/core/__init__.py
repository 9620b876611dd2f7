# Path: checktree/core/__init__.py
"""
Checktree Core

Configuration, logging, shared context and exceptions.
"""

from .config_loader import ConfigLoader
from .context import TreeContext, get_default_context
from .errors import CheckTreeError, DuplicateKeyError

__all__ = [
    'ConfigLoader',
    'TreeContext',
    'get_default_context',
    'CheckTreeError',
    'DuplicateKeyError',
]
