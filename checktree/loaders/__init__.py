# Path: checktree/loaders/__init__.py
"""
Checktree Loaders (INPUT layer)

Normalises raw tree data and caller values before indexing.
"""

from .tree_data import (
    to_title,
    to_array,
    parse_simple_tree_data,
    is_label_in_value,
    format_internal_value,
)

__all__ = [
    'to_title',
    'to_array',
    'parse_simple_tree_data',
    'is_label_in_value',
    'format_internal_value',
]
