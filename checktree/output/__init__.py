# Path: checktree/output/__init__.py
"""
Checktree Output (OUTPUT layer)

Formats checked values for the caller.
"""

from .selection_formatter import SelectionConfig, get_label, format_selector_value

__all__ = ['SelectionConfig', 'get_label', 'format_selector_value']
