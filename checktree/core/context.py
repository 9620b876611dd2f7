# Path: checktree/core/context.py
"""
Tree Context

Holds the little state that outlives a single index build: the
one-shot 'label' deprecation latch.

A module-level default context gives process-lifetime behaviour.
Callers that index unrelated trees side by side (or tests) can pass
their own TreeContext to keep the latch separate.
"""

import logging
from typing import Optional

from ..constants import MSG_LABEL_DEPRECATED


class TreeContext:
    """
    Long-lived state threaded through index builds.

    Usage:
        context = TreeContext()
        index = convert_data_to_entities(tree_data, context=context)
        context.label_deprecation_warned  # True if any node used 'label'
    """

    def __init__(self):
        self.label_deprecation_warned = False

    def warn_deprecated_label(self, logger: logging.Logger) -> bool:
        """
        Emit the 'label' deprecation warning unless already emitted.

        Returns:
            True if the warning was emitted by this call
        """
        if self.label_deprecation_warned:
            return False
        logger.warning(MSG_LABEL_DEPRECATED)
        self.label_deprecation_warned = True
        return True

    def reset(self) -> None:
        """Clear the deprecation latch."""
        self.label_deprecation_warned = False


_default_context: Optional[TreeContext] = None


def get_default_context() -> TreeContext:
    """Get the process-wide context, creating it on first use."""
    global _default_context
    if _default_context is None:
        _default_context = TreeContext()
    return _default_context


__all__ = ['TreeContext', 'get_default_context']
