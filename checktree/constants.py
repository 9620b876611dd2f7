# Path: checktree/constants.py
"""
Checktree Module Constants

Module-wide constants for tree indexing, check conduction and
selection formatting.
"""

# ==============================================================================
# CHECKED STRATEGIES
# ==============================================================================
SHOW_ALL = 'SHOW_ALL'
SHOW_PARENT = 'SHOW_PARENT'
SHOW_CHILD = 'SHOW_CHILD'

CHECKED_STRATEGIES = [
    SHOW_ALL,
    SHOW_PARENT,
    SHOW_CHILD,
]

# CLI spelling -> strategy
STRATEGY_ALIASES = {
    'show-all': SHOW_ALL,
    'show-parent': SHOW_PARENT,
    'show-child': SHOW_CHILD,
}

# ==============================================================================
# ENTITY INDEXING
# ==============================================================================
# Substituted when a node provides neither key nor value
KEY_OF_VALUE_EMPTY = 'RC_TREE_SELECT_KEY_OF_VALUE_EMPTY'

# Position of the synthetic root; top-level nodes are "0-0", "0-1", ...
ROOT_POSITION = '0'
POSITION_SEPARATOR = '-'

# Raw node fields
FIELD_KEY = 'key'
FIELD_VALUE = 'value'
FIELD_TITLE = 'title'
FIELD_LABEL = 'label'
FIELD_CHILDREN = 'children'

DEFAULT_LABEL_PROP = FIELD_TITLE

# ==============================================================================
# DUPLICATE KEY POLICIES
# ==============================================================================
DUPLICATE_KEY_OVERWRITE = 'overwrite'
DUPLICATE_KEY_ERROR = 'error'

DUPLICATE_KEY_POLICIES = [
    DUPLICATE_KEY_OVERWRITE,
    DUPLICATE_KEY_ERROR,
]

# ==============================================================================
# MESSAGES
# ==============================================================================
MSG_LABEL_DEPRECATED = "'label' in tree data is deprecated. Please use 'title' instead."
MSG_KEY_NOT_FOUND = "{key} does not exist in the tree."

# ==============================================================================
# IPO LOGGING PREFIXES
# ==============================================================================
LOG_INPUT = '[INPUT]'
LOG_PROCESS = '[PROCESS]'
LOG_OUTPUT = '[OUTPUT]'


__all__ = [
    'SHOW_ALL',
    'SHOW_PARENT',
    'SHOW_CHILD',
    'CHECKED_STRATEGIES',
    'STRATEGY_ALIASES',
    'KEY_OF_VALUE_EMPTY',
    'ROOT_POSITION',
    'POSITION_SEPARATOR',
    'FIELD_KEY',
    'FIELD_VALUE',
    'FIELD_TITLE',
    'FIELD_LABEL',
    'FIELD_CHILDREN',
    'DEFAULT_LABEL_PROP',
    'DUPLICATE_KEY_OVERWRITE',
    'DUPLICATE_KEY_ERROR',
    'DUPLICATE_KEY_POLICIES',
    'MSG_LABEL_DEPRECATED',
    'MSG_KEY_NOT_FOUND',
    'LOG_INPUT',
    'LOG_PROCESS',
    'LOG_OUTPUT',
]
