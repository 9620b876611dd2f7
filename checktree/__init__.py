# Path: checktree/__init__.py
"""
Checktree Module

Hierarchical entity index over tree-shaped data with tri-state check
conduction (checked / half-checked / unchecked) and checked-value
views.

Architecture (IPO):
- INPUT: loaders/ - Normalise raw tree data and caller values
- PROCESS: engine/ - Positions, entity index, hierarchy, conduction, search
- OUTPUT: output/ - Checked-value views (show parent / show child)

Usage:
    from checktree import (
        convert_data_to_entities,
        calc_check_state_conduct,
        format_selector_value,
        SelectionConfig,
        SHOW_PARENT,
    )

    index = convert_data_to_entities(tree_data)
    result = calc_check_state_conduct(
        index.key_entities, index.pos_entities, ['d', 'e']
    )
    values = [{'value': index.key_entities[k].value} for k in result.checked_keys]
    config = SelectionConfig(row_checkable=True, show_checked_strategy=SHOW_PARENT)
    selection = format_selector_value(values, config, index.value_entities)
"""

__version__ = '0.1.0'
__author__ = 'MAP PRO'

from .constants import SHOW_ALL, SHOW_PARENT, SHOW_CHILD, KEY_OF_VALUE_EMPTY
from .core import TreeContext, CheckTreeError, DuplicateKeyError
from .loaders import (
    to_title,
    to_array,
    parse_simple_tree_data,
    is_label_in_value,
    format_internal_value,
)
from .engine import (
    Entity,
    EntityIndex,
    HierarchyNode,
    ConductionResult,
    convert_data_to_entities,
    flat_to_hierarchy,
    calc_check_state_conduct,
    calc_uncheck_conduct,
    is_pos_related,
    get_filter_table,
    filter_entities,
)
from .output import SelectionConfig, get_label, format_selector_value

__all__ = [
    '__version__',
    '__author__',
    'SHOW_ALL',
    'SHOW_PARENT',
    'SHOW_CHILD',
    'KEY_OF_VALUE_EMPTY',
    'TreeContext',
    'CheckTreeError',
    'DuplicateKeyError',
    'to_title',
    'to_array',
    'parse_simple_tree_data',
    'is_label_in_value',
    'format_internal_value',
    'Entity',
    'EntityIndex',
    'HierarchyNode',
    'ConductionResult',
    'convert_data_to_entities',
    'flat_to_hierarchy',
    'calc_check_state_conduct',
    'calc_uncheck_conduct',
    'is_pos_related',
    'get_filter_table',
    'filter_entities',
    'SelectionConfig',
    'get_label',
    'format_selector_value',
]
