# Path: checktree/loaders/tree_data.py
"""
Tree Data Normalisation

Turns the loose shapes callers hand in (single value or list, flat
id/parent-id tables, bare or labelled values) into the regular shapes
the engine works on.

RESPONSIBILITY: Input shaping only. No indexing or conduction here.
"""

from typing import Any, Mapping, Optional

from ..constants import FIELD_CHILDREN, LOG_INPUT
from ..core.logger import get_input_logger


logger = get_input_logger('tree_data')


def to_title(title: Any) -> Optional[str]:
    """Return title if it is a string, else None."""
    if isinstance(title, str):
        return title
    return None


def to_array(data: Any) -> list:
    """
    Normalise data to a list.

    Empty input (None, '', 0, []) gives an empty list; a list or tuple
    is copied into a list; anything else is wrapped.
    """
    if not data:
        return []
    if isinstance(data, (list, tuple)):
        return list(data)
    return [data]


def parse_simple_tree_data(
    table_data: list[Mapping],
    id_key: str = 'id',
    pid_key: str = 'pId',
    root_pid: Any = None
) -> list[dict]:
    """
    Build nested rows from a flat id / parent-id table.

    Rows are shallow-copied; the input is left untouched. A row becomes a
    root when its parent id equals root_pid, or when root_pid is None and
    its parent is not in the table.

    Args:
        table_data: Flat list of row mappings
        id_key: Field holding the row id
        pid_key: Field holding the parent row id
        root_pid: Parent id that marks top-level rows

    Returns:
        Top-level rows, each with a nested 'children' list where needed

    Example:
        rows = [
            {'id': 1, 'pId': 0, 'title': 'Fruit'},
            {'id': 2, 'pId': 1, 'title': 'Apple'},
        ]
        tree = parse_simple_tree_data(rows, root_pid=0)
        # [{'id': 1, 'pId': 0, 'title': 'Fruit', 'children': [{'id': 2, ...}]}]
    """
    key_nodes: dict[Any, dict] = {}
    root_rows: list[dict] = []

    data_list = []
    for row in table_data:
        clone = dict(row)
        key_nodes[clone.get(id_key)] = clone
        data_list.append(clone)

    for row in data_list:
        parent_key = row.get(pid_key)
        parent = key_nodes.get(parent_key)

        if parent is not None:
            parent.setdefault(FIELD_CHILDREN, []).append(row)

        if parent_key == root_pid or (parent is None and root_pid is None):
            root_rows.append(row)

    logger.debug(
        f"{LOG_INPUT} Parsed {len(data_list)} rows into {len(root_rows)} root rows"
    )
    return root_rows


def is_label_in_value(config: Any) -> bool:
    """
    Whether values are exchanged as {'value', 'label'} mappings.

    Strict checkable trees always carry labels, since the checked set is
    reported verbatim and labels cannot be recovered by grouping.
    """
    if config.row_checkable and config.row_check_strictly:
        return True
    return bool(config.label_in_value)


def format_internal_value(value: Any, config: Any) -> list[dict]:
    """
    Convert a caller value (single or list) into wrapped values.

    Args:
        value: A value, a list of values, or (label-in-value mode) a list
            of {'value', 'label'} mappings
        config: Object with row_checkable, row_check_strictly and
            label_in_value attributes

    Returns:
        List of {'value': ...} mappings, carrying 'label' when provided
    """
    value_list = to_array(value)

    if is_label_in_value(config):
        wrapped = []
        for val in value_list:
            if not isinstance(val, Mapping):
                wrapped.append({'value': None, 'label': ''})
            else:
                wrapped.append(dict(val))
        return wrapped

    return [{'value': val} for val in value_list]


__all__ = [
    'to_title',
    'to_array',
    'parse_simple_tree_data',
    'is_label_in_value',
    'format_internal_value',
]
