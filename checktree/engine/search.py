# Path: checktree/engine/search.py
"""
Search Filter

Prunes a tree down to the rows matching a search value plus the
ancestors needed to reach them.

Two entry points:
- get_filter_table: works on the raw nested data, returns raw rows
- filter_entities: works on an EntityIndex, returns a HierarchyNode forest
"""

from typing import Any, Callable, Mapping, Optional

from ..constants import FIELD_CHILDREN, FIELD_KEY, LOG_PROCESS
from ..core.logger import get_process_logger
from ..loaders.tree_data import to_array
from .entities import Entity, EntityIndex
from .hierarchy import HierarchyNode, flat_to_hierarchy


logger = get_process_logger('search')

FilterFunc = Callable[[Any, Any], bool]


def get_filter_table(
    data: Any,
    search_value: Any,
    filter_func: FilterFunc
) -> Optional[list[dict]]:
    """
    Filter raw tree data by a search value.

    Args:
        data: Raw tree (node mapping or list of node mappings)
        search_value: Value handed to filter_func; empty means no search
        filter_func: Called as filter_func(search_value, row)

    Returns:
        None when search_value is empty, else pruned copies of the
        matching rows and their ancestors (children always a list)
    """
    if not search_value:
        return None

    def map_filtered_data(row: Optional[Mapping]) -> Optional[dict]:
        if not row:
            return None

        match = bool(filter_func(search_value, row))
        children = [
            child for child in (
                map_filtered_data(sub) for sub in to_array(row.get(FIELD_CHILDREN))
            )
            if child
        ]

        if children or match:
            clone = dict(row)
            clone[FIELD_KEY] = row.get(FIELD_KEY)
            clone[FIELD_CHILDREN] = children
            return clone

        return None

    filtered = [row for row in (map_filtered_data(r) for r in to_array(data)) if row]
    logger.debug(f"{LOG_PROCESS} Search {search_value!r} kept {len(filtered)} root rows")
    return filtered


def filter_entities(
    index: EntityIndex,
    search_value: Any,
    filter_func: FilterFunc
) -> Optional[list[HierarchyNode]]:
    """
    Filter an indexed tree by a search value.

    filter_func is called with each entity's raw node. Matching entities
    and all their ancestors are kept; the forest is rebuilt from their
    positions.

    Returns:
        None when search_value is empty, else the pruned forest
    """
    if not search_value:
        return None

    kept: dict[str, Entity] = {}
    for entity in index.pos_entities.values():
        if entity.pos in kept or not filter_func(search_value, entity.data or {}):
            continue
        kept[entity.pos] = entity
        for ancestor in entity.iter_ancestors():
            kept.setdefault(ancestor.pos, ancestor)

    # Source (pre-)order so siblings stay in tree order
    ordered = [e for pos, e in index.pos_entities.items() if pos in kept]
    return flat_to_hierarchy(ordered)


__all__ = ['FilterFunc', 'get_filter_table', 'filter_entities']
