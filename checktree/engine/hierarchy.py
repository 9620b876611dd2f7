# Path: checktree/engine/hierarchy.py
"""
Hierarchy Reconstructor

Rebuilds the minimal forest connecting a flat list of entities, using
their positions only. A node is attached under a parent only when that
parent is itself in the list, so the result is the input pruned to the
edges it actually contains.

Used by the selection formatter (group checked values) and the search
filter (re-derive pruned subtrees).
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Mapping, Optional

from .position import join_position, split_position


@dataclass
class HierarchyNode:
    """
    Node of a reconstructed forest.

    A shallow clone of an entity without its key and original links;
    children only hold nodes that were present in the input list.
    """
    pos: str
    value: Any = None
    data: Optional[Mapping] = field(default=None, repr=False, compare=False)
    children: list['HierarchyNode'] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def iter_leaves(self) -> Iterator['HierarchyNode']:
        """Yield leaves of this subtree left to right."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                yield node
            else:
                stack.extend(reversed(node.children))


def flat_to_hierarchy(position_list: Iterable[Any]) -> list[HierarchyNode]:
    """
    Convert a flat entity list into a forest.

    Args:
        position_list: Objects carrying at least 'pos' (and optionally
            'value' and 'data'); None entries are ignored

    Returns:
        Root nodes in processing order (shallowest first, input order
        kept among equal depths)
    """
    parsed: list[tuple[list[str], HierarchyNode]] = []
    for entity in position_list:
        if entity is None:
            continue
        clone = HierarchyNode(
            pos=entity.pos,
            value=getattr(entity, 'value', None),
            data=getattr(entity, 'data', None),
        )
        parsed.append((split_position(clone.pos), clone))

    if not parsed:
        return []

    pos_map = {node.pos: node for _, node in parsed}

    # Stable: equal depths keep input order
    parsed.sort(key=lambda item: len(item[0]))

    roots: dict[str, HierarchyNode] = {}
    for fields, node in parsed:
        parent = pos_map.get(join_position(fields[:-1]))
        if parent is None:
            roots[node.pos] = node
        else:
            parent.children.append(node)

    return list(roots.values())


__all__ = ['HierarchyNode', 'flat_to_hierarchy']
