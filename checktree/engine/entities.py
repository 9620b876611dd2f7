# Path: checktree/engine/entities.py
"""
Entity Indexer

Walks a nested tree of raw nodes and builds three synchronized lookup
tables over the same entity set:
- value_entities: domain value -> Entity
- key_entities:   key -> Entity
- pos_entities:   position -> Entity

Raw nodes are mappings with optional 'key', 'title', 'label' (deprecated
alias of 'title'), 'value' and 'children' fields.

DESIGN: Indices are rebuilt from scratch on every call. Parent and
children are navigation links between entities owned by the
EntityIndex; they are excluded from repr and equality so printing or
comparing an entity never walks the whole tree.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional

from ..constants import (
    DUPLICATE_KEY_ERROR,
    DUPLICATE_KEY_OVERWRITE,
    DUPLICATE_KEY_POLICIES,
    FIELD_CHILDREN,
    FIELD_KEY,
    FIELD_LABEL,
    FIELD_TITLE,
    FIELD_VALUE,
    KEY_OF_VALUE_EMPTY,
    LOG_PROCESS,
    ROOT_POSITION,
)
from ..core.config_loader import ConfigLoader
from ..core.context import TreeContext, get_default_context
from ..core.errors import DuplicateKeyError
from ..core.logger import get_process_logger
from ..loaders.tree_data import to_array
from .position import child_position, parent_position


logger = get_process_logger('entities')


@dataclass
class Entity:
    """
    Indexed record for one tree node.

    Attributes:
        key: Node key, or its value when no key is given, or the
            KEY_OF_VALUE_EMPTY sentinel when neither is usable
        value: Domain value carried by the node (may be None)
        pos: Position of the node within this index build
        data: The raw node mapping this entity was built from
        parent: Parent entity, None for top-level nodes
        children: Child entities in source order; None until the first
            child is attached
    """
    key: Any
    value: Any
    pos: str
    data: Optional[Mapping] = field(default=None, repr=False, compare=False)
    parent: Optional['Entity'] = field(default=None, repr=False, compare=False)
    children: Optional[list['Entity']] = field(default=None, repr=False, compare=False)

    def add_child(self, child: 'Entity') -> None:
        """Attach a child and point it back at this entity."""
        if self.children is None:
            self.children = []
        self.children.append(child)
        child.parent = self

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def iter_descendants(self) -> Iterator['Entity']:
        """Yield all descendants in depth-first pre-order."""
        stack = list(reversed(self.children or []))
        while stack:
            entity = stack.pop()
            yield entity
            stack.extend(reversed(entity.children or []))

    def iter_ancestors(self) -> Iterator['Entity']:
        """Yield ancestors from the parent up to the top-level node."""
        entity = self.parent
        while entity is not None:
            yield entity
            entity = entity.parent


@dataclass
class EntityIndex:
    """
    Result of indexing a raw tree.

    Attributes:
        data: The original input reference
        value_entities: Lookup by domain value
        key_entities: Lookup by key
        pos_entities: Lookup by position
    """
    data: Any
    value_entities: dict[Any, Entity] = field(default_factory=dict)
    key_entities: dict[Any, Entity] = field(default_factory=dict)
    pos_entities: dict[str, Entity] = field(default_factory=dict)

    def get(self, key: Any) -> Optional[Entity]:
        """Get entity by key."""
        return self.key_entities.get(key)

    def __len__(self) -> int:
        return len(self.pos_entities)

    def __contains__(self, key: Any) -> bool:
        return key in self.key_entities


def is_hashable(value: Any) -> bool:
    """Whether value can be used in a lookup table."""
    try:
        hash(value)
    except TypeError:
        return False
    return True


def resolve_key(key: Any, value: Any) -> Any:
    """
    Pick the key for a node.

    The node key wins when truthy, otherwise the value is used. If that is
    still empty (numeric zero excepted) or cannot be hashed, the sentinel
    key is substituted.
    """
    resolved = key or value
    if not is_hashable(resolved):
        logger.debug(f"{LOG_PROCESS} Unhashable key {resolved!r}, using sentinel key")
        return KEY_OF_VALUE_EMPTY
    if not resolved and not _is_numeric_zero(resolved):
        return KEY_OF_VALUE_EMPTY
    return resolved


def _is_numeric_zero(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0


def _resolve_duplicate_policy(policy: Optional[str]) -> str:
    if policy is None:
        policy = ConfigLoader().get('duplicate_key_policy', DUPLICATE_KEY_OVERWRITE)
    if policy not in DUPLICATE_KEY_POLICIES:
        raise ValueError(f"Unknown duplicate key policy: {policy}")
    return policy


def convert_data_to_entities(
    tree_data: Any,
    context: Optional[TreeContext] = None,
    duplicate_key_policy: Optional[str] = None
) -> EntityIndex:
    """
    Index a nested tree of raw nodes.

    Depth-first pre-order traversal; positions are "{parent_pos}-{index}"
    starting from the synthetic root "0".

    Args:
        tree_data: A node mapping, a list of node mappings, or None
        context: Holds the 'label' deprecation latch; defaults to the
            process-wide context
        duplicate_key_policy: 'overwrite' (last write wins) or 'error';
            defaults to the configured policy

    Returns:
        EntityIndex with the input reference and the three lookup tables

    Raises:
        DuplicateKeyError: Two nodes share a key under the 'error' policy
    """
    context = context or get_default_context()
    policy = _resolve_duplicate_policy(duplicate_key_policy)
    index = EntityIndex(data=tree_data)

    # (node, parent_pos, index) frames, popped in pre-order
    stack = [
        (node, ROOT_POSITION, i)
        for i, node in reversed(list(enumerate(to_array(tree_data))))
    ]

    while stack:
        node, parent_pos, node_index = stack.pop()
        pos = child_position(parent_pos, node_index)
        value = node.get(FIELD_VALUE)

        entity = Entity(
            key=resolve_key(node.get(FIELD_KEY), value),
            value=value,
            pos=pos,
            data=node,
        )

        parent = index.pos_entities.get(parent_position(pos))
        if parent is not None:
            parent.add_child(entity)

        _register(index, entity, policy)

        if not node.get(FIELD_TITLE) and node.get(FIELD_LABEL):
            context.warn_deprecated_label(logger)

        children = to_array(node.get(FIELD_CHILDREN))
        for i in range(len(children) - 1, -1, -1):
            stack.append((children[i], pos, i))

    logger.debug(f"{LOG_PROCESS} Indexed {len(index)} entities")
    return index


def _register(index: EntityIndex, entity: Entity, policy: str) -> None:
    """Add entity to all three lookup tables."""
    existing = index.key_entities.get(entity.key)
    if existing is not None and policy == DUPLICATE_KEY_ERROR:
        raise DuplicateKeyError(entity.key, existing.pos, entity.pos)

    if is_hashable(entity.value):
        index.value_entities[entity.value] = entity
    else:
        logger.debug(f"{LOG_PROCESS} Unhashable value at {entity.pos}, not indexed by value")

    index.key_entities[entity.key] = entity
    index.pos_entities[entity.pos] = entity


__all__ = [
    'Entity',
    'EntityIndex',
    'is_hashable',
    'resolve_key',
    'convert_data_to_entities',
]
