# Path: checktree/output/selection_formatter.py
"""
Selection View Formatter

Converts the internal checked value list into the value list reported
to the caller, as {'label', 'value'} mappings.

STRATEGIES (conducted checkable trees only):
- SHOW_PARENT: only the topmost checked nodes, i.e. the minimal set
  whose subtrees cover everything checked
- SHOW_CHILD: only the most specific checked nodes (leaves)
- SHOW_ALL: every checked value

Grouping only sees values present in the input list; it does not run
conduction. A parent is reported under SHOW_PARENT only if the parent
itself is in the list.

Strict trees and non-checkable trees report every value verbatim.
Values that cannot be hashed are never grouped and are reported
verbatim after the grouped ones.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..constants import CHECKED_STRATEGIES, LOG_OUTPUT, SHOW_CHILD, SHOW_PARENT
from ..core.config_loader import ConfigLoader
from ..core.logger import get_output_logger
from ..engine.entities import Entity, is_hashable
from ..engine.hierarchy import flat_to_hierarchy


logger = get_output_logger('selection_formatter')


@dataclass
class SelectionConfig:
    """
    Options that decide how checked values are reported.

    Attributes:
        row_checkable: Rows carry checkboxes
        row_check_strictly: Check state is not conducted between rows
        show_checked_strategy: SHOW_PARENT, SHOW_CHILD or SHOW_ALL
        row_label_prop: Field read off the node for the label
        label_in_value: Caller exchanges {'value', 'label'} mappings
    """
    row_checkable: bool = False
    row_check_strictly: bool = False
    show_checked_strategy: str = SHOW_CHILD
    row_label_prop: str = 'title'
    label_in_value: bool = False

    def __post_init__(self):
        if self.show_checked_strategy not in CHECKED_STRATEGIES:
            raise ValueError(f"Unknown checked strategy: {self.show_checked_strategy}")

    @property
    def conducts(self) -> bool:
        """Whether checked values are grouped by the tree shape."""
        return self.row_checkable and not self.row_check_strictly

    @classmethod
    def from_config(cls, **overrides) -> 'SelectionConfig':
        """Build from ConfigLoader defaults, with keyword overrides."""
        config = ConfigLoader()
        options = {
            'show_checked_strategy': config.get('show_checked_strategy', SHOW_CHILD),
            'row_label_prop': config.get('label_prop', 'title'),
        }
        options.update(overrides)
        return cls(**options)


def get_label(
    wrapped_value: Mapping,
    entity: Optional[Entity],
    row_label_prop: str
) -> Any:
    """
    Resolve the display label of a wrapped value.

    Order: the explicit label on the wrapped value, then row_label_prop
    read off the entity (its value when that is a mapping, else the raw
    node), then the raw value itself.
    """
    if wrapped_value.get('label'):
        return wrapped_value['label']

    if entity is not None and entity.value:
        source = entity.value if isinstance(entity.value, Mapping) else entity.data
        return (source or {}).get(row_label_prop)

    # Values without an entity are normally dropped before this point
    return wrapped_value.get('value')


def format_selector_value(
    value_list: list[Mapping],
    config: SelectionConfig,
    value_entities: Mapping[Any, Entity]
) -> list[dict]:
    """
    Convert the internal checked value list into the reported value list.

    Args:
        value_list: Wrapped values ({'value', optional 'label'})
        config: Selection options
        value_entities: Lookup by value from the entity index

    Returns:
        List of {'label', 'value'} mappings
    """
    if config.conducts and config.show_checked_strategy in (SHOW_PARENT, SHOW_CHILD):
        values = {}
        entities = []
        # Unhashable values cannot be placed in the tree; reported verbatim
        ungrouped = []
        for wrapped in value_list:
            if not is_hashable(wrapped.get('value')):
                ungrouped.append(wrapped)
                continue
            values[wrapped.get('value')] = wrapped
            entity = value_entities.get(wrapped.get('value'))
            if entity is None:
                logger.debug(f"{LOG_OUTPUT} No entity for value {wrapped.get('value')!r}")
                continue
            entities.append(entity)

        hierarchy_list = flat_to_hierarchy(entities)

        if config.show_checked_strategy == SHOW_PARENT:
            nodes = hierarchy_list
        else:
            nodes = [leaf for root in hierarchy_list for leaf in root.iter_leaves()]

        grouped = [
            {
                'label': get_label(
                    values[node.value],
                    value_entities.get(node.value),
                    config.row_label_prop,
                ),
                'value': node.value,
            }
            for node in nodes
        ]
        return grouped + [_verbatim(wrapped, value_entities, config) for wrapped in ungrouped]

    return [_verbatim(wrapped, value_entities, config) for wrapped in value_list]


def _verbatim(
    wrapped: Mapping,
    value_entities: Mapping[Any, Entity],
    config: SelectionConfig
) -> dict:
    value = wrapped.get('value')
    entity = value_entities.get(value) if is_hashable(value) else None
    return {
        'label': get_label(wrapped, entity, config.row_label_prop),
        'value': value,
    }


__all__ = ['SelectionConfig', 'get_label', 'format_selector_value']
