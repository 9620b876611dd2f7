# Path: checktree/engine/conduction.py
"""
Check-State Conductor

Propagates tri-state check state (checked / half-checked / unchecked)
along parent/child edges of an indexed tree.

CONDUCTION RULES (per seed key, seeds processed in order):
1. The seed becomes checked.
2. Down: every descendant of the seed becomes checked.
3. Up: walking from the seed's parent to the root, an ancestor becomes
   checked only when all its direct children are checked and no
   half-checked level was passed on the way up; otherwise it becomes
   half-checked. Once a level is half-checked, every level above it is
   at most half-checked.

Down runs before up for each seed: a later seed's upward walk reads
state written by earlier seeds' downward conduction.

Uncheck conduction removes one key from an already conducted list,
together with its checked ancestors and all of its descendants. Half
states are not recomputed there; callers re-run the check conduction.

DESIGN: Stateless functions. Unknown keys are reported, never raised.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from ..constants import LOG_PROCESS, MSG_KEY_NOT_FOUND
from ..core.logger import get_process_logger
from .entities import Entity, is_hashable
from .position import parent_position


logger = get_process_logger('conduction')


@dataclass
class ConductionResult:
    """
    Closure of a check conduction.

    Attributes:
        checked_keys: Keys fully checked, in the order they were reached
        half_checked_keys: Keys with some but not all descendants checked
        missing_keys: Seed keys that do not exist in the tree
    """
    checked_keys: list = field(default_factory=list)
    half_checked_keys: list = field(default_factory=list)
    missing_keys: list = field(default_factory=list)


class _CheckState:
    """Mutable sets shared by all seeds of one conduction call."""

    def __init__(self):
        # dicts keep reach order for stable output
        self.checked: dict[Any, bool] = {}
        self.half_checked: dict[Any, bool] = {}
        self.missing: list = []

    def mark_checked(self, key: Any) -> None:
        self.checked[key] = True
        self.half_checked.pop(key, None)

    def mark_half_checked(self, key: Any) -> None:
        self.half_checked[key] = True

    def to_result(self) -> ConductionResult:
        return ConductionResult(
            checked_keys=list(self.checked),
            half_checked_keys=list(self.half_checked),
            missing_keys=list(self.missing),
        )


def _conduct_down(entity: Entity, state: _CheckState) -> None:
    """Check every descendant of entity."""
    stack = list(reversed(entity.children or []))
    while stack:
        sub = stack.pop()
        # A checked key already has its whole subtree checked
        if sub.key in state.checked:
            continue
        state.mark_checked(sub.key)
        stack.extend(reversed(sub.children or []))


def _conduct_up(
    entity: Entity,
    pos_entities: Mapping[str, Entity],
    state: _CheckState
) -> None:
    """Walk from entity's parent to the root, settling each ancestor."""
    half_checked = False
    ancestor = pos_entities.get(parent_position(entity.pos))

    while ancestor is not None:
        if ancestor.key in state.checked:
            return

        all_sub_checked = not half_checked and all(
            sub.key in state.checked for sub in ancestor.children or []
        )

        if all_sub_checked:
            state.mark_checked(ancestor.key)
        else:
            state.mark_half_checked(ancestor.key)

        half_checked = not all_sub_checked
        ancestor = pos_entities.get(parent_position(ancestor.pos))


def calc_check_state_conduct(
    key_entities: Mapping[Any, Entity],
    pos_entities: Mapping[str, Entity],
    checked_keys: Iterable[Any]
) -> ConductionResult:
    """
    Compute the checked and half-checked closure of a seed key set.

    Args:
        key_entities: Lookup by key from the entity index
        pos_entities: Lookup by position from the entity index; the
            upward walk resolves each ancestor through it
        checked_keys: Keys the caller wants treated as checked

    Returns:
        ConductionResult with checked, half-checked and missing keys

    Example:
        index = convert_data_to_entities(tree_data)
        result = calc_check_state_conduct(
            index.key_entities, index.pos_entities, ['d', 'e']
        )
        result.checked_keys       # ['d', 'e', 'b']
        result.half_checked_keys  # ['a']
    """
    state = _CheckState()

    for key in checked_keys:
        entity = key_entities.get(key) if is_hashable(key) else None
        if entity is None:
            logger.warning(f"{LOG_PROCESS} {MSG_KEY_NOT_FOUND.format(key=key)}")
            state.missing.append(key)
            continue

        if key in state.checked:
            continue

        state.mark_checked(key)
        _conduct_down(entity, state)
        _conduct_up(entity, pos_entities, state)

    logger.debug(
        f"{LOG_PROCESS} Conducted {len(state.checked)} checked, "
        f"{len(state.half_checked)} half checked"
    )
    return state.to_result()


def calc_uncheck_conduct(
    key_list: Iterable[Any],
    unchecked_key: Any,
    key_entities: Mapping[Any, Entity]
) -> list:
    """
    Remove a key from an already conducted checked-key list.

    The key, every ancestor chain still present in the list, and every
    descendant are removed. Remaining keys keep their order.

    Args:
        key_list: Current fully conducted checked keys
        unchecked_key: Key the user unchecked
        key_entities: Lookup by key from the entity index

    Returns:
        New checked-key list
    """
    remaining = list(key_list)
    entity = key_entities.get(unchecked_key) if is_hashable(unchecked_key) else None

    if entity is None:
        logger.warning(f"{LOG_PROCESS} {MSG_KEY_NOT_FOUND.format(key=unchecked_key)}")
        return [key for key in remaining if key != unchecked_key]

    removed = {unchecked_key}

    # Up: a parent cannot stay checked once a child is unchecked
    present = set(remaining)
    parent = entity.parent
    while parent is not None and parent.key in present:
        removed.add(parent.key)
        parent = parent.parent

    # Down: unchecking a folder unchecks its contents
    for sub in entity.iter_descendants():
        removed.add(sub.key)

    return [key for key in remaining if key not in removed]


__all__ = [
    'ConductionResult',
    'calc_check_state_conduct',
    'calc_uncheck_conduct',
]
