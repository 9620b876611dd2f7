#!/usr/bin/env python3
# Path: checktree/cli.py
"""
Checktree CLI
=============

Inspect check conduction over a JSON tree from the command line.

Usage:
    checktree tree.json --check d e
    checktree tree.json --check b --uncheck d --strategy show-parent
    checktree tree.json --search apple
"""

import sys
import json
import argparse
import logging
from pathlib import Path
from typing import Any, Optional

from rich.console import Console
from rich.table import Table
from rich.tree import Tree
from rich.logging import RichHandler

from .constants import STRATEGY_ALIASES
from .core.config_loader import ConfigLoader
from .core.logger import setup_ipo_logging
from .engine import (
    EntityIndex,
    HierarchyNode,
    ConductionResult,
    convert_data_to_entities,
    calc_check_state_conduct,
    calc_uncheck_conduct,
    filter_entities,
)
from .output import SelectionConfig, format_selector_value


console = Console()


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Setup logging with rich handler.

    With CHECKTREE_LOG_DIR set, IPO layer log files are written as well.
    """
    config = ConfigLoader()
    level_name = 'DEBUG' if verbose or config['debug'] else config['log_level']

    if config['console_logging']:
        handler = RichHandler(rich_tracebacks=True, console=console)
    else:
        handler = logging.NullHandler()

    if config['log_dir'] is not None:
        setup_ipo_logging(config['log_dir'], level_name, console_output=False)
        logging.getLogger().addHandler(handler)
    else:
        logging.basicConfig(
            level=getattr(logging, level_name.upper()),
            format="%(message)s",
            datefmt="[%X]",
            handlers=[handler]
        )

    return logging.getLogger("checktree_cli")


def load_tree(path: Path) -> Optional[Any]:
    """Read tree data from a JSON file, None on failure."""
    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {path}")
        return None

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] Invalid JSON in {path}: {e}")
        return None


def label_of(index: EntityIndex, key: Any, label_prop: str) -> str:
    entity = index.get(key)
    if entity is None or not entity.data:
        return ''
    return str(entity.data.get(label_prop, ''))


def display_conduction(result: ConductionResult, index: EntityIndex, label_prop: str) -> None:
    """Display checked and half-checked keys."""
    table = Table(title="Check State", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Label", style="white")
    table.add_column("State", style="bold")

    for key in result.checked_keys:
        table.add_row(str(key), label_of(index, key, label_prop), "[green]checked[/green]")
    for key in result.half_checked_keys:
        table.add_row(str(key), label_of(index, key, label_prop), "[yellow]half checked[/yellow]")

    console.print(table)

    if result.missing_keys:
        missing = ', '.join(str(k) for k in result.missing_keys)
        console.print(f"[red]Unknown keys:[/red] {missing}")


def display_selection(selection: list[dict], strategy: str) -> None:
    """Display the formatted checked-value list."""
    table = Table(title=f"Selection ({strategy})", show_header=True)
    table.add_column("#", style="dim", width=4)
    table.add_column("Value", style="cyan")
    table.add_column("Label", style="white")

    for i, item in enumerate(selection, 1):
        table.add_row(str(i), str(item['value']), str(item['label']))

    console.print(table)


def display_forest(roots: list[HierarchyNode], label_prop: str, title: str) -> None:
    """Display a reconstructed forest as a rich tree."""
    tree = Tree(f"[bold]{title}[/bold]")
    stack = [(tree, node) for node in reversed(roots)]
    while stack:
        branch, node = stack.pop()
        label = (node.data or {}).get(label_prop, node.value)
        sub = branch.add(f"{label} [dim]{node.pos}[/dim]")
        stack.extend((sub, child) for child in reversed(node.children))
    console.print(tree)


def match_key(index: EntityIndex, raw: str) -> Any:
    """
    Map a command line key onto a tree key.

    Keys arrive as strings; a JSON tree keyed by integers is matched by
    the integer form when the string itself is not a key.
    """
    if raw in index:
        return raw
    try:
        number = int(raw)
    except ValueError:
        return raw
    return number if number in index else raw


def run(args: argparse.Namespace) -> int:
    """Run conduction and formatting for parsed arguments."""
    logger = setup_logging(args.verbose)

    tree_data = load_tree(args.tree)
    if tree_data is None:
        return 1

    overrides = {'row_checkable': True, 'row_check_strictly': args.strict}
    if args.strategy:
        overrides['show_checked_strategy'] = STRATEGY_ALIASES[args.strategy]
    if args.label_prop:
        overrides['row_label_prop'] = args.label_prop
    config = SelectionConfig.from_config(**overrides)

    index = convert_data_to_entities(tree_data)
    logger.debug(f"Indexed {len(index)} nodes from {args.tree}")

    if args.search:
        needle = args.search.lower()
        roots = filter_entities(
            index,
            needle,
            lambda value, row: value in str(row.get(config.row_label_prop, '')).lower(),
        )
        display_forest(roots, config.row_label_prop, f"Search: {args.search}")

    check = [match_key(index, key) for key in args.check]
    uncheck = match_key(index, args.uncheck) if args.uncheck is not None else None

    if args.strict:
        # No conduction: unchecking drops only the key itself
        result = ConductionResult(
            checked_keys=[k for k in check if k in index and k != uncheck],
            missing_keys=[k for k in check if k not in index],
        )
    else:
        result = calc_check_state_conduct(index.key_entities, index.pos_entities, check)
        if uncheck is not None:
            remaining = calc_uncheck_conduct(result.checked_keys, uncheck, index.key_entities)
            result = calc_check_state_conduct(index.key_entities, index.pos_entities, remaining)

    display_conduction(result, index, config.row_label_prop)

    value_list = [{'value': index.key_entities[key].value} for key in result.checked_keys]
    selection = format_selector_value(value_list, config, index.value_entities)
    display_selection(selection, config.show_checked_strategy)

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='checktree',
        description="Compute tri-state check conduction over a JSON tree"
    )
    parser.add_argument('tree', type=Path, help="JSON file holding the tree data")
    parser.add_argument('--check', nargs='*', default=[], metavar='KEY',
                        help="Keys to check; integer keys are matched too")
    parser.add_argument('--uncheck', metavar='KEY',
                        help="Key to uncheck after checking")
    parser.add_argument('--strategy', choices=sorted(STRATEGY_ALIASES),
                        help="How checked values are reported")
    parser.add_argument('--strict', action='store_true',
                        help="Do not conduct check state between nodes")
    parser.add_argument('--label-prop', help="Node field used as label")
    parser.add_argument('--search', help="Show the tree pruned to matching labels")
    parser.add_argument('-v', '--verbose', action='store_true', help="Debug logging")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    return run(args)


if __name__ == '__main__':
    sys.exit(main())
