# Path: checktree/tests/fixtures.py
"""
Test Fixtures for Checktree

Sample trees used across the test modules.

Sample tree (keys; values are the upper-case keys, titles "Node X"):

    a
    ├── b
    │   ├── d
    │   └── e
    └── c
"""

from typing import Optional


def make_node(key: str, children: Optional[list] = None, **extra) -> dict:
    """Build a raw node with value = key.upper() and title = 'Node X'."""
    node = {'key': key, 'value': key.upper(), 'title': f'Node {key.upper()}'}
    node.update(extra)
    if children is not None:
        node['children'] = children
    return node


def create_sample_tree() -> list[dict]:
    """a(b(d, e), c)"""
    return [
        make_node('a', [
            make_node('b', [
                make_node('d'),
                make_node('e'),
            ]),
            make_node('c'),
        ]),
    ]


def create_forest() -> list[dict]:
    """
    Two top-level trees:

        fruit(apple, pear(green_pear, red_pear))
        veg(carrot)
    """
    return [
        make_node('fruit', [
            make_node('apple'),
            make_node('pear', [
                make_node('green_pear'),
                make_node('red_pear'),
            ]),
        ]),
        make_node('veg', [
            make_node('carrot'),
        ]),
    ]


def create_chain(depth: int) -> dict:
    """Single path n0 -> n1 -> ... built without recursion."""
    root = {'key': 'n0', 'value': 'n0', 'title': 'n0'}
    node = root
    for i in range(1, depth):
        child = {'key': f'n{i}', 'value': f'n{i}', 'title': f'n{i}'}
        node['children'] = [child]
        node = child
    return root
