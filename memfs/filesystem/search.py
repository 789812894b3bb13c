"""
Search Module

Breadth-first search over the in-memory tree.

Author: YSNRFD
Version: 1.0.0
"""

from collections import deque
from typing import List

from .node import Node


def breadth_first_search(start: Node, target: str) -> List[Node]:
    """
    Find every node named ``target`` under ``start`` (inclusive).

    Nodes are visited level by level; siblings in child-map order.
    The visited set is keyed by node identity, so two different
    nodes sharing a name are both reported.

    Args:
        start: Node to start from (normally the root)
        target: Exact name to match

    Returns:
        Matching nodes in discovery order; empty if none
    """
    if start is None:
        return []

    visited: set[int] = set()
    queue = deque([start])
    result: List[Node] = []

    while queue:
        node = queue.popleft()
        if id(node) in visited:
            continue
        visited.add(id(node))

        if node.name == target:
            result.append(node)

        queue.extend(node.children.values())

    return result
