"""Flattening a forest into a dependency-first task order."""

from __future__ import annotations

from collections import deque

from planner.dependency_graph import Forest, TaskNode
from planner.execution_plan import ExecutionPlan


def flatten(forest: Forest) -> ExecutionPlan:
    """Breadth-first from the anchor, first visit per identifier, reversed.

    A repeated identifier is skipped together with its subtree. Later roots
    never own dependencies; those not yet emitted follow in line order.
    """
    if forest.anchor is None:
        return ExecutionPlan()

    walk: deque[TaskNode] = deque([forest.anchor])
    seen: set[str] = set()
    order: list[str] = []

    while walk:
        node = walk.popleft()
        if node.identifier in seen:
            continue
        seen.add(node.identifier)
        order.append(node.identifier)
        walk.extend(node.dependencies)

    order.reverse()

    for root in forest.roots[1:]:
        if root.identifier not in seen:
            seen.add(root.identifier)
            order.append(root.identifier)

    return ExecutionPlan(tasks=order)
