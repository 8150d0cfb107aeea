"""Bounded cycle probe run before a dependency is attached.

The probe walks depth-first from the forest anchor and stops at the first
node without dependencies. It only sees that first branch, so a loop that
closes through a later sibling branch is not reported.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import cast

from planner.dependency_graph import Forest, TaskNode
from planner.errors import CyclicalDependency

logger = logging.getLogger("taskorder.cycle_detector")

# Marks the end of the first exhausted branch.
_BRANCH_END = object()


def would_cycle(candidate: str, forest: Forest) -> bool:
    """Return True if candidate was already passed on the anchor's first branch."""
    if forest.anchor is None:
        return False

    walk: deque[TaskNode | object] = deque([forest.anchor])
    visited: set[str] = set()

    while walk:
        slot = walk.popleft()
        if slot is _BRANCH_END:
            break
        popped = cast(TaskNode, slot)

        if popped.dependencies:
            walk.extendleft(reversed(popped.dependencies))
        else:
            walk.appendleft(_BRANCH_END)

        if candidate in visited:
            logger.debug("Probe for %s hit %s on the first branch", candidate, popped.identifier)
            return True

        visited.add(popped.identifier)

    return False


def ensure_acyclic(candidate: str, forest: Forest, line_number: int) -> None:
    """Raise CyclicalDependency when attaching candidate would loop."""
    if would_cycle(candidate, forest):
        raise CyclicalDependency(candidate, line_number)
