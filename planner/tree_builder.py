"""Incremental construction of a task forest from parsed lines."""

from __future__ import annotations

import logging
from collections import deque

from planner.cycle_detector import ensure_acyclic
from planner.dependency_graph import Forest, TaskNode
from planner.line_parser import ParsedLine

logger = logging.getLogger("taskorder.tree_builder")


class TreeBuilder:
    """Attach one parsed line at a time to a forest."""

    def __init__(self, forest: Forest | None = None) -> None:
        self.forest = forest or Forest()

    def insert(self, parsed: ParsedLine) -> Forest:
        """Insert a line into the forest and return it.

        A line without dependencies becomes a new root. The first line with
        dependencies in an empty forest becomes the anchor. Any other line is
        attached to every node carrying its identifier that is reachable from
        the anchor; when there is none the line is dropped.
        """
        forest = self.forest
        if not parsed.dependencies:
            forest.add_root(TaskNode(parsed.identifier))
            logger.debug("Line %d: added root %s", parsed.line_number, parsed.identifier)
            return forest

        if forest.is_empty:
            root = TaskNode(parsed.identifier)
            root.add_dependencies([TaskNode(dep) for dep in parsed.dependencies])
            forest.add_root(root)
            logger.debug("Line %d: anchored forest at %s", parsed.line_number, parsed.identifier)
            return forest

        matched = self._attach_to_matches(parsed)
        if not matched:
            logger.warning(
                "Line %d: %s is not in the current tree; dropped dependencies %s",
                parsed.line_number,
                parsed.identifier,
                ",".join(parsed.dependencies),
            )
        return forest

    def _attach_to_matches(self, parsed: ParsedLine) -> int:
        walk: deque[TaskNode] = deque([self.forest.roots[0]])
        matched = 0

        while walk:
            node = walk.popleft()
            walk.extend(node.dependencies)
            if node.identifier != parsed.identifier:
                continue

            matched += 1
            for dep in parsed.dependencies:
                ensure_acyclic(dep, self.forest, parsed.line_number)
                node.add_dependency(TaskNode(dep))

        logger.debug(
            "Line %d: attached %s to %d node(s)", parsed.line_number, parsed.identifier, matched
        )
        return matched


def insert(forest: Forest, parsed: ParsedLine) -> Forest:
    """Insert parsed into forest in place."""
    return TreeBuilder(forest).insert(parsed)
