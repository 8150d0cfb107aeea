"""Splitting input lines into blocks and building one forest per block."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from core.event_bus import FOREST_CLOSED, EventBus
from planner.dependency_graph import Forest
from planner.execution_plan import ExecutionPlan
from planner.flattener import flatten
from planner.identifiers import validate_identifiers
from planner.line_parser import parse_task_line
from planner.tree_builder import TreeBuilder

logger = logging.getLogger("taskorder.segmenter")

COMMENT_PREFIX = "#"


def is_comment(line: str) -> bool:
    return line.startswith(COMMENT_PREFIX)


class ForestSegmenter:
    """Turns an ordered sequence of lines into completed forests.

    Comment lines are skipped. An empty line closes the forest in progress,
    if any, and end of input closes it the same way. Every other line is
    parsed, validated and inserted into the current forest.
    """

    def __init__(self, event_bus: EventBus | None = None) -> None:
        self.event_bus = event_bus

    def iter_forests(self, lines: Iterable[str]) -> Iterator[Forest]:
        """Yield each forest as soon as its block closes."""
        builder = TreeBuilder()
        closed = 0
        line_number = 0

        for line_number, line in enumerate(lines, start=1):
            if is_comment(line):
                continue

            if not line:
                if builder.forest.is_empty:
                    continue
                yield self._close(builder.forest, closed, line_number)
                closed += 1
                builder = TreeBuilder()
                continue

            parsed = parse_task_line(line, line_number)
            validate_identifiers(parsed.tokens, line_number)
            builder.insert(parsed)

        if not builder.forest.is_empty:
            yield self._close(builder.forest, closed, line_number)

    def build_forests(self, lines: Iterable[str]) -> list[Forest]:
        """Build every forest before returning any."""
        return list(self.iter_forests(lines))

    def _close(self, forest: Forest, index: int, line_number: int) -> Forest:
        logger.debug("Forest %d closed at line %d with %d root(s)", index, line_number, len(forest.roots))
        if self.event_bus is not None:
            self.event_bus.emit(
                FOREST_CLOSED,
                {"index": index, "line_number": line_number, "forest": forest},
            )
        return forest


def order_tasks(lines: Iterable[str]) -> list[ExecutionPlan]:
    """Plans for every block; raises before producing any on a fatal line."""
    forests = ForestSegmenter().build_forests(lines)
    return [flatten(forest) for forest in forests]
