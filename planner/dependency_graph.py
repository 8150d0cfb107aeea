"""Task tree and forest models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class TaskNode:
    """One occurrence of a task and the dependency nodes it owns.

    Every mention of an identifier on the right of a ``:`` gets its own node,
    so one identifier can appear many times in a tree.
    """

    identifier: str
    dependencies: list[TaskNode] = field(default_factory=list)

    def add_dependency(self, node: TaskNode) -> None:
        self.dependencies.append(node)

    def add_dependencies(self, nodes: list[TaskNode]) -> None:
        self.dependencies.extend(nodes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "identifier": self.identifier,
            "dependencies": [dep.to_dict() for dep in self.dependencies],
        }


@dataclass
class Forest:
    """Ordered root nodes built from one block of input."""

    roots: list[TaskNode] = field(default_factory=list)

    @property
    def anchor(self) -> TaskNode | None:
        """First root; every lookup and walk starts here."""
        return self.roots[0] if self.roots else None

    @property
    def is_empty(self) -> bool:
        return not self.roots

    def add_root(self, node: TaskNode) -> None:
        self.roots.append(node)

    def to_dict(self) -> list[dict[str, Any]]:
        return [root.to_dict() for root in self.roots]
