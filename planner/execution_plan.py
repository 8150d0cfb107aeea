"""Execution plan models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ExecutionPlan:
    """Dependency-first task order for one forest."""

    tasks: list[str] = field(default_factory=list)

    def render(self) -> str:
        """Space-separated output line."""
        return " ".join(self.tasks)
