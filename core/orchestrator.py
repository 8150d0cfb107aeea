"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.event_bus import EventBus
from core.policy_runtime import load_effective_config
from planner.segmenter import ForestSegmenter


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    event_bus: EventBus
    segmenter: ForestSegmenter

    @property
    def input_path(self) -> str:
        return str(self.config.get("input", {}).get("path", "input.txt"))

    @property
    def encoding(self) -> str:
        return str(self.config.get("input", {}).get("encoding", "utf-8"))

    @property
    def stream(self) -> bool:
        return bool(self.config.get("output", {}).get("stream", False))

    @property
    def log_level(self) -> str:
        return str(self.config.get("logging", {}).get("level", "WARNING"))


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, root: Path | None = None, config_path: Path | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()
        self.config_path = config_path

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.root, self.config_path)
        event_bus = EventBus()
        return RuntimeBundle(
            config=config,
            event_bus=event_bus,
            segmenter=ForestSegmenter(event_bus=event_bus),
        )
