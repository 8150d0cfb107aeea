"""Typer command handlers."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import typer

from core.event_bus import FOREST_CLOSED
from core.orchestrator import Orchestrator, RuntimeBundle
from core.policy_runtime import configure_logging
from planner.errors import TaskOrderError
from planner.flattener import flatten

logger = logging.getLogger("taskorder.cli")

STDIN_PATH = "-"


def _runtime(config_path: Path | None = None, log_level: str | None = None) -> RuntimeBundle:
    try:
        bundle = Orchestrator(config_path=config_path).build()
        configure_logging(log_level or bundle.log_level)
    except (OSError, ValueError) as exc:
        typer.echo(f"[Error] - {exc}", err=True)
        raise typer.Exit(code=1) from exc
    return bundle


def _read_lines(source: str, encoding: str) -> list[str]:
    """Read the task list from a file path or stdin."""
    if source == STDIN_PATH:
        return sys.stdin.read().splitlines()
    path = Path(source)
    try:
        return path.read_text(encoding=encoding).splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        typer.echo(f"[Error] - Cannot read input file: {path}", err=True)
        raise typer.Exit(code=1) from exc


def _fail(exc: TaskOrderError) -> typer.Exit:
    logger.debug("Aborting on line %d: %s", exc.line_number, exc.message)
    typer.echo(f"[Error] - {exc.message}", err=True)
    return typer.Exit(code=1)


def run(
    path: str | None = None,
    stream: bool = False,
    config_path: Path | None = None,
    log_level: str | None = None,
) -> None:
    """Print one dependency-first order per block."""
    bundle = _runtime(config_path, log_level)
    lines = _read_lines(path or bundle.input_path, bundle.encoding)
    streaming = stream or bundle.stream

    def print_closed(event: dict[str, Any]) -> None:
        typer.echo(flatten(event["forest"]).render())

    if streaming:
        bundle.event_bus.subscribe(FOREST_CLOSED, print_closed)

    try:
        forests = bundle.segmenter.build_forests(lines)
    except TaskOrderError as exc:
        raise _fail(exc) from exc
    finally:
        if streaming:
            bundle.event_bus.unsubscribe(FOREST_CLOSED, print_closed)

    if not streaming:
        for forest in forests:
            typer.echo(flatten(forest).render())


def tree(path: str | None = None, config_path: Path | None = None) -> None:
    """Print the built forests as JSON."""
    bundle = _runtime(config_path)
    lines = _read_lines(path or bundle.input_path, bundle.encoding)
    try:
        forests = bundle.segmenter.build_forests(lines)
    except TaskOrderError as exc:
        raise _fail(exc) from exc
    typer.echo(json.dumps([forest.to_dict() for forest in forests], indent=2))


def check(path: str | None = None, config_path: Path | None = None) -> None:
    """Validate the input without printing orders."""
    bundle = _runtime(config_path)
    lines = _read_lines(path or bundle.input_path, bundle.encoding)
    try:
        forests = bundle.segmenter.build_forests(lines)
    except TaskOrderError as exc:
        raise _fail(exc) from exc
    typer.echo(f"OK: {len(forests)} forest(s)")


def config_show(config_path: Path | None = None) -> None:
    """Show effective runtime config."""
    bundle = _runtime(config_path)
    typer.echo(json.dumps(_json_safe(bundle.config), indent=2))


def _json_safe(payload: Any) -> Any:
    """Convert paths and other non-JSON values to strings."""
    if isinstance(payload, dict):
        return {str(k): _json_safe(v) for k, v in payload.items()}
    if isinstance(payload, list):
        return [_json_safe(v) for v in payload]
    if isinstance(payload, (str, int, float, bool)) or payload is None:
        return payload
    return str(payload)
