"""Configuration loading tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from core.orchestrator import Orchestrator
from core.policy_runtime import (
    DEFAULT_CONFIG,
    configure_logging,
    load_effective_config,
    load_yaml,
    merge_dicts,
)


def test_missing_yaml_is_empty(tmp_path: Path) -> None:
    assert load_yaml(tmp_path / "absent.yaml") == {}


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_yaml(path)


def test_merge_is_recursive() -> None:
    merged = merge_dicts({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}})

    assert merged == {"a": {"x": 1, "y": 3}, "b": 1}


def test_defaults_without_config_dir(tmp_path: Path) -> None:
    assert load_effective_config(tmp_path) == DEFAULT_CONFIG


def test_layering(tmp_path: Path) -> None:
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "default.yaml").write_text(
        "output:\n  stream: true\nlogging:\n  level: INFO\n", encoding="utf-8"
    )
    extra = tmp_path / "extra.yaml"
    extra.write_text("logging:\n  level: DEBUG\n", encoding="utf-8")

    config = load_effective_config(tmp_path, extra)

    assert config["output"]["stream"] is True
    assert config["logging"]["level"] == "DEBUG"
    assert config["input"]["path"] == "input.txt"


def test_explicit_config_must_exist(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_effective_config(tmp_path, tmp_path / "nope.yaml")


def test_orchestrator_bundle(tmp_path: Path) -> None:
    bundle = Orchestrator(root=tmp_path).build()

    assert bundle.input_path == "input.txt"
    assert bundle.encoding == "utf-8"
    assert bundle.stream is False
    assert bundle.segmenter.event_bus is bundle.event_bus


def test_configure_logging_levels() -> None:
    configure_logging("debug")
    assert logging.getLogger().level == logging.DEBUG

    configure_logging("WARNING")
    assert logging.getLogger().level == logging.WARNING

    with pytest.raises(ValueError):
        configure_logging("chatty")
