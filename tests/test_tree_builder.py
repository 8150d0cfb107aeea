"""Tree construction tests."""

from __future__ import annotations

from typing import Any

import pytest

from planner.dependency_graph import Forest
from planner.errors import CyclicalDependency
from planner.line_parser import parse_task_line
from planner.tree_builder import TreeBuilder, insert


def build(*lines: str) -> Forest:
    builder = TreeBuilder()
    for number, line in enumerate(lines, start=1):
        builder.insert(parse_task_line(line, number))
    return builder.forest


def leaf(identifier: str) -> dict[str, Any]:
    return {"identifier": identifier, "dependencies": []}


def node(identifier: str, *deps: dict[str, Any]) -> dict[str, Any]:
    return {"identifier": identifier, "dependencies": list(deps)}


def test_simple_binary_tree() -> None:
    forest = build("T:A,B", "A:", "B:")

    assert forest.to_dict() == [node("T", leaf("A"), leaf("B")), leaf("A"), leaf("B")]


def test_lines_without_dependencies_are_roots_in_order() -> None:
    forest = build("A:", "B:", "C:")

    assert [root.identifier for root in forest.roots] == ["A", "B", "C"]
    assert all(not root.dependencies for root in forest.roots)


def test_every_matching_node_gets_the_dependencies() -> None:
    forest = build("T:A,B", "A:C", "B:C", "C:D", "D:")

    assert forest.to_dict() == [
        node("T", node("A", node("C", leaf("D"))), node("B", node("C", leaf("D")))),
        leaf("D"),
    ]


def test_each_attachment_owns_a_fresh_node() -> None:
    forest = build("T:A,B", "A:C", "B:C", "C:D")
    anchor = forest.roots[0]
    first_d = anchor.dependencies[0].dependencies[0].dependencies[0]
    second_d = anchor.dependencies[1].dependencies[0].dependencies[0]

    assert first_d.identifier == second_d.identifier == "D"
    assert first_d is not second_d


def test_multi_level_multi_leaf() -> None:
    forest = build("T:A,B,C", "B:D", "C:F", "D:F", "A:D,E,F", "E:", "F:")

    assert forest.to_dict() == [
        node(
            "T",
            node("A", leaf("D"), leaf("E"), leaf("F")),
            node("B", node("D", leaf("F"))),
            node("C", leaf("F")),
        ),
        leaf("E"),
        leaf("F"),
    ]


def test_words_as_identifiers() -> None:
    forest = build(
        "Release:LoadTest,FunctionalTest,VirusScan",
        "LoadTest:Build",
        "FunctionalTest:Build",
        "VirusScan:Build",
        "Build:",
    )

    assert forest.to_dict() == [
        node(
            "Release",
            node("LoadTest", leaf("Build")),
            node("FunctionalTest", leaf("Build")),
            node("VirusScan", leaf("Build")),
        ),
        leaf("Build"),
    ]


def test_unknown_identifier_is_dropped() -> None:
    forest = build("A:B", "X:Y")

    assert forest.to_dict() == [node("A", leaf("B"))]


def test_dependency_free_anchor_blocks_later_edges() -> None:
    forest = build("A:", "B:C")

    assert forest.to_dict() == [leaf("A")]


def test_cycle_back_to_anchor_raises() -> None:
    with pytest.raises(CyclicalDependency) as excinfo:
        build("A:B,C", "C:D", "D:A")

    assert excinfo.value.token == "A"
    assert excinfo.value.line_number == 3


def test_module_level_insert_mutates_forest() -> None:
    forest = Forest()
    insert(forest, parse_task_line("T:A", 1))
    insert(forest, parse_task_line("A:B", 2))

    assert forest.to_dict() == [node("T", node("A", leaf("B")))]
