"""Parsing of ``IDENTIFIER:DEP,DEP`` task lines."""

from __future__ import annotations

from pydantic import BaseModel, Field

from planner.errors import MalformedLine

SEPARATOR = ":"
DEPENDENCY_DELIMITER = ","


class ParsedLine(BaseModel):
    """Identifier and dependency tokens from one task line."""

    identifier: str
    dependencies: list[str] = Field(default_factory=list)
    line_number: int

    @property
    def tokens(self) -> list[str]:
        return [self.identifier, *self.dependencies]


def parse_task_line(line: str, line_number: int) -> ParsedLine:
    """Split a task line at its first separator.

    Tokens are kept verbatim; no whitespace is trimmed.
    """
    if SEPARATOR not in line:
        raise MalformedLine(line, line_number)

    identifier, _, dep_list = line.partition(SEPARATOR)
    dependencies = dep_list.split(DEPENDENCY_DELIMITER) if dep_list else []
    return ParsedLine(
        identifier=identifier,
        dependencies=dependencies,
        line_number=line_number,
    )
