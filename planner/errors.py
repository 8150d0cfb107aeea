"""Fatal conditions raised while reading a task list."""

from __future__ import annotations


class TaskOrderError(Exception):
    """Base for conditions that abort the whole run."""

    def __init__(self, token: str, line_number: int) -> None:
        self.token = token
        self.line_number = line_number
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"Task error: [{self.token}] encountered on line: [{self.line_number}]."


class MalformedLine(TaskOrderError):
    """A task line without the ``:`` separator."""

    @property
    def message(self) -> str:
        return (
            f"Invalid task: [{self.token}] encountered on line: [{self.line_number}]. "
            'Task must include a ":" separator to be considered valid.'
        )


class InvalidIdentifier(TaskOrderError):
    """An identifier that does not match the identifier pattern."""

    def __init__(self, token: str, line_number: int, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(token, line_number)

    @property
    def message(self) -> str:
        return (
            f"Invalid task identifier: [{self.token}] encountered on line: "
            f"[{self.line_number}]. Task identifiers must match pattern of {self.pattern}."
        )


class CyclicalDependency(TaskOrderError):
    """Attaching a dependency would close a loop in the tree."""

    @property
    def message(self) -> str:
        return f"Cyclical dependency: [{self.token}] encountered on line: [{self.line_number}]."
