from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from ready.config.types import Task


class TaskError(Exception):
    """A task command failed; the message is the command's own output when it printed any."""

    def __init__(self, message: str, *, output: str = "", returncode: int | None = None) -> None:
        super().__init__(message)
        self.output = output
        self.returncode = returncode


@dataclass(frozen=True)
class TaskResult:
    name: str
    output: str
    error: str | None
    duration_s: float

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class RunResult:
    results: list[TaskResult] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    elapsed_s: float = 0.0

    @property
    def successes(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failures(self) -> int:
        return sum(1 for r in self.results if not r.ok)

    @property
    def idle(self) -> bool:
        return not self.results

    def exit_code(self, *, fail_when_idle: bool = False) -> int:
        if self.failures:
            return 1
        if self.idle:
            return 1 if fail_when_idle else 0
        return 0


class Reporter(Protocol):
    def task_started(self, task: Task) -> None: ...

    def task_succeeded(self, task: Task, output: str) -> None: ...

    def task_failed(self, task: Task, error: TaskError) -> None: ...
