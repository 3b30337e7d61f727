from __future__ import annotations

import logging
import time
from typing import Callable

from ready.changes import ChangeSet, GitInspector
from ready.config import ReadyConfig, Task

from .selector import select
from .shell import run_task
from .types import Reporter, RunResult, TaskError, TaskResult

logger = logging.getLogger(__name__)


class Executor:
    def __init__(
        self,
        config: ReadyConfig,
        inspector: GitInspector,
        reporter: Reporter | None = None,
        *,
        runner: Callable[[Task], str] = run_task,
    ):
        self.config = config
        self.inspector = inspector
        self.reporter = reporter
        self.runner = runner

    def run(self, *, run_all: bool = False) -> RunResult:
        results: list[TaskResult] = []
        skipped: list[str] = []
        start = time.monotonic()

        # --all never touches git, so it also works outside a usable repository.
        changes: ChangeSet | None = None if run_all else self.inspector.inspect()

        for task in self.config:
            if not select(task, changes, run_all):
                logger.debug("skipping %s: no relevant changes", task.name)
                skipped.append(task.name)
                continue

            results.append(self._run_one(task))

        return RunResult(results, skipped, time.monotonic() - start)

    def _run_one(self, task: Task) -> TaskResult:
        if self.reporter is not None:
            self.reporter.task_started(task)

        task_start = time.monotonic()
        try:
            output = self.runner(task)
        except TaskError as exc:
            duration = time.monotonic() - task_start
            if self.reporter is not None:
                self.reporter.task_failed(task, exc)
            return TaskResult(task.name, exc.output, str(exc), duration)

        duration = time.monotonic() - task_start
        if self.reporter is not None:
            self.reporter.task_succeeded(task, output)
        return TaskResult(task.name, output, None, duration)
