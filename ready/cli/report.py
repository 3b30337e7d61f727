from __future__ import annotations

import sys
from typing import TextIO

from ready.config import Task
from ready.executor import RunResult, TaskError


def format_elapsed(seconds: float) -> str:
    ms = round(seconds * 1000)
    if ms < 1000:
        return f"{ms}ms"
    return f"{ms / 1000:.3f}".rstrip("0").rstrip(".") + "s"


class ConsoleReporter:
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def _print(self, *args: object, end: str = "\n") -> None:
        print(*args, end=end, file=self.stream, flush=True)

    def task_started(self, task: Task) -> None:
        self._print(f"Running task {task.name}... ⏳ ", end="")

    def task_succeeded(self, task: Task, output: str) -> None:
        if output == "":
            self._print("Success ✅\n")
        else:
            self._print(f"Success ✅\n\n{output}")

    def task_failed(self, task: Task, error: TaskError) -> None:
        self._print(f"Failure ❌\n\n{error}")

    def summary(self, result: RunResult) -> None:
        if result.idle:
            self._print("Nothing to do 💤")
            return

        if result.failures == 1:
            self._print("Got 1 failure. Please fix it and try again ⚠️ \n")
        elif result.failures > 1:
            self._print(
                f"Got {result.failures} failures. Please fix them and try again ⚠️ \n"
            )
        else:
            self._print(
                f"{result.successes} tasks completed successfully in "
                f"{format_elapsed(result.elapsed_s)} ✨\n"
            )
