from __future__ import annotations

from ready.changes.types import ChangeSet
from ready.config.types import Task


def select(task: Task, changes: ChangeSet | None, run_all: bool = False) -> bool:
    if run_all:
        return True
    if changes is None or changes.is_empty:
        return False
    if not task.directory:
        return True
    return changes.mentions(task.directory)
