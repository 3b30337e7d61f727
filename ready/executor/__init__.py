from .executor import Executor
from .selector import select
from .shell import run_task, shell_command
from .types import Reporter, RunResult, TaskError, TaskResult

__all__ = [
    "Executor",
    "select",
    "run_task",
    "shell_command",
    "Reporter",
    "RunResult",
    "TaskError",
    "TaskResult",
]
