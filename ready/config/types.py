from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class ChangeMode(str, Enum):
    STAGED = "staged"
    WORKTREE = "worktree"
    DIRSTAT = "dirstat"


@dataclass(frozen=True)
class Task:
    name: str
    command: str
    directory: str | None = None


@dataclass
class ReadyConfig:
    tasks: list[Task]
    changes: ChangeMode = ChangeMode.STAGED
    fail_when_idle: bool = False
    path: Path | None = field(default=None, compare=False)

    def __iter__(self):
        yield from self.tasks

    def __len__(self):
        return len(self.tasks)

    def names(self) -> list[str]:
        return [task.name for task in self.tasks]


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
