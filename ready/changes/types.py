from dataclasses import dataclass

from ready.config.types import ChangeMode


@dataclass(frozen=True)
class ChangeSet:
    """Raw output of the git query used to decide which tasks are relevant.

    The output is kept as opaque text. ``mentions`` is plain substring
    containment and does not respect path boundaries: a task scoped to
    ``api`` also matches a change under ``apidocs/``.
    """

    mode: ChangeMode
    output: str

    @property
    def is_empty(self) -> bool:
        return not self.output.strip()

    def mentions(self, directory: str) -> bool:
        return directory in self.output


class ChangeSetError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
