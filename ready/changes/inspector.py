from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from ready.config.types import ChangeMode

from .types import ChangeSet, ChangeSetError

logger = logging.getLogger(__name__)

GIT_COMMANDS: dict[ChangeMode, tuple[str, ...]] = {
    ChangeMode.STAGED: ("diff", "--name-only", "--cached", "--diff-filter=AM"),
    ChangeMode.WORKTREE: ("diff", "--name-only", "HEAD"),
    ChangeMode.DIRSTAT: ("diff", "--cached", "--dirstat=files,0"),
}

# Object id of git's empty tree, the baseline before the first commit.
EMPTY_TREE = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"


class GitInspector:
    def __init__(self, mode: ChangeMode = ChangeMode.STAGED, *, cwd: Path | None = None) -> None:
        self.mode = mode
        self.cwd = cwd

    def inspect(self) -> ChangeSet:
        args = list(GIT_COMMANDS[self.mode])
        if "HEAD" in args and not self.has_head():
            logger.debug("HEAD is unborn, diffing against the empty tree")
            args = [EMPTY_TREE if arg == "HEAD" else arg for arg in args]

        p = self._git(args)
        if p.returncode != 0:
            detail = p.stdout.strip() or f"exit status {p.returncode}"
            raise ChangeSetError(f"Error determining files with changes: {detail}")

        changes = ChangeSet(mode=self.mode, output=p.stdout)
        logger.debug("%s change-set has %d line(s)", self.mode.value, len(p.stdout.splitlines()))
        return changes

    def has_head(self) -> bool:
        return self._git(["rev-parse", "--verify", "-q", "HEAD"]).returncode == 0

    def _git(self, args: list[str]) -> subprocess.CompletedProcess[str]:
        logger.debug("running: git %s", " ".join(args))
        try:
            return subprocess.run(
                ["git", *args],
                cwd=self.cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise ChangeSetError(f"Error determining files with changes: {exc}") from exc
