from __future__ import annotations

import logging
import subprocess
import sys

from ready.config.types import Task

from .types import TaskError

logger = logging.getLogger(__name__)

SHELLS: dict[str, tuple[str, ...]] = {
    "win32": ("cmd", "/C"),
}
POSIX_SHELL: tuple[str, ...] = ("/bin/sh", "-c")


def shell_command(command: str, platform: str = sys.platform) -> list[str]:
    return [*SHELLS.get(platform, POSIX_SHELL), command]


def run_task(task: Task, platform: str = sys.platform) -> str:
    """Run ``task`` through the host shell and return its combined stdout/stderr.

    Raises ``TaskError`` on a non-zero exit. The error message is the captured
    output when there is any, otherwise the process error itself
    (``exit status N``), so the user sees the command's own diagnostics.
    """
    args = shell_command(task.command, platform)
    cwd = task.directory or None
    logger.debug("running %r in %s", args, cwd or ".")

    try:
        p = subprocess.run(
            args,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            check=False,
        )
    except (OSError, ValueError) as exc:
        # ValueError is raised for an embedded NUL byte in the command.
        raise TaskError(str(exc)) from exc

    logger.debug("%s exited with %d", task.name, p.returncode)

    if p.returncode != 0:
        if p.stdout == "":
            raise TaskError(f"exit status {p.returncode}", returncode=p.returncode)
        raise TaskError(p.stdout, output=p.stdout, returncode=p.returncode)

    return p.stdout
