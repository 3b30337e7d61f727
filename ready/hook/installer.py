from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)

HOOK_PATH = Path(".git") / "hooks" / "pre-commit"

HOOK_SCRIPT = """\
#!/bin/sh
# Hook created by Ready

initial_state=$(git diff --name-only)

ready

exit_status=$?
if [ $exit_status -ne 0 ]; then
	exit $exit_status
fi

latest_state=$(git diff --name-only)
if [ "$latest_state" != "$initial_state" ]; then
	echo "Some files have been modified by the hook. Please handle them and commit again 🔧"
	exit 1
fi

exit 0
"""


class HookError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


def install_hook(
    root: Path | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> bool:
    """Write the pre-commit hook under ``root`` (default: cwd).

    When a hook already exists the user is asked once on ``stdin``; only an
    answer of ``yes`` overwrites it. Returns ``False`` when the user declined.
    """
    root = root if root is not None else Path.cwd()
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    git_dir = root / ".git"
    if not git_dir.is_dir():
        raise HookError(f"not a git repository: {git_dir} not found")

    hook = root / HOOK_PATH
    if hook.exists():
        print(
            "A pre-commit hook already exists ℹ️  Do you want to overwrite it? [yes/no]",
            file=stdout,
            flush=True,
        )
        answer = stdin.readline().strip()
        if answer != "yes":
            logger.debug("keeping existing hook at %s", hook)
            return False

    try:
        hook.parent.mkdir(parents=True, exist_ok=True)
        hook.write_text(HOOK_SCRIPT, encoding="utf-8", newline="\n")
        hook.chmod(0o755)
    except OSError as exc:
        raise HookError(f"creating file: {exc}") from exc

    logger.debug("wrote pre-commit hook to %s", hook)
    return True
