from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from types import SimpleNamespace

import pytest

from ready.changes import inspector
from ready.changes.inspector import EMPTY_TREE, GitInspector
from ready.changes.types import ChangeSet, ChangeSetError
from ready.config.types import ChangeMode


def test_change_set_empty_when_output_blank() -> None:
    assert ChangeSet(ChangeMode.STAGED, "").is_empty
    assert ChangeSet(ChangeMode.STAGED, "\n").is_empty
    assert not ChangeSet(ChangeMode.STAGED, "main.go\n").is_empty


def test_mentions_is_plain_substring_match() -> None:
    changes = ChangeSet(ChangeMode.STAGED, "apidocs/index.md\nweb/app.ts\n")

    assert changes.mentions("web")
    assert changes.mentions("web/app")
    # Not path-boundary aware: "api" is found inside "apidocs".
    assert changes.mentions("api")
    assert not changes.mentions("cli")


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        (ChangeMode.STAGED, ["git", "diff", "--name-only", "--cached", "--diff-filter=AM"]),
        (ChangeMode.WORKTREE, ["git", "diff", "--name-only", "HEAD"]),
        (ChangeMode.DIRSTAT, ["git", "diff", "--cached", "--dirstat=files,0"]),
    ],
)
def test_inspect_runs_git_command_for_mode(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, mode: ChangeMode, expected: list[str]
) -> None:
    calls: list[tuple[list[str], object]] = []

    def fake_run(args: list[str], **kwargs: object) -> SimpleNamespace:
        calls.append((args, kwargs["cwd"]))
        assert kwargs["stderr"] is subprocess.STDOUT
        return SimpleNamespace(returncode=0, stdout="src/main.py\n")

    monkeypatch.setattr(inspector.subprocess, "run", fake_run)

    changes = GitInspector(mode, cwd=tmp_path).inspect()

    assert calls[-1] == (expected, tmp_path)
    assert changes == ChangeSet(mode, "src/main.py\n")


def test_inspect_non_zero_exit_raises_with_git_output(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        inspector.subprocess,
        "run",
        lambda args, **kwargs: SimpleNamespace(
            returncode=128, stdout="fatal: not a git repository\n"
        ),
    )

    with pytest.raises(ChangeSetError, match="fatal: not a git repository"):
        GitInspector().inspect()


def test_inspect_missing_git_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(args: list[str], **kwargs: object) -> SimpleNamespace:
        raise FileNotFoundError(2, "No such file or directory", "git")

    monkeypatch.setattr(inspector.subprocess, "run", fake_run)

    with pytest.raises(ChangeSetError, match="No such file or directory"):
        GitInspector().inspect()


@pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
def test_inspect_staged_files_in_real_repository(tmp_path: Path) -> None:
    subprocess.run(["git", "init", "-q"], cwd=tmp_path, check=True)
    (tmp_path / "api").mkdir()
    (tmp_path / "api" / "main.go").write_text("package main\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not staged\n", encoding="utf-8")

    git = GitInspector(ChangeMode.STAGED, cwd=tmp_path)
    assert git.inspect().is_empty

    subprocess.run(["git", "add", "api/main.go"], cwd=tmp_path, check=True)
    changes = git.inspect()

    assert not changes.is_empty
    assert changes.mentions("api")
    assert not changes.mentions("notes.txt")


def test_worktree_mode_uses_empty_tree_without_head(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []

    def fake_run(args: list[str], **kwargs: object) -> SimpleNamespace:
        calls.append(args)
        if args[1] == "rev-parse":
            return SimpleNamespace(returncode=1, stdout="")
        return SimpleNamespace(returncode=0, stdout="a.txt\n")

    monkeypatch.setattr(inspector.subprocess, "run", fake_run)

    changes = GitInspector(ChangeMode.WORKTREE).inspect()

    assert calls == [
        ["git", "rev-parse", "--verify", "-q", "HEAD"],
        ["git", "diff", "--name-only", EMPTY_TREE],
    ]
    assert changes.mentions("a.txt")


def test_staged_mode_does_not_look_up_head(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []

    def fake_run(args: list[str], **kwargs: object) -> SimpleNamespace:
        calls.append(args)
        return SimpleNamespace(returncode=0, stdout="")

    monkeypatch.setattr(inspector.subprocess, "run", fake_run)

    GitInspector(ChangeMode.STAGED).inspect()

    assert [args[1] for args in calls] == ["diff"]


@pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
@pytest.mark.parametrize("mode", list(ChangeMode))
def test_inspect_before_first_commit(tmp_path: Path, mode: ChangeMode) -> None:
    subprocess.run(["git", "init", "-q"], cwd=tmp_path, check=True)
    (tmp_path / "api").mkdir()
    (tmp_path / "api" / "a.txt").write_text("first\n", encoding="utf-8")
    subprocess.run(["git", "add", "api/a.txt"], cwd=tmp_path, check=True)

    git = GitInspector(mode, cwd=tmp_path)
    changes = git.inspect()

    assert not git.has_head()
    assert not changes.is_empty
    assert changes.mentions("api")


def test_inspect_outside_repository_raises(tmp_path: Path) -> None:
    if shutil.which("git") is None:
        pytest.skip("git not installed")
    if subprocess.run(
        ["git", "rev-parse", "--git-dir"], cwd=tmp_path, capture_output=True
    ).returncode == 0:
        pytest.skip("tmp_path is inside a git repository")

    with pytest.raises(ChangeSetError):
        GitInspector(cwd=tmp_path).inspect()
