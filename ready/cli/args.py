from __future__ import annotations

import argparse

from ready.config import ChangeMode


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ready",
        description="Run the configured tasks against the files changed for this commit.",
    )

    parser.add_argument(
        "--config",
        default=None,
        help="Path to config file (default: ready.yaml/.yml/.toml/.json in the current directory)",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Run all tasks without looking at changed files",
    )
    parser.add_argument(
        "--changes",
        choices=[mode.value for mode in ChangeMode],
        default=None,
        help="How changed files are detected (overrides the config file)",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print Ready version",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # init
    subparsers.add_parser("init", help="Install the git pre-commit hook")

    # list
    subparsers.add_parser("list", help="List tasks")

    return parser
