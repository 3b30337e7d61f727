from __future__ import annotations

import argparse
import logging
import sys

from ready import __version__
from ready.changes import ChangeSetError, GitInspector
from ready.config import ChangeMode, ConfigError, load_config
from ready.executor import Executor
from ready.hook import HookError, install_hook

from .args import build_parser
from .report import ConsoleReporter
from .signals import install_signal_handlers


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        _configure_logging(args.verbose)

        if args.version:
            return cmd_version(args)

        match args.command:
            case None:
                return cmd_run(args)
            case "init":
                return cmd_init(args)
            case "list":
                return cmd_list(args)
            case _:
                return 2

    except (ConfigError, ChangeSetError) as exc:
        print(f"{exc} 💥", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        return 130


def main() -> None:
    install_signal_handlers()
    sys.exit(run_cli())


def cmd_run(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    mode = ChangeMode(args.changes) if args.changes else config.changes
    reporter = ConsoleReporter()
    executor = Executor(config, GitInspector(mode), reporter)

    rr = executor.run(run_all=args.all)
    reporter.summary(rr)
    return rr.exit_code(fail_when_idle=config.fail_when_idle)


def cmd_init(args: argparse.Namespace) -> int:
    try:
        installed = install_hook()
    except HookError as exc:
        print(f"Error installing hook: {exc} 💥", file=sys.stderr)
        return 1

    if not installed:
        print("Ready stopped 🛑")
        return 0

    print("Ready ready ✅")
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    for name in config.names():
        print(name)
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    print(f"Ready version {__version__} ℹ️")
    return 0


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
