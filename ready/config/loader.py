import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from .types import ChangeMode, ConfigError, ReadyConfig, Task, UnsupportedConfigFormatError

logger = logging.getLogger(__name__)

CONFIG_NAMES = ("ready.yaml", "ready.yml", "ready.toml", "ready.json")


def find_config(directory: str | Path | None = None) -> Path:
    """Return the first ``ready.*`` config file found in ``directory`` (default: cwd)."""
    try:
        base = Path(directory) if directory is not None else Path.cwd()
    except OSError as exc:
        raise ConfigError(f"Failed to determine current directory: {exc}") from exc

    for name in CONFIG_NAMES:
        candidate = base / name
        if candidate.is_file():
            logger.debug("using config file %s", candidate)
            return candidate

    raise ConfigError(f"Config file not found: {base / CONFIG_NAMES[0]}")


def load_config(path: str | Path | None = None) -> ReadyConfig:
    if path is None:
        path = find_config()

    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Config file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Config path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    config = _build_config(raw_file, pure_path)
    logger.debug("loaded %d task(s) from %s", len(config), pure_path)
    return config


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"{path}: reading file: {exc}") from exc

    match fmt:
        case "yaml":
            return _parse_yaml(path, text)
        case "toml":
            return _parse_toml(path, text)
        case "json":
            return _parse_json(path, text)
        case _:
            raise AssertionError("Unreachable")


def _parse_yaml(path: Path, text: str) -> Mapping[str, Any]:
    try:
        raw_file = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML") from exc

    return _expect_mapping(path, "YAML", raw_file)


def _parse_toml(path: Path, text: str) -> Mapping[str, Any]:
    try:
        raw_file = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML") from exc

    return _expect_mapping(path, "TOML", raw_file)


def _parse_json(path: Path, text: str) -> Mapping[str, Any]:
    try:
        raw_file = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON") from exc

    return _expect_mapping(path, "JSON", raw_file)


def _expect_mapping(path: Path, kind: str, raw_file: object) -> Mapping[str, Any]:
    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: {kind} parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_config(raw: Mapping[str, Any], path: Path) -> ReadyConfig:
    keys = {"tasks", "changes", "fail_when_idle"}

    for field in raw.keys():
        if field not in keys:
            raise ConfigError(f"{path}: Can't process: {field}")

    if "tasks" not in raw:
        raise ConfigError(f"{path}: Missing 'tasks' field")

    if not isinstance(raw["tasks"], list):
        raise ConfigError(f"{path}: 'tasks' must be a list, got {type(raw['tasks'])}")

    tasks = [_build_task(path, index, fields) for index, fields in enumerate(raw["tasks"])]

    changes = ChangeMode.STAGED
    if "changes" in raw:
        changes = parse_change_mode(raw["changes"], source=path)

    fail_when_idle = False
    if "fail_when_idle" in raw:
        if not isinstance(raw["fail_when_idle"], bool):
            raise ConfigError(f"{path}: 'fail_when_idle' should be a boolean")
        fail_when_idle = raw["fail_when_idle"]

    return ReadyConfig(
        tasks=tasks, changes=changes, fail_when_idle=fail_when_idle, path=path
    )


def parse_change_mode(value: object, source: Path | None = None) -> ChangeMode:
    prefix = f"{source}: " if source is not None else ""

    if not isinstance(value, str):
        raise ConfigError(f"{prefix}'changes' should be a string, got {type(value)}")

    try:
        return ChangeMode(value.strip().lower())
    except ValueError:
        allowed = ", ".join(mode.value for mode in ChangeMode)
        raise ConfigError(f"{prefix}Unknown changes mode '{value}', expected one of: {allowed}") from None


def _build_task(path: Path, index: int, fields: object) -> Task:
    label = f"{path}: task #{index + 1}"
    keys = {"command", "directory", "name"}

    if not isinstance(fields, Mapping):
        raise ConfigError(f"{label} must be a mapping")

    for field in fields.keys():
        if field not in keys:
            raise ConfigError(f"{label}: Can't process: {field}")

    if "command" not in fields:
        raise ConfigError(f"{label}: missing 'command'")

    command = _non_blank(label, "command", fields["command"])

    name = command
    if "name" in fields:
        name = _non_blank(label, "name", fields["name"])

    directory = None
    if "directory" in fields:
        directory = _non_blank(label, "directory", fields["directory"])

    return Task(name=name, command=command, directory=directory)


def _non_blank(label: str, key: str, value: object) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{label}: The {key} should be a string")

    if len(value.strip()) < 1:
        raise ConfigError(f"{label}: Please provide a {key} or remove this field")

    return value.strip()
