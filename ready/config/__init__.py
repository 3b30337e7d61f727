from .loader import CONFIG_NAMES, find_config, load_config, parse_change_mode
from .types import ChangeMode, ConfigError, ReadyConfig, Task, UnsupportedConfigFormatError

__all__ = [
    "CONFIG_NAMES",
    "find_config",
    "load_config",
    "parse_change_mode",
    "ChangeMode",
    "ConfigError",
    "ReadyConfig",
    "Task",
    "UnsupportedConfigFormatError",
]
