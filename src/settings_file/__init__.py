"""Typed settings store with a ``name = value`` settings file parser."""

from .arguments import to_arguments
from .config import LoggingConfig, ParserConfig
from .errors import InvalidArgumentError, NotFoundError, SettingsError, TypeMismatchError
from .logging_utils import JsonFormatter, configure_logging, log_overrides
from .parser import SettingFileParser, infer_value
from .settings import OverrideListener, Settings, SettingsBuilder
from .sources import read_lines
from .values import (
    BooleanValue,
    IntegerValue,
    SettingValue,
    StringListValue,
    StringValue,
    TypedListValue,
    wrap,
)

__all__ = [
    "Settings",
    "SettingsBuilder",
    "OverrideListener",
    "SettingFileParser",
    "infer_value",
    "to_arguments",
    "read_lines",
    "SettingValue",
    "IntegerValue",
    "BooleanValue",
    "StringValue",
    "StringListValue",
    "TypedListValue",
    "wrap",
    "SettingsError",
    "NotFoundError",
    "TypeMismatchError",
    "InvalidArgumentError",
    "LoggingConfig",
    "ParserConfig",
    "JsonFormatter",
    "configure_logging",
    "log_overrides",
]
