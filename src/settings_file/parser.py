"""Parser for ``name = value`` settings files.

Each value is typed by a fixed cascade, first match wins:

1. integer (``-12``, ``42``) within the signed 32-bit range
2. boolean, exactly ``true`` or ``false`` in any case
3. list, ``[a, b, c]`` with items trimmed and empty items dropped
4. string, with one pair of enclosing double quotes removed

Lines that can't be read as a pair are skipped, never reported as errors.
Commas and brackets inside list items are not escapable.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .arguments import to_arguments
from .config import ParserConfig
from .logging_utils import log_overrides
from .settings import Settings, SettingsBuilder
from .sources import LineSource, read_lines
from .values import BooleanValue, IntegerValue, SettingValue, StringListValue, StringValue, parse_int


def as_integer(value: str) -> int | None:
    return parse_int(value)


def as_boolean(value: str) -> bool | None:
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    return None


def as_list(value: str) -> list[str] | None:
    """Split a ``[a, b]`` literal into trimmed, non-empty items."""

    if len(value) > 2 and value.startswith("[") and value.endswith("]"):
        items = (item.strip() for item in value[1:-1].split(","))
        return [item for item in items if item]
    return None


def unquote(value: str) -> str:
    if len(value) > 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def infer_value(value: str) -> SettingValue | None:
    """Type a trimmed raw value.

    Returns ``None`` for a list literal without any items, which can't be
    stored.
    """

    number = as_integer(value)
    if number is not None:
        return IntegerValue(number)

    flag = as_boolean(value)
    if flag is not None:
        return BooleanValue(flag)

    items = as_list(value)
    if items is not None:
        return StringListValue(tuple(items)) if items else None

    return StringValue(unquote(value))


class SettingFileParser:
    """Build ``Settings`` from raw lines or settings files."""

    def __init__(
        self,
        config: ParserConfig | None = None,
        logger: logging.Logger | None = None,
        line_source: LineSource = read_lines,
    ) -> None:
        self._config = config or ParserConfig()
        self._logger = logger or logging.getLogger(__name__)
        self._line_source = line_source

    def load(self, path: str | Path) -> Settings:
        """Load settings from a file.

        A missing file yields empty settings unless ``missing_ok`` is off,
        in which case ``FileNotFoundError`` propagates.
        """

        try:
            lines = self._line_source(str(path), self._config.encoding)
        except FileNotFoundError:
            if not self._config.missing_ok:
                raise
            self._logger.warning("settings_file_missing", extra={"path": str(path)})
            return SettingsBuilder().build()

        settings = self.parse(lines)
        self._logger.debug("settings_file_loaded", extra={"path": str(path), "count": len(settings)})
        return settings

    def arguments(self, path: str | Path) -> list[str]:
        """Load a settings file and render it as command line flags."""

        return to_arguments(self.load(path), sort_keys=self._config.sort_arguments)

    def parse(self, lines: Iterable[str] | None) -> Settings:
        """Parse ``name = value`` lines, skipping comments and malformed lines."""

        builder = SettingsBuilder(on_override=log_overrides(self._logger))
        for number, line in enumerate(lines or (), start=1):
            line = line.strip()
            if not line or self._is_comment(line):
                continue

            parts = line.split("=")
            if len(parts) != 2:
                self._skip(number, "expected exactly one '='")
                continue
            self._add(builder, number, parts[0], parts[1])

        return builder.build()

    def _add(self, builder: SettingsBuilder, number: int, name: str, value: str) -> None:
        name = name.strip()
        value = value.strip()
        if not name or not value:
            self._skip(number, "empty name or value")
            return

        setting = infer_value(value)
        if setting is None:
            self._skip(number, "empty list")
            return
        builder.add(name, setting)

    def _is_comment(self, line: str) -> bool:
        return line.startswith(tuple(self._config.comment_prefixes))

    def _skip(self, number: int, reason: str) -> None:
        self._logger.debug("settings_line_skipped", extra={"line": number, "reason": reason})
