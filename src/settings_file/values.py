"""Setting value variants.

A stored setting is always exactly one of the variants below. Plain Python
values are mapped onto a variant with :func:`wrap`; consumers branch on the
variant type rather than inspecting the wrapped payload.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Union

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class IntegerValue:
    """Integer setting."""

    value: int


@dataclass(frozen=True)
class BooleanValue:
    """Boolean setting."""

    value: bool


@dataclass(frozen=True)
class StringValue:
    """String setting."""

    value: str


@dataclass(frozen=True)
class StringListValue:
    """Ordered, non-empty list of strings.

    This is the only list variant the file parser produces.
    """

    items: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.items:
            raise InvalidArgumentError("Can't add empty list!")


@dataclass(frozen=True)
class TypedListValue:
    """Ordered, non-empty list of arbitrary items, for programmatic use."""

    items: tuple[Any, ...]

    def __post_init__(self) -> None:
        if not self.items:
            raise InvalidArgumentError("Can't add empty list!")


SettingValue = Union[IntegerValue, BooleanValue, StringValue, StringListValue, TypedListValue]

_VARIANTS = (IntegerValue, BooleanValue, StringValue, StringListValue, TypedListValue)


def is_setting_value(value: object) -> bool:
    return isinstance(value, _VARIANTS)


def wrap(value: Any) -> SettingValue:
    """Map a plain Python value onto its setting variant.

    ``bool`` is checked before ``int`` since it is a subclass of it. A list or
    tuple holding only strings becomes a :class:`StringListValue`, any other
    list or tuple a :class:`TypedListValue`. Construct a
    :class:`TypedListValue` directly to store strings as a typed list.
    """

    if is_setting_value(value):
        return value
    if value is None:
        raise InvalidArgumentError("Missing value!")
    if isinstance(value, bool):
        return BooleanValue(value)
    if isinstance(value, int):
        return IntegerValue(value)
    if isinstance(value, str):
        return StringValue(value)
    if isinstance(value, (list, tuple)):
        items = tuple(value)
        if items and all(isinstance(item, str) for item in items):
            return StringListValue(items)
        return TypedListValue(items)
    raise InvalidArgumentError(f"Unsupported setting value type: {type(value).__name__}")


def _item_text(item: Any) -> str:
    if isinstance(item, bool):
        return "true" if item else "false"
    return str(item)


def _join(items: Iterable[Any]) -> str:
    return ",".join(_item_text(item) for item in items)


def text(value: SettingValue) -> str:
    """Return the textual form of a setting value.

    Booleans render as ``true``/``false`` and lists are joined with ``,``.
    """

    if isinstance(value, StringValue):
        return value.value
    if isinstance(value, (BooleanValue, IntegerValue)):
        return _item_text(value.value)
    if isinstance(value, (StringListValue, TypedListValue)):
        return _join(value.items)
    raise TypeError(f"Not a setting value: {value!r}")


def plain(value: SettingValue) -> Any:
    """Unwrap a setting value into plain Python data (lists for sequences)."""

    if isinstance(value, (StringListValue, TypedListValue)):
        return list(value.items)
    return value.value


_INT_RE = re.compile(r"[+-]?[0-9]+")
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def parse_int(raw: str) -> int | None:
    """Parse a base-10 signed 32-bit integer, or return ``None``."""

    if not _INT_RE.fullmatch(raw):
        return None
    number = int(raw)
    if number < INT_MIN or number > INT_MAX:
        return None
    return number
