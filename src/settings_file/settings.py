"""Typed settings store and its builder.

``Settings`` keeps its entries in a private mapping and only exposes typed
accessors. Strict accessors (``get*``) raise, lenient accessors (``find*``)
return ``None`` instead. ``SettingsBuilder`` is the only supported way to
populate a store.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, TypeVar

from .errors import InvalidArgumentError, NotFoundError, TypeMismatchError
from .values import (
    BooleanValue,
    IntegerValue,
    SettingValue,
    StringListValue,
    StringValue,
    TypedListValue,
    parse_int,
    text,
    wrap,
)

T = TypeVar("T")

OverrideListener = Callable[[str, SettingValue], None]

TRUE_TOKENS = frozenset({"yes", "y", "1", "true", "t"})
FALSE_TOKENS = frozenset({"no", "n", "0", "false", "f"})


def _not_found(name: str) -> NotFoundError:
    return NotFoundError(f"Setting: '{name}', not found!")


def _mismatch(name: str, target: str, value: SettingValue | None) -> TypeMismatchError:
    shown = text(value) if value is not None else None
    return TypeMismatchError(f"Setting: '{name}', can't be converted to {target}: '{shown}'!")


class Settings:
    """Read-only view over named, typed settings."""

    def __init__(self) -> None:
        self._values: dict[str, SettingValue] = {}

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __repr__(self) -> str:
        return f"Settings({self._values!r})"

    def keys(self) -> list[str]:
        return list(self._values)

    def items(self) -> list[tuple[str, SettingValue]]:
        return list(self._values.items())

    def find(self, name: str) -> SettingValue | None:
        """Return the stored value or ``None`` when missing."""

        return self._values.get(name)

    def get(self, name: str) -> SettingValue:
        """Return the stored value.

        Raises:
            NotFoundError: if the setting is not present.
        """

        value = self.find(name)
        if value is None:
            raise _not_found(name)
        return value

    def get_string(self, name: str) -> str:
        """Return the setting rendered as text; lists are comma-joined."""

        return text(self.get(name))

    as_string = get_string

    def find_string(self, name: str) -> str | None:
        try:
            return self.get_string(name)
        except NotFoundError:
            return None

    def get_int(self, name: str) -> int:
        """Return the setting as an integer, parsing textual values.

        Raises:
            NotFoundError: if the setting is not present.
            TypeMismatchError: if the value is not an integer or numeric text.
        """

        value = self.get(name)
        if isinstance(value, IntegerValue):
            return value.value
        number = parse_int(text(value))
        if number is None:
            raise _mismatch(name, "integer", value)
        return number

    def find_int(self, name: str) -> int | None:
        try:
            return self.get_int(name)
        except (NotFoundError, TypeMismatchError):
            return None

    def get_strings(self, name: str) -> list[str]:
        """Return a string list setting.

        A missing setting is reported as a ``TypeMismatchError`` too, the
        same as any value that is not a string list.
        """

        value = self.find(name)
        if isinstance(value, StringListValue):
            return list(value.items)
        raise _mismatch(name, "string array", value)

    def get_bool(self, name: str) -> bool:
        """Return a boolean flag.

        String values are matched case-insensitively against yes/y/1/true/t
        and no/n/0/false/f.

        Raises:
            NotFoundError: if the setting is not present.
            TypeMismatchError: for any other string or value type.
        """

        value = self.get(name)
        if isinstance(value, BooleanValue):
            return value.value
        if isinstance(value, StringValue):
            token = value.value.strip().lower()
            if token in TRUE_TOKENS:
                return True
            if token in FALSE_TOKENS:
                return False
        raise _mismatch(name, "boolean", value)

    def find_bool(self, name: str) -> bool | None:
        try:
            return self.get_bool(name)
        except (NotFoundError, TypeMismatchError):
            return None

    def get_list(self, name: str, element_type: type[T]) -> list[T]:
        """Return a typed list setting whose items are all ``element_type``."""

        value = self.find(name)
        if isinstance(value, TypedListValue) and all(
            _is_instance(item, element_type) for item in value.items
        ):
            return list(value.items)
        raise _mismatch(name, f"List<{element_type.__name__}>", value)

    def _put(self, name: str, value: SettingValue) -> None:
        self._values[name] = value


def _is_instance(item: Any, element_type: type) -> bool:
    # bool is an int subclass but never an integer setting
    if isinstance(item, bool) and element_type is not bool:
        return element_type is object
    return isinstance(item, element_type)


def _ignore_override(name: str, value: SettingValue) -> None:
    del name, value


class SettingsBuilder:
    """Validate and collect settings into a single ``Settings`` instance.

    The builder writes straight into the wrapped instance, so ``build`` hands
    back the very object that was populated, never a copy.
    """

    def __init__(
        self,
        existing: Settings | None = None,
        on_override: OverrideListener | None = None,
    ) -> None:
        self._settings = existing if existing is not None else Settings()
        self._on_override = on_override or _ignore_override

    def add(self, name: str, value: Any) -> "SettingsBuilder":
        """Add or replace a setting.

        Raises:
            InvalidArgumentError: for a blank name, a ``None`` value or an
                empty list.
        """

        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError("Missing name!")
        setting = wrap(value)
        name = name.strip()
        if self._settings.find(name) is not None:
            self._on_override(name, setting)
        self._settings._put(name, setting)
        return self

    def override(self, other: Settings | None) -> "SettingsBuilder":
        """Copy every setting from ``other``, replacing existing ones silently."""

        if other is not None:
            for name, value in other.items():
                if value is not None:
                    self._settings._put(name, value)
        return self

    def is_empty(self) -> bool:
        return len(self._settings) == 0

    def contains(self, name: str) -> bool:
        return name in self._settings

    def get(self, name: str) -> SettingValue | None:
        return self._settings.find(name)

    def build(self) -> Settings:
        return self._settings
