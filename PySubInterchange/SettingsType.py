from __future__ import annotations
from collections.abc import Mapping
from typing import Any, TypeAlias

SettingType: TypeAlias = str | int | float | dict[str, float] | None

class SettingsError(Exception):
    """Raised when a setting is missing or cannot be read as the expected type."""
    pass

class SettingsType(dict[str, SettingType]):
    """
    Engine settings with getters that coerce and validate values read from code or the environment.

    None values are never stored, so an unset override leaves the default in place.
    """
    def __init__(self, settings : Mapping[str, SettingType]|None = None):
        super().__init__()
        self.update(settings or {})

    def get_int(self, key : str, default : int|None = None, minimum : int|None = None) -> int|None:
        """Get a whole number, accepting numeric strings such as environment values"""
        value = self.get(key, default)
        if value is None:
            return None

        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise SettingsError(f"Setting '{key}' must be a whole number, not {type(value).__name__}")

        try:
            number = int(value)
        except ValueError as e:
            raise SettingsError(f"Setting '{key}' must be a whole number, not {value!r}") from e

        if minimum is not None and number < minimum:
            raise SettingsError(f"Setting '{key}' must be at least {minimum}, not {number}")

        return number

    def get_float(self, key : str, default : float|None = None) -> float|None:
        value = self.get(key, default)
        if value is None:
            return None

        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise SettingsError(f"Setting '{key}' must be a number, not {type(value).__name__}")

        try:
            return float(value)
        except ValueError as e:
            raise SettingsError(f"Setting '{key}' must be a number, not {value!r}") from e

    def get_str(self, key : str, default : str|None = None) -> str|None:
        value = self.get(key, default)
        if value is None:
            return None
        if isinstance(value, dict):
            raise SettingsError(f"Setting '{key}' must be text, not a dict")
        return str(value)

    def get_rect(self, key : str) -> dict[str, float]:
        """
        Get a dict of named numbers, such as a normalised position rectangle.
        Returns a copy, so callers may modify it freely.
        """
        value = self.get(key)
        if value is None:
            return {}

        if not isinstance(value, Mapping):
            raise SettingsError(f"Setting '{key}' must be a dict, not {type(value).__name__}")

        rect = {}
        for name, number in value.items():
            if isinstance(number, bool) or not isinstance(number, (int, float)):
                raise SettingsError(f"Setting '{key}.{name}' must be a number, not {number!r}")
            rect[name] = float(number)
        return rect

    def update(self, other : Any = (), /, **kwds : SettingType) -> None:
        """Update settings, ignoring None values"""
        values = dict(other, **kwds)
        super().update({ key: value for key, value in values.items() if value is not None })
