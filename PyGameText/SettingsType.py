from __future__ import annotations
from collections.abc import Mapping
from typing import TypeAlias

BasicType: TypeAlias = str | int | float | bool | list[str] | None
SettingType: TypeAlias = BasicType | dict[str, 'SettingType'] | dict[str, 'SettingsType']

class SettingsError(Exception):
    """Raised when a setting cannot be coerced to the expected type."""
    pass

class SettingsType(dict[str, SettingType]):
    """
    Settings dictionary with restricted range of types allowed and type-safe getters.

    Used to describe text and subtitle definition files coming from project manifests,
    so that values read from JSON or the command line are coerced consistently.
    """
    def __init__(self, settings : Mapping[str,SettingType]|None = None):
        if not isinstance(settings, SettingsType):
            settings = dict(settings or {})
        super().__init__(settings)

    def get_int(self, key: str, default: int|None = None) -> int|None:
        """Get an integer setting with type safety. Strings may be decimal or 0x-prefixed hex."""
        value = self.get(key, default)
        if value is None:
            return None

        if isinstance(value, bool):
            raise SettingsError(f"Cannot convert setting '{key}' of type bool to int")

        if isinstance(value, (int,float)):
            return int(value)
        elif isinstance(value, str):
            for base in (10, 0):
                try:
                    return int(value, base)
                except ValueError:
                    pass

        raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} with value {repr(value)} to int")

    def get_str(self, key: str, default: str|None = None) -> str|None:
        """Get a string setting with type safety"""
        value = self.get(key, default)
        if value is None:
            return None
        elif isinstance(value, str):
            return value
        elif isinstance(value, (int, float, bool)):
            return str(value)
        elif isinstance(value, list):
            return ', '.join(str(v) for v in value)

        return str(value)
