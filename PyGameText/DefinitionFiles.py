from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from PyGameText.Helpers import GetInputPath
from PyGameText.SettingsType import SettingsError, SettingsType
from PyGameText.GameTextError import GameTextError

DEFAULT_TEXT_VERSION = "jak1-v2"

class DefinitionFormat(Enum):
    GOAL = "goal"
    JSON = "json"

    @classmethod
    def FromName(cls, name : str|None) -> DefinitionFormat:
        if not name:
            return cls.JSON

        for value in cls:
            if name.lower() in (value.value, value.name.lower()):
                return value

        raise GameTextError(f"Unknown definition file format '{name}'")

def _get_settings(settings : Mapping[str, Any]) -> SettingsType:
    return settings if isinstance(settings, SettingsType) else SettingsType(settings)

def _get_language_id(settings : SettingsType) -> int:
    try:
        language_id = settings.get_int('language_id', -1)
    except SettingsError as e:
        raise GameTextError("Invalid language id in definition", e)

    return -1 if language_id is None else language_id


class GameTextDefinitionFile:
    """
    Describes one text input: where it is, which language and text group it belongs to
    """
    def __init__(self, format : DefinitionFormat = DefinitionFormat.JSON, file_path : str = "", language_id : int = -1,
                 text_version : str = DEFAULT_TEXT_VERSION, group_name : str|None = None) -> None:
        self.format : DefinitionFormat = format
        self.file_path : str = file_path
        self.language_id : int = language_id
        self.text_version : str = text_version
        self.group_name : str|None = group_name

    @classmethod
    def FromSettings(cls, settings : Mapping[str, Any]) -> GameTextDefinitionFile:
        settings = _get_settings(settings)
        return cls(
            format=DefinitionFormat.FromName(settings.get_str('format')),
            file_path=GetInputPath(settings.get_str('file_path')) or "",
            language_id=_get_language_id(settings),
            text_version=settings.get_str('text_version', DEFAULT_TEXT_VERSION) or DEFAULT_TEXT_VERSION,
            group_name=settings.get_str('group_name')
        )

    def __str__(self) -> str:
        return f"{self.format.name} text {self.file_path} (language {self.language_id}, group {self.group_name or 'default'})"


class GameSubtitleDefinitionFile:
    """
    Describes one subtitle input: the lines and metadata files for a language,
    optionally layered over base-language files that supply any missing scenes
    """
    def __init__(self, format : DefinitionFormat = DefinitionFormat.JSON, language_id : int = -1, text_version : str = DEFAULT_TEXT_VERSION,
                 lines_path : str = "", lines_base_path : str|None = None, meta_path : str = "", meta_base_path : str|None = None) -> None:
        self.format : DefinitionFormat = format
        self.language_id : int = language_id
        self.text_version : str = text_version
        self.lines_path : str = lines_path
        self.lines_base_path : str|None = lines_base_path
        self.meta_path : str = meta_path
        self.meta_base_path : str|None = meta_base_path

    @classmethod
    def FromSettings(cls, settings : Mapping[str, Any]) -> GameSubtitleDefinitionFile:
        settings = _get_settings(settings)
        return cls(
            format=DefinitionFormat.FromName(settings.get_str('format')),
            language_id=_get_language_id(settings),
            text_version=settings.get_str('text_version', DEFAULT_TEXT_VERSION) or DEFAULT_TEXT_VERSION,
            lines_path=GetInputPath(settings.get_str('lines_path')) or "",
            lines_base_path=GetInputPath(settings.get_str('lines_base_path')),
            meta_path=GetInputPath(settings.get_str('meta_path')) or "",
            meta_base_path=GetInputPath(settings.get_str('meta_base_path'))
        )

    def __str__(self) -> str:
        return f"{self.format.name} subtitles {self.lines_path} (language {self.language_id})"
