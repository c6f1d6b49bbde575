"""
Value types for the JSON subtitle documents.

Subtitles for a language are split across two files: a lines file with the text
of every line and the display names of speakers, and a metadata file with the
timing and speaker key of each line. Clear entries only exist in the metadata.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from PyGameText.GameTextError import GameTextParseError

def _require(data : Mapping[str, Any], key : str, expected : type, context : str) -> Any:
    if not isinstance(data, Mapping):
        raise GameTextParseError(f"{context} must be an object, not {type(data).__name__}")

    if key not in data:
        raise GameTextParseError(f"{context} is missing required field '{key}'")

    value = data[key]
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise GameTextParseError(f"{context} field '{key}' should be {expected.__name__}, not {type(value).__name__}")

    return value

def _optional(data : Mapping[str, Any], key : str, expected : type, default : Any, context : str) -> Any:
    if key not in data:
        return default
    return _require(data, key, expected, context)

def _require_mapping(data : Any, context : str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise GameTextParseError(f"{context} must be an object, not {type(data).__name__}")
    return data

def _require_list(data : Any, context : str) -> list[Any]:
    if not isinstance(data, list):
        raise GameTextParseError(f"{context} must be a list, not {type(data).__name__}")
    return data


class SubtitleCutsceneLineMetadata:
    """
    Timing and speaker for one cutscene line, or a clear entry
    """
    def __init__(self, frame : int, offscreen : bool = False, speaker : str = "", clear : bool = False) -> None:
        self.frame : int = frame
        self.offscreen : bool = offscreen
        self.speaker : str = speaker
        self.clear : bool = clear

    @classmethod
    def from_json(cls, data : Mapping[str, Any]) -> SubtitleCutsceneLineMetadata:
        context = "Cutscene line metadata"
        return cls(
            frame=_require(data, 'frame', int, context),
            offscreen=_optional(data, 'offscreen', bool, False, context),
            speaker=_optional(data, 'speaker', str, "", context),
            clear=_optional(data, 'clear', bool, False, context)
        )

    def to_json(self) -> dict[str, Any]:
        if self.clear:
            return { 'frame': self.frame, 'clear': True }
        return { 'frame': self.frame, 'offscreen': self.offscreen, 'speaker': self.speaker }


class SubtitleHintLineMetadata:
    """
    Timing and speaker for one hint line, or a clear entry
    """
    def __init__(self, frame : int, speaker : str = "", clear : bool = False) -> None:
        self.frame : int = frame
        self.speaker : str = speaker
        self.clear : bool = clear

    @classmethod
    def from_json(cls, data : Mapping[str, Any]) -> SubtitleHintLineMetadata:
        context = "Hint line metadata"
        return cls(
            frame=_require(data, 'frame', int, context),
            speaker=_optional(data, 'speaker', str, "", context),
            clear=_optional(data, 'clear', bool, False, context)
        )

    def to_json(self) -> dict[str, Any]:
        if self.clear:
            return { 'frame': self.frame, 'clear': True }
        return { 'frame': self.frame, 'speaker': self.speaker }


class SubtitleHintMetadata:
    """
    Hint id (as hex) and line metadata for one hint
    """
    def __init__(self, id : str = "0", lines : list[SubtitleHintLineMetadata]|None = None) -> None:
        self.id : str = id
        self.lines : list[SubtitleHintLineMetadata] = lines or []

    @classmethod
    def from_json(cls, data : Mapping[str, Any]) -> SubtitleHintMetadata:
        context = "Hint metadata"
        hint_id = _require(data, 'id', str, context)
        lines = _require_list(_optional(data, 'lines', list, [], context), context)
        return cls(hint_id, [ SubtitleHintLineMetadata.from_json(line) for line in lines ])

    def to_json(self) -> dict[str, Any]:
        return { 'id': self.id, 'lines': [ line.to_json() for line in self.lines ] }


class SubtitleMetadataFile:
    """
    Contents of a subtitle metadata file
    """
    def __init__(self, cutscenes : dict[str, list[SubtitleCutsceneLineMetadata]]|None = None, hints : dict[str, SubtitleHintMetadata]|None = None) -> None:
        self.cutscenes : dict[str, list[SubtitleCutsceneLineMetadata]] = cutscenes or {}
        self.hints : dict[str, SubtitleHintMetadata] = hints or {}

    @classmethod
    def from_json(cls, data : Mapping[str, Any]) -> SubtitleMetadataFile:
        data = _require_mapping(data, "Subtitle metadata")
        cutscenes = _require_mapping(data.get('cutscenes', {}), "Subtitle metadata cutscenes")
        hints = _require_mapping(data.get('hints', {}), "Subtitle metadata hints")
        return cls(
            cutscenes={ name: [ SubtitleCutsceneLineMetadata.from_json(line) for line in _require_list(lines, f"Cutscene '{name}'") ]
                        for name, lines in cutscenes.items() },
            hints={ name: SubtitleHintMetadata.from_json(hint) for name, hint in hints.items() }
        )

    def to_json(self) -> dict[str, Any]:
        return {
            'cutscenes': { name: [ line.to_json() for line in lines ] for name, lines in sorted(self.cutscenes.items()) },
            'hints': { name: hint.to_json() for name, hint in sorted(self.hints.items()) }
        }


class SubtitleFile:
    """
    Contents of a subtitle lines file: speaker display names and the text of each scene's lines
    """
    def __init__(self, speakers : dict[str, str]|None = None, cutscenes : dict[str, list[str]]|None = None, hints : dict[str, list[str]]|None = None) -> None:
        self.speakers : dict[str, str] = speakers or {}
        self.cutscenes : dict[str, list[str]] = cutscenes or {}
        self.hints : dict[str, list[str]] = hints or {}

    @classmethod
    def from_json(cls, data : Mapping[str, Any]) -> SubtitleFile:
        data = _require_mapping(data, "Subtitle lines")
        return cls(
            speakers=cls._string_map(data.get('speakers', {}), "Subtitle speakers"),
            cutscenes=cls._string_lists(data.get('cutscenes', {}), "Subtitle cutscenes"),
            hints=cls._string_lists(data.get('hints', {}), "Subtitle hints")
        )

    def to_json(self) -> dict[str, Any]:
        return {
            'speakers': dict(sorted(self.speakers.items())),
            'cutscenes': { name: list(lines) for name, lines in sorted(self.cutscenes.items()) },
            'hints': { name: list(lines) for name, lines in sorted(self.hints.items()) }
        }

    @staticmethod
    def _string_map(data : Any, context : str) -> dict[str, str]:
        data = _require_mapping(data, context)
        if not all(isinstance(value, str) for value in data.values()):
            raise GameTextParseError(f"{context} must map names to strings")
        return dict(data)

    @staticmethod
    def _string_lists(data : Any, context : str) -> dict[str, list[str]]:
        data = _require_mapping(data, context)
        result : dict[str, list[str]] = {}
        for name, lines in data.items():
            lines = _require_list(lines, f"{context} '{name}'")
            if not all(isinstance(line, str) for line in lines):
                raise GameTextParseError(f"{context} '{name}' must be a list of strings")
            result[name] = list(lines)
        return result
