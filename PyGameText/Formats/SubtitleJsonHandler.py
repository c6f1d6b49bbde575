from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from PyGameText.DatabaseEvents import DatabaseEvents, ReportError, ReportInfo, ReportWarning
from PyGameText.DefinitionFiles import DefinitionFormat, GameSubtitleDefinitionFile
from PyGameText.GameTextError import DuplicateKeyError, GameTextError, GameTextParseError
from PyGameText.Helpers import FormatHexId, ParseHexId, default_encoding
from PyGameText.SubtitleBank import SubtitleBank
from PyGameText.SubtitleDatabase import SubtitleDatabase
from PyGameText.SubtitleMetadata import (
    SubtitleCutsceneLineMetadata,
    SubtitleFile,
    SubtitleHintLineMetadata,
    SubtitleHintMetadata,
    SubtitleMetadataFile,
)
from PyGameText.SubtitleScene import SubtitleScene, SubtitleSceneKind

class SubtitleJsonHandler:
    """
    Builds subtitle banks from a pair of JSON files (lines and metadata) and composes them back.

    Each metadata entry that is not a clear entry takes the next line of text for its scene.
    Cutscenes become Movie scenes. Hints become Hint scenes if they have a non-zero id,
    otherwise HintNamed scenes that are looked up by name.
    """
    def __init__(self, events : DatabaseEvents|None = None) -> None:
        self.events : DatabaseEvents|None = events
        self._unknown_speakers : set[str] = set()

    def load_files(self, db : SubtitleDatabase, file_info : GameSubtitleDefinitionFile, replace_existing : bool = False) -> SubtitleBank:
        """
        Load the lines and metadata files for a definition, layered over the base files if there are any
        """
        if not file_info.lines_path or not file_info.meta_path:
            raise GameTextError(f"Subtitle definition needs both a lines path and a metadata path: {file_info}")

        lines_data = self._read_json(file_info.lines_path)
        meta_data = self._read_json(file_info.meta_path)

        if file_info.lines_base_path:
            lines_data = self._overlay(self._read_json(file_info.lines_base_path), lines_data, ['speakers', 'cutscenes', 'hints'])

        if file_info.meta_base_path:
            meta_data = self._overlay(self._read_json(file_info.meta_base_path), meta_data, ['cutscenes', 'hints'])

        lines = SubtitleFile.from_json(lines_data)
        meta = SubtitleMetadataFile.from_json(meta_data)
        return self.parse(db, lines, meta, file_info, replace_existing=replace_existing)

    def parse(self, db : SubtitleDatabase, lines : SubtitleFile, meta : SubtitleMetadataFile, file_info : GameSubtitleDefinitionFile, replace_existing : bool = False) -> SubtitleBank:
        """
        Build the scenes for a language and add them to the database.

        If the language already has a bank the scenes are merged into it. Without replace_existing a scene
        that is already in the bank raises DuplicateKeyError and nothing is added. With it, existing scenes
        are replaced by the imported versions.
        """
        if file_info.format != DefinitionFormat.JSON:
            raise GameTextError(f"Unsupported subtitle format {file_info.format.name} for {file_info.lines_path}")

        if file_info.language_id < 0:
            raise GameTextError(f"No language id specified for {file_info.lines_path or 'subtitles'}")

        for name in sorted(lines.cutscenes.keys() - meta.cutscenes.keys()):
            ReportWarning(self.events, self, f"Cutscene '{name}' has no metadata and will be skipped")

        for name in sorted(lines.hints.keys() - meta.hints.keys()):
            ReportWarning(self.events, self, f"Hint '{name}' has no metadata and will be skipped")

        scenes : list[SubtitleScene] = []
        for name, line_metadata in meta.cutscenes.items():
            scenes.append(self._build_cutscene(name, line_metadata, lines.cutscenes.get(name, []), lines.speakers))

        for name, hint_metadata in meta.hints.items():
            if name in meta.cutscenes:
                raise DuplicateKeyError(f"Duplicate scene '{name}' in language {file_info.language_id}", name)
            scenes.append(self._build_hint(name, hint_metadata, lines.hints.get(name, []), lines.speakers))

        bank = db.BankById(file_info.language_id)
        if bank is None:
            bank = SubtitleBank(file_info.language_id, file_info.text_version, file_info.lines_path, events=db.events)
            for scene in scenes:
                bank.AddScene(scene)
            db.AddBank(bank)
        elif replace_existing:
            bank.text_version = file_info.text_version
            bank.file_path = file_info.lines_path
            for scene in scenes:
                bank.UpdateScene(scene)
        else:
            for scene in scenes:
                if bank.SceneExists(scene.name):
                    raise DuplicateKeyError(f"Duplicate scene '{scene.name}' in language {file_info.language_id}", scene.name)

            for scene in scenes:
                bank.AddScene(scene)

        ReportInfo(self.events, self, f"Loaded {len(scenes)} subtitle scenes for language {file_info.language_id}")
        return bank

    def compose(self, bank : SubtitleBank, speakers : Mapping[str, str]|None = None) -> tuple[SubtitleFile, SubtitleMetadataFile]:
        """
        Split a bank back into lines and metadata. Speaker names are mapped back to speaker keys
        using the speakers map; without one, the names are used as keys.
        """
        speaker_keys : dict[str, str] = { name: key for key, name in speakers.items() } if speakers else {}
        lines = SubtitleFile(speakers=dict(speakers) if speakers else {})
        meta = SubtitleMetadataFile()

        for name, scene in bank.scenes.items():
            texts = [ line.text for line in scene.lines if not line.is_clear ]

            if scene.kind == SubtitleSceneKind.Movie:
                lines.cutscenes[name] = texts
                meta.cutscenes[name] = [
                    SubtitleCutsceneLineMetadata(line.frame, clear=True) if line.is_clear else
                    SubtitleCutsceneLineMetadata(line.frame, line.offscreen, self._speaker_key(lines, speaker_keys, line.speaker))
                    for line in scene.lines
                ]

            elif scene.is_hint:
                lines.hints[name] = texts
                meta.hints[name] = SubtitleHintMetadata(FormatHexId(scene.id, 1), [
                    SubtitleHintLineMetadata(line.frame, clear=True) if line.is_clear else
                    SubtitleHintLineMetadata(line.frame, self._speaker_key(lines, speaker_keys, line.speaker))
                    for line in scene.lines
                ])

            else:
                ReportWarning(self.events, self, f"Scene '{name}' has an invalid kind and will not be written")

        return lines, meta

    def save_files(self, bank : SubtitleBank, lines_path : str, meta_path : str, speakers : Mapping[str, str]|None = None) -> None:
        """
        Write a bank to a lines file and a metadata file
        """
        lines, meta = self.compose(bank, speakers)
        self._write_json(lines_path, lines.to_json())
        self._write_json(meta_path, meta.to_json())
        logging.info(f"Saved subtitles for language {bank.language_id} to {lines_path}")

    def _build_cutscene(self, name : str, line_metadata : list[SubtitleCutsceneLineMetadata], texts : list[str], speakers : Mapping[str, str]) -> SubtitleScene:
        scene = SubtitleScene(SubtitleSceneKind.Movie, name)
        text_index = 0
        for metadata in line_metadata:
            if metadata.clear:
                scene.AddClearEntry(metadata.frame)
                continue

            if text_index >= len(texts):
                raise GameTextParseError(f"Cutscene '{name}' has {len(texts)} lines of text but more line metadata entries")

            scene.AddLine(metadata.frame, texts[text_index], self._speaker_name(speakers, metadata.speaker), metadata.offscreen)
            text_index += 1

        if text_index < len(texts):
            ReportWarning(self.events, self, f"Cutscene '{name}' has {len(texts) - text_index} lines of text without metadata")

        return scene

    def _build_hint(self, name : str, hint_metadata : SubtitleHintMetadata, texts : list[str], speakers : Mapping[str, str]) -> SubtitleScene:
        hint_id = ParseHexId(hint_metadata.id)
        kind = SubtitleSceneKind.Hint if hint_id != 0 else SubtitleSceneKind.HintNamed
        scene = SubtitleScene(kind, name, hint_id)
        text_index = 0
        for metadata in hint_metadata.lines:
            if metadata.clear:
                scene.AddClearEntry(metadata.frame)
                continue

            if text_index >= len(texts):
                raise GameTextParseError(f"Hint '{name}' has {len(texts)} lines of text but more line metadata entries")

            scene.AddLine(metadata.frame, texts[text_index], self._speaker_name(speakers, metadata.speaker), False)
            text_index += 1

        if text_index < len(texts):
            ReportWarning(self.events, self, f"Hint '{name}' has {len(texts) - text_index} lines of text without metadata")

        return scene

    def _speaker_name(self, speakers : Mapping[str, str], key : str) -> str:
        if not key:
            return ""

        if key in speakers:
            return speakers[key]

        if key not in self._unknown_speakers:
            self._unknown_speakers.add(key)
            ReportWarning(self.events, self, f"Speaker '{key}' has no display name, using the key")

        return key

    def _speaker_key(self, lines : SubtitleFile, speaker_keys : dict[str, str], speaker : str) -> str:
        if not speaker:
            return ""

        key = speaker_keys.get(speaker)
        if key is None:
            key = speaker
            lines.speakers.setdefault(key, speaker)

        return key

    def _overlay(self, base : Mapping[str, Any], data : Mapping[str, Any], sections : list[str]) -> dict[str, Any]:
        """
        Merge a language file over its base file, one scene (or speaker) at a time
        """
        if not isinstance(base, Mapping) or not isinstance(data, Mapping):
            raise GameTextParseError("Subtitle files must contain JSON objects")

        merged : dict[str, Any] = {}
        for section in sections:
            base_section = base.get(section, {})
            section_data = data.get(section, {})
            if not isinstance(base_section, Mapping) or not isinstance(section_data, Mapping):
                raise GameTextParseError(f"Subtitle section '{section}' must be an object")
            merged[section] = { **base_section, **section_data }

        return merged

    def _read_json(self, path : str) -> Any:
        logging.debug(f"Reading subtitle file {path}")
        try:
            with open(path, 'r', encoding=default_encoding) as f:
                return json.load(f)

        except (OSError, json.JSONDecodeError) as e:
            ReportError(self.events, self, f"Unable to read subtitle file {path}: {e}")
            raise GameTextParseError(f"Unable to read subtitle file {path}", e)

    def _write_json(self, path : str, data : Any) -> None:
        with open(path, 'w', encoding=default_encoding) as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write('\n')
