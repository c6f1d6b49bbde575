"""
PyGameText - Localized game text and subtitle database

A Python library for managing per-language text banks and timed subtitle scenes
for a game, together with the scene grouping used by authoring tools.

Basic Usage
-----------

# Load text banks for each language
text_db = init_text_database([
        { 'file_path': "text/game_en.json", 'language_id': 0, 'group_name': "common" },
        { 'file_path': "text/game_fr.json", 'language_id': 1, 'group_name': "common" },
    ])

text_db.BankById("common", 0).GetLine(0x100)

# Load subtitles for each language, with scene groups for ordering
subtitle_db = init_subtitle_database([
        { 'language_id': 0, 'lines_path': "subtitles/lines_en.json", 'meta_path': "subtitles/meta_en.json" },
    ], groups_path="subtitles/groups.json")

for scene in subtitle_db.BankById(0).GetScenesInGroupOrder():
    print(scene.sorting_group, scene.name, scene.linecount)
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from PyGameText.DatabaseEvents import DatabaseEvents
from PyGameText.DefinitionFiles import DefinitionFormat, GameSubtitleDefinitionFile, GameTextDefinitionFile
from PyGameText.Formats.SubtitleJsonHandler import SubtitleJsonHandler
from PyGameText.Formats.TextJsonHandler import TextJsonHandler
from PyGameText.GameTextBank import GameTextBank
from PyGameText.GameTextDatabase import GameTextDatabase
from PyGameText.GameTextError import DuplicateKeyError, GameTextError, GameTextParseError, NotFoundError
from PyGameText.SceneGroups import SceneGroups
from PyGameText.SubtitleBank import SubtitleBank
from PyGameText.SubtitleDatabase import SubtitleDatabase
from PyGameText.SubtitleLine import SubtitleLine
from PyGameText.SubtitleScene import SubtitleScene, SubtitleSceneKind
from PyGameText.version import __version__


def _default_events() -> DatabaseEvents:
    events = DatabaseEvents()
    events.connect_default_loggers()
    return events


def init_text_database(definitions : Sequence[GameTextDefinitionFile|Mapping[str, Any]], events : DatabaseEvents|None = None) -> GameTextDatabase:
    """
    Create a :class:`GameTextDatabase` and load each text definition into it.

    Parameters
    ----------
    definitions : Sequence[GameTextDefinitionFile|Mapping]
        Definition objects, or mappings with the same fields (format, file_path, language_id, text_version, group_name).
    events : DatabaseEvents|None
        Optional events to notify as banks are added. Without them, load messages are sent to the log.

    Returns
    -------
    GameTextDatabase
        The populated database.
    """
    events = events or _default_events()
    db = GameTextDatabase(events=events)
    handler = TextJsonHandler(events=events)

    for definition in definitions:
        file_info = definition if isinstance(definition, GameTextDefinitionFile) else GameTextDefinitionFile.FromSettings(definition)
        handler.load_file(db, file_info)

    return db


def init_subtitle_database(definitions : Sequence[GameSubtitleDefinitionFile|Mapping[str, Any]], groups_path : str|None = None, events : DatabaseEvents|None = None) -> SubtitleDatabase:
    """
    Create a :class:`SubtitleDatabase`, load each subtitle definition into it and assign sorting groups.

    Parameters
    ----------
    definitions : Sequence[GameSubtitleDefinitionFile|Mapping]
        Definition objects, or mappings with the same fields (format, language_id, text_version,
        lines_path, lines_base_path, meta_path, meta_base_path).
    groups_path : str|None
        Optional scene groups asset file. Without one every scene is uncategorized.
    events : DatabaseEvents|None
        Optional events to notify as banks and scenes are added. Without them, load messages are sent to the log.

    Returns
    -------
    SubtitleDatabase
        The populated database.
    """
    events = events or _default_events()
    scene_groups = SceneGroups()
    if groups_path:
        scene_groups.HydrateFromAssetFile(groups_path)

    db = SubtitleDatabase(scene_groups, events=events)
    handler = SubtitleJsonHandler(events=events)

    for definition in definitions:
        file_info = definition if isinstance(definition, GameSubtitleDefinitionFile) else GameSubtitleDefinitionFile.FromSettings(definition)
        handler.load_files(db, file_info)

    db.UpdateSortingGroups()
    return db


__all__ = [
    '__version__',
    'DatabaseEvents',
    'DefinitionFormat',
    'DuplicateKeyError',
    'GameSubtitleDefinitionFile',
    'GameTextBank',
    'GameTextDatabase',
    'GameTextDefinitionFile',
    'GameTextError',
    'GameTextParseError',
    'NotFoundError',
    'SceneGroups',
    'SubtitleBank',
    'SubtitleDatabase',
    'SubtitleJsonHandler',
    'SubtitleLine',
    'SubtitleScene',
    'SubtitleSceneKind',
    'TextJsonHandler',
    'init_subtitle_database',
    'init_text_database',
]
