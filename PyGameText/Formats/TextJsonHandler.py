from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from PyGameText.DatabaseEvents import DatabaseEvents, ReportError, ReportInfo
from PyGameText.DefinitionFiles import DefinitionFormat, GameTextDefinitionFile
from PyGameText.GameTextBank import GameTextBank
from PyGameText.GameTextDatabase import GameTextDatabase
from PyGameText.GameTextError import GameTextError, GameTextParseError
from PyGameText.Helpers import FormatHexId, ParseHexId, default_encoding

DEFAULT_TEXT_GROUP = "common"

class TextJsonHandler:
    """
    Reads and writes text banks as JSON objects mapping hex line ids to text, e.g.

        { "0100": "Press start", "0101": "Continue" }
    """
    def __init__(self, events : DatabaseEvents|None = None) -> None:
        self.events : DatabaseEvents|None = events

    def load_file(self, db : GameTextDatabase, file_info : GameTextDefinitionFile) -> GameTextBank:
        """
        Load a text file described by a definition into the database
        """
        if not file_info.file_path:
            raise GameTextError(f"No file path for text definition: {file_info}")

        logging.debug(f"Reading text file {file_info.file_path}")
        try:
            with open(file_info.file_path, 'r', encoding=default_encoding) as f:
                data = json.load(f)

        except (OSError, json.JSONDecodeError) as e:
            ReportError(self.events, self, f"Unable to read text file {file_info.file_path}: {e}")
            raise GameTextParseError(f"Unable to read text file {file_info.file_path}", e)

        bank = self.parse(data, db, file_info)
        ReportInfo(self.events, self, f"Loaded text for language {file_info.language_id} from {file_info.file_path}")
        return bank

    def parse_string(self, content : str, db : GameTextDatabase, file_info : GameTextDefinitionFile) -> GameTextBank:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise GameTextParseError("Unable to parse text JSON", e)

        return self.parse(data, db, file_info)

    def parse(self, data : Mapping[str, Any], db : GameTextDatabase, file_info : GameTextDefinitionFile) -> GameTextBank:
        """
        Add the lines to the bank for the definition's group and language, creating the bank if necessary.
        Existing lines with the same id are overwritten.
        """
        if file_info.format != DefinitionFormat.JSON:
            raise GameTextError(f"Unsupported text format {file_info.format.name} for {file_info.file_path}")

        if file_info.language_id < 0:
            raise GameTextError(f"No language id specified for {file_info.file_path or 'text'}")

        if not isinstance(data, Mapping):
            raise GameTextParseError(f"Text JSON must be an object, not {type(data).__name__}")

        lines : dict[int, str] = {}
        for key, text in data.items():
            if not isinstance(text, str):
                raise GameTextParseError(f"Text for line {key} should be a string, not {type(text).__name__}")
            lines[ParseHexId(key)] = text

        group = file_info.group_name or DEFAULT_TEXT_GROUP
        bank = db.BankById(group, file_info.language_id)
        if bank is None:
            bank = db.AddBank(group, GameTextBank(file_info.language_id))

        for line_id, text in lines.items():
            bank.SetLine(line_id, text)

        logging.debug(f"Loaded {len(lines)} lines into text group '{group}' language {file_info.language_id}")
        return bank

    def compose(self, bank : GameTextBank) -> dict[str, str]:
        """
        Get the lines of a bank as a JSON-ready dictionary, in id order
        """
        return { FormatHexId(line_id): text for line_id, text in bank.lines.items() }

    def compose_string(self, bank : GameTextBank) -> str:
        return json.dumps(self.compose(bank), indent=2, ensure_ascii=False)
