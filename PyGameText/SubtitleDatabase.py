from __future__ import annotations

import logging

from PyGameText.DatabaseEvents import DatabaseEvents
from PyGameText.GameTextError import DuplicateKeyError
from PyGameText.SceneGroups import SceneGroups
from PyGameText.SubtitleBank import SubtitleBank

class SubtitleDatabase:
    """
    Subtitle banks for each language, plus the scene groups shared by all languages.

    The scene groups belong to this database instance, so separate databases never share grouping state.
    """
    def __init__(self, scene_groups : SceneGroups|None = None, events : DatabaseEvents|None = None) -> None:
        self._banks : dict[int, SubtitleBank] = {}
        self.scene_groups : SceneGroups|None = scene_groups
        self.events : DatabaseEvents|None = events

    @property
    def banks(self) -> dict[int, SubtitleBank]:
        """
        Banks keyed by language id in ascending order
        """
        return { language_id: self._banks[language_id] for language_id in sorted(self._banks) }

    def BankExists(self, language_id : int) -> bool:
        return language_id in self._banks

    def AddBank(self, bank : SubtitleBank) -> SubtitleBank:
        """
        Add a bank for a language. Raises DuplicateKeyError if the language already has a bank.
        """
        if bank.language_id in self._banks:
            raise DuplicateKeyError(f"Subtitle bank for language {bank.language_id} already exists", bank.language_id)

        if bank.events is None:
            bank.events = self.events

        self._banks[bank.language_id] = bank
        logging.debug(f"Added subtitle bank for language {bank.language_id}")

        if self.events:
            self.events.subtitle_bank_added.send(self, bank=bank)

        return bank

    def BankById(self, language_id : int) -> SubtitleBank|None:
        """
        Get the bank for a language, or None if it has not been created
        """
        return self._banks.get(language_id)

    def UpdateSortingGroups(self) -> None:
        """
        Copy each scene's group and group index from the scene groups
        """
        if self.scene_groups is None:
            logging.debug("No scene groups, sorting groups not updated")
            return

        for bank in self._banks.values():
            for scene in bank.scenes.values():
                scene.sorting_group = self.scene_groups.FindGroup(scene.name)
                scene.sorting_group_index = self.scene_groups.FindGroupIndex(scene.sorting_group)
