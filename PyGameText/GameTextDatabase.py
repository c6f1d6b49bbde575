from __future__ import annotations

import logging

from PyGameText.DatabaseEvents import DatabaseEvents
from PyGameText.GameTextBank import GameTextBank
from PyGameText.GameTextError import DuplicateKeyError, NotFoundError

class GameTextDatabase:
    """
    Text banks for each language in each named text group.

    The database owns its banks. Lookups return the stored bank, so edits through
    the returned object are visible to every later lookup.
    """
    def __init__(self, events : DatabaseEvents|None = None) -> None:
        self._banks : dict[str, dict[int, GameTextBank]] = {}
        self.events : DatabaseEvents|None = events

    @property
    def groups(self) -> dict[str, dict[int, GameTextBank]]:
        """
        Banks for every group, keyed by group name then language id. Changing the result does not change the database.
        """
        return { group: dict(banks) for group, banks in self._banks.items() }

    @property
    def group_names(self) -> list[str]:
        return list(self._banks.keys())

    def GetBanks(self, group : str) -> dict[int, GameTextBank]:
        """
        Get the banks for a text group, keyed by language id in ascending order
        """
        if group not in self._banks:
            raise NotFoundError(f"Text group '{group}' does not exist", group)

        banks = self._banks[group]
        return { language_id: banks[language_id] for language_id in sorted(banks) }

    def BankExists(self, group : str, language_id : int) -> bool:
        return language_id in self._banks.get(group, {})

    def AddBank(self, group : str, bank : GameTextBank) -> GameTextBank:
        """
        Add a bank to a text group. Raises DuplicateKeyError if the group already has a bank for the language.
        """
        if self.BankExists(group, bank.language_id):
            raise DuplicateKeyError(f"Text group '{group}' already has a bank for language {bank.language_id}", (group, bank.language_id))

        self._banks.setdefault(group, {})[bank.language_id] = bank
        logging.debug(f"Added text bank for language {bank.language_id} to group '{group}'")

        if self.events:
            self.events.text_bank_added.send(self, group=group, bank=bank)

        return bank

    def BankById(self, group : str, language_id : int) -> GameTextBank|None:
        """
        Get the bank for a group and language, or None if it has not been created
        """
        return self._banks.get(group, {}).get(language_id)
