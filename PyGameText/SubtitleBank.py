from __future__ import annotations

import logging

from PyGameText.DatabaseEvents import DatabaseEvents
from PyGameText.GameTextError import DuplicateKeyError, NotFoundError
from PyGameText.SubtitleScene import SubtitleScene

class SubtitleBank:
    """
    Subtitles for every scene in one language, keyed by scene name
    """
    def __init__(self, language_id : int, text_version : str = "", file_path : str = "", events : DatabaseEvents|None = None) -> None:
        self.language_id : int = language_id
        self.text_version : str = text_version
        self.file_path : str = file_path
        self._scenes : dict[str, SubtitleScene] = {}
        self.events : DatabaseEvents|None = events

    @property
    def scenes(self) -> dict[str, SubtitleScene]:
        """
        Scenes keyed by name, in name order
        """
        return { name: self._scenes[name] for name in sorted(self._scenes) }

    @property
    def scenecount(self) -> int:
        return len(self._scenes)

    def SceneExists(self, name : str) -> bool:
        return name in self._scenes

    def SceneByName(self, name : str) -> SubtitleScene:
        """
        Get a scene by name. Raises NotFoundError if the scene does not exist.
        """
        if name not in self._scenes:
            raise NotFoundError(f"Scene '{name}' does not exist in language {self.language_id}", name)

        return self._scenes[name]

    def AddScene(self, scene : SubtitleScene) -> SubtitleScene:
        """
        Add a scene to the bank. Raises DuplicateKeyError if a scene with the same name exists.
        """
        if scene.name in self._scenes:
            raise DuplicateKeyError(f"Duplicate scene '{scene.name}' in language {self.language_id}", scene.name)

        self._scenes[scene.name] = scene
        logging.debug(f"Added scene '{scene.name}' to subtitle bank {self.language_id}")

        if self.events:
            self.events.scene_added.send(self, scene=scene)

        return scene

    def UpdateScene(self, scene : SubtitleScene) -> SubtitleScene:
        """
        Replace the content of an existing scene with the same name, or add the scene if it is new.
        Returns the scene stored in the bank.
        """
        existing = self._scenes.get(scene.name)
        if existing is None:
            return self.AddScene(scene)

        existing.FromOtherScene(scene)
        logging.debug(f"Replaced scene '{scene.name}' in subtitle bank {self.language_id}")

        if self.events:
            self.events.scene_replaced.send(self, scene=existing)

        return existing

    def GetScenesInGroupOrder(self) -> list[SubtitleScene]:
        """
        Get the scenes ordered by sorting group, then by name. Scenes without a group index come last.
        """
        return sorted(self._scenes.values(), key=lambda scene: (scene.sorting_group_index < 0, scene.sorting_group_index, scene.name))

    def __str__(self) -> str:
        return f"SubtitleBank (language {self.language_id}, {self.scenecount} scenes)"

    def __repr__(self) -> str:
        return str(self)
