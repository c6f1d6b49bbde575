from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from PyGameText.GameTextError import DuplicateKeyError, GameTextError, GameTextParseError
from PyGameText.Helpers import default_encoding

DEFAULT_GROUP_ORDER_KEY = "_groups"
DEFAULT_UNCATEGORIZED_GROUP = "uncategorized"

class SceneGroups:
    """
    Assigns scene names to named groups and records the order the groups are displayed in.

    Grouping is independent of language. The first entry in group_order is the order key itself,
    which is also the key the order is stored under in the asset file.

    Moving a scene to another group is done by the caller: RemoveScene from the old group
    (see FindGroup), then AddScene to the new one.
    """
    def __init__(self, group_order_key : str = DEFAULT_GROUP_ORDER_KEY, uncategorized_group : str = DEFAULT_UNCATEGORIZED_GROUP) -> None:
        self.group_order_key : str = group_order_key
        self.uncategorized_group : str = uncategorized_group
        self.group_order : list[str] = [group_order_key]
        self.groups : dict[str, list[str]] = {}

    def FindGroup(self, scene_name : str) -> str:
        """
        Get the name of the group containing a scene, or the uncategorized group if it has not been assigned
        """
        for group_name, scene_names in self.groups.items():
            if scene_name in scene_names:
                return group_name

        return self.uncategorized_group

    def FindGroupIndex(self, group_name : str) -> int:
        """
        Get the display position of a group, or -1 if it is not in the group order
        """
        try:
            return self.group_order.index(group_name)
        except ValueError:
            return -1

    def AddScene(self, group_name : str, scene_name : str) -> None:
        """
        Add a scene to a group, creating the group if necessary. Adding a scene twice has no effect.

        The group order key is reserved for the group order and cannot hold scenes.
        """
        if group_name == self.group_order_key:
            raise GameTextError(f"'{group_name}' is reserved for the group order and cannot contain scenes")

        if group_name not in self.group_order:
            self.group_order.append(group_name)

        scene_names = self.groups.setdefault(group_name, [])
        if scene_name not in scene_names:
            scene_names.append(scene_name)

    def RemoveScene(self, group_name : str, scene_name : str) -> None:
        """
        Remove a scene from a group. Does nothing if the group or scene does not exist.
        """
        scene_names = self.groups.get(group_name)
        if scene_names and scene_name in scene_names:
            scene_names.remove(scene_name)

    def HydrateFromAssetFile(self, path : str) -> None:
        """
        Load the group order and group contents from a JSON asset file
        """
        logging.info(f"Loading scene groups from {path}")
        try:
            with open(path, 'r', encoding=default_encoding) as f:
                data = json.load(f)

        except (OSError, json.JSONDecodeError) as e:
            raise GameTextParseError(f"Unable to read scene groups from {path}", e)

        self.HydrateFromData(data)

    def HydrateFromData(self, data : Mapping[str, Any]) -> None:
        """
        Replace the groups with the contents of a dictionary of group name to scene names,
        with the group order stored under the order key.

        Raises DuplicateKeyError if a scene is assigned to more than one group, leaving the groups unchanged.
        """
        if not isinstance(data, Mapping):
            raise GameTextParseError(f"Scene groups must be an object, not {type(data).__name__}")

        order = data.get(self.group_order_key, [])
        if not isinstance(order, list) or not all(isinstance(name, str) for name in order):
            raise GameTextParseError(f"Scene group order '{self.group_order_key}' must be a list of names")

        group_order : list[str] = []
        for group_name in order:
            if group_name not in group_order:
                group_order.append(group_name)

        if self.group_order_key in group_order:
            group_order.remove(self.group_order_key)
        group_order.insert(0, self.group_order_key)

        groups : dict[str, list[str]] = {}
        assigned : dict[str, str] = {}
        for group_name, scene_names in data.items():
            if group_name == self.group_order_key:
                continue

            if not isinstance(scene_names, list) or not all(isinstance(name, str) for name in scene_names):
                raise GameTextParseError(f"Scene group '{group_name}' must be a list of scene names")

            group : list[str] = []
            for scene_name in scene_names:
                previous = assigned.get(scene_name)
                if previous is not None and previous != group_name:
                    raise DuplicateKeyError(f"Scene '{scene_name}' is in both group '{previous}' and group '{group_name}'", scene_name)

                assigned[scene_name] = group_name
                if scene_name not in group:
                    group.append(scene_name)

            groups[group_name] = group

            if group_name not in group_order:
                logging.warning(f"Scene group '{group_name}' is not in the group order, adding it at the end")
                group_order.append(group_name)

        self.group_order = group_order
        self.groups = groups
        logging.debug(f"Loaded {len(groups)} scene groups")

    def ToJson(self) -> dict[str, list[str]]:
        """
        Get the groups in the same layout as the asset file
        """
        data : dict[str, list[str]] = { self.group_order_key: list(self.group_order) }
        for group_name in self.group_order:
            if group_name in self.groups:
                data[group_name] = list(self.groups[group_name])

        for group_name, scene_names in self.groups.items():
            if group_name not in data:
                data[group_name] = list(scene_names)

        return data

    def SaveToAssetFile(self, path : str) -> None:
        """
        Write the groups to a JSON asset file
        """
        with open(path, 'w', encoding=default_encoding) as f:
            json.dump(self.ToJson(), f, indent=2, ensure_ascii=False)
            f.write('\n')

        logging.info(f"Saved scene groups to {path}")
