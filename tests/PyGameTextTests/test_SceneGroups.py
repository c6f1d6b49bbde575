import json
import os
import tempfile
import unittest

from PyGameText.GameTextError import DuplicateKeyError, GameTextError, GameTextParseError
from PyGameText.Helpers.TestCases import LoggedTestCase, sample_scene_groups
from PyGameText.Helpers.Tests import log_input_expected_error, skip_if_debugger_attached
from PyGameText.SceneGroups import SceneGroups


class TestSceneGroups(LoggedTestCase):
    def test_add_scene_appends_group(self):
        groups = SceneGroups()
        self.assertLoggedSequenceEqual("initial order", ["_groups"], groups.group_order)

        groups.AddScene("intro_movies", "intro")

        self.assertLoggedSequenceEqual("group order", ["_groups", "intro_movies"], groups.group_order)
        self.assertLoggedEqual("group index", 1, groups.FindGroupIndex("intro_movies"))
        self.assertLoggedEqual("scene group", "intro_movies", groups.FindGroup("intro"))

    def test_add_scene_is_idempotent(self):
        groups = SceneGroups()
        groups.AddScene("movies", "intro")
        groups.AddScene("movies", "intro")

        self.assertLoggedSequenceEqual("single membership", ["intro"], groups.groups["movies"])
        self.assertLoggedSequenceEqual("group listed once", ["_groups", "movies"], groups.group_order)

    def test_remove_scene(self):
        groups = SceneGroups()
        groups.AddScene("movies", "intro")
        groups.RemoveScene("movies", "intro")

        self.assertLoggedEqual("falls back to uncategorized", "uncategorized", groups.FindGroup("intro"))
        self.assertLoggedEqual("group kept in order", 1, groups.FindGroupIndex("movies"))

    def test_remove_missing_is_noop(self):
        groups = SceneGroups()
        groups.AddScene("movies", "intro")
        groups.RemoveScene("movies", "outro")
        groups.RemoveScene("nothing", "intro")

        self.assertLoggedSequenceEqual("movies unchanged", ["intro"], groups.groups["movies"])

    def test_move_scene_between_groups(self):
        groups = SceneGroups()
        groups.AddScene("movies", "intro")

        old_group = groups.FindGroup("intro")
        groups.RemoveScene(old_group, "intro")
        groups.AddScene("village1", "intro")

        self.assertLoggedEqual("new group", "village1", groups.FindGroup("intro"))
        self.assertLoggedSequenceEqual("old group empty", [], groups.groups["movies"])

    def test_find_group_index_missing(self):
        groups = SceneGroups()
        self.assertLoggedEqual("missing group index", -1, groups.FindGroupIndex("nothing"))
        self.assertLoggedEqual("order key index", 0, groups.FindGroupIndex("_groups"))

    def test_custom_keys(self):
        groups = SceneGroups(group_order_key="order", uncategorized_group="misc")
        self.assertLoggedSequenceEqual("initial order", ["order"], groups.group_order)
        self.assertLoggedEqual("fallback group", "misc", groups.FindGroup("intro"))

    def test_hydrate_from_data(self):
        groups = SceneGroups()
        groups.HydrateFromData(sample_scene_groups)

        self.assertLoggedSequenceEqual("group order", ["_groups", "village1", "hints"], groups.group_order)
        self.assertLoggedEqual("hint group", "hints", groups.FindGroup("asstvb-intro"))
        self.assertLoggedEqual("village group index", 1, groups.FindGroupIndex("village1"))

    def test_hydrate_adds_order_key_and_missing_groups(self):
        groups = SceneGroups()
        groups.HydrateFromData({
            '_groups': ["beach"],
            'beach': ["beach-intro"],
            'jungle': ["jungle-intro"]
        })

        self.assertLoggedSequenceEqual("group order", ["_groups", "beach", "jungle"], groups.group_order)

    @skip_if_debugger_attached
    def test_order_key_cannot_hold_scenes(self):
        groups = SceneGroups()
        groups.AddScene("village1", "village1-intro")

        with self.assertRaises(GameTextError) as exc:
            groups.AddScene("_groups", "intro")

        log_input_expected_error("AddScene to order key", GameTextError, exc.exception)
        self.assertLoggedEqual("json unchanged", { '_groups': ["_groups", "village1"], 'village1': ["village1-intro"] }, groups.ToJson())
        self.assertLoggedEqual("scene not grouped", "uncategorized", groups.FindGroup("intro"))

        custom = SceneGroups(group_order_key="order")
        with self.assertRaises(GameTextError):
            custom.AddScene("order", "intro")

    @skip_if_debugger_attached
    def test_hydrate_duplicate_scene(self):
        groups = SceneGroups()
        groups.AddScene("movies", "intro")

        with self.assertRaises(DuplicateKeyError) as exc:
            groups.HydrateFromData({
                '_groups': ["_groups", "a", "b"],
                'a': ["intro"],
                'b': ["intro"]
            })

        log_input_expected_error("scene in two groups", DuplicateKeyError, exc.exception)
        self.assertLoggedSequenceEqual("state unchanged", ["_groups", "movies"], groups.group_order)
        self.assertLoggedEqual("scene unchanged", "movies", groups.FindGroup("intro"))

    def test_hydrate_invalid_data(self):
        groups = SceneGroups()
        with self.assertRaises(GameTextParseError):
            groups.HydrateFromData({ '_groups': "not a list" })

        with self.assertRaises(GameTextParseError):
            groups.HydrateFromData({ '_groups': [], 'movies': "intro" })

    def test_to_json(self):
        groups = SceneGroups()
        groups.AddScene("village1", "village1-intro")
        groups.AddScene("hints", "sidekick-hint-crate")
        groups.AddScene("hints", "asstvb-intro")

        self.assertLoggedEqual("json", sample_scene_groups, groups.ToJson())

    def test_save_and_hydrate_asset_file(self):
        groups = SceneGroups()
        groups.HydrateFromData(sample_scene_groups)

        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "groups.json")
            groups.SaveToAssetFile(path)

            with open(path, 'r', encoding='utf-8') as f:
                self.assertLoggedEqual("file contents", sample_scene_groups, json.load(f))

            reloaded = SceneGroups()
            reloaded.HydrateFromAssetFile(path)

        self.assertLoggedSequenceEqual("reloaded order", groups.group_order, reloaded.group_order)
        self.assertLoggedEqual("reloaded groups", groups.groups, reloaded.groups)

    def test_hydrate_missing_file(self):
        groups = SceneGroups()
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(GameTextParseError) as exc:
                groups.HydrateFromAssetFile(os.path.join(temp_dir, "missing.json"))

        log_input_expected_error("missing file", GameTextParseError, exc.exception)
        self.assertLoggedIsInstance("wrapped error", exc.exception.error, OSError)


if __name__ == '__main__':
    unittest.main()
