import unittest

from PyGameText.DatabaseEvents import DatabaseEvents
from PyGameText.GameTextError import DuplicateKeyError, NotFoundError
from PyGameText.Helpers.TestCases import BuildScene, BuildSubtitleDatabase, LoggedTestCase
from PyGameText.Helpers.Tests import log_input_expected_error
from PyGameText.SceneGroups import SceneGroups
from PyGameText.SubtitleBank import SubtitleBank
from PyGameText.SubtitleDatabase import SubtitleDatabase
from PyGameText.SubtitleScene import SubtitleScene, SubtitleSceneKind


class TestSubtitleBank(LoggedTestCase):
    def test_add_and_find_scene(self):
        bank = SubtitleBank(0, "jak1-v2", "lines.json")
        scene = bank.AddScene(BuildScene("intro", [(10, "Hello")]))

        self.assertLoggedTrue("scene exists", bank.SceneExists("intro"))
        self.assertLoggedIs("scene by name", scene, bank.SceneByName("intro"))
        self.assertLoggedEqual("scene count", 1, bank.scenecount)

    def test_duplicate_scene_leaves_bank_unchanged(self):
        bank = SubtitleBank(0)
        original = bank.AddScene(BuildScene("intro", [(10, "Hello")]))

        with self.assertRaises(DuplicateKeyError) as exc:
            bank.AddScene(BuildScene("intro", [(20, "Other")]))

        log_input_expected_error("AddScene duplicate", DuplicateKeyError, exc.exception)
        self.assertLoggedIs("original scene kept", original, bank.SceneByName("intro"))
        self.assertLoggedEqual("original line kept", "Hello", bank.SceneByName("intro").lines[0].text)
        self.assertLoggedEqual("scene count", 1, bank.scenecount)

    def test_missing_scene_raises(self):
        bank = SubtitleBank(1)
        with self.assertRaises(NotFoundError) as exc:
            bank.SceneByName("nowhere")

        log_input_expected_error("SceneByName missing", NotFoundError, exc.exception)
        self.assertLoggedFalse("missing scene exists", bank.SceneExists("nowhere"))

    def test_update_scene_replaces_content(self):
        bank = SubtitleBank(0)
        stored = bank.AddScene(BuildScene("intro", [(10, "Old")]))
        stored.sorting_group = "village1"

        result = bank.UpdateScene(BuildScene("intro", [(5, "New"), (15,)], SubtitleSceneKind.Movie))

        self.assertLoggedIs("stored scene updated in place", stored, result)
        self.assertLoggedSequenceEqual("new lines", ["New", ""], [ line.text for line in result.lines ])
        self.assertLoggedEqual("sorting group kept", "village1", result.sorting_group)

    def test_update_scene_adds_new(self):
        bank = SubtitleBank(0)
        scene = BuildScene("outro", [(1, "Bye")])
        result = bank.UpdateScene(scene)

        self.assertLoggedIs("new scene stored", scene, result)
        self.assertLoggedTrue("scene exists", bank.SceneExists("outro"))

    def test_scene_events(self):
        events = DatabaseEvents()
        added : list[str] = []
        replaced : list[str] = []
        events.scene_added.connect(lambda sender, scene: added.append(scene.name), weak=False)
        events.scene_replaced.connect(lambda sender, scene: replaced.append(scene.name), weak=False)

        bank = SubtitleBank(0, events=events)
        bank.AddScene(SubtitleScene(name="intro"))
        bank.UpdateScene(SubtitleScene(name="intro"))
        bank.UpdateScene(SubtitleScene(name="outro"))

        self.assertLoggedSequenceEqual("added", ["intro", "outro"], added)
        self.assertLoggedSequenceEqual("replaced", ["intro"], replaced)


class TestSubtitleDatabase(LoggedTestCase):
    def test_add_bank(self):
        db = SubtitleDatabase()
        bank = db.AddBank(SubtitleBank(0))

        self.assertLoggedIs("bank by id", bank, db.BankById(0))
        self.assertLoggedIsNone("missing bank", db.BankById(1))
        self.assertLoggedTrue("bank exists", db.BankExists(0))

    def test_duplicate_bank(self):
        db = SubtitleDatabase()
        bank = db.AddBank(SubtitleBank(0))
        bank.AddScene(SubtitleScene(name="intro"))

        with self.assertRaises(DuplicateKeyError) as exc:
            db.AddBank(SubtitleBank(0))

        log_input_expected_error("AddBank duplicate", DuplicateKeyError, exc.exception)
        self.assertLoggedIs("original bank kept", bank, db.BankById(0))
        self.assertLoggedTrue("original scene kept", db.BankById(0).SceneExists("intro"))

    def test_banks_in_language_order(self):
        db = SubtitleDatabase()
        for language_id in [3, 0, 1]:
            db.AddBank(SubtitleBank(language_id))

        self.assertLoggedSequenceEqual("languages", [0, 1, 3], list(db.banks.keys()))

    def test_no_cross_language_validation(self):
        db = BuildSubtitleDatabase({
            0: [ BuildScene("intro", [(0, "Hello")]), BuildScene("outro", [(0, "Bye")]) ],
            1: [ BuildScene("intro", [(0, "Bonjour")]) ]
        })

        self.assertLoggedFalse("outro missing in language 1", db.BankById(1).SceneExists("outro"))

    def test_bank_inherits_events(self):
        events = DatabaseEvents()
        added : list[int] = []
        events.subtitle_bank_added.connect(lambda sender, bank: added.append(bank.language_id), weak=False)

        db = SubtitleDatabase(events=events)
        bank = db.AddBank(SubtitleBank(4))

        self.assertLoggedIs("bank events", events, bank.events)
        self.assertLoggedSequenceEqual("bank added events", [4], added)

    def test_update_sorting_groups(self):
        db = BuildSubtitleDatabase({
            0: [ BuildScene("intro", [(0, "a")]), BuildScene("boss", [(0, "b")]), BuildScene("misc", [(0, "c")]) ],
            1: [ BuildScene("intro", [(0, "d")]) ]
        }, groups={ 'movies': ["intro"], 'bosses': ["boss"] })

        db.UpdateSortingGroups()

        bank = db.BankById(0)
        self.assertLoggedEqual("intro group", "movies", bank.SceneByName("intro").sorting_group)
        self.assertLoggedEqual("intro index", 1, bank.SceneByName("intro").sorting_group_index)
        self.assertLoggedEqual("boss index", 2, bank.SceneByName("boss").sorting_group_index)
        self.assertLoggedEqual("misc group", "uncategorized", bank.SceneByName("misc").sorting_group)
        self.assertLoggedEqual("misc index", -1, bank.SceneByName("misc").sorting_group_index)
        self.assertLoggedEqual("other language updated", "movies", db.BankById(1).SceneByName("intro").sorting_group)

        ordered = [ scene.name for scene in bank.GetScenesInGroupOrder() ]
        self.assertLoggedSequenceEqual("group order", ["intro", "boss", "misc"], ordered)

    def test_update_sorting_groups_without_groups(self):
        db = SubtitleDatabase()
        bank = db.AddBank(SubtitleBank(0))
        scene = bank.AddScene(SubtitleScene(name="intro"))

        db.UpdateSortingGroups()

        self.assertLoggedEqual("sorting group unchanged", "", scene.sorting_group)

    def test_databases_do_not_share_groups(self):
        first = SubtitleDatabase(SceneGroups())
        second = SubtitleDatabase(SceneGroups())
        first.scene_groups.AddScene("movies", "intro")

        self.assertLoggedEqual("second database unaffected", "uncategorized", second.scene_groups.FindGroup("intro"))


if __name__ == '__main__':
    unittest.main()
