import unittest
from collections.abc import Sequence
from typing import Any

from PyGameText.Helpers.Tests import log_input_expected_result, log_test_name
from PyGameText.SceneGroups import SceneGroups
from PyGameText.SubtitleBank import SubtitleBank
from PyGameText.SubtitleDatabase import SubtitleDatabase
from PyGameText.SubtitleScene import SubtitleScene, SubtitleSceneKind

class LoggedTestCase(unittest.TestCase):
    """
    TestCase that logs the name of each test and the inputs and results of logged assertions
    """
    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        log_test_name(f"{cls.__name__}")

    def setUp(self) -> None:
        super().setUp()
        log_test_name(self._testMethodName)

    def assertLoggedEqual(self, name : str, expected : Any, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(name if input_value is None else input_value, expected, actual)
        self.assertEqual(expected, actual, f"{name}: expected {expected!r}, got {actual!r}")

    def assertLoggedSequenceEqual(self, name : str, expected : Sequence, actual : Sequence, input_value : Any = None) -> None:
        log_input_expected_result(name if input_value is None else input_value, expected, actual)
        self.assertSequenceEqual(expected, actual, f"{name}: sequences differ")

    def assertLoggedTrue(self, name : str, value : Any, input_value : Any = None) -> None:
        log_input_expected_result(name if input_value is None else input_value, True, value)
        self.assertTrue(value, f"{name} should be true")

    def assertLoggedFalse(self, name : str, value : Any, input_value : Any = None) -> None:
        log_input_expected_result(name if input_value is None else input_value, False, value)
        self.assertFalse(value, f"{name} should be false")

    def assertLoggedIs(self, name : str, expected : Any, actual : Any) -> None:
        log_input_expected_result(name, expected, actual)
        self.assertIs(expected, actual, f"{name}: objects are not the same")

    def assertLoggedIsNone(self, name : str, value : Any) -> None:
        log_input_expected_result(name, None, value)
        self.assertIsNone(value, f"{name} should be None")

    def assertLoggedIsNotNone(self, name : str, value : Any) -> None:
        log_input_expected_result(name, "not None", value)
        self.assertIsNotNone(value, f"{name} should not be None")

    def assertLoggedIsInstance(self, name : str, obj : Any, cls : type) -> None:
        log_input_expected_result(name, cls.__name__, type(obj).__name__)
        self.assertIsInstance(obj, cls, f"{name} should be a {cls.__name__}")

    def assertLoggedIn(self, name : str, member : Any, container : Any) -> None:
        log_input_expected_result(name, f"{member!r} in container", member in container)
        self.assertIn(member, container, f"{name}: {member!r} not found")


def BuildScene(name : str, lines : Sequence[tuple], kind : SubtitleSceneKind = SubtitleSceneKind.Movie, id : int = 0) -> SubtitleScene:
    """
    Build a scene from (frame, text[, speaker[, offscreen]]) tuples, or (frame,) tuples for clear entries
    """
    scene = SubtitleScene(kind, name, id)
    for line in lines:
        if len(line) == 1:
            scene.AddClearEntry(line[0])
        else:
            scene.AddLine(*line)
    return scene

def BuildSubtitleDatabase(scenes_by_language : dict[int, list[SubtitleScene]], groups : dict[str, list[str]]|None = None) -> SubtitleDatabase:
    """
    Build a database with a bank per language containing the given scenes, and optional scene groups
    """
    scene_groups = SceneGroups()
    for group_name, scene_names in (groups or {}).items():
        for scene_name in scene_names:
            scene_groups.AddScene(group_name, scene_name)

    db = SubtitleDatabase(scene_groups)
    for language_id, scenes in scenes_by_language.items():
        bank = SubtitleBank(language_id, "jak1-v2", f"subtitles/lang{language_id}.json")
        for scene in scenes:
            bank.AddScene(scene)
        db.AddBank(bank)

    return db

sample_subtitle_lines = {
    'speakers': {
        'jak': "Jak",
        'daxter': "Daxter",
        'keira': "Keira"
    },
    'cutscenes': {
        'village1-intro': [
            "Ah, there you are!",
            "Hey, don't look at me!",
            "We'll need the precursor orbs."
        ],
        'firecanyon-end': [
            "Whew, that was hot!"
        ]
    },
    'hints': {
        'sidekick-hint-crate': [
            "Break open crates to find things!"
        ],
        'asstvb-intro': [
            "Over here!",
            "Quick, follow me."
        ]
    }
}

sample_subtitle_meta = {
    'cutscenes': {
        'village1-intro': [
            { 'frame': 120, 'offscreen': False, 'speaker': 'keira' },
            { 'frame': 30, 'offscreen': True, 'speaker': 'daxter' },
            { 'frame': 200, 'clear': True },
            { 'frame': 260, 'offscreen': False, 'speaker': 'keira' }
        ],
        'firecanyon-end': [
            { 'frame': 10, 'offscreen': False, 'speaker': 'daxter' }
        ]
    },
    'hints': {
        'sidekick-hint-crate': {
            'id': '2a7',
            'lines': [
                { 'frame': 0, 'speaker': 'daxter' },
                { 'frame': 90, 'clear': True }
            ]
        },
        'asstvb-intro': {
            'id': '0',
            'lines': [
                { 'frame': 0, 'speaker': 'jak' },
                { 'frame': 45, 'speaker': 'jak' }
            ]
        }
    }
}

sample_scene_groups = {
    '_groups': ['_groups', 'village1', 'hints'],
    'village1': ['village1-intro'],
    'hints': ['sidekick-hint-crate', 'asstvb-intro']
}
