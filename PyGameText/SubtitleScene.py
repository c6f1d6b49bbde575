from __future__ import annotations

import bisect
from enum import Enum

from PyGameText.Helpers import GetValueName
from PyGameText.SubtitleLine import SubtitleLine

class SubtitleSceneKind(Enum):
    Invalid = -1
    Movie = 0
    Hint = 1
    HintNamed = 2

class SubtitleScene:
    """
    The timed lines for one cutscene or hint, kept in frame order.

    Lines with the same frame stay in the order they were added. The sorting group
    fields are assigned from SceneGroups and are not part of the scene content.
    """
    def __init__(self, kind : SubtitleSceneKind = SubtitleSceneKind.Movie, name : str = "", id : int = 0) -> None:
        self.name : str = name
        self.id : int = id
        self.kind : SubtitleSceneKind = kind
        self._lines : list[SubtitleLine] = []
        self.sorting_group : str = ""
        self.sorting_group_index : int = -1

    @property
    def lines(self) -> list[SubtitleLine]:
        return self._lines

    @property
    def linecount(self) -> int:
        return len(self._lines)

    @property
    def is_hint(self) -> bool:
        return self.kind in (SubtitleSceneKind.Hint, SubtitleSceneKind.HintNamed)

    def AddLine(self, frame : int, text : str, speaker : str = "", offscreen : bool = False) -> SubtitleLine:
        """
        Add a line, keeping the lines sorted by frame
        """
        return self._insert(SubtitleLine(frame, text, speaker, offscreen))

    def AddClearEntry(self, frame : int) -> SubtitleLine:
        """
        Add an empty line that clears any displayed subtitle from this frame
        """
        return self._insert(SubtitleLine.ClearEntry(frame))

    def ClearLines(self) -> None:
        self._lines.clear()

    def FromOtherScene(self, other : SubtitleScene) -> None:
        """
        Replace this scene's content with a copy of another scene's
        """
        self.name = other.name
        self._lines = [ line.Copy() for line in other.lines ]
        self.kind = other.kind
        self.id = other.id

    def _insert(self, line : SubtitleLine) -> SubtitleLine:
        # insort_right places the line after any existing lines with the same frame
        bisect.insort_right(self._lines, line, key=lambda item: item.frame)
        return line

    def __str__(self) -> str:
        return f"SubtitleScene {self.name} ({GetValueName(self.kind)}, {self.linecount} lines)"

    def __repr__(self) -> str:
        return str(self)
