from __future__ import annotations

class SubtitleLine:
    """
    A single timed subtitle line. A line with no text is a clear entry,
    which tells the player to stop showing the previous line from its frame onwards.

    Lines are ordered by frame only.
    """
    def __init__(self, frame : int, text : str = "", speaker : str = "", offscreen : bool = False) -> None:
        self.frame : int = frame
        self.text : str = text
        self.speaker : str = speaker
        self.offscreen : bool = offscreen

    @classmethod
    def ClearEntry(cls, frame : int) -> SubtitleLine:
        return cls(frame, "", "", False)

    @property
    def is_clear(self) -> bool:
        return not self.text

    def Copy(self) -> SubtitleLine:
        return SubtitleLine(self.frame, self.text, self.speaker, self.offscreen)

    def __lt__(self, other : SubtitleLine) -> bool:
        return self.frame < other.frame

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, SubtitleLine):
            return NotImplemented
        return (self.frame, self.text, self.speaker, self.offscreen) == (other.frame, other.text, other.speaker, other.offscreen)

    def __hash__(self) -> int:
        return hash((self.frame, self.text, self.speaker, self.offscreen))

    def __str__(self) -> str:
        if self.is_clear:
            return f"{self.frame}: <clear>"
        speaker = f"{self.speaker}: " if self.speaker else ""
        return f"{self.frame}: {speaker}{self.text}"

    def __repr__(self) -> str:
        return f"SubtitleLine({self.frame!r}, {self.text!r}, {self.speaker!r}, {self.offscreen!r})"
