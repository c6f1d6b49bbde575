from __future__ import annotations

from PyGameText.GameTextError import NotFoundError

class GameTextBank:
    """
    All the numbered text lines for one language in one text group
    """
    def __init__(self, language_id : int) -> None:
        self._language_id : int = language_id
        self._lines : dict[int, str] = {}

    @property
    def language_id(self) -> int:
        return self._language_id

    @property
    def lines(self) -> dict[int, str]:
        """
        Lines keyed by id, in ascending id order
        """
        return { line_id: self._lines[line_id] for line_id in sorted(self._lines) }

    @property
    def linecount(self) -> int:
        return len(self._lines)

    def LineExists(self, line_id : int) -> bool:
        return line_id in self._lines

    def GetLine(self, line_id : int) -> str:
        """
        Get the text for a line id. Raises NotFoundError if there is no such line.
        """
        if line_id not in self._lines:
            raise NotFoundError(f"Line {line_id:#x} does not exist in language {self._language_id}", line_id)

        return self._lines[line_id]

    def SetLine(self, line_id : int, text : str) -> None:
        """
        Add or overwrite a line
        """
        self._lines[line_id] = text

    def __str__(self) -> str:
        return f"GameTextBank (language {self._language_id}, {self.linecount} lines)"

    def __repr__(self) -> str:
        return str(self)
