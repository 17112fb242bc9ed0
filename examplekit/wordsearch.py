"""Finding words along adjacent cells of a letter grid."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def remove_duplicates(elements: Iterable[str]) -> list[str]:
    """Drop repeated items, keeping the first occurrence of each."""
    return list(dict.fromkeys(elements))


class WordSearch:
    """A rectangular letter board searched horizontally and vertically."""

    def __init__(self, board: Sequence[str]) -> None:
        self.board = [str(row) for row in board]

    def exist(self, word: str) -> bool:
        """True if ``word`` can be traced through adjacent, unreused cells."""
        return any(
            self._trace(word, i, j, frozenset())
            for i, row in enumerate(self.board)
            for j in range(len(row))
        )

    def _trace(self, word: str, i: int, j: int, used: frozenset) -> bool:
        if not word:
            return True
        if not (0 <= i < len(self.board) and 0 <= j < len(self.board[i])):
            return False
        if (i, j) in used or self.board[i][j] != word[0]:
            return False
        used = used | {(i, j)}
        rest = word[1:]
        return any(
            self._trace(rest, i + di, j + dj, used)
            for di, dj in ((1, 0), (-1, 0), (0, 1), (0, -1))
        )

    def find_words(self, words: Iterable[str]) -> list[str]:
        """The distinct ``words`` found on the board, in sorted order."""
        return [word for word in sorted(remove_duplicates(words)) if self.exist(word)]