from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LetterScore(Enum):
    NO_INPUT = "no_input"
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass(frozen=True)
class Glyph:
    """One render unit: a character plus how it should be styled.

    ``score`` is None for the plain separator between words.
    """

    char: str
    score: LetterScore | None
    flagged: bool = False


SEPARATOR = Glyph(" ", None)


class Word:
    """A target word and whatever has been typed against it so far."""

    def __init__(self, target: str) -> None:
        self._target = target
        # None until the first keystroke, never the empty string
        self._typed: str | None = None

    def __repr__(self) -> str:
        return f"Word({self._target!r}, typed={self._typed!r})"

    @property
    def target(self) -> str:
        return self._target

    @property
    def typed(self) -> str | None:
        return self._typed

    def apply_char(self, char: str) -> None:
        self._typed = char if self._typed is None else self._typed + char

    def backspace(self) -> bool:
        """Drop the last typed character.

        Returns False when there was nothing to delete, which the session uses
        to step back into the previous word.
        """
        if self._typed is None:
            return False
        self._typed = self._typed[:-1] or None
        return True

    def has_input(self) -> bool:
        return self._typed is not None

    def score(self) -> list[LetterScore]:
        if self._typed is None:
            return [LetterScore.NO_INPUT] * len(self._target)

        scores = [
            LetterScore.CORRECT if expected == actual else LetterScore.INCORRECT
            for expected, actual in zip(self._target, self._typed)
        ]
        if len(self._target) > len(self._typed):
            scores.extend([LetterScore.NO_INPUT] * (len(self._target) - len(self._typed)))
        elif len(self._typed) > len(self._target):
            scores.extend([LetterScore.INCORRECT] * (len(self._typed) - len(self._target)))
        return scores

    def is_correct(self) -> bool:
        if self._typed is None:
            return False
        return all(s is LetterScore.CORRECT for s in self.score())

    def glyphs(self, flagged: bool = False) -> list[Glyph]:
        glyphs = []
        for i, score in enumerate(self.score()):
            if i < len(self._target):
                char = self._target[i]
            else:
                # overflow past the target, show what was actually typed
                char = self._typed[i]
            glyphs.append(Glyph(char, score, flagged))
        return glyphs
