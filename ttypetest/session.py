from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Callable, Sequence, Union

from ttypetest.metrics import rate
from ttypetest.word import SEPARATOR, Glyph, Word


logger = logging.getLogger(__name__)

DEFAULT_SIZE = 30


@dataclass(frozen=True)
class Paused:
    pass


@dataclass(frozen=True)
class Running:
    started_at: float


@dataclass(frozen=True)
class Ended:
    elapsed: float


SessionState = Union[Paused, Running, Ended]


class TestSession:
    """One timed attempt at typing a fixed run of words.

    The clock starts on the first character, and the session ends when space
    is pressed on the last word. The corpus is expected to be shuffled
    already; only its first ``size`` words are used.
    """

    # keep pytest from collecting this as a test class
    __test__ = False

    def __init__(
        self,
        corpus: Sequence[str],
        size: int = DEFAULT_SIZE,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        words = tuple(Word(w) for w in list(corpus)[:max(size, 0)])
        if not words:
            raise ValueError("a test session needs at least one word")

        self._clock = clock
        self._state: SessionState = Paused()
        self._words = words
        self._current = 0
        self._input_chars = 0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def words(self) -> tuple[Word, ...]:
        return self._words

    @property
    def current_word_index(self) -> int:
        return self._current

    @property
    def current_word(self) -> Word:
        return self._words[self._current]

    @property
    def total_input_characters(self) -> int:
        return self._input_chars

    @property
    def is_finished(self) -> bool:
        return isinstance(self._state, Ended)

    def _on_last_word(self) -> bool:
        return self._current == len(self._words) - 1

    def apply_char(self, char: str) -> None:
        if isinstance(self._state, Ended):
            return
        if isinstance(self._state, Paused):
            self._state = Running(self._clock())
            logger.debug("session started")

        self.current_word.apply_char(char)
        self._input_chars += 1

    def space(self) -> None:
        if not self._on_last_word():
            if self.current_word.has_input():
                self._current += 1
            return

        state = self._state
        if isinstance(state, Running):
            self._state = Ended(self._clock() - state.started_at)
            logger.info(
                "session finished in %.2fs (%d words, %d chars)",
                self._state.elapsed,
                len(self._words),
                self._input_chars,
            )
        elif isinstance(state, (Paused, Ended)):
            # Paused here means nothing was typed yet, so there is nothing
            # to finish; Ended keeps its captured time.
            pass

    def backspace(self) -> None:
        if not isinstance(self._state, Running):
            return

        if not self.current_word.backspace() and self._current > 0:
            self._current -= 1

        # also spent when the call only stepped back a word
        if self._input_chars > 0:
            self._input_chars -= 1

    def elapsed(self) -> float | None:
        state = self._state
        if isinstance(state, Paused):
            return None
        if isinstance(state, Running):
            return self._clock() - state.started_at
        if isinstance(state, Ended):
            return state.elapsed
        raise TypeError(f"unknown session state: {state!r}")

    def wpm(self) -> float | None:
        return rate(self._current, self.elapsed())

    def cpm(self) -> float | None:
        return rate(self._input_chars, self.elapsed())

    def metrics(self) -> dict:
        """Elapsed time and both rates, all read from one clock sample."""
        elapsed_s = self.elapsed()
        return {
            "elapsed_s": elapsed_s,
            "wpm": rate(self._current, elapsed_s),
            "cpm": rate(self._input_chars, elapsed_s),
        }

    def glyphs(self) -> list[Glyph]:
        """Every word's glyphs in order, with a separator between words.

        Words left behind the cursor that are not correct come back flagged.
        """
        glyphs: list[Glyph] = []
        for i, word in enumerate(self._words):
            if i > 0:
                glyphs.append(SEPARATOR)
            flagged = i < self._current and not word.is_correct()
            glyphs.extend(word.glyphs(flagged=flagged))
        return glyphs
