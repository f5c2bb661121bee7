from __future__ import annotations

from typing import Iterable

from rich.style import Style
from rich.text import Text

from ttypetest.word import Glyph, LetterScore


LETTER_STYLES = {
    LetterScore.NO_INPUT: Style(color="grey50", dim=True),
    LetterScore.CORRECT: Style(color="green"),
    LetterScore.INCORRECT: Style(color="red"),
}
FLAGGED = Style(underline=True)

HELP_LINE = "<esc> quit - <enter> restart"


def glyph_style(glyph: Glyph) -> Style | None:
    if glyph.score is None:
        return None
    style = LETTER_STYLES[glyph.score]
    if glyph.flagged:
        style = style + FLAGGED
    return style


def render_glyphs(glyphs: Iterable[Glyph]) -> Text:
    text = Text()
    for glyph in glyphs:
        style = glyph_style(glyph)
        if style is None:
            text.append(glyph.char)
        else:
            text.append(glyph.char, style=style)
    return text


def render_stats(metrics: dict) -> str:
    elapsed_s = metrics.get("elapsed_s") or 0.0
    cpm = metrics.get("cpm") or 0.0
    wpm = metrics.get("wpm") or 0.0
    return f"time: {elapsed_s:.2f} ; cpm: {cpm:.2f} ; wpm: {wpm:.2f}"
