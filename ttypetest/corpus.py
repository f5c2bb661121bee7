from __future__ import annotations

import logging
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
import random


logger = logging.getLogger(__name__)

WORD_SRC = files("ttypetest") / "words.txt"


class CorpusError(Exception):
    """The word list could not be read."""


def load_corpus(path: Path | Traversable = WORD_SRC) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CorpusError(f"could not read word list {path}: {exc}") from exc

    words = [line.strip() for line in text.splitlines() if line.strip()]
    logger.info("loaded %d words from %s", len(words), path)
    return words


def shuffled(corpus: list[str], rng: random.Random | None = None) -> list[str]:
    """Shuffle ``corpus`` in place and hand it back for chaining."""
    (rng or random).shuffle(corpus)
    return corpus
