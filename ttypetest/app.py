from __future__ import annotations

import logging
import random
import time
from typing import Callable

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.logging import TextualHandler
from textual.screen import Screen
from textual.widgets import Header, Static

from ttypetest.corpus import CorpusError, load_corpus, shuffled
from ttypetest.render import HELP_LINE, render_glyphs, render_stats
from ttypetest.session import DEFAULT_SIZE, TestSession


logger = logging.getLogger(__name__)

FPS = 60.0
SESSION_SIZE = DEFAULT_SIZE


class TypingTestScreen(Screen):
    def __init__(
        self,
        corpus: list[str],
        session_size: int = SESSION_SIZE,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__()
        self.corpus = corpus
        self.session_size = session_size
        self.rng = rng
        self.clock = clock
        self.session = TestSession(self.corpus, self.session_size, clock=self.clock)

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="test"):
            yield Static("ttypetest", id="title")
            yield Static("", id="stats")
            yield Static("", id="words")
            yield Static(HELP_LINE, id="help")

    def on_mount(self) -> None:
        self._refresh_view()
        self.set_interval(1.0 / FPS, self._refresh_view)

    def on_key(self, event: events.Key) -> None:
        if event.key == "escape":
            self.app.exit()
        elif event.key == "enter":
            self.restart()
        elif event.key == "space":
            self.session.space()
        elif event.key == "backspace":
            self.session.backspace()
        elif event.is_printable and event.character:
            self.session.apply_char(event.character)
        else:
            return

        event.stop()
        self._refresh_view()

    def restart(self) -> None:
        shuffled(self.corpus, self.rng)
        self.session = TestSession(self.corpus, self.session_size, clock=self.clock)
        logger.info("restarted with a fresh %d-word session", len(self.session.words))

    def _refresh_view(self) -> None:
        self.query_one("#stats", Static).update(render_stats(self.session.metrics()))
        self.query_one("#words", Static).update(render_glyphs(self.session.glyphs()))


class TypingTestApp(App):
    CSS = """
    #test {
        padding: 1 2;
    }

    #title {
        content-align: center middle;
        text-style: bold;
        color: $accent;
    }

    #stats {
        content-align: center middle;
        margin-bottom: 1;
    }

    #words {
        height: 1fr;
        border: solid $warning;
        padding: 1 2;
    }

    #help {
        content-align: center middle;
        color: $text-muted;
        margin-top: 1;
    }
    """

    TITLE = "ttypetest"

    def __init__(
        self,
        corpus: list[str],
        session_size: int = SESSION_SIZE,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__()
        self.corpus = corpus
        self.session_size = session_size
        self.rng = rng
        self.clock = clock

    def on_mount(self) -> None:
        self.push_screen(
            TypingTestScreen(self.corpus, self.session_size, rng=self.rng, clock=self.clock)
        )


def main() -> None:
    logging.basicConfig(level=logging.INFO, handlers=[TextualHandler()])
    try:
        corpus = load_corpus()
    except CorpusError as exc:
        logger.error("%s", exc)
        raise SystemExit(str(exc)) from exc

    TypingTestApp(shuffled(corpus)).run()


if __name__ == "__main__":
    main()
