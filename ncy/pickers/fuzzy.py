"""In-process fuzzy picker (prompt_toolkit UI, rapidfuzz ranking)."""

from __future__ import annotations

from typing import Any, Sequence

from prompt_toolkit.application import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.data_structures import Point
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import HSplit, Window
from prompt_toolkit.layout.controls import BufferControl, FormattedTextControl
from prompt_toolkit.layout.processors import BeforeInput
from prompt_toolkit.styles import Style
from rapidfuzz import fuzz, utils

# WRatio score (0-100) a title needs when the query is not a subsequence of it.
DEFAULT_SCORE_CUTOFF = 60.0

STYLE = Style.from_dict(
    {
        "prompt": "fg:#38bdf8 bold",
        "status": "fg:#94a3b8",
        "option": "",
        "option.selected": "reverse bold",
        "hint": "fg:#94a3b8",
    }
)


def _is_subsequence(needle: str, haystack: str) -> bool:
    chars = iter(haystack)
    return all(ch in chars for ch in needle)


def rank_titles(query: str, titles: Sequence[str], score_cutoff: float = DEFAULT_SCORE_CUTOFF) -> list[str]:
    """Filter and order titles for a query.

    An empty query keeps every title in input order. Otherwise a title matches
    when the query's characters appear in it in order, or when its WRatio score
    reaches `score_cutoff`; matches are ordered by score, then input order.
    """
    needle = query.strip().lower()
    if not needle:
        return list(titles)

    scored: list[tuple[float, int, str]] = []
    for position, title in enumerate(titles):
        score = fuzz.WRatio(needle, title, processor=utils.default_process)
        if score < score_cutoff and not _is_subsequence(needle, title.lower()):
            continue
        scored.append((-score, position, title))

    scored.sort()
    return [title for _, _, title in scored]


class _PickerState:
    def __init__(self, titles: Sequence[str], score_cutoff: float):
        self.titles = list(titles)
        self.score_cutoff = score_cutoff
        self.matches = list(titles)
        self.selected = 0

    def refilter(self, query: str) -> None:
        self.matches = rank_titles(query, self.titles, self.score_cutoff)
        self.selected = 0

    def move(self, step: int) -> None:
        if self.matches:
            self.selected = (self.selected + step) % len(self.matches)

    def current(self) -> str | None:
        if not self.matches:
            return None
        return self.matches[self.selected]

    def render(self) -> list[tuple[str, str]]:
        fragments: list[tuple[str, str]] = []
        for idx, title in enumerate(self.matches):
            if idx == self.selected:
                fragments.append(("class:option.selected", f"> {title}\n"))
            else:
                fragments.append(("class:option", f"  {title}\n"))
        return fragments

    def status(self) -> list[tuple[str, str]]:
        return [
            ("class:status", f"  {len(self.matches)}/{len(self.titles)}  "),
            ("class:hint", "Up/Down move · Enter select · Esc cancel"),
        ]


class FuzzyPicker:
    """Full-screen fuzzy filter over titles, run on the calling thread."""

    def __init__(
        self,
        prompt: str = "> ",
        *,
        score_cutoff: float = DEFAULT_SCORE_CUTOFF,
        input: Any = None,
        output: Any = None,
    ):
        self.prompt = prompt
        self.score_cutoff = score_cutoff
        # prompt_toolkit Input/Output; None means the controlling terminal
        self._input = input
        self._output = output

    def pick(self, titles: Sequence[str]) -> str | None:
        if not titles:
            return None

        state = _PickerState(titles, self.score_cutoff)
        query = Buffer(multiline=False, on_text_changed=lambda buf: state.refilter(buf.text))

        query_window = Window(
            BufferControl(buffer=query, input_processors=[BeforeInput(self.prompt, style="class:prompt")]),
            height=1,
        )
        status_window = Window(FormattedTextControl(state.status), height=1)
        list_window = Window(
            FormattedTextControl(
                state.render,
                get_cursor_position=lambda: Point(x=0, y=state.selected),
                show_cursor=False,
            ),
            always_hide_cursor=True,
        )

        kb = KeyBindings()

        @kb.add("down")
        @kb.add("c-n")
        def _(event) -> None:
            state.move(1)
            event.app.invalidate()

        @kb.add("up")
        @kb.add("c-p")
        def _(event) -> None:
            state.move(-1)
            event.app.invalidate()

        @kb.add("enter")
        def _(event) -> None:
            event.app.exit(result=state.current())

        @kb.add("escape", eager=True)
        @kb.add("c-c")
        @kb.add("c-g")
        def _(event) -> None:
            event.app.exit(result=None)

        app: Application[str | None] = Application(
            layout=Layout(HSplit([query_window, status_window, list_window]), focused_element=query_window),
            key_bindings=kb,
            style=STYLE,
            full_screen=True,
            erase_when_done=True,
            input=self._input,
            output=self._output,
        )
        return app.run()
