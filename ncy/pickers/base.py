"""
Picker protocol.

A picker presents note titles and returns the one the user chose, or None when
nothing was chosen (escape, interrupt, empty selection). Commands pick a
backend once with get_picker() and only ever talk to the protocol.
"""

from __future__ import annotations

from typing import Literal, Protocol, Sequence

Layout = Literal["inline", "fullscreen"]


class Picker(Protocol):
    """Interactive chooser over a list of titles."""

    def pick(self, titles: Sequence[str]) -> str | None:
        """
        Let the user choose one title.

        Args:
            titles: Candidate titles, in display order

        Returns:
            The chosen title, or None if the user chose nothing.
        """
        ...


def get_picker(external: bool, layout: Layout = "inline") -> Picker:
    """In-process fuzzy picker, or fzf when `external` is set."""
    if external:
        from .external import FzfPicker

        return FzfPicker.with_layout(layout)

    from .fuzzy import FuzzyPicker

    return FuzzyPicker()
