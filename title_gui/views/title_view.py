"""Pure rendering of the application state.

``render`` is a plain function of the state so it can be tested without a
display; the Tk components only copy the resulting ``TitleView`` onto
widgets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fake_title.formatter import format_title
from title_gui.state import AppState, Errored, Idle, Loaded, Loading

# Non-breaking space keeps the heading line's height while it is empty
PLACEHOLDER_HEADING = "\u00a0"


@dataclass(frozen=True)
class TitleView:
    heading: str = PLACEHOLDER_HEADING
    busy: bool = False
    error: Optional[str] = None


def render(state: AppState) -> TitleView:
    """Map a lifecycle state to what the widget shows.

    While loading the spinner replaces the title area: a previous title is
    not kept on screen during a reload.
    """

    if isinstance(state, Loaded):
        return TitleView(heading=format_title(state.title))
    if isinstance(state, Loading):
        return TitleView(busy=True)
    if isinstance(state, Errored):
        return TitleView(error=f"Error: {state.message}")
    if isinstance(state, Idle):
        return TitleView()
    raise TypeError(f"Unknown state: {state!r}")
