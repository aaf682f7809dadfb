"""Aligned ``display -> secondary`` output for lookup results.

Widths are measured in terminal cells with ANSI escape sequences
stripped, so emphasised search hits line up with plain keys.  Combining
marks occupy no cell and wide (East Asian) characters occupy two.

The "not found" sentinel is introduced here, at the presentation
boundary; the matcher itself reports a missing name as ``None``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from rich.console import Console
from rich.style import Style
from rich.text import Text

from lssaid.core.models import Resolution, SearchHit

NOT_FOUND: str = "Not a valid Steam appid!"
"""Shown in place of a name when a key matched no catalog entry."""

ARROW: str = " -> "

_EMPHASIS = Style(bold=True, color="yellow")
_ARROW_STYLE = Style(bold=True, color="cyan")


class Row(NamedTuple):
    """One output line before alignment."""

    display: str
    """Left column; may contain ANSI styling codes."""

    secondary: str
    """Right column, plain text."""


# ---------------------------------------------------------------------------
# Width helpers
# ---------------------------------------------------------------------------

def visible_width(text: str) -> int:
    """Terminal cell width of *text*, ignoring ANSI escape sequences."""
    return Text.from_ansi(text).cell_len


def pad_visible(text: str, width: int) -> str:
    """Right-pad *text* with spaces up to *width* visible cells."""
    return text + " " * max(width - visible_width(text), 0)


def emphasize(name: str, term: str) -> str:
    """Highlight every occurrence of *term* in *name* with ANSI codes."""
    if not term:
        return name
    return name.replace(term, _EMPHASIS.render(term))


# ---------------------------------------------------------------------------
# Row builders
# ---------------------------------------------------------------------------

def resolution_rows(resolutions: Sequence[Resolution]) -> list[Row]:
    """``key -> name`` rows, substituting :data:`NOT_FOUND` for misses."""
    return [
        Row(res.key, res.name if res.name is not None else NOT_FOUND)
        for res in resolutions
    ]


def search_rows(hits: Sequence[SearchHit]) -> list[Row]:
    """``emphasised name -> appid`` rows."""
    return [Row(emphasize(hit.name, hit.term), str(hit.appid)) for hit in hits]


def align_rows(rows: Sequence[Row]) -> list[Row]:
    """Pad every display column to the widest visible display text."""
    if not rows:
        return []
    width = max(visible_width(row.display) for row in rows)
    return [Row(pad_visible(row.display, width), row.secondary) for row in rows]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render_line(row: Row) -> Text:
    """Build the styled Rich text for one already-aligned row."""
    line = Text.from_ansi(row.display, end="")
    line.append(ARROW, style=_ARROW_STYLE)
    line.append(row.secondary)
    return line


def print_rows(rows: Sequence[Row], console: Console) -> None:
    """Align *rows* and print one line per row to *console*."""
    for row in align_rows(rows):
        console.print(render_line(row), soft_wrap=True)
