"""Tests for aligned result rendering (cli/output.py).

Coverage:
* Visible width ignores ANSI styling and counts terminal cells.
* Padding equalises visible width, not raw length.
* Emphasis wraps every occurrence of the search term.
* Sentinel substitution for unresolved keys.
* Printed lines put the arrow in the same column.
"""

from __future__ import annotations

import io

from rich.console import Console
from rich.text import Text

from lssaid.cli.output import (
    NOT_FOUND,
    Row,
    align_rows,
    emphasize,
    pad_visible,
    print_rows,
    resolution_rows,
    search_rows,
    visible_width,
)
from lssaid.core.models import Resolution, SearchHit

STYLED_TEN: str = "\x1b[1;31mHelloWorld\x1b[0m"


def _plain_console(buffer: io.StringIO) -> Console:
    return Console(file=buffer, width=200, color_system=None, force_terminal=False)


# ---------------------------------------------------------------------------
# Width helpers
# ---------------------------------------------------------------------------

class TestVisibleWidth:
    def test_plain_ascii(self) -> None:
        assert visible_width("Alpha") == 5

    def test_escape_codes_are_ignored(self) -> None:
        assert len(STYLED_TEN) > 10
        assert visible_width(STYLED_TEN) == 10

    def test_combining_mark_counts_once(self) -> None:
        assert visible_width("Cafe\u0301") == 4

    def test_wide_characters_take_two_cells(self) -> None:
        assert visible_width("東方") == 4

    def test_empty(self) -> None:
        assert visible_width("") == 0


class TestPadVisible:
    def test_pads_to_width(self) -> None:
        assert pad_visible("ab", 5) == "ab   "

    def test_never_truncates(self) -> None:
        assert pad_visible("abcdef", 3) == "abcdef"

    def test_styling_codes_preserved(self) -> None:
        padded = pad_visible(STYLED_TEN, 12)
        assert padded == STYLED_TEN + "  "


# ---------------------------------------------------------------------------
# Alignment
# ---------------------------------------------------------------------------

class TestAlignRows:
    def test_equalises_visible_width_not_raw_length(self) -> None:
        rows = align_rows([Row("Alpha", "x"), Row(STYLED_TEN, "y")])

        assert rows[0].display == "Alpha" + " " * 5
        assert rows[1].display == STYLED_TEN
        assert visible_width(rows[0].display) == visible_width(rows[1].display) == 10

    def test_secondary_untouched(self) -> None:
        rows = align_rows([Row("a", "first"), Row("bbb", "second")])
        assert [row.secondary for row in rows] == ["first", "second"]

    def test_empty(self) -> None:
        assert align_rows([]) == []


# ---------------------------------------------------------------------------
# Row builders
# ---------------------------------------------------------------------------

class TestRowBuilders:
    def test_resolution_rows_use_sentinel(self) -> None:
        rows = resolution_rows(
            [Resolution(key="10", name="Alpha"), Resolution(key="99", name=None)]
        )
        assert rows == [Row("10", "Alpha"), Row("99", NOT_FOUND)]

    def test_sentinel_is_never_empty(self) -> None:
        assert NOT_FOUND.strip()

    def test_empty_name_is_not_replaced(self) -> None:
        rows = resolution_rows([Resolution(key="5", name="")])
        assert rows == [Row("5", "")]

    def test_search_rows_pair_emphasised_name_with_id(self) -> None:
        rows = search_rows([SearchHit(appid=20, name="Beta", term="Beta")])

        assert len(rows) == 1
        assert rows[0].secondary == "20"
        assert "\x1b[" in rows[0].display
        assert Text.from_ansi(rows[0].display).plain == "Beta"


class TestEmphasize:
    def test_every_occurrence_wrapped(self) -> None:
        result = emphasize("Half-Life Half", "Half")
        assert result.count("\x1b[0m") == 2
        assert Text.from_ansi(result).plain == "Half-Life Half"

    def test_visible_width_unchanged(self) -> None:
        assert visible_width(emphasize("Half-Life 2", "Life")) == len("Half-Life 2")

    def test_empty_term_returns_name(self) -> None:
        assert emphasize("Beta", "") == "Beta"


# ---------------------------------------------------------------------------
# Printing
# ---------------------------------------------------------------------------

class TestPrintRows:
    def test_one_line_per_row_with_arrow(self) -> None:
        buffer = io.StringIO()
        print_rows([Row("10", "Alpha"), Row("20", "Beta")], _plain_console(buffer))

        assert buffer.getvalue().splitlines() == ["10 -> Alpha", "20 -> Beta"]

    def test_arrows_aligned(self) -> None:
        buffer = io.StringIO()
        rows = [Row("20", "Beta"), Row("abc", NOT_FOUND), Row(emphasize("Beta", "Be"), "20")]
        print_rows(rows, _plain_console(buffer))

        lines = buffer.getvalue().splitlines()
        assert len(lines) == 3
        assert len({line.index("->") for line in lines}) == 1

    def test_markup_in_names_is_literal(self) -> None:
        buffer = io.StringIO()
        print_rows([Row("1", "[bold]Not markup[/bold]")], _plain_console(buffer))

        assert buffer.getvalue().strip() == "1 -> [bold]Not markup[/bold]"

    def test_no_rows_prints_nothing(self) -> None:
        buffer = io.StringIO()
        print_rows([], _plain_console(buffer))
        assert buffer.getvalue() == ""
