"""Shared Rich consoles for the CLI layer.

Two consoles exist: one on stderr for status messages and error
reports, one on stdout for lookup results, so results stay pipeable.
Both resolve their stream lazily, which keeps them usable under pytest's
output capture.
"""

from __future__ import annotations

from rich.console import Console


def get_rich_console(*, stderr: bool = True) -> Console:
	"""Create a Rich console targeting stderr (default) or stdout."""
	return Console(stderr=stderr, highlight=False)


console: Console = get_rich_console()
"""Status and diagnostics console (stderr)."""

output: Console = get_rich_console(stderr=False)
"""Results console (stdout)."""
