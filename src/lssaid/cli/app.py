"""CLI application entry point and command routing for lssaid.

This module is the **sole error boundary** for the entire application.
It catches :class:`~lssaid.exceptions.LssaidError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* Results go to the stdout console, everything else to the stderr console.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from loguru import logger
from rich.markup import escape

from lssaid.cli import exit_codes
from lssaid.cli.console import console, output
from lssaid.cli.log import configure_logging
from lssaid.config import Settings
from lssaid.exceptions import LssaidError
from lssaid.infra.input_collector import DEFAULT_DIRECTORY, InputMode
from lssaid.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The three input sources are mutually exclusive:
    * ``lssaid [directory]``            — resolve directory entry names
    * ``lssaid -i ID [ID ...]``         — resolve the given ids
    * ``lssaid -s TERM [TERM ...]``     — search app names
    """
    parser = argparse.ArgumentParser(
        prog="lssaid",
        description="List Steam app names for app ids.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-r",
        "--refresh",
        action="store_true",
        help="Refresh the app id cache.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging on stderr.",
    )

    sources = parser.add_mutually_exclusive_group()
    sources.add_argument(
        "directory",
        nargs="?",
        default=None,
        help=(
            "The directory to match file names from, "
            f"defaults to the current directory ({DEFAULT_DIRECTORY})."
        ),
    )
    sources.add_argument(
        "-i",
        "--parse-provided-ids",
        nargs="+",
        metavar="ID",
        default=None,
        help="Do not parse directory names, only the ids provided to this option.",
    )
    sources.add_argument(
        "-s",
        "--search",
        nargs="+",
        metavar="TERM",
        default=None,
        help="Search app names containing the given terms (case-sensitive).",
    )
    return parser


def _select_mode(args: argparse.Namespace) -> InputMode:
    if args.search is not None:
        return InputMode.SEARCH
    if args.parse_provided_ids is not None:
        return InputMode.IDS
    return InputMode.DIRECTORY


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_lookup(args: argparse.Namespace, settings: Settings) -> int:
    """Run one lookup.

    Flow:
    1. Collect the query inputs for the selected mode.
    2. Load (or refresh) the cached catalog and parse it.
    3. Match the inputs against the catalog.
    4. Print aligned results.
    """
    from lssaid.cli.output import print_rows, resolution_rows, search_rows
    from lssaid.core.catalog_service import CatalogService
    from lssaid.infra.catalog_cache import CatalogCache
    from lssaid.infra.input_collector import explicit_keys, list_directory_keys
    from lssaid.infra.steam_fetcher import SteamCatalogFetcher

    mode = _select_mode(args)
    logger.debug("Input mode: {}", mode.value)

    keys: list[str] = []
    if mode is InputMode.DIRECTORY:
        keys = list_directory_keys(args.directory or DEFAULT_DIRECTORY)
    elif mode is InputMode.IDS:
        keys = explicit_keys(args.parse_provided_ids)

    fetcher = SteamCatalogFetcher(settings.catalog_url, timeout=settings.request_timeout)
    cache = CatalogCache(
        fetcher,
        settings.cache_path,
        freshness_window=settings.freshness_window,
    )
    service = CatalogService(cache)

    if service.needs_refresh(args.refresh):
        console.print("[bold]Refreshing app list cache…[/bold]")
    loaded = service.load(force_refresh=args.refresh)
    if loaded.refreshed:
        console.print(
            f"[green]Refresh done![/green] Saved into {escape(str(loaded.location))}"
        )

    if mode is InputMode.SEARCH:
        rows = search_rows(service.search(loaded, args.search))
    else:
        rows = resolution_rows(service.resolve(loaded, keys))

    print_rows(rows, output)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the lssaid CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    settings = Settings.from_environ()

    return _handle_lookup(args, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except LssaidError as exc:
        console.print(f"[bold red]Error ({exc.step}):[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
