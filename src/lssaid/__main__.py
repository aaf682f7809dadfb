"""Allow ``python -m lssaid`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m lssaid`` behaves identically to the ``lssaid`` console
script.
"""

from __future__ import annotations

from lssaid.cli.app import cli

if __name__ == "__main__":
    cli()
