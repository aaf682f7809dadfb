"""lssaid — resolve Steam app ids to their names.

Looks up directory entry names, explicit ids or name fragments against
a locally cached copy of the Steam app catalog.
"""

from lssaid.version import __version__

__all__: list[str] = ["__version__"]
