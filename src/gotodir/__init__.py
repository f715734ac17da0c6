"""gotodir: jump to registered directory aliases.

Aliases live in a flat text file (``~/.goto`` by default), one
``name path`` record per line:

    proj /home/me/code/project
    docs /home/me/Documents

The Python side only returns data. Changing directory and completion are
done by the bash function from ``gotodir --init``.
"""

from gotodir.errors import (
    AliasExistsError,
    AliasNotFoundError,
    ConflictError,
    GotoError,
    InvalidAliasError,
    NotFoundError,
    PathError,
    PathNotFoundError,
    ValidationError,
)
from gotodir.store import Alias, AliasStore, RegisterResult

__version__ = "1.0.0"

__all__ = [
    "Alias",
    "AliasExistsError",
    "AliasNotFoundError",
    "AliasStore",
    "ConflictError",
    "GotoError",
    "InvalidAliasError",
    "NotFoundError",
    "PathError",
    "PathNotFoundError",
    "RegisterResult",
    "ValidationError",
]
