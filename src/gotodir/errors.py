"""Errors raised by alias store operations.

Each error maps to a single user-facing message. The CLI prints it once,
prefixed with ``goto error:``, and aborts the command.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gotodir.store import Alias


class GotoError(Exception):
    """Base class for every alias store error."""


class InvalidAliasError(GotoError):
    """Alias name does not match the allowed pattern."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            "invalid alias - can start with letters or digits "
            "followed by letters, digits, hyphens or underscores"
        )


class AliasExistsError(GotoError):
    """Alias name already resolves to a directory."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"alias '{name}' exists")


class PathNotFoundError(GotoError):
    """Target path cannot be entered as a directory."""

    def __init__(self, name: str, path: str) -> None:
        self.name = name
        self.path = path
        super().__init__(f"failed to register '{name}' to '{path}' - can't cd to directory")


class AliasNotFoundError(GotoError):
    """Alias name is not registered.

    ``suggestions`` holds entries sharing the name as a prefix, filled in
    by lookups so callers can print a "did you mean" hint.
    """

    def __init__(
        self,
        name: str,
        message: str | None = None,
        suggestions: list[Alias] | None = None,
    ) -> None:
        self.name = name
        self.suggestions = suggestions or []
        super().__init__(message or f"alias '{name}' does not exist")


# Taxonomy names
ValidationError = InvalidAliasError
ConflictError = AliasExistsError
PathError = PathNotFoundError
NotFoundError = AliasNotFoundError
