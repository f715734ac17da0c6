"""Directory aliases persisted as ``name path`` lines.

The backing file is the source of truth. Every operation loads it in full
and scans it in order; there is no index and no locking. Appends are used
for registration, full rewrites (temp file + rename) for removal.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from gotodir.errors import (
    AliasExistsError,
    AliasNotFoundError,
    InvalidAliasError,
    PathNotFoundError,
)

logger = logging.getLogger(__name__)

ALIAS_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")

# Undecodable filesystem bytes round-trip through the store unchanged
_ERRORS = "surrogateescape"


@dataclass(frozen=True)
class Alias:
    """A single ``name -> directory`` record."""

    name: str
    path: str

    def to_line(self) -> str:
        return f"{self.name} {self.path}"

    @classmethod
    def from_line(cls, line: str) -> Alias | None:
        """Parse a store line. Returns None for blank or malformed lines."""
        if not line.strip():
            return None
        name, sep, path = line.partition(" ")
        if not sep or not name or not path:
            return None
        return cls(name=name, path=path)


@dataclass
class RegisterResult:
    """Outcome of a successful registration."""

    alias: Alias
    # Other aliases that already pointed at the same directory
    duplicates: list[Alias] = field(default_factory=list)


def is_valid_name(name: str) -> bool:
    return bool(ALIAS_PATTERN.match(name))


def expand_directory(raw_path: str) -> str | None:
    """Expand ``~``, ``.``, ``..`` and relative segments like ``cd && pwd``.

    Returns the absolute path, or None if it cannot be entered.
    """
    path = os.path.abspath(os.path.expanduser(raw_path))
    if os.path.isdir(path) and os.access(path, os.X_OK):
        return path
    return None


class AliasStore:
    """Read/write access to the alias file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path).expanduser()

    # ── File access ──────────────────────────────────────────

    def _read_lines(self) -> list[str]:
        """Split on ``\\n`` only; directory names may contain other line breaks."""
        if not self.path.exists():
            return []
        text = self.path.read_text(encoding="utf-8", errors=_ERRORS)
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    def _append_line(self, line: str) -> None:
        """Append a record, starting a new line if the file lacks one."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        prefix = ""
        if self.path.exists() and self.path.stat().st_size > 0:
            with self.path.open("rb") as f:
                f.seek(-1, os.SEEK_END)
                if f.read(1) != b"\n":
                    prefix = "\n"
        with self.path.open("a", encoding="utf-8", errors=_ERRORS) as f:
            f.write(f"{prefix}{line}\n")

    def _rewrite(self, lines: list[str]) -> None:
        """Replace the store atomically: write a temp file, then rename over."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", errors=_ERRORS) as f:
                for line in lines:
                    f.write(f"{line}\n")
            if self.path.exists():
                shutil.copymode(self.path, tmp_path)
            os.replace(tmp_path, self.path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

    # ── Queries ──────────────────────────────────────────────

    def list(self) -> list[Alias]:
        """All entries in store order. Empty if the file is missing."""
        entries = []
        for lineno, line in enumerate(self._read_lines(), start=1):
            alias = Alias.from_line(line)
            if alias is None:
                if line.strip():
                    logger.debug("Skipping malformed line %d in %s: %r", lineno, self.path, line)
                continue
            entries.append(alias)
        return entries

    def resolve(self, name: str) -> str | None:
        """Path of the first entry named exactly ``name``."""
        for alias in self.list():
            if alias.name == name:
                return alias.path
        return None

    def lookup(self, name: str) -> str:
        """Like resolve(), but raise with prefix suggestions when missing."""
        path = self.resolve(name)
        if path is None:
            raise AliasNotFoundError(
                name,
                message=f"unregistered alias {name}",
                suggestions=self.find_similar(name),
            )
        return path

    def find_similar(self, prefix: str) -> list[Alias]:
        """Entries whose name starts with ``prefix``."""
        return [a for a in self.list() if a.name.startswith(prefix)]

    def find_by_path(self, path: str) -> list[str]:
        """Names of entries whose path equals ``path`` exactly."""
        return [a.name for a in self.list() if a.path == path]

    # ── Mutations ────────────────────────────────────────────

    def register(self, name: str, raw_path: str) -> RegisterResult:
        """Register ``name`` for the directory ``raw_path``."""
        if not is_valid_name(name):
            raise InvalidAliasError(name)

        if self.resolve(name) is not None:
            raise AliasExistsError(name)

        directory = expand_directory(raw_path)
        if directory is None:
            raise PathNotFoundError(name, raw_path)

        duplicates = [Alias(other, directory) for other in self.find_by_path(directory)]

        alias = Alias(name, directory)
        self._append_line(alias.to_line())
        logger.info("Registered alias %s -> %s", name, directory)
        if duplicates:
            logger.debug("Directory %s already aliased as %s", directory, [d.name for d in duplicates])
        return RegisterResult(alias=alias, duplicates=duplicates)

    def unregister(self, name: str) -> None:
        """Remove every line named ``name``."""
        if self.resolve(name) is None:
            raise AliasNotFoundError(name)

        kept = []
        removed = 0
        for line in self._read_lines():
            alias = Alias.from_line(line)
            if alias is not None and alias.name == name:
                removed += 1
                continue
            kept.append(line)
        self._rewrite(kept)
        logger.info("Unregistered alias %s (%d line(s) removed)", name, removed)

    def cleanup(self) -> list[Alias]:
        """Unregister aliases whose directory no longer exists.

        Works over a snapshot taken before the first removal. Returns the
        removed entries in store order.
        """
        removed: list[Alias] = []
        unregistered: set[str] = set()
        for alias in self.list():
            if os.path.isdir(alias.path):
                continue
            if alias.name not in unregistered:
                self.unregister(alias.name)
                unregistered.add(alias.name)
            removed.append(alias)
        if removed:
            logger.info("Cleanup removed %d stale alias(es)", len(removed))
        return removed
