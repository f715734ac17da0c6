"""Completion candidates for the bash integration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gotodir.store import AliasStore

COMMAND_OPTIONS = [
    "-r", "--register",
    "-u", "--unregister",
    "-l", "--list",
    "-c", "--cleanup",
    "-v", "--version",
]

_UNREGISTER_FLAGS = ("-u", "--unregister")
_REGISTER_FLAGS = ("-r", "--register")


def complete_aliases(store: AliasStore, prefix: str) -> list[str]:
    return [alias.name for alias in store.find_similar(prefix)]


def complete(store: AliasStore, words: list[str], cword: int) -> list[str]:
    """Return candidates for ``words[cword]``; ``words[0]`` is the command.

    An empty result for the register directory argument means the shell
    should fall back to its own directory completion.
    """
    cur = words[cword] if 0 <= cword < len(words) else ""
    first = words[1] if len(words) > 1 else ""

    if cword == 1:
        if cur.startswith("-"):
            return [opt for opt in COMMAND_OPTIONS if opt.startswith(cur)]
        return complete_aliases(store, cur)

    if cword == 2 and first in _UNREGISTER_FLAGS:
        return complete_aliases(store, cur)

    # cword == 3 after --register is left to the shell (compgen -d)
    return []

