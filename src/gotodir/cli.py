"""Command-line interface: gotodir [<option>] <alias> [<directory>]

Data goes to stdout, errors to stderr. Exit status is 0 on success,
1 when an operation fails and 2 on bad arguments.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from gotodir import __version__
from gotodir.completion import complete
from gotodir.config import load_config
from gotodir.errors import AliasNotFoundError, GotoError
from gotodir.shell import bash_script
from gotodir.store import Alias, AliasStore

logger = logging.getLogger(__name__)

USAGE = """\
usage: goto [<option>] <alias> [<directory>]

default usage:
  goto <alias> - changes to the directory registered for the given alias

OPTIONS:
  -r, --register: registers an alias
    goto -r|--register <alias> <directory>
  -u, --unregister: unregisters an alias
    goto -u|--unregister <alias>
  -l, --list: lists aliases
    goto -l|--list
  -c, --cleanup: cleans up non existent directory aliases
    goto -c|--cleanup
  -h, --help: prints this help
    goto -h|--help
  -v, --version: displays the version of the goto script
    goto -v|--version
  --init: prints the bash integration script
    eval "$(gotodir --init)"
"""

NO_ALIASES = "You haven't configured any directory aliases yet."


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _emit(text: str, stream=None) -> None:
    """Print ``text``, passing undecodable path bytes through unchanged."""
    stream = stream or sys.stdout
    try:
        print(text, file=stream)
    except UnicodeEncodeError:
        stream.flush()
        data = f"{text}\n".encode(stream.encoding or "utf-8", errors="surrogateescape")
        stream.buffer.write(data)
        stream.buffer.flush()


def _error(message: str) -> None:
    _emit(f"goto error: {message}", sys.stderr)


def _format_table(aliases: list[Alias]) -> str:
    """Align ``name path`` pairs in two columns."""
    width = max(len(a.name) for a in aliases)
    return "\n".join(f"{a.name:<{width}}  {a.path}" for a in aliases)


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        _error(message)
        self.exit(2)


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="goto", add_help=False)
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-r", "--register", nargs=2, metavar=("ALIAS", "DIRECTORY"))
    group.add_argument("-u", "--unregister", metavar="ALIAS")
    group.add_argument("-l", "--list", action="store_true")
    group.add_argument("-c", "--cleanup", action="store_true")
    group.add_argument("-h", "--help", action="store_true")
    group.add_argument("-v", "--version", action="store_true")
    group.add_argument("--init", action="store_true")
    parser.add_argument("--db", type=Path, help="alias file (default: ~/.goto)")
    parser.add_argument("alias", nargs="?")
    return parser


# ── Commands ─────────────────────────────────────────────────


def _cmd_register(store: AliasStore, name: str, directory: str) -> int:
    result = store.register(name, directory)
    print(f"Alias '{name}' registered successfully.")
    if result.duplicates:
        print("note: duplicate alias found:")
        _emit(_format_table(result.duplicates))
    return 0


def _cmd_unregister(store: AliasStore, name: str) -> int:
    store.unregister(name)
    print(f"Alias '{name}' unregistered successfully.")
    return 0


def _cmd_list(store: AliasStore) -> int:
    aliases = store.list()
    if not aliases:
        print(NO_ALIASES)
        return 0
    for alias in aliases:
        _emit(alias.to_line())
    return 0


def _cmd_cleanup(store: AliasStore) -> int:
    for alias in store.cleanup():
        _emit(f"Cleaning up: {alias.name} - {alias.path}")
    return 0


def _cmd_resolve(store: AliasStore, name: str) -> int:
    try:
        path = store.lookup(name)
    except AliasNotFoundError as exc:
        _error(str(exc))
        if exc.suggestions:
            print("Did you mean:", file=sys.stderr)
            _emit(_format_table(exc.suggestions), sys.stderr)
        return 1
    _emit(path)
    return 0


def _cmd_complete(store: AliasStore, rest: list[str]) -> int:
    """Hidden hook for the bash completion function."""
    try:
        cword = int(rest[0])
    except (IndexError, ValueError):
        _error("usage: gotodir --complete <cword> <word>...")
        return 2
    for candidate in complete(store, rest[1:], cword):
        print(candidate)
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)

    config = load_config()
    _setup_logging(config.log_level)

    # Completion words may look like options, keep them away from argparse
    db_path = config.db_path
    rest = argv
    if len(rest) >= 2 and rest[0] == "--db":
        db_path, rest = Path(rest[1]), rest[2:]
    if rest[:1] == ["--complete"]:
        return _cmd_complete(AliasStore(db_path), rest[1:])

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.help or not argv:
        print(USAGE, end="")
        return 0
    if args.version:
        print(f"goto version {__version__}")
        return 0
    if args.init:
        print(bash_script(), end="")
        return 0

    has_option = (
        args.register is not None or args.unregister is not None or args.list or args.cleanup
    )
    if has_option and args.alias is not None:
        parser.error(f"unexpected argument '{args.alias}'")
    if not has_option and args.alias is None:
        print(USAGE, end="")
        return 0

    store = AliasStore(args.db or config.db_path)
    logger.debug("Using alias file %s", store.path)

    try:
        if args.register is not None:
            return _cmd_register(store, *args.register)
        if args.unregister is not None:
            return _cmd_unregister(store, args.unregister)
        if args.list:
            return _cmd_list(store)
        if args.cleanup:
            return _cmd_cleanup(store)
        return _cmd_resolve(store, args.alias)
    except GotoError as exc:
        _error(str(exc))
        return 1
    except OSError as exc:
        logger.debug("I/O failure on %s", store.path, exc_info=True)
        _error(f"{store.path}: {exc.strerror or exc}")
        return 1
