"""Bash integration.

A subprocess cannot change its parent shell's directory, so ``goto`` is a
shell function: it asks the program for the alias's directory and runs
``cd`` itself. Completion works the same way through ``--complete``.

Install with::

    eval "$(gotodir --init)"
"""

from __future__ import annotations

_BASH_TEMPLATE = r"""
# gotodir shell integration
function {function}()
{{
  if [ "$#" -eq 1 ] && [[ "$1" != -* ]]; then
    local target
    target=$(command {program} "$1") || return $?
    if [ -n "$target" ]; then
      cd "$target" || {{ echo "goto error: Failed to goto '$target'" >&2; return 1; }}
    fi
  else
    command {program} "$@"
  fi
}}

function _complete_{function}()
{{
  local cur="${{COMP_WORDS[$COMP_CWORD]}}" prev="${{COMP_WORDS[1]}}"

  if [ "$COMP_CWORD" -eq "3" ] && {{ [[ $prev = "-r" ]] || [[ $prev = "--register" ]]; }}; then
    local IFS=$' \t\n'
    # shellcheck disable=SC2207
    COMPREPLY=($(compgen -d -- "$cur"))
    return
  fi

  compopt +o filenames 2>/dev/null
  local IFS=$'\n'
  # shellcheck disable=SC2207
  COMPREPLY=($(command {program} --complete "$COMP_CWORD" "${{COMP_WORDS[@]}}" 2>/dev/null))
}}

complete -o filenames -F _complete_{function} {function}
"""


def bash_script(program: str = "gotodir", function: str = "goto") -> str:
    """Render the bash snippet defining ``function`` on top of ``program``."""
    return _BASH_TEMPLATE.format(program=program, function=function).lstrip("\n")
