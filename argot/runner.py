"""
Argot runner: host wiring around parse().

invoke() is what a program's entry point calls. It acquires the argument
vector, parses it, and handles the two non-success outcomes the way a CLI is
expected to:

- help requested → print the help to stdout and return None.
- parse error    → in shell mode, print the fault and the help to stderr and exit
                   with status 1 (or return None when deferred); outside shell
                   mode, raise the error for the caller to handle.

Quick start
    from argot import Schema, Flag, Positional, invoke

    schema = Schema([Flag("verbose", "v")], (), [Positional("path")])

    if __name__ == "__main__":
        if result := invoke(schema):
            print(result.positional(schema.positional("path")))
"""
import os.path
import shlex
import sys
from collections.abc import Iterable

from rich.console import Console

from .faults import ParseError, trigger
from .helper import print_help
from .parser import HelpRequested, parse
from .utils import *


def _tokenize(prompt):
    """
    normalize a prompt into a list of tokens (program name excluded).

    - Unset: sys.argv[1:].
    - str: shell-style split via shlex.split.
    - Iterable[str]: used as-is, each element must be a string.
    """
    if prompt is Unset:
        return sys.argv[1:]
    if isinstance(prompt, str):
        return shlex.split(prompt)
    if isinstance(prompt, Iterable):
        tokens = list(prompt)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("invoke() prompt must be a string or an iterable of strings")
        return tokens
    raise TypeError("invoke() prompt must be a string or an iterable of strings")


def invoke(schema, prompt=Unset, /, *, prog=Unset, shell=True, fancy=False, colorful=True, deferred=False):
    """
    Parse a prompt against 'schema' and handle help and errors like a CLI.

    Parameters
    - schema: Schema
    - prompt: Unset | str | Iterable[str]
      Tokens to parse, without the program name (see _tokenize).
    - prog: Unset | str
      Program name for usage and fault headers; defaults to basename(sys.argv[0]).
    - shell: bool
      Render faults instead of raising them.
    - fancy / colorful: rendering options for faults and help.
    - deferred: in shell mode, return None after rendering a fault instead of exiting.

    Returns
    - ResultSet on success, None when help was shown (or a deferred fault rendered).
    """
    prog = coalesce(prog, os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "argot")
    tokens = _tokenize(prompt)

    try:
        result = parse(schema, [prog, *tokens])
    except ParseError as fault:
        # the fault comes first, the usage block after it
        trigger(fault, prog=prog, shell=shell, fancy=fancy, colorful=colorful, deferred=True)
        print_help(schema, prog, console=Console(stderr=True), colorful=colorful, fancy=fancy)
        if not deferred:
            sys.exit(1)
        return None

    if isinstance(result, HelpRequested):
        print_help(schema, prog, colorful=colorful, fancy=fancy)
        return None

    return result


__all__ = (
    "invoke",
)
