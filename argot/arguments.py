r"""
Argot argument specifications.

Overview
- Specs
  • Flag: named, presence-only switch (no payload), e.g., -v/--verbose.
  • Option: named, value-bearing argument that takes exactly one following token,
    e.g., -o/--output FILE.
  • Positional: value-bearing argument consumed by position, optionally defaulted.

- Introspection & representation
  • ArgumentType metaclass provides stable __repr__/__rich_repr__ and exposes the
    fields declared in __introspectable__ as read-only properties.

Metadata (sanitized on construction)
- Shared (all specs)
  • name: str, the long name ("--name" on the command line) and the key used by
    schema handles and result dumps.
  • descr: Unset | str (short help), non-empty when provided.
- Named (Flag/Option)
  • shortcut: Unset | single character ("-c" on the command line).
- Value-bearing (Option/Positional)
  • default: None | str. Options fall back to it when never given; positionals
    with a default become optional and must trail the required ones (checked
    by the schema compiler).

Validation highlights
- Names must match r"[^\W\d]\w*(-\w+)*": letters, digits, underscores and inner
  hyphens, never a leading digit or hyphen.
- Shortcuts are exactly one non-whitespace character other than "-".
- descr strings are trimmed; empty strings are rejected.

Quick example:
    >>> from argot.arguments import Flag, Option, Positional
    >>> Flag("verbose", "v", descr="Chatty output.")
    flag(name='verbose', shortcut='v', descr='Chatty output.')
    >>> Option("output", "o", default="out.txt")
    option(name='output', shortcut='o', default='out.txt', descr=None)
    >>> Positional("source")
    positional(name='source', default=None, descr=None)

Public API
- Classes: Flag, Option, Positional
"""
import functools
import operator
import re

from .utils import *


class ArgumentType(type):
    """
    Metaclass that turns specs into introspectable, read-only descriptors.

    Responsibilities
    - Provide stable, readable __repr__/__rich_repr__ implementations for
      diagnostics and help output.
    - Expose selected fields as read-only properties using mirror() for all
      names listed in __introspectable__.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in messages.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Return a concise, stable representation with key metadata.

            Example
            - option(name='output', shortcut='o', default=None, descr=None)
            """
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            """
            Yield (name, object) pairs for pretty printers such as rich.pretty.
            """
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: normalize and validate the fields every spec carries.

    - name: required non-empty string in shell-friendly form.
    - descr: optional short description; Unset becomes None.

    Raises
    - TypeError: on wrong types.
    - ValueError: on empty or malformed strings.
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    elif not (name := name.strip()):
        raise ValueError(f"{cls.__typename__} 'name' cannot be empty")
    elif not re.fullmatch(r"[^\W\d]\w*(-\w+)*", name):
        raise ValueError(f"{cls.__typename__} 'name' must be a valid argument name, got {name!r}")
    metadata["name"] = name

    if not isinstance(descr := metadata["descr"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    elif isinstance(descr, str) and not (descr := descr.strip()):
        raise ValueError(f"{cls.__typename__} 'descr' cannot be empty")
    metadata["descr"] = coalesce(descr)


def _sanitize_named_metadata(cls, metadata, /):
    """
    Internal: validate the shortcut of named specs (Flag, Option).

    A shortcut is a single character used as "-c". Whitespace and "-" itself
    are rejected since neither can be typed as a short switch.
    """
    if not isinstance(shortcut := metadata["shortcut"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'shortcut' must be a string")
    elif isinstance(shortcut, str):
        if len(shortcut) != 1:
            raise ValueError(f"{cls.__typename__} 'shortcut' must be a single character, got {shortcut!r}")
        if shortcut == "-" or shortcut.isspace():
            raise ValueError(f"{cls.__typename__} 'shortcut' cannot be {shortcut!r}")
    metadata["shortcut"] = coalesce(shortcut)


def _sanitize_parametric_metadata(cls, metadata, /):
    """
    Internal: validate the default of value-bearing specs (Option, Positional).

    Everything is text, so a default is either None (absent) or a string.
    """
    if not isinstance(metadata["default"], str | None):
        raise TypeError(f"{cls.__typename__} 'default' must be a string")


class Flag(metaclass=ArgumentType):
    """
    Named, presence-only switch.

    A flag carries no payload; seeing "--name" (or its shortcut, possibly chained
    as in "-abc") sets its result slot to True.
    """

    __introspectable__ = (
        "name",
        "shortcut",
        "descr",
    )

    def __init__(self, name, shortcut=Unset, /, descr=Unset):
        metadata = {
            "name": name,
            "shortcut": shortcut,
            "descr": descr,
        }
        _sanitize_metadata(type(self), metadata)
        _sanitize_named_metadata(type(self), metadata)

        for name, object in metadata.items():
            setattr(self, "_" + name, object)


class Option(metaclass=ArgumentType):
    """
    Named, value-bearing argument.

    An option consumes exactly one following token as its value, verbatim, even
    when that token starts with "-". Options are never chained.

    Parameters
    - name: long name, used as "--name".
    - shortcut: optional single character, used as "-c".
    - default: value reported when the option is never given (None means absent).
    - descr: short description for help.
    """

    __introspectable__ = (
        "name",
        "shortcut",
        "default",
        "descr",
    )

    def __init__(self, name, shortcut=Unset, /, default=None, descr=Unset):
        metadata = {
            "name": name,
            "shortcut": shortcut,
            "default": default,
            "descr": descr,
        }
        _sanitize_metadata(type(self), metadata)
        _sanitize_named_metadata(type(self), metadata)
        _sanitize_parametric_metadata(type(self), metadata)

        for name, object in metadata.items():
            setattr(self, "_" + name, object)

    @property
    def metavar(self):
        """
        Placeholder shown for the value in usage and help ("--output OUTPUT").
        """
        return self.name.upper()


class Positional(metaclass=ArgumentType):
    """
    Argument consumed by position rather than by name.

    A positional with a default is optional: when the input runs out before it
    is reached, the default is used. Optional positionals must come after all
    required ones; the schema compiler rejects any other ordering.
    """

    __introspectable__ = (
        "name",
        "default",
        "descr",
    )

    def __init__(self, name, /, default=None, descr=Unset):
        metadata = {
            "name": name,
            "default": default,
            "descr": descr,
        }
        _sanitize_metadata(type(self), metadata)
        _sanitize_parametric_metadata(type(self), metadata)

        for name, object in metadata.items():
            setattr(self, "_" + name, object)

    @property
    def required(self):
        return self.default is None


__all__ = (
    # Public API surface for consumers of argot.arguments.
    # These names are re-exported from the package __init__.
    "Flag",
    "Option",
    "Positional",
)

# Remove the internal metaclass from the module namespace to avoid accidental
# exposure in docs, autocompletion, or star-imports. Not part of the public API.
del ArgumentType
