"""
Argot schema compiler: turn declarative specs into a stable, indexed definition.

What this module provides
- Schema: the compiled definition of one program's flags, options and positionals.
  • Dense zero-based indices per category, assigned once in declaration order.
  • Reverse lookups long-name → index and shortcut → index, per category.
  • Construction-time rejection of duplicate names, ambiguous shortcuts and
    required positionals following optional ones.
  • Factory for the zero-valued ResultSet matching its shape.
- FlagHandle / OptionHandle / PositionalHandle: opaque, schema-bound identifiers.
  They are only obtainable through Schema.flag()/option()/positional(), which
  fail immediately on names the schema does not declare, so a result accessor
  never has to.
- compile(...): functional spelling of Schema(...).

Quick start
    >>> from argot import Schema, Flag, Option, Positional
    >>> schema = Schema(
    ...     [Flag("verbose", "v")],
    ...     [Option("output", "o", default="out.txt")],
    ...     [Positional("source"), Positional("target", default="-")],
    ... )
    >>> verbose = schema.flag("verbose")
    >>> result = schema.parse(["prog", "-v", "in.txt"])
    >>> result.flag(verbose)
    True
"""
import logging

from .arguments import Flag, Option, Positional
from .faults import DuplicateNameError, AmbiguousShortcutError, PositionalOrderError, UnknownNameError
from .utils import *

logger = logging.getLogger(__name__)


class Handle:
    """
    Opaque identifier of one slot of one schema.

    Handles cannot be instantiated directly; ask the schema for them. Two
    handles are equal when they point at the same slot of the same schema.
    """
    __slots__ = ("_schema", "_index", "_name")

    def __init__(self, *unused, **unused_):
        raise TypeError(f"{type(self).__name__} cannot be instantiated directly, use the schema accessors")

    @classmethod
    def _bind(cls, schema, index, name):
        self = object.__new__(cls)
        object.__setattr__(self, "_schema", schema)
        object.__setattr__(self, "_index", index)
        object.__setattr__(self, "_name", name)
        return self

    def __setattr__(self, name, value, /):
        raise AttributeError(f"{type(self).__name__} is read-only")

    @property
    def schema(self):
        return self._schema

    @property
    def index(self):
        return self._index

    @property
    def name(self):
        return self._name

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._schema is other._schema and self._index == other._index

    def __hash__(self):
        return hash((type(self), id(self._schema), self._index))

    def __repr__(self):
        return f"{type(self).__name__}({self._name!r}, index={self._index})"


class FlagHandle(Handle):
    __slots__ = ()


class OptionHandle(Handle):
    __slots__ = ()


class PositionalHandle(Handle):
    __slots__ = ()


def _index_names(kind, specs, /):
    names = {}
    for index, spec in enumerate(specs):
        if spec.name in names:
            raise DuplicateNameError(f"{kind} name {spec.name!r} is declared more than once")
        names[spec.name] = index
    return names


def _index_shortcuts(kind, specs, taken, /):
    shortcuts = {}
    for index, spec in enumerate(specs):
        if spec.shortcut is None:
            continue
        if spec.shortcut in shortcuts:
            raise AmbiguousShortcutError(f"{kind} shortcut '-{spec.shortcut}' is declared more than once")
        if spec.shortcut in taken:
            raise AmbiguousShortcutError(f"{kind} shortcut '-{spec.shortcut}' is already used by a flag")
        shortcuts[spec.shortcut] = index
    return shortcuts


def _check_types(kind, specs, expected, /):
    specs = tuple(specs)
    for spec in specs:
        if not isinstance(spec, expected):
            raise TypeError(f"schema {kind} must be {expected.__name__} instances, got {type(spec).__name__}")
    return specs


class Schema:
    """
    Compiled, indexed definition of all flags, options and positionals of one program.

    Parameters
    - flags: Iterable[Flag]
    - options: Iterable[Option]
    - positionals: Iterable[Positional]
      Required positionals must come before defaulted ones.
    - add_help: bool (keyword-only, default True)
      Prepend a synthetic Flag("help", "h") at flag index 0. Seeing it while
      parsing stops the scan and reports HelpRequested.
    - descr: Unset | str (keyword-only)
      Program description shown in the help message.

    Raises
    - TypeError: when a category holds specs of the wrong type.
    - DuplicateNameError: two specs of one category share a name.
    - AmbiguousShortcutError: a shortcut is reused within a category or shared
      by a flag and an option.
    - PositionalOrderError: a required positional follows an optional one.

    Notes
    - Index assignment happens exactly once here; compiling identical specs
      twice yields identical indices.
    - The schema is immutable after construction; categories are exposed as
      tuples.
    """

    __introspectable__ = (
        "flags",
        "options",
        "positionals",
        "add_help",
        "descr",
    )

    def __init__(self, flags=(), options=(), positionals=(), /, *, add_help=True, descr=Unset):
        flags = _check_types("flags", flags, Flag)
        options = _check_types("options", options, Option)
        positionals = _check_types("positionals", positionals, Positional)

        if add_help:
            flags = (Flag("help", "h", descr="Prints this message."),) + flags

        if not isinstance(descr, str | Unset):
            raise TypeError("schema 'descr' must be a string")
        elif isinstance(descr, str) and not (descr := descr.strip()):
            raise ValueError("schema 'descr' cannot be empty")

        optional = None
        for positional in positionals:
            if positional.default is not None:
                optional = optional or positional
            elif optional is not None:
                raise PositionalOrderError(
                    f"required positional {positional.name!r} cannot follow optional positional {optional.name!r}"
                )

        self._flags = flags
        self._options = options
        self._positionals = positionals
        self._add_help = bool(add_help)
        self._descr = coalesce(descr)

        self._flag_names = _index_names("flag", flags)
        self._option_names = _index_names("option", options)
        self._positional_names = _index_names("positional", positionals)

        self._flag_shortcuts = _index_shortcuts("flag", flags, {})
        self._option_shortcuts = _index_shortcuts("option", options, self._flag_shortcuts)

        logger.debug(
            "compiled schema with %d flags, %d options, %d positionals",
            len(flags), len(options), len(positionals)
        )

    flags = mirror("flags")
    options = mirror("options")
    positionals = mirror("positionals")
    add_help = mirror("add_help")
    descr = mirror("descr")

    def flag(self, name, /):
        """
        Return the handle of the flag called 'name'.

        Raises UnknownNameError when the schema has no such flag.
        """
        try:
            return FlagHandle._bind(self, self._flag_names[name], name)
        except KeyError:
            raise UnknownNameError(f"schema has no flag named {name!r}") from None

    def option(self, name, /):
        """
        Return the handle of the option called 'name'.

        Raises UnknownNameError when the schema has no such option.
        """
        try:
            return OptionHandle._bind(self, self._option_names[name], name)
        except KeyError:
            raise UnknownNameError(f"schema has no option named {name!r}") from None

    def positional(self, name, /):
        """
        Return the handle of the positional called 'name'.

        Raises UnknownNameError when the schema has no such positional.
        """
        try:
            return PositionalHandle._bind(self, self._positional_names[name], name)
        except KeyError:
            raise UnknownNameError(f"schema has no positional named {name!r}") from None

    def resolve_flag(self, *, long=Unset, short=Unset):
        """
        Map a long name or a shortcut character to a flag index, or None.
        """
        if long is not Unset:
            return self._flag_names.get(long)
        return self._flag_shortcuts.get(short)

    def resolve_option(self, *, long=Unset, short=Unset):
        """
        Map a long name or a shortcut character to an option index, or None.
        """
        if long is not Unset:
            return self._option_names.get(long)
        return self._option_shortcuts.get(short)

    def is_help(self, index, /):
        """
        Whether the flag at 'index' is the synthetic help flag.
        """
        return self._add_help and index == 0

    def blank(self):
        """
        Build the zero-valued ResultSet for this schema: flags False, options at
        their defaults, positionals unfilled.
        """
        from .results import ResultSet
        return ResultSet(self)

    def parse(self, argv, /):
        """
        Parse 'argv' (program name first) against this schema.

        Shortcut for argot.parser.parse(self, argv).
        """
        from .parser import parse
        return parse(self, argv)

    def __repr__(self):
        return f"schema({', '.join('%s=%r' % pair for pair in self.__rich_repr__())})"

    def __rich_repr__(self):
        for name in self.__introspectable__:
            yield name, getattr(self, name)


def compile(flags=(), options=(), positionals=(), /, *, add_help=True, descr=Unset):
    """
    Compile specs into a Schema (functional spelling of Schema(...)).
    """
    return Schema(flags, options, positionals, add_help=add_help, descr=descr)


__all__ = (
    "Schema",
    "FlagHandle",
    "OptionHandle",
    "PositionalHandle",
)
