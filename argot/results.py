"""
Argot result container.

A ResultSet is the filled-in shape of one schema: one bool per flag, one
optional string per option and one string per positional, each stored at the
index the schema assigned to its spec. It is created blank by Schema.blank(),
filled in place by the parser, and handed back to the caller on success.

Values are plain Python strings copied out of the argument vector, so a
ResultSet stays valid no matter what the host does with its argv afterwards.
"""
import logging

from .schema import FlagHandle, OptionHandle, PositionalHandle

logger = logging.getLogger(__name__)


class ResultSet:
    """
    Parsed values of one schema, read through schema-bound handles.

    Properties
    - schema: the Schema this result was built for.
    - flags: tuple[bool, ...] (default False).
    - options: tuple[str | None, ...] (default: each option's configured default).
    - positionals: tuple[str, ...] (slots stay None only in a partial result).
    """

    def __init__(self, schema, /):
        self._schema = schema
        self._flags = [False] * len(schema.flags)
        self._options = [option.default for option in schema.options]
        self._positionals = [None] * len(schema.positionals)

    @property
    def schema(self):
        return self._schema

    @property
    def flags(self):
        return tuple(self._flags)

    @property
    def options(self):
        return tuple(self._options)

    @property
    def positionals(self):
        return tuple(self._positionals)

    def _check(self, handle, expected, /):
        if not isinstance(handle, expected):
            raise TypeError(f"expected a {expected.__name__}, got {type(handle).__name__}")
        if handle.schema is not self._schema:
            raise TypeError(f"{handle!r} belongs to another schema")
        return handle.index

    def flag(self, handle, /):
        """
        Return whether the flag behind 'handle' was given.
        """
        return self._flags[self._check(handle, FlagHandle)]

    def option(self, handle, /):
        """
        Return the value of the option behind 'handle', or its default.
        """
        return self._options[self._check(handle, OptionHandle)]

    def positional(self, handle, /):
        """
        Return the value of the positional behind 'handle' (given or defaulted).
        """
        return self._positionals[self._check(handle, PositionalHandle)]

    def as_dict(self):
        """
        Snapshot of every value keyed by spec name, grouped by category.
        """
        return {
            "flags": {spec.name: value for spec, value in zip(self._schema.flags, self._flags)},
            "options": {spec.name: value for spec, value in zip(self._schema.options, self._options)},
            "positionals": {spec.name: value for spec, value in zip(self._schema.positionals, self._positionals)},
        }

    def log(self, logger=logger):
        """
        Write every value with its name at DEBUG level.
        """
        logger.debug("Argument result set:")
        for section, values in self.as_dict().items():
            logger.debug("%s:", section.title())
            for name, value in values.items():
                logger.debug("  - %s: %s", name, value)

    def __eq__(self, other):
        if not isinstance(other, ResultSet):
            return NotImplemented
        return (
            self._schema is other._schema and
            self._flags == other._flags and
            self._options == other._options and
            self._positionals == other._positionals
        )

    __hash__ = None

    def __repr__(self):
        return f"result-set({', '.join('%s=%r' % pair for pair in self.__rich_repr__())})"

    def __rich_repr__(self):
        yield from self.as_dict().items()


__all__ = (
    "ResultSet",
)
