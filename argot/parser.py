"""
Argot parser: walk an argument vector against a compiled schema.

Outcomes
- ResultSet: every token was understood and every required positional filled.
- HelpRequested: the help flag was seen; parsing stopped right there. The
  instance is falsy and carries the partially filled result as .partial.
- ParseError (raised): InvalidArgumentError or MissingArgumentError subclasses,
  with .kind telling the two apart and .partial holding the result as it stood.

Token grammar
- "--name"        flag, or option whose value is the next token (taken verbatim,
                  even when it starts with "-").
- "-c"            option shortcut (takes the next token) or, failing that, flag shortcut.
- "-abc"          chained flag shortcuts, each character resolved on its own.
- anything else   next positional, in declaration order.
- ""              ignored.
- "-" and "--"    malformed.

Positionals left unfilled after the scan take their default; the first one
without a default is reported missing.
"""
import difflib
import logging
from collections import deque
from collections.abc import Iterable

from .faults import *
from .utils import *

logger = logging.getLogger(__name__)


class HelpRequested:
    """
    Terminal signal: the help flag was given, the caller should show help and stop.

    Falsy, so hosts can write `if not (result := parse(schema, argv)): return`.
    """
    __slots__ = ("partial",)

    def __init__(self, partial, /):
        self.partial = partial

    def __bool__(self):
        return False

    def __repr__(self):
        return "HelpRequested()"


class Parser:
    """
    Single-use, left-to-right scanner over one argument vector.

    state
    - _tokens: deque of the remaining tokens (program name already removed).
    - _index: 1-based position of the token being handled, for messages.
    - _cursor: index of the next positional slot to fill.
    - _result: the ResultSet being filled in place.
    """

    def __init__(self, schema, /):
        self.schema = schema
        self._tokens = deque()
        self._index = 0
        self._cursor = 0
        self._result = schema.blank()
        self._prog = "argot"

    def _hint(self, fallback):
        if self.schema.add_help:
            return "%s; run '%s --help' to see the expected usage" % (fallback, self._prog)
        return fallback

    def _fault(self, cls, message, /, **options):
        return cls(message, partial=self._result, prog=self._prog, index=self._index, **options)

    def _take_value(self, option, input):
        """
        consume the token after an option as its value.
        """
        try:
            value = self._tokens.popleft()
        except IndexError:
            raise self._fault(
                MissingOptionValueError,
                "option %r at %s position requires a value" % (input, ordinal(self._index)),
                title="option value required",
                code=FaultCode.OPTION_VALUE_REQUIRED,
                token=input,
                hint=self._hint("pass a value after it (for example: %s <%s>)" % (input, option.metavar)),
            ) from None
        self._index += 1
        return value

    def _unknown(self, input):
        names = ["--" + spec.name for spec in (*self.schema.flags, *self.schema.options)]
        names += ["-" + spec.shortcut for spec in (*self.schema.flags, *self.schema.options) if spec.shortcut]
        suggestions = difflib.get_close_matches(input, names, 5)
        try:
            hint = "did you mean %r?" % suggestions[0]
        except IndexError:
            hint = "check the spelling"
        return self._fault(
            UnknownSwitchError,
            "unknown flag or option %r at %s position" % (input, ordinal(self._index)),
            title="unknown flag or option",
            code=FaultCode.UNKNOWN_SWITCH,
            token=input,
            suggestions=suggestions,
            hint=self._hint(hint),
        )

    def _malformed(self, token):
        return self._fault(
            MalformedTokenError,
            "bad form of flag or option %r at %s position" % (token, ordinal(self._index)),
            title="malformed flag or option",
            code=FaultCode.MALFORMED_TOKEN,
            token=token,
            hint=self._hint("use '--name' or '-c' forms"),
        )

    def _parse_positional(self, token):
        if self._cursor >= len(self.schema.positionals):
            raise self._fault(
                UnexpectedPositionalError,
                "unexpected positional argument %r at %s position" % (token, ordinal(self._index)),
                title="unexpected positional",
                code=FaultCode.UNEXPECTED_POSITIONAL,
                token=token,
                hint=self._hint("remove this extra value"),
            )
        logger.debug("positional %r <- %r", self.schema.positionals[self._cursor].name, token)
        self._result._positionals[self._cursor] = token
        self._cursor += 1

    def _parse_flag(self, index):
        """
        set a flag; returns False when it is the help flag and the scan must stop.
        """
        if self.schema.is_help(index):
            logger.debug("help requested at %s position", ordinal(self._index))
            return False
        logger.debug("flag %r set", self.schema.flags[index].name)
        self._result._flags[index] = True
        return True

    def _parse_option(self, index, input):
        option = self.schema.options[index]
        value = self._take_value(option, input)
        logger.debug("option %r <- %r", option.name, value)
        self._result._options[index] = value

    def _parse_long(self, token):
        if len(token) < 3:
            raise self._malformed(token)

        name = token[2:]
        if (index := self.schema.resolve_flag(long=name)) is not None:
            return self._parse_flag(index)
        if (index := self.schema.resolve_option(long=name)) is not None:
            self._parse_option(index, token)
            return True
        raise self._unknown(token)

    def _parse_short(self, token):
        chars = token[1:]
        if len(chars) == 1 and (index := self.schema.resolve_option(short=chars)) is not None:
            self._parse_option(index, token)
            return True

        # chained flags: earlier ones stay set when a later one fails or asks for help
        for char in chars:
            if (index := self.schema.resolve_flag(short=char)) is None:
                raise self._unknown("-" + char)
            if not self._parse_flag(index):
                return False
        return True

    def _finalize(self):
        for index in range(self._cursor, len(self.schema.positionals)):
            positional = self.schema.positionals[index]
            if positional.default is None:
                raise self._fault(
                    MissingPositionalError,
                    "missing positional argument %r" % positional.name,
                    title="missing positional",
                    code=FaultCode.MISSING_POSITIONAL,
                    token=positional.name,
                    hint=self._hint("add a value for %r" % positional.name),
                )
            logger.debug("positional %r <- default %r", positional.name, positional.default)
            self._result._positionals[index] = positional.default
        return self._result

    def run(self, argv, /):
        """
        scan 'argv' (program name first) and return a ResultSet or HelpRequested.
        """
        if isinstance(argv, str) or not isinstance(argv, Iterable):
            raise TypeError("parse() argument must be an iterable of strings")
        tokens = tuple(argv)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("parse() argument must be an iterable of strings")

        if tokens:
            self._prog = tokens[0] or self._prog
        self._tokens = deque(tokens[1:])
        self._index = 0

        while self._tokens:
            token = self._tokens.popleft()
            self._index += 1

            if not token:
                continue

            if not token.startswith("-"):
                self._parse_positional(token)
                continue

            if len(token) == 1:
                raise self._malformed(token)

            if token.startswith("--"):
                proceed = self._parse_long(token)
            else:
                proceed = self._parse_short(token)

            if not proceed:
                return HelpRequested(self._result)

        return self._finalize()


def parse(schema, argv, /):
    """
    Parse 'argv' against 'schema'.

    Parameters
    - schema: Schema
    - argv: Iterable[str], the full argument vector; argv[0] is the program name
      and is only used in messages.

    Returns
    - ResultSet on success.
    - HelpRequested (falsy) when the help flag was seen.

    Raises
    - InvalidArgumentError: malformed token, unknown flag/option, extra positional.
    - MissingArgumentError: option without value, required positional absent.
    - TypeError: argv is not an iterable of strings.
    """
    return Parser(schema).run(argv)


__all__ = (
    "HelpRequested",
    "parse",
)
