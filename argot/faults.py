"""
Argot faults (parse errors, schema errors) and rendering.

Scope
- ErrorKind: the two outcome kinds every parse failure belongs to
  (InvalidArgument, MissingArgument). Callers that only care about the coarse
  contract branch on this.
- FaultCode: canonical, stable numeric identifiers for all user-facing parse
  failures, grouped by domain so logs and searches stay predictable.
- ParseError and its subclasses: carry message + options and know how to render
  themselves in a friendly, lowercased, and actionable way.
- SchemaError and its subclasses: construction-time rejections of a schema
  (duplicates, ambiguous shortcuts, misordered positionals). These are
  programming errors and are never rendered for end users.
- trigger(): central entry point to surface a parse fault (respecting shell/deferred/fancy/colorful).

UX goals
- Position-first messages: every message includes the ordinal position of the
  offending token (“at third position”).
- Soft but technical language: short titles, one-sentence bodies, a single clear hint.
"""
import sys
from collections import defaultdict
from enum import Enum, IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class ErrorKind(Enum):
    """
    coarse failure kinds of a parse call.

    - INVALID_ARGUMENT: malformed or unrecognized token, or an extra positional.
    - MISSING_ARGUMENT: a required value was never supplied (positional or option value).
    """
    INVALID_ARGUMENT = "invalid-argument"
    MISSING_ARGUMENT = "missing-argument"


class FaultCode(IntEnum):
    """
    canonical fault codes used across the parser (stable identifiers).

    grouping
    - switches (flags/options) (1111x)
      • MALFORMED_TOKEN, UNKNOWN_SWITCH, OPTION_VALUE_REQUIRED
    - positionals (1112x)
      • UNEXPECTED_POSITIONAL, MISSING_POSITIONAL
    """
    # --- switch errors (1111x) ---
    MALFORMED_TOKEN             = 11111
    UNKNOWN_SWITCH              = 11112
    OPTION_VALUE_REQUIRED       = 11117

    # --- positional errors (1112x) ---
    UNEXPECTED_POSITIONAL       = 11121
    MISSING_POSITIONAL          = 11125

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ParseError(Exception):
    """
    base type for every failure of a parse call.

    attributes
    - message: one-sentence, position-first description.
    - kind: ErrorKind, fixed per subclass.
    - options: read-only mapping of rendering and context options
      (title, code, hint, token, index, partial, prog, shell, fancy, colorful, ...).
    """
    kind = Unset

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    @property
    def partial(self):
        """
        the result set as it stood when the failure was detected (not rolled back).
        """
        return self.options.get("partial")

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = text(getattr(main, "__prog__", self.options.get("prog", "argot")), styler("prog-name"))
        code = self.options.get("code")

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(code.normalize() if code else self.kind.value, styler("code")),
            " | ",
            text(self.options.get("title", "error").title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))
        hint = Text.assemble(text(" → ", styler("hint-arrow")), text(self.options.get("hint"), styler("hint")))

        if fancy:
            return Panel(Group(message, hint), title=header, title_align="left")

        return Group(header, message, hint)

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        if self.options.get("deferred", False):
            return
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class InvalidArgumentError(ParseError):
    kind = ErrorKind.INVALID_ARGUMENT


class MissingArgumentError(ParseError):
    kind = ErrorKind.MISSING_ARGUMENT


class MalformedTokenError(InvalidArgumentError): ...
class UnknownSwitchError(InvalidArgumentError): ...
class UnexpectedPositionalError(InvalidArgumentError): ...
class MissingOptionValueError(MissingArgumentError): ...
class MissingPositionalError(MissingArgumentError): ...


class SchemaError(ValueError):
    """
    a schema definition was rejected at compile time.
    """


class DuplicateNameError(SchemaError): ...
class AmbiguousShortcutError(SchemaError): ...
class PositionalOrderError(SchemaError): ...


class UnknownNameError(LookupError):
    """
    a handle was requested for a name the schema does not declare.
    """


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ParseError).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via the rich console; otherwise the fault is raised.

    typical options
    - prog, shell, fancy, colorful, deferred, title, code, hint and any other
      context the reporter may want to show (token/index/partial).
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


__all__ = (
    "ErrorKind",
    "FaultCode",
    "ParseError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "MalformedTokenError",
    "UnknownSwitchError",
    "UnexpectedPositionalError",
    "MissingOptionValueError",
    "MissingPositionalError",
    "SchemaError",
    "DuplicateNameError",
    "AmbiguousShortcutError",
    "PositionalOrderError",
    "UnknownNameError",
    "trigger",
)
