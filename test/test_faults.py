"""
Faults module behavioral tests (hierarchy, codes, rendering, triggering).

Scope
- Validate the error hierarchy and the kind each parse failure reports.
- Validate fault codes and host-side normalization through __main__.__codes__.
- Validate rich rendering (plain and fancy) and trigger() in its three modes.

Conventions
- Test method names follow CamelCase per project convention.
- Rendering is captured with a colorless rich Console writing to a StringIO.
"""
import io
import sys
import unittest
from contextlib import redirect_stderr
from unittest import TestCase, mock

from rich.console import Console

from argot import (
    ErrorKind,
    FaultCode,
    ParseError,
    InvalidArgumentError,
    MissingArgumentError,
    MalformedTokenError,
    UnknownSwitchError,
    UnexpectedPositionalError,
    MissingOptionValueError,
    MissingPositionalError,
    trigger,
)


def render(renderable):
    console = Console(file=io.StringIO(), width=120, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


def fault(**options):
    return UnknownSwitchError(
        "unknown flag or option '--nope' at first position",
        title="unknown flag or option",
        code=FaultCode.UNKNOWN_SWITCH,
        token="--nope",
        hint="check the spelling",
        prog="tool",
        **options
    )


class TestHierarchy(TestCase):
    """Behavioral tests for error kinds and class relations."""

    def testInvalidArgumentFamily(self):
        for cls in (MalformedTokenError, UnknownSwitchError, UnexpectedPositionalError):
            self.assertTrue(issubclass(cls, InvalidArgumentError))
            self.assertIs(cls.kind, ErrorKind.INVALID_ARGUMENT)

    def testMissingArgumentFamily(self):
        for cls in (MissingOptionValueError, MissingPositionalError):
            self.assertTrue(issubclass(cls, MissingArgumentError))
            self.assertIs(cls.kind, ErrorKind.MISSING_ARGUMENT)

    def testEverythingIsAParseError(self):
        self.assertTrue(issubclass(InvalidArgumentError, ParseError))
        self.assertTrue(issubclass(MissingArgumentError, ParseError))
        self.assertTrue(issubclass(ParseError, Exception))

    def testMessageAndOptions(self):
        error = fault()
        self.assertEqual(str(error), "unknown flag or option '--nope' at first position")
        self.assertEqual(error.message, str(error))
        self.assertIs(error.code, FaultCode.UNKNOWN_SWITCH)
        self.assertIsNone(error.partial)
        with self.assertRaises(TypeError):
            error.options["token"] = "--other"

    def testReplaceMergesOptions(self):
        error = fault()
        replaced = error.__replace__(shell=True, prog="other")
        self.assertIsInstance(replaced, UnknownSwitchError)
        self.assertIsNot(replaced, error)
        self.assertEqual(replaced.options["prog"], "other")
        self.assertEqual(replaced.options["token"], "--nope")
        self.assertEqual(error.options["prog"], "tool")


class TestFaultCodes(TestCase):
    """Behavioral tests for stable fault codes."""

    def testCodesAreUnique(self):
        self.assertEqual(len({code.value for code in FaultCode}), len(FaultCode))

    def testNormalizeDefaultsToNumber(self):
        self.assertEqual(FaultCode.MISSING_POSITIONAL.normalize(), "11125")

    def testNormalizeUsesHostMapping(self):
        codes = {FaultCode.MISSING_POSITIONAL: "E-POS"}
        with mock.patch.object(sys.modules["__main__"], "__codes__", codes, create=True):
            self.assertEqual(FaultCode.MISSING_POSITIONAL.normalize(), "E-POS")
            self.assertEqual(FaultCode.UNKNOWN_SWITCH.normalize(), "11112")


class TestRendering(TestCase):
    """Behavioral tests for rich rendering of faults."""

    def testPlainRendering(self):
        output = render(fault(colorful=False))
        self.assertIn("[ tool", output)
        self.assertIn("11112", output)
        self.assertIn("Unknown Flag Or Option", output)
        self.assertIn("'--nope' at first position", output)
        self.assertIn("check the spelling", output)

    def testFancyRendering(self):
        output = render(fault(colorful=False, fancy=True))
        self.assertIn("╭", output)
        self.assertIn("Unknown Flag Or Option", output)
        self.assertIn("check the spelling", output)

    def testKindShownWithoutCode(self):
        error = MissingPositionalError("missing positional argument 'source'", colorful=False)
        self.assertIn("missing-argument", render(error))


class TestTrigger(TestCase):
    """Behavioral tests for trigger()."""

    def testRaisesOutsideShell(self):
        with self.assertRaises(UnknownSwitchError) as context:
            trigger(fault(), shell=False)
        self.assertFalse(context.exception.options["shell"])

    def testShellRendersAndExits(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr), self.assertRaises(SystemExit) as context:
            trigger(fault(), shell=True, colorful=False)
        self.assertEqual(context.exception.code, 1)
        self.assertIn("Unknown Flag Or Option", stderr.getvalue())

    def testDeferredShellReturns(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            self.assertIsNone(trigger(fault(), shell=True, deferred=True, colorful=False))
        self.assertIn("check the spelling", stderr.getvalue())

    def testRejectsObjectsWithoutHooks(self):
        with self.assertRaises(TypeError):
            trigger(ValueError("nope"))


if __name__ == "__main__":
    unittest.main()
