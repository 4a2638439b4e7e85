"""
Arguments module behavioral tests (construction, validation, representation).

Scope
- Validate public specs (Flag, Option, Positional): construction and normalization.
- Validate metadata constraints (names, shortcuts, defaults, descr).
- Validate read-only exposure and stable representations.

Conventions
- Test method names follow CamelCase per project convention.
- Never pass explicit None where the API expects an omitted argument.
"""
import unittest
from unittest import TestCase

from argot import Flag, Option, Positional


class TestFlag(TestCase):
    """Behavioral tests for Flag (presence-only) specifications."""

    def testFlagNameOnly(self):
        f = Flag("verbose")
        self.assertEqual(f.name, "verbose")
        self.assertIsNone(f.shortcut)
        self.assertIsNone(f.descr)

    def testFlagNameTrimmed(self):
        self.assertEqual(Flag("  verbose ").name, "verbose")

    def testFlagNameAllowsUnderscoresAndHyphens(self):
        self.assertEqual(Flag("test_long").name, "test_long")
        self.assertEqual(Flag("no-color").name, "no-color")

    def testFlagNameMustBeString(self):
        with self.assertRaises(TypeError):
            Flag(3)

    def testFlagNameEmptyRejected(self):
        with self.assertRaises(ValueError):
            Flag("   ")

    def testFlagNameWithDashesRejected(self):
        with self.assertRaises(ValueError):
            Flag("--verbose")

    def testFlagNameLeadingDigitRejected(self):
        with self.assertRaises(ValueError):
            Flag("1st")

    def testFlagShortcutSingleCharacter(self):
        self.assertEqual(Flag("verbose", "v").shortcut, "v")

    def testFlagShortcutTooLongRejected(self):
        with self.assertRaises(ValueError):
            Flag("verbose", "vv")

    def testFlagShortcutDashRejected(self):
        with self.assertRaises(ValueError):
            Flag("verbose", "-")

    def testFlagShortcutWhitespaceRejected(self):
        with self.assertRaises(ValueError):
            Flag("verbose", " ")

    def testFlagShortcutMustBeString(self):
        with self.assertRaises(TypeError):
            Flag("verbose", 1)

    def testFlagDescrTrimmed(self):
        self.assertEqual(Flag("verbose", descr="  Chatty output. ").descr, "Chatty output.")

    def testFlagDescrEmptyRejected(self):
        with self.assertRaises(ValueError):
            Flag("verbose", descr="  ")

    def testFlagDescrExplicitNoneRejected(self):
        with self.assertRaises(TypeError):
            Flag("verbose", descr=None)

    def testFlagAttributesAreReadOnly(self):
        f = Flag("verbose")
        with self.assertRaises(AttributeError):
            f.name = "quiet"

    def testFlagRepr(self):
        self.assertEqual(
            repr(Flag("verbose", "v", descr="Chatty output.")),
            "flag(name='verbose', shortcut='v', descr='Chatty output.')"
        )

    def testSpecKindIsItsClass(self):
        # the schema tells specs apart with isinstance, there are no per-kind hooks
        for spec in (Flag("verbose"), Option("output"), Positional("source")):
            for hook in ("__flag__", "__option__", "__positional__"):
                self.assertFalse(hasattr(spec, hook))


class TestOption(TestCase):
    """Behavioral tests for Option (named, value-bearing) specifications."""

    def testOptionDefaultsToAbsent(self):
        o = Option("output")
        self.assertIsNone(o.default)
        self.assertIsNone(o.shortcut)

    def testOptionDefaultString(self):
        self.assertEqual(Option("output", "o", default="out.txt").default, "out.txt")

    def testOptionDefaultMustBeString(self):
        with self.assertRaises(TypeError):
            Option("jobs", default=4)

    def testOptionMetavarIsUpperName(self):
        self.assertEqual(Option("test_optional").metavar, "TEST_OPTIONAL")

    def testOptionShortcutValidation(self):
        with self.assertRaises(ValueError):
            Option("output", "")

    def testOptionRepr(self):
        self.assertEqual(
            repr(Option("output", "o", default="out.txt")),
            "option(name='output', shortcut='o', default='out.txt', descr=None)"
        )

    def testOptionRichRepr(self):
        pairs = dict(Option("output", "o").__rich_repr__())
        self.assertEqual(pairs, {"name": "output", "shortcut": "o", "default": None, "descr": None})


class TestPositional(TestCase):
    """Behavioral tests for Positional specifications."""

    def testPositionalRequiredWithoutDefault(self):
        p = Positional("source")
        self.assertTrue(p.required)
        self.assertIsNone(p.default)

    def testPositionalOptionalWithDefault(self):
        p = Positional("target", "123")
        self.assertFalse(p.required)
        self.assertEqual(p.default, "123")

    def testPositionalDefaultMustBeString(self):
        with self.assertRaises(TypeError):
            Positional("count", 123)

    def testPositionalNameValidation(self):
        with self.assertRaises(ValueError):
            Positional("two words")

    def testPositionalRepr(self):
        self.assertEqual(repr(Positional("source")), "positional(name='source', default=None, descr=None)")


if __name__ == "__main__":
    unittest.main()
