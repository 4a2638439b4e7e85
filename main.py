from rich.pretty import pprint

from argot import *
from argot.logs import configure

schema = Schema(
    [
        Flag("test_long", descr="Test Long."),
        Flag("a_test_short", "a", descr="Test Short."),
        Flag("b_test_short", "b", descr="Test Short."),
    ],
    [
        Option("test_optional", descr="Test Optional."),
        Option("test_short_optional", "o", default="def", descr="Test Short Optional."),
    ],
    [
        Positional("test_positional", descr="Test Positional."),
        Positional("test_positional_optional", "123", descr="Test Positional Optional."),
    ],
    descr="Hello World",
)


if __name__ == '__main__':
    configure()
    if result := invoke(schema):
        result.log()
        pprint(result)
