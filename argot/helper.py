"""
Argot help rendering.

render_help() turns a Schema into a rich renderable laid out as

    usage: PROG [-h] [--flag] [-o OUTPUT] source [target]

    <description>

    positional arguments:
      source              What to read.
      target              Where to write. (default: '-')

    options:
      -h, --help          Prints this message.
      -o, --output OUTPUT Output file.

and print_help() sends it to a console (stdout unless told otherwise).

Palette keys
- usage-label, program-name, description-section, group-label
- flag-name, option-name, metavar, positional-name, argument-description, default

Customization
- Define a mapping named __styles__ in __main__ to override any palette entry.
- When colorful is False, styling is suppressed entirely.
"""
from collections import defaultdict

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def render_help(schema, prog, /, *, colorful=True, fancy=False):
    """
    Build the help message of 'schema' for program 'prog' as a rich renderable.
    """
    styles = defaultdict(str, {
        # === Head sections ===
        "usage-label": "bold #00E6FF",
        "program-name": "bold #FF4D94",
        "description-section": "italic #A3A3A3",

        # === Groups / arguments ===
        "group-label": "bold #FFFFFF",
        "argument-description": "#9CA3AF",
        "default": "dim #9CA3AF",

        # === Names / metavars ===
        "flag-name": "bold #22C55E",
        "option-name": "bold #00E6FF",
        "positional-name": "bold #FFD600",
        "metavar": "bold #FFD600",

        # === Fancy panel ===
        "panel-title": "bold #FF4D94",
    } | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    def text(fragment, style=""):
        return Text(str(fragment), styler(style))

    def switch(spec, style):
        # "-c, --name" or "--name"
        parts = []
        if spec.shortcut:
            parts.append(text("-" + spec.shortcut, style))
        parts.append(text("--" + spec.name, style))
        return Text(", ").join(parts)

    def describe(spec):
        descr = text(spec.descr or "", "argument-description")
        default = getattr(spec, "default", None)
        if default is not None:
            if spec.descr:
                descr.append(" ")
            descr.append_text(text("(default: %r)" % default, "default"))
        return descr

    renders = []

    # Usage line: flags (short form preferred), options with metavar, positionals.
    usage = Text()
    usage.append("usage", styler("usage-label")).append(": ")
    usage.append_text(text(prog, "program-name"))

    for flag in schema.flags:
        name = "-" + flag.shortcut if flag.shortcut else "--" + flag.name
        usage.append(" ").append_text(Text.assemble("[", text(name, "flag-name"), "]"))

    for option in schema.options:
        name = "-" + option.shortcut if option.shortcut else "--" + option.name
        usage.append(" ").append_text(Text.assemble(
            "[", text(name, "option-name"), " ", text(option.metavar, "metavar"), "]"
        ))

    for positional in schema.positionals:
        if positional.required:
            usage.append(" ").append_text(text(positional.name, "positional-name"))
        else:
            usage.append(" ").append_text(Text.assemble("[", text(positional.name, "positional-name"), "]"))

    renders.append(usage)

    if schema.descr:
        renders.append(Text(""))
        renders.append(text(schema.descr, "description-section"))

    if schema.positionals:
        table = Table.grid(padding=(0, 4))
        table.add_column(no_wrap=True)
        table.add_column()
        for positional in schema.positionals:
            table.add_row(Text("  ").append_text(text(positional.name, "positional-name")), describe(positional))
        renders.extend((Text(""), text("positional arguments:", "group-label"), table))

    if schema.flags or schema.options:
        table = Table.grid(padding=(0, 4))
        table.add_column(no_wrap=True)
        table.add_column()
        for flag in schema.flags:
            table.add_row(Text("  ").append_text(switch(flag, "flag-name")), describe(flag))
        for option in schema.options:
            name = Text("  ").append_text(switch(option, "option-name"))
            name.append(" ").append_text(text(option.metavar, "metavar"))
            table.add_row(name, describe(option))
        renders.extend((Text(""), text("options:", "group-label"), table))

    if fancy:
        return Panel(Group(*renders), title=text(prog, "panel-title"), title_align="left")

    return Group(*renders)


def print_help(schema, prog, /, *, console=None, stderr=False, colorful=True, fancy=False):
    """
    Print the help message of 'schema' to 'console' (a fresh stdout console by default).
    """
    console = console or Console(stderr=stderr)
    console.print(render_help(schema, prog, colorful=colorful, fancy=fancy))


__all__ = (
    "render_help",
    "print_help",
)
