"""
Argot logging setup.

Every module logs under the "argot" namespace through logging.getLogger(__name__).
The package itself installs only a NullHandler, so nothing is printed unless the
host configures logging or calls configure() to route the records through rich.
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("argot")


def configure(level="DEBUG", /, *, console=None):
    """
    Attach a rich handler to the "argot" logger and set its level.

    Calling it again replaces the handler installed by the previous call
    instead of stacking a second one.
    """
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=console or Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


__all__ = (
    "configure",
)
