"""Logger lookup for Toybox modules.

Every Toybox logger lives under the "toybox" namespace, so applications
can turn scanner tracing on or off in one place:

    logging.getLogger("toybox").setLevel(logging.DEBUG)

The lexer reports rule registration, new input, state pushes and pops and
strategy changes at DEBUG. Nothing is logged per token.
"""

from __future__ import annotations

import logging

_ROOT = "toybox"


def get_logger(name: str) -> logging.Logger:
    """Return the standard library logger for `name` inside the toybox namespace.

    Names already under the namespace (such as a Toybox module's __name__)
    are used as given; anything else is nested below it, so a grammar
    module calling get_logger("calc") logs as "toybox.calc".
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
