"""Process-argument entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from .keys import Casing
from .parser import parse
from .values import Scalar


logger = logging.getLogger(__name__)


def argv2object(
    unixmode: bool = False,
    casing: Casing | str = Casing.SNAKE,
    argv: Sequence[str] | None = None,
) -> dict[str, Scalar]:
    """Parse the arguments this process was invoked with.

    *argv* is a full argument vector, program name first; it defaults to
    ``sys.argv``, read at call time.

    Usage::

        # python script.py --task=some-task --execute=true
        args = argv2object(unixmode=True)
        args["task"]     # → "some-task"
        args["execute"]  # → True
    """
    if argv is None:
        argv = sys.argv
    tokens = tuple(argv[1:])
    logger.debug("parsing %d argument(s), unixmode=%s", len(tokens), unixmode)
    return parse(tokens, unixmode, casing)
