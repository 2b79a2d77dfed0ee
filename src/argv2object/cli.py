"""``argv2object`` command: print parsed arguments as JSON.

Also reachable as ``python -m argv2object``.  Mode and casing come from
the environment (see :mod:`argv2object.config`), so every argument on the
command line is treated as input.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Sequence
from typing import IO

from .argv import argv2object
from .config import CliConfig
from .errors import ConfigError, EmptyArgumentsError, FormatMismatchError


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_EMPTY = 1
EXIT_FORMAT = 2
EXIT_CONFIG = 3


def main(
    argv: Sequence[str] | None = None,
    environ: dict[str, str] | None = None,
    out: IO[str] | None = None,
) -> int:
    """Run the command and return its exit code."""
    dest = sys.stdout if out is None else out
    if argv is None:
        argv = sys.argv

    try:
        config = CliConfig.from_env(environ)
    except ConfigError as exc:
        print(f"argv2object: {exc}", file=sys.stderr)
        return EXIT_CONFIG

    logging.basicConfig(level=config.logging_level)

    try:
        result = argv2object(config.unixmode, config.casing, argv=argv)
    except EmptyArgumentsError as exc:
        logger.debug("no input tokens")
        print(f"argv2object: {exc}", file=sys.stderr)
        return EXIT_EMPTY
    except FormatMismatchError as exc:
        logger.debug("rejected token %r", exc.token)
        print(f"argv2object: {exc}: {exc.token!r}", file=sys.stderr)
        return EXIT_FORMAT

    print(json.dumps(result, indent=2), file=dest)
    return EXIT_OK
