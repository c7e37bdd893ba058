# src/quadono/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then dispatches the sub-command.
Immediate commands (add/list/done/del) return right away; pom/alarm block in the
runtime host until the process is asked to stop.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    args = sys.argv[1:] if argv is None else argv
    logger.debug("Starting %s args=%r", settings.app_name, args)

    state = create_initial_state(settings=settings)
    return registry.handle(state, args)


if __name__ == "__main__":
    sys.exit(main())
