"""Dispatch loop following the chain of actions returned by ``run``."""

from __future__ import annotations

import logging
from typing import Optional

from .interface import Action


logger = logging.getLogger(__name__)


def run_chain(root: Action) -> int:
    """Run ``root`` and every action it leads to; return how many actions ran.

    The first error propagates; there is no retry.
    """
    steps = 0
    action: Optional[Action] = root
    while action is not None:
        logger.debug("Running action %s", action.describe())
        action = action.run()
        steps += 1
    logger.debug("Action chain finished after %d step(s)", steps)
    return steps
