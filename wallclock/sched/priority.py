"""Best-effort scheduling hints for worker threads."""

from __future__ import annotations

import logging
import os
import threading

logger = logging.getLogger(__name__)


def apply_priority_hint(niceness: int) -> bool:
    """Raise the calling thread's nice value by ``niceness``.

    Linux applies ``setpriority`` to a single thread when given its native
    id. Lowering priority needs no privileges, so the display thread is
    favored by making the updater nicer. Returns False when the hint could
    not be applied; the caller carries on either way.
    """
    if niceness == 0:
        return True
    if not hasattr(os, "setpriority"):
        logger.debug("priority hint unsupported on this platform")
        return False
    tid = threading.get_native_id()
    try:
        current = os.getpriority(os.PRIO_PROCESS, tid)
        os.setpriority(os.PRIO_PROCESS, tid, current + niceness)
    except OSError as e:
        logger.debug("priority hint refused for thread %s: %s", tid, e)
        return False
    logger.debug("thread %s niceness %+d", tid, niceness)
    return True
