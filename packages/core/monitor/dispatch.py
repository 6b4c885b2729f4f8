from __future__ import annotations

import logging
from typing import Any, Callable, Optional

log = logging.getLogger(__name__)


def safe_call(cb: Optional[Callable[..., Any]], *args: Any) -> None:
    """Invoke a collaborator callback; its failures are logged, never propagated."""
    if cb is None:
        return
    try:
        cb(*args)
    except Exception:
        log.exception("Collaborator callback %r failed", cb)
