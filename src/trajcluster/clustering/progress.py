"""Progress notification with cooperative cancellation."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any


class Signal(str, Enum):
    """Answer of a progress callback."""

    CONTINUE = "continue"
    CANCEL = "cancel"


ProgressCallback = Callable[[], Any]


def should_cancel(progress: ProgressCallback | None) -> bool:
    """Invoke ``progress`` at a checkpoint and report whether to stop.

    Only ``Signal.CANCEL`` (or the string "cancel") stops the computation, so callbacks
    that merely report progress and return None keep it running.
    """
    if progress is None:
        return False
    return progress() == Signal.CANCEL
