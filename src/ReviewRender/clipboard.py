from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Callable, Optional

from .model import CodeBlock

COPY_RESET_SECONDS = 2.0

ClipboardWriter = Callable[[str], Optional[bool]]


class CopyState(Enum):
    IDLE = "idle"
    COPIED = "copied"
    ERROR = "error"


_LABELS = {
    CopyState.IDLE: "Copy",
    CopyState.COPIED: "Copied!",
    CopyState.ERROR: "Error!",
}


class CopyAction:
    """Copy-to-clipboard affordance attached to a rendered code block.

    The clipboard itself is injected as ``write_text``; it may signal failure
    by returning ``False`` or by raising. Either way the action settles on
    ``CopyState.ERROR`` and falls back to idle after ``reset_after`` seconds.
    """

    def __init__(
        self,
        block: CodeBlock,
        write_text: ClipboardWriter,
        reset_after: float = COPY_RESET_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.block = block
        self._write_text = write_text
        self._reset_after = reset_after
        self._clock = clock
        self._state = CopyState.IDLE
        self._changed_at = 0.0

    @property
    def state(self) -> CopyState:
        if self._state is not CopyState.IDLE and self._clock() - self._changed_at >= self._reset_after:
            self._state = CopyState.IDLE
        return self._state

    @property
    def label(self) -> str:
        return _LABELS[self.state]

    def copy(self) -> CopyState:
        try:
            ok = self._write_text(self.block.code)
        except Exception as exc:
            logging.warning("Failed to copy code: %s", exc)
            ok = False
        else:
            if ok is False:
                logging.warning("Failed to copy code: clipboard rejected the write")
        self._state = CopyState.ERROR if ok is False else CopyState.COPIED
        self._changed_at = self._clock()
        return self._state
