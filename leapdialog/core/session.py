from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Tuple

from leapdialog.core.handoff import Handoff
from leapdialog.core.options import Option

_session_ids = itertools.count(1)


class DialogMode(Enum):
    MESSAGE = 'message'
    INPUT = 'input'
    CHOICE = 'choice'


@dataclass(frozen=True)
class DialogResult:
    option: Option
    text: Optional[str] = None


@dataclass
class DialogSession:
    """State of one blocking dialog call.

    Created on the caller thread. Everything past construction (the close
    hook, ``click``, ``close``) runs on the UI thread; the only thing the
    two sides share is the handoff.
    """

    prompt: str
    mode: DialogMode
    options: Tuple[Option, ...] = (Option.OK,)
    handoff: Handoff[DialogResult] = field(default_factory=Handoff)
    input_text: Optional[str] = None
    session_id: int = field(default_factory=lambda: next(_session_ids))

    def __post_init__(self) -> None:
        self._closer: Optional[Callable[[], None]] = None
        self._closed = False
        self._lock = threading.Lock()

    @property
    def closed(self) -> bool:
        return self._closed

    def attach(self, closer: Callable[[], None]) -> None:
        """Register how the window built for this session gets torn down."""
        with self._lock:
            self._closer = closer

    def click(self, option: Option, text: Optional[str] = None) -> bool:
        """Button handler: capture input, close the window, offer the result.

        Returns False when the session already settled, i.e. for a
        duplicate event or a click arriving after the caller gave up.
        """
        if self.handoff.settled:
            return False
        if self.mode is DialogMode.INPUT:
            text = text or ''
            self.input_text = text
        else:
            text = None
        self.close()
        return self.handoff.offer(DialogResult(option, text))

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            closer = self._closer
        if closer is not None:
            closer()
