"""Single-slot rendezvous used to pass one dialog result between threads."""

from __future__ import annotations

import threading
import time
from typing import Generic, Optional, TypeVar

from leapdialog.base_classes import DialogCancelled

T = TypeVar('T')

_PENDING = 'pending'
_FILLED = 'filled'
_ABANDONED = 'abandoned'


class Handoff(Generic[T]):
    """Holds at most one value, placed once by the UI thread and taken once by the caller.

    ``offer`` never blocks and is a no-op once the slot is settled, which is
    what makes duplicate click events harmless. ``abandon`` settles the slot
    without a value so the waiting caller wakes up with ``DialogCancelled``
    and any later offer is discarded.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._state = _PENDING
        self._value: Optional[T] = None
        self._reason: Optional[str] = None
        self._taken = False

    @property
    def settled(self) -> bool:
        with self._cond:
            return self._state != _PENDING

    @property
    def abandoned(self) -> bool:
        with self._cond:
            return self._state == _ABANDONED

    def offer(self, value: T) -> bool:
        with self._cond:
            if self._state != _PENDING:
                return False
            self._value = value
            self._state = _FILLED
            self._cond.notify_all()
            return True

    def abandon(self, reason: Optional[str] = None) -> bool:
        with self._cond:
            if self._state != _PENDING:
                return False
            self._reason = reason or 'cancelled'
            self._state = _ABANDONED
            self._cond.notify_all()
            return True

    def take(self, timeout: Optional[float] = None) -> T:
        """Block until a value arrives; raise DialogCancelled if the slot is abandoned.

        When ``timeout`` lapses first the slot is abandoned with reason
        ``"timeout"``, so a click arriving afterwards is dropped.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._cond:
            if self._taken:
                raise RuntimeError('handoff value already taken')
            while self._state == _PENDING:
                if deadline is None:
                    self._cond.wait()
                    continue
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    self._reason = 'timeout'
                    self._state = _ABANDONED
                    break
                self._cond.wait(remaining)
            self._taken = True
            if self._state == _ABANDONED:
                raise DialogCancelled(self._reason)
            return self._value
