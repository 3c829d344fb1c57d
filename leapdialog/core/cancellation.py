from __future__ import annotations

import threading
from typing import Callable, List, Optional


class CancellationToken:
    """Thread-safe cancellation token shared by one or more dialog waits.

    - cancel(reason) marks the token cancelled and runs registered hooks once.
    - register_cleanup(fn) attaches a hook; it runs at once if already cancelled.
    - unregister_cleanup(fn) detaches a hook whose wait has finished.
    """

    def __init__(self) -> None:
        self._ev = threading.Event()
        self._reason: Optional[str] = None
        self._cleanups: List[Callable[[], None]] = []
        self._lock = threading.Lock()

    def cancel(self, reason: Optional[str] = None) -> bool:
        with self._lock:
            if self._ev.is_set():
                return False
            self._reason = reason or 'cancelled'
            self._ev.set()
            hooks = list(self._cleanups)
            self._cleanups.clear()
        # Hooks run outside the lock so they may touch the token again
        for fn in hooks:
            fn()
        return True

    def is_cancelled(self) -> bool:
        return self._ev.is_set()

    def reason(self) -> Optional[str]:
        return self._reason

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._ev.wait(timeout)

    def register_cleanup(self, fn: Callable[[], None]) -> None:
        with self._lock:
            if not self._ev.is_set():
                self._cleanups.append(fn)
                return
        fn()

    def unregister_cleanup(self, fn: Callable[[], None]) -> None:
        with self._lock:
            try:
                self._cleanups.remove(fn)
            except ValueError:
                pass
