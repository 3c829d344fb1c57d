from __future__ import annotations

from typing import Callable

from leapdialog.core.session import DialogSession


class DialogHost:
    """Abstract owner of the UI thread.

    invoke_later() may be called from any thread and must not wait for the
    task to run. open_window() is only ever called on the UI thread (the
    bridge schedules it through invoke_later).
    """

    def invoke_later(self, task: Callable[[], None]) -> None:
        raise NotImplementedError

    def open_window(self, session: DialogSession) -> None:
        raise NotImplementedError
