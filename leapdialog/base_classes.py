from __future__ import annotations

from typing import Optional


class DialogError(Exception):
    """Base class for every error raised by leapdialog."""


class DialogArgumentError(DialogError, ValueError):
    """Raised before any UI work when a dialog call gets unusable arguments."""


class DialogCancelled(DialogError):
    def __init__(self, reason: Optional[str] = None):
        self.reason = reason or 'cancelled'
        super().__init__(f'dialog wait abandoned: {self.reason}')


class DialogHostError(DialogError, RuntimeError):
    """No dialog host is running, or the running one no longer accepts work."""
