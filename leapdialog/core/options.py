"""Response options that a user may give by clicking a dialog button."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Dict, Optional


class Option(Enum):
    YES = 'YES'
    NO = 'NO'
    MAYBE = 'MAYBE'
    OK = 'OK'
    SKIP = 'SKIP'
    CANCEL = 'CANCEL'

    @property
    def label(self) -> str:
        """Text shown on this option's button (the override, else the name)."""
        return LABELS.get(self)

    def set_label(self, text: Optional[str]) -> None:
        """Override the button text for every later dialog; ``None`` resets it."""
        LABELS.set(self, text)

    def __str__(self) -> str:
        return self.label


class OptionLabels:
    """Process-wide, thread-safe store of option label overrides.

    Written from caller threads and read from the UI thread while buttons
    are built, so every access goes through one lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._labels: Dict[Option, str] = {}

    def get(self, option: Option) -> str:
        with self._lock:
            return self._labels.get(option, option.name)

    def set(self, option: Option, text: Optional[str]) -> None:
        with self._lock:
            if text is None:
                self._labels.pop(option, None)
            else:
                self._labels[option] = str(text)

    def reset(self) -> None:
        with self._lock:
            self._labels.clear()

    def snapshot(self) -> Dict[Option, str]:
        with self._lock:
            return dict(self._labels)


LABELS = OptionLabels()
