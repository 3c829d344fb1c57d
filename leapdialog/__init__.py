"""
leapdialog: blocking modal dialogs for beginner programs.

Wrap the program with ``leapdialog.run(main)``; inside it, ``show_message``,
``get_input`` and ``choose`` pop up a dialog and wait for the user's answer.
"""

__version__ = "1.0.0"

from leapdialog.base_classes import DialogArgumentError, DialogCancelled, DialogError, DialogHostError
from leapdialog.core.bridge import (
    DialogBridge,
    choose,
    choose_or_raise,
    get_default_bridge,
    get_input,
    get_input_or_raise,
    show_message,
    show_message_or_raise,
)
from leapdialog.core.cancellation import CancellationToken
from leapdialog.core.options import LABELS, Option
from leapdialog.tui.app import DialogApp, run
