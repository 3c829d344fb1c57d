"""
Textual front-end for leapdialog.

The Textual event loop is the UI thread: every dialog is a ModalScreen pushed
from a message handler, and the user's program runs in a thread worker.
"""
