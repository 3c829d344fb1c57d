"""Textual application that hosts dialogs for a program running in a worker thread."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Sequence

from rich.text import Text

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.message import Message
from textual.widgets import Footer, Static

from leapdialog.base_classes import DialogHostError
from leapdialog.config_manager import ConfigManager
from leapdialog.core.bridge import DialogBridge, clear_default_bridge, set_default_bridge
from leapdialog.core.cancellation import CancellationToken
from leapdialog.core.host import DialogHost
from leapdialog.core.session import DialogSession
from leapdialog.tui.screens.dialog_modal import DialogModal
from leapdialog.utils.logging_utils import LoggingHandler


class RunDialogTask(Message):
    """Carries a task from any thread onto the app's message loop."""

    def __init__(self, task: Callable[[], None]) -> None:
        super().__init__()
        self.task = task


class DialogApp(App[Any], DialogHost):
    """Runs ``program(*args, **kwargs)`` on a worker thread and shows the dialogs it asks for.

    The program arguments are passed as a sequence and a mapping, so they
    never collide with the app's own ``config`` and ``logger`` keywords.

    The program calls the blocking API (``leapdialog.choose`` and friends),
    which goes through this app's bridge. The app exits with the program's
    return value once it finishes.
    """

    TITLE = "leapdialog"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    CSS = """
    #host_status {
        width: 100%;
        height: 1fr;
        content-align: center middle;
    }
    """

    def __init__(
        self,
        program: Callable[..., Any],
        args: Sequence[Any] = (),
        kwargs: Optional[Mapping[str, Any]] = None,
        *,
        config: Optional[ConfigManager] = None,
        logger: Optional[LoggingHandler] = None,
    ) -> None:
        super().__init__()
        self._program = program
        self._args = tuple(args)
        self._kwargs = dict(kwargs or {})
        self.dialog_config = config or ConfigManager()
        self.dialog_logger = logger or LoggingHandler(self.dialog_config)
        self._dialog_shutdown = CancellationToken()
        self.bridge = DialogBridge(self, logger=self.dialog_logger, shutdown=self._dialog_shutdown)
        self.program_error: Optional[BaseException] = None
        self.program_finished = False

    # ----- layout --------------------------------------------------
    def compose(self) -> ComposeResult:
        name = getattr(self._program, "__name__", "program")
        yield Static(Text(f"Running {name}…", style="dim"), id="host_status")
        yield Footer()

    def on_mount(self) -> None:
        set_default_bridge(self.bridge)
        self.dialog_logger.settings({'log': self.dialog_config.get_section('LOG')})
        self.run_worker(
            self._run_program,
            name="leapdialog-program",
            thread=True,
            exit_on_error=False,
        )

    def on_unmount(self) -> None:
        self.shutdown_dialogs()

    def shutdown_dialogs(self, reason: str = "host shutdown") -> None:
        """Wake any caller still parked on a dialog and stop accepting new ones."""
        self._dialog_shutdown.cancel(reason)
        clear_default_bridge(self.bridge)

    # ----- DialogHost ----------------------------------------------
    def invoke_later(self, task: Callable[[], None]) -> None:
        if not self.post_message(RunDialogTask(task)):
            raise DialogHostError("dialog host is shutting down")

    def open_window(self, session: DialogSession) -> None:
        self.push_screen(DialogModal(session, logger=self.dialog_logger))

    @on(RunDialogTask)
    def _run_dialog_task(self, message: RunDialogTask) -> None:
        message.task()

    # ----- program worker ------------------------------------------
    def _run_program(self) -> None:
        name = getattr(self._program, "__name__", repr(self._program))
        self.dialog_logger.log('program_start', component='tui.app', aspect='dialog', data={'program': name})
        result = None
        try:
            result = self._program(*self._args, **self._kwargs)
        except Exception as exc:
            self.program_error = exc
            self.dialog_logger.error('tui.app', exc)
        self.dialog_logger.log('program_done', component='tui.app', aspect='dialog', data={
            'program': name,
            'ok': self.program_error is None,
        })
        if not self._dialog_shutdown.is_cancelled():
            self.call_from_thread(self.exit, result)
        self.program_finished = True


def run(program: Callable[..., Any], *args: Any, config_file: Optional[str] = None, **kwargs: Any) -> Any:
    """Run ``program(*args, **kwargs)`` with dialogs available; returns its result.

    Must be called from the main thread. Exceptions raised by the program are
    re-raised here once the dialog host has shut down. ``config_file`` is
    consumed here and never passed on; use ``DialogApp(program, args, kwargs)``
    directly when the program itself takes a ``config_file`` keyword.
    """
    app = DialogApp(program, args, kwargs, config=ConfigManager(config_file))
    result = app.run()
    app.shutdown_dialogs()
    if app.program_error is not None:
        raise app.program_error
    return result
