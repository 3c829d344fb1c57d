"""Modal window shown for one blocking dialog call."""

from __future__ import annotations

from typing import Optional

from rich.text import Text

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static

from leapdialog.core.options import Option
from leapdialog.core.session import DialogMode, DialogSession


class DialogModal(ModalScreen[None]):
    """Prompt on top, an optional input line, and one button per option below.

    Button presses are forwarded to the session, which closes this screen
    (via the hook attached in ``__init__``) and hands the result to the
    waiting caller.
    """

    DEFAULT_CSS = """
    DialogModal {
        align: center middle;
    }
    #dialog_modal {
        width: auto;
        min-width: 50;
        max-width: 90%;
        height: auto;
        padding: 1 2;
        border: round $accent;
        background: $surface;
    }
    #dialog_prompt {
        width: 100%;
        margin-bottom: 1;
    }
    #dialog_input {
        width: 100%;
        min-width: 40;
    }
    #dialog_hint {
        width: 100%;
    }
    #dialog_buttons {
        width: 100%;
        height: auto;
        align-horizontal: center;
        margin-top: 1;
    }
    #dialog_buttons Button {
        margin: 0 1;
    }
    """

    def __init__(self, session: DialogSession, logger=None) -> None:
        super().__init__(id=f"dialog-{session.session_id}")
        self.session = session
        self._logger = logger
        self._close_pending = False
        self.input: Optional[Input] = None
        session.attach(self._close)

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog_modal"):
            yield Static(Text(self.session.prompt), id="dialog_prompt")
            if self.session.mode is DialogMode.INPUT:
                self.input = Input(value="", id="dialog_input")
                yield self.input
                yield Static(Text("Press Enter or click OK to submit", style="dim"), id="dialog_hint")
            with Horizontal(id="dialog_buttons"):
                # Positional ids: the same option may be offered twice.
                # Labels are plain text, never markup.
                for index, option in enumerate(self.session.options):
                    yield Button(Text(option.label), id=f"option-{index}")

    def on_mount(self) -> None:
        if self.input is not None:
            self.set_focus(self.input)
        else:
            self.set_focus(self.query_one("#option-0", Button))
        if self._logger is not None:
            self._logger.dialog_detail('dialog_built', {
                'session': self.session.session_id,
                'mode': self.session.mode.value,
                'labels': [o.label for o in self.session.options],
            }, component='tui.dialog')

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        index = _option_index(event.button.id)
        if index is None or index >= len(self.session.options):
            return
        self._respond(self.session.options[index])

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._respond(Option.OK)

    def on_screen_resume(self, event: events.ScreenResume) -> None:
        # A close requested while another dialog was on top
        if self._close_pending:
            self._close_pending = False
            self.dismiss(None)

    def _respond(self, option: Option) -> None:
        text = self.input.value if self.input is not None else None
        if not self.session.click(option, text) and self._logger is not None:
            self._logger.dialog_detail('dialog_duplicate_click', {
                'session': self.session.session_id,
                'option': option.name,
            }, component='tui.dialog')

    def _close(self) -> None:
        if self.is_current:
            self.dismiss(None)
        else:
            self._close_pending = True


def _option_index(button_id: Optional[str]) -> Optional[int]:
    if not button_id or not button_id.startswith("option-"):
        return None
    try:
        return int(button_id[len("option-"):])
    except ValueError:
        return None
