"""Blocking dialog calls on caller threads, built and answered on the UI thread.

Every entry point follows the same protocol: create a session, hook its
handoff to the cancellation tokens, post the window construction to the UI
thread, then park on the handoff until a button click (or a cancellation)
settles it. The strict ``*_or_raise`` variants raise ``DialogCancelled``;
the plain variants return ``None`` instead.
"""

from __future__ import annotations

import threading
import time
from functools import partial
from typing import Iterable, Optional

from leapdialog.base_classes import DialogArgumentError, DialogCancelled, DialogHostError
from leapdialog.core.cancellation import CancellationToken
from leapdialog.core.host import DialogHost
from leapdialog.core.options import Option
from leapdialog.core.session import DialogMode, DialogResult, DialogSession


class DialogBridge:
    """Runs blocking dialog calls against one DialogHost."""

    def __init__(self, host: DialogHost, *, logger=None, shutdown: Optional[CancellationToken] = None) -> None:
        self._host = host
        self._logger = logger
        self.shutdown = shutdown or CancellationToken()

    # --- strict entry points ---------------------------------------------
    def show_message_or_raise(
        self, text: str, *, cancel: Optional[CancellationToken] = None, timeout: Optional[float] = None
    ) -> None:
        session = DialogSession(str(text), DialogMode.MESSAGE)
        self._run(session, cancel, timeout)

    def get_input_or_raise(
        self, text: str, *, cancel: Optional[CancellationToken] = None, timeout: Optional[float] = None
    ) -> str:
        session = DialogSession(str(text), DialogMode.INPUT)
        return self._run(session, cancel, timeout).text or ''

    def choose_or_raise(
        self,
        text: str,
        *options: Option,
        cancel: Optional[CancellationToken] = None,
        timeout: Optional[float] = None,
    ) -> Option:
        session = DialogSession(str(text), DialogMode.CHOICE, _check_options(options))
        return self._run(session, cancel, timeout).option

    # --- lenient entry points --------------------------------------------
    def show_message(
        self, text: str, *, cancel: Optional[CancellationToken] = None, timeout: Optional[float] = None
    ) -> None:
        try:
            self.show_message_or_raise(text, cancel=cancel, timeout=timeout)
        except DialogCancelled:
            return None

    def get_input(
        self, text: str, *, cancel: Optional[CancellationToken] = None, timeout: Optional[float] = None
    ) -> Optional[str]:
        try:
            return self.get_input_or_raise(text, cancel=cancel, timeout=timeout)
        except DialogCancelled:
            return None

    def choose(
        self,
        text: str,
        *options: Option,
        cancel: Optional[CancellationToken] = None,
        timeout: Optional[float] = None,
    ) -> Optional[Option]:
        try:
            return self.choose_or_raise(text, *options, cancel=cancel, timeout=timeout)
        except DialogCancelled:
            return None

    # --- protocol --------------------------------------------------------
    def _run(self, session: DialogSession, cancel: Optional[CancellationToken], timeout: Optional[float]) -> DialogResult:
        tokens = [t for t in (cancel, self.shutdown) if t is not None]
        hooks = []
        for token in tokens:
            hook = partial(_abandon_from, session, token)
            hooks.append((token, hook))
            token.register_cleanup(hook)

        started = time.monotonic()
        self._log('dialog_open', {
            'session': session.session_id,
            'mode': session.mode.value,
            'options': [o.name for o in session.options],
            'prompt_len': len(session.prompt),
        })
        try:
            if not session.handoff.settled:
                self._host.invoke_later(partial(self._open, session))
            result = session.handoff.take(timeout)
        except DialogCancelled as exc:
            # The window may be up already; take it down on the UI thread
            self._close_quietly(session)
            self._log('dialog_cancelled', {'session': session.session_id, 'reason': exc.reason})
            raise
        finally:
            for token, hook in hooks:
                token.unregister_cleanup(hook)

        self._log('dialog_result', {
            'session': session.session_id,
            'mode': session.mode.value,
            'option': result.option.name,
            'input_len': len(result.text) if result.text is not None else None,
            'duration_ms': int((time.monotonic() - started) * 1000),
        })
        if result.text is not None and self._logger is not None:
            self._logger.dialog_detail('dialog_input', {'session': session.session_id, 'input': result.text})
        return result

    def _open(self, session: DialogSession) -> None:
        # Runs on the UI thread; the caller may have given up while this was queued
        if session.handoff.settled or session.closed:
            return
        self._host.open_window(session)

    def _close_quietly(self, session: DialogSession) -> None:
        try:
            self._host.invoke_later(session.close)
        except DialogHostError:
            # Host is gone, and its windows with it
            pass

    def _log(self, kind: str, details: dict) -> None:
        if self._logger is not None:
            self._logger.dialog_event(kind, details)


def _abandon_from(session: DialogSession, token: CancellationToken) -> None:
    session.handoff.abandon(token.reason())


def _check_options(options: Iterable[Option]) -> tuple:
    options = tuple(options)
    if not options:
        raise DialogArgumentError('There must be at least one option.')
    for opt in options:
        if not isinstance(opt, Option):
            raise DialogArgumentError(f'Not an Option: {opt!r}')
    return options


# --- process-wide default bridge ------------------------------------------

_default_lock = threading.Lock()
_default_bridge: Optional[DialogBridge] = None


def set_default_bridge(bridge: DialogBridge) -> None:
    global _default_bridge
    with _default_lock:
        _default_bridge = bridge


def clear_default_bridge(bridge: Optional[DialogBridge] = None) -> None:
    """Forget the default bridge (only if it is still ``bridge``, when given)."""
    global _default_bridge
    with _default_lock:
        if bridge is None or _default_bridge is bridge:
            _default_bridge = None


def get_default_bridge() -> DialogBridge:
    with _default_lock:
        bridge = _default_bridge
    if bridge is None:
        raise DialogHostError('No dialog host is running; start your program with leapdialog.run(...)')
    return bridge


def show_message(text: str, **kwargs) -> None:
    """Show ``text`` with an OK button and block until it is clicked."""
    return get_default_bridge().show_message(text, **kwargs)


def show_message_or_raise(text: str, **kwargs) -> None:
    return get_default_bridge().show_message_or_raise(text, **kwargs)


def get_input(text: str, **kwargs) -> Optional[str]:
    """Ask for one line of text; returns None if the wait was cancelled."""
    return get_default_bridge().get_input(text, **kwargs)


def get_input_or_raise(text: str, **kwargs) -> str:
    return get_default_bridge().get_input_or_raise(text, **kwargs)


def choose(text: str, *options: Option, **kwargs) -> Optional[Option]:
    """Ask the user to click one of ``options``, shown in the given order.

    Raises DialogArgumentError when no options are given.
    """
    _check_options(options)
    return get_default_bridge().choose(text, *options, **kwargs)


def choose_or_raise(text: str, *options: Option, **kwargs) -> Option:
    _check_options(options)
    return get_default_bridge().choose_or_raise(text, *options, **kwargs)

