import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from leapdialog.core.options import Option
from leapdialog.core.session import DialogMode, DialogResult, DialogSession


def _session(mode, options=(Option.OK,)):
    s = DialogSession('prompt', mode, tuple(options))
    closes = []
    s.attach(lambda: closes.append(s.session_id))
    return s, closes


def test_sessions_get_distinct_ids():
    a = DialogSession('a', DialogMode.MESSAGE)
    b = DialogSession('b', DialogMode.MESSAGE)
    assert a.session_id != b.session_id
    assert a.options == (Option.OK,)


def test_input_click_captures_text_closes_then_offers():
    s, closes = _session(DialogMode.INPUT)
    assert s.click(Option.OK, 'Ada') is True
    assert s.input_text == 'Ada'
    assert closes == [s.session_id]
    assert s.closed
    assert s.handoff.take() == DialogResult(Option.OK, 'Ada')


def test_untouched_input_yields_empty_string():
    s, _ = _session(DialogMode.INPUT)
    s.click(Option.OK, None)
    assert s.handoff.take().text == ''


def test_choice_click_ignores_text():
    s, _ = _session(DialogMode.CHOICE, (Option.YES, Option.NO))
    s.click(Option.NO, 'stray')
    assert s.handoff.take() == DialogResult(Option.NO, None)
    assert s.input_text is None


def test_duplicate_click_is_dropped_without_second_close():
    s, closes = _session(DialogMode.CHOICE, (Option.YES, Option.NO))
    assert s.click(Option.YES) is True
    assert s.click(Option.NO) is False
    assert closes == [s.session_id]
    assert s.handoff.take().option is Option.YES


def test_click_after_abandon_is_dropped_and_window_left_to_close():
    s, closes = _session(DialogMode.MESSAGE)
    s.handoff.abandon('gone')
    assert s.click(Option.OK) is False
    assert closes == []
    s.close()
    s.close()
    assert closes == [s.session_id]


def test_close_before_attach_marks_closed_only():
    s = DialogSession('p', DialogMode.MESSAGE)
    s.close()
    assert s.closed
