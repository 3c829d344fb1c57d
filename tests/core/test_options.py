from __future__ import annotations

import os
import sys
import threading

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from leapdialog.core.options import LABELS, Option, OptionLabels


@pytest.fixture(autouse=True)
def _reset_labels():
    LABELS.reset()
    yield
    LABELS.reset()


def test_labels_default_to_option_names():
    assert [o.name for o in Option] == ['YES', 'NO', 'MAYBE', 'OK', 'SKIP', 'CANCEL']
    for opt in Option:
        assert opt.label == opt.name
        assert str(opt) == opt.name


def test_label_tracks_most_recent_override_and_none_resets():
    Option.NO.set_label('Definitely not!!!')
    assert Option.NO.label == 'Definitely not!!!'
    Option.NO.set_label('nah')
    assert str(Option.NO) == 'nah'
    Option.NO.set_label(None)
    assert Option.NO.label == 'NO'


def test_override_is_shared_not_per_option_value():
    Option.MAYBE.set_label('perhaps')
    # The registry is the single source every reader sees
    assert LABELS.get(Option.MAYBE) == 'perhaps'
    assert LABELS.snapshot() == {Option.MAYBE: 'perhaps'}
    assert Option.YES.label == 'YES'


def test_empty_string_is_a_real_override():
    Option.SKIP.set_label('')
    assert Option.SKIP.label == ''


def test_reset_clears_every_override():
    Option.YES.set_label('Sure')
    Option.CANCEL.set_label('Never mind')
    LABELS.reset()
    assert Option.YES.label == 'YES'
    assert Option.CANCEL.label == 'CANCEL'
    assert LABELS.snapshot() == {}


def test_concurrent_writers_leave_a_consistent_label():
    labels = OptionLabels()
    written = [f'label-{i}' for i in range(8)]
    start = threading.Barrier(len(written))

    def writer(text):
        start.wait()
        for _ in range(200):
            labels.set(Option.OK, text)
            assert labels.get(Option.OK) in written

    threads = [threading.Thread(target=writer, args=(t,)) for t in written]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)
    assert labels.get(Option.OK) in written
