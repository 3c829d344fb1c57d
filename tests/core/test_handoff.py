from __future__ import annotations

import os
import sys
import threading
import time

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from leapdialog.base_classes import DialogCancelled
from leapdialog.core.handoff import Handoff


def test_first_offer_wins_and_later_offers_are_dropped():
    h = Handoff()
    assert h.offer('first') is True
    assert h.offer('second') is False
    assert h.settled is True
    assert h.take() == 'first'


def test_take_blocks_until_another_thread_offers():
    h = Handoff()
    timer = threading.Timer(0.05, h.offer, args=('late',))
    timer.start()
    started = time.monotonic()
    assert h.take(timeout=2) == 'late'
    assert time.monotonic() - started >= 0.04
    timer.join()


def test_value_can_only_be_taken_once():
    h = Handoff()
    h.offer(1)
    assert h.take() == 1
    with pytest.raises(RuntimeError):
        h.take()


def test_abandon_wakes_the_waiter_with_reason():
    h = Handoff()
    threading.Timer(0.05, h.abandon, args=('user gave up',)).start()
    with pytest.raises(DialogCancelled) as ei:
        h.take(timeout=2)
    assert ei.value.reason == 'user gave up'
    assert h.abandoned is True
    # A click landing after cancellation is discarded
    assert h.offer('too late') is False


def test_abandon_after_offer_is_a_noop():
    h = Handoff()
    h.offer('kept')
    assert h.abandon() is False
    assert h.take() == 'kept'


def test_timeout_abandons_the_slot():
    h = Handoff()
    with pytest.raises(DialogCancelled) as ei:
        h.take(timeout=0.02)
    assert ei.value.reason == 'timeout'
    assert h.offer('after timeout') is False


def test_value_already_present_is_returned_even_with_zero_timeout():
    h = Handoff()
    h.offer('ready')
    assert h.take(timeout=0) == 'ready'
