import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from leapdialog.core.cancellation import CancellationToken


def test_cancel_runs_hooks_once_and_records_reason():
    token = CancellationToken()
    calls = []
    token.register_cleanup(lambda: calls.append('a'))
    token.register_cleanup(lambda: calls.append('b'))

    assert token.cancel('stop') is True
    assert token.cancel('again') is False
    assert calls == ['a', 'b']
    assert token.is_cancelled()
    assert token.reason() == 'stop'
    assert token.wait(0) is True


def test_default_reason():
    token = CancellationToken()
    token.cancel()
    assert token.reason() == 'cancelled'


def test_hook_registered_after_cancel_runs_immediately():
    token = CancellationToken()
    token.cancel('done')
    calls = []
    token.register_cleanup(lambda: calls.append(token.reason()))
    assert calls == ['done']


def test_unregistered_hook_does_not_run():
    token = CancellationToken()
    calls = []

    def hook():
        calls.append('ran')

    token.register_cleanup(hook)
    token.unregister_cleanup(hook)
    token.unregister_cleanup(hook)  # unknown hooks are ignored
    token.cancel()
    assert calls == []


def test_hook_may_touch_the_token_while_it_runs():
    token = CancellationToken()
    seen = []

    def hook():
        token.unregister_cleanup(hook)
        seen.append(token.is_cancelled())

    token.register_cleanup(hook)
    token.cancel()
    assert seen == [True]
