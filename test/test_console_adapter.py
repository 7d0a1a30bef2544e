# test/test_console_adapter.py

import io
import sys
import threading

import pytest

from core.config_schema import PrompterConfig
from io_adapters.console_adapter import console_prompter, stdio_locked


# pytest swaps sys.stdout for its capture stream between setup and the test
# body, so stdio is patched from inside each test rather than in a fixture.
def patch_stdio(monkeypatch):
    fake_in, fake_out = io.StringIO("fine\nstill fine\n"), io.StringIO()
    monkeypatch.setattr(sys, "stdin", fake_in)
    monkeypatch.setattr(sys, "stdout", fake_out)
    return fake_in, fake_out


def test_console_prompter_binds_stdio(monkeypatch):
    fake_in, fake_out = patch_stdio(monkeypatch)
    with console_prompter(PrompterConfig()) as prompter:
        assert prompter.reader is fake_in
        assert prompter.writer is fake_out
        assert prompter.ask("How are you?") == "fine"
        assert prompter.ask("Really?") == "still fine"
    assert fake_out.getvalue() == "How are you? Really? "


def test_lock_is_held_only_inside_the_block(monkeypatch):
    patch_stdio(monkeypatch)
    assert not stdio_locked()
    with console_prompter(PrompterConfig()):
        assert stdio_locked()
    assert not stdio_locked()


def test_lock_is_released_when_the_block_raises(monkeypatch):
    patch_stdio(monkeypatch)
    with pytest.raises(RuntimeError):
        with console_prompter(PrompterConfig()):
            raise RuntimeError("caller gave up")
    assert not stdio_locked()


def test_nesting_in_the_same_thread_raises_instead_of_hanging(monkeypatch):
    patch_stdio(monkeypatch)
    with console_prompter(PrompterConfig()):
        with pytest.raises(RuntimeError, match="already active"):
            with console_prompter(PrompterConfig()):
                pass
        assert stdio_locked()
    assert not stdio_locked()

    # usable again once the outer block has exited
    with console_prompter(PrompterConfig()) as prompter:
        assert prompter.ask("Again?") == "fine"


def test_second_thread_waits_for_the_lock(monkeypatch):
    patch_stdio(monkeypatch)
    entered = threading.Event()

    def other():
        with console_prompter(PrompterConfig()):
            entered.set()

    with console_prompter(PrompterConfig()):
        t = threading.Thread(target=other)
        t.start()
        assert not entered.wait(0.2), "Second console_prompter() should block while the first is active"

    t.join(timeout=5)
    assert entered.is_set()
