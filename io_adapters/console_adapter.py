# io_adapters/console_adapter.py

import sys
import threading
from contextlib import contextmanager

from core.config_schema import PrompterConfig
from prompter.prompter import Prompter

_stdio_lock = threading.Lock()
_owner = None  # thread ident currently holding _stdio_lock


def stdio_locked() -> bool:
    return _stdio_lock.locked()


@contextmanager
def console_prompter(config: PrompterConfig | None = None):
    """
    Yields a Prompter bound to the process's stdin/stdout while holding an
    exclusive stdio lock. Another thread entering console_prompter() blocks
    until this one exits; the lock is released on every exit path.

    The lock is not reentrant: nesting console_prompter() in the thread that
    already holds it raises RuntimeError instead of deadlocking.
    """
    global _owner
    if _owner == threading.get_ident():
        raise RuntimeError("console_prompter() is already active in this thread")
    with _stdio_lock:
        _owner = threading.get_ident()
        try:
            yield Prompter(sys.stdin, sys.stdout, config=config)
        finally:
            _owner = None
