"""One-time execution guard."""

import threading
from typing import Any, Callable


class OnceGuard:
    """
    Run an initialization function exactly once.

    The done flag is only read and written while holding the lock, so a
    caller that loses a first-call race blocks until the winner's function
    has returned and then observes the completed initialization.

    If the function raises, the guard stays unset and the exception
    propagates; the next caller runs the function again.

    Calling ``do`` on the same guard from inside the guarded function
    deadlocks.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._done = False

    @property
    def done(self) -> bool:
        """Whether the guarded function has completed."""
        with self._lock:
            return self._done

    def do(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> bool:
        """
        Execute fn if no previous call has completed it.

        Returns:
            True if this call executed fn, False otherwise
        """
        with self._lock:
            if self._done:
                return False
            fn(*args, **kwargs)
            self._done = True
            return True

    def reset(self) -> None:
        """Return the guard to its initial state. Intended for tests."""
        with self._lock:
            self._done = False
