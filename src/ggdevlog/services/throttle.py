"""Login attempt throttling."""

import threading
import time
from collections import deque
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

LOGIN_MAX_ATTEMPTS = 5
LOGIN_WINDOW_SECONDS = 15 * 60


@dataclass
class _KeyWindow:
    lock: threading.Lock = field(default_factory=threading.Lock)
    hits: deque[float] = field(default_factory=deque)
    # Set once the window has been dropped from the registry.
    retired: bool = False


@dataclass
class LoginThrottle:
    """Rolling-window attempt counter keyed by client identity.

    Each key has its own lock, so attempts from different clients never
    wait on each other. The registry lock is only held to look up or
    create a key's window and, at most once per window length, to drop
    keys whose attempts have all expired.
    """

    max_attempts: int = LOGIN_MAX_ATTEMPTS
    window_seconds: float = LOGIN_WINDOW_SECONDS
    clock: Callable[[], float] = time.monotonic
    _windows: dict[str, _KeyWindow] = field(default_factory=dict, init=False)
    _registry_lock: threading.Lock = field(default_factory=threading.Lock, init=False)
    _last_sweep: float | None = field(default=None, init=False)

    def attempt(self, client_key: str) -> bool:
        """Record an attempt and return whether it is allowed."""
        self._sweep_if_due()
        with self._locked_window(client_key) as window:
            now = self.clock()
            self._prune(window, now)
            if len(window.hits) >= self.max_attempts:
                return False
            window.hits.append(now)
            return True

    def retry_after(self, client_key: str) -> int:
        """Seconds until the key may attempt again, zero when allowed now."""
        with self._locked_window(client_key) as window:
            now = self.clock()
            self._prune(window, now)
            if len(window.hits) < self.max_attempts:
                return 0
            return max(1, int(self.window_seconds - (now - window.hits[0])))

    @contextmanager
    def _locked_window(self, client_key: str) -> Iterator[_KeyWindow]:
        while True:
            window = self._window(client_key)
            with window.lock:
                if window.retired:
                    continue
                yield window
                return

    def _window(self, client_key: str) -> _KeyWindow:
        with self._registry_lock:
            window = self._windows.get(client_key)
            if window is None:
                window = _KeyWindow()
                self._windows[client_key] = window
            return window

    def _sweep_if_due(self) -> None:
        now = self.clock()
        with self._registry_lock:
            if self._last_sweep is None:
                self._last_sweep = now
                return
            if now - self._last_sweep < self.window_seconds:
                return
            self._last_sweep = now
            for client_key, window in list(self._windows.items()):
                # A busy window is in use right now; leave it for the next sweep.
                if not window.lock.acquire(blocking=False):
                    continue
                try:
                    self._prune(window, now)
                    if not window.hits:
                        window.retired = True
                        del self._windows[client_key]
                finally:
                    window.lock.release()

    def _prune(self, window: _KeyWindow, now: float) -> None:
        while window.hits and now - window.hits[0] >= self.window_seconds:
            window.hits.popleft()
