"""Tests for login throttling."""

import threading

from ggdevlog.services.throttle import LoginThrottle


class _Clock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_sixth_attempt_in_window_is_rejected() -> None:
    throttle = LoginThrottle(clock=_Clock())

    results = [throttle.attempt("1.2.3.4") for _ in range(6)]

    assert results == [True] * 5 + [False]


def test_attempts_allowed_again_after_window() -> None:
    clock = _Clock()
    throttle = LoginThrottle(clock=clock)
    for _ in range(5):
        throttle.attempt("1.2.3.4")
    assert throttle.attempt("1.2.3.4") is False
    assert throttle.retry_after("1.2.3.4") == 15 * 60

    clock.now += 15 * 60

    assert throttle.retry_after("1.2.3.4") == 0
    assert throttle.attempt("1.2.3.4") is True


def test_window_is_rolling() -> None:
    clock = _Clock()
    throttle = LoginThrottle(clock=clock)
    throttle.attempt("key")
    clock.now += 10 * 60
    for _ in range(4):
        throttle.attempt("key")
    assert throttle.attempt("key") is False

    clock.now += 5 * 60

    assert throttle.attempt("key") is True
    assert throttle.attempt("key") is False


def test_keys_are_independent() -> None:
    throttle = LoginThrottle(clock=_Clock())
    for _ in range(5):
        throttle.attempt("client-a")

    assert throttle.attempt("client-a") is False
    assert throttle.attempt("client-b") is True


def test_concurrent_attempts_do_not_lose_updates() -> None:
    throttle = LoginThrottle(max_attempts=50, clock=_Clock())
    results: list[bool] = []
    results_lock = threading.Lock()

    def worker() -> None:
        for _ in range(10):
            allowed = throttle.attempt("shared")
            with results_lock:
                results.append(allowed)

    threads = [threading.Thread(target=worker) for _ in range(10)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count(True) == 50
    assert results.count(False) == 50


def test_expired_keys_are_forgotten() -> None:
    clock = _Clock()
    throttle = LoginThrottle(clock=clock)
    for index in range(1000):
        throttle.attempt(f"10.0.{index // 256}.{index % 256}")
    assert len(throttle._windows) == 1000

    clock.now += 60 * 60

    assert throttle.attempt("192.168.0.1") is True
    assert list(throttle._windows) == ["192.168.0.1"]


def test_active_keys_survive_cleanup() -> None:
    clock = _Clock()
    throttle = LoginThrottle(clock=clock)
    throttle.attempt("stale")
    clock.now += 10 * 60
    for _ in range(5):
        throttle.attempt("busy")

    clock.now += 5 * 60

    assert throttle.attempt("busy") is False
    assert "stale" not in throttle._windows
