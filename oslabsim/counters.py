"""Shared counter demonstrations: no synchronisation, a mutex and a semaphore."""

from __future__ import annotations

import argparse
import threading
from typing import Callable, Sequence

DEFAULT_ITERATIONS = 1_000_000
DEFAULT_WORKERS = 2


class _Total:
    """A counter shared between worker threads."""

    def __init__(self) -> None:
        self.value = 0


def _check(iterations: int, workers: int) -> None:
    if iterations < 0:
        raise ValueError("iterations must not be negative")
    if workers < 1:
        raise ValueError("workers must be at least 1")


def _run_workers(worker: Callable[[], None], workers: int) -> None:
    threads = [threading.Thread(target=worker) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def count_unsynchronized(
    iterations: int = DEFAULT_ITERATIONS, workers: int = DEFAULT_WORKERS
) -> int:
    """Increment a shared counter from several threads with no protection.

    Increments may be lost, so the result is at most ``iterations * workers``.
    """
    _check(iterations, workers)
    total = _Total()

    def worker() -> None:
        for _ in range(iterations):
            current = total.value
            total.value = current + 1

    _run_workers(worker, workers)
    return total.value


def count_with_lock(
    iterations: int = DEFAULT_ITERATIONS, workers: int = DEFAULT_WORKERS
) -> int:
    """Increment a shared counter from several threads under a mutex."""
    _check(iterations, workers)
    total = _Total()
    lock = threading.Lock()

    def worker() -> None:
        for _ in range(iterations):
            with lock:
                current = total.value
                total.value = current + 1

    _run_workers(worker, workers)
    return total.value


def count_with_semaphore(
    iterations: int = DEFAULT_ITERATIONS, workers: int = DEFAULT_WORKERS
) -> int:
    """Increment a shared counter from several threads guarded by a binary semaphore."""
    _check(iterations, workers)
    total = _Total()
    semaphore = threading.Semaphore(1)

    def worker() -> None:
        for _ in range(iterations):
            semaphore.acquire()
            try:
                current = total.value
                total.value = current + 1
            finally:
                semaphore.release()

    _run_workers(worker, workers)
    return total.value


def thread_hello() -> list[str]:
    """Start one thread that greets, wait for it, and return the lines in order."""
    lines = ["Main thread starts."]

    def greet() -> None:
        lines.append(f"Hello from thread! Thread ID: {threading.get_ident()}")

    thread = threading.Thread(target=greet)
    thread.start()
    thread.join()
    lines.append("Main thread exits.")
    return lines


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Shared counter and thread demos.")
    parser.add_argument(
        "demo", nargs="?", default="mutex", choices=("nosync", "mutex", "sem", "hello")
    )
    parser.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.demo == "hello":
        for line in thread_hello():
            print(line)
        return 0
    counters = {
        "nosync": count_unsynchronized,
        "mutex": count_with_lock,
        "sem": count_with_semaphore,
    }
    try:
        total = counters[args.demo](args.iterations, args.workers)
    except ValueError as exc:
        print(f"error: {exc}")
        return 1
    label = " + ".join(str(args.iterations) for _ in range(args.workers))
    shown = f"{total}" if args.demo == "sem" else f"{total: d}"
    print(f"{label} = {shown}")
    return 0