"""Process demos: duplicated workers, private copies of data, and pipe ping-pong.

Each "process" here is a worker thread that gets its own copy of the data it
was started with; parents wait for their children as with wait().
"""

from __future__ import annotations

import argparse
import os
import struct
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import BinaryIO, Sequence

_INT = struct.Struct("=i")
START_VALUE = 5
VALUE_STEP = 15
FORK_ROUNDS = 2
PING_PONG_LIMIT = 9


def factorial(x: int) -> int:
    """Return x! for x >= 1."""
    if x < 1:
        raise ValueError("x must be at least 1")
    result = 1
    for factor in range(2, x + 1):
        result *= factor
    return result


def fibonacci(y: int) -> int:
    """Return the y-th Fibonacci number, with fibonacci(1) == fibonacci(2) == 1."""
    if y < 1:
        raise ValueError("y must be at least 1")
    previous, current = 0, 1
    for _ in range(y - 1):
        previous, current = current, previous + current
    return current


def compute_fxy(x: int, y: int) -> tuple[int, int, int]:
    """Compute f(x) and f(y) in two workers; return (f(x), f(y), f(x) + f(y))."""
    with ThreadPoolExecutor(max_workers=2) as pool:
        fx_future = pool.submit(factorial, x)
        fy_future = pool.submit(fibonacci, y)
        fx, fy = fx_future.result(), fy_future.result()
    return fx, fy, fx + fy


def _read_int(stream: BinaryIO) -> int:
    data = stream.read(_INT.size)
    if data is None or len(data) < _INT.size:
        raise EOFError("pipe closed before a whole integer arrived")
    return _INT.unpack(data)[0]


def _write_int(stream: BinaryIO, value: int) -> None:
    stream.write(_INT.pack(value))


def ping_pong(limit: int = PING_PONG_LIMIT) -> list[tuple[str, int]]:
    """Pass a counter back and forth over two pipes until it passes ``limit``.

    Returns (role, value) pairs, role being "child" or "parent", in read order.
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")
    to_child_read, to_child_write = os.pipe()
    to_parent_read, to_parent_write = os.pipe()
    events: list[tuple[str, int]] = []

    def child() -> None:
        with os.fdopen(to_child_read, "rb", buffering=0) as reader, os.fdopen(
            to_parent_write, "wb", buffering=0
        ) as writer:
            while True:
                x = _read_int(reader)
                events.append(("child", x))
                x += 1
                _write_int(writer, x)
                if x > limit:
                    break

    worker = threading.Thread(target=child)
    worker.start()
    with os.fdopen(to_child_write, "wb", buffering=0) as writer, os.fdopen(
        to_parent_read, "rb", buffering=0
    ) as reader:
        x = 1
        while True:
            _write_int(writer, x)
            x = _read_int(reader)
            events.append(("parent", x))
            x += 1
            if x > limit:
                break
    worker.join()
    return events


def fork_value_demo() -> list[str]:
    """Each parent starts a child with a copy of the value, waits for it, then stops.

    Children add to their own copy and carry on the loop.
    """
    lines: list[str] = []

    def run(value: int, start: int) -> None:
        for round_number in range(start, FORK_ROUNDS):
            child_value = value + VALUE_STEP

            def child(own: int = child_value, nxt: int = round_number + 1) -> None:
                lines.append(f"Child: value = {own}")
                run(own, nxt)

            worker = threading.Thread(target=child)
            worker.start()
            worker.join()
            lines.append(f"PARNET: value = {value}")
            return

    run(START_VALUE, 0)
    return lines


def _fork_hello(forks: int = 3) -> list[str]:
    lines: list[str] = []
    lock = threading.Lock()

    def process(remaining: int) -> None:
        children = []
        while remaining:
            remaining -= 1
            worker = threading.Thread(target=process, args=(remaining,))
            worker.start()
            children.append(worker)
        with lock:
            lines.append("hello")
        for worker in children:
            worker.join()

    process(forks)
    return lines


def _fork_x() -> list[str]:
    lines: list[str] = []
    x = 1

    def child(own: int = x) -> None:
        own += 1
        lines.append(f"Child has x= {own}")

    worker = threading.Thread(target=child)
    worker.start()
    worker.join()
    x -= 1
    lines.append(f"Parent has x={x}")
    return lines


def _fork_ids() -> list[str]:
    lines: list[str] = []
    child_id: list[int] = []

    def child() -> None:
        ident = threading.get_native_id()
        child_id.append(ident)
        lines.append(f"Child process:My PID is {ident}")

    worker = threading.Thread(target=child)
    worker.start()
    worker.join()
    lines.append(f"Parent process:My PID is {os.getpid()}")
    lines.append(f"Parent process:Child process ID is {child_id[0]}")
    return lines


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Process creation and pipe demos.")
    parser.add_argument(
        "demo",
        choices=("hello", "fork", "pid", "pid-fork", "fork-value", "function", "pipe"),
    )
    parser.add_argument("numbers", nargs="*", type=int, help="x and y for 'function'")
    parser.add_argument("--limit", type=int, default=PING_PONG_LIMIT)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        if args.demo == "hello":
            lines = _fork_hello()
        elif args.demo == "fork":
            lines = _fork_x()
        elif args.demo == "pid":
            lines = [f"My process ID is:{os.getpid()}"]
        elif args.demo == "pid-fork":
            lines = _fork_ids()
        elif args.demo == "fork-value":
            lines = fork_value_demo()
        elif args.demo == "pipe":
            pid = os.getpid()
            lines = [f"{role} {pid} read: {value}" for role, value in ping_pong(args.limit)]
        else:
            numbers = list(args.numbers)
            if len(numbers) < 2:
                print("Input x and y:")
                numbers = [int(token) for token in input().split()[:2]]
            if len(numbers) < 2:
                raise ValueError("two numbers are needed")
            fx, fy, total = compute_fxy(numbers[0], numbers[1])
            lines = [f"f(x) = {fx}", f"f(y) = {fy}", f"f(x, y) = {total}"]
    except ValueError as exc:
        print(f"error: {exc}")
        return 1
    for line in lines:
        print(line)
    return 0