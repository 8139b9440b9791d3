"""A producer/consumer ring buffer shared between processes through a mapped file."""

from __future__ import annotations

import argparse
import fcntl
import itertools
import mmap
import os
import struct
import tempfile
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence

DEFAULT_NAME = "oslabsim-buffer"
DEFAULT_SIZE = 8
DEFAULT_RATE = 3

# put index, get index, free slots, filled slots
_HEADER = struct.Struct("=iiii")
_PUT, _GET, _FREE, _FULL = range(4)
_POLL_SECONDS = 0.01


def get_ipc_id(proc_file: str | os.PathLike[str], key: int) -> int | None:
    """Look up the id listed for ``key`` in a /proc/sysvipc style table.

    The first line is a header; every other line starts with the key and the id.
    Returns None when the key is not listed.
    """
    with open(proc_file, encoding="utf-8") as table:
        next(table, None)
        for line in table:
            columns = line.split()
            if len(columns) < 2:
                continue
            try:
                if int(columns[0]) != key:
                    continue
                return int(columns[1])
            except ValueError:
                continue
    return None


class SharedRing:
    """A fixed-size circular buffer of bytes that several processes can open by name.

    Free and filled slots are counted like semaphores; producers and consumers
    each serialise among themselves, as with separate producer and consumer mutexes.
    """

    def __init__(
        self, name: str = DEFAULT_NAME, size: int = DEFAULT_SIZE, create: bool = True
    ) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        path = Path(name)
        if not path.is_absolute():
            path = Path(tempfile.gettempdir()) / path
        self.path = path
        self.size = size
        self._lock_paths = {
            role: path.with_name(f"{path.name}.{role}.lock") for role in ("state", "put", "get")
        }
        flags = os.O_RDWR | (os.O_CREAT if create else 0)
        self._fd = os.open(path, flags, 0o644)
        self._closed = False
        length = _HEADER.size + size
        try:
            with self._locked("state"):
                current = os.fstat(self._fd).st_size
                fresh = current == 0
                if fresh:
                    os.ftruncate(self._fd, length)
                elif current < length:
                    raise ValueError(
                        f"existing buffer holds {current - _HEADER.size} slots, fewer than {size}"
                    )
                self._map = mmap.mmap(self._fd, length)
                if fresh:
                    self._map[:] = bytes(length)
                    _HEADER.pack_into(self._map, 0, 0, 0, size, 0)
        except BaseException:
            os.close(self._fd)
            self._closed = True
            raise

    def __enter__(self) -> SharedRing:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @contextmanager
    def _locked(self, role: str) -> Iterator[None]:
        fd = os.open(self._lock_paths[role], os.O_RDWR | os.O_CREAT, 0o644)
        try:
            fcntl.flock(fd, fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(fd, fcntl.LOCK_UN)
        finally:
            os.close(fd)

    def _read_header(self) -> list[int]:
        return list(_HEADER.unpack_from(self._map, 0))

    def _write_header(self, values: Sequence[int]) -> None:
        _HEADER.pack_into(self._map, 0, *values)

    def _down(self, field: int) -> None:
        while True:
            with self._locked("state"):
                values = self._read_header()
                if values[field] > 0:
                    values[field] -= 1
                    self._write_header(values)
                    return
            time.sleep(_POLL_SECONDS)

    def _up(self, field: int) -> None:
        with self._locked("state"):
            values = self._read_header()
            values[field] += 1
            self._write_header(values)

    def _advance(self, field: int) -> int:
        with self._locked("state"):
            values = self._read_header()
            index = values[field]
            values[field] = (index + 1) % self.size
            self._write_header(values)
            return index

    def _index(self, field: int) -> int:
        with self._locked("state"):
            return self._read_header()[field]

    def put(self, rate: float = 0) -> tuple[int, str]:
        """Wait for a free slot, fill it with a letter and return (slot, letter)."""
        self._down(_FREE)
        with self._locked("put"):
            index = self._index(_PUT)
            value = (ord("A") + index) & 0xFF
            self._map[_HEADER.size + index] = value
            if rate > 0:
                time.sleep(rate)
            self._advance(_PUT)
        self._up(_FULL)
        return index, chr(value)

    def get(self, rate: float = 0) -> tuple[int, str]:
        """Wait for a filled slot, take its letter and return (slot, letter)."""
        self._down(_FULL)
        with self._locked("get"):
            index = self._index(_GET)
            value = self._map[_HEADER.size + index]
            if rate > 0:
                time.sleep(rate)
            self._advance(_GET)
        self._up(_FREE)
        return index, chr(value)

    def close(self) -> None:
        """Detach from the buffer; the buffer itself stays for other users."""
        if self._closed:
            return
        self._closed = True
        self._map.close()
        os.close(self._fd)


def _parse_args(role: str, argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=f"Shared buffer {role}.")
    parser.add_argument("rate", nargs="?", type=float, default=DEFAULT_RATE,
                        help="seconds spent on each item")
    parser.add_argument("--count", type=int, default=None, help="stop after this many items")
    parser.add_argument("--name", default=DEFAULT_NAME)
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    return parser.parse_args(argv)


def _items(count: int | None) -> Iterator[int]:
    return itertools.count() if count is None else iter(range(count))


def producer_main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args("producer", argv)
    with SharedRing(args.name, args.size, True) as ring:
        for _ in _items(args.count):
            index, letter = ring.put(args.rate)
            print(f"{os.getpid()} producer put: {letter} to Buffer[{index}]", flush=True)
    return 0


def consumer_main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args("consumer", argv)
    with SharedRing(args.name, args.size, True) as ring:
        for _ in _items(args.count):
            index, letter = ring.get(args.rate)
            print(f"{os.getpid()} consumer get: {letter} from Buffer[{index}]", flush=True)
    return 0