"""Disk arm scheduling simulation: FCFS, SSTF, SCAN, C-SCAN and LOOK."""

from __future__ import annotations

import argparse
import random
import struct
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

TRACK_LIMIT = 200


def _as_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _hops(cylinders: Iterable[int]) -> str:
    return "".join(f"-> {cylinder} " for cylinder in cylinders)


def random_requests(count: int, rng: random.Random | None = None) -> list[int]:
    """Return ``count`` random cylinder requests in 0..199."""
    if count < 1:
        raise ValueError("request count must be at least 1")
    rng = rng if rng is not None else random.Random()
    return [rng.randrange(TRACK_LIMIT) for _ in range(count)]


@dataclass(frozen=True)
class ScheduleResult:
    """Outcome of one scheduling algorithm over a request list."""

    name: str
    start: int
    order: tuple[int, ...]
    seek_number: int
    direction_changes: int
    trace: str

    @property
    def request_count(self) -> int:
        return len(self.order)

    @property
    def average(self) -> float:
        return _as_float32(self.seek_number / self.request_count)

    def report(self) -> str:
        """Return the seek total, direction changes and average seek length."""
        return "\n".join(
            [
                f"Seek Number: {self.seek_number}",
                f"Chang Direction: {self.direction_changes}",
                f"AVG:{self.average:g}",
            ]
        )

    def format(self) -> str:
        """Return the heading, the head movement trace and the report."""
        return "\n".join(["", self.name, self.trace, self.report()])


class DiskArm:
    """Schedules a fixed list of cylinder requests from a starting head position."""

    def __init__(
        self,
        current_cylinder: int,
        seek_direction: int,
        requests: Sequence[int],
    ) -> None:
        if seek_direction not in (0, 1):
            raise ValueError("seek direction must be 0 (down) or 1 (up)")
        requests = list(requests)
        if not requests:
            raise ValueError("at least one request is needed")
        self.current_cylinder = current_cylinder
        self.seek_direction = int(seek_direction)
        self.requests = requests

    def _split(self) -> tuple[list[int], list[int], list[int]]:
        cylinders = sorted(self.requests)
        point = sum(1 for cylinder in cylinders if cylinder <= self.current_cylinder)
        return cylinders, cylinders[:point], cylinders[point:]

    def fcfs(self) -> ScheduleResult:
        """Serve requests in arrival order."""
        current = self.current_cylinder
        direction = self.seek_direction
        pieces = [str(current)]
        seek = changes = 0
        for cylinder in self.requests:
            if (cylinder >= current and not direction) or (cylinder < current and direction):
                changes += 1
                direction = 1 - direction
                pieces.append(f"\n{current} -> {cylinder}")
            else:
                pieces.append(f" -> {cylinder}")
            seek += abs(current - cylinder)
            current = cylinder
        return ScheduleResult(
            "FCFS", self.current_cylinder, tuple(self.requests), seek, changes, "".join(pieces)
        )

    def sstf(self) -> ScheduleResult:
        """Always serve the pending request nearest to the head."""
        current = self.current_cylinder
        direction = self.seek_direction
        pending = list(self.requests)
        pieces = [str(current)]
        order: list[int] = []
        seek = changes = 0
        while pending:
            nearest = min(pending, key=lambda cylinder: abs(current - cylinder))
            pending.remove(nearest)
            if (nearest >= current and not direction) or (
                nearest < self.current_cylinder and direction
            ):
                changes += 1
                direction = 1 - direction
                pieces.append(f"\n{current} -> {nearest}")
            else:
                pieces.append(f" -> {nearest}")
            seek += abs(current - nearest)
            current = nearest
            order.append(nearest)
        return ScheduleResult(
            "SSTF", self.current_cylinder, tuple(order), seek, changes, "".join(pieces)
        )

    def scan(self) -> ScheduleResult:
        """Sweep to the disk edge in the current direction, then reverse."""
        current = self.current_cylinder
        cylinders, below, above = self._split()
        down = below[::-1]
        if self.seek_direction == 0:
            trace = f"{current} " + _hops(down) + "->0" + "\n" + _hops(above)
            seek = abs(current) + abs(cylinders[-1])
            order = down + above
        else:
            trace = f"{current} " + _hops(above) + f"-> {TRACK_LIMIT}" + "\n" + _hops(down)
            seek = abs(TRACK_LIMIT - current) + abs(TRACK_LIMIT - cylinders[0])
            order = above + down
        return ScheduleResult("SCAN", current, tuple(order), seek, 1, trace)

    def cscan(self) -> ScheduleResult:
        """Sweep to one edge, jump to the other edge and sweep on in the same direction."""
        current = self.current_cylinder
        cylinders, below, above = self._split()
        point = len(below)
        count = len(cylinders)
        if self.seek_direction == 0:
            trace = (
                f"{current} " + _hops(below[::-1]) + "-> 0"
                + f"\n-> {TRACK_LIMIT}\n" + _hops(above[::-1])
            )
            if point + 1 < count:
                tail = abs(TRACK_LIMIT - cylinders[point + 1])
            elif point < count:
                tail = abs(TRACK_LIMIT - cylinders[point])
            else:
                tail = 0
            seek = abs(current) + TRACK_LIMIT + tail
            order = below[::-1] + above[::-1]
        else:
            trace = (
                f"{current} " + _hops(above) + f"-> {TRACK_LIMIT}"
                + "\n-> 0\n" + _hops(below)
            )
            tail = abs(cylinders[point - 1]) if point else 0
            seek = abs(TRACK_LIMIT - current) + TRACK_LIMIT + tail
            order = above + below
        return ScheduleResult("CSCAN", current, tuple(order), seek, 2, trace)

    def look(self) -> ScheduleResult:
        """Sweep to the last request in the current direction, then reverse."""
        current = self.current_cylinder
        cylinders, below, above = self._split()
        down = below[::-1]
        span = abs(cylinders[-1] - cylinders[0])
        if self.seek_direction == 0:
            trace = f"{current} " + _hops(down) + "\n" + _hops(above)
            seek = abs(current - cylinders[0]) + span
            order = down + above
        else:
            trace = f"{current} " + _hops(above) + "\n" + _hops(down)
            seek = abs(cylinders[-1] - current) + span
            order = above + down
        return ScheduleResult("LOOK", current, tuple(order), seek, 1, trace)

    def run_all(self) -> list[ScheduleResult]:
        """Run every algorithm in the usual order."""
        return [self.fcfs(), self.sstf(), self.scan(), self.cscan(), self.look()]


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate disk arm scheduling algorithms.")
    parser.add_argument("requests", nargs="*", type=int, help="requested cylinders")
    parser.add_argument("--current", type=int, default=None, help="current cylinder")
    parser.add_argument(
        "--direction", type=int, choices=(0, 1), default=None, help="0 down, 1 up"
    )
    parser.add_argument("--count", type=int, default=None, help="number of random requests")
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def _ask(prompt: str) -> int:
    return int(input(prompt).strip())


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    try:
        current = args.current if args.current is not None else _ask(
            "Please input Current cylinder :"
        )
        direction = args.direction if args.direction is not None else _ask(
            "Please input Current Direction (0/1) :"
        )
        if args.requests:
            requests = list(args.requests)
            label = "Request cylinder string: "
        else:
            count = args.count if args.count is not None else _ask(
                "Please input Request Numbers :"
            )
            requests = random_requests(count, rng)
            label = "Random Request cylinder string: "
        arm = DiskArm(current, direction, requests)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(label + "".join(f"{cylinder} " for cylinder in requests))
    for result in arm.run_all():
        print(result.format())
    return 0