"""Page replacement simulation: FIFO, LRU, CLOCK, enhanced CLOCK, LFU and MFU."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field
from typing import Sequence

DEFAULT_PAGE_COUNT = 12
DEFAULT_MAX_PAGE = 5
DEFAULT_FRAME_COUNT = 4

BANNER = "=== Page Replacement Algorithm Simulator (Auto Mode) ==="


@dataclass(frozen=True)
class Step:
    """State of the frames after one page reference."""

    number: int
    page: int
    fault: bool
    frames: tuple[int | None, ...]
    marks: tuple[str, ...]
    evicted: int | None = None

    def render(self, numbered: bool = False) -> str:
        parts = [f"Step {self.number}: "] if numbered else []
        parts.extend(
            f"{page}{mark} "
            for page, mark in zip(self.frames, self.marks)
            if page is not None
        )
        if self.fault and self.evicted is not None:
            parts.append(f"-> {self.evicted}" if numbered else f"->{self.evicted}")
        return "".join(parts)


@dataclass
class ReplacementResult:
    """Outcome of running one replacement algorithm over a reference string."""

    name: str
    frame_count: int
    steps: list[Step] = field(default_factory=list)
    numbered: bool = False
    notes: tuple[str, ...] = ()

    @property
    def faults(self) -> int:
        return sum(step.fault for step in self.steps)

    @property
    def evictions(self) -> list[int]:
        return [step.evicted for step in self.steps if step.evicted is not None]

    @property
    def fault_rate(self) -> float:
        return 100.0 * self.faults / len(self.steps)

    def report(self) -> str:
        """Return the summary line with the fault count and rate."""
        return f"-> Page faults: {self.faults} ({self.fault_rate:.1f}%)"

    def format(self) -> str:
        """Return the full trace: heading, notes, one line per step and the report."""
        lines = ["", f"===== {self.name} ====="]
        lines.extend(self.notes)
        lines.extend(step.render(self.numbered) for step in self.steps)
        lines.append(self.report())
        return "\n".join(lines)


class Replace:
    """Runs page replacement algorithms over one reference string."""

    def __init__(
        self,
        reference: Sequence[int] | None = None,
        frame_count: int = DEFAULT_FRAME_COUNT,
        rng: random.Random | None = None,
    ) -> None:
        if frame_count < 1:
            raise ValueError("frame_count must be at least 1")
        self.frame_count = frame_count
        self.rng = rng if rng is not None else random.Random()
        if reference is None:
            self.generate_random_ref(DEFAULT_PAGE_COUNT, DEFAULT_MAX_PAGE)
        else:
            self.reference = list(reference)
        if not self.reference:
            raise ValueError("reference string must not be empty")

    def generate_random_ref(self, length: int, max_page: int) -> list[int]:
        """Replace the reference string with random pages in 1..max_page."""
        if length < 1:
            raise ValueError("length must be at least 1")
        if max_page < 1:
            raise ValueError("max_page must be at least 1")
        self.reference = [self.rng.randint(1, max_page) for _ in range(length)]
        return list(self.reference)

    def _result(self, name: str, **kwargs) -> ReplacementResult:
        return ReplacementResult(name=name, frame_count=self.frame_count, **kwargs)

    def fifo(self) -> ReplacementResult:
        result = self._result("FIFO")
        frames: list[int | None] = [None] * self.frame_count
        pointer = 0
        plain = ("",) * self.frame_count
        for number, page in enumerate(self.reference, start=1):
            fault = page not in frames
            evicted = None
            if fault:
                evicted = frames[pointer]
                frames[pointer] = page
                pointer = (pointer + 1) % self.frame_count
            result.steps.append(Step(number, page, fault, tuple(frames), plain, evicted))
        return result

    def lru(self) -> ReplacementResult:
        result = self._result("LRU")
        frames: list[int | None] = [None] * self.frame_count
        last_used = [-1] * self.frame_count
        plain = ("",) * self.frame_count
        for k, page in enumerate(self.reference):
            fault = page not in frames
            evicted = None
            if fault:
                slot = min(range(self.frame_count), key=last_used.__getitem__)
                evicted = frames[slot]
                frames[slot] = page
            else:
                slot = frames.index(page)
            last_used[slot] = k
            result.steps.append(Step(k + 1, page, fault, tuple(frames), plain, evicted))
        return result

    def clock(self) -> ReplacementResult:
        result = self._result("CLOCK")
        frames: list[int | None] = [None] * self.frame_count
        used = [False] * self.frame_count
        pointer = 0
        for number, page in enumerate(self.reference, start=1):
            fault = page not in frames
            evicted = None
            if fault:
                while used[pointer]:
                    used[pointer] = False
                    pointer = (pointer + 1) % self.frame_count
                evicted = frames[pointer]
                frames[pointer] = page
                used[pointer] = True
                pointer = (pointer + 1) % self.frame_count
            else:
                used[frames.index(page)] = True
            marks = tuple(f"({int(u)})" for u in used)
            result.steps.append(Step(number, page, fault, tuple(frames), marks, evicted))
        return result

    def eclock(self) -> ReplacementResult:
        result = self._result("ECLOCK")
        frames: list[int | None] = [None] * self.frame_count
        used = [False] * self.frame_count
        modified = [False] * self.frame_count
        pointer = 0
        for number, page in enumerate(self.reference, start=1):
            fault = page not in frames
            evicted = None
            if fault:
                while used[pointer] or modified[pointer]:
                    if used[pointer]:
                        used[pointer] = False
                    else:
                        modified[pointer] = False
                    pointer = (pointer + 1) % self.frame_count
                evicted = frames[pointer]
                frames[pointer] = page
                used[pointer] = True
                modified[pointer] = self.rng.randrange(2) == 0
                pointer = (pointer + 1) % self.frame_count
            else:
                slot = frames.index(page)
                used[slot] = True
                modified[slot] = True
            marks = tuple(f"({int(u)},{int(m)})" for u, m in zip(used, modified))
            result.steps.append(Step(number, page, fault, tuple(frames), marks, evicted))
        return result

    def lfu(self) -> ReplacementResult:
        result = self._result("LFU")
        frames: list[int | None] = [None] * self.frame_count
        frequency = [0] * self.frame_count
        for number, page in enumerate(self.reference, start=1):
            fault = page not in frames
            evicted = None
            if fault:
                slot = min(range(self.frame_count), key=frequency.__getitem__)
                evicted = frames[slot]
                frames[slot] = page
                frequency[slot] = 1
            else:
                frequency[frames.index(page)] += 1
            marks = tuple(f"({f})" for f in frequency)
            result.steps.append(Step(number, page, fault, tuple(frames), marks, evicted))
        return result

    def mfu(self) -> ReplacementResult:
        note = (
            f"[DEBUG] FrameNumber={self.frame_count}, "
            f"PageNumber={len(self.reference)}"
        )
        result = self._result("MFU", numbered=True, notes=(note,))
        frames: list[int | None] = [None] * self.frame_count
        frequency = [0] * self.frame_count
        for number, page in enumerate(self.reference, start=1):
            fault = page not in frames
            evicted = None
            if fault:
                if None in frames:
                    slot = frames.index(None)
                else:
                    slot = max(range(self.frame_count), key=frequency.__getitem__)
                    evicted = frames[slot]
                frames[slot] = page
                frequency[slot] = 1
            else:
                frequency[frames.index(page)] += 1
            marks = tuple(f"({f})" for f in frequency)
            result.steps.append(Step(number, page, fault, tuple(frames), marks, evicted))
        return result

    def run_all(self) -> list[ReplacementResult]:
        """Run every algorithm in the usual order."""
        return [self.fifo(), self.lru(), self.clock(), self.eclock(), self.lfu(), self.mfu()]


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate page replacement algorithms.")
    parser.add_argument("reference", nargs="*", type=int, help="page reference string")
    parser.add_argument("--frames", type=int, default=DEFAULT_FRAME_COUNT)
    parser.add_argument("--pages", type=int, default=DEFAULT_PAGE_COUNT)
    parser.add_argument("--max-page", type=int, default=DEFAULT_MAX_PAGE)
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    print(BANNER)
    if args.reference:
        simulator = Replace(args.reference, args.frames, rng)
        label = "Reference string: "
    else:
        simulator = Replace([1], args.frames, rng)
        simulator.generate_random_ref(args.pages, args.max_page)
        label = "Generated reference string: "
    print(label + "".join(f"{page} " for page in simulator.reference))
    print(f"Memory frames: {simulator.frame_count}")
    for result in simulator.run_all():
        print(result.format())
    return 0