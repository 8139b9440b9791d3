# oslabsim

Small, readable simulations of classic operating-system topics:

- **Page replacement** (`oslabsim.paging`): FIFO, LRU, CLOCK, enhanced CLOCK,
  LFU and MFU over a reference string, with page-fault counts and rates.
- **Disk arm scheduling** (`oslabsim.disk`): FCFS, SSTF, SCAN, C-SCAN and LOOK,
  with total seek distance, direction changes and average seek.
- **Shared counters** (`oslabsim.counters`): several threads incrementing one
  counter with no synchronisation, with a lock, and with a semaphore, plus a
  one-thread greeting demo.
- **Synchronisation problems** (`oslabsim.problems`): producer/consumer over a
  bounded circular buffer, the sleeping barber, and the cigarette smokers.
- **Shared ring buffer** (`oslabsim.ipc`): a producer and a consumer process
  sharing a small lettered buffer kept in a memory-mapped file.
- **Process demos** (`oslabsim.processes`): a factorial/Fibonacci split between
  two workers, a counter passed back and forth over two pipes, and small
  demonstrations of duplicated workers and private copies of data.

No third-party dependencies are needed. Python 3.10 or later on a POSIX system
(the shared ring buffer uses `fcntl` file locks).

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

```
oslab-paging [REFERENCE ...] [--frames N] [--pages N] [--max-page N] [--seed S]
```
Runs all six page replacement algorithms. Without a reference string, a random
one of `--pages` pages (default 12) in 1..`--max-page` (default 5) is drawn;
`--frames` defaults to 4.

```
oslab-disk [REQUEST ...] [--current C] [--direction 0|1] [--count N] [--seed S]
```
Runs all five disk scheduling algorithms. Anything not given on the command
line (current cylinder, direction, number of requests) is asked for on standard
input. Without explicit requests, random cylinders in 0..199 are drawn.

```
oslab-counters [nosync|mutex|sem|hello] [--iterations N] [--workers N]
```
Adds to a shared counter from `--workers` threads (default 2), `--iterations`
times each (default 1000000), and prints the total; `hello` starts one thread
that greets and waits for it.

```
oslab-problems {producer-consumer,barber,smokers} [--seed S] [--delay SECONDS] [--count N]
```
Runs one problem and prints its events. `--count` is the number of products,
customers or agent rounds; `--delay` scales the random pauses.

```
oslab-ipc-producer [RATE] [--count N] [--name NAME] [--size N]
oslab-ipc-consumer [RATE] [--count N] [--name NAME] [--size N]
```
Run these in two terminals. Both open the same named buffer (by default a file
`oslabsim-buffer` in the temporary directory, 8 slots). The producer writes
`A`, `B`, … into successive slots; the consumer takes them out. `RATE` is the
seconds spent per item (default 3). Without `--count` they run until stopped.

```
oslab-processes {hello,fork,pid,pid-fork,fork-value,function,pipe} [NUMBERS ...] [--limit N]
```
`function` takes x and y (or reads them from standard input) and prints x!,
the y-th Fibonacci number and their sum; `pipe` prints the ping-pong exchange
up to `--limit` (default 9).

## Using it from Python

Page replacement:

```python
import random
from oslabsim.paging import Replace

sim = Replace(reference=[1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5],
              frame_count=4, rng=random.Random(0))
result = sim.lru()
print(result.format())
print(result.report())
print(result.faults, result.evictions)
```

`Replace` also offers `fifo()`, `clock()`, `eclock()`, `lfu()`, `mfu()` and
`run_all()`; each algorithm returns a `ReplacementResult` whose `steps` are
`Step` records of the frame contents and any evicted page.
`generate_random_ref(length, max_page)` replaces the reference string with a
random one. The enhanced CLOCK algorithm marks newly loaded pages as modified
at random, using the given `rng`.

Disk scheduling:

```python
from oslabsim.disk import DiskArm, random_requests

arm = DiskArm(current_cylinder=100, seek_direction=1,
              requests=[55, 58, 39, 18, 90, 160, 150, 38, 184])
result = arm.look()
print(result.format())
print(result.seek_number, result.direction_changes, result.average)
```

`DiskArm` also offers `fcfs()`, `sstf()`, `scan()`, `cscan()` and `run_all()`,
each returning a `ScheduleResult`. `seek_direction` is 0 (towards lower
cylinders) or 1 (towards higher). `random_requests(count, rng)` draws request
cylinders in 0..199.

Counters, problems and processes:

```python
from oslabsim.counters import count_with_lock
from oslabsim.problems import run_barber
from oslabsim.processes import compute_fxy, ping_pong

print(count_with_lock(1000, 2))          # 2000
print(run_barber(chairs=2, customers=4, max_delay=0))
print(compute_fxy(5, 10))                # (120, 55, 175)
print(ping_pong(5))
```

Shared ring buffer:

```python
from oslabsim.ipc import SharedRing

with SharedRing("demo-ring", size=8) as ring:
    print(ring.put())   # (0, 'A')
    print(ring.get())   # (0, 'A')
```

`get_ipc_id(proc_file, key)` looks up the id listed for a key in a
`/proc/sysvipc`-style table and returns `None` when the key is absent.

## What it does not do

- The "processes" in `oslabsim.processes` are threads, each given its own copy
  of the data it starts with; no new operating-system processes are created,
  and the ids printed by the `pid-fork` demo are thread ids.
- The shared ring buffer is a memory-mapped file guarded by file locks, not
  System V shared memory and semaphores. Closing a `SharedRing` leaves the
  buffer file in place for other users; nothing removes it.
- The simulations print traces only; there is no graphical view and no stored
  history of runs.