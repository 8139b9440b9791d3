import threading

import pytest

from oslabsim import counters


def test_lock_counts_every_increment():
    assert counters.count_with_lock(20_000, 2) == 40_000


def test_semaphore_counts_every_increment():
    assert counters.count_with_semaphore(20_000, 3) == 60_000


def test_unsynchronized_never_exceeds_total():
    total = counters.count_unsynchronized(20_000, 2)
    assert 0 < total <= 40_000


def test_single_worker_unsynchronized_is_exact():
    assert counters.count_unsynchronized(5_000, 1) == 5_000


@pytest.mark.parametrize(
    "func",
    [counters.count_unsynchronized, counters.count_with_lock, counters.count_with_semaphore],
)
def test_zero_iterations(func):
    assert func(0, 4) == 0


@pytest.mark.parametrize(
    "func",
    [counters.count_unsynchronized, counters.count_with_lock, counters.count_with_semaphore],
)
@pytest.mark.parametrize("iterations,workers", [(-1, 2), (10, 0)])
def test_invalid_arguments(func, iterations, workers):
    with pytest.raises(ValueError):
        func(iterations, workers)


def test_thread_hello_lines():
    lines = counters.thread_hello()
    assert len(lines) == 3
    assert lines[0] == "Main thread starts."
    assert lines[2] == "Main thread exits."
    prefix = "Hello from thread! Thread ID: "
    assert lines[1].startswith(prefix)
    assert int(lines[1][len(prefix):]) != threading.get_ident()


def test_main_mutex_output(capsys):
    assert counters.main(["mutex", "--iterations", "100"]) == 0
    assert capsys.readouterr().out.strip() == "100 + 100 =  200"


def test_main_sem_output(capsys):
    assert counters.main(["sem", "--iterations", "50", "--workers", "3"]) == 0
    assert capsys.readouterr().out.strip() == "50 + 50 + 50 = 150"


def test_main_rejects_bad_workers(capsys):
    assert counters.main(["mutex", "--workers", "0"]) == 1