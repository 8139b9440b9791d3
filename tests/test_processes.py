import os

import pytest

from oslabsim.processes import (
    compute_fxy,
    factorial,
    fibonacci,
    fork_value_demo,
    main,
    ping_pong,
)


def test_factorial_base_case():
    assert factorial(1) == 1


@pytest.mark.parametrize("n", range(2, 12))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_fibonacci_base_cases():
    assert fibonacci(1) == 1
    assert fibonacci(2) == 1


@pytest.mark.parametrize("n", range(3, 20))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


@pytest.mark.parametrize("bad", [0, -3])
def test_invalid_arguments(bad):
    with pytest.raises(ValueError):
        factorial(bad)
    with pytest.raises(ValueError):
        fibonacci(bad)


def test_compute_fxy_combines_results():
    fx, fy, total = compute_fxy(5, 7)
    assert fx == factorial(5)
    assert fy == fibonacci(7)
    assert total == fx + fy


def test_compute_fxy_propagates_errors():
    with pytest.raises(ValueError):
        compute_fxy(0, 3)


def test_ping_pong_rejects_bad_limit():
    with pytest.raises(ValueError):
        ping_pong(0)


def test_fork_value_demo_order():
    assert fork_value_demo() == [
        "Child: value = 20",
        "Child: value = 35",
        "PARNET: value = 20",
        "PARNET: value = 5",
    ]


def test_main_pid(capsys):
    assert main(["pid"]) == 0
    assert capsys.readouterr().out == f"My process ID is:{os.getpid()}\n"


def test_main_hello_prints_once_per_worker(capsys):
    assert main(["hello"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["hello"] * (2 ** 3)


def test_main_function_with_arguments(capsys):
    assert main(["function", "4", "6"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"f(x) = {factorial(4)}",
        f"f(y) = {fibonacci(6)}",
        f"f(x, y) = {factorial(4) + fibonacci(6)}",
    ]


def test_main_function_reads_input(capsys, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda: "3 3")
    assert main(["function"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Input x and y:"
    assert lines[-1] == f"f(x, y) = {factorial(3) + fibonacci(3)}"


def test_main_pipe_output(capsys):
    assert main(["pipe", "--limit", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    pid = os.getpid()
    assert lines[0] == f"child {pid} read: 1"
    assert lines[1] == f"parent {pid} read: 2"
    assert len(lines) == len(ping_pong(3))


def test_main_fork_copies(capsys):
    assert main(["fork"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Child has x= 2", "Parent has x=0"]