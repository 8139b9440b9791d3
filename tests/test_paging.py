import random

import pytest

from oslabsim.paging import Replace, ReplacementResult, Step, main

BELADY = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]
ALGORITHMS = ["fifo", "lru", "clock", "eclock", "lfu", "mfu"]


def run(name, reference, frames, seed=0):
    return getattr(Replace(reference, frames, random.Random(seed)), name)()


def random_reference(seed, length=30, max_page=6):
    rng = random.Random(seed)
    return [rng.randint(1, max_page) for _ in range(length)]


def test_fifo_belady_worked_example():
    assert run("fifo", BELADY, 3).faults == 9
    assert run("fifo", BELADY, 4).faults == 10


def test_fifo_shows_belady_anomaly():
    assert run("fifo", BELADY, 4).faults > run("fifo", BELADY, 3).faults


def test_report_line():
    result = run("fifo", [1, 1], 1)
    assert result.report() == "-> Page faults: 1 (50.0%)"


@pytest.mark.parametrize("name", ALGORITHMS)
@pytest.mark.parametrize("seed", range(5))
def test_fault_bounds(name, seed):
    reference = random_reference(seed)
    result = run(name, reference, 3, seed)
    assert len(result.steps) == len(reference)
    assert len(set(reference)) <= result.faults <= len(reference)
    assert result.faults == sum(step.fault for step in result.steps)


@pytest.mark.parametrize("name", ALGORITHMS)
@pytest.mark.parametrize("seed", range(5))
def test_enough_frames_only_cold_misses(name, seed):
    reference = random_reference(seed, max_page=4)
    result = run(name, reference, 4, seed)
    assert result.faults == len(set(reference))
    assert result.evictions == []


@pytest.mark.parametrize("name", ALGORITHMS)
@pytest.mark.parametrize("seed", range(5))
def test_step_invariants(name, seed):
    reference = random_reference(seed)
    result = run(name, reference, 3, seed)
    previous = (None, None, None)
    for step, page in zip(result.steps, reference):
        assert step.page == page
        assert step.fault == (page not in previous)
        assert page in step.frames
        loaded = [p for p in step.frames if p is not None]
        assert len(loaded) == len(set(loaded))
        if step.evicted is not None:
            assert step.fault
            assert step.evicted in previous
            assert step.evicted not in step.frames
        if not step.fault:
            assert step.frames == previous
        previous = step.frames


@pytest.mark.parametrize("seed", range(8))
def test_lru_has_stack_property(seed):
    reference = random_reference(seed)
    assert run("lru", reference, 4).faults <= run("lru", reference, 3).faults


def test_fifo_evicts_in_load_order():
    result = run("fifo", [1, 2, 3, 4, 5], 2)
    assert result.evictions == [1, 2, 3]


def test_lru_evicts_least_recent():
    result = run("lru", [1, 2, 1, 3], 2)
    assert result.evictions == [2]
    assert result.steps[-1].frames == (1, 3)


def test_mfu_evicts_most_frequent():
    result = run("mfu", [1, 1, 2, 3], 2)
    assert result.evictions == [1]


def test_lfu_evicts_least_frequent():
    result = run("lfu", [1, 1, 2, 3], 2)
    assert result.evictions == [2]


def test_eclock_is_reproducible_with_seed():
    reference = random_reference(3)
    first = run("eclock", reference, 3, seed=42)
    second = run("eclock", reference, 3, seed=42)
    assert first.steps == second.steps


def test_format_layout():
    result = run("clock", [1, 2, 3], 2)
    lines = result.format().split("\n")
    assert lines[0] == ""
    assert lines[1] == "===== CLOCK ====="
    assert lines[-1] == result.report()
    assert len(lines) == 2 + len(result.steps) + 1
    assert "->" in lines[-2]


def test_mfu_format_numbers_steps():
    result = run("mfu", [1, 2, 3], 2)
    text = result.format()
    assert "[DEBUG] FrameNumber=2, PageNumber=3" in text
    assert "Step 1: " in text
    assert "-> " in text.split("\n")[-2]


def test_step_render_skips_empty_frames():
    step = Step(1, 7, True, (7, None), ("(1)", "(0)"), None)
    assert step.render() == "7(1) "


def test_result_fault_rate():
    result = ReplacementResult("X", 1, [Step(1, 1, True, (1,), ("",))])
    assert result.fault_rate == 100.0


def test_generate_random_ref():
    simulator = Replace([1], 3, random.Random(5))
    reference = simulator.generate_random_ref(20, 5)
    assert len(reference) == 20
    assert all(1 <= page <= 5 for page in reference)
    assert simulator.reference == reference
    again = Replace([1], 3, random.Random(5)).generate_random_ref(20, 5)
    assert again == reference


def test_default_reference_is_generated():
    simulator = Replace(rng=random.Random(1))
    assert len(simulator.reference) == 12
    assert simulator.frame_count == 4
    assert set(simulator.reference) <= {1, 2, 3, 4, 5}


@pytest.mark.parametrize("frames", [0, -1])
def test_bad_frame_count(frames):
    with pytest.raises(ValueError):
        Replace([1, 2], frames)


def test_empty_reference_rejected():
    with pytest.raises(ValueError):
        Replace([], 3)


def test_main_random(capsys):
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("=== Page Replacement Algorithm Simulator (Auto Mode) ===")
    assert "Generated reference string: " in out
    assert "Memory frames: 4" in out
    for name in ["FIFO", "LRU", "CLOCK", "ECLOCK", "LFU", "MFU"]:
        assert f"===== {name} =====" in out


def test_main_explicit_reference(capsys):
    main(["--frames", "3", *map(str, BELADY)])
    out = capsys.readouterr().out
    assert "Memory frames: 3" in out
    assert run("fifo", BELADY, 3).format() in out