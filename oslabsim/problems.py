"""Classic synchronisation problems: producer/consumer, sleeping barber, smokers."""

from __future__ import annotations

import argparse
import random
import threading
import time
from enum import IntEnum
from typing import Sequence

PRODUCT_NUM = 10
BUFFER_SIZE = 5
NUM_CHAIRS = 5
CUSTOMER_COUNT = NUM_CHAIRS + 5
SMOKER_ROUNDS = 10


class Ingredient(IntEnum):
    """The ingredient each smoker already holds."""

    TOBACCO = 0
    PAPER = 1
    GLUE = 2

    @property
    def missing(self) -> str:
        """The two ingredients the agent has to supply to this smoker."""
        return {
            Ingredient.TOBACCO: "Paper and Glue",
            Ingredient.PAPER: "Tobacco and Glue",
            Ingredient.GLUE: "Tobacco and Paper",
        }[self]


def _pause(rng: random.Random, max_delay: float) -> None:
    if max_delay > 0:
        time.sleep(rng.random() * max_delay)


def run_producer_consumer(
    products: int = PRODUCT_NUM,
    buffer_size: int = BUFFER_SIZE,
    rng: random.Random | None = None,
    max_delay: float = 1.0,
) -> list[str]:
    """Run one producer and one consumer over a circular buffer.

    The buffer keeps one slot free, so it holds at most ``buffer_size - 1`` items.
    Returns the produced/consumed lines in the order they happened.
    """
    if products < 0:
        raise ValueError("products must not be negative")
    if buffer_size < 2:
        raise ValueError("buffer_size must be at least 2")
    rng = rng if rng is not None else random.Random()
    buffer = [0] * buffer_size
    position = {"in": 0, "out": 0}
    events: list[str] = []
    condition = threading.Condition()

    def producer() -> None:
        for _ in range(products):
            _pause(rng, max_delay)
            with condition:
                while (position["in"] + 1) % buffer_size == position["out"]:
                    condition.wait()
                slot = position["in"]
                buffer[slot] = rng.randrange(100)
                events.append(f"Producer produced: {buffer[slot]}")
                position["in"] = (slot + 1) % buffer_size
                condition.notify_all()

    def consumer() -> None:
        for _ in range(products):
            _pause(rng, max_delay)
            with condition:
                while position["in"] == position["out"]:
                    condition.wait()
                slot = position["out"]
                events.append(f"Consumer consumed: {buffer[slot]}")
                position["out"] = (slot + 1) % buffer_size
                condition.notify_all()

    threads = [threading.Thread(target=producer), threading.Thread(target=consumer)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return events


def run_barber(
    chairs: int = NUM_CHAIRS,
    customers: int = CUSTOMER_COUNT,
    rng: random.Random | None = None,
    max_delay: float = 3.0,
) -> list[str]:
    """Run the sleeping barber with customers arriving all at once.

    The barber stops once every customer has arrived and no one is waiting.
    """
    if chairs < 0:
        raise ValueError("chairs must not be negative")
    if customers < 0:
        raise ValueError("customers must not be negative")
    rng = rng if rng is not None else random.Random()
    state = {"waiting": 0, "arrived": 0}
    events: list[str] = []
    condition = threading.Condition()

    def barber() -> None:
        while True:
            with condition:
                while state["waiting"] == 0 and state["arrived"] < customers:
                    events.append("Barber is sleeping...")
                    condition.wait()
                if state["waiting"] == 0:
                    return
                events.append("Barber is cutting hair...")
                state["waiting"] -= 1
            _pause(rng, max_delay)

    def customer() -> None:
        with condition:
            state["arrived"] += 1
            if state["waiting"] < chairs:
                state["waiting"] += 1
                events.append(
                    f"Customer takes a seat. Total waiting: {state['waiting']}"
                )
                seated = True
            else:
                events.append("Customer leaves because no available chairs.")
                seated = False
            condition.notify_all()
        if seated:
            _pause(rng, max_delay)

    threads = [threading.Thread(target=barber)]
    threads.extend(threading.Thread(target=customer) for _ in range(customers))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return events


def run_smokers(
    rounds: int = SMOKER_ROUNDS,
    rng: random.Random | None = None,
    delay: float = 1.0,
) -> list[str]:
    """Run the cigarette smokers problem for a number of agent rounds."""
    if rounds < 0:
        raise ValueError("rounds must not be negative")
    rng = rng if rng is not None else random.Random()
    events: list[str] = []
    mutex = threading.Lock()
    agent_sem = threading.Semaphore(0)
    smoker_sems = {ingredient: threading.Semaphore(0) for ingredient in Ingredient}
    stop = threading.Event()

    def agent() -> None:
        for _ in range(rounds):
            with mutex:
                chosen = Ingredient(rng.randrange(3))
                events.append(f"Agent provides: {chosen.missing}")
                smoker_sems[chosen].release()
            agent_sem.acquire()
        stop.set()
        for semaphore in smoker_sems.values():
            semaphore.release()

    def smoker(ingredient: Ingredient) -> None:
        while True:
            smoker_sems[ingredient].acquire()
            if stop.is_set():
                return
            with mutex:
                events.append(f"Smoker {int(ingredient)} is making and smoking...")
                if delay > 0:
                    time.sleep(delay)
                agent_sem.release()

    threads = [threading.Thread(target=agent)]
    threads.extend(
        threading.Thread(target=smoker, args=(ingredient,)) for ingredient in Ingredient
    )
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return events


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classic synchronisation problems.")
    parser.add_argument("problem", choices=("producer-consumer", "barber", "smokers"))
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--delay", type=float, default=None, help="delay scale in seconds")
    parser.add_argument("--count", type=int, default=None, help="products, customers or rounds")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    try:
        if args.problem == "producer-consumer":
            events = run_producer_consumer(
                args.count if args.count is not None else PRODUCT_NUM,
                BUFFER_SIZE,
                rng,
                args.delay if args.delay is not None else 1.0,
            )
        elif args.problem == "barber":
            events = run_barber(
                NUM_CHAIRS,
                args.count if args.count is not None else CUSTOMER_COUNT,
                rng,
                args.delay if args.delay is not None else 3.0,
            )
        else:
            events = run_smokers(
                args.count if args.count is not None else SMOKER_ROUNDS,
                rng,
                args.delay if args.delay is not None else 1.0,
            )
    except ValueError as exc:
        print(f"error: {exc}")
        return 1
    for line in events:
        print(line)
    return 0