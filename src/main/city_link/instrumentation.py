import time
from typing import Optional


class Counter:
    def __init__(self):
        self.value: float = 0

    def increase(self, amount=1):
        self.value += amount


class Timer(Counter):
    def __enter__(self):
        self.start = time.perf_counter()

    def __exit__(self, exc_type, exc_val, exc_tb):
        end = time.perf_counter()
        self.increase(end - self.start)


class Tracker:
    def __init__(self, counters: Optional[dict[str, Counter]] = None):
        self.counters = counters if counters is not None else {}

    def get_counter(self, name: str) -> Counter:
        if name not in self.counters:
            self.counters[name] = Counter()
        return self.counters[name]

    def get_timer(self, name) -> Timer:
        if name not in self.counters:
            self.counters[name] = Timer()
        counter = self.counters[name]
        if isinstance(counter, Timer):
            timer: Timer = counter
            return timer
        raise Exception(f"there is already a non-timer counter registered under {name}")

    def get_counter_value(self, name: str) -> float:
        if name not in self.counters:
            return 0
        return self.counters[name].value

    def snapshot(self) -> dict[str, float]:
        return {
            name: counter.value
            for name, counter in sorted(self.counters.items())
        }


def setup() -> Tracker:
    return Tracker(counters={})


def ensure_tracker(tracker: Optional[Tracker]) -> Tracker:
    if tracker is None:
        return setup()
    return tracker
