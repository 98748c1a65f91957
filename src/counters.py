"""Named monotonic counters."""

import itertools
from typing import Callable


class CounterScope:
    """A set of named counters, each yielding 0, 1, 2, ..."""

    def __init__(self):
        self._counters: dict[str, Callable[[], int]] = {}

    def counter_for(self, name: str) -> Callable[[], int]:
        if name not in self._counters:
            self._counters[name] = itertools.count().__next__
        return self._counters[name]

    def next(self, name: str) -> int:
        return self.counter_for(name)()


# Shared by callers that want counters to keep running across renders
DEFAULT_SCOPE = CounterScope()


def counter_for(name: str) -> Callable[[], int]:
    """Process-wide counter for `name`."""
    return DEFAULT_SCOPE.counter_for(name)
