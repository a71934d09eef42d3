"""
Shared array model for the step recorders.

An Element is one bar on screen: an integer value plus the state tag that
decides how it is drawn in a given frame. Recorders mutate the tags on a
private working array and snapshot it with clone_elements() every time
they record a step, so no two steps share Element instances.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple


class ElementState(str, Enum):
    DEFAULT = "default"
    COMPARING = "comparing"
    SWAPPING = "swapping"
    SORTED = "sorted"
    PIVOT = "pivot"


class Element:
    """One array slot. `value` is fixed at creation; `state` is retagged freely."""

    __slots__ = ("_value", "state")

    def __init__(self, value: int, state: ElementState = ElementState.DEFAULT):
        self._value = value
        self.state = state

    @property
    def value(self) -> int:
        return self._value

    def clone(self) -> "Element":
        return Element(self._value, self.state)

    def __eq__(self, other):
        if not isinstance(other, Element):
            return NotImplemented
        return self._value == other._value and self.state == other.state

    __hash__ = None

    def __repr__(self):
        return f"Element(value={self._value!r}, state={self.state.value!r})"


@dataclass(frozen=True)
class SortStep:
    """One recorded frame of a sorting run."""
    array: Tuple[Element, ...]
    comparisons: int = 0
    swaps: int = 0
    is_complete: bool = False
    note: str = ""

    @property
    def values(self) -> List[int]:
        return [el.value for el in self.array]


@dataclass(frozen=True)
class SearchStep:
    """
    One recorded frame of a searching run.
    found_index is only ever set on the terminal step.
    """
    array: Tuple[Element, ...]
    comparisons: int = 0
    is_complete: bool = False
    found_index: Optional[int] = None
    current_index: Optional[int] = None
    note: str = ""

    @property
    def values(self) -> List[int]:
        return [el.value for el in self.array]


@dataclass(frozen=True)
class Complexity:
    best: str
    average: str
    worst: str


@dataclass(frozen=True)
class SortingAlgorithm:
    name: str
    key: str
    description: str
    time_complexity: Complexity
    space_complexity: str
    record: Callable[[Sequence[int]], List[SortStep]] = field(repr=False, compare=False)


@dataclass(frozen=True)
class SearchingAlgorithm:
    name: str
    key: str
    description: str
    time_complexity: Complexity
    space_complexity: str
    requires_sorted: bool
    record: Callable[[Sequence[int], int], List[SearchStep]] = field(repr=False, compare=False)


class UnknownAlgorithmError(KeyError):
    pass


# ---------------- Helpers ----------------
def create_element_array(values: Sequence[int]) -> List[Element]:
    return [Element(int(v)) for v in values]


def clone_elements(elements: Sequence[Element]) -> Tuple[Element, ...]:
    return tuple(el.clone() for el in elements)


def mark_all(elements: Sequence[Element], state: ElementState) -> None:
    for el in elements:
        el.state = state


def generate_random_array(size: int, low: int = 1, high: int = 100,
                          rng: Optional[random.Random] = None) -> List[int]:
    """Return `size` random integers in [low, high], both ends inclusive."""
    rng = rng or random.Random()
    return [rng.randint(low, high) for _ in range(size)]


def pick_target(values: Sequence[int], low: int, high: int,
                rng: Optional[random.Random] = None) -> int:
    """
    Pick a search target. Half of the time it is taken from the array so
    that a run usually has something to find; otherwise it is any value in
    [low, high] and may well be absent.
    """
    rng = rng or random.Random()
    if values and rng.random() > 0.5:
        return values[rng.randrange(len(values))]
    return rng.randint(low, high)


_SEPARATORS = re.compile(r"[,\s]+")


def parse_values(text: str) -> List[int]:
    """
    Parse user-typed numbers such as "5, 3 8,1".
    Raises ValueError on anything that is not an integer.
    """
    tokens = [t for t in _SEPARATORS.split(text.strip()) if t]
    return [int(t) for t in tokens]
