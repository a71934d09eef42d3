import logging
import math
from typing import Dict, List, Optional, Sequence

from .elements import (
    Complexity,
    Element,
    ElementState,
    SearchStep,
    SearchingAlgorithm,
    UnknownAlgorithmError,
    clone_elements,
    create_element_array,
    mark_all,
)

logger = logging.getLogger(__name__)


# ---------------- Utilities ----------------
class _SearchTrace:
    def __init__(self, values: Sequence[int]):
        self.arr: List[Element] = create_element_array(values)
        self.steps: List[SearchStep] = []
        self.comparisons = 0

    def snapshot(self, note: str = "", current: Optional[int] = None) -> None:
        self.steps.append(SearchStep(
            array=clone_elements(self.arr),
            comparisons=self.comparisons,
            current_index=current,
            note=note,
        ))

    def probe(self, index: int, note: str = "") -> None:
        """Record one comparison against the element at `index`."""
        self.comparisons += 1
        self.snapshot(note, current=index)

    def found(self, index: int) -> List[SearchStep]:
        self.arr[index].state = ElementState.SORTED
        self.steps.append(SearchStep(
            array=clone_elements(self.arr),
            comparisons=self.comparisons,
            is_complete=True,
            found_index=index,
            current_index=index,
            note=f"Found at {index}",
        ))
        return self.steps

    def not_found(self) -> List[SearchStep]:
        mark_all(self.arr, ElementState.DEFAULT)
        self.steps.append(SearchStep(
            array=clone_elements(self.arr),
            comparisons=self.comparisons,
            is_complete=True,
            note="Not found",
        ))
        return self.steps


# ---------------- Searching algorithms (produce steps) ----------------
def linear_search_steps(values: Sequence[int], target: int) -> List[SearchStep]:
    trace = _SearchTrace(values)
    a = trace.arr
    trace.snapshot(f"Start Linear Search for {target}")
    for i in range(len(a)):
        a[i].state = ElementState.COMPARING
        trace.probe(i, note=f"Check {i}")
        if a[i].value == target:
            return trace.found(i)
        a[i].state = ElementState.DEFAULT
    return trace.not_found()


def binary_search_steps(values: Sequence[int], target: int) -> List[SearchStep]:
    trace = _SearchTrace(sorted(values))
    a = trace.arr
    trace.snapshot(f"Start Binary Search for {target}")
    left, right = 0, len(a) - 1
    while left <= right:
        for i in range(left, right + 1):
            a[i].state = ElementState.COMPARING
        mid = (left + right) // 2
        a[mid].state = ElementState.PIVOT
        trace.probe(mid, note=f"Range [{left}, {right}], mid {mid}")
        mark_all(a, ElementState.DEFAULT)
        if a[mid].value == target:
            return trace.found(mid)
        if a[mid].value < target:
            left = mid + 1
        else:
            right = mid - 1
    return trace.not_found()


def jump_search_steps(values: Sequence[int], target: int) -> List[SearchStep]:
    trace = _SearchTrace(sorted(values))
    a = trace.arr
    n = len(a)
    trace.snapshot(f"Start Jump Search for {target}")
    if n == 0:
        return trace.not_found()

    block = math.isqrt(n)
    prev, current = 0, block
    # jump phase: skip whole blocks whose last value is still too small
    while current <= n and a[current - 1].value < target:
        for i in range(prev, current):
            a[i].state = ElementState.COMPARING
        trace.probe(current - 1, note=f"Block [{prev}, {current - 1}]")
        mark_all(a, ElementState.DEFAULT)
        prev, current = current, current + block
        if prev >= n:
            return trace.not_found()

    # linear phase inside [prev, min(current, n))
    end = min(current, n)
    while a[prev].value < target:
        a[prev].state = ElementState.COMPARING
        trace.probe(prev, note=f"Check {prev}")
        a[prev].state = ElementState.DEFAULT
        prev += 1
        if prev == end:
            return trace.not_found()

    a[prev].state = ElementState.COMPARING
    trace.probe(prev, note=f"Check {prev}")
    if a[prev].value == target:
        return trace.found(prev)
    return trace.not_found()


LINEAR_SEARCH = SearchingAlgorithm(
    name="Linear Search",
    key="linearSearch",
    description=(
        "A simple search algorithm that checks each element of the list until "
        "a match is found or the whole list has been searched."
    ),
    time_complexity=Complexity(best="O(1)", average="O(n)", worst="O(n)"),
    space_complexity="O(1)",
    requires_sorted=False,
    record=linear_search_steps,
)

BINARY_SEARCH = SearchingAlgorithm(
    name="Binary Search",
    key="binarySearch",
    description=(
        "An efficient search algorithm that finds the position of a target "
        "value within a sorted array by repeatedly dividing the search "
        "interval in half."
    ),
    time_complexity=Complexity(best="O(1)", average="O(log n)", worst="O(log n)"),
    space_complexity="O(1)",
    requires_sorted=True,
    record=binary_search_steps,
)

JUMP_SEARCH = SearchingAlgorithm(
    name="Jump Search",
    key="jumpSearch",
    description=(
        "A search algorithm that works by jumping ahead by fixed steps and "
        "then doing a linear search for the target."
    ),
    time_complexity=Complexity(best="O(1)", average="O(√n)", worst="O(√n)"),
    space_complexity="O(1)",
    requires_sorted=True,
    record=jump_search_steps,
)

SEARCHING_ALGORITHMS: Dict[str, SearchingAlgorithm] = {
    algo.key: algo for algo in (LINEAR_SEARCH, BINARY_SEARCH, JUMP_SEARCH)
}


def get_searching_algorithm(key: str) -> SearchingAlgorithm:
    try:
        return SEARCHING_ALGORITHMS[key]
    except KeyError:
        raise UnknownAlgorithmError(key) from None
