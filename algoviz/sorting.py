import logging
from typing import Dict, List, Sequence

from .elements import (
    Complexity,
    Element,
    ElementState,
    SortStep,
    SortingAlgorithm,
    UnknownAlgorithmError,
    clone_elements,
    create_element_array,
    mark_all,
)

logger = logging.getLogger(__name__)


# ---------------- Utilities ----------------
class _SortTrace:
    """
    Working array plus the running counters of one recording run.
    snapshot() freezes a copy of the current array into a step.
    """

    def __init__(self, values: Sequence[int]):
        self.arr: List[Element] = create_element_array(values)
        self.steps: List[SortStep] = []
        self.comparisons = 0
        self.swaps = 0

    def snapshot(self, note: str = "", complete: bool = False) -> None:
        self.steps.append(SortStep(
            array=clone_elements(self.arr),
            comparisons=self.comparisons,
            swaps=self.swaps,
            is_complete=complete,
            note=note,
        ))

    def compare(self, *indices: int, note: str = "") -> None:
        for i in indices:
            self.arr[i].state = ElementState.COMPARING
        self.comparisons += 1
        self.snapshot(note)

    def swap(self, i: int, j: int, note: str = "") -> None:
        """Tag both slots, record, exchange, record again."""
        self.arr[i].state = ElementState.SWAPPING
        self.arr[j].state = ElementState.SWAPPING
        self.snapshot(note)
        self.arr[i], self.arr[j] = self.arr[j], self.arr[i]
        self.swaps += 1
        self.snapshot(note)

    def finish(self) -> List[SortStep]:
        mark_all(self.arr, ElementState.SORTED)
        self.snapshot("Done", complete=True)
        return self.steps


def _trivial(values: Sequence[int]) -> List[SortStep]:
    # Zero or one element: the initial frame is already the finished one.
    trace = _SortTrace(values)
    return trace.finish()


# ---------------- Sorting algorithms (produce steps) ----------------
def bubble_sort_steps(values: Sequence[int]) -> List[SortStep]:
    if len(values) < 2:
        return _trivial(values)
    trace = _SortTrace(values)
    a = trace.arr
    n = len(a)
    trace.snapshot("Start Bubble Sort")
    for i in range(n):
        swapped = False
        for j in range(n - i - 1):
            trace.compare(j, j + 1, note=f"Compare {j} & {j+1}")
            if a[j].value > a[j + 1].value:
                trace.swap(j, j + 1, note=f"Swap {j} & {j+1}")
                swapped = True
            a[j].state = ElementState.DEFAULT
            a[j + 1].state = ElementState.DEFAULT
        a[n - i - 1].state = ElementState.SORTED
        trace.snapshot(f"Fix position {n - i - 1}")
        if not swapped:
            # no exchange in a full pass: the prefix is already in order
            for k in range(n - i - 1):
                a[k].state = ElementState.SORTED
            break
    steps = trace.finish()
    logger.debug("bubble sort: %d steps for %d values", len(steps), n)
    return steps


def quick_sort_steps(values: Sequence[int]) -> List[SortStep]:
    if len(values) < 2:
        return _trivial(values)
    trace = _SortTrace(values)
    a = trace.arr
    n = len(a)
    trace.snapshot("Start Quick Sort")

    def partition(low, high):
        a[high].state = ElementState.PIVOT
        trace.snapshot(f"Pivot {a[high].value} at {high}")
        i = low - 1
        for j in range(low, high):
            trace.compare(j, note=f"Compare {j} with pivot {high}")
            if a[j].value <= a[high].value:
                i += 1
                if i != j:
                    trace.swap(i, j, note=f"Swap {i} & {j}")
                    a[i].state = ElementState.DEFAULT
            a[j].state = ElementState.DEFAULT
        i += 1
        if i != high:
            trace.swap(i, high, note=f"Place pivot at {i}")
        for el in a[low:high + 1]:
            if el.state != ElementState.SORTED:
                el.state = ElementState.DEFAULT
        a[i].state = ElementState.SORTED
        trace.snapshot(f"Pivot fixed at {i}")
        return i

    def quick(low, high):
        if low == high:
            a[low].state = ElementState.SORTED
        if low < high:
            p = partition(low, high)
            quick(low, p - 1)
            quick(p + 1, high)

    quick(0, n - 1)
    steps = trace.finish()
    logger.debug("quick sort: %d steps for %d values", len(steps), n)
    return steps


def selection_sort_steps(values: Sequence[int]) -> List[SortStep]:
    if len(values) < 2:
        return _trivial(values)
    trace = _SortTrace(values)
    a = trace.arr
    n = len(a)
    trace.snapshot("Start Selection Sort")
    for i in range(n - 1):
        min_idx = i
        a[i].state = ElementState.COMPARING
        trace.snapshot(f"Scan from {i}")
        for j in range(i + 1, n):
            trace.compare(j, note=f"Compare min {min_idx} vs {j}")
            if a[j].value < a[min_idx].value:
                if min_idx != i:
                    a[min_idx].state = ElementState.DEFAULT
                min_idx = j
                trace.snapshot(f"New min at {min_idx}")
            else:
                a[j].state = ElementState.DEFAULT
                trace.snapshot(f"Keep min at {min_idx}")
        if min_idx != i:
            trace.swap(i, min_idx, note=f"Swap {i} & {min_idx}")
            a[min_idx].state = ElementState.DEFAULT
        a[i].state = ElementState.SORTED
        trace.snapshot(f"Fix position {i}")
    steps = trace.finish()
    logger.debug("selection sort: %d steps for %d values", len(steps), n)
    return steps


BUBBLE_SORT = SortingAlgorithm(
    name="Bubble Sort",
    key="bubbleSort",
    description=(
        "A simple comparison-based sorting algorithm that repeatedly steps "
        "through the list, compares adjacent elements and swaps them if they "
        "are in the wrong order."
    ),
    time_complexity=Complexity(best="O(n)", average="O(n²)", worst="O(n²)"),
    space_complexity="O(1)",
    record=bubble_sort_steps,
)

QUICK_SORT = SortingAlgorithm(
    name="Quick Sort",
    key="quickSort",
    description=(
        "A divide-and-conquer algorithm that selects a 'pivot' element and "
        "partitions the array around the pivot, placing smaller elements to "
        "the left and larger elements to the right."
    ),
    time_complexity=Complexity(best="O(n log n)", average="O(n log n)", worst="O(n²)"),
    space_complexity="O(log n)",
    record=quick_sort_steps,
)

SELECTION_SORT = SortingAlgorithm(
    name="Selection Sort",
    key="selectionSort",
    description=(
        "A simple sorting algorithm that repeatedly finds the minimum element "
        "from the unsorted part and puts it at the beginning."
    ),
    time_complexity=Complexity(best="O(n²)", average="O(n²)", worst="O(n²)"),
    space_complexity="O(1)",
    record=selection_sort_steps,
)

SORTING_ALGORITHMS: Dict[str, SortingAlgorithm] = {
    algo.key: algo for algo in (BUBBLE_SORT, QUICK_SORT, SELECTION_SORT)
}


def get_sorting_algorithm(key: str) -> SortingAlgorithm:
    try:
        return SORTING_ALGORITHMS[key]
    except KeyError:
        raise UnknownAlgorithmError(key) from None
