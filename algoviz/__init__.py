from .elements import (
    Complexity,
    Element,
    ElementState,
    SearchStep,
    SearchingAlgorithm,
    SortStep,
    SortingAlgorithm,
    UnknownAlgorithmError,
    clone_elements,
    create_element_array,
    generate_random_array,
    parse_values,
    pick_target,
)
from .playback import Playback
from .searching import SEARCHING_ALGORITHMS, get_searching_algorithm
from .sorting import SORTING_ALGORITHMS, get_sorting_algorithm

__all__ = [
    "Complexity",
    "Element",
    "ElementState",
    "Playback",
    "SEARCHING_ALGORITHMS",
    "SORTING_ALGORITHMS",
    "SearchStep",
    "SearchingAlgorithm",
    "SortStep",
    "SortingAlgorithm",
    "UnknownAlgorithmError",
    "clone_elements",
    "create_element_array",
    "generate_random_array",
    "get_searching_algorithm",
    "get_sorting_algorithm",
    "parse_values",
    "pick_target",
]
