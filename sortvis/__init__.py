from .sorters import ALGORITHMS, Sorter, Step, StepStatus, get_generator
from .state import AppState, RunState
from .store import ArrayStore, generate_array

__all__ = [
    "ALGORITHMS", "AppState", "ArrayStore", "RunState", "Sorter", "Step",
    "StepStatus", "generate_array", "get_generator",
]
