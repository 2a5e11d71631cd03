"""
Step-yielding sorting algorithms.

Every algorithm is a generator over a mutable list. It performs one unit of
work (a comparison, a swap or a write-back), mutates the list in place, then
yields a tuple of up to three highlighted indices:

    (primary, secondary, tertiary)

The caller decides when to resume. Recursive algorithms are nested
generators joined with ``yield from``, so closing the outer generator unwinds
the whole recursion at once.
"""

import logging
from enum import Enum
from typing import NamedTuple

logger = logging.getLogger(__name__)

ALGORITHMS = [
    ("Selection Sort", "selection"),
    ("Insertion Sort", "insertion"),
    ("Bubble Sort",    "bubble"),
    ("Merge Sort",     "merge"),
    ("Quick Sort",     "quick"),
    ("Heap Sort",      "heap"),
]

ALGORITHM_KEYS = [key for _, key in ALGORITHMS]
ALGORITHM_NAMES = {key: name for name, key in ALGORITHMS}

# ============================================================
# ===================== SORTING ALGORITHMS ===================
# ============================================================

def selection_sort(arr):
    n = len(arr)
    for i in range(n - 1):
        mi = i
        for j in range(i + 1, n):
            if arr[j] < arr[mi]: mi = j
            yield i, j, mi
        arr[i], arr[mi] = arr[mi], arr[i]
        yield i, mi


def insertion_sort(arr):
    for i in range(1, len(arr)):
        key = arr[i]; j = i - 1
        try:
            while j >= 0 and arr[j] > key:
                arr[j + 1] = arr[j]; j -= 1
                yield i, j + 1
        finally:
            # the hole is always at j + 1, also when closed mid-shift
            arr[j + 1] = key
        yield j + 1, i


def bubble_sort(arr):
    n = len(arr)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
            yield j, j + 1
        if not swapped:
            break


def merge_sort(arr):
    def _m(lo, mid, hi):
        L = arr[lo:mid + 1]; R = arr[mid + 1:hi + 1]
        i = j = 0; k = lo
        try:
            while i < len(L) and j < len(R):
                if L[i] <= R[j]: arr[k] = L[i]; i += 1
                else:            arr[k] = R[j]; j += 1
                k += 1; yield (k - 1,)
            while i < len(L): arr[k] = L[i]; i += 1; k += 1; yield (k - 1,)
            while j < len(R): arr[k] = R[j]; j += 1; k += 1; yield (k - 1,)
        finally:
            # flush what is still buffered so a closed merge loses nothing
            arr[k:hi + 1] = L[i:] + R[j:]

    def _ms(lo, hi):
        if lo < hi:
            mid = lo + (hi - lo) // 2
            yield from _ms(lo, mid)
            yield from _ms(mid + 1, hi)
            yield from _m(lo, mid, hi)

    yield from _ms(0, len(arr) - 1)


def quick_sort(arr):
    def _partition(lo, hi):
        pivot = arr[hi]; i = lo - 1
        for j in range(lo, hi):
            if arr[j] < pivot:
                i += 1
                arr[i], arr[j] = arr[j], arr[i]
                yield i, j, hi
        arr[i + 1], arr[hi] = arr[hi], arr[i + 1]
        yield i + 1, hi
        return i + 1

    def _q(lo, hi):
        if lo < hi:
            pi = yield from _partition(lo, hi)
            yield from _q(lo, pi - 1)
            yield from _q(pi + 1, hi)

    yield from _q(0, len(arr) - 1)


def heap_sort(arr):
    def hfy(n, i):
        lg, l, r = i, 2 * i + 1, 2 * i + 2
        if l < n and arr[l] > arr[lg]: lg = l
        if r < n and arr[r] > arr[lg]: lg = r
        if lg != i:
            arr[i], arr[lg] = arr[lg], arr[i]
            yield i, lg
            yield from hfy(n, lg)

    n = len(arr)
    for i in range(n // 2 - 1, -1, -1): yield from hfy(n, i)
    for i in range(n - 1, 0, -1):
        arr[0], arr[i] = arr[i], arr[0]
        yield 0, i
        yield from hfy(i, 0)


_BUILTINS = {
    "selection": selection_sort,
    "insertion": insertion_sort,
    "bubble":    bubble_sort,
    "merge":     merge_sort,
    "quick":     quick_sort,
    "heap":      heap_sort,
}


def get_generator(key, arr):
    if key in _BUILTINS: return _BUILTINS[key](arr)
    raise KeyError(f"Unknown key: {key}")

# ============================================================
# ========================= STEPPING =========================
# ============================================================

class StepStatus(Enum):
    CONTINUE  = "continue"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Step(NamedTuple):
    status: StepStatus
    highlights: tuple = ()


class Sorter:
    """
    Resumable run of one algorithm over one list.

    ``step()`` performs exactly one unit of work and reports what happened.
    Once the run is completed or cancelled every further ``step()`` returns
    the same terminal status without touching the list.
    """

    def __init__(self, key, arr):
        self.key    = key
        self.steps  = 0
        self.status = StepStatus.CONTINUE
        self._gen   = get_generator(key, arr)

    @property
    def name(self):
        return ALGORITHM_NAMES[self.key]

    @property
    def finished(self):
        return self.status is not StepStatus.CONTINUE

    def step(self) -> Step:
        if self.finished:
            return Step(self.status)
        try:
            highlights = next(self._gen)
        except StopIteration:
            self._gen = None
            self.status = StepStatus.COMPLETED
            logger.info("%s finished in %d steps", self.name, self.steps)
            return Step(self.status)
        self.steps += 1
        return Step(StepStatus.CONTINUE, highlights)

    def cancel(self):
        """Abandon the run, leaving the list in whatever state it is in."""
        if self.finished:
            return
        self._gen.close()
        self._gen = None
        self.status = StepStatus.CANCELLED
        logger.debug("%s cancelled after %d steps", self.name, self.steps)

