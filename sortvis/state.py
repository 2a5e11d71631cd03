import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .sorters import ALGORITHM_NAMES, Sorter
from .store import ArrayStore

logger = logging.getLogger(__name__)


class RunState(Enum):
    IDLE      = "idle"
    RUNNING   = "running"
    COMPLETED = "completed"


@dataclass
class AppState:
    """Everything the frame loop mutates. Owned by the FrameDriver."""
    store:      ArrayStore
    algorithm:  str = "selection"
    run_state:  RunState = RunState.IDLE
    sorter:     Optional[Sorter] = None
    highlights: tuple = field(default_factory=tuple)
    quit:       bool = False

    @property
    def algorithm_name(self):
        return ALGORITHM_NAMES[self.algorithm]

    @property
    def steps(self):
        return self.sorter.steps if self.sorter else 0

    def restart(self):
        """Drop the current run; the next tick starts a fresh one."""
        if self.sorter is not None:
            self.sorter.cancel()
        self.sorter = None
        self.highlights = ()
        self.run_state = RunState.RUNNING

    def regenerate(self):
        # cancel first: a closed sorter may still flush buffered values
        self.restart()
        self.store.regenerate()

    def select(self, key):
        if key not in ALGORITHM_NAMES:
            raise KeyError(f"Unknown key: {key}")
        self.algorithm = key
        logger.info("Selected %s", self.algorithm_name)
        self.restart()

    def advance(self):
        """Run one unit of the active sort. No-op unless RUNNING."""
        if self.run_state is not RunState.RUNNING or not self.store.generated:
            return
        if self.sorter is None:
            self.sorter = Sorter(self.algorithm, self.store.values)
        st = self.sorter.step()
        if self.sorter.finished:
            self.highlights = ()
            self.run_state = RunState.COMPLETED
        else:
            self.highlights = st.highlights

    def shutdown(self):
        self.quit = True
        if self.sorter is not None:
            self.sorter.cancel()
