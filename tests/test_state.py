from collections import Counter

import pytest

from sortvis.sorters import ALGORITHM_KEYS, StepStatus
from sortvis.state import AppState, RunState
from sortvis.store import ArrayStore


def run_until_done(state, limit=100000):
    for _ in range(limit):
        if state.run_state is not RunState.RUNNING:
            return
        state.advance()
    raise AssertionError("sort did not finish")


def test_starts_idle_and_does_nothing(state):
    assert state.run_state is RunState.IDLE
    state.advance()
    assert state.sorter is None
    assert state.store.values == []


@pytest.mark.parametrize("algo", ALGORITHM_KEYS)
def test_runs_to_completion(state, algo):
    state.select(algo)
    state.regenerate()
    original = Counter(state.store.values)
    run_until_done(state)
    assert state.run_state is RunState.COMPLETED
    assert state.store.is_sorted()
    assert Counter(state.store.values) == original
    assert state.highlights == ()
    assert state.steps == state.sorter.steps > 0


def test_completed_state_is_stable(state):
    state.regenerate()
    run_until_done(state)
    done = state.store.snapshot()
    steps = state.steps
    state.advance()
    assert state.store.snapshot() == done
    assert state.steps == steps


def test_switch_mid_run_keeps_partial_array(state):
    state.select("bubble")
    state.regenerate()
    for _ in range(5):
        state.advance()
    partial = state.store.snapshot()
    first = state.sorter

    state.select("quick")
    assert first.status is StepStatus.CANCELLED
    assert state.store.snapshot() == partial

    # one advance is exactly one quick sort step on the partial array
    state.advance()
    assert state.sorter.key == "quick"
    assert state.sorter.steps == 1
    assert Counter(state.store.values) == Counter(partial)

    run_until_done(state)
    assert list(state.store.values) == sorted(partial)


def test_reselect_after_completion_restarts(state):
    state.regenerate()
    run_until_done(state)
    state.select("merge")
    assert state.run_state is RunState.RUNNING
    assert state.steps == 0
    run_until_done(state)
    assert state.run_state is RunState.COMPLETED


def test_single_bar_completes_on_first_advance():
    state = AppState(store=ArrayStore(1, 5, 5))
    state.regenerate()
    state.advance()
    assert state.run_state is RunState.COMPLETED
    assert state.steps == 0
    assert state.store.values == [5]


def test_shutdown_cancels_active_sorter(state):
    state.regenerate()
    state.advance()
    sorter = state.sorter
    state.shutdown()
    assert state.quit
    assert sorter.status is StepStatus.CANCELLED


def test_select_unknown_algorithm(state):
    with pytest.raises(KeyError):
        state.select("bogo")


@pytest.mark.parametrize("algo, steps", [("insertion", 1), ("merge", 5)])
def test_regenerate_mid_run_yields_a_clean_draw(algo, steps):
    state = AppState(store=ArrayStore(8, 10, 99, seed=1), algorithm=algo)
    twin = ArrayStore(8, 10, 99, seed=1)
    state.regenerate(); twin.regenerate()
    state.store.values[:] = list(range(8, 0, -1))
    for _ in range(steps):
        state.advance()
    assert state.sorter.steps == steps

    old = state.sorter
    state.regenerate(); twin.regenerate()
    assert old.status is StepStatus.CANCELLED
    assert state.store.snapshot() == twin.snapshot()
    assert all(10 <= v <= 99 for v in state.store.values)


def test_running_without_an_array_does_not_step():
    state = AppState(store=ArrayStore(4, 1, 9))
    state.restart()
    state.advance()
    assert state.sorter is None
    assert state.store.values == []
