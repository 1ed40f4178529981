import logging
from typing import Callable

from tqdm import tqdm

from day16.bound import can_surpass
from day16.moves import take_moves
from day16.state import VolcanoState
from day16.valves import ValveGraph

logger = logging.getLogger(__name__)

BEAM_WIDTH = 1000

# (states, best score so far, time remaining) -> states to carry on with
Reducer = Callable[[list[VolcanoState], int, int], list[VolcanoState]]


def explore(
    states: list[VolcanoState],
    best: int,
    time_remaining: int,
    graph: ValveGraph,
    reducer: Reducer,
    progress: bool = False,
) -> int:
    """Advances every live state one minute at a time until the clock runs
    out or the reducer leaves nothing to explore. Returns the best released
    pressure seen along the way."""
    with tqdm(total=max(time_remaining, 0), disable=not progress) as bar:
        while time_remaining > 0 and len(states) > 0:
            new_states = take_moves(time_remaining, states, graph)
            best = max(
                [best] + [state.released_pressure() for state in new_states]
            )
            states = reducer(new_states, best, time_remaining)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "t=%d expanded=%d kept=%d best=%d",
                    time_remaining,
                    len(new_states),
                    len(states),
                    best,
                )
            time_remaining -= 1
            bar.update(1)
            bar.set_postfix(states=len(states), best=best)
    return best


def beam_reducer(width: int = BEAM_WIDTH) -> Reducer:
    def reduce(states: list[VolcanoState], best: int, time_remaining: int) -> list[VolcanoState]:
        return sorted(states, key=VolcanoState.released_pressure, reverse=True)[:width]

    return reduce


def bound_reducer(graph: ValveGraph) -> Reducer:
    def reduce(states: list[VolcanoState], best: int, time_remaining: int) -> list[VolcanoState]:
        return [
            state for state in states if can_surpass(time_remaining, state, best, graph)
        ]

    return reduce


def keep_all(states: list[VolcanoState], best: int, time_remaining: int) -> list[VolcanoState]:
    return states


def find_naive_maximum(
    initial: VolcanoState, time_remaining: int, graph: ValveGraph, progress: bool = False
) -> int:
    return explore([initial], 0, time_remaining, graph, beam_reducer(), progress)


def run_simulation(
    initial: VolcanoState, time_remaining: int, graph: ValveGraph, progress: bool = False
) -> int:
    naive = find_naive_maximum(initial, time_remaining, graph, progress)
    logger.info("Beam search baseline: %d", naive)
    best = explore(
        [initial], naive, time_remaining, graph, bound_reducer(graph), progress
    )
    logger.info("Bounded search result: %d", best)
    return best


def exhaustive_maximum(initial: VolcanoState, time_remaining: int, graph: ValveGraph) -> int:
    """No pruning at all. Only feasible for small graphs and short budgets."""
    return explore([initial], 0, time_remaining, graph, keep_all)
