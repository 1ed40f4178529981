from day16.state import VolcanoState
from day16.valves import Valve, ValveGraph


def remaining_valves(state: VolcanoState, graph: ValveGraph) -> list[Valve]:
    opened = state.opened_valves
    return [valve for valve in graph.releasable if valve not in opened]


def theoretical_max(time_remaining: int, state: VolcanoState, graph: ValveGraph) -> int:
    """Upper bound on what this state and any of its descendants can release.

    Pretends a closed valve can be opened every other minute, starting now if
    either agent is standing on one, and that the biggest valves go first.
    Travel distances are ignored, so this never underestimates.
    """
    can_release_now = state.can_release(state.me.valve) or (
        state.elephant is not None and state.can_release(state.elephant.valve)
    )
    first_release_time = time_remaining if can_release_now else time_remaining - 1
    optimistic_release_times = range(first_release_time, -1, -2)

    by_flow = sorted(
        remaining_valves(state, graph), key=lambda valve: valve.flow_rate, reverse=True
    )
    optimistic = sum(
        time * valve.flow_rate for time, valve in zip(optimistic_release_times, by_flow)
    )
    return state.released_pressure() + optimistic


def can_surpass(
    time_remaining: int, state: VolcanoState, best: int, graph: ValveGraph
) -> bool:
    return theoretical_max(time_remaining, state, graph) > best
