from dataclasses import replace
from typing import Callable

from day16.state import PersonState, StateHash, VolcanoState
from day16.valves import ValveGraph

PersonUpdater = Callable[[VolcanoState, PersonState], VolcanoState]


def released_all_valves(state: VolcanoState, graph: ValveGraph) -> bool:
    return len(state.released) == len(graph.releasable)


def person_moves(
    state: VolcanoState,
    graph: ValveGraph,
    time_remaining: int,
    person: PersonState,
    update: PersonUpdater,
) -> list[VolcanoState]:
    results = [
        update(state, PersonState(valve=neighbor, visited=person.visited | {neighbor}))
        for neighbor in graph.tunnels[person.valve]
        if neighbor not in person.visited
    ]
    if state.can_release(person.valve):
        opened = update(state, PersonState(valve=person.valve, visited=frozenset()))
        results.append(
            replace(opened, released=state.released | {(time_remaining, person.valve)})
        )
    return results


def take_all_possible_moves(
    time_remaining: int, state: VolcanoState, graph: ValveGraph
) -> list[VolcanoState]:
    if released_all_valves(state, graph):
        return [state]

    my_moves = person_moves(
        state, graph, time_remaining, state.me, VolcanoState.with_me
    )
    if state.elephant is None:
        return my_moves
    # The elephant acts in the same minute, against whatever I just did
    return [
        move
        for my_move in my_moves
        for move in person_moves(
            my_move, graph, time_remaining, state.elephant, VolcanoState.with_elephant
        )
    ]


def take_moves(
    time_remaining: int, states: list[VolcanoState], graph: ValveGraph
) -> list[VolcanoState]:
    distinct: dict[StateHash, VolcanoState] = {}
    for state in states:
        for move in take_all_possible_moves(time_remaining, state, graph):
            distinct.setdefault(move.state_hash(), move)
    return list(distinct.values())
