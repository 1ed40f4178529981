import pytest

from day16.bound import can_surpass, remaining_valves, theoretical_max
from day16.moves import take_moves
from day16.search import exhaustive_maximum
from day16.state import PersonState, VolcanoState, initial_state
from tests.inputs import valve


def test_bound_delays_first_release_when_moving_first(star_graph) -> None:
    state = initial_state(star_graph, False)
    # Releases at 4, 2 and 0: BB at 4, CC at 2
    assert theoretical_max(5, state, star_graph) == 4 * 10 + 2 * 5


def test_bound_releases_now_when_standing_on_closed_valve(star_graph) -> None:
    bb = valve(star_graph, "BB")
    state = VolcanoState(me=PersonState(bb, frozenset({bb})), elephant=None, released=frozenset())
    assert theoretical_max(5, state, star_graph) == 5 * 10 + 3 * 5


def test_bound_counts_elephant_position(star_graph) -> None:
    aa, cc = valve(star_graph, "AA"), valve(star_graph, "CC")
    state = VolcanoState(
        me=PersonState(aa, frozenset()),
        elephant=PersonState(cc, frozenset({cc})),
        released=frozenset(),
    )
    assert theoretical_max(5, state, star_graph) == 5 * 10 + 3 * 5


def test_bound_includes_realized_score(star_graph) -> None:
    bb, cc = valve(star_graph, "BB"), valve(star_graph, "CC")
    state = VolcanoState(me=PersonState(bb, frozenset()), elephant=None, released=frozenset({(28, bb)}))
    assert remaining_valves(state, star_graph) == [cc]
    assert theoretical_max(5, state, star_graph) == 280 + 4 * 5


def test_bound_runs_out_of_time(star_graph) -> None:
    state = initial_state(star_graph, False)
    assert theoretical_max(0, state, star_graph) == 0
    assert theoretical_max(1, state, star_graph) == 0


def test_can_surpass_is_strict(star_graph) -> None:
    state = initial_state(star_graph, False)
    assert can_surpass(5, state, 49, star_graph)
    assert not can_surpass(5, state, 50, star_graph)


def best_continuation(state: VolcanoState, time_remaining: int, graph) -> int:
    return max(state.released_pressure(), exhaustive_maximum(state, time_remaining, graph))


@pytest.mark.parametrize("with_elephant,time_remaining", [(False, 7), (True, 4)])
def test_bound_covers_every_continuation(example_graph, with_elephant, time_remaining) -> None:
    # Generation t is bounded with t, but its states next act at t - 1
    states = [initial_state(example_graph, with_elephant)]
    for t in range(time_remaining, 0, -1):
        states = take_moves(t, states, example_graph)
        for state in states:
            assert theoretical_max(t, state, example_graph) >= best_continuation(
                state, t - 1, example_graph
            )
