from dataclasses import dataclass, replace
from typing import Optional

from day16.valves import Valve, ValveGraph

# (time remaining when opened, valve)
ReleaseEvent = tuple[int, Valve]


@dataclass(frozen=True)
class PersonState:
    valve: Valve
    visited: frozenset[Valve]  # Since the last opened valve


@dataclass(frozen=True)
class StateHash:
    people: frozenset[Optional[PersonState]]
    released: frozenset[ReleaseEvent]


@dataclass(frozen=True)
class VolcanoState:
    me: PersonState
    elephant: Optional[PersonState]
    released: frozenset[ReleaseEvent]

    @property
    def opened_valves(self) -> frozenset[Valve]:
        return frozenset(valve for _, valve in self.released)

    def can_release(self, valve: Valve) -> bool:
        return valve.flow_rate > 0 and valve not in self.opened_valves

    def released_pressure(self) -> int:
        return sum(time * valve.flow_rate for time, valve in self.released)

    def state_hash(self) -> StateHash:
        """Which agent is which does not matter for the rest of the search,
        so both orderings share one hash."""
        return StateHash(
            people=frozenset([self.me, self.elephant]), released=self.released
        )

    def with_me(self, me: PersonState) -> "VolcanoState":
        return replace(self, me=me)

    def with_elephant(self, elephant: PersonState) -> "VolcanoState":
        return replace(self, elephant=elephant)


def initial_person_state(graph: ValveGraph) -> PersonState:
    return PersonState(valve=graph.start, visited=frozenset())


def initial_state(graph: ValveGraph, with_elephant: bool) -> VolcanoState:
    return VolcanoState(
        me=initial_person_state(graph),
        elephant=initial_person_state(graph) if with_elephant else None,
        released=frozenset(),
    )
