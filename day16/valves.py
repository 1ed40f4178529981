import re
from dataclasses import dataclass, field
from typing import Iterable

LINE_REGEX = re.compile(
    "^Valve ([A-Z]+) has flow rate=([0-9]+); tunnel(?:s)? lead(?:s)? to valve(?:s)? ((?:[A-Z]+(?:, )?)+)$"
)
START_VALVE = "AA"


class ValveInputError(RuntimeError):
    pass


class MalformedValveError(ValveInputError):
    pass


class MissingStartValveError(ValveInputError):
    pass


@dataclass(frozen=True)
class Valve:
    name: str
    flow_rate: int = field(compare=False)


@dataclass
class ValveRecord:
    name: str
    flow_rate: int
    neighbors: list[str]


@dataclass(frozen=True)
class ValveGraph:
    """Read-only search context: tunnels by Valve object, the valves worth
    opening, and the valve both agents start from."""

    tunnels: dict[Valve, list[Valve]]
    releasable: list[Valve]
    start: Valve


def parse_line(line: str) -> ValveRecord:
    match = LINE_REGEX.match(line.strip())
    if match is None:
        raise MalformedValveError(f"Cannot parse valve line: {line!r}")
    name, flow_str, neighbors_str = match.groups()
    return ValveRecord(
        name=name, flow_rate=int(flow_str), neighbors=neighbors_str.split(", ")
    )


def parse_lines(lines: Iterable[str]) -> list[ValveRecord]:
    return [parse_line(line) for line in lines if line.strip()]


def parse_file(path: str) -> list[ValveRecord]:
    with open(path, "r") as f:
        return parse_lines(f.readlines())


def build_valve_graph(
    records: list[ValveRecord], start_label: str = START_VALVE
) -> ValveGraph:
    valves: dict[str, Valve] = {}
    for record in records:
        if record.name in valves:
            raise MalformedValveError(f"Valve {record.name} declared twice")
        valves[record.name] = Valve(name=record.name, flow_rate=record.flow_rate)

    tunnels: dict[Valve, list[Valve]] = {}
    for record in records:
        unknown = [name for name in record.neighbors if name not in valves]
        if unknown:
            raise MalformedValveError(
                f"Valve {record.name} leads to unknown valve(s) {', '.join(unknown)}"
            )
        tunnels[valves[record.name]] = [valves[name] for name in record.neighbors]

    if start_label not in valves:
        raise MissingStartValveError(f"No valve named {start_label}")

    return ValveGraph(
        tunnels=tunnels,
        releasable=[valve for valve in tunnels if valve.flow_rate > 0],
        start=valves[start_label],
    )
