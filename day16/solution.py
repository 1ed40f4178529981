import argparse
import logging
from typing import Optional

from day16.search import run_simulation
from day16.state import initial_state
from day16.valves import START_VALVE, ValveGraph, ValveInputError, build_valve_graph, parse_file

logger = logging.getLogger(__name__)

MAX_TIME = 30
ELEPHANT_TRAINING_TIME = 4


def part_a(graph: ValveGraph, progress: bool = False) -> int:
    # Opening a valve during the first minute releases for the 29 that are left
    return run_simulation(initial_state(graph, False), MAX_TIME - 1, graph, progress)


def part_b(graph: ValveGraph, progress: bool = False) -> int:
    return run_simulation(
        initial_state(graph, True), MAX_TIME - ELEPHANT_TRAINING_TIME - 1, graph, progress
    )


def solve(
    path: str = "input.txt", start: str = START_VALVE, progress: bool = False
) -> tuple[int, int]:
    graph = build_valve_graph(parse_file(path), start)
    logger.info(
        "Loaded %d valves, %d worth opening", len(graph.tunnels), len(graph.releasable)
    )
    return part_a(graph, progress), part_b(graph, progress)


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Maximum pressure release from the volcano valves")
    ap.add_argument("input", nargs="?", default="input.txt", help="Valve description file")
    ap.add_argument("--start", default=START_VALVE, help="Label of the starting valve")
    ap.add_argument("--progress", action="store_true", help="Show per-minute progress bars")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    try:
        alone, with_elephant = solve(args.input, args.start, args.progress)
    except (ValveInputError, OSError) as e:
        logger.error("%s", e)
        return 1
    print(alone)
    print(with_elephant)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
