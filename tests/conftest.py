import pytest

from day16.valves import ValveGraph
from tests.inputs import EXAMPLE, STAR, make_graph


@pytest.fixture
def example_graph() -> ValveGraph:
    return make_graph(EXAMPLE)


@pytest.fixture
def star_graph() -> ValveGraph:
    return make_graph(STAR)
