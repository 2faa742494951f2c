import os
import random

import networkx as nx
import pytest

from nx_wgraph import WeightedGraph


def pytest_configure(config):
    for marker in (
        "unit: fast correctness tests",
        "graceful_fallback: backend falls back to NetworkX",
        "dispatch: runs through NetworkX backend dispatch (needs the installed entry point)",
        "slow: larger random graphs",
    ):
        config.addinivalue_line("markers", marker)


@pytest.fixture(scope="session")
def rng_seed() -> int:
    """
    session-level random seed
    - if TEST_SEED env var is set, use that to reproduce flaky runs
    - else, generate a random seed each pytest run
    - print the seed so runs can be reproduced
    """
    env_seed = os.getenv("TEST_SEED")
    if env_seed is not None:
        seed = int(env_seed)
        print("")
        print(f"Using TEST_SEED from environment: {seed}")
    else:
        seed = random.SystemRandom().randint(0, 2**32 - 1)
        print("")
        print(f"Random seed for this test run: {seed}")

    return seed


@pytest.fixture
def wgraph_backend():
    """skip dispatch tests when the package is not installed with its entry points"""
    backends = getattr(nx.utils.backends, "backends", {})
    if "wgraph" not in backends:
        pytest.skip("nx_wgraph is not registered as a NetworkX backend")
    return "wgraph"


@pytest.fixture
def abcd_graph() -> WeightedGraph:
    """undirected A-B(1), B-C(2), A-C(4), C-D(1)"""
    G = WeightedGraph(directed=False)
    G.add_edge("A", "B", 1)
    G.add_edge("B", "C", 2)
    G.add_edge("A", "C", 4)
    G.add_edge("C", "D", 1)
    return G


@pytest.fixture
def no_negative_cycle_graph() -> WeightedGraph:
    """directed 1->3(-2), 2->1(4), 2->3(3), 3->4(2), 4->2(-1); every cycle has positive weight"""
    G = WeightedGraph(directed=True)
    for v in ("1", "2", "3", "4"):
        G.add_vertex(v)
    G.add_edge("1", "3", -2)
    G.add_edge("2", "1", 4)
    G.add_edge("2", "3", 3)
    G.add_edge("3", "4", 2)
    G.add_edge("4", "2", -1)
    return G
