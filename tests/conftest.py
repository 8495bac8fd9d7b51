"""Shared fixtures and brute-force references for the search tests."""

import random

import pytest

from graph_search.core.graph import Graph
from graph_search.problems.sample import make_illustrative_graph


@pytest.fixture
def illustrative():
    """The 5-node graph from the CLI: start 0, goal 4."""
    return make_illustrative_graph()


def simple_paths(graph, source, goal):
    """Every cycle-free path from source to goal (exponential, small graphs only)."""
    out = []

    def walk(node, path):
        if node == goal:
            out.append(list(path))
            return
        for child, _ in graph.adjacent(node):
            if child not in path:
                path.append(child)
                walk(child, path)
                path.pop()

    walk(source, [source])
    return out


def cheapest_weight(graph, path):
    return sum(graph.edge_weight(a, b) for a, b in zip(path, path[1:]))


def random_graphs(count=60, seed=7, max_nodes=6):
    """Seeded random digraphs with non-negative integer weights, parallel edges and self-loops allowed."""
    rng = random.Random(seed)
    graphs = []
    for _ in range(count):
        n = rng.randint(2, max_nodes)
        g = Graph(n, start=rng.randrange(n))
        for _ in range(rng.randint(0, n + 3)):
            g.add_edge(rng.randrange(n), rng.randrange(n), rng.randint(0, 9))
        graphs.append(g)
    return graphs
