import numbers
from typing import List, Optional

import numpy as np
import pandas as pd

from array_ import Array
from list_ import Stack
from logger import get_logger
from utils import is_equal_long

# Constants
ADJACENCY_SIZE = 4
FROM_COLUMN = "from_node_id"
TO_COLUMN = "to_node_id"

logger = get_logger(__name__)


class Graph:
    """
    Undirected graph over vertex ids ``0 .. n_vertices - 1``.

    Each vertex keeps its neighbours in an Array, in the order the edges
    were added, without repetitions.
    """

    def __init__(self, n_vertices: int):
        if n_vertices < 0:
            raise ValueError(f"Number of vertices must be non-negative, got {n_vertices}.")
        self.n_vertices = n_vertices
        self.adj = [Array(ADJACENCY_SIZE) for _ in range(n_vertices)]

    def __len__(self):
        return self.n_vertices

    def _check_vertex(self, v):
        if not isinstance(v, numbers.Integral):
            raise TypeError(f"Vertex ids must be integers, got {v!r}.")
        if not 0 <= v < self.n_vertices:
            raise IndexError(f"Vertex {v} is not in the graph (vertices 0..{self.n_vertices - 1}).")

    def add_edge(self, src: int, dest: int):
        self._check_vertex(src)
        self._check_vertex(dest)
        if not self.adj[src].contains(dest, is_equal_long):
            self.adj[src].insert(dest)
        if not self.adj[dest].contains(src, is_equal_long):
            self.adj[dest].insert(src)

    def neighbors(self, v: int) -> List[int]:
        self._check_vertex(v)
        return self.adj[v].to_list()

    def dfs(self, start: int) -> List[int]:
        """
        Depth-first traversal from `start`.

        :param start: Vertex the traversal begins at.
        :return: Vertices in visitation order. Vertices unreachable from
            `start` are left out.
        """
        self._check_vertex(start)
        visited = np.zeros(self.n_vertices, dtype=bool)
        visit_order = []

        stack = Stack()
        stack.push(start)
        while not stack.is_empty():
            v = stack.pop()
            if visited[v]:
                continue
            visited[v] = True
            visit_order.append(v)

            # Reversed so the first neighbour added is the first one explored
            neighbours = self.adj[v]
            for i in range(neighbours.length() - 1, -1, -1):
                neighbour = neighbours.get(i)
                if not visited[neighbour]:
                    stack.push(neighbour)

        logger.debug(f"DFS from {start} visited {len(visit_order)} of {self.n_vertices} vertices")
        return visit_order


# Generate Random Graph
def generate_random_graph(n_vertices: int, n_edges: int,
                          random_generator: Optional[np.random.Generator] = None) -> Graph:
    if n_vertices == 0 and n_edges > 0:
        raise ValueError("Cannot draw edges in a graph without vertices.")
    if random_generator is None:
        random_generator = np.random.default_rng()

    graph = Graph(n_vertices)
    for _ in range(n_edges):
        node1 = int(random_generator.integers(0, n_vertices))
        node2 = int(random_generator.integers(0, n_vertices))
        graph.add_edge(node1, node2)

    logger.info(f"Generated random graph with {n_vertices} vertices and {n_edges} edge draws")
    return graph


# Build Graph from an edge table
def graph_from_dataframe(edges_df: pd.DataFrame, n_vertices: Optional[int] = None) -> Graph:
    missing = [column for column in (FROM_COLUMN, TO_COLUMN) if column not in edges_df.columns]
    if missing:
        raise ValueError(f"Edge table is missing column(s): {', '.join(missing)}")

    if n_vertices is None:
        if edges_df.empty:
            n_vertices = 0
        else:
            n_vertices = int(max(edges_df[FROM_COLUMN].max(), edges_df[TO_COLUMN].max())) + 1

    graph = Graph(n_vertices)
    for _, row in edges_df.iterrows():
        graph.add_edge(int(row[FROM_COLUMN]), int(row[TO_COLUMN]))

    logger.info(f"Loaded {len(edges_df)} edges into a graph of {n_vertices} vertices")
    return graph
