"""
Undirected transaction graph
Adjacency-set representation over string-identified accounts
"""

from collections import Counter
from typing import Dict, FrozenSet, Iterable, List, Set, Tuple

import networkx as nx


class TransactionGraph:
    """Undirected graph of accounts linked by at least one transaction."""

    def __init__(self, edges: Iterable[Tuple[str, str]] = ()):
        """
        Initialize graph.

        Parameters
        ----------
        edges : iterable of (str, str), optional
            Edges to insert on construction
        """
        self._adjacency: Dict[str, Set[str]] = {}
        for a, b in edges:
            self.add_edge(a, b)

    def add_edge(self, a: str, b: str) -> None:
        """
        Connect two nodes, creating either one if absent.

        Adding the same unordered pair again leaves the graph unchanged.
        An edge (x, x) puts x into its own neighbor set once.
        """
        self._adjacency.setdefault(a, set()).add(b)
        self._adjacency.setdefault(b, set()).add(a)

    def has_node(self, node: str) -> bool:
        return node in self._adjacency

    def __contains__(self, node: str) -> bool:
        return self.has_node(node)

    def __len__(self) -> int:
        return len(self._adjacency)

    def nodes(self) -> List[str]:
        return list(self._adjacency)

    def neighbors(self, node: str) -> FrozenSet[str]:
        """Return a copy of the adjacency set (empty for unknown nodes)."""
        return frozenset(self._adjacency.get(node, ()))

    def degree(self, node: str) -> int:
        return len(self._adjacency.get(node, ()))

    def number_of_nodes(self) -> int:
        return len(self._adjacency)

    def number_of_self_loops(self) -> int:
        return sum(1 for node, nbrs in self._adjacency.items() if node in nbrs)

    def number_of_edges(self) -> int:
        """Count unordered pairs; a self-loop counts as one edge."""
        loops = self.number_of_self_loops()
        total = sum(len(nbrs) for nbrs in self._adjacency.values())
        return (total - loops) // 2 + loops

    def degree_distribution(self) -> Dict[int, int]:
        """
        Tally how many nodes have each degree.

        Returns
        -------
        distribution : dict
            Mapping degree -> number of nodes, in ascending degree order
        """
        counts = Counter(len(nbrs) for nbrs in self._adjacency.values())
        return {degree: counts[degree] for degree in sorted(counts)}

    def neighbors_at_distance_two(self, node: str) -> int:
        """
        Count distinct nodes found among the neighbors of ``node``'s neighbors.

        Only ``node`` itself is excluded. A direct neighbor that is also the
        neighbor of another neighbor (a triangle) is counted.

        Parameters
        ----------
        node : str
            Origin node

        Returns
        -------
        count : int
            Number of second-hop nodes, 0 if ``node`` is not in the graph
        """
        first_hop = self._adjacency.get(node)
        if first_hop is None:
            return 0

        second_hop = set()
        for neighbor in first_hop:
            second_hop.update(self._adjacency.get(neighbor, ()))
        second_hop.discard(node)

        return len(second_hop)

    def to_networkx(self) -> nx.Graph:
        """Export an independent networkx copy of the graph."""
        G = nx.Graph()
        G.add_nodes_from(self._adjacency)
        for node, nbrs in self._adjacency.items():
            for other in nbrs:
                G.add_edge(node, other)
        return G

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(nodes={self.number_of_nodes()}, "
                f"edges={self.number_of_edges()})")
