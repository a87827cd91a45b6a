"""
Degree analysis module
Derives degree distributions, two-hop reach and global metrics from
transaction graphs
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

import networkx as nx
import pandas as pd

from .graph import TransactionGraph

logger = logging.getLogger(__name__)


class DegreeAnalyzer:
    """Extract degree-based statistics from a transaction graph."""

    def __init__(self, config: Optional[dict] = None):
        """Initialize degree analyzer."""
        self.config = config or {}

    def degree_distribution(self, G: TransactionGraph) -> Dict[int, int]:
        """
        Compute the degree distribution of a graph.

        Parameters
        ----------
        G : TransactionGraph
            Transaction graph

        Returns
        -------
        distribution : dict
            Mapping degree -> number of nodes with that degree
        """
        distribution = G.degree_distribution()
        logger.info(f"Degree distribution has {len(distribution)} distinct degrees "
                    f"over {G.number_of_nodes()} nodes")
        return distribution

    def two_hop_counts(self, G: TransactionGraph,
                       nodes: Optional[Iterable[str]] = None) -> Dict[str, int]:
        """
        Count second-hop neighbors for each requested node.

        Parameters
        ----------
        G : TransactionGraph
            Transaction graph
        nodes : iterable of str, optional
            Nodes to evaluate; all nodes if None. Unknown nodes map to 0.

        Returns
        -------
        counts : dict
            Mapping node -> number of nodes at distance two
        """
        if nodes is None:
            nodes = G.nodes()
        return {node: G.neighbors_at_distance_two(node) for node in nodes}

    def top_hubs(self, G: TransactionGraph, n: int = 5) -> List[Tuple[str, int]]:
        """Return the ``n`` highest-degree nodes, ties broken by identifier."""
        ranked = sorted(((node, G.degree(node)) for node in G.nodes()),
                        key=lambda x: (-x[1], x[0]))
        return ranked[:n]

    def distribution_table(self, distribution: Dict[int, int]) -> pd.DataFrame:
        """
        Convert a degree distribution into a table.

        Returns
        -------
        table : pd.DataFrame
            Columns: degree, count, probability (sorted by degree)
        """
        df = pd.DataFrame(
            sorted(distribution.items()), columns=['degree', 'count']
        )
        total = df['count'].sum()
        df['probability'] = df['count'] / total if total > 0 else 0.0
        return df

    def extract_global_metrics(self, G: TransactionGraph) -> Dict[str, float]:
        """
        Extract global network metrics.

        Parameters
        ----------
        G : TransactionGraph
            Transaction graph

        Returns
        -------
        metrics : dict
            Global network metrics
        """
        metrics = {
            'n_nodes': G.number_of_nodes(),
            'n_edges': G.number_of_edges(),
            'n_self_loops': G.number_of_self_loops()
        }

        if metrics['n_nodes'] == 0:
            metrics.update({
                'density': 0.0,
                'mean_degree': 0.0,
                'max_degree': 0,
                'n_components': 0,
                'largest_component_size': 0,
                'avg_clustering': 0.0,
                'transitivity': 0.0
            })
            logger.warning("Graph is empty, global metrics are all zero")
            return metrics

        degrees = [G.degree(node) for node in G.nodes()]
        metrics['mean_degree'] = sum(degrees) / len(degrees)
        metrics['max_degree'] = max(degrees)

        nx_graph = G.to_networkx()
        metrics['density'] = nx.density(nx_graph)

        components = list(nx.connected_components(nx_graph))
        metrics['n_components'] = len(components)
        metrics['largest_component_size'] = max(len(c) for c in components)

        # Self-loops are ignored by networkx clustering
        metrics['avg_clustering'] = nx.average_clustering(nx_graph)
        metrics['transitivity'] = nx.transitivity(nx_graph)

        logger.info(f"Extracted {len(metrics)} global metrics")
        return metrics
