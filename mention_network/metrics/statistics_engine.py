"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
statistics_engine.py

MAIN OBJECTIVE:
---------------
This script derives connectivity statistics from the entity graph for external consumers:
a deterministic degree ranking and a dense adjacency matrix with a zero diagonal.

Dependencies:
-------------
- networkx
- numpy
- pandas
- typing
- logging

MAIN FEATURES:
--------------
1) Degree ranking (descending, ties broken by identifier)
2) Weighted degree (strength) ranking
3) Dense integer adjacency matrix for a fixed node order
4) Summary statistics for reporting

Author:
-------
Antoine Lemor
"""

import logging
from typing import Dict, List, Optional, Tuple, Any

import networkx as nx
import numpy as np
import pandas as pd

from mention_network.core.constants import WEIGHT_ATTR
from mention_network.core.models import AdjacencyMatrix
from mention_network.metrics.graph_model import GraphModel

logger = logging.getLogger(__name__)


class StatisticsEngine:
    """
    Read-only statistics over a GraphModel.
    """

    def __init__(self, model: GraphModel, heatmap_clamp: Optional[int] = None):
        """
        Initialize engine.

        Args:
            model: Graph model to read
            heatmap_clamp: Display hint passed on with the adjacency matrix
        """
        self.model = model
        self.heatmap_clamp = heatmap_clamp

    def degree_ranking(self) -> List[Tuple[str, int]]:
        """(identifier, degree) sorted by degree desc, identifier asc."""
        ranking = [(node, self.model.degree(node)) for node in self.model.nodes()]
        return sorted(ranking, key=lambda item: (-item[1], item[0]))

    def strength_ranking(self) -> List[Tuple[str, int]]:
        """(identifier, summed edge weight) sorted like degree_ranking."""
        ranking = [(node, self.model.strength(node)) for node in self.model.nodes()]
        return sorted(ranking, key=lambda item: (-item[1], item[0]))

    def adjacency_matrix(self, order: Optional[List[str]] = None) -> AdjacencyMatrix:
        """
        Dense adjacency matrix.

        Args:
            order: Node ordering (defaults to catalog order); must be a
                permutation of the graph's nodes

        Returns:
            AdjacencyMatrix with zero diagonal and unclamped weights
        """
        nodes = list(order) if order is not None else self.model.nodes()
        if sorted(nodes) != sorted(self.model.nodes()):
            for node in nodes:
                self.model.degree(node)  # raises UnknownEntityError
            raise ValueError("Node order must list every graph node exactly once")

        values = nx.to_numpy_array(self.model.graph, nodelist=nodes,
                                   weight=WEIGHT_ATTR, dtype=np.int64)
        np.fill_diagonal(values, 0)

        return AdjacencyMatrix(
            nodes=nodes,
            values=values,
            display_clamp=self.heatmap_clamp,
            metadata={'max_weight': int(values.max()) if values.size else 0}
        )

    def degree_dataframe(self) -> pd.DataFrame:
        """Degree ranking with strength, as DataFrame."""
        strengths = dict(self.strength_ranking())
        rows = [
            {'identifier': node, 'surface': self.model.catalog.surface_of(node),
             'degree': degree, 'strength': strengths[node]}
            for node, degree in self.degree_ranking()
        ]
        return pd.DataFrame(rows, columns=['identifier', 'surface', 'degree', 'strength'])

    def summary(self) -> Dict[str, Any]:
        """Summary statistics for reporting."""
        graph = self.model.graph
        degrees = [d for _, d in self.degree_ranking()]
        edges = self.model.edges()
        # edges() is sorted by pair, so ties resolve to the smallest pair
        heaviest = max(edges, key=lambda e: e.weight, default=None)

        return {
            **self.model.get_statistics(),
            'avg_degree': float(np.mean(degrees)) if degrees else 0.0,
            'max_degree': max(degrees) if degrees else 0,
            'n_components': nx.number_connected_components(graph) if graph.number_of_nodes() else 0,
            'heaviest_edge': heaviest.to_dict() if heaviest else None,
            'isolated_nodes': self.model.isolated_nodes()
        }
