"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
graph_model.py

MAIN OBJECTIVE:
---------------
This script builds the immutable weighted undirected entity graph from aggregated weights, with
every catalog entity as a node whether or not it has edges.

Dependencies:
-------------
- networkx
- pandas
- json
- pathlib
- typing
- logging

MAIN FEATURES:
--------------
1) Frozen networkx graph with integer edge weights
2) Isolated nodes kept and queryable
3) Neighbor, degree and weight queries validated against the catalog
4) Edge list export (csv, json, parquet)

Author:
-------
Antoine Lemor
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Set, Tuple, Any

import networkx as nx
import pandas as pd

from mention_network.core.constants import WEIGHT_ATTR
from mention_network.core.exceptions import UnknownEntityError
from mention_network.core.models import Edge
from mention_network.data.catalog import EntityCatalog

logger = logging.getLogger(__name__)


class GraphModel:
    """
    Weighted undirected graph of cross-references between entities.
    """

    def __init__(self, catalog: EntityCatalog, weights: Mapping[Tuple[str, str], int]):
        """
        Build the graph.

        Args:
            catalog: Entity catalog (all entities become nodes)
            weights: Unordered pair -> weight, as produced by EdgeAggregator

        Raises:
            UnknownEntityError: if a weighted pair references an unknown entity
        """
        self.catalog = catalog
        graph = nx.Graph()

        for entity in catalog:
            graph.add_node(entity.identifier, surface=entity.surface)

        for (a, b), weight in weights.items():
            catalog.require(a)
            catalog.require(b)
            if a == b:
                logger.debug(f"Dropping self-pair for {a}")
                continue
            if weight <= 0:
                continue
            if graph.has_edge(a, b):
                # (a, b) and (b, a) given separately: fold into one edge
                graph[a][b][WEIGHT_ATTR] += int(weight)
            else:
                graph.add_edge(a, b, **{WEIGHT_ATTR: int(weight)})

        self.graph = nx.freeze(graph)
        logger.info(f"Graph built: {graph.number_of_nodes()} nodes, "
                    f"{graph.number_of_edges()} edges")

    @classmethod
    def from_aggregator(cls, catalog: EntityCatalog, aggregator) -> 'GraphModel':
        """Build from an EdgeAggregator."""
        return cls(catalog, aggregator.weight_map())

    def _require(self, node: str) -> None:
        if node not in self.graph:
            raise UnknownEntityError(node)

    def nodes(self) -> List[str]:
        """Nodes in catalog order."""
        return self.catalog.identifiers

    def neighbors(self, node: str) -> Set[str]:
        """Entities sharing a positive-weight edge with node."""
        self._require(node)
        return set(self.graph.neighbors(node))

    def degree(self, node: str) -> int:
        """Number of neighbors."""
        self._require(node)
        return self.graph.degree(node)

    def strength(self, node: str) -> int:
        """Sum of edge weights at node."""
        self._require(node)
        return int(self.graph.degree(node, weight=WEIGHT_ATTR))

    def weight(self, a: str, b: str) -> int:
        """Weight of pair {a, b}, 0 if absent."""
        self._require(a)
        self._require(b)
        if a == b or not self.graph.has_edge(a, b):
            return 0
        return int(self.graph[a][b][WEIGHT_ATTR])

    def has_edge(self, a: str, b: str) -> bool:
        """Check whether {a, b} has positive weight."""
        return self.weight(a, b) > 0

    def edges(self) -> List[Edge]:
        """Edge records sorted by canonical pair."""
        records = [Edge(a, b, int(data[WEIGHT_ATTR])) for a, b, data in self.graph.edges(data=True)]
        return sorted(records, key=lambda e: e.key)

    def isolated_nodes(self) -> List[str]:
        """Nodes with degree 0, in catalog order."""
        return [n for n in self.nodes() if self.graph.degree(n) == 0]

    def number_of_nodes(self) -> int:
        return self.graph.number_of_nodes()

    def number_of_edges(self) -> int:
        return self.graph.number_of_edges()

    def to_edge_dataframe(self) -> pd.DataFrame:
        """Edge list as DataFrame (source, target, weight)."""
        return pd.DataFrame(
            [e.to_dict() for e in self.edges()],
            columns=['source', 'target', 'weight']
        )

    def save_edge_list(self, path: str, format: str = 'csv') -> None:
        """
        Save edge list to disk.

        Args:
            path: Path to save the edge list
            format: Format ('csv', 'json', 'parquet')
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        df = self.to_edge_dataframe()
        if format == 'csv':
            df.to_csv(path, index=False)
        elif format == 'json':
            with open(path, 'w') as f:
                json.dump(df.to_dict(orient='records'), f, indent=2)
        elif format == 'parquet':
            df.to_parquet(path)
        else:
            raise ValueError(f"Unsupported format: {format}")

        logger.info(f"Edge list saved to {path} ({format})")

    def get_statistics(self) -> Dict[str, Any]:
        """Get graph statistics."""
        n_nodes = self.graph.number_of_nodes()
        return {
            'n_nodes': n_nodes,
            'n_edges': self.graph.number_of_edges(),
            'density': nx.density(self.graph),
            'is_connected': nx.is_connected(self.graph) if n_nodes > 0 else False,
            'n_isolated': len(self.isolated_nodes()),
            'total_weight': int(self.graph.size(weight=WEIGHT_ATTR))
        }
