"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
__init__.py (metrics module)

MAIN OBJECTIVE:
---------------
This script initializes the metrics module of the mention network, exposing mention aggregation,
the graph model and the statistics engine.

Dependencies:
-------------
- mention_network.metrics.edge_aggregator
- mention_network.metrics.graph_model
- mention_network.metrics.statistics_engine

MAIN FEATURES:
--------------
1) Exports EdgeAggregator for symmetric weight accumulation
2) Exports GraphModel for node, neighbor, degree and weight queries
3) Exports StatisticsEngine for degree ranking and adjacency matrix

Author:
-------
Antoine Lemor
"""

from mention_network.metrics.edge_aggregator import EdgeAggregator
from mention_network.metrics.graph_model import GraphModel
from mention_network.metrics.statistics_engine import StatisticsEngine

__all__ = [
    'EdgeAggregator',
    'GraphModel',
    'StatisticsEngine'
]
