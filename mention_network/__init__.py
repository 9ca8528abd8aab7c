"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
__init__.py (package)

MAIN OBJECTIVE:
---------------
This script exposes the public API of the mention network: a library pipeline that counts how
often each ministry is named in every other ministry's document and builds a weighted graph.

Author:
-------
Antoine Lemor
"""

from mention_network.core import (
    PipelineConfig,
    Entity,
    Document,
    Edge,
    AdjacencyMatrix,
    MentionNetworkError,
    ConfigurationError,
    MalformedIdentifierError,
    DuplicateEntityError,
    UnknownEntityError,
    EmptyDocumentError,
    AggregationError
)
from mention_network.data import EntityCatalog, BoilerplateFilter, DocumentCorpus
from mention_network.extraction import MentionExtractor
from mention_network.metrics import EdgeAggregator, GraphModel, StatisticsEngine
from mention_network.pipelines import MentionNetworkPipeline, PipelineResults, build_mention_network

__version__ = '1.0.0'

__all__ = [
    'PipelineConfig',
    'Entity',
    'Document',
    'Edge',
    'AdjacencyMatrix',
    'MentionNetworkError',
    'ConfigurationError',
    'MalformedIdentifierError',
    'DuplicateEntityError',
    'UnknownEntityError',
    'EmptyDocumentError',
    'AggregationError',
    'EntityCatalog',
    'BoilerplateFilter',
    'DocumentCorpus',
    'MentionExtractor',
    'EdgeAggregator',
    'GraphModel',
    'StatisticsEngine',
    'MentionNetworkPipeline',
    'PipelineResults',
    'build_mention_network'
]
