"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
__init__.py (core module)

MAIN OBJECTIVE:
---------------
This script initializes the core module of the mention network, exposing the main configuration,
models, exceptions and constants for use throughout the framework.

Dependencies:
-------------
- mention_network.core.config
- mention_network.core.models
- mention_network.core.exceptions

MAIN FEATURES:
--------------
1) Exports PipelineConfig for configuration management
2) Exports data models (Entity, Document, Edge, AdjacencyMatrix)
3) Exports the exception hierarchy
4) Provides clean API for core components

Author:
-------
Antoine Lemor
"""

from mention_network.core.config import PipelineConfig
from mention_network.core.models import (
    Entity,
    Document,
    Edge,
    AdjacencyMatrix,
    pair_key
)
from mention_network.core.exceptions import (
    MentionNetworkError,
    ConfigurationError,
    CatalogError,
    MalformedIdentifierError,
    DuplicateEntityError,
    UnknownEntityError,
    EmptyDocumentError,
    AggregationError
)

__all__ = [
    'PipelineConfig',
    'Entity',
    'Document',
    'Edge',
    'AdjacencyMatrix',
    'pair_key',
    'MentionNetworkError',
    'ConfigurationError',
    'CatalogError',
    'MalformedIdentifierError',
    'DuplicateEntityError',
    'UnknownEntityError',
    'EmptyDocumentError',
    'AggregationError'
]
