"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
__init__.py (data module)

MAIN OBJECTIVE:
---------------
This script initializes the data module of the mention network, providing access to the entity
catalog, the boilerplate filter and the document corpus.

Dependencies:
-------------
- mention_network.data.catalog
- mention_network.data.boilerplate
- mention_network.data.corpus

MAIN FEATURES:
--------------
1) Exports EntityCatalog for entity registration and lookup
2) Exports BoilerplateFilter for noise line removal
3) Exports DocumentCorpus for corpus validation

Author:
-------
Antoine Lemor
"""

from mention_network.data.catalog import EntityCatalog, reduce_identifier, normalize_surface
from mention_network.data.boilerplate import BoilerplateFilter
from mention_network.data.corpus import DocumentCorpus

__all__ = [
    'EntityCatalog',
    'reduce_identifier',
    'normalize_surface',
    'BoilerplateFilter',
    'DocumentCorpus'
]
