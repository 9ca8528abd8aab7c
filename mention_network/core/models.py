"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
models.py

MAIN OBJECTIVE:
---------------
This script defines the core data models used throughout the mention network framework,
including entities, documents, weighted edges and the dense adjacency matrix.

Dependencies:
-------------
- dataclasses
- typing
- numpy
- pandas

MAIN FEATURES:
--------------
1) Entity model pairing a stable identifier with its surface name
2) Document model for one subject entity and its raw text
3) Edge record for an unordered pair of entities with integer weight
4) AdjacencyMatrix with explicit node ordering for visualization consumers

Author:
-------
Antoine Lemor
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Tuple
import numpy as np
import pandas as pd

from mention_network.core.exceptions import UnknownEntityError


def pair_key(a: str, b: str) -> Tuple[str, str]:
    """Canonical key of an unordered entity pair."""
    return (a, b) if a <= b else (b, a)


@dataclass(frozen=True)
class Entity:
    """Catalog entry: canonical identifier and matchable surface name."""
    identifier: str
    surface: str

    @property
    def n_words(self) -> int:
        """Number of words in the surface name."""
        return len(self.surface.split())

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {'identifier': self.identifier, 'surface': self.surface}


@dataclass
class Document:
    """Raw text owned by one subject entity."""
    subject: str
    text: str

    @property
    def n_lines(self) -> int:
        """Number of lines in the raw text."""
        return len(self.text.splitlines())


@dataclass(frozen=True)
class Edge:
    """Unordered weighted pair of entities."""
    source: str
    target: str
    weight: int

    def __post_init__(self):
        # Stored in canonical order so (A, B) and (B, A) compare equal
        if self.source > self.target:
            source, target = self.source, self.target
            object.__setattr__(self, 'source', target)
            object.__setattr__(self, 'target', source)

    @property
    def key(self) -> Tuple[str, str]:
        """Canonical pair key."""
        return (self.source, self.target)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {'source': self.source, 'target': self.target, 'weight': self.weight}


@dataclass
class AdjacencyMatrix:
    """Dense symmetric adjacency matrix with explicit node ordering."""
    nodes: List[str]
    values: np.ndarray
    display_clamp: Optional[int] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def shape(self) -> Tuple[int, int]:
        """Matrix shape."""
        return self.values.shape

    def index_of(self, node: str) -> int:
        """Row/column index of a node."""
        try:
            return self.nodes.index(node)
        except ValueError:
            raise UnknownEntityError(node) from None

    def cell(self, a: str, b: str) -> int:
        """Value of cell (a, b)."""
        return int(self.values[self.index_of(a), self.index_of(b)])

    def is_symmetric(self) -> bool:
        """Check matrix symmetry."""
        return bool(np.array_equal(self.values, self.values.T))

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a labelled DataFrame."""
        return pd.DataFrame(self.values, index=self.nodes, columns=self.nodes)
