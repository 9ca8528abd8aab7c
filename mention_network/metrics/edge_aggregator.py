"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
edge_aggregator.py

MAIN OBJECTIVE:
---------------
This script folds per-document mention sequences into symmetric co-mention weights, where the
weight of a pair counts mentions in both directions and self-mentions never reach the graph.

Dependencies:
-------------
- collections
- pandas
- typing
- logging

MAIN FEATURES:
--------------
1) Canonical unordered pair keys (sorted identifiers)
2) Self-mentions tallied separately and excluded from weights
3) Directed counts (who mentions whom) kept alongside undirected weights
4) Merge by summation for parallel partial results

Author:
-------
Antoine Lemor
"""

import logging
from collections import Counter
from typing import Dict, Iterable, Optional, Tuple

import pandas as pd

from mention_network.core.models import pair_key
from mention_network.core.exceptions import UnknownEntityError

logger = logging.getLogger(__name__)


class EdgeAggregator:
    """
    Accumulates unordered-pair weights from (subject, mentions) events.

    Aggregation is commutative and associative: documents may be added in
    any order and partial aggregators merged in any grouping.
    """

    def __init__(self, known_identifiers: Optional[Iterable[str]] = None):
        """
        Initialize aggregator.

        Args:
            known_identifiers: If given, every subject and mention must belong to it
        """
        self.known = frozenset(known_identifiers) if known_identifiers is not None else None
        self.weights: Counter = Counter()
        self.directed: Counter = Counter()
        self.self_mentions: Counter = Counter()
        self.n_documents = 0

    def _check(self, identifier: str) -> None:
        if self.known is not None and identifier not in self.known:
            raise UnknownEntityError(identifier)

    def add_mention(self, subject: str, mentioned: str) -> None:
        """Record one mention of `mentioned` inside the document of `subject`."""
        if mentioned == subject:
            self.self_mentions[subject] += 1
            return
        self.weights[pair_key(subject, mentioned)] += 1
        self.directed[(subject, mentioned)] += 1

    def add_document(self, subject: str, mentions: Iterable[str]) -> int:
        """
        Fold one document's mentions.

        Args:
            subject: Identifier of the document owner
            mentions: Mentioned identifiers, in any order

        Returns:
            Number of cross-references added (self-mentions excluded)

        Raises:
            UnknownEntityError: before any count changes, if the subject or
                any mention is not a known identifier
        """
        self._check(subject)
        mentions = list(mentions)
        for mentioned in mentions:
            self._check(mentioned)

        added = 0
        for mentioned in mentions:
            self.add_mention(subject, mentioned)
            if mentioned != subject:
                added += 1
        self.n_documents += 1
        return added

    def merge(self, other: 'EdgeAggregator') -> 'EdgeAggregator':
        """Add another aggregator's counts into this one."""
        self.weights.update(other.weights)
        self.directed.update(other.directed)
        self.self_mentions.update(other.self_mentions)
        self.n_documents += other.n_documents
        return self

    def weight_map(self) -> Dict[Tuple[str, str], int]:
        """Positive weights keyed by canonical pair."""
        return {pair: w for pair, w in self.weights.items() if w > 0}

    @property
    def total_mentions(self) -> int:
        """Cross-references counted so far."""
        return sum(self.weights.values())

    def to_directed_dataframe(self) -> pd.DataFrame:
        """Directed mention counts (subject -> mentioned)."""
        rows = [
            {'subject': s, 'mentioned': m, 'count': c}
            for (s, m), c in sorted(self.directed.items())
        ]
        return pd.DataFrame(rows, columns=['subject', 'mentioned', 'count'])

    def get_statistics(self) -> Dict:
        """Aggregation statistics."""
        return {
            'n_documents': self.n_documents,
            'n_pairs': len(self.weights),
            'total_mentions': self.total_mentions,
            'self_mentions': sum(self.self_mentions.values())
        }
