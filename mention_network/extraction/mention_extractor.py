"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
mention_extractor.py

MAIN OBJECTIVE:
---------------
This script finds entity mentions inside a filtered document, scanning each case-folded line
left to right and always taking the longest catalog phrase that starts at the current token.

Dependencies:
-------------
- collections
- typing
- logging

MAIN FEATURES:
--------------
1) Token trie built once from the catalog surface names
2) Longest-match, non-overlapping scan per line
3) Lazy and restartable mention sequences
4) Self-mentions kept (they are dropped at aggregation)

Author:
-------
Antoine Lemor
"""

import logging
from collections import Counter
from typing import Dict, Iterator, List, Optional, Tuple

from mention_network.core.constants import TOKEN_PATTERN
from mention_network.data.catalog import EntityCatalog, phrase_tokens

logger = logging.getLogger(__name__)

# Trie key holding the identifier of a complete phrase (tokens are never empty)
_TERMINAL = ""


class MentionSequence:
    """
    Lazy, finite sequence of mentioned identifiers.
    Every iteration rescans the text from the start.
    """

    def __init__(self, extractor: 'MentionExtractor', text: str):
        self._extractor = extractor
        self._text = text

    def __iter__(self) -> Iterator[str]:
        for line in self._text.casefold().splitlines():
            for identifier, _ in self._extractor._scan_line(line):
                yield identifier

    def to_list(self) -> List[str]:
        """Materialize the sequence."""
        return list(self)

    def __repr__(self) -> str:
        return f"MentionSequence({len(self._text)} chars)"


class MentionExtractor:
    """
    Pure, corpus-agnostic text scanner over the catalog's surface names.

    'the national defence portfolio' with catalog entries 'defence' and
    'national defence' yields only 'national defence'.
    """

    def __init__(self, catalog: EntityCatalog):
        """
        Initialize extractor.

        Args:
            catalog: Entity catalog providing the surface names
        """
        self.catalog = catalog
        self._trie: Dict = {}
        self.max_phrase_length = 0

        for entity in catalog:
            tokens = phrase_tokens(entity.surface)
            node = self._trie
            for token in tokens:
                node = node.setdefault(token, {})
            node[_TERMINAL] = entity.identifier
            self.max_phrase_length = max(self.max_phrase_length, len(tokens))

        logger.debug(f"Mention trie built: {len(catalog)} phrases, "
                     f"longest {self.max_phrase_length} tokens")

    def _longest_match(self, tokens: List[str], start: int) -> Tuple[Optional[str], int]:
        """
        Longest catalog phrase starting at tokens[start].

        Returns:
            (identifier, n_tokens) or (None, 0)
        """
        node = self._trie
        best, best_length = None, 0
        position = start
        while position < len(tokens):
            node = node.get(tokens[position])
            if node is None:
                break
            position += 1
            if _TERMINAL in node:
                best, best_length = node[_TERMINAL], position - start
        return best, best_length

    def _scan_line(self, line: str) -> Iterator[Tuple[str, int]]:
        """Yield (identifier, token_position) for one case-folded line."""
        tokens = TOKEN_PATTERN.findall(line)
        position = 0
        while position < len(tokens):
            identifier, length = self._longest_match(tokens, position)
            if identifier is None:
                position += 1
            else:
                yield identifier, position
                position += length

    def extract(self, text: str) -> MentionSequence:
        """
        Extract mentions from filtered document text.

        Args:
            text: Filtered document text (any case)

        Returns:
            MentionSequence of identifiers in text order
        """
        return MentionSequence(self, text)

    def extract_lines(self, text: str) -> List[Tuple[int, List[str]]]:
        """(line_number, identifiers) for every line with at least one mention."""
        result = []
        for line_number, line in enumerate(text.casefold().splitlines()):
            found = [identifier for identifier, _ in self._scan_line(line)]
            if found:
                result.append((line_number, found))
        return result

    def count(self, text: str) -> Counter:
        """Mention counts per identifier."""
        return Counter(self.extract(text))
