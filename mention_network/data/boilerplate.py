"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
boilerplate.py

MAIN OBJECTIVE:
---------------
This script removes known template lines from a document before mention extraction. Template
sentences name other ministries in a non-substantive way and would otherwise create false edges.

Dependencies:
-------------
- typing
- logging

MAIN FEATURES:
--------------
1) Line-granularity removal (the whole line goes, not the fragment)
2) Pure substring predicate over normalized lines
3) Idempotent filtering with preserved line order

Author:
-------
Antoine Lemor
"""

import logging
from typing import Iterable, List, Tuple

from mention_network.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def normalize_line(line: str) -> str:
    """Case-fold and collapse whitespace."""
    return " ".join(line.casefold().split())


class BoilerplateFilter:
    """
    Drops every line containing one of a set of literal fragments.
    """

    def __init__(self, fragments: Iterable[str] = ()):
        """
        Initialize filter.

        Args:
            fragments: Literal boilerplate fragments, one per noise line
        """
        self.fragments: Tuple[str, ...] = tuple(dict.fromkeys(fragments))
        for fragment in self.fragments:
            if not isinstance(fragment, str) or not fragment.strip():
                raise ConfigurationError(f"Invalid boilerplate fragment: {fragment!r}")
        self._normalized = tuple(normalize_line(f) for f in self.fragments)

    def is_boilerplate(self, line: str) -> bool:
        """Check whether a line contains any fragment."""
        normalized = normalize_line(line)
        return any(fragment in normalized for fragment in self._normalized)

    def split(self, text: str) -> Tuple[List[str], List[str]]:
        """
        Partition text lines into kept and removed lines.

        Lines keep their own line endings, so "".join(kept) reproduces the
        kept text exactly and filtering twice changes nothing.

        Returns:
            (kept_lines, removed_lines), both in original order
        """
        kept, removed = [], []
        for line in text.splitlines(keepends=True):
            if self._normalized and self.is_boilerplate(line):
                removed.append(line)
            else:
                kept.append(line)
        return kept, removed

    def filter(self, text: str) -> str:
        """Return text without boilerplate lines."""
        kept, removed = self.split(text)
        if removed:
            logger.debug(f"Removed {len(removed)} boilerplate lines")
        return "".join(kept)

    __call__ = filter

    def __len__(self) -> int:
        return len(self.fragments)
