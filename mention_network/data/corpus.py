"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
corpus.py

MAIN OBJECTIVE:
---------------
This script wraps the already-acquired document corpus (subject identifier to raw text) and checks
it against the entity catalog before any text is processed.

Dependencies:
-------------
- typing
- logging

MAIN FEATURES:
--------------
1) Document objects built from a plain mapping
2) Separation of known subjects from unknown ones
3) Detection of catalog entities with no document

Author:
-------
Antoine Lemor
"""

import logging
from typing import Dict, List, Mapping, Iterator

from mention_network.core.models import Document
from mention_network.core.exceptions import UnknownEntityError

logger = logging.getLogger(__name__)


class DocumentCorpus:
    """
    Read-only corpus, one document per subject entity.
    """

    def __init__(self, texts: Mapping[str, str]):
        """
        Initialize corpus.

        Args:
            texts: Mapping from subject identifier to raw text
        """
        self.documents: Dict[str, Document] = {}
        for subject, text in texts.items():
            self.documents[subject] = Document(subject=subject, text=text or "")

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents.values())

    def __len__(self) -> int:
        return len(self.documents)

    def __contains__(self, subject: object) -> bool:
        return subject in self.documents

    def validate_against(self, catalog) -> List[UnknownEntityError]:
        """
        Check every subject against the catalog.

        Returns:
            One UnknownEntityError per document whose subject is not in the catalog
        """
        errors = []
        for subject in self.documents:
            try:
                catalog.require(subject)
            except UnknownEntityError as e:
                errors.append(e)
        return errors

    def known_documents(self, catalog) -> List[Document]:
        """Documents whose subject is in the catalog, in catalog order."""
        return [self.documents[i] for i in catalog.identifiers if i in self.documents]

    def missing_subjects(self, catalog) -> List[str]:
        """Catalog identifiers with no document."""
        return [i for i in catalog.identifiers if i not in self.documents]
