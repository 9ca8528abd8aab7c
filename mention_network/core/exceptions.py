"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
exceptions.py

MAIN OBJECTIVE:
---------------
This script defines custom exception classes for the mention network framework, separating
fatal catalog errors from per-document errors that only exclude one document from the graph.

Dependencies:
-------------
None

MAIN FEATURES:
--------------
1) Base MentionNetworkError exception class
2) Fatal catalog construction errors (malformed identifiers, duplicate entities)
3) Per-document errors (unknown subjects, empty documents)
4) Configuration and aggregation errors

Author:
-------
Antoine Lemor
"""


class MentionNetworkError(Exception):
    """Base exception for the mention network."""
    pass


class ConfigurationError(MentionNetworkError):
    """Configuration-related errors."""
    pass


class CatalogError(MentionNetworkError):
    """Catalog construction errors. Always fatal."""
    pass


class MalformedIdentifierError(CatalogError):
    """Identifier does not decompose into <prefix>-<name-tokens>-<suffix>."""

    def __init__(self, identifier: str, reason: str = ""):
        self.identifier = identifier
        self.reason = reason
        message = f"Malformed identifier: {identifier!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class DuplicateEntityError(CatalogError):
    """Two identifiers reduce to the same surface name."""

    def __init__(self, surface: str, identifiers):
        self.surface = surface
        self.identifiers = tuple(identifiers)
        super().__init__(
            f"Duplicate entity {surface!r} for identifiers {list(self.identifiers)}"
        )


class UnknownEntityError(MentionNetworkError):
    """Identifier is not registered in the catalog."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Unknown entity: {identifier!r}")


class EmptyDocumentError(MentionNetworkError):
    """Document has no text left after boilerplate filtering."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Document {identifier!r} is empty after filtering")


class AggregationError(MentionNetworkError):
    """Mention aggregation failed for a batch of documents."""
    pass
