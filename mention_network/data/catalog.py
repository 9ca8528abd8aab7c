"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
catalog.py

MAIN OBJECTIVE:
---------------
This script builds the entity catalog, the validated and immutable list of ministries every other
component depends on, by reducing document identifiers to human-readable surface names.

Dependencies:
-------------
- pandas
- typing
- logging

MAIN FEATURES:
--------------
1) Identifier reduction (<prefix>-<name-tokens>-<suffix> to "name tokens")
2) Explicit surface overrides for ministries whose public name differs
3) Fatal validation: malformed identifiers and duplicate surface names
4) Lookups by identifier and by surface name

Author:
-------
Antoine Lemor
"""

import logging
from typing import Dict, List, Optional, Iterable, Iterator, Tuple
import pandas as pd

from mention_network.core.constants import (
    DEFAULT_IDENTIFIER_PREFIX,
    DEFAULT_IDENTIFIER_SUFFIX,
    DEFAULT_IDENTIFIER_SEPARATOR,
    IDENTIFIER_TOKEN_PATTERN,
    TOKEN_PATTERN
)
from mention_network.core.exceptions import (
    MalformedIdentifierError,
    DuplicateEntityError,
    UnknownEntityError
)
from mention_network.core.models import Entity

logger = logging.getLogger(__name__)


def normalize_surface(name: str) -> str:
    """Case-fold, replace hyphens with spaces and collapse whitespace."""
    return " ".join(name.casefold().replace("-", " ").split())


def phrase_tokens(text: str) -> Tuple[str, ...]:
    """Word tokens of an already case-folded phrase."""
    return tuple(TOKEN_PATTERN.findall(text))


def reduce_identifier(identifier: str,
                      prefix: str = DEFAULT_IDENTIFIER_PREFIX,
                      suffix: str = DEFAULT_IDENTIFIER_SUFFIX,
                      separator: str = DEFAULT_IDENTIFIER_SEPARATOR) -> str:
    """
    Reduce a document identifier to its entity surface name.

    'minister-national-defence-mandate-letter' -> 'national defence'

    Raises:
        MalformedIdentifierError: if the identifier does not have the
            <prefix><sep><name-tokens><sep><suffix> shape
    """
    if not isinstance(identifier, str) or not identifier:
        raise MalformedIdentifierError(str(identifier), "empty or not a string")

    tokens = identifier.split(separator)
    prefix_tokens = prefix.split(separator)
    suffix_tokens = suffix.split(separator)

    if tokens[:len(prefix_tokens)] != prefix_tokens:
        raise MalformedIdentifierError(identifier, f"missing prefix {prefix!r}")
    if tokens[-len(suffix_tokens):] != suffix_tokens:
        raise MalformedIdentifierError(identifier, f"missing suffix {suffix!r}")

    name_tokens = tokens[len(prefix_tokens):len(tokens) - len(suffix_tokens)]
    if not name_tokens:
        raise MalformedIdentifierError(identifier, "no name tokens")

    for token in name_tokens:
        if not IDENTIFIER_TOKEN_PATTERN.match(token):
            raise MalformedIdentifierError(identifier, f"invalid token {token!r}")

    return " ".join(name_tokens)


class EntityCatalog:
    """
    Ordered, immutable collection of entities.

    Surface names are full phrases; one may be contained in another
    ('defence' and 'national defence'), matching always uses whole phrases.
    """

    def __init__(self, entities: Iterable[Entity]):
        """
        Initialize catalog.

        Args:
            entities: Entities in catalog order

        Raises:
            DuplicateEntityError: if an identifier or a surface name repeats
            MalformedIdentifierError: if a surface name is not lowercase,
                hyphen-free and whitespace-collapsed, or has no word tokens
        """
        self._entities: Tuple[Entity, ...] = tuple(entities)
        self._by_identifier: Dict[str, Entity] = {}
        self._by_surface: Dict[str, Entity] = {}
        self._by_tokens: Dict[Tuple[str, ...], Entity] = {}

        for entity in self._entities:
            if entity.identifier in self._by_identifier:
                raise DuplicateEntityError(entity.surface, [entity.identifier, entity.identifier])

            # Scanned text is case-folded, so an unnormalized surface could never match
            if entity.surface != normalize_surface(entity.surface):
                raise MalformedIdentifierError(
                    entity.identifier,
                    f"surface {entity.surface!r} is not normalized "
                    f"(expected {normalize_surface(entity.surface)!r})"
                )

            tokens = phrase_tokens(entity.surface)
            if not tokens:
                raise MalformedIdentifierError(entity.identifier, "surface has no word tokens")

            # Token-level collision also makes matching ambiguous
            existing = self._by_surface.get(entity.surface) or self._by_tokens.get(tokens)
            if existing is not None:
                raise DuplicateEntityError(entity.surface, [existing.identifier, entity.identifier])

            self._by_identifier[entity.identifier] = entity
            self._by_surface[entity.surface] = entity
            self._by_tokens[tokens] = entity

        logger.info(f"Entity catalog built: {len(self._entities)} entities")

    @classmethod
    def from_identifiers(cls,
                         identifiers: Iterable[str],
                         prefix: str = DEFAULT_IDENTIFIER_PREFIX,
                         suffix: str = DEFAULT_IDENTIFIER_SUFFIX,
                         separator: str = DEFAULT_IDENTIFIER_SEPARATOR,
                         surface_overrides: Optional[Dict[str, str]] = None) -> 'EntityCatalog':
        """
        Build catalog from document identifiers.

        Args:
            identifiers: Document identifiers, one per entity
            prefix: Fixed identifier prefix
            suffix: Fixed identifier suffix
            separator: Token separator inside identifiers
            surface_overrides: Optional explicit surface name per identifier

        Returns:
            EntityCatalog
        """
        surface_overrides = surface_overrides or {}
        entities = []
        for identifier in identifiers:
            # Identifier shape is validated even when overridden
            surface = reduce_identifier(identifier, prefix, suffix, separator)
            if identifier in surface_overrides:
                surface = normalize_surface(surface_overrides[identifier])
                logger.debug(f"Surface override for {identifier}: {surface!r}")
            entities.append(Entity(identifier=identifier, surface=surface))
        return cls(entities)

    @classmethod
    def from_config(cls, config) -> 'EntityCatalog':
        """Build catalog from a PipelineConfig."""
        return cls.from_identifiers(
            config.identifiers,
            prefix=config.identifier_prefix,
            suffix=config.identifier_suffix,
            separator=config.identifier_separator,
            surface_overrides=config.surface_overrides
        )

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_identifier

    def __repr__(self) -> str:
        return f"EntityCatalog({len(self._entities)} entities)"

    @property
    def entities(self) -> Tuple[Entity, ...]:
        """Entities in catalog order."""
        return self._entities

    @property
    def identifiers(self) -> List[str]:
        """Identifiers in catalog order."""
        return [e.identifier for e in self._entities]

    @property
    def surfaces(self) -> List[str]:
        """Surface names in catalog order."""
        return [e.surface for e in self._entities]

    def pairs(self) -> List[Tuple[str, str]]:
        """(identifier, surface) pairs in catalog order."""
        return [(e.identifier, e.surface) for e in self._entities]

    def get(self, identifier: str) -> Entity:
        """Get entity by identifier."""
        try:
            return self._by_identifier[identifier]
        except KeyError:
            raise UnknownEntityError(identifier) from None

    def surface_of(self, identifier: str) -> str:
        """Surface name of an identifier."""
        return self.get(identifier).surface

    def entity_for_surface(self, surface: str) -> Optional[Entity]:
        """Entity registered under an exact surface name, if any."""
        return self._by_surface.get(normalize_surface(surface))

    def require(self, identifier: str) -> None:
        """Raise UnknownEntityError if the identifier is not registered."""
        if identifier not in self._by_identifier:
            raise UnknownEntityError(identifier)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert catalog to DataFrame."""
        return pd.DataFrame(
            [e.to_dict() for e in self._entities],
            columns=['identifier', 'surface']
        )
