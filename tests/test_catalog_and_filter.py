"""
Unit tests for the entity catalog, boilerplate filter and document corpus.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from mention_network.core.exceptions import (
    ConfigurationError, MalformedIdentifierError,
    DuplicateEntityError, UnknownEntityError
)
from mention_network.core.models import Entity
from mention_network.data import (
    EntityCatalog, BoilerplateFilter, DocumentCorpus,
    reduce_identifier, normalize_surface
)


IDENTIFIERS = [
    "minister-national-defence-mandate-letter",
    "minister-health-mandate-letter",
    "minister-agriculture-and-agri-food-mandate-letter",
]


class TestIdentifierReduction:
    """Test identifier to surface reduction."""

    def test_reduce(self):
        assert reduce_identifier(IDENTIFIERS[0]) == "national defence"
        assert reduce_identifier(IDENTIFIERS[2]) == "agriculture and agri food"

    def test_custom_convention(self):
        assert reduce_identifier("ml_foreign_affairs_2021", prefix="ml",
                                 suffix="2021", separator="_") == "foreign affairs"

    @pytest.mark.parametrize("identifier", [
        "deputy-national-defence-mandate-letter",   # wrong prefix
        "minister-national-defence-letter",         # wrong suffix
        "minister-mandate-letter",                  # no name tokens
        "minister-National-defence-mandate-letter", # uppercase token
        "minister--defence-mandate-letter",         # empty token
        "",
    ])
    def test_malformed(self, identifier):
        with pytest.raises(MalformedIdentifierError):
            reduce_identifier(identifier)

    def test_normalize_surface(self):
        assert normalize_surface("  Agriculture and  Agri-Food ") == "agriculture and agri food"


class TestEntityCatalog:
    """Test catalog construction and lookups."""

    def test_from_identifiers(self):
        catalog = EntityCatalog.from_identifiers(IDENTIFIERS)

        assert len(catalog) == 3
        assert catalog.identifiers == IDENTIFIERS
        assert catalog.surfaces == ["national defence", "health", "agriculture and agri food"]
        assert catalog.pairs()[1] == (IDENTIFIERS[1], "health")
        assert IDENTIFIERS[1] in catalog
        assert "minister-finance-mandate-letter" not in catalog

    def test_malformed_aborts_catalog(self):
        with pytest.raises(MalformedIdentifierError):
            EntityCatalog.from_identifiers(IDENTIFIERS + ["not-a-ministry"])

    def test_duplicate_identifier(self):
        with pytest.raises(DuplicateEntityError):
            EntityCatalog.from_identifiers(IDENTIFIERS + [IDENTIFIERS[0]])

    def test_duplicate_surface(self):
        with pytest.raises(DuplicateEntityError) as exc_info:
            EntityCatalog.from_identifiers(
                ["minister-health-mandate-letter", "minister-public-health-mandate-letter"],
                surface_overrides={"minister-public-health-mandate-letter": "Health"}
            )
        assert exc_info.value.surface == "health"

    def test_substring_surfaces_allowed(self):
        """'defence' inside 'national defence' is not a duplicate."""
        catalog = EntityCatalog([Entity("D", "defence"), Entity("ND", "national defence")])
        assert catalog.surfaces == ["defence", "national defence"]

    @pytest.mark.parametrize("surface", ["Alpha", "national-defence", "national  defence", " health"])
    def test_unnormalized_surface_rejected(self, surface):
        with pytest.raises(MalformedIdentifierError):
            EntityCatalog([Entity("A", surface), Entity("B", "beta")])

    def test_case_variant_surfaces_cannot_coexist(self):
        """'Health' is rejected rather than silently duplicating 'health'."""
        with pytest.raises(MalformedIdentifierError):
            EntityCatalog([Entity("A", "health"), Entity("B", "Health")])

    def test_surface_override(self):
        catalog = EntityCatalog.from_identifiers(
            IDENTIFIERS,
            surface_overrides={IDENTIFIERS[1]: "Health and Wellness"}
        )
        assert catalog.surface_of(IDENTIFIERS[1]) == "health and wellness"
        assert catalog.entity_for_surface("Health and Wellness").identifier == IDENTIFIERS[1]

    def test_override_does_not_hide_malformed_identifier(self):
        with pytest.raises(MalformedIdentifierError):
            EntityCatalog.from_identifiers(["health"], surface_overrides={"health": "health"})

    def test_unknown_lookup(self):
        catalog = EntityCatalog.from_identifiers(IDENTIFIERS)
        with pytest.raises(UnknownEntityError):
            catalog.get("minister-finance-mandate-letter")
        with pytest.raises(UnknownEntityError):
            catalog.require("minister-finance-mandate-letter")
        assert catalog.entity_for_surface("finance") is None

    def test_to_dataframe(self):
        df = EntityCatalog.from_identifiers(IDENTIFIERS).to_dataframe()
        assert list(df.columns) == ['identifier', 'surface']
        assert len(df) == 3


class TestBoilerplateFilter:
    """Test line-granularity boilerplate removal."""

    def test_shared_priority_line_removed(self):
        text = "intro line\nthis is a shared priority for beta\nclosing line"
        result = BoilerplateFilter(["shared priority"]).filter(text)

        assert result == "intro line\nclosing line"
        assert "beta" not in result

    def test_idempotent(self):
        text = "a\nshared priority one\n\nb\nanother Shared  Priority\nc\n"
        bp = BoilerplateFilter(["shared priority"])
        once = bp.filter(text)

        assert bp.filter(once) == once

    def test_case_and_whitespace_insensitive(self):
        bp = BoilerplateFilter(["Shared Priority"])
        assert bp.is_boilerplate("This is a SHARED   priority.")
        assert not bp.is_boilerplate("Shared responsibility")

    def test_order_preserved(self):
        kept, removed = BoilerplateFilter(["noise"]).split("one\nnoise x\ntwo\nthree noise\nfour")
        assert kept == ["one\n", "two\n", "four"]
        assert removed == ["noise x\n", "three noise\n"]

    @pytest.mark.parametrize("text", [
        "a\nnoise\n\n",
        "health\nshared priority x\n\n",
        "a\n\n",
        "a\n\n\n",
        "a\r\nnoise\r\n\r\n",
        "noise",
    ])
    def test_idempotent_with_trailing_blank_lines(self, text):
        bp = BoilerplateFilter(["noise", "shared priority"])
        once = bp.filter(text)
        assert bp.filter(once) == once

    def test_no_fragments_is_identity(self):
        bp = BoilerplateFilter()
        for text in ("a\n\n", "a\n\n\n", "a\r\nb\n", ""):
            assert bp.filter(text) == text

    def test_no_fragments(self):
        bp = BoilerplateFilter()
        assert len(bp) == 0
        assert bp("keep\nall") == "keep\nall"

    def test_blank_fragment_rejected(self):
        with pytest.raises(ConfigurationError):
            BoilerplateFilter(["ok", "  "])


class TestDocumentCorpus:
    """Test corpus validation against the catalog."""

    def test_partition(self):
        catalog = EntityCatalog.from_identifiers(IDENTIFIERS)
        corpus = DocumentCorpus({
            IDENTIFIERS[1]: "text",
            "minister-finance-mandate-letter": "text",
            IDENTIFIERS[0]: None,
        })

        errors = corpus.validate_against(catalog)
        assert [e.identifier for e in errors] == ["minister-finance-mandate-letter"]
        assert [d.subject for d in corpus.known_documents(catalog)] == [IDENTIFIERS[0], IDENTIFIERS[1]]
        assert corpus.missing_subjects(catalog) == [IDENTIFIERS[2]]
        assert corpus.documents[IDENTIFIERS[0]].text == ""
