"""
Unit tests for core configuration, models and exceptions.
"""

import pytest
import numpy as np
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from mention_network.core.config import PipelineConfig
from mention_network.core.models import Entity, Document, Edge, AdjacencyMatrix, pair_key
from mention_network.core.exceptions import (
    MentionNetworkError, CatalogError, ConfigurationError,
    MalformedIdentifierError, DuplicateEntityError, UnknownEntityError
)


class TestConfig:
    """Test configuration."""

    def test_default_config(self, monkeypatch):
        """Test default configuration."""
        monkeypatch.delenv("MENTION_N_WORKERS", raising=False)
        config = PipelineConfig()

        assert config.identifier_prefix == "minister"
        assert config.identifier_suffix == "mandate-letter"
        assert config.identifier_separator == "-"
        assert config.n_workers == 4
        assert config.boilerplate_fragments == []
        assert config.validate()

    def test_env_override(self, monkeypatch):
        """Test environment variable override."""
        monkeypatch.setenv("MENTION_N_WORKERS", "8")
        assert PipelineConfig().n_workers == 8

    def test_config_validation(self):
        """Test configuration validation."""
        with pytest.raises(ConfigurationError):
            PipelineConfig(boilerplate_fragments=["   "]).validate()

        with pytest.raises(ConfigurationError):
            PipelineConfig(n_workers=0).validate()

        with pytest.raises(ConfigurationError):
            PipelineConfig(executor="gpu").validate()

        with pytest.raises(ConfigurationError):
            PipelineConfig(surface_overrides={"minister-x-mandate-letter": "x"}).validate()

    def test_config_round_trip(self, tmp_path):
        """Test save and load."""
        config = PipelineConfig(
            identifiers=["minister-health-mandate-letter"],
            surface_overrides={"minister-health-mandate-letter": "Health"},
            boilerplate_fragments=["shared priority"],
            n_workers=2,
            heatmap_clamp=10
        )
        path = tmp_path / "config.json"
        config.save(str(path))

        loaded = PipelineConfig.from_file(str(path))
        assert loaded == config

    def test_config_to_dict(self):
        """Test configuration export."""
        config_dict = PipelineConfig().to_dict()

        assert 'catalog' in config_dict
        assert 'filtering' in config_dict
        assert 'performance' in config_dict
        assert config_dict['catalog']['identifier_prefix'] == "minister"

    def test_unknown_key(self):
        """Unknown keys are rejected."""
        with pytest.raises(ConfigurationError):
            PipelineConfig.from_dict({'colour': 'blue'})


class TestModels:
    """Test data models."""

    def test_pair_key(self):
        assert pair_key('b', 'a') == ('a', 'b')
        assert pair_key('a', 'b') == ('a', 'b')

    def test_edge_canonical_order(self):
        """Edges compare equal regardless of endpoint order."""
        assert Edge('b', 'a', 3) == Edge('a', 'b', 3)
        assert Edge('b', 'a', 3).key == ('a', 'b')
        assert Edge('b', 'a', 3).to_dict() == {'source': 'a', 'target': 'b', 'weight': 3}

    def test_entity(self):
        entity = Entity('minister-national-defence-mandate-letter', 'national defence')
        assert entity.n_words == 2
        assert entity.to_dict()['surface'] == 'national defence'

    def test_document(self):
        assert Document('a', 'one\ntwo\n').n_lines == 2

    def test_adjacency_matrix(self):
        matrix = AdjacencyMatrix(
            nodes=['a', 'b'],
            values=np.array([[0, 2], [2, 0]])
        )
        assert matrix.shape == (2, 2)
        assert matrix.cell('a', 'b') == 2
        assert matrix.is_symmetric()
        assert list(matrix.to_dataframe().columns) == ['a', 'b']

    def test_adjacency_matrix_unknown_node(self):
        matrix = AdjacencyMatrix(nodes=['a', 'b'], values=np.array([[0, 2], [2, 0]]))
        with pytest.raises(UnknownEntityError):
            matrix.cell('a', 'x')
        with pytest.raises(UnknownEntityError):
            matrix.index_of('x')


class TestExceptions:
    """Test exception hierarchy."""

    def test_hierarchy(self):
        assert issubclass(MalformedIdentifierError, CatalogError)
        assert issubclass(DuplicateEntityError, CatalogError)
        assert issubclass(CatalogError, MentionNetworkError)
        assert issubclass(UnknownEntityError, MentionNetworkError)

    def test_attributes(self):
        error = DuplicateEntityError('health', ['a', 'b'])
        assert error.surface == 'health'
        assert error.identifiers == ('a', 'b')
        assert UnknownEntityError('x').identifier == 'x'
        assert 'bad' in str(MalformedIdentifierError('bad', 'missing prefix'))
