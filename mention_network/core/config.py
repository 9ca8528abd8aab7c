"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
config.py

MAIN OBJECTIVE:
---------------
This script manages the configuration settings for the mention network pipeline, providing
centralized configuration management with environment variable overrides.

Dependencies:
-------------
- os
- json
- dataclasses
- typing

MAIN FEATURES:
--------------
1) Central configuration dataclass for catalog, filtering and processing parameters
2) Environment variable integration for flexible deployment
3) Validation before any document is processed
4) JSON persistence of the configuration

Author:
-------
Antoine Lemor
"""

import os
import json
from dataclasses import dataclass, field, fields
from typing import List, Dict, Optional, Any
from mention_network.core.constants import *
from mention_network.core.exceptions import ConfigurationError


@dataclass
class PipelineConfig:
    """
    Central configuration for the mention network pipeline.
    Can be overridden via environment variables or config files.
    """

    # Entity catalog
    identifiers: List[str] = field(default_factory=list)
    identifier_prefix: str = DEFAULT_IDENTIFIER_PREFIX
    identifier_suffix: str = DEFAULT_IDENTIFIER_SUFFIX
    identifier_separator: str = DEFAULT_IDENTIFIER_SEPARATOR
    surface_overrides: Dict[str, str] = field(default_factory=dict)

    # Boilerplate lines to drop before matching
    boilerplate_fragments: List[str] = field(default_factory=lambda: list(DEFAULT_BOILERPLATE_FRAGMENTS))

    # Performance settings
    n_workers: int = field(default_factory=lambda: int(os.getenv("MENTION_N_WORKERS", str(DEFAULT_N_WORKERS))))
    use_parallel: bool = True
    parallel_min_documents: int = PARALLEL_MIN_DOCUMENTS
    documents_per_chunk: int = DOCUMENTS_PER_CHUNK
    executor: str = "process"  # process or thread
    show_progress: bool = False

    # Presentation hint carried to the visualization layer, never applied here
    heatmap_clamp: Optional[int] = None

    # Output configuration
    output_dir: str = field(default_factory=lambda: os.getenv("MENTION_OUTPUT_DIR", "results/"))
    export_format: str = "csv"
    log_level: str = field(default_factory=lambda: os.getenv("MENTION_LOG_LEVEL", "INFO"))

    def validate(self) -> bool:
        """Validate configuration consistency."""
        if not self.identifier_separator:
            raise ConfigurationError("Identifier separator must not be empty")
        if not self.identifier_prefix or not self.identifier_suffix:
            raise ConfigurationError("Identifier prefix and suffix must not be empty")

        for fragment in self.boilerplate_fragments:
            if not isinstance(fragment, str) or not fragment.strip():
                raise ConfigurationError(f"Invalid boilerplate fragment: {fragment!r}")

        unknown_overrides = set(self.surface_overrides) - set(self.identifiers)
        if unknown_overrides:
            raise ConfigurationError(
                f"Surface overrides for unknown identifiers: {sorted(unknown_overrides)}"
            )

        if self.n_workers < 1:
            raise ConfigurationError(f"n_workers must be >= 1, got {self.n_workers}")
        if self.documents_per_chunk < 1:
            raise ConfigurationError(
                f"documents_per_chunk must be >= 1, got {self.documents_per_chunk}"
            )
        if self.executor not in ("process", "thread"):
            raise ConfigurationError(f"Unknown executor: {self.executor}")
        if self.export_format not in EXPORT_FORMATS:
            raise ConfigurationError(f"Unsupported export format: {self.export_format}")
        if self.heatmap_clamp is not None and self.heatmap_clamp < 1:
            raise ConfigurationError("heatmap_clamp must be a positive integer")

        return True

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {
            'catalog': {
                'identifiers': list(self.identifiers),
                'identifier_prefix': self.identifier_prefix,
                'identifier_suffix': self.identifier_suffix,
                'identifier_separator': self.identifier_separator,
                'surface_overrides': dict(self.surface_overrides)
            },
            'filtering': {
                'boilerplate_fragments': list(self.boilerplate_fragments)
            },
            'performance': {
                'n_workers': self.n_workers,
                'use_parallel': self.use_parallel,
                'parallel_min_documents': self.parallel_min_documents,
                'documents_per_chunk': self.documents_per_chunk,
                'executor': self.executor,
                'show_progress': self.show_progress
            },
            'output': {
                'heatmap_clamp': self.heatmap_clamp,
                'output_dir': self.output_dir,
                'export_format': self.export_format,
                'log_level': self.log_level
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PipelineConfig':
        """Build config from a flat or sectioned dictionary (as written by to_dict)."""
        known = {f.name for f in fields(cls)}
        flat = {}
        for key, value in data.items():
            if key in known:
                flat[key] = value
            elif isinstance(value, dict):
                flat.update(value)
            else:
                raise ConfigurationError(f"Unknown configuration key: {key}")

        unknown = set(flat) - known
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**flat)

    @classmethod
    def from_file(cls, path: str) -> 'PipelineConfig':
        """Load configuration from JSON file."""
        with open(path, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)

    def save(self, path: str) -> None:
        """Save configuration to JSON file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
