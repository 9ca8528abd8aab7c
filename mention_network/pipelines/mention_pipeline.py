"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
mention_pipeline.py

MAIN OBJECTIVE:
---------------
This script orchestrates the complete extraction-and-aggregation run: catalog construction,
boilerplate filtering, mention extraction, edge aggregation, graph construction and statistics.

Dependencies:
-------------
- typing
- dataclasses
- datetime
- pathlib
- json
- logging
- time
- uuid

MAIN FEATURES:
--------------
1) Fatal catalog validation before any document is read
2) Per-document isolation (unknown subjects skipped, empty documents counted as zero mentions)
3) Sequential or parallel extraction depending on corpus size
4) Results container with edge list, degree ranking and adjacency matrix export

Author:
-------
Antoine Lemor
"""

import json
import logging
import time
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Any, Tuple

from mention_network.core.config import PipelineConfig
from mention_network.core.constants import (
    EDGE_LIST_FILE,
    DEGREE_FILE,
    ADJACENCY_FILE,
    SUMMARY_FILE
)
from mention_network.core.models import AdjacencyMatrix
from mention_network.data.catalog import EntityCatalog
from mention_network.data.corpus import DocumentCorpus
from mention_network.metrics.edge_aggregator import EdgeAggregator
from mention_network.metrics.graph_model import GraphModel
from mention_network.metrics.statistics_engine import StatisticsEngine
from mention_network.utils.parallel_mention_processor import (
    ParallelMentionProcessor,
    process_document_chunk
)

logger = logging.getLogger(__name__)


@dataclass
class PipelineResults:
    """
    Complete results from one pipeline run.
    """
    # Execution metadata
    run_id: str
    execution_timestamp: datetime
    execution_duration: float  # seconds
    config_used: PipelineConfig

    # Outputs
    catalog: EntityCatalog
    aggregator: EdgeAggregator
    graph: GraphModel
    statistics: StatisticsEngine
    degree_ranking: List[Tuple[str, int]]
    adjacency: AdjacencyMatrix

    # Per-document bookkeeping
    document_reports: List[Dict[str, Any]] = field(default_factory=list)
    skipped_documents: List[str] = field(default_factory=list)
    empty_documents: List[str] = field(default_factory=list)
    missing_documents: List[str] = field(default_factory=list)

    def summary(self) -> Dict[str, Any]:
        """Run summary."""
        return {
            'run_id': self.run_id,
            'timestamp': self.execution_timestamp.isoformat(),
            'duration_seconds': self.execution_duration,
            'n_documents': len(self.document_reports),
            'skipped_documents': self.skipped_documents,
            'empty_documents': self.empty_documents,
            'missing_documents': self.missing_documents,
            'aggregation': self.aggregator.get_statistics(),
            'graph': self.statistics.summary()
        }

    def export(self, output_dir: Optional[str] = None, format: Optional[str] = None) -> Path:
        """
        Write edge list, degree ranking, adjacency matrix and summary.

        Returns:
            Output directory
        """
        output_dir = Path(output_dir or self.config_used.output_dir)
        format = format or self.config_used.export_format
        output_dir.mkdir(parents=True, exist_ok=True)

        self.graph.save_edge_list(str(output_dir / f"{EDGE_LIST_FILE}.{format}"), format=format)
        self.statistics.degree_dataframe().to_csv(output_dir / DEGREE_FILE, index=False)
        self.adjacency.to_dataframe().to_csv(output_dir / ADJACENCY_FILE)
        with open(output_dir / SUMMARY_FILE, 'w') as f:
            json.dump(self.summary(), f, indent=2, default=str)

        logger.info(f"Results exported to {output_dir}")
        return output_dir


class MentionNetworkPipeline:
    """
    Builds the entity mention network from an already-acquired corpus.
    """

    def __init__(self, config: Optional[PipelineConfig] = None,
                 catalog: Optional[EntityCatalog] = None):
        """
        Initialize pipeline.

        Args:
            config: Pipeline configuration
            catalog: Prebuilt catalog (built from config.identifiers otherwise)

        Raises:
            ConfigurationError: invalid configuration
            MalformedIdentifierError, DuplicateEntityError: invalid catalog
        """
        self.config = config or PipelineConfig()
        logging.basicConfig(level=getattr(logging, self.config.log_level.upper(), logging.INFO))

        self.config.validate()
        if catalog is None:
            catalog = EntityCatalog.from_config(self.config)
        self.catalog = catalog

    def _extract(self, documents) -> Tuple[EdgeAggregator, List[Dict[str, Any]]]:
        fragments = self.config.boilerplate_fragments
        parallel = (self.config.use_parallel
                    and self.config.n_workers > 1
                    and len(documents) >= self.config.parallel_min_documents)

        if parallel:
            processor = ParallelMentionProcessor(
                n_workers=self.config.n_workers,
                documents_per_chunk=self.config.documents_per_chunk,
                executor=self.config.executor,
                show_progress=self.config.show_progress
            )
            return processor.process_documents(documents, self.catalog, fragments)

        logger.info(f"Processing {len(documents)} documents sequentially")
        pairs = [(d.subject, d.text) for d in documents]
        aggregator, reports, _ = process_document_chunk(pairs, self.catalog, fragments)
        return aggregator, reports

    def run(self, corpus: Mapping[str, str]) -> PipelineResults:
        """
        Run the complete pipeline.

        Args:
            corpus: Mapping from subject identifier to raw text

        Returns:
            PipelineResults
        """
        start = time.time()
        run_id = str(uuid.uuid4())
        logger.info(f"Starting mention network run {run_id}")

        documents = DocumentCorpus(corpus)

        skipped = []
        for error in documents.validate_against(self.catalog):
            logger.warning(f"Skipping document: {error}")
            skipped.append(error.identifier)

        missing = documents.missing_subjects(self.catalog)
        if missing:
            logger.warning(f"{len(missing)} catalog entities have no document: {missing}")

        aggregator, reports = self._extract(documents.known_documents(self.catalog))
        empty = [r['subject'] for r in reports if r['empty']]

        graph = GraphModel.from_aggregator(self.catalog, aggregator)
        statistics = StatisticsEngine(graph, heatmap_clamp=self.config.heatmap_clamp)

        results = PipelineResults(
            run_id=run_id,
            execution_timestamp=datetime.now(),
            execution_duration=time.time() - start,
            config_used=self.config,
            catalog=self.catalog,
            aggregator=aggregator,
            graph=graph,
            statistics=statistics,
            degree_ranking=statistics.degree_ranking(),
            adjacency=statistics.adjacency_matrix(),
            document_reports=reports,
            skipped_documents=skipped,
            empty_documents=empty,
            missing_documents=missing
        )

        logger.info(f"Run {run_id} complete in {results.execution_duration:.2f}s: "
                    f"{graph.number_of_edges()} edges, {len(skipped)} skipped, {len(empty)} empty")
        return results


def build_mention_network(corpus: Mapping[str, str],
                          config: Optional[PipelineConfig] = None) -> PipelineResults:
    """Convenience wrapper: identifiers default to the corpus keys.

    The caller's config is never modified.
    """
    config = config or PipelineConfig()
    if not config.identifiers:
        config = replace(config, identifiers=list(corpus))
    return MentionNetworkPipeline(config).run(corpus)
