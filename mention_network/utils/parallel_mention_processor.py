"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
parallel_mention_processor.py

MAIN OBJECTIVE:
---------------
This script runs boilerplate filtering and mention extraction over chunks of documents, in
sequence or in a worker pool, and reduces the partial aggregators by summation.

Dependencies:
-------------
- multiprocessing
- concurrent.futures
- typing
- logging
- tqdm

MAIN FEATURES:
--------------
1) Per-document processing shared by sequential and parallel paths
2) Empty documents isolated as zero-mention documents
3) Chunked process or thread pool execution with tqdm progress
4) Associative-commutative merge of partial EdgeAggregators

Author:
-------
Antoine Lemor
"""

import logging
import multiprocessing as mp
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional, Sequence, Tuple, Any

from tqdm import tqdm

from mention_network.core.constants import DOCUMENTS_PER_CHUNK
from mention_network.core.exceptions import EmptyDocumentError, AggregationError
from mention_network.core.models import Document
from mention_network.data.boilerplate import BoilerplateFilter
from mention_network.data.catalog import EntityCatalog
from mention_network.extraction.mention_extractor import MentionExtractor
from mention_network.metrics.edge_aggregator import EdgeAggregator

logger = logging.getLogger(__name__)


def process_document(document: Document,
                     boilerplate: BoilerplateFilter,
                     extractor: MentionExtractor,
                     aggregator: EdgeAggregator) -> Dict[str, Any]:
    """
    Filter one document, extract its mentions and fold them into aggregator.

    Raises:
        EmptyDocumentError: if nothing is left after filtering (nothing is aggregated)
    """
    kept, removed = boilerplate.split(document.text)
    filtered = "".join(kept)
    if not filtered.strip():
        raise EmptyDocumentError(document.subject)

    mentions = extractor.extract(filtered)
    self_before = aggregator.self_mentions[document.subject]
    n_cross = aggregator.add_document(document.subject, mentions)

    return {
        'subject': document.subject,
        'n_lines_removed': len(removed),
        'n_mentions': n_cross,
        'n_self_mentions': aggregator.self_mentions[document.subject] - self_before,
        'empty': False
    }


def process_document_chunk(documents: Sequence[Tuple[str, str]],
                           catalog: EntityCatalog,
                           fragments: Sequence[str],
                           chunk_idx: int = 0) -> Tuple[EdgeAggregator, List[Dict[str, Any]], int]:
    """
    Process a chunk of (subject, text) pairs.

    Returns:
        Tuple of (partial_aggregator, document_reports, chunk_idx)
    """
    boilerplate = BoilerplateFilter(fragments)
    extractor = MentionExtractor(catalog)
    aggregator = EdgeAggregator(catalog.identifiers)
    reports = []

    for subject, text in documents:
        document = Document(subject=subject, text=text)
        try:
            reports.append(process_document(document, boilerplate, extractor, aggregator))
        except EmptyDocumentError as e:
            logger.info(f"{e}; counted as zero mentions")
            aggregator.add_document(subject, [])
            reports.append({
                'subject': subject,
                'n_lines_removed': document.n_lines,
                'n_mentions': 0,
                'n_self_mentions': 0,
                'empty': True
            })

    return aggregator, reports, chunk_idx


class ParallelMentionProcessor:
    """
    Chunked mention extraction over a worker pool.
    """

    def __init__(self, n_workers: Optional[int] = None,
                 documents_per_chunk: int = DOCUMENTS_PER_CHUNK,
                 executor: str = "process",
                 show_progress: bool = False):
        """
        Initialize the parallel processor.

        Args:
            n_workers: Number of workers (None for CPU count)
            documents_per_chunk: Documents sent to a worker at once
            executor: 'process' or 'thread'
            show_progress: Display a tqdm progress bar
        """
        self.n_workers = n_workers or mp.cpu_count()
        self.documents_per_chunk = max(1, documents_per_chunk)
        self.executor = executor
        self.show_progress = show_progress

        logger.info(f"ParallelMentionProcessor initialized: {self.n_workers} {executor} workers, "
                    f"{self.documents_per_chunk} documents per chunk")

    def _make_executor(self):
        if self.executor == "thread":
            return ThreadPoolExecutor(max_workers=self.n_workers)
        return ProcessPoolExecutor(max_workers=self.n_workers, mp_context=mp.get_context('spawn'))

    def process_documents(self,
                          documents: Sequence[Document],
                          catalog: EntityCatalog,
                          fragments: Sequence[str]) -> Tuple[EdgeAggregator, List[Dict[str, Any]]]:
        """
        Process documents in parallel chunks.

        Args:
            documents: Documents with known subjects
            catalog: Entity catalog
            fragments: Boilerplate fragments

        Returns:
            Tuple of (merged_aggregator, document_reports in input order)

        Raises:
            AggregationError: if any chunk fails (no partial result is returned)
        """
        merged = EdgeAggregator(catalog.identifiers)
        if not documents:
            return merged, []

        pairs = [(d.subject, d.text) for d in documents]
        chunks = [pairs[i:i + self.documents_per_chunk]
                  for i in range(0, len(pairs), self.documents_per_chunk)]
        chunk_reports: Dict[int, List[Dict[str, Any]]] = {}

        logger.info(f"Processing {len(pairs)} documents in {len(chunks)} chunks")

        with self._make_executor() as executor:
            futures = {
                executor.submit(process_document_chunk, chunk, catalog, list(fragments), idx): idx
                for idx, chunk in enumerate(chunks)
            }

            with tqdm(total=len(chunks), desc="Extracting mentions", unit='chunks',
                      disable=not self.show_progress) as pbar:
                for future in as_completed(futures):
                    chunk_idx = futures[future]
                    try:
                        partial, reports, _ = future.result()
                    except Exception as e:
                        logger.error(f"Failed to process chunk {chunk_idx}: {e}")
                        raise AggregationError(f"Chunk {chunk_idx} failed: {e}") from e

                    merged.merge(partial)
                    chunk_reports[chunk_idx] = reports
                    pbar.set_postfix({'pairs': len(merged.weights)})
                    pbar.update(1)

        reports = [r for idx in sorted(chunk_reports) for r in chunk_reports[idx]]
        return merged, reports
