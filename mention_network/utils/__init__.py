"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
__init__.py (utils module)

MAIN OBJECTIVE:
---------------
This script initializes the utils module of the mention network, providing chunked document
processing shared by the sequential and parallel pipeline paths.

Dependencies:
-------------
- mention_network.utils.parallel_mention_processor

MAIN FEATURES:
--------------
1) Exports ParallelMentionProcessor
2) Exports process_document and process_document_chunk

Author:
-------
Antoine Lemor
"""

from mention_network.utils.parallel_mention_processor import (
    ParallelMentionProcessor,
    process_document,
    process_document_chunk
)

__all__ = [
    'ParallelMentionProcessor',
    'process_document',
    'process_document_chunk'
]
