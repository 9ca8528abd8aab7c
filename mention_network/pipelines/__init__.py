"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
__init__.py (pipelines module)

MAIN OBJECTIVE:
---------------
This script initializes the pipelines module of the mention network, exposing the end-to-end
extraction-and-aggregation pipeline.

Dependencies:
-------------
- mention_network.pipelines.mention_pipeline

MAIN FEATURES:
--------------
1) Exports MentionNetworkPipeline and PipelineResults
2) Exports build_mention_network convenience wrapper

Author:
-------
Antoine Lemor
"""

from mention_network.pipelines.mention_pipeline import (
    MentionNetworkPipeline,
    PipelineResults,
    build_mention_network
)

__all__ = [
    'MentionNetworkPipeline',
    'PipelineResults',
    'build_mention_network'
]
