"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
__init__.py (extraction module)

MAIN OBJECTIVE:
---------------
This script initializes the extraction module of the mention network, providing the longest-match
mention scanner.

Dependencies:
-------------
- mention_network.extraction.mention_extractor

MAIN FEATURES:
--------------
1) Exports MentionExtractor and MentionSequence

Author:
-------
Antoine Lemor
"""

from mention_network.extraction.mention_extractor import MentionExtractor, MentionSequence

__all__ = [
    'MentionExtractor',
    'MentionSequence'
]
