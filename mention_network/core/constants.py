"""
PROJECT:
-------
ministry-mention-network

TITLE:
------
constants.py

MAIN OBJECTIVE:
---------------
This script defines global constants used throughout the mention network framework, including
the document identifier convention, tokenization pattern and processing defaults.

Dependencies:
-------------
- re

MAIN FEATURES:
--------------
1) Identifier shape (<prefix>-<name-tokens>-<suffix>)
2) Token pattern shared by catalog phrases and document text
3) Parallel processing defaults
4) Export formats and file names

Author:
-------
Antoine Lemor
"""

import re

# Identifier convention: minister-<name-tokens>-mandate-letter
DEFAULT_IDENTIFIER_PREFIX = "minister"
DEFAULT_IDENTIFIER_SUFFIX = "mandate-letter"
DEFAULT_IDENTIFIER_SEPARATOR = "-"

# A single name token inside an identifier
IDENTIFIER_TOKEN_PATTERN = re.compile(r"^[a-z0-9]+$")

# Word tokens used for matching (applied to case-folded text)
TOKEN_PATTERN = re.compile(r"\w+", re.UNICODE)

# Boilerplate fragments (none by default, corpus specific)
DEFAULT_BOILERPLATE_FRAGMENTS = []

# Performance constants
DEFAULT_N_WORKERS = 4
PARALLEL_MIN_DOCUMENTS = 200  # Smaller corpora are processed sequentially
DOCUMENTS_PER_CHUNK = 25

# Export
EXPORT_FORMATS = ("csv", "json", "parquet")
EDGE_LIST_FILE = "edges"
DEGREE_FILE = "degree_ranking.csv"
ADJACENCY_FILE = "adjacency_matrix.csv"
SUMMARY_FILE = "summary.json"

# Edge attribute name used in networkx graphs
WEIGHT_ATTR = "weight"
