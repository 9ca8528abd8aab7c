"""
Tests for the longest-match mention scanner.
"""

import sys
from pathlib import Path
# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import unittest
from collections import Counter

from mention_network.core.models import Entity
from mention_network.data.catalog import EntityCatalog
from mention_network.extraction.mention_extractor import MentionExtractor, MentionSequence


class TestLongestMatch(unittest.TestCase):
    """Phrase-prefix and substring entity names."""

    def setUp(self):
        """Set up test fixtures."""
        self.catalog = EntityCatalog([
            Entity('D', 'defence'),
            Entity('ND', 'national defence'),
            Entity('NDV', 'national defence and veterans'),
            Entity('V', 'veterans'),
        ])
        self.extractor = MentionExtractor(self.catalog)

    def test_longer_phrase_wins(self):
        """'national defence' is not shadowed by 'defence'."""
        mentions = self.extractor.extract("the national defence portfolio").to_list()
        self.assertEqual(mentions, ['ND'])

    def test_shorter_phrase_alone(self):
        self.assertEqual(self.extractor.extract("defence spending").to_list(), ['D'])

    def test_longest_of_three(self):
        text = "minister of national defence and veterans affairs"
        self.assertEqual(self.extractor.extract(text).to_list(), ['NDV'])

    def test_partial_long_phrase_falls_back(self):
        """A failed long match still yields the longest complete phrase."""
        text = "national defence and security"
        self.assertEqual(self.extractor.extract(text).to_list(), ['ND'])

    def test_broken_phrase(self):
        text = "national security and defence"
        self.assertEqual(self.extractor.extract(text).to_list(), ['D'])

    def test_no_overlap(self):
        catalog = EntityCatalog([Entity('AB', 'a b'), Entity('BC', 'b c')])
        extractor = MentionExtractor(catalog)
        self.assertEqual(extractor.extract("a b c").to_list(), ['AB'])

    def test_max_phrase_length(self):
        self.assertEqual(self.extractor.max_phrase_length, 4)


class TestNormalization(unittest.TestCase):
    """Case folding, tokenization and line handling."""

    def setUp(self):
        """Set up test fixtures."""
        self.catalog = EntityCatalog.from_identifiers([
            'minister-agriculture-and-agri-food-mandate-letter',
            'minister-health-mandate-letter',
            'minister-national-defence-mandate-letter',
        ])
        self.extractor = MentionExtractor(self.catalog)
        self.agri, self.health, self.defence = self.catalog.identifiers

    def test_case_folding(self):
        mentions = self.extractor.extract("The Minister of National Defence").to_list()
        self.assertEqual(mentions, [self.defence])

    def test_hyphenated_text(self):
        text = "Work with the Minister of Agriculture and Agri-Food."
        self.assertEqual(self.extractor.extract(text).to_list(), [self.agri])

    def test_word_boundaries(self):
        self.assertEqual(self.extractor.extract("healthy defenceless").to_list(), [])

    def test_no_match_across_lines(self):
        self.assertEqual(self.extractor.extract("national\ndefence").to_list(), [])

    def test_text_order(self):
        text = "Health first.\nThen national defence, then health again."
        self.assertEqual(self.extractor.extract(text).to_list(),
                         [self.health, self.defence, self.health])

    def test_extract_lines(self):
        text = "nothing here\nhealth and national defence\n\nhealth"
        self.assertEqual(self.extractor.extract_lines(text), [
            (1, [self.health, self.defence]),
            (3, [self.health]),
        ])

    def test_count(self):
        counts = self.extractor.count("health, health and national defence")
        self.assertEqual(counts, Counter({self.health: 2, self.defence: 1}))


class TestMentionSequence(unittest.TestCase):
    """Laziness, restartability and self-mentions."""

    def setUp(self):
        """Set up test fixtures."""
        self.catalog = EntityCatalog([Entity('A', 'alpha'), Entity('B', 'beta')])
        self.extractor = MentionExtractor(self.catalog)

    def test_repeated_mentions(self):
        self.assertEqual(self.extractor.extract("beta beta alpha").to_list(), ['B', 'B', 'A'])

    def test_restartable(self):
        sequence = self.extractor.extract("alpha beta")
        self.assertIsInstance(sequence, MentionSequence)
        self.assertEqual(list(sequence), ['A', 'B'])
        self.assertEqual(list(sequence), ['A', 'B'])

    def test_lazy(self):
        iterator = iter(self.extractor.extract("alpha\nbeta"))
        self.assertEqual(next(iterator), 'A')
        self.assertEqual(next(iterator), 'B')
        with self.assertRaises(StopIteration):
            next(iterator)

    def test_empty_text(self):
        self.assertEqual(self.extractor.extract("").to_list(), [])


if __name__ == '__main__':
    unittest.main()
