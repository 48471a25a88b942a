# -----------------------------------------------------------------------------
# Name:         test_hints.py
# Purpose:      Tests for first-species note suggestions
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------

import unittest

from contrapunctus import hints
from contrapunctus import intervals
from contrapunctus.exercise import Exercise

# -----------------------------------------------------------------------------


class TestSuggestNotes(unittest.TestCase):

    def test_ranking(self):
        ex = Exercise(['C4', 'D4', 'C4'], ['C5'])
        result = hints.suggestNotes(ex, 1)
        names = [h.pitch.nameWithOctave for h in result]
        self.assertEqual(names, ['B4', 'F4', 'A4', 'F5', 'A5', 'D5', 'D4'])
        self.assertEqual([h.score for h in result],
                         [15, 13, 13, 11, 8, 2, 0])

    def test_issues(self):
        ex = Exercise(['C4', 'D4', 'C4'], ['C5'])
        byName = {h.pitch.nameWithOctave: h
                  for h in hints.suggestNotes(ex, 1)}
        self.assertIn('This would make parallel fifths or octaves.',
                      byName['D5'].issues)
        self.assertEqual(byName['D5'].interval, 'P8')
        self.assertEqual(byName['B4'].issues, ())
        self.assertEqual(byName['B4'].intervalName, 'major sixth')

    def test_firstNote(self):
        ex = Exercise(['C4', 'D4', 'C4'], [])
        result = hints.suggestNotes(ex, 0)
        perfect = [h for h in result if h.interval in ('P1', 'P5', 'P8')]
        self.assertTrue(all(h.score == hints.BASE_SCORE for h in perfect))
        self.assertEqual(result[0].score, hints.BASE_SCORE)
        for h in result:
            if h.interval in ('m3', 'M3', 'm6', 'M6'):
                self.assertEqual(h.score, 1)

    def test_consonantOnly(self):
        ex = Exercise(['C4', 'D4', 'C4'], ['C3'], cpPosition='lower')
        result = hints.suggestNotes(ex, 1)
        self.assertTrue(result)
        for h in result:
            self.assertLessEqual(h.pitch.midi, ex.cantusFirmus[1].midi)
            ivl = intervals.between(h.pitch, ex.cantusFirmus[1])
            self.assertTrue(intervals.isConsonant(ivl))

    def test_outOfRange(self):
        ex = Exercise(['C4', 'D4', 'C4'], [])
        self.assertRaises(IndexError, hints.suggestNotes, ex, 3)
        self.assertRaises(IndexError, hints.suggestNotes, ex, -1)


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
