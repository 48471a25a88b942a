# -----------------------------------------------------------------------------
# Name:         test_scales.py
# Purpose:      Tests for scales and scale degrees
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------

import unittest

from contrapunctus import pitches
from contrapunctus import scales
from contrapunctus.scales import Scale

# -----------------------------------------------------------------------------


def p(name):
    return pitches.parse(name)


class TestPatterns(unittest.TestCase):

    def test_patterns(self):
        for mode, pattern in scales.PATTERNS.items():
            self.assertEqual(len(pattern), 7, mode)
            self.assertEqual(pattern[0], 0, mode)
            self.assertEqual(list(pattern), sorted(pattern), mode)
        self.assertEqual(scales.getPattern('naturalMinor'),
                         scales.getPattern('aeolian'))

    def test_unknownMode(self):
        with self.assertLogs('contrapunctus.scales', level='WARNING'):
            pattern = scales.getPattern('hypomixolydian')
        self.assertEqual(pattern, scales.PATTERNS['major'])


class TestDegrees(unittest.TestCase):

    def test_major(self):
        c = Scale('C', 'major')
        self.assertEqual(c.degreeOf(p('C4')), 1)
        self.assertEqual(c.degreeOf(p('G2')), 5)
        self.assertEqual(c.degreeOf(p('B4')), 7)
        self.assertIsNone(c.degreeOf(p('F#4')))
        self.assertTrue(c.isLeadingTone(p('B3')))
        self.assertTrue(c.isTonic(p('C6')))

    def test_enharmonicMembership(self):
        f = Scale('F', 'major')
        self.assertTrue(f.containsNote(p('Bb4')))
        self.assertTrue(f.containsNote(p('A#4')))
        self.assertFalse(f.containsNote(p('B4')))

    def test_modalSeventh(self):
        d = Scale('D', 'dorian')
        self.assertEqual(d.degreeOf(p('C4')), 7)
        self.assertTrue(d.isLeadingTone(p('C5')))
        self.assertIsNone(d.degreeOf(p('C#4')))
        a = Scale('A', 'harmonicMinor')
        self.assertEqual(a.degreeOf(p('G#4')), 7)
        self.assertIsNone(a.degreeOf(p('G4')))

    def test_moduleFunctions(self):
        self.assertTrue(scales.containsNote(p('F#4'), 'G'))
        self.assertEqual(scales.degreeOf(p('E4'), 'E', 'phrygian'), 1)
        self.assertTrue(scales.isTonic(p('Bb2'), 'Bb'))
        self.assertTrue(scales.isLeadingTone(p('D#4'), 'E', 'harmonicMinor'))


class TestScale(unittest.TestCase):

    def test_getNotes(self):
        names = [n.nameWithOctave for n in Scale('F').getNotes(4)]
        self.assertEqual(names, ['F4', 'G4', 'A4', 'Bb4', 'C5', 'D5', 'E5'])
        names = [n.nameWithOctave for n in Scale('D').getNotes(3)]
        self.assertEqual(names, ['D3', 'E3', 'F#3', 'G3', 'A3', 'B3', 'C#4'])

    def test_leadingTone(self):
        self.assertEqual(Scale('G').leadingTone.name, 'F#')
        self.assertEqual(Scale('D', 'dorian').leadingTone.name, 'C')

    def test_getDiatonicRange(self):
        names = [n.nameWithOctave for n in
                 Scale('C').getDiatonicRange(p('A3'), p('D4'))]
        self.assertEqual(names, ['A3', 'B3', 'C4', 'D4'])

    def test_relatives(self):
        self.assertEqual(Scale('C').relativeMinor(),
                         Scale('A', 'naturalMinor'))
        self.assertEqual(Scale('A', 'naturalMinor').relativeMajor(),
                         Scale('C'))

    def test_toMusic21Key(self):
        k = Scale('A', 'naturalMinor').toMusic21Key()
        self.assertEqual(k.tonic.name, 'A')
        self.assertEqual(k.mode, 'minor')
        k = Scale('Bb').toMusic21Key()
        self.assertEqual(k.sharps, -2)
        k = Scale('D', 'dorian').toMusic21Key()
        self.assertEqual(k.mode, 'dorian')
        self.assertEqual(k.sharps, 0)


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
