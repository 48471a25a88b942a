# -----------------------------------------------------------------------------
# Name:         test_pitches.py
# Purpose:      Tests for the pitch model
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------

import unittest

from contrapunctus import pitches
from contrapunctus.pitches import Pitch, PitchParseError

# -----------------------------------------------------------------------------


class TestParse(unittest.TestCase):

    def test_midi(self):
        self.assertEqual(pitches.parse('C4').midi, 60)
        self.assertEqual(pitches.parse('A4').midi, 69)
        self.assertEqual(pitches.parse('Cb4').midi, 59)
        self.assertEqual(pitches.parse('B#4').midi, 72)
        self.assertEqual(pitches.parse('f#3').midi, 54)

    def test_spelling(self):
        p = pitches.parse('bb5')
        self.assertEqual(p.step, 'B')
        self.assertEqual(p.accidental, 'b')
        self.assertEqual(p.octave, 5)
        self.assertEqual(p.name, 'Bb')
        self.assertEqual(p.nameWithOctave, 'Bb5')
        self.assertEqual(str(p), 'Bb5')

    def test_passthrough(self):
        p = Pitch('E', '', 3)
        self.assertIs(pitches.parse(p), p)

    def test_malformed(self):
        for text in ['H4', 'C##4', 'C', '4C', 'C10', 'Cx4', '']:
            with self.assertRaises(PitchParseError):
                pitches.parse(text)
        self.assertRaises(PitchParseError, pitches.parse, 60)
        self.assertTrue(issubclass(PitchParseError, ValueError))

    def test_octaveDigits(self):
        # only ASCII digits, and no surrounding whitespace
        for text in ['C٤', 'D４', ' C4', 'C4 ', 'C4\n']:
            with self.assertRaises(PitchParseError):
                pitches.parse(text)

    def test_logerror(self):
        try:
            pitches.parse('Q4')
        except PitchParseError as err:
            report = err.logerror()
        self.assertTrue(report.startswith('PITCH ERROR'))
        self.assertIn('Q4', report)


class TestPitch(unittest.TestCase):

    def test_immutable(self):
        p = pitches.parse('D4')
        with self.assertRaises(AttributeError):
            p.octave = 5
        self.assertEqual(p.octave, 4)

    def test_enharmonic(self):
        cs = pitches.parse('C#4')
        db = pitches.parse('Db4')
        self.assertNotEqual(cs, db)
        self.assertTrue(cs.isEnharmonic(db))
        self.assertEqual(cs, pitches.parse('C#4'))
        self.assertEqual(len({cs, db, pitches.parse('C#4')}), 2)

    def test_frequency(self):
        self.assertAlmostEqual(pitches.parse('A4').frequency, 440.0)
        self.assertAlmostEqual(pitches.parse('A5').frequency, 880.0)

    def test_diatonicStepIndex(self):
        self.assertEqual(pitches.diatonicStepIndex(pitches.parse('C4')), 28)
        self.assertEqual(pitches.parse('B3').diatonicStepIndex, 27)
        self.assertEqual(pitches.parse('Cb4').diatonicStepIndex, 28)

    def test_toMusic21(self):
        for name, m21name in [('Bb3', 'B-3'), ('F#5', 'F#5'), ('C4', 'C4')]:
            p = pitches.parse(name)
            m21 = p.toMusic21()
            self.assertEqual(m21.nameWithOctave, m21name)
            self.assertEqual(m21.midi, p.midi)
        n = pitches.parse('G4').toNote(2.0)
        self.assertEqual(n.quarterLength, 2.0)
        self.assertEqual(n.pitch.midi, 67)


class TestSemitoneIndex(unittest.TestCase):

    def test_roundTrip(self):
        for midi in range(0, 128):
            self.assertEqual(pitches.fromSemitoneIndex(midi).midi, midi)
            self.assertEqual(
                pitches.fromSemitoneIndex(midi, preferSharps=False).midi,
                midi)
            p = pitches.fromSemitoneIndex(midi)
            self.assertEqual(pitches.toSemitoneIndex(p), midi)

    def test_spelling(self):
        self.assertEqual(pitches.fromSemitoneIndex(61).nameWithOctave, 'C#4')
        self.assertEqual(
            pitches.fromSemitoneIndex(61, preferSharps=False).nameWithOctave,
            'Db4')
        self.assertEqual(pitches.fromSemitoneIndex(59).nameWithOctave, 'B3')

    def test_transpose(self):
        p = pitches.transposeBySemitones(pitches.parse('E4'), 6)
        self.assertEqual(p.nameWithOctave, 'A#4')
        p = pitches.transposeBySemitones(pitches.parse('E4'), 6, False)
        self.assertEqual(p.nameWithOctave, 'Bb4')
        p = pitches.transposeBySemitones(pitches.parse('C4'), -1)
        self.assertEqual(p.nameWithOctave, 'B3')

    def test_pitchRange(self):
        names = [p.nameWithOctave for p in
                 pitches.pitchRange(pitches.parse('C4'), pitches.parse('E4'))]
        self.assertEqual(names, ['C4', 'C#4', 'D4', 'D#4', 'E4'])


class TestTables(unittest.TestCase):

    def test_enharmonics(self):
        for a, b in pitches.ENHARMONICS.items():
            self.assertEqual(pitches.ENHARMONICS[b], a)
            self.assertEqual(pitches.parse(a + '4').midi % 12,
                             pitches.parse(b + '4').midi % 12)
        self.assertEqual(pitches.enharmonicName('Db'), 'C#')
        self.assertIsNone(pitches.enharmonicName('D'))

    def test_vocalRanges(self):
        self.assertTrue(pitches.inVocalRange(pitches.parse('E2'), 'bass'))
        self.assertFalse(pitches.inVocalRange(pitches.parse('D2'), 'bass'))
        self.assertTrue(pitches.inVocalRange(pitches.parse('G5'), 'soprano'))
        self.assertFalse(pitches.inVocalRange(pitches.parse('A5'),
                                              'soprano'))

    def test_genericInterval(self):
        self.assertEqual(pitches.genericInterval(pitches.parse('C4'),
                                                 pitches.parse('E4')), 3)
        self.assertEqual(pitches.genericInterval(pitches.parse('E4'),
                                                 pitches.parse('C4')), 3)
        self.assertEqual(pitches.genericInterval(pitches.parse('C4'),
                                                 pitches.parse('C5')), 8)


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
