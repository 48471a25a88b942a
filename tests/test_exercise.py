# -----------------------------------------------------------------------------
# Name:         test_exercise.py
# Purpose:      Tests for building exercises and their music21 scores
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------

import unittest

from music21 import note
from music21 import stream

from contrapunctus import pitches
from contrapunctus.exercise import Exercise, ExerciseError

# -----------------------------------------------------------------------------


def partNamed(score, name):
    for part in score.getElementsByClass(stream.Part):
        if part.partName == name:
            return part
    return None


class TestExercise(unittest.TestCase):

    def test_parsing(self):
        ex = Exercise(['D4', 'F4', 'E4', 'D4'], ['A4', 'r', 'C#5', 'D5'],
                      key='D', mode='dorian')
        self.assertEqual(ex.counterpoint[0], pitches.parse('A4'))
        self.assertIsNone(ex.counterpoint[1])
        self.assertEqual(ex.counterpoint[2].accidental, '#')
        self.assertEqual(ex.scale.tonic.name, 'D')
        self.assertTrue(ex.isUpper)

    def test_pitchObjects(self):
        cf = [pitches.parse('C4'), pitches.parse('D4')]
        ex = Exercise(cf, ['G4', 'F4'])
        self.assertEqual(ex.cantusFirmus, tuple(cf))

    def test_equality(self):
        a = Exercise(['C4', 'D4'], ['G4', 'F4'])
        b = Exercise(['C4', 'D4'], ['G4', 'F4'])
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertNotEqual(a, Exercise(['C4', 'D4'], ['G4', 'F4'],
                                        cpPosition='lower'))

    def test_errors(self):
        self.assertRaises(ExerciseError, Exercise, [], ['C4'])
        self.assertRaises(ExerciseError, Exercise, ['C4', None], ['C4', 'C4'])
        self.assertRaises(ExerciseError, Exercise, ['C4'], ['C4'],
                          cpPosition='alto')
        self.assertRaises(pitches.PitchParseError,
                          Exercise, ['C4', 'D44'], ['C4'])

    def test_restNames(self):
        ex = Exercise(['C4', 'D4'], ['R', 'rest', 'G4'])
        self.assertEqual(ex.counterpoint[:2], (None, None))
        # an empty entry is a mistake, not a rest
        self.assertRaises(pitches.PitchParseError,
                          Exercise, ['C4', 'D4'], ['', 'G4', 'F4'])
        self.assertRaises(pitches.PitchParseError,
                          Exercise, ['C4', 'D4'], [' r', 'G4', 'F4'])

    def test_logerror(self):
        err = ExerciseError('The cantus firmus has no notes.')
        self.assertEqual(err.logerror(),
                         'EXERCISE ERROR\nThe cantus firmus has no notes.')


class TestScore(unittest.TestCase):

    def test_firstSpecies(self):
        ex = Exercise(['C4', 'D4', 'C4'], ['C5', 'B4', 'C5'])
        score = ex.toScore()
        parts = list(score.getElementsByClass(stream.Part))
        self.assertEqual(len(parts), 2)
        cp = partNamed(score, 'Counterpoint')
        cf = partNamed(score, 'Cantus firmus')
        self.assertEqual([n.nameWithOctave for n in cp.pitches],
                         ['C5', 'B4', 'C5'])
        self.assertEqual([n.nameWithOctave for n in cf.pitches],
                         ['C4', 'D4', 'C4'])
        self.assertEqual(cf.duration.quarterLength, 12.0)

    def test_secondSpecies(self):
        ex = Exercise(['C4', 'D4', 'C4'], [None, 'C5', 'A4', 'B4', 'C5'])
        score = ex.toScore(ratio=2)
        cp = partNamed(score, 'Counterpoint')
        notesAndRests = list(cp.notesAndRests)
        self.assertIsInstance(notesAndRests[0], note.Rest)
        self.assertEqual(notesAndRests[1].quarterLength, 2.0)
        self.assertEqual(notesAndRests[-1].quarterLength, 4.0)
        self.assertEqual(cp.duration.quarterLength, 12.0)

    def test_keySignature(self):
        ex = Exercise(['F4', 'G4', 'F4'], ['F5', 'E5', 'F5'], key='F')
        score = ex.toScore()
        cp = partNamed(score, 'Counterpoint')
        keys = list(cp.getElementsByClass('Key'))
        self.assertEqual(keys[0].sharps, -1)


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
