# -----------------------------------------------------------------------------
# Name:         cantusFirmus.py
# Purpose:      Cantus firmus records and their evaluation
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------
"""
Cantus Firmus
=============

A :py:class:`CantusFirmus` is a named melody in a key and mode, against
which counterpoint exercises are written.

:py:func:`validateCantusFirmus` tests a melody for the traditional
properties of a cantus firmus:

   * it begins and ends on the tonic
   * every note belongs to the scale
   * it moves mostly by step: no more than a third of its moves are
     leaps wider than a third (warning)
   * no leap is wider than an octave
   * its highest note is reached only once (warning)
   * it has no melodic tritone
   * the note before the last is degree 2 or 7

The result is a :py:class:`~contrapunctus.result.ValidationResult`
whose issues carry :py:class:`~contrapunctus.rule.CantusRuleId`
identifiers.
"""

import logging
import unittest

from contrapunctus import intervals
from contrapunctus import pitches
from contrapunctus import scales
from contrapunctus.exercise import Exercise, ExerciseError
from contrapunctus.result import ResultCollector
from contrapunctus.rule import CantusRuleId
from contrapunctus.utilities import pairwise

# -----------------------------------------------------------------------------
# LOGGER
# -----------------------------------------------------------------------------

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = False
logger.addHandler(logging.NullHandler())

# -----------------------------------------------------------------------------
# MAIN CLASS
# -----------------------------------------------------------------------------


class CantusFirmus():
    """A cantus firmus: its notes, key and mode, and where it comes from."""

    def __init__(self, id, notes, key='C', mode='major', name='',
                 source='', difficulty=1):
        self.id = id
        self.pitches = tuple(pitches.parse(n) for n in notes)
        if not self.pitches:
            raise ExerciseError('The cantus firmus has no notes.')
        self.key = key
        self.mode = mode
        self.name = name
        self.source = source
        self.difficulty = difficulty

    def __repr__(self):
        return (f'<CantusFirmus {self.id} {self.key} {self.mode}, '
                f'{len(self.pitches)} notes>')

    def __len__(self):
        return len(self.pitches)

    @property
    def notes(self):
        return [p.nameWithOctave for p in self.pitches]

    @property
    def scale(self):
        return scales.Scale(self.key, self.mode)

    def getRange(self):
        """Return the lowest and highest pitches and the span between
        them in semitones."""
        lowest = min(self.pitches, key=lambda p: p.midi)
        highest = max(self.pitches, key=lambda p: p.midi)
        return lowest, highest, highest.midi - lowest.midi

    def getClimax(self):
        """Return the highest pitch, the index where it first occurs,
        and whether it occurs only once."""
        highest = max(p.midi for p in self.pitches)
        positions = [i for i, p in enumerate(self.pitches)
                     if p.midi == highest]
        return self.pitches[positions[0]], positions[0], len(positions) == 1

    def transpose(self, semitones):
        """Return a new cantus firmus moved by a number of semitones,
        spelled for its new key."""
        tonic = pitches.transposeBySemitones(self.scale.tonic, semitones,
                                             self.scale.prefersSharps())
        newKey = tonic.name
        preferSharps = scales.Scale(newKey, self.mode).prefersSharps()
        notes = [pitches.transposeBySemitones(p, semitones, preferSharps)
                 for p in self.pitches]
        return CantusFirmus(f'{self.id}-transposed-{newKey}', notes, newKey,
                            self.mode, self.name, self.source,
                            self.difficulty)

    def makeExercise(self, counterpoint, cpPosition='upper'):
        return Exercise(self.pitches, counterpoint, self.key, self.mode,
                        cpPosition)

    def validate(self):
        return validateCantusFirmus(self.pitches, self.key, self.mode)

# -----------------------------------------------------------------------------
# FUNCTIONS
# -----------------------------------------------------------------------------


def validateCantusFirmus(notes, key='C', mode='major'):
    notes = [pitches.parse(n) for n in notes]
    scale = scales.Scale(key, mode)
    collector = ResultCollector(len(notes))
    if not notes:
        collector.error(CantusRuleId.START_TONIC, -1,
                        'The cantus firmus has no notes.')
        return collector.finish()

    if not scale.isTonic(notes[0]):
        collector.error(CantusRuleId.START_TONIC, 0,
                        f'The cantus firmus must begin on the tonic, '
                        f'not {notes[0]}.')
    if not scale.isTonic(notes[-1]):
        collector.error(CantusRuleId.END_TONIC, len(notes) - 1,
                        f'The cantus firmus must end on the tonic, '
                        f'not {notes[-1]}.')

    for idx, p in enumerate(notes):
        if not scale.containsNote(p):
            collector.error(CantusRuleId.DIATONIC, idx,
                            f'Note {idx + 1}: {p} is not in '
                            f'{scale.tonic.name} {mode}.')

    leaps = 0
    for idx, (prev, curr) in enumerate(pairwise(notes), start=1):
        ivl = intervals.between(prev, curr)
        if ivl.simpleGeneric > 3:
            leaps += 1
        if ivl.generic > 8:
            collector.error(CantusRuleId.LARGE_LEAP, idx,
                            f'Notes {idx}-{idx + 1}: the leap of a '
                            f'{ivl.niceName} is wider than an octave.',
                            ivl.name)
        if intervals.isTritone(ivl):
            collector.error(CantusRuleId.TRITONE, idx,
                            f'Notes {idx}-{idx + 1}: melodic tritone.',
                            ivl.name)
    if leaps > len(notes) / 3:
        collector.warning(CantusRuleId.LEAP_COUNT, -1,
                          f'{leaps} leaps in {len(notes)} notes. '
                          f'A cantus firmus moves mostly by step.')

    highest = max(p.midi for p in notes)
    peaks = [i for i, p in enumerate(notes) if p.midi == highest]
    if len(peaks) > 1:
        shown = ', '.join(str(i + 1) for i in peaks)
        collector.warning(CantusRuleId.CLIMAX, peaks[1],
                          f'The highest note is reached more than once '
                          f'(notes {shown}).')

    if len(notes) > 2:
        degree = scale.degreeOf(notes[-2])
        if degree not in (2, 7):
            collector.error(CantusRuleId.PENULTIMATE, len(notes) - 2,
                            f'Note {len(notes) - 1}: the note before the '
                            f'last should be degree 2 or 7 to prepare the '
                            f'cadence.')
    result = collector.finish()
    logger.debug(f'Cantus firmus in {key} {mode}: {result!r}')
    return result

# -----------------------------------------------------------------------------


class Test(unittest.TestCase):

    def runTest(self):
        pass

    def test_getClimax(self):
        cf = CantusFirmus('fux-d-dorian',
                          ['D4', 'F4', 'E4', 'D4', 'G4', 'F4', 'A4',
                           'G4', 'F4', 'E4', 'D4'], 'D', 'dorian')
        p, idx, unique = cf.getClimax()
        self.assertEqual((p.nameWithOctave, idx, unique), ('A4', 6, True))
        self.assertEqual(cf.getRange()[2], 7)

    def test_transpose(self):
        cf = CantusFirmus('cf', ['C4', 'D4', 'F4', 'E4', 'D4', 'C4'])
        moved = cf.transpose(5)
        self.assertEqual(moved.key, 'F')
        self.assertEqual(moved.notes,
                         ['F4', 'G4', 'Bb4', 'A4', 'G4', 'F4'])


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
