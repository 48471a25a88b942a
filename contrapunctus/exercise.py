# -----------------------------------------------------------------------------
# Name:         exercise.py
# Purpose:      A cantus firmus and a counterpoint to be evaluated
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------
"""
Exercise
========

An :py:class:`Exercise` pairs a cantus firmus with a counterpoint and
names the key, the mode and the voice in which the counterpoint is
written ('upper' or 'lower').

Notes may be given as pitch names ('F#4') or as
:py:class:`~contrapunctus.pitches.Pitch` objects.  A rest in the
counterpoint is written as None.  A name that cannot be read raises a
:py:class:`~contrapunctus.pitches.PitchParseError` at once: an
exercise is either well formed or is never built.

>>> ex = Exercise(['D4', 'F4', 'E4', 'D4'], ['A4', 'A4', 'C#5', 'D5'],
...               key='D', mode='dorian')
>>> ex.counterpoint[2]
<Pitch C#5>
"""

import logging
import unittest

from music21 import meter
from music21 import metadata
from music21 import note
from music21 import stream

from contrapunctus import pitches
from contrapunctus import scales

# -----------------------------------------------------------------------------
# LOGGER
# -----------------------------------------------------------------------------

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = False
logger.addHandler(logging.NullHandler())

# -----------------------------------------------------------------------------
# MODULE VARIABLES
# -----------------------------------------------------------------------------

VOICE_POSITIONS = ('upper', 'lower')
REST_NAMES = ('r', 'rest')

# -----------------------------------------------------------------------------
# EXCEPTION HANDLERS
# -----------------------------------------------------------------------------


class ExerciseError(Exception):

    def __init__(self, desc):
        super().__init__(desc)
        self.desc = desc
        self.report = ''

    def logerror(self):
        self.report += f'EXERCISE ERROR\n{self.desc}'
        logger.error(self.report)
        return self.report

# -----------------------------------------------------------------------------
# MAIN CLASS
# -----------------------------------------------------------------------------


class Exercise:
    """A cantus firmus, a counterpoint, a key, a mode and the position
    of the counterpoint relative to the cantus."""

    def __init__(self, cantusFirmus, counterpoint, key='C',
                 mode='major', cpPosition='upper'):
        if cpPosition not in VOICE_POSITIONS:
            raise ExerciseError(
                f'The counterpoint must be the upper or the lower voice, '
                f'not {cpPosition!r}.')
        if any(n is None for n in cantusFirmus):
            raise ExerciseError('The cantus firmus cannot contain rests.')
        cf = tuple(pitches.parse(n) for n in cantusFirmus)
        if not cf:
            raise ExerciseError('The cantus firmus has no notes.')
        self.cantusFirmus = cf
        self.counterpoint = tuple(readCounterpointNote(n)
                                  for n in counterpoint)
        self.key = key
        self.mode = mode
        self.cpPosition = cpPosition
        self.scale = scales.Scale(key, mode)

    def __repr__(self):
        return (f'<Exercise {self.key} {self.mode}, '
                f'{len(self.cantusFirmus)} cantus notes, '
                f'{len(self.counterpoint)} counterpoint notes, '
                f'{self.cpPosition}>')

    def __eq__(self, other):
        if not isinstance(other, Exercise):
            return NotImplemented
        return self.asTuple() == other.asTuple()

    def __hash__(self):
        return hash(self.asTuple())

    def asTuple(self):
        return (self.cantusFirmus, self.counterpoint, self.key,
                self.mode, self.cpPosition)

    @property
    def isUpper(self):
        return self.cpPosition == 'upper'

    def toScore(self, ratio=1):
        """Build a two-part :class:`~music21.stream.Score`, counterpoint
        on the side given by cpPosition, for notation and export.
        The cantus firmus is written in whole notes and the counterpoint
        in notes of 4/ratio quarters."""
        cpLength = 4.0 / ratio
        cpPart = stream.Part()
        cpPart.partName = 'Counterpoint'
        cfPart = stream.Part()
        cfPart.partName = 'Cantus firmus'
        for part in (cpPart, cfPart):
            part.append(self.scale.toMusic21Key())
            part.append(meter.TimeSignature('4/4'))
        for p in self.cantusFirmus:
            cfPart.append(p.toNote(4.0))
        for idx, p in enumerate(self.counterpoint):
            # the final note fills its measure
            length = 4.0 if idx == len(self.counterpoint) - 1 else cpLength
            if p is None:
                r = note.Rest()
                r.quarterLength = length
                cpPart.append(r)
            else:
                cpPart.append(p.toNote(length))
        score = stream.Score()
        score.metadata = metadata.Metadata()
        score.metadata.title = f'Counterpoint in {self.key} {self.mode}'
        if self.isUpper:
            score.insert(0, cpPart)
            score.insert(0, cfPart)
        else:
            score.insert(0, cfPart)
            score.insert(0, cpPart)
        return score

# -----------------------------------------------------------------------------
# FUNCTIONS
# -----------------------------------------------------------------------------


def readCounterpointNote(n):
    """Parse one counterpoint entry; None and the rest names give None."""
    if n is None:
        return None
    if isinstance(n, str) and n.lower() in REST_NAMES:
        return None
    return pitches.parse(n)

# -----------------------------------------------------------------------------


class Test(unittest.TestCase):

    def runTest(self):
        pass

    def test_exercise(self):
        ex = Exercise(['C4', 'D4'], [None, 'rest', 'B4'], cpPosition='upper')
        self.assertEqual(ex.counterpoint[:2], (None, None))
        self.assertRaises(ExerciseError, Exercise, [], [])
        self.assertRaises(ExerciseError, Exercise, ['C4'], ['C4'],
                          cpPosition='middle')
        self.assertRaises(pitches.PitchParseError, Exercise, ['C4'], ['X4'])


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
