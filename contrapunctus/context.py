# -----------------------------------------------------------------------------
# Name:         context.py
# Purpose:      Preparing an exercise for evaluation
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------
"""
Context
=======

An :py:class:`ExerciseContext` prepares an
:py:class:`~contrapunctus.exercise.Exercise` for evaluation in a
particular species.

When a context is created, several things happen automatically:

#. The species profile is selected (or taken from the caller).
#. For each position in the counterpoint a
   :py:class:`Position` is made, holding:

    * the position index and the counterpoint pitch (None for a rest)
    * the metrical role (downbeat, semi-strong, weak)
    * the index and pitch of the cantus firmus note sounding against it
    * the harmonic interval between the two, measured from the lower
      voice to the upper voice
    * the scale degree of the counterpoint pitch
    * the manner of approach and departure
      (:py:class:`~contrapunctus.consecutions.Consecutions`)

#. The downbeat positions and the sounding (non-rest) positions
   are listed for the structural and melodic checks.

A context is built once per evaluation and is not shared.
"""

import logging
import unittest

from contrapunctus import consecutions
from contrapunctus import intervals
from contrapunctus import speciesProfile
from contrapunctus.exercise import Exercise
from contrapunctus.speciesProfile import MetricalRole

# -----------------------------------------------------------------------------
# LOGGER
# -----------------------------------------------------------------------------

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = False
logger.addHandler(logging.NullHandler())

# -----------------------------------------------------------------------------
# MAIN CLASSES
# -----------------------------------------------------------------------------


class Position():
    """One note (or rest) of the counterpoint and the cantus firmus
    note it sounds against."""

    def __init__(self, index, pitch, role, cfIndex, cfPitch):
        self.index = index
        self.pitch = pitch
        self.role = role
        self.cfIndex = cfIndex
        self.cfPitch = cfPitch
        self.harmonicInterval = None
        self.degree = None
        self.consecutions = None

    def __repr__(self):
        return (f'<Position {self.index} {self.pitch} '
                f'{self.role.value} over {self.cfPitch}>')

    @property
    def isRest(self):
        return self.pitch is None

    @property
    def number(self):
        """1-based note number, as shown to the user."""
        return self.index + 1


class ExerciseContext():
    """An exercise laid out position by position for one species."""

    def __init__(self, exercise, species=None, profile=None):
        if profile is None:
            profile = speciesProfile.getProfile(species)
        self.exercise = exercise
        self.profile = profile
        self.scale = exercise.scale
        self.isUpper = exercise.isUpper
        self.cantusFirmus = exercise.cantusFirmus
        self.counterpoint = exercise.counterpoint
        self.cpLength = len(self.counterpoint)
        self.positions = []
        self.setupPositions()
        self.sounding = [pos for pos in self.positions if not pos.isRest]
        self.strongIndices = speciesProfile.strongPositions(profile,
                                                            self.cpLength)
        logger.debug(f'Prepared {self.cpLength} positions for '
                     f'{profile.species.name.lower()} species.')

    def __repr__(self):
        return (f'<ExerciseContext {self.profile.species.name.lower()} '
                f'species, {self.cpLength} positions>')

    def __len__(self):
        return self.cpLength

    def __getitem__(self, index):
        return self.positions[index]

    def setupPositions(self):
        cons = consecutions.makeConsecutions(self.counterpoint)
        lastCf = len(self.cantusFirmus) - 1
        for idx, p in enumerate(self.counterpoint):
            role = speciesProfile.roleOf(self.profile, idx, self.cpLength)
            cfIndex = min(speciesProfile.cfIndexOf(self.profile, idx), lastCf)
            pos = Position(idx, p, role, cfIndex, self.cantusFirmus[cfIndex])
            if p is not None:
                pos.harmonicInterval = self.harmonicInterval(pos.cfPitch, p)
                pos.degree = self.scale.degreeOf(p)
                pos.consecutions = cons[idx]
            self.positions.append(pos)

    def harmonicInterval(self, cfPitch, cpPitch):
        """Measure from the lower voice to the upper voice."""
        if self.isUpper:
            return intervals.between(cfPitch, cpPitch)
        else:
            return intervals.between(cpPitch, cfPitch)

    def upperAndLower(self, pos):
        """Return the (upper, lower) pitches at a position."""
        if self.isUpper:
            return pos.pitch, pos.cfPitch
        else:
            return pos.cfPitch, pos.pitch

    def pitchAt(self, index):
        """The counterpoint pitch at an index; None for rests and
        for indexes outside the counterpoint."""
        if 0 <= index < self.cpLength:
            return self.counterpoint[index]
        return None

    def isConsonantAt(self, index):
        pos = self.positions[index]
        if pos.isRest:
            return False
        return intervals.isConsonant(pos.harmonicInterval)

    @property
    def firstSounding(self):
        if self.sounding:
            return self.sounding[0]
        return None

    @property
    def lastIndex(self):
        return self.cpLength - 1

    def soundingStrongPositions(self):
        return [self.positions[i] for i in self.strongIndices
                if not self.positions[i].isRest]

    def rolePositions(self, role):
        return [pos for pos in self.sounding if pos.role == role]

# -----------------------------------------------------------------------------
# FUNCTIONS
# -----------------------------------------------------------------------------


def makeContext(exercise, species=None, profile=None):
    return ExerciseContext(exercise, species, profile)

# -----------------------------------------------------------------------------


class Test(unittest.TestCase):

    def runTest(self):
        pass

    def test_positions(self):
        ex = Exercise(['C4', 'D4', 'C4'], [None, 'E4', 'F4', 'G4', 'E4'])
        cxt = ExerciseContext(ex, species=2)
        self.assertTrue(cxt[0].isRest)
        self.assertEqual(cxt[2].role, MetricalRole.DOWNBEAT)
        self.assertEqual(cxt[3].cfPitch.nameWithOctave, 'D4')
        self.assertEqual(cxt[4].harmonicInterval.simpleName, 'M3')
        self.assertEqual(cxt.firstSounding.index, 1)
        self.assertEqual(cxt.strongIndices, [0, 2, 4])

    def test_lowerVoice(self):
        ex = Exercise(['C4', 'D4'], ['A3', 'B3'], cpPosition='lower')
        cxt = ExerciseContext(ex, species=1)
        self.assertEqual(cxt[0].harmonicInterval.name, 'm3')
        self.assertEqual(cxt.upperAndLower(cxt[1])[0].nameWithOctave, 'D4')


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
