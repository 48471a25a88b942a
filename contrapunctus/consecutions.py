# -----------------------------------------------------------------------------
# Name:         consecutions.py
# Purpose:      Object for storing a note's consecutive
#               relationships in its line
#
# Author:       Contrapunctus developers
#
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------
"""
Consecutions
============

The Consecutions class stores information about how a note
in a counterpoint is approached and left. The dissonance
formulas (passing tone, cambiata) are described entirely in
these terms."""

import unittest
import logging

from contrapunctus import intervals
from contrapunctus import pitches

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


class Consecutions:
    """An object holding the generic types of melodic consecution
    for a note to the left and right (approach and departure):
    the interval, its direction, (-1, 0, 1) and the consecution type
    ('same', 'step', 'skip', None) are calculated from a
    three-note linear segment. Rests count as missing neighbors."""
    def __init__(self, targetNote, leftNote=None, rightNote=None):
        # validConsecutionTypes = ('same', 'step', 'skip', None)
        self.leftNote = leftNote
        self.rightNote = rightNote
        self.targetNote = targetNote

    def get_leftInterval(self):
        if self.leftNote is not None:
            leftInterval = intervals.between(self.leftNote, self.targetNote)
        else:
            leftInterval = None
        return leftInterval

    def get_rightInterval(self):
        if self.rightNote is not None:
            rightInterval = intervals.between(self.targetNote, self.rightNote)
        else:
            rightInterval = None
        return rightInterval

    def get_leftDirection(self):
        if self.leftInterval:
            leftDirection = self.leftInterval.direction
        else:
            leftDirection = None
        return leftDirection

    def get_leftType(self):
        return consecutionType(self.leftInterval)

    def get_rightDirection(self):
        if self.rightInterval:
            rightDirection = self.rightInterval.direction
        else:
            rightDirection = None
        return rightDirection

    def get_rightType(self):
        return consecutionType(self.rightInterval)

    leftInterval = property(get_leftInterval)
    rightInterval = property(get_rightInterval)
    leftDirection = property(get_leftDirection)
    rightDirection = property(get_rightDirection)
    leftType = property(get_leftType)
    rightType = property(get_rightType)

    def isPassing(self):
        """True if the note is approached and left by step
        in one direction."""
        rules = [self.leftType == 'step',
                 self.rightType == 'step',
                 self.leftDirection == self.rightDirection]
        return all(rules)

# -----------------------------------------------------------------------------
# FUNCTIONS
# -----------------------------------------------------------------------------


def consecutionType(ivl):
    """'same' for a repeated pitch, 'step' for a second (or a
    chromatic inflection), otherwise 'skip'; None if there is
    no interval."""
    if ivl is None:
        return None
    if ivl.semitones == 0:
        return 'same'
    elif ivl.generic <= 2:
        return 'step'
    else:
        return 'skip'


def makeConsecutions(line):
    """Return one Consecutions object per position of a line
    (a sequence of pitches and rests). Rests get None."""
    result = []
    for idx, target in enumerate(line):
        if target is None:
            result.append(None)
            continue
        left = line[idx-1] if idx > 0 else None
        right = line[idx+1] if idx < len(line)-1 else None
        result.append(Consecutions(target, left, right))
    return result

# -----------------------------------------------------------------------------


class Test(unittest.TestCase):

    def runTest(self):
        pass

    def test_makeConsecutions(self):
        line = [pitches.parse(n) for n in ('C4', 'D4', 'E4', 'G3')]
        line += [None, pitches.parse('C4')]
        cons = makeConsecutions(line)
        self.assertTrue(cons[0].leftInterval is None)
        self.assertTrue(cons[1].leftType == 'step')
        self.assertTrue(cons[3].rightType is None)
        self.assertTrue(cons[4] is None)
        self.assertTrue(cons[1].leftDirection == 1)
        self.assertFalse(cons[2].rightDirection == 1)
        self.assertTrue(cons[2].rightType == 'skip')
        self.assertTrue(cons[1].isPassing())


# -----------------------------------------------------------------------------


if __name__ == "__main__":
    unittest.main()


# -----------------------------------------------------------------------------
# eof
