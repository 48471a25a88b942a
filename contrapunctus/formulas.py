# -----------------------------------------------------------------------------
# Name:         formulas.py
# Purpose:      Recognizing licensed dissonance formulas
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------
"""
Formulas
========

A dissonance against the cantus firmus is allowed only if it belongs to
one of a few melodic formulas. This module recognizes them.

   :py:func:`isPassingTone(context, index)` -- a weak-beat note approached
   and left by step in one direction, between two notes that are
   consonant with the cantus firmus.

   :py:func:`isStrongBeatPassingTone(context, index)` -- the same figure on
   the third beat of a third-species measure, where the two neighbors
   must also span exactly a third.

   :py:func:`isCambiata(context, index)` -- the five-note figure step,
   third in the same direction, step back, step back again (third
   species). The first and last notes must be consonant with the cantus
   firmus, and the last must not form a tritone with it.

The species engines only call :py:func:`classifyDissonance`, which picks
the formulas to try from the metrical role of the position.

Every detector returns a :py:class:`FormulaResult`: whether the formula
is present, which formula it is, and if not, the first condition that
failed.
"""

import collections
import logging
import unittest

from contrapunctus import intervals
from contrapunctus.context import ExerciseContext
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
# MODULE VARIABLES
# -----------------------------------------------------------------------------

FormulaResult = collections.namedtuple('FormulaResult',
                                       ['valid', 'type', 'reason'])

PASSING_TONE = 'passing tone'
STRONG_PASSING_TONE = 'strong-beat passing tone'
CAMBIATA = 'cambiata'

# Reasons for rejecting a passing tone, in the order they are checked.
NOT_WEAK = 'it is not on a weak beat'
NOT_SEMI_STRONG = 'it is not on the third beat'
IS_REST = 'the position is a rest'
PREVIOUS_REST = 'the previous position is a rest'
NO_NEXT = 'there is no following note'
NEXT_REST = 'the following position is a rest'
APPROACH_NOT_STEP = 'it is not approached by step'
DEPARTURE_NOT_STEP = 'it is not left by step'
REPEATED = 'it repeats a pitch'
DIRECTION_CHANGE = 'it changes direction'
PREVIOUS_DISSONANT = 'the previous note is dissonant with the cantus firmus'
NEXT_DISSONANT = 'the following note is dissonant with the cantus firmus'
NOT_THIRD = 'its neighbors do not span a third'
ON_DOWNBEAT = 'dissonance is not allowed on the downbeat'
NOT_CAMBIATA = 'it is not part of a cambiata'

# -----------------------------------------------------------------------------
# MAIN SCRIPTS
# -----------------------------------------------------------------------------


def classifyDissonance(context, index):
    """Decide whether a dissonance at a position is licensed.

    Downbeat dissonances never are. On the third beat of third species,
    try a strong-beat passing tone and then a cambiata; on weak beats,
    try a passing tone and then (in third species) a cambiata.
    """
    profile = context.profile
    role = context[index].role
    if role == MetricalRole.DOWNBEAT:
        return FormulaResult(False, None, ON_DOWNBEAT)
    elif role == MetricalRole.SEMI_STRONG:
        if profile.hasStrongPassingTone:
            result = isStrongBeatPassingTone(context, index)
        else:
            result = FormulaResult(False, None, NOT_WEAK)
        if result.valid:
            return result
        if profile.hasCambiata:
            cambiata = isCambiata(context, index)
            if cambiata.valid:
                return cambiata
            return FormulaResult(False, None,
                                 f'{result.reason}, and {NOT_CAMBIATA}')
        return result
    elif role == MetricalRole.WEAK:
        result = isPassingTone(context, index)
        if result.valid:
            return result
        if profile.hasCambiata:
            cambiata = isCambiata(context, index)
            if cambiata.valid:
                return cambiata
            return FormulaResult(False, None,
                                 f'{result.reason}, and {NOT_CAMBIATA}')
        return result
    return FormulaResult(False, None, f'unknown metrical role {role!r}')


def isPassingTone(context, index):
    if context[index].role != MetricalRole.WEAK:
        return FormulaResult(False, None, NOT_WEAK)
    return checkPassingMotion(context, index, PASSING_TONE)


def isStrongBeatPassingTone(context, index):
    if context[index].role != MetricalRole.SEMI_STRONG:
        return FormulaResult(False, None, NOT_SEMI_STRONG)
    result = checkPassingMotion(context, index, STRONG_PASSING_TONE)
    if not result.valid:
        return result
    span = intervals.between(context.pitchAt(index-1),
                             context.pitchAt(index+1))
    if span.simpleGeneric != 3:
        return FormulaResult(False, None, NOT_THIRD)
    return result


def isCambiata(context, index):
    """Try the note as the second, third and fourth member of a
    five-note cambiata; the first window that fits is reported."""
    for member in (2, 3, 4):
        start = index - (member - 1)
        result = checkCambiataAt(context, start)
        if result.valid:
            logger.debug(f'Cambiata at notes {start + 1}-{start + 5}, '
                         f'note {index + 1} as member {member}.')
            return result
    return FormulaResult(False, None, NOT_CAMBIATA)

# -----------------------------------------------------------------------------
# HELPER SCRIPTS
# -----------------------------------------------------------------------------


def checkPassingMotion(context, index, formula):
    """The conditions shared by both kinds of passing tone."""
    pos = context[index]
    if pos.isRest:
        return FormulaResult(False, None, IS_REST)
    if context.pitchAt(index-1) is None:
        return FormulaResult(False, None, PREVIOUS_REST)
    if index + 1 >= len(context):
        return FormulaResult(False, None, NO_NEXT)
    if context.pitchAt(index+1) is None:
        return FormulaResult(False, None, NEXT_REST)
    cons = pos.consecutions
    if cons.leftType == 'skip':
        return FormulaResult(False, None, APPROACH_NOT_STEP)
    if cons.rightType == 'skip':
        return FormulaResult(False, None, DEPARTURE_NOT_STEP)
    if 'same' in (cons.leftType, cons.rightType):
        return FormulaResult(False, None, REPEATED)
    if not cons.isPassing():
        return FormulaResult(False, None, DIRECTION_CHANGE)
    if not context.isConsonantAt(index-1):
        return FormulaResult(False, None, PREVIOUS_DISSONANT)
    if not context.isConsonantAt(index+1):
        return FormulaResult(False, None, NEXT_DISSONANT)
    return FormulaResult(True, formula, None)


def checkCambiataAt(context, start):
    """Test the five notes beginning at start for the cambiata figure,
    descending (step down, third down, step up, step up) or its mirror."""
    if start < 0 or start + 4 >= len(context):
        return FormulaResult(False, None, NOT_CAMBIATA)
    notes = [context.pitchAt(start + k) for k in range(5)]
    if any(n is None for n in notes):
        return FormulaResult(False, None, NOT_CAMBIATA)
    moves = [intervals.between(a, b) for a, b in zip(notes, notes[1:])]
    direction = moves[0].direction
    if direction == 0:
        return FormulaResult(False, None, NOT_CAMBIATA)
    rules = [moves[0].generic == 2,
             moves[1].generic == 3,
             moves[1].direction == direction,
             moves[2].generic == 2,
             moves[2].direction == -direction,
             moves[3].generic == 2,
             moves[3].direction == -direction]
    if not all(rules):
        return FormulaResult(False, None, NOT_CAMBIATA)
    rules = [context.isConsonantAt(start),
             context.isConsonantAt(start + 4),
             not intervals.isTritone(context[start + 4].harmonicInterval)]
    if not all(rules):
        return FormulaResult(False, None, NOT_CAMBIATA)
    return FormulaResult(True, CAMBIATA, None)

# -----------------------------------------------------------------------------


class Test(unittest.TestCase):

    def runTest(self):
        pass

    def test_isPassingTone(self):
        ex = Exercise(['C4', 'C4'], ['E4', 'F4', 'G4'])
        cxt = ExerciseContext(ex, species=2)
        self.assertTrue(isPassingTone(cxt, 1).valid)
        self.assertEqual(isPassingTone(cxt, 2).reason, NOT_WEAK)

    def test_checkCambiataAt(self):
        ex = Exercise(['C4', 'D4', 'C4'],
                      ['G4', 'F4', 'D4', 'E4', 'F4', 'E4', 'D4', 'B4', 'C5'])
        cxt = ExerciseContext(ex, species=3)
        self.assertTrue(checkCambiataAt(cxt, 0).valid)
        self.assertFalse(checkCambiataAt(cxt, 1).valid)


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
