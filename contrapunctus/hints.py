# -----------------------------------------------------------------------------
# Name:         hints.py
# Purpose:      Suggesting notes for a first-species counterpoint
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------
"""
Hints
=====

The Hints module proposes notes for one position of a first-species
counterpoint. Every diatonic note within an octave and a fifth of the
cantus firmus, on the counterpoint's side, that is consonant with it is
a candidate. Each candidate starts with a score of 10, which is lowered
for what would break a rule and raised for what is good style:

   * -10 if a first interval is not a perfect consonance, or a last
     interval is not a unison or octave
   * -10 for a unison inside the line
   * -10 for parallel fifths or octaves with the previous position
   * -10 for a melodic tritone from the previous note
   * +2 for contrary motion, +1 for oblique motion
   * +2 for a step, +1 for a third, -2 for a leap wider than a fifth
   * +1 for an imperfect consonance

Candidates are returned best first; equal scores keep their order from
low to high.
"""

import collections
import logging
import unittest

from contrapunctus import intervals
from contrapunctus import pitches
from contrapunctus.exercise import Exercise
from contrapunctus.vlChecker import Motion, getMotion, isParallel

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

Hint = collections.namedtuple('Hint', ['pitch', 'interval', 'intervalName',
                                       'score', 'issues'])

HINT_RANGE = 19
BASE_SCORE = 10
PENALTY = 10

# -----------------------------------------------------------------------------
# MAIN SCRIPT
# -----------------------------------------------------------------------------


def suggestNotes(exercise, index):
    """Rank the notes that could stand at a position of a first-species
    counterpoint, given the note before it (if any)."""
    cf = exercise.cantusFirmus
    if not 0 <= index < len(cf):
        raise IndexError(f'The cantus firmus has no note {index + 1}.')
    cfNote = cf[index]
    prevCfNote = cf[index - 1] if index > 0 else None
    prevCpNote = None
    if 0 < index <= len(exercise.counterpoint):
        prevCpNote = exercise.counterpoint[index - 1]
    isFirst = index == 0
    isLast = index == len(cf) - 1

    scale = exercise.scale
    if exercise.isUpper:
        low = cfNote.midi
        high = cfNote.midi + HINT_RANGE
    else:
        low = cfNote.midi - HINT_RANGE
        high = cfNote.midi
    candidates = scale.getDiatonicRange(
        pitches.fromSemitoneIndex(low), pitches.fromSemitoneIndex(high))

    hints = []
    for note in candidates:
        ivl = voiceInterval(exercise, cfNote, note)
        if intervals.isDissonant(ivl):
            continue
        score, issues = scoreCandidate(exercise, note, ivl, cfNote,
                                       prevCfNote, prevCpNote,
                                       isFirst, isLast)
        hints.append(Hint(note, ivl.simpleName, ivl.niceName, score,
                          tuple(issues)))
    hints.sort(key=lambda h: h.score, reverse=True)
    logger.debug(f'Note {index + 1}: {len(hints)} candidates, best '
                 f'{hints[0].pitch if hints else None}.')
    return hints

# -----------------------------------------------------------------------------
# HELPER SCRIPTS
# -----------------------------------------------------------------------------


def voiceInterval(exercise, cfNote, cpNote):
    if exercise.isUpper:
        return intervals.between(cfNote, cpNote)
    return intervals.between(cpNote, cfNote)


def scoreCandidate(exercise, note, ivl, cfNote, prevCfNote, prevCpNote,
                   isFirst, isLast):
    score = BASE_SCORE
    issues = []
    if isFirst and not intervals.isPerfectConsonance(ivl):
        issues.append('The first interval should be a perfect consonance.')
        score -= PENALTY
    if isLast and ivl.simpleName not in ('P1', 'P8'):
        issues.append('The last interval should be a unison or octave.')
        score -= PENALTY
    if intervals.isUnison(ivl) and not (isFirst or isLast):
        issues.append('Unisons belong only at the beginning and the end.')
        score -= PENALTY

    if prevCfNote is not None and prevCpNote is not None:
        prevIvl = voiceInterval(exercise, prevCfNote, prevCpNote)
        motion = getMotion(prevCfNote, cfNote, prevCpNote, note)
        if isParallel(prevIvl, ivl, motion):
            issues.append('This would make parallel fifths or octaves.')
            score -= PENALTY
        melodic = intervals.between(prevCpNote, note)
        if intervals.isTritone(melodic):
            issues.append('This would make a melodic tritone.')
            score -= PENALTY
        if motion == Motion.CONTRARY:
            score += 2
        elif motion == Motion.OBLIQUE:
            score += 1
        if melodic.simpleGeneric <= 2:
            score += 2
        elif melodic.simpleGeneric <= 3:
            score += 1
        elif melodic.simpleGeneric > 5:
            issues.append('Large leap.')
            score -= 2

    if intervals.isImperfectConsonance(ivl):
        score += 1
    return score, issues

# -----------------------------------------------------------------------------


class Test(unittest.TestCase):

    def runTest(self):
        pass

    def test_firstNote(self):
        ex = Exercise(['C4', 'D4', 'C4'], [])
        hints = suggestNotes(ex, 0)
        names = [h.interval for h in hints if h.score == BASE_SCORE]
        self.assertEqual(sorted(set(names)), ['P1', 'P5', 'P8'])
        self.assertTrue(all(intervals.isConsonant(
            intervals.between(ex.cantusFirmus[0], h.pitch)) for h in hints))


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
