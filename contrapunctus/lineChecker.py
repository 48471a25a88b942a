# -----------------------------------------------------------------------------
# Name:         lineChecker.py
# Purpose:      Melodic rules for the counterpoint line
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------
"""
Line Checker
============

The Line Checker module looks at the counterpoint as a melody, without
regard to the cantus firmus. Rests are skipped: the checks run over the
sequence of sounding notes.

Local rules, between consecutive notes:

   * no melodic tritone (error)
   * leaps wider than a fourth are discouraged, wider than a sixth
     more strongly (first and second species)
   * no repeated note from a weak beat to the next downbeat (second
     species), no note struck three times in a row (third species)

Global rules, over the whole line:

   * range no wider than an octave and a sixth
   * no long runs in one direction
   * no arpeggiated triads
   * no tritone outlined between degrees 4 and 7
   * no two leaps in one direction that add up to a dissonance

The cadence check, which looks at the scale degree of the note before
the last, is here too.
"""

import itertools
import logging
import unittest

from contrapunctus import intervals
from contrapunctus.context import ExerciseContext
from contrapunctus.exercise import Exercise
from contrapunctus.rule import RuleId, Severity
from contrapunctus.result import ResultCollector
from contrapunctus.speciesProfile import MetricalRole
from contrapunctus.utilities import pairwise, sign

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

# Every ordering of the three degrees of each diatonic triad.
TRIAD_OUTLINES = frozenset(
    itertools.chain.from_iterable(
        itertools.permutations(((root - 1) % 7 + 1,
                                (root + 1) % 7 + 1,
                                (root + 3) % 7 + 1))
        for root in range(1, 8)))

# -----------------------------------------------------------------------------
# MAIN SCRIPT
# -----------------------------------------------------------------------------


def checkLine(context, collector):
    checkMelody(context, collector)
    checkNoteRepetition(context, collector)
    checkCadence(context, collector)
    checkRange(context, collector)
    checkCompoundTritones(context, collector)
    checkCompoundDissonantLeaps(context, collector)
    checkProlongedDirection(context, collector)
    checkArpeggios(context, collector)

# -----------------------------------------------------------------------------
# CONSECUTIVE NOTES
# -----------------------------------------------------------------------------


def checkMelody(context, collector):
    for prev, curr in pairwise(context.sounding):
        ivl = intervals.between(prev.pitch, curr.pitch)
        if intervals.isTritone(ivl):
            msg = (f'Note {curr.number}: melodic tritone '
                   f'({prev.pitch} to {curr.pitch}).')
            collector.error(RuleId.TRITONE, curr.index, msg, ivl.name)
        if context.profile.checkStepwise:
            checkLeap(collector, curr, ivl)


def checkLeap(collector, pos, ivl):
    if ivl.generic > 3:
        msg = (f'Note {pos.number}: leap of a {ivl.niceName}. '
               f'Prefer stepwise motion.')
        collector.suggestion(RuleId.STEPWISE, pos.index, msg, ivl.name)
    # octave leaps are idiomatic
    if ivl.generic > 6 and ivl.name != 'P8':
        msg = (f'Note {pos.number}: large leap of a {ivl.niceName}. '
               f'Avoid leaps wider than a sixth.')
        collector.warning(RuleId.STEPWISE, pos.index, msg, ivl.name)


def checkNoteRepetition(context, collector):
    style = context.profile.repetition
    if style == 'weakToStrong':
        for prev, curr in pairwise(context.sounding):
            rules = [prev.role == MetricalRole.WEAK,
                     curr.role == MetricalRole.DOWNBEAT,
                     prev.pitch.midi == curr.pitch.midi]
            if all(rules):
                msg = (f'Note {curr.number}: {prev.pitch} is repeated from '
                       f'the weak beat to the downbeat.')
                collector.warning(RuleId.NOTE_REPETITION, curr.index, msg)
    elif style == 'consecutive':
        count = 1
        for prev, curr in pairwise(context.sounding):
            if prev.pitch.midi == curr.pitch.midi:
                count += 1
                if count >= 3:
                    msg = (f'Note {curr.number}: {curr.pitch} struck '
                           f'{count} times in a row.')
                    collector.warning(RuleId.NOTE_REPETITION, curr.index,
                                      msg)
            else:
                count = 1

# -----------------------------------------------------------------------------
# CADENCE
# -----------------------------------------------------------------------------


def checkCadence(context, collector):
    """The note before the last should lead to the final: the leading
    tone in the upper voice; degree 2, 5 or 7 in the lower voice."""
    profile = context.profile
    idx = context.cpLength - 2
    if idx < 0 or context[idx].isRest:
        return
    pos = context[idx]
    degree = pos.degree
    shown = degree if degree is not None else '?'
    if context.isUpper:
        if degree not in profile.upperCadenceDegrees:
            msg = (f'Note {pos.number}: the note before the last should be '
                   f'the leading tone (degree 7) in the upper voice, '
                   f'not degree {shown}.')
            collector.warning(profile.upperCadenceRule, idx, msg)
    else:
        if degree not in profile.lowerCadenceDegrees:
            accepted = ', '.join(str(d) for d in
                                 sorted(profile.lowerCadenceDegrees))
            msg = (f'Note {pos.number}: the note before the last should be '
                   f'degree {accepted} in the lower voice, '
                   f'not degree {shown}.')
            collector.warning(profile.lowerCadenceRule, idx, msg)
    if profile.checkPenultimateStrong and context.isUpper:
        checkPenultimateDownbeat(context, collector)


def checkPenultimateDownbeat(context, collector):
    """In the upper voice the downbeat of the next-to-last measure is
    usually degree 5 or 6, leading to the leading tone."""
    idx = context.cpLength - 3
    if idx < 0 or context[idx].isRest:
        return
    pos = context[idx]
    if pos.role != MetricalRole.DOWNBEAT:
        return
    if pos.degree not in (5, 6):
        shown = pos.degree if pos.degree is not None else '?'
        msg = (f'Note {pos.number}: the downbeat of the next-to-last '
               f'measure is usually degree 5 or 6 in the upper voice, '
               f'not degree {shown}.')
        collector.suggestion(context.profile.upperCadenceRule, idx, msg)

# -----------------------------------------------------------------------------
# WHOLE LINE
# -----------------------------------------------------------------------------


def checkRange(context, collector):
    if not context.sounding:
        return
    lowest = min(context.sounding, key=lambda pos: pos.pitch.midi).pitch
    highest = max(context.sounding, key=lambda pos: pos.pitch.midi).pitch
    if highest.midi - lowest.midi > context.profile.maxRange:
        msg = (f'The counterpoint spans too wide a range ({lowest} to '
               f'{highest}). Keep it within an octave and a sixth.')
        collector.warning(RuleId.RANGE, -1, msg)


def checkCompoundTritones(context, collector):
    """A tritone outlined by notes on degrees 4 and 7 that are three
    to five notes apart. A leading tone just before the final is
    exempt."""
    sounding = context.sounding
    for i in range(len(sounding) - 2):
        for span in range(3, min(5, len(sounding) - i) + 1):
            start = sounding[i]
            end = sounding[i + span - 1]
            if {start.degree, end.degree} != {4, 7}:
                continue
            if not intervals.isTritone(intervals.between(start.pitch,
                                                         end.pitch)):
                continue
            if end.degree == 7 and i + span - 1 == len(sounding) - 2:
                break
            msg = (f'Notes {start.number}-{end.number}: a tritone outlined '
                   f'between degrees {start.degree} and {end.degree}.')
            collector.warning(RuleId.COMPOUND_TRITONE, start.index, msg)
            break


def checkCompoundDissonantLeaps(context, collector):
    """Two leaps in the same direction whose sum is dissonant."""
    sounding = context.sounding
    for first, middle, last in zip(sounding, sounding[1:], sounding[2:]):
        ivl1 = intervals.between(first.pitch, middle.pitch)
        ivl2 = intervals.between(middle.pitch, last.pitch)
        if ivl1.generic <= 2 or ivl2.generic <= 2:
            continue
        if ivl1.direction != ivl2.direction or ivl1.direction == 0:
            continue
        total = intervals.between(first.pitch, last.pitch)
        if intervals.isDissonant(total) or total.generic in (7, 9):
            msg = (f'Notes {first.number}-{last.number}: the leaps of a '
                   f'{ivl1.niceName} and a {ivl2.niceName} add up to a '
                   f'{total.niceName}.')
            collector.warning(RuleId.COMPOUND_DISSONANT_LEAP, last.index,
                              msg, total.name)


def checkProlongedDirection(context, collector):
    """Runs of more moves in one direction than the species allows.
    Repeated notes neither break nor extend a run."""
    sounding = context.sounding
    threshold = context.profile.directionThreshold
    direction = 0
    count = 0
    start = None
    previous = None
    for prev, curr in pairwise(sounding):
        move = sign(curr.pitch.midi - prev.pitch.midi)
        if move == 0:
            continue
        if move == direction:
            count += 1
        else:
            reportRun(collector, direction, count, threshold, start, previous)
            direction = move
            count = 1
            start = prev
        previous = curr
    reportRun(collector, direction, count, threshold, start, previous)


def reportRun(collector, direction, count, threshold, start, end):
    if count <= threshold:
        return
    word = 'ascending' if direction > 0 else 'descending'
    msg = (f'Notes {start.number}-{end.number}: {count} {word} moves in a '
           f'row. Change direction after at most {threshold}.')
    collector.warning(RuleId.PROLONGED_DIRECTION, start.index, msg)


def checkArpeggios(context, collector):
    sounding = context.sounding
    for first, middle, last in zip(sounding, sounding[1:], sounding[2:]):
        degrees = (first.degree, middle.degree, last.degree)
        if degrees not in TRIAD_OUTLINES:
            continue
        ivl1 = intervals.between(first.pitch, middle.pitch)
        ivl2 = intervals.between(middle.pitch, last.pitch)
        if ivl1.simpleGeneric >= 3 and ivl2.simpleGeneric >= 3:
            shown = '-'.join(str(d) for d in degrees)
            msg = (f'Notes {first.number}-{last.number}: arpeggiated triad '
                   f'(degrees {shown}). Avoid outlining a chord.')
            collector.suggestion(RuleId.ARPEGGIO, first.index, msg)

# -----------------------------------------------------------------------------


class Test(unittest.TestCase):

    def runTest(self):
        pass

    def test_triadOutlines(self):
        self.assertEqual(len(TRIAD_OUTLINES), 42)
        self.assertIn((1, 3, 5), TRIAD_OUTLINES)
        self.assertIn((4, 1, 6), TRIAD_OUTLINES)
        self.assertIn((7, 2, 4), TRIAD_OUTLINES)
        self.assertNotIn((1, 2, 3), TRIAD_OUTLINES)

    def test_checkArpeggios(self):
        ex = Exercise(['C4', 'D4', 'E4', 'C4'], ['C5', 'E5', 'G5', 'C5'])
        cxt = ExerciseContext(ex, species=1)
        col = ResultCollector(len(cxt))
        checkArpeggios(cxt, col)
        result = col.finish()
        self.assertEqual(result.rules(Severity.SUGGESTION),
                         [RuleId.ARPEGGIO, RuleId.ARPEGGIO])
        self.assertEqual(result.suggestions[0].position, 0)

    def test_checkMelody(self):
        ex = Exercise(['C4', 'D4'], ['F4', 'B4'])
        cxt = ExerciseContext(ex, species=1)
        col = ResultCollector(len(cxt))
        checkMelody(cxt, col)
        self.assertEqual(col.errors[0].rule, RuleId.TRITONE)
        self.assertEqual(col.errors[0].position, 1)


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
