# -----------------------------------------------------------------------------
# Name:         vlChecker.py
# Purpose:      Framework for analyzing voice leading in species counterpoint
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------
"""
Voice Leading Checker
=====================

The Voice Leading Checker module examines the relationship between the
counterpoint and the cantus firmus: the interval formed at each
position, and the motion of the two voices from one structural position
to the next.

The checks fall into four groups:

   * intervals between simultaneous notes: consonance on the downbeat,
     unisons, voice crossing, and the treatment of dissonance off the
     downbeat (delegated to :py:mod:`~contrapunctus.formulas`)
   * motion between consecutive downbeats: parallel and hidden fifths
     and octaves, and a preference for contrary or oblique motion
   * motion across the beat (second species): fifths or octaves from
     an offbeat note to the next downbeat
   * intermittent motion: perfect intervals that recur two or three
     downbeats later (battuta fifths and octaves), and long chains of
     parallel thirds or sixths

The boundary checks (first and last intervals) are also found here.

Motion is classified with a :class:`~music21.voiceLeading.VoiceLeadingQuartet`
made from the two notes of each voice.

Each function takes an :py:class:`~contrapunctus.context.ExerciseContext`
and a :py:class:`~contrapunctus.result.ResultCollector`, and reports
what it finds to the collector.
"""

import enum
import logging
import unittest

from music21 import voiceLeading

from contrapunctus import formulas
from contrapunctus import intervals
from contrapunctus import pitches
from contrapunctus.rule import RuleId
from contrapunctus.speciesProfile import MetricalRole
from contrapunctus.utilities import pairwise

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


class Motion(enum.Enum):
    SIMILAR = 'similar'
    CONTRARY = 'contrary'
    OBLIQUE = 'oblique'
    STATIONARY = 'stationary'


PARALLEL_RULES = {'P5': RuleId.PARALLEL_FIFTHS, 'P8': RuleId.PARALLEL_OCTAVES}
HIDDEN_RULES = {'P5': RuleId.HIDDEN_FIFTHS, 'P8': RuleId.HIDDEN_OCTAVES}
BATTUTA_RULES = {'P5': RuleId.BATTUTA_FIFTHS, 'P8': RuleId.BATTUTA_OCTAVES}
PERFECT_NAMES = {'P5': 'fifths', 'P8': 'octaves'}

# -----------------------------------------------------------------------------
# MAIN SCRIPT
# -----------------------------------------------------------------------------


def checkVoiceLeading(context, collector):
    """
    Run the voice-leading checks in order: intervals at each position,
    motion between downbeats, motion across the beat (if the species
    calls for it), the boundary intervals, and the intermittent
    parallels.
    """
    checkPositions(context, collector)
    checkStrongMotion(context, collector)
    if context.profile.checkCrossBeatParallels:
        checkCrossBeatParallels(context, collector)
    checkBoundaries(context, collector)
    checkExcessiveParallels(context, collector)
    checkBattutaParallels(context, collector)

# -----------------------------------------------------------------------------
# INTERVALS BETWEEN SIMULTANEOUS NOTES
# -----------------------------------------------------------------------------


def checkPositions(context, collector):
    """Check the interval at every sounding position according to its
    metrical role, then check the voices for crossing."""
    first = context.firstSounding
    for pos in context.sounding:
        ivl = pos.harmonicInterval
        if pos.role == MetricalRole.DOWNBEAT:
            if intervals.isDissonant(ivl):
                msg = (f'Note {pos.number}: dissonant {ivl.niceName} on the '
                       f'downbeat. Only consonances are allowed here.')
                collector.error(RuleId.CONSONANCE, pos.index, msg, ivl.name)
            rules = [intervals.isUnison(ivl),
                     pos.index != first.index,
                     pos.index != context.lastIndex]
            if all(rules):
                msg = (f'Note {pos.number}: unison. Unisons are allowed '
                       f'only at the beginning and the end.')
                collector.error(RuleId.UNISON, pos.index, msg, ivl.name)
        elif pos.role == MetricalRole.SEMI_STRONG:
            if intervals.isDissonant(ivl):
                checkSemiStrongDissonance(context, collector, pos)
        elif pos.role == MetricalRole.WEAK:
            if intervals.isDissonant(ivl):
                checkWeakDissonance(context, collector, pos)
        if isVoiceCrossing(context, pos):
            msg = (f'Note {pos.number}: the voices cross. The counterpoint '
                   f'must stay {"above" if context.isUpper else "below"} '
                   f'the cantus firmus.')
            collector.error(RuleId.VOICE_CROSSING, pos.index, msg)


def checkSemiStrongDissonance(context, collector, pos):
    ivl = pos.harmonicInterval
    result = formulas.classifyDissonance(context, pos.index)
    if result.valid:
        msg = (f'Note {pos.number}: dissonant {ivl.niceName} on the third '
               f'beat, treated as a {result.type}. A consonance is '
               f'preferred here.')
        collector.suggestion(RuleId.PASSING_TONE_STRONG, pos.index, msg,
                             ivl.name)
    else:
        msg = (f'Note {pos.number}: dissonant {ivl.niceName} on the third '
               f'beat is neither a passing tone nor part of a cambiata '
               f'({result.reason}).')
        collector.error(RuleId.BEAT_THREE_CONSONANCE, pos.index, msg,
                        ivl.name)


def checkWeakDissonance(context, collector, pos):
    ivl = pos.harmonicInterval
    result = formulas.classifyDissonance(context, pos.index)
    if result.valid:
        logger.debug(f'Note {pos.number}: {ivl.name} is a {result.type}.')
    else:
        msg = (f'Note {pos.number}: dissonant {ivl.niceName} on a weak beat '
               f'is not a passing tone ({result.reason}).')
        collector.error(RuleId.PASSING_TONE, pos.index, msg, ivl.name)


def isVoiceCrossing(context, pos):
    upper, lower = context.upperAndLower(pos)
    return upper.midi < lower.midi

# -----------------------------------------------------------------------------
# MOTION BETWEEN DOWNBEATS
# -----------------------------------------------------------------------------


def checkStrongMotion(context, collector):
    """Compare each pair of consecutive downbeats: parallel perfect
    intervals are errors, hidden ones warnings, and similar motion of any
    kind draws a suggestion."""
    strong = [context[i] for i in context.strongIndices]
    for prev, curr in pairwise(strong):
        if prev.isRest or curr.isRest:
            continue
        motion = getMotion(prev.cfPitch, curr.cfPitch, prev.pitch, curr.pitch)
        prevIvl = prev.harmonicInterval
        currIvl = curr.harmonicInterval
        if isParallel(prevIvl, currIvl, motion):
            name = currIvl.simpleName
            msg = (f'Note {curr.number}: parallel {PERFECT_NAMES[name]} '
                   f'from note {prev.number}.')
            collector.error(PARALLEL_RULES[name], curr.index, msg, name)
        elif isHidden(prevIvl, currIvl, motion):
            upperPrev, _ = context.upperAndLower(prev)
            upperCurr, _ = context.upperAndLower(curr)
            if not isStepwise(upperPrev, upperCurr):
                name = currIvl.simpleName
                msg = (f'Note {curr.number}: hidden {PERFECT_NAMES[name]}, '
                       f'a perfect interval reached by similar motion '
                       f'with a leap in the upper voice.')
                collector.warning(HIDDEN_RULES[name], curr.index, msg, name)
        if motion == Motion.SIMILAR:
            msg = (f'Note {curr.number}: similar motion from note '
                   f'{prev.number}. Prefer contrary or oblique motion.')
            collector.suggestion(RuleId.MOTION_TYPE, curr.index, msg)


def checkCrossBeatParallels(context, collector):
    """Fifths or octaves between neighboring positions, one on the
    downbeat and one off it, reached by similar motion."""
    for prev, curr in pairwise(context.positions):
        if prev.isRest or curr.isRest:
            continue
        prevStrong = prev.role == MetricalRole.DOWNBEAT
        currStrong = curr.role == MetricalRole.DOWNBEAT
        if prevStrong == currStrong:
            continue
        prevIvl = prev.harmonicInterval
        currIvl = curr.harmonicInterval
        rules = [isPerfectNonUnison(prevIvl),
                 isPerfectNonUnison(currIvl),
                 prevIvl.simpleName == currIvl.simpleName]
        if not all(rules):
            continue
        motion = getMotion(prev.cfPitch, curr.cfPitch, prev.pitch, curr.pitch)
        if motion == Motion.SIMILAR:
            name = currIvl.simpleName
            msg = (f'Notes {prev.number} and {curr.number}: parallel '
                   f'{PERFECT_NAMES[name]} between a strong and a weak beat. '
                   f'Less serious than on the downbeat, but avoid them.')
            collector.warning(RuleId.STRONG_WEAK_PARALLELS, curr.index,
                              msg, name)

# -----------------------------------------------------------------------------
# BOUNDARIES
# -----------------------------------------------------------------------------


def checkBoundaries(context, collector):
    """The first sounding note must make a perfect consonance with the
    cantus firmus, the last a unison or octave, and the last note must
    stand alone over the last cantus note."""
    first = context.firstSounding
    if first is not None:
        ivl = first.harmonicInterval
        if not intervals.isPerfectConsonance(ivl):
            msg = (f'Note {first.number}: the counterpoint begins with a '
                   f'{ivl.niceName}. Begin with a unison, fifth or octave.')
            collector.error(RuleId.START_CONSONANCE, first.index, msg,
                            ivl.name)
    last = context[context.lastIndex]
    if not last.isRest:
        ivl = last.harmonicInterval
        if ivl.simpleName not in ('P1', 'P8'):
            msg = (f'Note {last.number}: the counterpoint ends with a '
                   f'{ivl.niceName}. End with a unison or octave.')
            collector.error(RuleId.END_CONSONANCE, last.index, msg,
                            ivl.name)
    if (context.cpLength - 1) % context.profile.ratio != 0:
        msg = ('The last note of the counterpoint must be a whole note '
               'against the last note of the cantus firmus.')
        collector.error(RuleId.LAST_NOTE_WHOLE, context.lastIndex, msg)

# -----------------------------------------------------------------------------
# INTERMITTENT MOTION
# -----------------------------------------------------------------------------


def checkExcessiveParallels(context, collector):
    """More than a few thirds (or sixths) in a row on the downbeats."""
    strong = [context[i] for i in context.strongIndices]
    if len(strong) < 4:
        return
    limit = context.profile.parallelRunLimit
    runKind = None
    run = []
    for pos in strong + [None]:
        kind = None
        if pos is not None and not pos.isRest:
            ivl = pos.harmonicInterval
            if intervals.isImperfectConsonance(ivl):
                kind = 'thirds' if ivl.simpleGeneric == 3 else 'sixths'
        if kind is not None and kind == runKind:
            run.append(pos)
            continue
        if len(run) > limit:
            msg = (f'Notes {run[0].number}-{run[-1].number}: '
                   f'{len(run)} parallel {runKind} in a row. Use no more '
                   f'than {limit} to keep the voices independent.')
            collector.suggestion(RuleId.EXCESSIVE_PARALLELS, run[0].index,
                                 msg)
        runKind = kind
        run = [pos] if kind is not None else []


def checkBattutaParallels(context, collector):
    """A fifth or octave that returns two or three downbeats later,
    with both voices moving in the same direction overall. A return
    reached by a leap of a fourth or fifth in contrary motion is
    allowed."""
    strong = [context[i] for i in context.strongIndices]
    for si, first in enumerate(strong[:-2]):
        if first.isRest or not isPerfectNonUnison(first.harmonicInterval):
            continue
        name = first.harmonicInterval.simpleName
        for gap in range(2, min(3, len(strong) - si - 1) + 1):
            later = strong[si + gap]
            if later.isRest or later.harmonicInterval.simpleName != name:
                continue
            motion = getMotion(first.cfPitch, later.cfPitch,
                               first.pitch, later.pitch)
            if motion != Motion.SIMILAR:
                continue
            before = strong[si + gap - 1]
            if not before.isRest:
                leap = abs(later.pitch.midi - before.pitch.midi)
                approach = getMotion(before.cfPitch, later.cfPitch,
                                     before.pitch, later.pitch)
                if 5 <= leap <= 7 and approach == Motion.CONTRARY:
                    continue
            msg = (f'Notes {first.number} and {later.number}: intermittent '
                   f'{PERFECT_NAMES[name]} on the downbeats '
                   f'({gap - 1} measure{"s" if gap > 2 else ""} apart).')
            collector.warning(BATTUTA_RULES[name], later.index, msg, name)

# -----------------------------------------------------------------------------
# PREDICATES
# -----------------------------------------------------------------------------


def getMotion(cf1, cf2, cp1, cp2):
    """Classify the motion of the two voices from one pair of
    simultaneous notes to the next."""
    vlq = voiceLeading.VoiceLeadingQuartet(cp1.toNote(), cp2.toNote(),
                                           cf1.toNote(), cf2.toNote())
    if vlq.noMotion():
        return Motion.STATIONARY
    elif vlq.obliqueMotion():
        return Motion.OBLIQUE
    elif vlq.similarMotion():
        return Motion.SIMILAR
    else:
        return Motion.CONTRARY


def isPerfectNonUnison(ivl):
    return intervals.isPerfectConsonance(ivl) and not intervals.isUnison(ivl)


def isParallel(prevIvl, currIvl, motion):
    """The same fifth or octave twice, by similar motion."""
    rules = [motion == Motion.SIMILAR,
             isPerfectNonUnison(prevIvl),
             isPerfectNonUnison(currIvl),
             prevIvl.simpleName == currIvl.simpleName]
    return all(rules)


def isHidden(prevIvl, currIvl, motion):
    """A fifth or octave reached by similar motion from an interval
    that is not itself a fifth or octave."""
    rules = [motion == Motion.SIMILAR,
             not isPerfectNonUnison(prevIvl),
             isPerfectNonUnison(currIvl)]
    return all(rules)


def isStepwise(p1, p2):
    return intervals.between(p1, p2).generic <= 2

# -----------------------------------------------------------------------------


class Test(unittest.TestCase):

    def runTest(self):
        pass

    def test_getMotion(self):
        C4 = pitches.parse('C4')
        D4 = pitches.parse('D4')
        G4 = pitches.parse('G4')
        A4 = pitches.parse('A4')
        self.assertEqual(getMotion(C4, D4, G4, A4), Motion.SIMILAR)
        self.assertEqual(getMotion(C4, D4, A4, G4), Motion.CONTRARY)
        self.assertEqual(getMotion(C4, C4, G4, A4), Motion.OBLIQUE)
        self.assertEqual(getMotion(C4, C4, G4, G4), Motion.STATIONARY)

    def test_isParallel(self):
        p5 = intervals.fromName('P5')
        m3 = intervals.fromName('m3')
        self.assertTrue(isParallel(p5, p5, Motion.SIMILAR))
        self.assertFalse(isParallel(p5, p5, Motion.CONTRARY))
        self.assertTrue(isHidden(m3, p5, Motion.SIMILAR))
        self.assertFalse(isHidden(p5, p5, Motion.SIMILAR))


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
