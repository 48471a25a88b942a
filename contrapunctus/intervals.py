# -----------------------------------------------------------------------------
# Name:         intervals.py
# Purpose:      Interval arithmetic and consonance classification
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------
"""
Intervals
=========

The Intervals module measures the distance between two
:py:class:`~contrapunctus.pitches.Pitch` objects.

An :py:class:`Interval` has a generic number (letter counting,
unison = 1), a signed semitone count and a quality.
The quality is found by reducing the interval to its simple form
and comparing the semitone count against the size expected for
that generic number.

Reduction removes whole octaves but leaves the octave itself
intact, so that a tenth reduces to a third and a fifteenth to an
octave, while an octave is never confused with a unison.

Classifiers:

   * :py:func:`isConsonant` -- P1, P5, P8, m3, M3, m6, M6
   * :py:func:`isPerfectConsonance` -- P1, P5, P8
   * :py:func:`isImperfectConsonance` -- m3, M3, m6, M6
   * :py:func:`isDissonant` -- everything else
   * :py:func:`isTritone` -- six semitones, simple or compound
"""

import enum
import logging
import unittest

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


class Quality(enum.Enum):
    PERFECT = 'P'
    MAJOR = 'M'
    MINOR = 'm'
    AUGMENTED = 'A'
    DIMINISHED = 'd'


PERFECT_FAMILY = (1, 4, 5, 8)

# Semitones expected for each simple generic number
# (perfect or major size).
EXPECTED_SEMITONES = {1: 0, 2: 2, 3: 4, 4: 5, 5: 7, 6: 9, 7: 11, 8: 12}

QUALITY_INVERSIONS = {Quality.PERFECT: Quality.PERFECT,
                      Quality.MAJOR: Quality.MINOR,
                      Quality.MINOR: Quality.MAJOR,
                      Quality.AUGMENTED: Quality.DIMINISHED,
                      Quality.DIMINISHED: Quality.AUGMENTED}

CONSONANCES = frozenset(['P1', 'P5', 'P8', 'm3', 'M3', 'm6', 'M6'])
PERFECT_CONSONANCES = frozenset(['P1', 'P5', 'P8'])
IMPERFECT_CONSONANCES = frozenset(['m3', 'M3', 'm6', 'M6'])

QUALITY_NAMES = {Quality.PERFECT: 'perfect',
                 Quality.MAJOR: 'major',
                 Quality.MINOR: 'minor',
                 Quality.AUGMENTED: 'augmented',
                 Quality.DIMINISHED: 'diminished'}

NUMBER_NAMES = {1: 'unison', 2: 'second', 3: 'third', 4: 'fourth',
                5: 'fifth', 6: 'sixth', 7: 'seventh', 8: 'octave',
                9: 'ninth', 10: 'tenth', 11: 'eleventh', 12: 'twelfth',
                13: 'thirteenth', 14: 'fourteenth', 15: 'fifteenth'}

# -----------------------------------------------------------------------------
# EXCEPTION HANDLERS
# -----------------------------------------------------------------------------


class IntervalError(Exception):

    def __init__(self, desc):
        super().__init__(desc)
        self.desc = desc
        self.report = ''

    def logerror(self):
        self.report += f'INTERVAL ERROR\n{self.desc}'
        logger.error(self.report)
        return self.report

# -----------------------------------------------------------------------------
# MAIN CLASS
# -----------------------------------------------------------------------------


class Interval:
    """The interval between two pitches, or an interval built from
    a generic number and a semitone count. Negative semitones mean a
    descending interval; the generic number is always positive."""

    def __init__(self, generic, semitones, quality=None):
        if generic < 1:
            raise IntervalError(f'Generic numbers start at 1, not {generic}.')
        self.generic = generic
        self.semitones = semitones
        if semitones > 0:
            self.direction = 1
        elif semitones < 0:
            self.direction = -1
        else:
            self.direction = 0
        octaves = reducingOctaves(generic)
        self.simpleGeneric = generic - 7 * octaves
        self.simpleSemitones = abs(semitones) - 12 * octaves
        if quality is None:
            quality = calculateQuality(self.simpleGeneric,
                                       self.simpleSemitones)
        self.quality = quality

    def __repr__(self):
        return f'<Interval {self.name}>'

    def __eq__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return (self.generic, self.semitones, self.quality) == (
            other.generic, other.semitones, other.quality)

    def __hash__(self):
        return hash((self.generic, self.semitones, self.quality))

    @property
    def name(self):
        return f'{self.quality.value}{self.generic}'

    @property
    def simpleName(self):
        return f'{self.quality.value}{self.simpleGeneric}'

    @property
    def isCompound(self):
        return self.generic > 8

    @property
    def niceName(self):
        number = NUMBER_NAMES.get(self.generic, f'{self.generic}th')
        return f'{QUALITY_NAMES[self.quality]} {number}'

# -----------------------------------------------------------------------------
# FUNCTIONS
# -----------------------------------------------------------------------------


def reducingOctaves(generic):
    """Number of octaves to remove when reducing an interval.
    Octaves and their compounds reduce to an octave, not a unison."""
    if generic <= 8:
        return 0
    if generic % 7 == 1:
        return (generic - 1) // 7 - 1
    return (generic - 1) // 7


def calculateQuality(generic, semitones):
    """Return the quality of a simple interval given its generic number
    (1-8) and its size in semitones. Every combination resolves:
    sizes beyond one semitone off are still augmented or diminished."""
    if generic not in EXPECTED_SEMITONES:
        raise IntervalError(f'No simple interval has generic number {generic}.')
    difference = semitones - EXPECTED_SEMITONES[generic]
    if generic in PERFECT_FAMILY:
        if difference == 0:
            return Quality.PERFECT
        elif difference > 0:
            return Quality.AUGMENTED
        else:
            return Quality.DIMINISHED
    else:
        if difference == 0:
            return Quality.MAJOR
        elif difference == -1:
            return Quality.MINOR
        elif difference > 0:
            return Quality.AUGMENTED
        else:
            return Quality.DIMINISHED


def between(low, high):
    """Measure from the first pitch to the second. The generic number
    is taken from letter names, the semitones from the semitone
    indexes of the two pitches."""
    generic = abs(high.diatonicStepIndex - low.diatonicStepIndex) + 1
    semitones = high.midi - low.midi
    return Interval(generic, semitones)


def toSemitones(quality, generic):
    """Return the semitone size of a named interval, e.g. ('m', 3) -> 3."""
    if isinstance(quality, str):
        try:
            quality = Quality(quality)
        except ValueError:
            raise IntervalError(f'Unknown interval quality: {quality!r}.')
    octaves = reducingOctaves(generic)
    simple = generic - 7 * octaves
    if simple not in EXPECTED_SEMITONES:
        raise IntervalError(f'Unknown interval number: {generic!r}.')
    expected = EXPECTED_SEMITONES[simple]
    if simple in PERFECT_FAMILY:
        offsets = {Quality.PERFECT: 0,
                   Quality.AUGMENTED: 1,
                   Quality.DIMINISHED: -1}
    else:
        offsets = {Quality.MAJOR: 0,
                   Quality.MINOR: -1,
                   Quality.AUGMENTED: 1,
                   Quality.DIMINISHED: -2}
    if quality not in offsets:
        raise IntervalError(
            f'There is no {QUALITY_NAMES[quality]} {simple}.')
    return expected + offsets[quality] + 12 * octaves


def fromName(name):
    """Build an ascending interval from a name such as 'M3' or 'P12'."""
    if len(name) < 2 or not name[1:].isdigit():
        raise IntervalError(f'Cannot read {name!r} as an interval name.')
    generic = int(name[1:])
    semitones = toSemitones(name[0], generic)
    return Interval(generic, semitones)


def isConsonant(ivl):
    return ivl.simpleName in CONSONANCES


def isDissonant(ivl):
    return not isConsonant(ivl)


def isPerfectConsonance(ivl):
    return ivl.simpleName in PERFECT_CONSONANCES


def isImperfectConsonance(ivl):
    return ivl.simpleName in IMPERFECT_CONSONANCES


def isTritone(ivl):
    return ivl.simpleSemitones % 12 == 6


def isStep(ivl):
    """A second (or a chromatic inflection of one pitch) with motion."""
    return ivl.generic <= 2 and ivl.semitones != 0


def isUnison(ivl):
    return ivl.simpleName == 'P1'


def consonanceType(ivl):
    if isPerfectConsonance(ivl):
        return 'perfect'
    elif isImperfectConsonance(ivl):
        return 'imperfect'
    else:
        return 'dissonant'


def invert(ivl):
    """Invert the simple form of an interval: generic 9 - n,
    semitones 12 - s, quality paired (M/m, A/d, P/P)."""
    return Interval(9 - ivl.simpleGeneric,
                    12 - ivl.simpleSemitones,
                    QUALITY_INVERSIONS[ivl.quality])

# -----------------------------------------------------------------------------


class Test(unittest.TestCase):

    def runTest(self):
        pass

    def test_reducingOctaves(self):
        self.assertEqual(reducingOctaves(8), 0)
        self.assertEqual(reducingOctaves(9), 1)
        self.assertEqual(reducingOctaves(15), 1)
        self.assertEqual(reducingOctaves(16), 2)

    def test_toSemitones(self):
        self.assertEqual(toSemitones('m', 3), 3)
        self.assertEqual(toSemitones('P', 12), 19)
        self.assertRaises(IntervalError, toSemitones, 'M', 5)


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
