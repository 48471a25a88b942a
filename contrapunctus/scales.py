# -----------------------------------------------------------------------------
# Name:         scales.py
# Purpose:      Diatonic patterns, scale membership and scale degrees
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------
"""
Scales
======

The Scales module holds the seven-note patterns of the major scale,
the minor scales and the church modes, and answers two questions
about a pitch in a key: is it in the scale, and which degree is it?

Degrees are numbered 1-7 and found by reducing the distance from the
tonic modulo 12. A pitch outside the pattern has no degree (None).

The seventh pattern member counts as the leading tone in every mode,
including modes in which it lies a whole step below the tonic.
"""

import logging
import unittest

from music21 import key

from contrapunctus import pitches

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

PATTERNS = {
    'major': (0, 2, 4, 5, 7, 9, 11),
    'naturalMinor': (0, 2, 3, 5, 7, 8, 10),
    'harmonicMinor': (0, 2, 3, 5, 7, 8, 11),
    'melodicMinor': (0, 2, 3, 5, 7, 9, 11),
    'dorian': (0, 2, 3, 5, 7, 9, 10),
    'phrygian': (0, 1, 3, 5, 7, 8, 10),
    'lydian': (0, 2, 4, 6, 7, 9, 11),
    'mixolydian': (0, 2, 4, 5, 7, 9, 10),
    'aeolian': (0, 2, 3, 5, 7, 8, 10),
    'locrian': (0, 1, 3, 5, 6, 8, 10),
}

DEFAULT_MODE = 'major'

# music21 mode names for building key signatures.
MUSIC21_MODES = {'major': 'major',
                 'naturalMinor': 'minor',
                 'harmonicMinor': 'minor',
                 'melodicMinor': 'minor',
                 'aeolian': 'minor',
                 'dorian': 'dorian',
                 'phrygian': 'phrygian',
                 'lydian': 'lydian',
                 'mixolydian': 'mixolydian',
                 'locrian': 'locrian'}

# -----------------------------------------------------------------------------
# MAIN CLASS
# -----------------------------------------------------------------------------


class Scale:
    """A tonic (letter name and accidental, no octave) and a mode."""

    def __init__(self, tonic, mode=DEFAULT_MODE):
        # read the tonic at the reference octave
        self.tonic = pitches.parse(f'{tonic}0')
        self.mode = mode
        self.pattern = getPattern(mode)

    def __repr__(self):
        return f'<Scale {self.tonic.name} {self.mode}>'

    def __eq__(self, other):
        if not isinstance(other, Scale):
            return NotImplemented
        return (self.tonic, self.mode) == (other.tonic, other.mode)

    def __hash__(self):
        return hash((self.tonic, self.mode))

    def offset(self, p):
        """Distance in semitones from the tonic, reduced to 0-11."""
        return (p.midi - self.tonic.midi) % 12

    def containsNote(self, p):
        return self.offset(p) in self.pattern

    def degreeOf(self, p):
        offset = self.offset(p)
        if offset not in self.pattern:
            return None
        return self.pattern.index(offset) + 1

    def isTonic(self, p):
        return self.degreeOf(p) == 1

    def isLeadingTone(self, p):
        return self.degreeOf(p) == 7

    def pitchFromDegree(self, degree, octave=4):
        """Pitch of a degree (1-7), counted up from the tonic in the
        given octave, with the scale's preferred spelling."""
        midi = (self.tonic.midi + 12 * octave + self.pattern[degree - 1])
        return pitches.fromSemitoneIndex(midi, self.prefersSharps())

    def getNotes(self, octave=4):
        return [self.pitchFromDegree(d, octave) for d in range(1, 8)]

    @property
    def leadingTone(self):
        return self.pitchFromDegree(7, 0)

    def getDiatonicRange(self, low, high):
        """Scale members from low to high inclusive."""
        return [p for p in pitches.pitchRange(low, high,
                                              self.prefersSharps())
                if self.containsNote(p)]

    def relativeMinor(self):
        tonic = pitches.transposeBySemitones(self.tonic, -3,
                                             self.prefersSharps())
        return Scale(tonic.name, 'naturalMinor')

    def relativeMajor(self):
        tonic = pitches.transposeBySemitones(self.tonic, 3,
                                             self.prefersSharps())
        return Scale(tonic.name, 'major')

    def prefersSharps(self):
        return self.tonic.accidental != 'b' and self.tonic.name != 'F'

    def toMusic21Key(self):
        """Return a :class:`~music21.key.Key` for key signatures."""
        m21tonic = self.tonic.name.replace('b', '-')
        m21mode = MUSIC21_MODES.get(self.mode, 'major')
        if m21mode == 'minor':
            m21tonic = m21tonic.lower()
        return key.Key(m21tonic, m21mode)

# -----------------------------------------------------------------------------
# FUNCTIONS
# -----------------------------------------------------------------------------


def getPattern(mode):
    """Return the seven semitone offsets of a mode. Unknown modes
    are read as major, and a warning is logged."""
    if mode not in PATTERNS:
        logger.warning(f'Unknown mode {mode!r}; using the major pattern.')
        return PATTERNS[DEFAULT_MODE]
    return PATTERNS[mode]


def containsNote(p, tonic, mode=DEFAULT_MODE):
    return Scale(tonic, mode).containsNote(p)


def degreeOf(p, tonic, mode=DEFAULT_MODE):
    return Scale(tonic, mode).degreeOf(p)


def isTonic(p, tonic, mode=DEFAULT_MODE):
    return degreeOf(p, tonic, mode) == 1


def isLeadingTone(p, tonic, mode=DEFAULT_MODE):
    return degreeOf(p, tonic, mode) == 7

# -----------------------------------------------------------------------------


class Test(unittest.TestCase):

    def runTest(self):
        pass

    def test_degreeOf(self):
        d = Scale('D', 'dorian')
        self.assertEqual(d.degreeOf(pitches.parse('C5')), 7)
        self.assertIsNone(d.degreeOf(pitches.parse('C#5')))
        self.assertTrue(d.isTonic(pitches.parse('D3')))


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
