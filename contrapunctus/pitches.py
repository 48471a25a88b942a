# -----------------------------------------------------------------------------
# Name:         pitches.py
# Purpose:      Pitch objects in scientific pitch notation
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------
"""
Pitches
=======

The Pitches module parses and produces pitches written in scientific
pitch notation ('C4', 'F#3', 'Bb5') and converts them to and from
a semitone index (MIDI number, with C4 = 60).

A :py:class:`Pitch` keeps its spelling: C#4 and Db4 share a semitone
index but remain distinct pitches for the purpose of counting
diatonic steps.

The base functions are:

   :py:func:`parse(text)` -- read a note name and return a Pitch.

   :py:func:`fromSemitoneIndex(midi, preferSharps)` -- spell a semitone
   index canonically.

   :py:func:`diatonicStepIndex(pitch)` -- letter index plus seven
   times the octave, used for generic interval counting.
"""

import logging
import re
import unittest

from music21 import note
from music21 import pitch as m21pitch

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

LETTERS = ('C', 'D', 'E', 'F', 'G', 'A', 'B')
LETTER_OFFSETS = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}
ACCIDENTAL_OFFSETS = {'': 0, '#': 1, 'b': -1}

SHARP_NAMES = ('C', 'C#', 'D', 'D#', 'E', 'F',
               'F#', 'G', 'G#', 'A', 'A#', 'B')
FLAT_NAMES = ('C', 'Db', 'D', 'Eb', 'E', 'F',
              'Gb', 'G', 'Ab', 'A', 'Bb', 'B')

# Enharmonic equivalents within the pitch class, in both directions.
ENHARMONICS = {'Db': 'C#', 'C#': 'Db',
               'Eb': 'D#', 'D#': 'Eb',
               'Fb': 'E', 'E': 'Fb',
               'Gb': 'F#', 'F#': 'Gb',
               'Ab': 'G#', 'G#': 'Ab',
               'Bb': 'A#', 'A#': 'Bb',
               'Cb': 'B', 'B': 'Cb',
               'E#': 'F', 'F': 'E#',
               'B#': 'C', 'C': 'B#'}

# Inclusive MIDI bounds of the four vocal ranges.
VOCAL_RANGES = {'bass': (40, 60),
                'tenor': (48, 67),
                'alto': (53, 72),
                'soprano': (60, 79)}

PITCH_PATTERN = re.compile(r'([A-Ga-g])([#b]?)([0-9])')

# -----------------------------------------------------------------------------
# EXCEPTION HANDLERS
# -----------------------------------------------------------------------------


class PitchParseError(ValueError):

    def __init__(self, desc):
        super().__init__(desc)
        self.desc = desc
        self.report = ''

    def logerror(self):
        self.report += f'PITCH ERROR\n{self.desc}'
        logger.error(self.report)
        return self.report

# -----------------------------------------------------------------------------
# MAIN CLASS
# -----------------------------------------------------------------------------


class Pitch:
    """An immutable pitch: a letter name, an accidental ('', '#', 'b')
    and an octave number. Pitches compare by spelling; use
    :py:meth:`isEnharmonic` to compare by sound."""

    __slots__ = ('_step', '_accidental', '_octave')

    def __init__(self, step, accidental='', octave=4):
        step = step.upper()
        if step not in LETTER_OFFSETS:
            raise PitchParseError(f'Unknown letter name: {step!r}.')
        if accidental not in ACCIDENTAL_OFFSETS:
            raise PitchParseError(f'Unknown accidental: {accidental!r}.')
        object.__setattr__(self, '_step', step)
        object.__setattr__(self, '_accidental', accidental)
        object.__setattr__(self, '_octave', int(octave))

    def __setattr__(self, name, value):
        raise AttributeError('Pitch objects cannot be modified.')

    def __repr__(self):
        return f'<Pitch {self.nameWithOctave}>'

    def __str__(self):
        return self.nameWithOctave

    def __eq__(self, other):
        if not isinstance(other, Pitch):
            return NotImplemented
        return ((self._step, self._accidental, self._octave)
                == (other._step, other._accidental, other._octave))

    def __hash__(self):
        return hash((self._step, self._accidental, self._octave))

    def get_step(self):
        return self._step

    def get_accidental(self):
        return self._accidental

    def get_octave(self):
        return self._octave

    def get_name(self):
        return self._step + self._accidental

    def get_nameWithOctave(self):
        return f'{self.name}{self._octave}'

    def get_midi(self):
        return ((self._octave + 1) * 12
                + LETTER_OFFSETS[self._step]
                + ACCIDENTAL_OFFSETS[self._accidental])

    def get_diatonicStepIndex(self):
        return LETTERS.index(self._step) + 7 * self._octave

    def get_frequency(self):
        return 440.0 * 2 ** ((self.midi - 69) / 12)

    step = property(get_step)
    accidental = property(get_accidental)
    octave = property(get_octave)
    name = property(get_name)
    nameWithOctave = property(get_nameWithOctave)
    midi = property(get_midi)
    diatonicStepIndex = property(get_diatonicStepIndex)
    frequency = property(get_frequency)

    def isEnharmonic(self, other):
        return self.midi == other.midi

    def toMusic21(self):
        """Return the equivalent :class:`~music21.pitch.Pitch`."""
        m21accidental = {'': '', '#': '#', 'b': '-'}[self._accidental]
        return m21pitch.Pitch(f'{self._step}{m21accidental}{self._octave}')

    def toNote(self, quarterLength=4.0):
        """Return a :class:`~music21.note.Note` sounding this pitch."""
        n = note.Note(self.toMusic21())
        n.quarterLength = quarterLength
        return n

# -----------------------------------------------------------------------------
# FUNCTIONS
# -----------------------------------------------------------------------------


def parse(text):
    """Read a pitch name such as 'C4', 'f#3' or 'Bb5'.
    Raise a :py:class:`PitchParseError` if the text is not a letter,
    an optional single accidental and a single-digit octave."""
    if isinstance(text, Pitch):
        return text
    if not isinstance(text, str):
        raise PitchParseError(f'Pitch names must be strings, not {text!r}.')
    match = PITCH_PATTERN.fullmatch(text)
    if not match:
        raise PitchParseError(f'Cannot read {text!r} as a pitch name.')
    step, accidental, octave = match.groups()
    return Pitch(step.upper(), accidental, int(octave))


def toSemitoneIndex(p):
    return p.midi


def fromSemitoneIndex(midi, preferSharps=True):
    """Spell a semitone index canonically, with sharps by default.
    The result is not necessarily the spelling a pitch was parsed from."""
    midi = int(midi)
    names = SHARP_NAMES if preferSharps else FLAT_NAMES
    name = names[midi % 12]
    octave = midi // 12 - 1
    return Pitch(name[0], name[1:], octave)


def transposeBySemitones(p, semitones, preferSharps=True):
    return fromSemitoneIndex(p.midi + semitones, preferSharps)


def diatonicStepIndex(p):
    return p.diatonicStepIndex


def genericInterval(p1, p2):
    """Letter-counting distance between two pitches, unison = 1."""
    return abs(p2.diatonicStepIndex - p1.diatonicStepIndex) + 1


def enharmonicName(name):
    """Return the enharmonic partner of a pitch-class name, if any."""
    return ENHARMONICS.get(name)


def inVocalRange(p, voice):
    low, high = VOCAL_RANGES[voice]
    return low <= p.midi <= high


def pitchRange(low, high, preferSharps=True):
    """All chromatic pitches from low to high inclusive."""
    return [fromSemitoneIndex(m, preferSharps)
            for m in range(low.midi, high.midi + 1)]

# -----------------------------------------------------------------------------


class Test(unittest.TestCase):

    def runTest(self):
        pass

    def test_parse(self):
        p = parse('f#3')
        self.assertEqual(p.nameWithOctave, 'F#3')
        self.assertEqual(p.midi, 54)
        self.assertRaises(PitchParseError, parse, 'H4')
        self.assertRaises(PitchParseError, parse, 'C##4')

    def test_toMusic21(self):
        self.assertEqual(parse('Bb3').toMusic21().midi, 58)
        self.assertEqual(parse('C#4').toNote().pitch.nameWithOctave, 'C#4')


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
