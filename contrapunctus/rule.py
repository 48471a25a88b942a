# -----------------------------------------------------------------------------
# Name:         rule.py
# Purpose:      Rule identifiers and the issues raised against them
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------
"""
Rule
====

The rule identifiers checked by the species engines, the three levels
of severity, and the :py:class:`ValidationIssue` that records a single
infraction at a position of the counterpoint."""

import enum

# -----------------------------------------------------------------------------
# MODULE VARIABLES
# -----------------------------------------------------------------------------


class Severity(enum.Enum):
    ERROR = 'error'
    WARNING = 'warning'
    SUGGESTION = 'suggestion'


class RuleId(enum.Enum):
    # structure
    LENGTH = 'length'
    ANACRUSIS = 'anacrusis'
    LAST_NOTE_WHOLE = 'last-note-whole'
    # vertical intervals
    CONSONANCE = 'consonance'
    UNISON = 'unison'
    VOICE_CROSSING = 'voice-crossing'
    START_CONSONANCE = 'start-consonance'
    END_CONSONANCE = 'end-consonance'
    # dissonance treatment
    PASSING_TONE = 'passing-tone'
    PASSING_TONE_STRONG = 'passing-tone-strong'
    BEAT_THREE_CONSONANCE = 'beat-three-consonance'
    # motion
    PARALLEL_FIFTHS = 'parallel-fifths'
    PARALLEL_OCTAVES = 'parallel-octaves'
    HIDDEN_FIFTHS = 'hidden-fifths'
    HIDDEN_OCTAVES = 'hidden-octaves'
    MOTION_TYPE = 'motion-type'
    STRONG_WEAK_PARALLELS = 'strong-weak-parallels'
    BATTUTA_FIFTHS = 'battuta-fifths'
    BATTUTA_OCTAVES = 'battuta-octaves'
    EXCESSIVE_PARALLELS = 'excessive-parallels'
    # cadence
    CADENCE = 'cadence'
    LEADING_TONE = 'leading-tone'
    CADENCE_SECOND_SPECIES = 'cadence-second-species'
    CADENCE_THIRD_SPECIES = 'cadence-third-species'
    # melody
    TRITONE = 'tritone'
    STEPWISE = 'stepwise'
    RANGE = 'range'
    NOTE_REPETITION = 'note-repetition'
    COMPOUND_TRITONE = 'compound-tritone'
    COMPOUND_DISSONANT_LEAP = 'compound-dissonant-leap'
    PROLONGED_DIRECTION = 'prolonged-direction'
    ARPEGGIO = 'arpeggio'


class CantusRuleId(enum.Enum):
    START_TONIC = 'cf-start-tonic'
    END_TONIC = 'cf-end-tonic'
    DIATONIC = 'cf-diatonic'
    LEAP_COUNT = 'cf-leap-count'
    LARGE_LEAP = 'cf-large-leap'
    CLIMAX = 'cf-climax'
    TRITONE = 'cf-tritone'
    PENULTIMATE = 'cf-penultimate'


# -----------------------------------------------------------------------------
# MAIN CLASS
# -----------------------------------------------------------------------------


class ValidationIssue():
    """A rule infraction found in a counterpoint. An issue has a rule
    identifier, a position (the index in the counterpoint, or -1 for
    issues that concern the line as a whole), a message for the user
    and a severity. Issues are not modified once made."""

    __slots__ = ('rule', 'position', 'message', 'severity', 'interval')

    def __init__(self, rule, position, message,
                 severity=Severity.ERROR, interval=None):
        object.__setattr__(self, 'rule', rule)
        object.__setattr__(self, 'position', position)
        object.__setattr__(self, 'message', message)
        object.__setattr__(self, 'severity', severity)
        # name of the interval involved, for display
        object.__setattr__(self, 'interval', interval)

    def __setattr__(self, name, value):
        raise AttributeError('Validation issues cannot be modified.')

    def __repr__(self):
        return (f'<ValidationIssue {self.rule.value} '
                f'{self.severity.value} at {self.position}>')

    def __eq__(self, other):
        if not isinstance(other, ValidationIssue):
            return NotImplemented
        return self.asTuple() == other.asTuple()

    def __hash__(self):
        return hash(self.asTuple())

    @property
    def scope(self):
        if self.position < 0:
            return 'global'
        return 'local'

    def asTuple(self):
        return (self.rule, self.position, self.message,
                self.severity, self.interval)

    def asDict(self):
        d = {'rule': self.rule.value,
             'position': self.position,
             'message': self.message,
             'severity': self.severity.value}
        if self.interval is not None:
            d['interval'] = self.interval
        return d

# -----------------------------------------------------------------------------


if __name__ == "__main__":
    # self_test code
    pass
# -----------------------------------------------------------------------------
# eof
