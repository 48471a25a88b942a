# -----------------------------------------------------------------------------
# Name:         speciesProfile.py
# Purpose:      Rule settings and metrical roles for each species
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------
"""
Species Profile
===============

A species is fixed by the number of counterpoint notes that sound
against each note of the cantus firmus: one in first species, two in
second species, four in third species.

A :py:class:`SpeciesProfile` gathers the settings that distinguish the
species engines: the ratio, the positions that may hold an opening rest,
the length of same-direction runs that draws a warning, the degrees
accepted before the final, and the scoring weights. Profiles are
immutable; make a variant with ``profile._replace(...)``.

>>> getProfile(Species.THIRD).directionThreshold
11

Metrical roles follow from the ratio alone:

   * downbeat -- the first note over each cantus note, and always the
     final note
   * semi-strong -- the third of four notes (third species only)
   * weak -- every other position
"""

import collections
import enum
import unittest

from contrapunctus.rule import RuleId

# -----------------------------------------------------------------------------
# MODULE VARIABLES
# -----------------------------------------------------------------------------


class Species(enum.Enum):
    FIRST = 1
    SECOND = 2
    THIRD = 3

    @property
    def ratio(self):
        return {1: 1, 2: 2, 3: 4}[self.value]


class MetricalRole(enum.Enum):
    DOWNBEAT = 'downbeat'
    SEMI_STRONG = 'semi-strong'
    WEAK = 'weak'


SpeciesProfile = collections.namedtuple('SpeciesProfile', [
    'species',
    'ratio',
    'anacrusisWindow',        # positions that may hold an opening rest
    'directionThreshold',     # longest acceptable same-direction run
    'upperCadenceDegrees',
    'lowerCadenceDegrees',
    'upperCadenceRule',
    'lowerCadenceRule',
    'weights',                # deductions for error, warning, suggestion
    'maxRange',               # semitones
    'parallelRunLimit',       # consecutive thirds or sixths
    'checkStepwise',
    'checkPenultimateStrong',
    'checkCrossBeatParallels',
    'repetition',             # 'weakToStrong', 'consecutive' or None
    'hasCambiata',
    'hasStrongPassingTone',
])

FIRST_SPECIES = SpeciesProfile(
    species=Species.FIRST,
    ratio=1,
    anacrusisWindow=frozenset(),
    directionThreshold=8,
    upperCadenceDegrees=frozenset([7]),
    lowerCadenceDegrees=frozenset([2, 5, 7]),
    upperCadenceRule=RuleId.LEADING_TONE,
    lowerCadenceRule=RuleId.CADENCE,
    weights=(15, 5, 1),
    maxRange=19,
    parallelRunLimit=4,
    checkStepwise=True,
    checkPenultimateStrong=False,
    checkCrossBeatParallels=False,
    repetition=None,
    hasCambiata=False,
    hasStrongPassingTone=False,
)

SECOND_SPECIES = FIRST_SPECIES._replace(
    species=Species.SECOND,
    ratio=2,
    anacrusisWindow=frozenset([0]),
    upperCadenceRule=RuleId.CADENCE_SECOND_SPECIES,
    lowerCadenceRule=RuleId.CADENCE_SECOND_SPECIES,
    weights=(10, 4, 1),
    checkPenultimateStrong=True,
    checkCrossBeatParallels=True,
    repetition='weakToStrong',
)

THIRD_SPECIES = FIRST_SPECIES._replace(
    species=Species.THIRD,
    ratio=4,
    anacrusisWindow=frozenset([0, 1, 2]),
    directionThreshold=11,
    upperCadenceRule=RuleId.CADENCE_THIRD_SPECIES,
    lowerCadenceRule=RuleId.CADENCE_THIRD_SPECIES,
    weights=(8, 3, 1),
    checkStepwise=False,
    repetition='consecutive',
    hasCambiata=True,
    hasStrongPassingTone=True,
)

PROFILES = {Species.FIRST: FIRST_SPECIES,
            Species.SECOND: SECOND_SPECIES,
            Species.THIRD: THIRD_SPECIES}

# -----------------------------------------------------------------------------
# FUNCTIONS
# -----------------------------------------------------------------------------


def asSpecies(species):
    """Accept a Species, its number (1, 2, 3) or its name ('second')."""
    if isinstance(species, Species):
        return species
    if isinstance(species, str):
        return Species[species.upper()]
    return Species(species)


def getProfile(species):
    return PROFILES[asSpecies(species)]


def expectedLength(profile, cfLength):
    """Counterpoint length for a cantus of the given length:
    one final note plus ratio notes against every other cantus note."""
    return profile.ratio * (cfLength - 1) + 1


def roleOf(profile, index, cpLength):
    if index == cpLength - 1:
        return MetricalRole.DOWNBEAT
    beat = index % profile.ratio
    if beat == 0:
        return MetricalRole.DOWNBEAT
    elif profile.ratio == 4 and beat == 2:
        return MetricalRole.SEMI_STRONG
    else:
        return MetricalRole.WEAK


def cfIndexOf(profile, index):
    return index // profile.ratio


def strongPositions(profile, cpLength):
    """Indexes of the downbeats, in order."""
    return [i for i in range(cpLength)
            if roleOf(profile, i, cpLength) == MetricalRole.DOWNBEAT]

# -----------------------------------------------------------------------------


class Test(unittest.TestCase):

    def runTest(self):
        pass

    def test_roleOf(self):
        p = getProfile(3)
        roles = [roleOf(p, i, 9) for i in range(9)]
        self.assertEqual(roles[0], MetricalRole.DOWNBEAT)
        self.assertEqual(roles[2], MetricalRole.SEMI_STRONG)
        self.assertEqual(roles[3], MetricalRole.WEAK)
        self.assertEqual(roles[8], MetricalRole.DOWNBEAT)
        self.assertEqual(strongPositions(p, 9), [0, 4, 8])

    def test_expectedLength(self):
        self.assertEqual(expectedLength(getProfile('second'), 5), 9)
        self.assertEqual(expectedLength(getProfile(Species.THIRD), 5), 17)


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
