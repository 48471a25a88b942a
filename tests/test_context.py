# -----------------------------------------------------------------------------
# Name:         test_context.py
# Purpose:      Tests for species profiles and exercise contexts
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------

import unittest

from contrapunctus import speciesProfile
from contrapunctus.context import ExerciseContext
from contrapunctus.exercise import Exercise
from contrapunctus.speciesProfile import MetricalRole, Species

# -----------------------------------------------------------------------------


class TestProfiles(unittest.TestCase):

    def test_asSpecies(self):
        self.assertEqual(speciesProfile.asSpecies(2), Species.SECOND)
        self.assertEqual(speciesProfile.asSpecies('third'), Species.THIRD)
        self.assertEqual(speciesProfile.asSpecies(Species.FIRST),
                         Species.FIRST)
        self.assertRaises(ValueError, speciesProfile.asSpecies, 4)
        self.assertRaises(KeyError, speciesProfile.asSpecies, 'fourth')

    def test_ratios(self):
        for species, ratio in ((1, 1), (2, 2), (3, 4)):
            profile = speciesProfile.getProfile(species)
            self.assertEqual(profile.ratio, ratio)
            self.assertEqual(profile.species.ratio, ratio)
            self.assertEqual(speciesProfile.expectedLength(profile, 8),
                             7 * ratio + 1)

    def test_windows(self):
        self.assertEqual(speciesProfile.FIRST_SPECIES.anacrusisWindow,
                         frozenset())
        self.assertEqual(speciesProfile.SECOND_SPECIES.anacrusisWindow,
                         frozenset([0]))
        self.assertEqual(speciesProfile.THIRD_SPECIES.anacrusisWindow,
                         frozenset([0, 1, 2]))

    def test_roles(self):
        p = speciesProfile.SECOND_SPECIES
        roles = [speciesProfile.roleOf(p, i, 5) for i in range(5)]
        self.assertEqual(roles, [MetricalRole.DOWNBEAT, MetricalRole.WEAK,
                                 MetricalRole.DOWNBEAT, MetricalRole.WEAK,
                                 MetricalRole.DOWNBEAT])
        p = speciesProfile.FIRST_SPECIES
        self.assertEqual(speciesProfile.strongPositions(p, 4), [0, 1, 2, 3])


class TestContext(unittest.TestCase):

    def setUp(self):
        ex = Exercise(['C4', 'D4', 'C4'], [None, 'C5', 'A4', 'B4', 'C5'])
        self.cxt = ExerciseContext(ex, species=2)

    def test_positions(self):
        self.assertEqual(len(self.cxt), 5)
        self.assertTrue(self.cxt[0].isRest)
        self.assertEqual(self.cxt[3].cfIndex, 1)
        self.assertEqual(self.cxt[3].cfPitch.nameWithOctave, 'D4')
        self.assertEqual(self.cxt[4].cfIndex, 2)
        self.assertEqual(self.cxt[2].harmonicInterval.name, 'P5')
        self.assertEqual(self.cxt[3].degree, 7)
        self.assertEqual(self.cxt[4].number, 5)

    def test_sounding(self):
        self.assertEqual(self.cxt.firstSounding.index, 1)
        self.assertEqual([p.index for p in self.cxt.soundingStrongPositions()],
                         [2, 4])
        self.assertEqual([p.index for p in
                          self.cxt.rolePositions(MetricalRole.WEAK)],
                         [1, 3])
        self.assertIsNone(self.cxt.pitchAt(0))
        self.assertIsNone(self.cxt.pitchAt(5))
        self.assertFalse(self.cxt.isConsonantAt(0))

    def test_lowerVoice(self):
        ex = Exercise(['C4', 'D4', 'C4'], ['C3', 'B2', 'C3'],
                      cpPosition='lower')
        cxt = ExerciseContext(ex, species=1)
        self.assertEqual(cxt[1].harmonicInterval.name, 'm10')
        upper, lower = cxt.upperAndLower(cxt[1])
        self.assertEqual(upper.nameWithOctave, 'D4')
        self.assertEqual(lower.nameWithOctave, 'B2')

    def test_customProfile(self):
        profile = speciesProfile.THIRD_SPECIES._replace(directionThreshold=4)
        ex = Exercise(['C4', 'C4'], ['C5', 'B4', 'A4', 'G4', 'C5'])
        cxt = ExerciseContext(ex, profile=profile)
        self.assertEqual(cxt.profile.directionThreshold, 4)
        self.assertEqual(cxt[2].role, MetricalRole.SEMI_STRONG)


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
