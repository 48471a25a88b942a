# -----------------------------------------------------------------------------
# Name:         validator.py
# Purpose:      Evaluating an exercise in one of the species
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------
"""
Validator
=========

The Validator module runs every check on an exercise for one species
and returns a :py:class:`~contrapunctus.result.ValidationResult`.

The three species share a single procedure, driven by a
:py:class:`~contrapunctus.speciesProfile.SpeciesProfile`:

#. The counterpoint must have the right number of notes for the
   cantus firmus. If not, a single `length` error is returned and
   nothing else is checked.
#. Rests may only open the counterpoint, within the positions the
   species allows (none in first species, the first position in second,
   the first three in third). The first misplaced rest ends the
   evaluation with a single `anacrusis` error.
#. The exercise is laid out position by position
   (:py:class:`~contrapunctus.context.ExerciseContext`), and the
   voice-leading checks (:py:mod:`~contrapunctus.vlChecker`) and the
   melodic checks (:py:mod:`~contrapunctus.lineChecker`) are run.

>>> from contrapunctus.exercise import Exercise
>>> ex = Exercise(['C4', 'D4'], ['G4', 'A4'])
>>> result = validate(ex, 1)
>>> result.valid
False
>>> result.errors[0].rule
<RuleId.PARALLEL_FIFTHS: 'parallel-fifths'>

Validation reads its inputs only. Calling it twice on the same exercise
gives equal results.
"""

import logging
import unittest

from contrapunctus import lineChecker
from contrapunctus import speciesProfile
from contrapunctus import vlChecker
from contrapunctus.context import ExerciseContext
from contrapunctus.exercise import Exercise
from contrapunctus.result import ResultCollector
from contrapunctus.rule import RuleId
from contrapunctus.speciesProfile import Species

# -----------------------------------------------------------------------------
# LOGGER
# -----------------------------------------------------------------------------

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = False
logger.addHandler(logging.NullHandler())

# -----------------------------------------------------------------------------
# MAIN SCRIPTS
# -----------------------------------------------------------------------------


def validate(exercise, species=Species.FIRST, profile=None):
    """Evaluate an exercise in the given species. A custom profile, if
    supplied, takes the place of the species' stock profile."""
    if profile is None:
        profile = speciesProfile.getProfile(species)
    cpLength = len(exercise.counterpoint)
    collector = ResultCollector(cpLength, profile.weights, profile.species)
    logger.debug(f'Validating {exercise!r} in '
                 f'{profile.species.name.lower()} species.')

    # (1) Structure: length.
    expected = speciesProfile.expectedLength(profile,
                                             len(exercise.cantusFirmus))
    if cpLength != expected:
        msg = (f'The counterpoint has {cpLength} notes but should have '
               f'{expected} against a cantus firmus of '
               f'{len(exercise.cantusFirmus)} notes.')
        collector.error(RuleId.LENGTH, -1, msg)
        logger.debug('Length mismatch; no further checks.')
        return collector.finish()

    # (2) Structure: rests.
    misplaced = findMisplacedRest(exercise.counterpoint, profile)
    if misplaced is not None:
        msg = restMessage(misplaced, cpLength, profile)
        collector.error(RuleId.ANACRUSIS, misplaced, msg)
        logger.debug(f'Misplaced rest at position {misplaced}; '
                     f'no further checks.')
        return collector.finish()

    # (3) Rules.
    cxt = ExerciseContext(exercise, profile=profile)
    vlChecker.checkVoiceLeading(cxt, collector)
    lineChecker.checkLine(cxt, collector)
    result = collector.finish()
    logger.debug(f'Finished: {result!r}')
    return result


def validateFirstSpecies(exercise):
    return validate(exercise, Species.FIRST)


def validateSecondSpecies(exercise):
    return validate(exercise, Species.SECOND)


def validateThirdSpecies(exercise):
    return validate(exercise, Species.THIRD)

# -----------------------------------------------------------------------------
# HELPER SCRIPTS
# -----------------------------------------------------------------------------


def findMisplacedRest(counterpoint, profile):
    """Return the index of the first rest that is not part of an
    opening run inside the anacrusis window, or None."""
    last = len(counterpoint) - 1
    opening = True
    for idx, p in enumerate(counterpoint):
        if p is not None:
            opening = False
            continue
        rules = [opening,
                 idx in profile.anacrusisWindow,
                 idx != last]
        if not all(rules):
            return idx
    return None


def restMessage(index, cpLength, profile):
    if not profile.anacrusisWindow:
        return (f'Note {index + 1}: rests are not allowed in '
                f'{profile.species.name.lower()} species.')
    if index == cpLength - 1:
        return f'Note {index + 1}: the counterpoint cannot end with a rest.'
    allowed = max(profile.anacrusisWindow) + 1
    if allowed == 1:
        where = 'the first position'
    else:
        where = f'the first {allowed} positions'
    return (f'Note {index + 1}: a rest may only open the counterpoint, '
            f'in {where}.')

# -----------------------------------------------------------------------------


class Test(unittest.TestCase):

    def runTest(self):
        pass

    def test_findMisplacedRest(self):
        third = speciesProfile.THIRD_SPECIES
        self.assertIsNone(findMisplacedRest([None, None, 'x', 'y'], third))
        self.assertEqual(findMisplacedRest(['x', None, 'y'], third), 1)
        self.assertEqual(findMisplacedRest([None] * 4 + ['x'], third), 3)
        first = speciesProfile.FIRST_SPECIES
        self.assertEqual(findMisplacedRest([None, 'x'], first), 0)

    def test_validate(self):
        ex = Exercise(['C4', 'D4'], ['G4', 'A4'])
        result = validate(ex, 1)
        self.assertEqual(result.errors[0].rule, RuleId.PARALLEL_FIFTHS)


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
