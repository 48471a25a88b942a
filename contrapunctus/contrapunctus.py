# -----------------------------------------------------------------------------
# Name:         contrapunctus.py
# Purpose:      Evaluating species counterpoint exercises
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------
"""
Contrapunctus
=============

This is the main program module.

Contrapunctus tests a counterpoint written against a cantus firmus
for conformity with the rules of first, second and third species
counterpoint in the tradition of Fux's *Gradus ad Parnassum* (1725).

The main script is:

>>> evaluateCounterpoint(['D4', 'F4', 'E4', 'D4'],
...                      ['A4', 'A4', 'C#5', 'D5'],
...                      key='D', mode='dorian')

The exercise is given as two lists of pitch names (e.g., 'C4', 'F#3',
'Bb5'). In the counterpoint, None or 'r' stands for a rest. The
species is given as 1, 2 or 3 (or a
:py:class:`~contrapunctus.speciesProfile.Species`), and the
counterpoint may lie above (`cpPosition='upper'`) or below
(`cpPosition='lower'`) the cantus firmus.

The evaluation is reported in one of three ways:

   True -- Default option. A text report is returned.

   'html' -- An HTML report is returned.

   False -- The :py:class:`~contrapunctus.result.ValidationResult` is
   returned.
"""

import logging
import unittest

from contrapunctus import pitches
from contrapunctus import utilities
from contrapunctus import validator
from contrapunctus.exercise import Exercise, ExerciseError
from contrapunctus.speciesProfile import asSpecies

# -----------------------------------------------------------------------------
# LOGGER
# -----------------------------------------------------------------------------

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = False
logger.addHandler(logging.NullHandler())

# -----------------------------------------------------------------------------
# MAIN SCRIPT
# -----------------------------------------------------------------------------


def evaluateCounterpoint(cantusFirmus,
                         counterpoint,
                         species=1,
                         key='C',
                         mode='major',
                         cpPosition='upper',
                         report=True):
    """
    Determine whether a counterpoint conforms to the rules of the species.

    If report is set to True, the program will produce a text report.
    If report is set to 'html', the program will produce an HTML report.
    If report is set to False, the program returns the validation result,
    or None if the exercise could not be read.
    """
    logger.debug(f'Evaluating counterpoint in species {species}.')
    try:
        species = asSpecies(species)
    except (KeyError, ValueError):
        err = ExerciseError(f'Unknown species: {species!r}. '
                            f'Use 1, 2 or 3.')
        return reportFailure(err, report)
    try:
        ex = Exercise(cantusFirmus, counterpoint, key, mode, cpPosition)
    except (pitches.PitchParseError, ExerciseError) as err:
        return reportFailure(err, report)
    result = validator.validate(ex, species)
    if not report:
        return result
    rpt = makeReport(result)
    if report == 'html':
        return utilities.create_html_report(rpt)
    return rpt

# -----------------------------------------------------------------------------
# HELPER SCRIPTS
# -----------------------------------------------------------------------------


def reportFailure(err, report):
    rpt = err.logerror()
    if not report:
        return None
    if report == 'html':
        return utilities.create_html_report(rpt)
    return rpt


def makeReport(result):
    """Format a validation result as text."""
    species = result.species.name.lower() if result.species else ''
    lines = ['COUNTERPOINT REPORT']
    if species:
        lines.append(f'Species: {species}')
    lines.append(f'Score: {result.score}')
    if result.valid:
        lines.append('No errors found.')
    else:
        lines.append('The following errors were found:')
        lines.extend('\t\t' + issue.message for issue in result.errors)
    if result.warnings:
        lines.append('Warnings:')
        lines.extend('\t\t' + issue.message for issue in result.warnings)
    if result.suggestions:
        lines.append('Suggestions:')
        lines.extend('\t\t' + issue.message for issue in result.suggestions)
    return '\n'.join(lines)

# -----------------------------------------------------------------------------


class Test(unittest.TestCase):

    def runTest(self):
        pass

    def test_evaluateCounterpoint(self):
        rpt = evaluateCounterpoint(['C4', 'D4'], ['G4', 'A4'])
        self.assertTrue(rpt.startswith('COUNTERPOINT REPORT'))
        self.assertIn('parallel fifths', rpt)

    def test_badPitch(self):
        rpt = evaluateCounterpoint(['C4', 'H4'], ['G4', 'A4'])
        self.assertTrue(rpt.startswith('PITCH ERROR'))


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
