# -----------------------------------------------------------------------------
# Name:         test_third_species.py
# Purpose:      Tests for evaluating third species counterpoint
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------

import unittest

from contrapunctus import validator
from contrapunctus.exercise import Exercise
from contrapunctus.rule import RuleId, Severity

# -----------------------------------------------------------------------------


def evaluate(cf, cp, cpPosition='upper'):
    ex = Exercise(cf, cp, cpPosition=cpPosition)
    return validator.validateThirdSpecies(ex)


def positions(result, rule):
    return [issue.position for issue in result.issuesFor(rule)]


CF = ['C4', 'D4', 'C4']

DISSONANCE_RULES = (RuleId.CONSONANCE,
                    RuleId.PASSING_TONE,
                    RuleId.BEAT_THREE_CONSONANCE)


class TestCambiata(unittest.TestCase):

    def test_descendingCambiata(self):
        result = evaluate(CF, ['G4', 'F4', 'D4', 'E4',
                               'F4', 'E4', 'D4', 'B4', 'C5'])
        self.assertTrue(result.valid)
        for rule in DISSONANCE_RULES:
            self.assertEqual(result.issuesFor(rule), [])
        # D4 on the third beat, the third note of the figure
        self.assertEqual(result.rules(), [RuleId.PASSING_TONE_STRONG])
        issue = result.suggestions[0]
        self.assertEqual(issue.position, 2)
        self.assertIn('cambiata', issue.message)
        self.assertEqual(result.score, 99)


class TestPassingTones(unittest.TestCase):

    def test_strongBeatPassingTone(self):
        result = evaluate(CF, ['C5', 'G4', 'F4', 'E4',
                               'F4', 'G4', 'A4', 'B4', 'C5'])
        self.assertTrue(result.valid)
        self.assertEqual(result.rules(), [RuleId.PASSING_TONE_STRONG])
        self.assertEqual(result.suggestions[0].position, 2)
        self.assertEqual(result.suggestions[0].interval, 'P4')
        self.assertEqual(result.score, 99)

    def test_beatThreeDissonance(self):
        result = evaluate(CF, ['C5', 'G4', 'F4', 'A4',
                               'F4', 'G4', 'A4', 'B4', 'C5'])
        self.assertIn(2, positions(result, RuleId.BEAT_THREE_CONSONANCE))
        issue = result.issuesFor(RuleId.BEAT_THREE_CONSONANCE)[0]
        self.assertIn('not left by step', issue.message)
        self.assertIn('cambiata', issue.message)
        self.assertFalse(result.perPositionResults[2].valid)


class TestLine(unittest.TestCase):

    def test_repeatedNotes(self):
        result = evaluate(CF, ['C5', 'C5', 'C5', 'B4',
                               'A4', 'B4', 'A4', 'B4', 'C5'])
        self.assertTrue(result.valid)
        self.assertEqual(result.rules(), [RuleId.NOTE_REPETITION])
        self.assertEqual(result.warnings[0].position, 2)
        self.assertEqual(result.score, 97)

    def test_noStepwiseRule(self):
        result = evaluate(CF, ['G4', 'F4', 'D4', 'E4',
                               'F4', 'E4', 'D4', 'B4', 'C5'])
        self.assertEqual(result.issuesFor(RuleId.STEPWISE), [])

    def test_cadence(self):
        result = evaluate(CF, ['C5', 'B4', 'A4', 'B4',
                               'A4', 'B4', 'C5', 'D5', 'C5'])
        issues = result.issuesFor(RuleId.CADENCE_THIRD_SPECIES)
        self.assertEqual([i.position for i in issues], [7])
        self.assertEqual(issues[0].severity, Severity.WARNING)

    def test_prolongedDirection(self):
        cf = ['C4', 'D4', 'E4', 'C4']
        run = ['C4', 'D4', 'E4', 'F4', 'G4', 'A4', 'B4', 'C5', 'D5', 'E5',
               'F5', 'G5']
        # twelve moves up
        result = evaluate(cf, run + ['A5'])
        self.assertEqual(positions(result, RuleId.PROLONGED_DIRECTION), [0])
        self.assertEqual(
            result.issuesFor(RuleId.PROLONGED_DIRECTION)[0].severity,
            Severity.WARNING)
        # eleven moves up are allowed in third species
        result = evaluate(cf, run + ['F5'])
        self.assertEqual(result.issuesFor(RuleId.PROLONGED_DIRECTION), [])


class TestStructure(unittest.TestCase):

    def test_openingRests(self):
        result = evaluate(CF, [None, 'G4', 'F4', 'E4',
                               'F4', 'G4', 'A4', 'B4', 'C5'])
        self.assertTrue(result.valid)
        self.assertEqual(result.issuesFor(RuleId.ANACRUSIS), [])

    def test_tooManyRests(self):
        result = evaluate(CF, [None, None, None, None,
                               'F4', 'G4', 'A4', 'B4', 'C5'])
        self.assertEqual(result.rules(), [RuleId.ANACRUSIS])
        self.assertEqual(result.errors[0].position, 3)

    def test_length(self):
        result = evaluate(CF, ['C5', 'B4', 'A4', 'B4', 'C5'])
        self.assertEqual(result.rules(), [RuleId.LENGTH])
        self.assertEqual(result.score, 92)


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
