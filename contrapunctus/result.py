# -----------------------------------------------------------------------------
# Name:         result.py
# Purpose:      Collecting issues and scoring an evaluation
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------
"""
Result
======

The checkers report what they find to a :py:class:`ResultCollector`,
which sorts each :py:class:`~contrapunctus.rule.ValidationIssue` into
errors, warnings and suggestions, and files it under its position in
the counterpoint.

When the checks are done, :py:meth:`ResultCollector.finish` computes the
score and returns a :py:class:`ValidationResult`, which is not changed
afterwards.

The score starts at 100 and loses a fixed number of points per issue,
according to the species: 15/5/1 in first species, 10/4/1 in second,
8/3/1 in third (error/warning/suggestion). It never goes below zero.
An exercise is valid when it has no errors, whatever its score.
"""

import unittest

from contrapunctus.rule import RuleId, Severity, ValidationIssue

# -----------------------------------------------------------------------------
# MAIN CLASSES
# -----------------------------------------------------------------------------


class PositionResult():
    """The issues found at one position of the counterpoint."""

    __slots__ = ('_issues',)

    def __init__(self, issues=()):
        self._issues = tuple(issues)

    def __repr__(self):
        return f'<PositionResult valid={self.valid} issues={len(self.issues)}>'

    def __eq__(self, other):
        if not isinstance(other, PositionResult):
            return NotImplemented
        return self.issues == other.issues

    def get_issues(self):
        return self._issues

    issues = property(get_issues)

    @property
    def valid(self):
        return not any(i.severity == Severity.ERROR for i in self.issues)

    def asDict(self):
        return {'valid': self.valid,
                'issues': [i.asDict() for i in self.issues]}


class ValidationResult():
    """The outcome of evaluating one exercise. Its attributes are
    read-only."""

    def __init__(self, errors, warnings, suggestions,
                 perPositionResults, score, species=None):
        self._errors = tuple(errors)
        self._warnings = tuple(warnings)
        self._suggestions = tuple(suggestions)
        self._perPositionResults = tuple(perPositionResults)
        self._score = score
        self._species = species

    def __repr__(self):
        return (f'<ValidationResult valid={self.valid} score={self.score} '
                f'errors={len(self.errors)} warnings={len(self.warnings)} '
                f'suggestions={len(self.suggestions)}>')

    def __eq__(self, other):
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return self.asTuple() == other.asTuple()

    def get_errors(self):
        return self._errors

    def get_warnings(self):
        return self._warnings

    def get_suggestions(self):
        return self._suggestions

    def get_perPositionResults(self):
        return self._perPositionResults

    def get_score(self):
        return self._score

    def get_species(self):
        return self._species

    errors = property(get_errors)
    warnings = property(get_warnings)
    suggestions = property(get_suggestions)
    perPositionResults = property(get_perPositionResults)
    score = property(get_score)
    species = property(get_species)

    def asTuple(self):
        return (self.errors, self.warnings, self.suggestions,
                self.perPositionResults, self.score, self.species)

    @property
    def valid(self):
        return len(self.errors) == 0

    @property
    def issues(self):
        """All issues, errors first."""
        return self.errors + self.warnings + self.suggestions

    def rules(self, severity=None):
        """The rule identifiers found, in order, optionally
        for one severity only."""
        return [i.rule for i in self.issues
                if severity is None or i.severity == severity]

    def issuesFor(self, rule):
        return [i for i in self.issues if i.rule == rule]

    def asDict(self):
        return {'valid': self.valid,
                'score': self.score,
                'species': self.species.value if self.species else None,
                'errors': [i.asDict() for i in self.errors],
                'warnings': [i.asDict() for i in self.warnings],
                'suggestions': [i.asDict() for i in self.suggestions],
                'perPositionResults': [p.asDict()
                                       for p in self.perPositionResults]}


class ResultCollector():
    """Gathers issues while an exercise is checked."""

    def __init__(self, length, weights=(15, 5, 1), species=None):
        self.length = length
        self.weights = weights
        self.species = species
        self.errors = []
        self.warnings = []
        self.suggestions = []
        self.positionIssues = [[] for _ in range(length)]

    def add(self, rule, position, message,
            severity=Severity.ERROR, interval=None):
        issue = ValidationIssue(rule, position, message, severity, interval)
        if severity == Severity.ERROR:
            self.errors.append(issue)
        elif severity == Severity.WARNING:
            self.warnings.append(issue)
        else:
            self.suggestions.append(issue)
        if 0 <= position < self.length:
            self.positionIssues[position].append(issue)
        return issue

    def error(self, rule, position, message, interval=None):
        return self.add(rule, position, message, Severity.ERROR, interval)

    def warning(self, rule, position, message, interval=None):
        return self.add(rule, position, message, Severity.WARNING, interval)

    def suggestion(self, rule, position, message, interval=None):
        return self.add(rule, position, message, Severity.SUGGESTION,
                        interval)

    def finish(self):
        score = calculateScore(len(self.errors), len(self.warnings),
                               len(self.suggestions), self.weights)
        return ValidationResult(
            self.errors, self.warnings, self.suggestions,
            [PositionResult(issues) for issues in self.positionIssues],
            score, self.species)

# -----------------------------------------------------------------------------
# FUNCTIONS
# -----------------------------------------------------------------------------


def calculateScore(errors, warnings, suggestions, weights=(15, 5, 1)):
    """100 less the weighted issue counts, never below 0."""
    errorWeight, warningWeight, suggestionWeight = weights
    score = (100
             - errors * errorWeight
             - warnings * warningWeight
             - suggestions * suggestionWeight)
    return max(0, score)

# -----------------------------------------------------------------------------


class Test(unittest.TestCase):

    def runTest(self):
        pass

    def test_calculateScore(self):
        self.assertEqual(calculateScore(1, 2, 3), 72)
        self.assertEqual(calculateScore(1, 1, 1, (8, 3, 1)), 88)
        self.assertEqual(calculateScore(9, 0, 0, (15, 5, 1)), 0)

    def test_collector(self):
        c = ResultCollector(3, (10, 4, 1))
        c.error(RuleId.CONSONANCE, 1, 'dissonance')
        c.warning(RuleId.RANGE, -1, 'range')
        result = c.finish()
        self.assertFalse(result.valid)
        self.assertEqual(result.score, 86)
        self.assertFalse(result.perPositionResults[1].valid)
        self.assertTrue(result.perPositionResults[0].valid)


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
