# -----------------------------------------------------------------------------
# Name:         test_contrapunctus.py
# Purpose:      Tests for the main evaluation script and its reports
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------

import logging
import os
import tempfile
import unittest

from contrapunctus import contrapunctus
from contrapunctus import utilities
from contrapunctus.result import ValidationResult
from contrapunctus.speciesProfile import Species

# -----------------------------------------------------------------------------

CF = ['C4', 'D4', 'C4']


class TestReports(unittest.TestCase):

    def test_textReport(self):
        rpt = contrapunctus.evaluateCounterpoint(CF, ['C5', 'B4', 'C5'])
        lines = rpt.splitlines()
        self.assertEqual(lines[0], 'COUNTERPOINT REPORT')
        self.assertEqual(lines[1], 'Species: first')
        self.assertEqual(lines[2], 'Score: 100')
        self.assertEqual(lines[3], 'No errors found.')

    def test_errorReport(self):
        rpt = contrapunctus.evaluateCounterpoint(['C4', 'D4'], ['G4', 'A4'])
        self.assertIn('The following errors were found:', rpt)
        self.assertIn('\t\t', rpt)

    def test_htmlReport(self):
        rpt = contrapunctus.evaluateCounterpoint(CF, ['C5', 'B4', 'C5'],
                                                 report='html')
        self.assertTrue(rpt.startswith('<p>COUNTERPOINT REPORT</p>'))

    def test_noReport(self):
        result = contrapunctus.evaluateCounterpoint(
            CF, [None, 'C5', 'A4', 'B4', 'C5'], species=2, report=False)
        self.assertIsInstance(result, ValidationResult)
        self.assertEqual(result.species, Species.SECOND)
        self.assertTrue(result.valid)

    def test_speciesNames(self):
        result = contrapunctus.evaluateCounterpoint(
            CF, ['C5', 'B4', 'C5'], species='first', report=False)
        self.assertEqual(result.species, Species.FIRST)

    def test_lowerVoice(self):
        result = contrapunctus.evaluateCounterpoint(
            CF, ['C3', 'B2', 'C3'], cpPosition='lower', report=False)
        self.assertTrue(result.valid)


class TestFailures(unittest.TestCase):

    def test_unknownSpecies(self):
        rpt = contrapunctus.evaluateCounterpoint(CF, ['C5', 'B4', 'C5'],
                                                 species=5)
        self.assertTrue(rpt.startswith('EXERCISE ERROR'))
        rpt = contrapunctus.evaluateCounterpoint(CF, ['C5', 'B4', 'C5'],
                                                 species='fifth')
        self.assertTrue(rpt.startswith('EXERCISE ERROR'))

    def test_badPitch(self):
        rpt = contrapunctus.evaluateCounterpoint(CF, ['C5', 'Q4', 'C5'])
        self.assertTrue(rpt.startswith('PITCH ERROR'))
        rpt = contrapunctus.evaluateCounterpoint(CF, ['C5', 'Q4', 'C5'],
                                                 report='html')
        self.assertTrue(rpt.startswith('<p>PITCH ERROR</p>'))

    def test_badPitchNoReport(self):
        result = contrapunctus.evaluateCounterpoint(CF, ['C5', 'Q4', 'C5'],
                                                    report=False)
        self.assertIsNone(result)

    def test_badPosition(self):
        rpt = contrapunctus.evaluateCounterpoint(CF, ['C5', 'B4', 'C5'],
                                                 cpPosition='middle')
        self.assertTrue(rpt.startswith('EXERCISE ERROR'))


class TestLogfile(unittest.TestCase):

    def test_setLogfile(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'contrapunctus.log')
            handler = utilities.setLogfile(path)
            try:
                contrapunctus.evaluateCounterpoint(CF, ['C5', 'B4', 'C5'])
            finally:
                for name in utilities.PACKAGE_LOGGERS:
                    logger = logging.getLogger(name)
                    logger.removeHandler(handler)
                handler.close()
            with open(path) as f:
                self.assertIn('Evaluating counterpoint', f.read())


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
