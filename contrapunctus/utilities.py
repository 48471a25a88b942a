# -----------------------------------------------------------------------------
# Name:         utilities.py
# Purpose:      Scripts shared among various modules
#
# Author:       Contrapunctus developers
# Copyright:    (c) 2025 by Contrapunctus developers
# License:      BSD, see license.txt
# -----------------------------------------------------------------------------

import html
import itertools
import logging
import unittest

# -----------------------------------------------------------------------------

PACKAGE_LOGGERS = ('contrapunctus.cantusFirmus',
                   'contrapunctus.consecutions',
                   'contrapunctus.context',
                   'contrapunctus.contrapunctus',
                   'contrapunctus.exercise',
                   'contrapunctus.formulas',
                   'contrapunctus.hints',
                   'contrapunctus.intervals',
                   'contrapunctus.lineChecker',
                   'contrapunctus.pitches',
                   'contrapunctus.scales',
                   'contrapunctus.validator',
                   'contrapunctus.vlChecker')


def pairwise(span):
    """s -> (s0, s1), (s1, s2), (s2, s3), ..."""
    a, b = itertools.tee(span)
    next(b, None)
    zipped = zip(a, b)
    return list(zipped)


def sign(value):
    return (value > 0) - (value < 0)


def setLogfile(filename, level=logging.DEBUG, mode='w'):
    """Send the messages of every module logger to a file."""
    f_handler = logging.FileHandler(filename, mode=mode)
    f_handler.setLevel(level)
    f_formatter = logging.Formatter('%(message)s')
    f_handler.setFormatter(f_formatter)
    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.addHandler(f_handler)
        logger.setLevel(level)
    return f_handler


def create_html_report(input):
    """
    Converts a report string to an HTML string,
    wrapping each line in a paragraph tag.

    Args:
        input: The report string to convert.

    Returns:
        An HTML string.
    """
    lines = input.splitlines()
    lines = [html.escape(line).replace('\t', '&nbsp;&nbsp;')
             for line in lines]
    html_lines = [f"""<p>{line}</p>""" for line in lines]
    return """\n""".join(html_lines)


# -----------------------------------------------------------------------------


class Test(unittest.TestCase):

    def runTest(self):
        pass

    def test_pairwise(self):
        self.assertEqual(pairwise([1, 2, 3]), [(1, 2), (2, 3)])
        self.assertEqual(pairwise([1]), [])

    def test_create_html_report(self):
        report = 'REPORT\n\tNote 2: a < b'
        self.assertEqual(create_html_report(report),
                         '<p>REPORT</p>\n<p>&nbsp;&nbsp;Note 2: a &lt; b</p>')


# -----------------------------------------------------------------------------


if __name__ == '__main__':
    unittest.main()

# -----------------------------------------------------------------------------
# eof
