# -*- coding: utf-8 -*-

__all__ = ['cantusFirmus',
           'consecutions',
           'context',
           'contrapunctus',
           'exercise',
           'formulas',
           'hints',
           'intervals',
           'lineChecker',
           'pitches',
           'result',
           'rule',
           'scales',
           'speciesProfile',
           'utilities',
           'validator',
           'vlChecker']

from contrapunctus import cantusFirmus
from contrapunctus import consecutions
from contrapunctus import context
from contrapunctus import contrapunctus
from contrapunctus import exercise
from contrapunctus import formulas
from contrapunctus import hints
from contrapunctus import intervals
from contrapunctus import lineChecker
from contrapunctus import pitches
from contrapunctus import result
from contrapunctus import rule
from contrapunctus import scales
from contrapunctus import speciesProfile
from contrapunctus import utilities
from contrapunctus import validator
from contrapunctus import vlChecker

# -----------------------------------------------------------------------------
# eof
