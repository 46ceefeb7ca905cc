#!/usr/bin/env python3
'''
One stop shop for importing all of our models
'''
from . base import Base
from . build import Build
from . build_feature import BuildFeature
from . build_problem import BuildProblem
from . change import Change, change_committer
from . file_modification import FileModification
from . investigation import Investigation
from . test_run import TestRun
from . user import User, normalize_username
