'''
The heuristics that find the user responsible for a failed build
'''
from . heuristic import Heuristic
from . broken_file import BrokenFileHeuristic
from . default_user import DefaultUserHeuristic
from . one_committer import OneCommitterHeuristic
