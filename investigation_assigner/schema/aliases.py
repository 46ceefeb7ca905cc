'''
Selection of typing aliases based on our schema models
'''
from typing import List, Union

from investigation_assigner.schema.build_problem import BuildProblem
from investigation_assigner.schema.change import Change
from investigation_assigner.schema.test_run import TestRun
from investigation_assigner.schema.user import User

# a thing that needs a responsible user
ProblemItem = Union[TestRun, BuildProblem]

# aliases for typing
BuildProblemList = List[BuildProblem]
ChangeList = List[Change]
TestRunList = List[TestRun]
UserList = List[User]
