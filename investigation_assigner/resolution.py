'''
The data the heuristics work with: who is responsible for a problem, the
read-only context of a failed build and the per-problem results.
'''
from collections import namedtuple
from typing import Iterable

from investigation_assigner.errors import DuplicateAssignmentError
from investigation_assigner.schema.aliases import ProblemItem


class Responsibility(namedtuple('Responsibility', ['user', 'description'])):
    '''
    A user together with the human readable reason why they are responsible,
    i.e. "is the only committer to the build since the last build".
    Immutable.
    '''
    __slots__ = ()

    def __str__(self):
        return '{user} who {description}'.format(
            user=getattr(self.user, 'username', self.user),
            description=self.description)


class ResolutionContext(object):
    '''
    Everything a heuristic knows about a failed build.  It is created once per
    build and is not changed while the heuristics run.
    '''

    def __init__(self,
                 build,
                 project: str,
                 build_problems: Iterable=(),
                 test_runs: Iterable=(),
                 excluded_usernames: Iterable[str]=()):
        '''
        Creates a new ResolutionContext instance
        '''
        self._build = build
        self._project = project
        self._build_problems = tuple(build_problems)
        self._test_runs = tuple(test_runs)
        self._excluded_usernames = frozenset(excluded_usernames)

    @property
    def build(self):
        return self._build

    @property
    def project(self):
        return self._project

    @property
    def build_problems(self):
        return self._build_problems

    @property
    def test_runs(self):
        return self._test_runs

    @property
    def excluded_usernames(self):
        '''
        Usernames that must never be made responsible
        '''
        return self._excluded_usernames

    @property
    def items(self):
        '''
        All of the problem items of the build, test runs first
        '''
        return self._test_runs + self._build_problems

    def is_excluded(self, user) -> bool:
        '''
        Whether the user is on the exclusion list
        '''
        return user.username in self._excluded_usernames

    def __repr__(self):
        return ('<ResolutionContext {build} | problems={problems} | '
                'tests={tests} />'
                .format(build=self._build,
                        problems=len(self._build_problems),
                        tests=len(self._test_runs)))


class ResolutionResult(object):
    '''
    Maps each problem item to the Responsibility found for it.  An item that is
    absent simply has no responsible user.  Iteration follows the order in
    which items were added.
    '''

    def __init__(self):
        '''
        Creates an empty ResolutionResult
        '''
        self._responsibilities = {}

    def add_responsibility(self,
                           item: ProblemItem,
                           responsibility: Responsibility):
        '''
        Assigns the responsibility for an item.  Each item can only be
        assigned once.
        '''
        if item in self._responsibilities:
            msg = ('{item} is already assigned to {existing}, cannot assign it '
                   'to {new}'.format(item=item,
                                     existing=self._responsibilities[item],
                                     new=responsibility))
            raise DuplicateAssignmentError(msg)

        self._responsibilities[item] = responsibility

    def get_responsibility(self, item: ProblemItem):
        '''
        Returns the Responsibility for the item or None
        '''
        return self._responsibilities.get(item)

    def is_empty(self) -> bool:
        return not self._responsibilities

    def merge_as_fallback(self, other: 'ResolutionResult'):
        '''
        Copies the entries of the other result for the items that this result
        does not have yet.  Existing entries are never overwritten.
        '''
        for item, responsibility in other.items():
            if item not in self._responsibilities:
                self._responsibilities[item] = responsibility

    def covers(self, items: Iterable) -> bool:
        '''
        Whether every one of the items has a responsibility
        '''
        return all(item in self._responsibilities for item in items)

    def items(self):
        return list(self._responsibilities.items())

    def __contains__(self, item):
        return item in self._responsibilities

    def __len__(self):
        return len(self._responsibilities)

    def __iter__(self):
        return iter(list(self._responsibilities))

    def __repr__(self):
        return '<ResolutionResult assigned={} />'.format(len(self))
