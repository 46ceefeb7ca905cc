#!/usr/bin/env python3
'''
Read access to the builds, their failures and their changes that are stored in
the database
'''
from investigation_assigner.db import get, get_all
from investigation_assigner.errors import UserError
from investigation_assigner.schema import (
    Build,
    BuildProblem,
    Change,
    Investigation,
    TestRun,
    User,
    normalize_username)
from investigation_assigner.schema.aliases import (
    BuildProblemList,
    ChangeList,
    ProblemItem,
    TestRunList,
    UserList)


class BuildServer(object):
    '''
    Answers the questions the heuristics and the processor ask about a build
    '''

    def __init__(self, session):
        '''
        Create a BuildServer instance on top of a database session
        '''
        self.session = session

    def get_build(self, build_id: int) -> Build:
        '''
        Returns the build with the id or raises a UserError
        '''
        build = get(self.session, Build, id=build_id)
        if not build:
            msg = 'There is no build with the id {}'.format(build_id)
            raise UserError(msg)

        return build

    def get_failed_test_runs(self, build: Build) -> TestRunList:
        '''
        Returns the failed test runs of the build
        '''
        return [test_run for test_run in get_all(self.session,
                                                 TestRun,
                                                 build=build)
                if test_run.failed]

    def get_build_problems(self, build: Build) -> BuildProblemList:
        '''
        Returns the problems of the build that are not tests
        '''
        return get_all(self.session, BuildProblem, build=build)

    def get_changes_since_last_build(self, build: Build) -> ChangeList:
        '''
        Returns the changes that were first built by this build.  Personal
        changes are never part of them.
        '''
        return get_all(self.session,
                       Change,
                       build=build,
                       is_personal=False)

    def get_committers_since_last_build(self, build: Build) -> UserList:
        '''
        Returns everyone who committed since the last build, each user once
        '''
        committers = []
        for change in self.get_changes_since_last_build(build):
            for committer in change.committers:
                if committer not in committers:
                    committers.append(committer)

        return committers

    def find_user(self, username: str):
        '''
        Returns the user with the username or None when there is none
        '''
        return get(self.session, User, username=normalize_username(username))

    def get_investigations(self, build: Build):
        '''
        Returns the investigations assigned for the build
        '''
        return get_all(self.session, Investigation, build=build)

    def is_under_investigation(self, item: ProblemItem) -> bool:
        '''
        Whether somebody already investigates the test run or build problem
        '''
        if isinstance(item, TestRun):
            investigation = get(self.session, Investigation,
                                test_run=item)
        else:
            investigation = get(self.session, Investigation,
                                build_problem=item)

        return investigation is not None
