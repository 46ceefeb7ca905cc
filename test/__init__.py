'''
Stores the base class for running unit tests that all investigation_assigner
tests inherit from
'''
import os
import sys
import tempfile
import unittest

dir_path = os.path.dirname(os.path.realpath(__file__))
sys.path.insert(0, os.path.join(dir_path, '..'))

# the tests run against an in-memory database and a throwaway data directory
os.environ['IAA_DATABASE_URL'] = 'sqlite://'
os.environ['IAA_DATA_DIR'] = tempfile.mkdtemp(prefix='iaa_test_data_')

from investigation_assigner.db import Session, create
from investigation_assigner.schema import (
    Build,
    BuildFeature,
    BuildProblem,
    Change,
    FileModification,
    TestRun,
    User)


class AssignerTest(unittest.TestCase):
    '''
    Base class for investigation_assigner unit tests
    '''
    def setUp(self):
        '''
        Set up variables used across tests
        '''
        self.TestDir = os.path.dirname(os.path.realpath(__file__))
        self.DataDir = os.path.join(self.TestDir, 'testenv')

        self.session = Session()
        self.populate_example_data()

    def tearDown(self):
        '''
        Throws away everything the test stored
        '''
        self.session.rollback()
        self.session.close()

    def populate_example_data(self):
        '''
        Populates the sqlite database with example data
        '''
        self.alice = create(self.session, User, username='alice', name='Alice')
        self.bob = create(self.session, User, username='bob', name='Bob')
        self.carol = create(self.session, User, username='carol')
        self.example_build = create(
            self.session,
            Build,
            build_type='Unit Tests',
            project='Server',
            build_number='42')
        self.example_feature = create(
            self.session,
            BuildFeature,
            build_type='Unit Tests',
            default_responsible='bob',
            users_to_ignore='build-bot, ',
            email_address='team@example.com')
        self.session.flush()

    def create_change(self, committers, relative_paths, build=None,
                      is_personal=False):
        '''
        Creates a change of the example build
        '''
        change = create(self.session,
                        Change,
                        build=build or self.example_build,
                        version='rev{}'.format(len(relative_paths)),
                        description='example change',
                        is_personal=is_personal)
        change.committers.extend(committers)
        for relative_path in relative_paths:
            create(self.session,
                   FileModification,
                   change=change,
                   relative_path=relative_path)
        self.session.flush()
        return change

    def create_failed_test_run(self, test_name, failure_message=None,
                               stacktrace=None, build=None):
        test_run = create(self.session,
                          TestRun,
                          build=build or self.example_build,
                          test_name=test_name,
                          failure_message=failure_message,
                          stacktrace=stacktrace)
        self.session.flush()
        return test_run

    def create_build_problem(self, identity, description=None,
                             log_excerpt=None, build=None):
        build_problem = create(self.session,
                               BuildProblem,
                               build=build or self.example_build,
                               problem_type='compilationError',
                               identity=identity,
                               description=description,
                               log_excerpt=log_excerpt)
        self.session.flush()
        return build_problem
