'''
Tests investigation_assigner.processing
'''
from mock import Mock

from . import AssignerTest
from investigation_assigner.build_server import BuildServer
from investigation_assigner.custom_parameters import CustomParameters
from investigation_assigner.db import create
from investigation_assigner.processing import (FailedBuildProcessor,
                                               create_responsible_user_finder)
from investigation_assigner.schema import Build, Investigation, User
from investigation_assigner.text_extractor import ProblemTextExtractor


class TestFailedBuildProcessor(AssignerTest):
    '''
    Runs the whole pipeline against the example database
    '''
    def setUp(self):
        super().setUp()
        self.build_server = BuildServer(self.session)
        self.custom_parameters = CustomParameters(self.session)
        self.statistics_reporter = Mock()
        self.email_reporter = Mock()
        finder = create_responsible_user_finder(self.build_server,
                                                self.custom_parameters,
                                                ProblemTextExtractor())
        self.processor = FailedBuildProcessor(
            self.session,
            finder,
            self.build_server,
            self.custom_parameters,
            statistics_reporter=self.statistics_reporter,
            email_reporter=self.email_reporter)

        self.test_run = self.create_failed_test_run(
            'test_assign',
            failure_message='expected 3 but was 4',
            stacktrace='at server.processing.FailedBuildProcessor.process'
                       '(FailedBuildProcessor.java:88)')
        self.build_problem = self.create_build_problem(
            'exitCode', description='Process exited with code 1')

    def test_broken_file_then_one_committer(self):
        '''
        The test run mentions carol's file, the build problem does not but
        carol is still the only committer
        '''
        self.create_change([self.carol],
                           ['src/server/processing/FailedBuildProcessor.java'])

        result = self.processor.process(self.example_build)

        test_run_responsibility = result.get_responsibility(self.test_run)
        self.assertEqual(test_run_responsibility.user, self.carol)
        self.assertTrue(test_run_responsibility.description.startswith(
            'changed the suspicious file'))

        problem_responsibility = result.get_responsibility(self.build_problem)
        self.assertEqual(problem_responsibility.user, self.carol)
        self.assertEqual(
            problem_responsibility.description,
            'is the only committer to the build since the last build')

        investigations = self.build_server.get_investigations(
            self.example_build)
        self.assertEqual(len(investigations), 2)
        self.assertEqual([investigation.item
                          for investigation in investigations],
                         [self.test_run, self.build_problem])
        self.statistics_reporter.report_assigned_investigations \
            .assert_called_once_with(2)
        self.email_reporter.send_results.assert_called_once_with(
            self.example_build, result)

    def test_default_user_gets_the_rest(self):
        '''
        Two committers and no broken file, so only the default user is left
        '''
        self.create_change([self.alice], ['README.md'])
        self.create_change([self.carol], ['docs/index.md'])

        result = self.processor.process(self.example_build)

        for item in (self.test_run, self.build_problem):
            self.assertEqual(result.get_responsibility(item).user, self.bob)

    def test_ignored_users_are_not_blamed(self):
        bot = create(self.session, User, username='build-bot')
        self.create_change([bot], ['version.properties'])
        self.create_change([self.carol], ['docs/index.md'])
        self.example_feature.default_responsible = None

        result = self.processor.process(self.example_build)

        self.assertEqual(result.get_responsibility(self.test_run).user,
                         self.carol)

    def test_nobody_found(self):
        self.example_feature.default_responsible = None

        result = self.processor.process(self.example_build)

        self.assertTrue(result.is_empty())
        self.assertEqual(
            self.build_server.get_investigations(self.example_build), [])
        self.statistics_reporter.report_assigned_investigations \
            .assert_not_called()

    def test_already_investigated_items_are_skipped(self):
        create(self.session,
               Investigation,
               item=self.test_run,
               user=self.alice,
               description='is looking into it')
        self.create_change([self.carol], ['docs/index.md'])

        result = self.processor.process(self.example_build)

        self.assertIsNone(result.get_responsibility(self.test_run))
        self.assertEqual(result.get_responsibility(self.build_problem).user,
                         self.carol)

    def test_personal_build_is_skipped(self):
        personal_build = create(self.session,
                                Build,
                                build_type='Unit Tests',
                                project='Server',
                                build_number='43',
                                is_personal=True)
        self.create_failed_test_run('test_personal', build=personal_build)

        result = self.processor.process(personal_build)

        self.assertTrue(result.is_empty())
        self.email_reporter.send_results.assert_not_called()

    def test_nothing_failed(self):
        passing_build = create(self.session,
                               Build,
                               build_type='Unit Tests',
                               project='Server',
                               build_number='44')
        self.session.flush()

        result = self.processor.process(passing_build)

        self.assertTrue(result.is_empty())

    def test_feature_disabled_build_is_skipped(self):
        other_build = create(self.session,
                             Build,
                             build_type='No Feature',
                             project='Server',
                             build_number='7')
        test_run = self.create_failed_test_run('test_other', build=other_build)
        self.create_change([self.carol], ['docs/index.md'], build=other_build)

        result = self.processor.process(other_build)

        self.assertTrue(result.is_empty())
        self.assertFalse(self.build_server.is_under_investigation(test_run))
        self.statistics_reporter.report_assigned_investigations \
            .assert_not_called()
        self.email_reporter.send_results.assert_not_called()

    def test_default_responsible_ignores_case(self):
        self.example_feature.default_responsible = 'Bob'
        self.create_change([self.alice], ['README.md'])
        self.create_change([self.carol], ['docs/index.md'])

        result = self.processor.process(self.example_build)

        self.assertEqual(result.get_responsibility(self.test_run).user,
                         self.bob)
