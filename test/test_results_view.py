'''
Tests investigation_assigner.results_view
'''
import io
from mock import Mock

from investigation_assigner.db import create
from investigation_assigner.results_view import ResultsView, describe_item
from investigation_assigner.schema import Investigation
from . import AssignerTest


class TestResultsView(AssignerTest):
    '''
    Tests rendering the investigations of a build
    '''
    def setUp(self):
        super().setUp()
        self.stream = io.StringIO()
        self.statistics_reporter = Mock()
        self.view = ResultsView(self.statistics_reporter, stream=self.stream)

    def test_describe_item(self):
        test_run = self.create_failed_test_run('FooTest.testBar')
        build_problem = self.create_build_problem('compilation')

        self.assertEqual(describe_item(test_run), 'test FooTest.testBar')
        self.assertEqual(describe_item(build_problem), 'problem compilation')

    def test_render_investigations(self):
        test_run = self.create_failed_test_run('FooTest.testBar')
        investigation = create(self.session,
                               Investigation,
                               item=test_run,
                               user=self.alice,
                               description='is the only committer')

        self.view.render(self.example_build, [investigation])

        output = self.stream.getvalue()
        self.assertIn('Investigations of Server :: Unit Tests #42', output)
        self.assertIn('test FooTest.testBar -> alice who is the only '
                      'committer', output)
        self.statistics_reporter.report_shown_investigations.assert_called_once_with(1)

    def test_render_nothing(self):
        self.view.render(self.example_build, [])

        self.assertIn('No investigations were assigned',
                      self.stream.getvalue())
        self.statistics_reporter.report_shown_investigations.assert_not_called()
