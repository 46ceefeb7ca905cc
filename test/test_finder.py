'''
Tests investigation_assigner.finder
'''
import unittest
from mock import Mock

from investigation_assigner.finder import ResponsibleUserFinder
from investigation_assigner.resolution import (ResolutionContext,
                                               ResolutionResult,
                                               Responsibility)


class TestResponsibleUserFinder(unittest.TestCase):
    '''
    Tests investigation_assigner.finder.ResponsibleUserFinder
    '''
    def setUp(self):
        self.heuristic = Mock()
        self.second_heuristic = Mock()
        self.heuristic.find_responsible_user.return_value = ResolutionResult()
        self.second_heuristic.find_responsible_user.return_value = (
            ResolutionResult())
        self.finder = ResponsibleUserFinder([self.heuristic,
                                             self.second_heuristic])

        self.test_run = Mock()
        self.build_problem = Mock()
        self.user = Mock(username='alice')
        self.context = ResolutionContext(Mock(),
                                         'Server',
                                         build_problems=[self.build_problem],
                                         test_runs=[self.test_run])

    def _result(self, *entries):
        result = ResolutionResult()
        for item, description in entries:
            result.add_responsibility(item,
                                      Responsibility(self.user, description))
        return result

    def test_responsible_not_found(self):
        result = self.finder.find_responsible_user(self.context)
        self.assertTrue(result.is_empty())

    def test_check_second_if_not_found_in_first(self):
        self.finder.find_responsible_user(self.context)

        self.second_heuristic.find_responsible_user.assert_called_once_with(
            self.context)

    def test_check_second_if_first_is_partial(self):
        '''
        The second heuristic gets the whole context, not just what is left
        '''
        self.heuristic.find_responsible_user.return_value = self._result(
            (self.test_run, 'first'))
        self.second_heuristic.find_responsible_user.return_value = (
            self._result((self.test_run, 'second'),
                         (self.build_problem, 'second')))

        result = self.finder.find_responsible_user(self.context)

        self.second_heuristic.find_responsible_user.assert_called_once_with(
            self.context)
        self.assertEqual(result.get_responsibility(self.test_run).description,
                         'first')
        self.assertEqual(
            result.get_responsibility(self.build_problem).description,
            'second')

    def test_not_call_second_if_found_in_first(self):
        self.heuristic.find_responsible_user.return_value = self._result(
            (self.test_run, 'first'), (self.build_problem, 'first'))

        self.finder.find_responsible_user(self.context)

        self.second_heuristic.find_responsible_user.assert_not_called()

    def test_take_first_found(self):
        self.heuristic.find_responsible_user.return_value = self._result(
            (self.test_run, 'Failed description'))
        self.second_heuristic.find_responsible_user.return_value = (
            self._result((self.test_run, 'Failed description 2')))

        result = self.finder.find_responsible_user(self.context)

        self.assertFalse(result.is_empty())
        self.assertEqual(result.get_responsibility(self.test_run).description,
                         'Failed description')
        self.assertIsNone(result.get_responsibility(self.build_problem))

    def test_short_circuit_has_no_observable_effect(self):
        '''
        Stopping early gives the same result as merging every heuristic
        '''
        first = self._result((self.test_run, 'first'),
                             (self.build_problem, 'first'))
        second = self._result((self.test_run, 'second'))
        self.heuristic.find_responsible_user.return_value = first
        self.second_heuristic.find_responsible_user.return_value = second

        result = self.finder.find_responsible_user(self.context)

        expected = ResolutionResult()
        expected.merge_as_fallback(first)
        expected.merge_as_fallback(second)
        self.assertEqual(result.items(), expected.items())

    def test_no_items(self):
        context = ResolutionContext(Mock(), 'Server')

        result = self.finder.find_responsible_user(context)

        self.assertTrue(result.is_empty())
        self.heuristic.find_responsible_user.assert_not_called()
