'''
Extracts the text that describes a failure
'''
from investigation_assigner.constants import MAX_PROBLEM_TEXT_LENGTH
from investigation_assigner.schema import TestRun


class ProblemTextExtractor(object):
    '''
    Returns the failure message and stacktrace of a test run, or the
    description and log of a build problem
    '''

    def __init__(self, max_length: int=MAX_PROBLEM_TEXT_LENGTH):
        self.max_length = max_length

    def get_problem_text(self, item, build=None) -> str:
        '''
        Returns the text of a test run or build problem, may be empty
        '''
        if isinstance(item, TestRun):
            parts = [item.failure_message, item.stacktrace]
        else:
            parts = [item.description, item.log_excerpt]

        text = '\n'.join(part for part in parts if part)
        return text[:self.max_length]
