'''
CLI output for the investigations of a build
'''
from blessings import Terminal

from investigation_assigner.schema import Build, TestRun


class ResultsView(Terminal):
    '''
    Prints the investigations of a build, one line per test run or build
    problem
    '''

    def __init__(self, statistics_reporter=None, stream=None):
        '''
        Create a ResultsView instance
        '''
        super().__init__(stream=stream)
        self.statistics_reporter = statistics_reporter

    def render(self, build: Build, investigations):
        '''
        Renders the investigations of a build
        '''
        self.write('')
        self.write('    ' + self.underline('Investigations of {} #{}'.format(
            build.full_name, build.build_number)))
        self.write('')

        if not investigations:
            self.write('  No investigations were assigned')
            return

        for investigation in investigations:
            self.write('  {item} -> {user} who {description}'.format(
                item=self.bold(describe_item(investigation.item)),
                user=self.green(investigation.user.username),
                description=investigation.description))

        if self.statistics_reporter:
            self.statistics_reporter.report_shown_investigations(
                len(investigations))

    def write(self, line: str):
        self.stream.write(line + '\n')


def describe_item(item) -> str:
    '''
    Returns a short name for a test run or build problem
    '''
    if isinstance(item, TestRun):
        return 'test {}'.format(item.test_name)
    return 'problem {}'.format(item.identity)
