'''
Assigns the investigations of a failed build
'''
from investigation_assigner.db import create
from investigation_assigner.finder import ResponsibleUserFinder
from investigation_assigner.heuristics import (BrokenFileHeuristic,
                                               DefaultUserHeuristic,
                                               OneCommitterHeuristic)
from investigation_assigner.logger import logger
from investigation_assigner.resolution import ResolutionContext, ResolutionResult
from investigation_assigner.schema import Build, Investigation


def create_responsible_user_finder(build_server,
                                   custom_parameters,
                                   problem_text_extractor):
    '''
    Returns a finder with the heuristics in priority order.  The default user
    is only used when nothing more specific was found.
    '''
    return ResponsibleUserFinder([
        BrokenFileHeuristic(build_server, problem_text_extractor),
        OneCommitterHeuristic(build_server),
        DefaultUserHeuristic(build_server, custom_parameters),
    ])


class FailedBuildProcessor(object):
    '''
    Collects the problems of a failed build, finds who is responsible for them
    and stores the result as investigations
    '''

    def __init__(self,
                 session,
                 responsible_user_finder: ResponsibleUserFinder,
                 build_server,
                 custom_parameters,
                 statistics_reporter=None,
                 email_reporter=None):
        self.session = session
        self.responsible_user_finder = responsible_user_finder
        self.build_server = build_server
        self.custom_parameters = custom_parameters
        self.statistics_reporter = statistics_reporter
        self.email_reporter = email_reporter

    def process(self, build: Build) -> ResolutionResult:
        '''
        Assigns investigations for the failed test runs and build problems of
        the build that nobody investigates yet
        '''
        if build.is_personal:
            logger.info('Skipping personal build {}'.format(build))
            return ResolutionResult()

        if not self.custom_parameters.is_feature_enabled(build):
            logger.info('The auto-assigner is not enabled for {}'.format(build))
            return ResolutionResult()

        test_runs = [
            test_run
            for test_run in self.build_server.get_failed_test_runs(build)
            if not self.build_server.is_under_investigation(test_run)]
        build_problems = [
            build_problem
            for build_problem in self.build_server.get_build_problems(build)
            if not self.build_server.is_under_investigation(build_problem)]

        if not test_runs and not build_problems:
            logger.info('Nothing to investigate for {}'.format(build))
            return ResolutionResult()

        context = ResolutionContext(
            build,
            build.project,
            build_problems=build_problems,
            test_runs=test_runs,
            excluded_usernames=self.custom_parameters.get_users_to_ignore(
                build))

        result = self.responsible_user_finder.find_responsible_user(context)
        logger.info('Found responsible users for {} of {} problems of {}'
                    .format(len(result), len(context.items), build))

        for item, responsibility in result.items():
            investigation = create(self.session,
                                   Investigation,
                                   item=item,
                                   user=responsibility.user,
                                   description=responsibility.description)
            logger.info('Assigned {}'.format(investigation))

        if self.statistics_reporter and not result.is_empty():
            self.statistics_reporter.report_assigned_investigations(len(result))

        if self.email_reporter:
            self.email_reporter.send_results(build, result)

        return result
