'''
Assigns whatever is left to the configured default responsible user
'''
from investigation_assigner.constants import DEFAULT_USER_DESCRIPTION
from investigation_assigner.heuristics.heuristic import Heuristic
from investigation_assigner.logger import logger
from investigation_assigner.resolution import (ResolutionContext,
                                               ResolutionResult,
                                               Responsibility)


class DefaultUserHeuristic(Heuristic):
    '''
    Assigns every problem of the build to the default responsible user of the
    build type.  It does not look at the problems at all, so it should be the
    last heuristic that runs.
    '''
    name = 'Default User Heuristic'

    def __init__(self, build_server, custom_parameters):
        '''
        Create a DefaultUserHeuristic instance

        @param build_server: used to look up the configured user
        @param custom_parameters: provides the configured username
        '''
        self.build_server = build_server
        self.custom_parameters = custom_parameters

    def find_responsible_user(
            self, context: ResolutionContext) -> ResolutionResult:
        result = ResolutionResult()
        build = context.build

        default_responsible = self.custom_parameters.get_default_responsible(
            build)
        if not default_responsible:
            return result

        responsible_user = self.build_server.find_user(default_responsible)
        if responsible_user is None:
            # a misconfigured build type should not break the assignment
            logger.warning('The default responsible user "{}" does not exist. '
                           'Failed build {}'.format(default_responsible, build))
            return result

        description = DEFAULT_USER_DESCRIPTION.format(
            full_name=build.full_name,
            build_number=build.build_number)
        responsibility = Responsibility(responsible_user, description)
        for item in context.items:
            result.add_responsibility(item, responsibility)

        return result
