'''
Blames the only person that committed since the last build
'''
from investigation_assigner.constants import ONE_COMMITTER_DESCRIPTION
from investigation_assigner.heuristics.heuristic import Heuristic
from investigation_assigner.logger import logger
from investigation_assigner.resolution import (ResolutionContext,
                                               ResolutionResult,
                                               Responsibility)


class OneCommitterHeuristic(Heuristic):
    '''
    If exactly one (not excluded) user committed since the last build, they are
    responsible for every problem of the build
    '''
    name = 'Only One Committer Heuristic'

    def __init__(self, build_server):
        '''
        Create a OneCommitterHeuristic instance
        '''
        self.build_server = build_server

    def find_responsible_user(
            self, context: ResolutionContext) -> ResolutionResult:
        result = ResolutionResult()
        build = context.build

        committers = [
            committer for committer in
            self.build_server.get_committers_since_last_build(build)
            if not context.is_excluded(committer)]

        if len(committers) != 1:
            logger.debug('Build {}: found {} committers since the last build'
                         .format(build, len(committers)))
            return result

        responsibility = Responsibility(committers[0],
                                        ONE_COMMITTER_DESCRIPTION)
        for item in context.items:
            result.add_responsibility(item, responsibility)

        return result
