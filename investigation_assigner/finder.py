'''
Runs the heuristics in priority order and combines what they found
'''
from typing import List

from investigation_assigner.heuristics import Heuristic
from investigation_assigner.logger import logger
from investigation_assigner.resolution import ResolutionContext, ResolutionResult


class ResponsibleUserFinder(object):
    '''
    Owns an ordered list of heuristics.  The earlier a heuristic is in the list,
    the higher its priority: an item keeps the first responsibility found for
    it.
    '''

    def __init__(self, heuristics: List[Heuristic]):
        '''
        Create a ResponsibleUserFinder instance
        '''
        self.heuristics = list(heuristics)

    def find_responsible_user(
            self, context: ResolutionContext) -> ResolutionResult:
        '''
        Returns the responsibilities found for the problems in the context.
        Items that no heuristic could resolve are left out of the result.
        '''
        result = ResolutionResult()
        items = context.items

        for heuristic in self.heuristics:
            # nothing left to find, the remaining heuristics can't add anything
            if result.covers(items):
                break

            # every heuristic sees the whole context, not just the items that
            # are still unresolved
            heuristic_result = heuristic.find_responsible_user(context)
            logger.debug('{} found {} responsibilities for {}'
                         .format(heuristic, len(heuristic_result),
                                 context.build))
            result.merge_as_fallback(heuristic_result)

        return result
