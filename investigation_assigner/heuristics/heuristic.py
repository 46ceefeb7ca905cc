'''
The interface that every responsibility heuristic implements
'''
from investigation_assigner.resolution import ResolutionContext, ResolutionResult


class Heuristic(object):
    '''
    A rule that tries to find the user responsible for the problems of a
    failed build.  Heuristics keep no state between calls and never see the
    results of the other heuristics.
    '''
    name = 'Heuristic'

    def find_responsible_user(
            self, context: ResolutionContext) -> ResolutionResult:
        '''
        Returns a (possibly empty) result for the problems in the context
        '''
        raise NotImplementedError

    def __repr__(self):
        return '<{} />'.format(self.name)
