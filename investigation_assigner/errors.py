'''
Contains the investigation_assigner errors
'''


class AssignerError(Exception):
    '''
    Base class for all investigation_assigner errors
    '''


class UserError(AssignerError):
    '''
    Class for raising user errors
    '''


class DuplicateAssignmentError(AssignerError):
    '''
    Raised when a heuristic tries to assign a second responsibility to a
    problem item that already has one.  This is a bug in the heuristic, not a
    normal outcome.
    '''
