'''
The auto-assigner settings of a build, read from its build feature
'''
from investigation_assigner.constants import BUILD_FEATURE_TYPE
from investigation_assigner.db import get
from investigation_assigner.schema import BuildFeature


class CustomParameters(object):
    '''
    Reads the build feature that is attached to the build type of a build
    '''

    def __init__(self, session):
        self.session = session

    def get_build_feature(self, build):
        '''
        Returns the auto-assigner build feature of the build or None
        '''
        return get(self.session,
                   BuildFeature,
                   build_type=build.build_type,
                   feature_type=BUILD_FEATURE_TYPE)

    def is_feature_enabled(self, build) -> bool:
        return self.get_build_feature(build) is not None

    def get_default_responsible(self, build):
        '''
        Returns the username of the default responsible user or None
        '''
        feature = self.get_build_feature(build)
        if feature is None or not feature.default_responsible:
            return None

        return feature.default_responsible.strip() or None

    def get_users_to_ignore(self, build):
        '''
        Returns the usernames that must never be blamed for the build
        '''
        feature = self.get_build_feature(build)
        if feature is None:
            return []

        return feature.users_to_ignore

    def get_email_for_email_reporter(self, build):
        '''
        Returns the address that the report of the build is sent to or None
        '''
        feature = self.get_build_feature(build)
        if feature is None or not feature.email_address:
            return None

        return feature.email_address.strip() or None
