#!/usr/bin/env python3
'''
The BuildFeature model.  Per build type configuration of the auto-assigner.
'''
from sqlalchemy import Column, Integer, String

from investigation_assigner.constants import (BUILD_FEATURE_TYPE,
                                              USERS_TO_IGNORE_SEPARATOR)
from investigation_assigner.schema.base import Base
from investigation_assigner.schema.user import normalize_username


class BuildFeature(Base):
    '''
    Schema representation of a build feature that is attached to a build type
    '''
    __tablename__ = 'build_feature'
    id = Column(Integer, primary_key=True)

    build_type = Column(String(500), nullable=False)
    feature_type = Column(String(255), nullable=False)

    # username of the person that gets whatever nobody else could be blamed
    # for
    default_responsible = Column(String(255), nullable=True)

    # comma separated usernames that are never blamed, i.e. bots
    _users_to_ignore = Column('users_to_ignore', String, nullable=True)

    # where the report of each processed build is sent
    email_address = Column(String(255), nullable=True)

    def __init__(self,
                 build_type: str,
                 feature_type: str=BUILD_FEATURE_TYPE,
                 default_responsible: str=None,
                 users_to_ignore: str=None,
                 email_address: str=None):
        '''
        Creates a new BuildFeature instance
        '''
        self.build_type = build_type.strip()
        self.feature_type = feature_type
        self.default_responsible = default_responsible
        self._users_to_ignore = users_to_ignore
        self.email_address = email_address

    @property
    def users_to_ignore(self):
        '''
        A split version of the users to ignore
        '''
        if not self._users_to_ignore:
            return []

        usernames = self._users_to_ignore.split(USERS_TO_IGNORE_SEPARATOR)
        return [normalize_username(username)
                for username in usernames if username.strip()]

    def __repr__(self):
        '''
        Converts the build feature into a string
        '''
        return ('<BuildFeature {id} | {build_type} | {feature_type} />'
                .format(id=self.id,
                        build_type=self.build_type,
                        feature_type=self.feature_type))
