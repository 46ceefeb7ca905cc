#!/usr/bin/env python3
'''
Object representation of an Investigation.
'''
import time
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from investigation_assigner.errors import AssignerError
from investigation_assigner.schema.base import Base
from investigation_assigner.schema.build_problem import BuildProblem
from investigation_assigner.schema.test_run import TestRun
from investigation_assigner.schema.user import User


class Investigation(Base):
    '''
    Schema representation of an Investigation.  Links a failed test run or a
    build problem with the user that was made responsible for it.
    '''
    __tablename__ = 'investigation'

    id = Column(Integer, primary_key=True)

    build_id = Column(Integer, ForeignKey('build.id'), nullable=False)
    build = relationship('Build', back_populates='investigations')

    # exactly one of the test run or the build problem is set
    test_run_id = Column(Integer, ForeignKey('test_run.id'), nullable=True)
    test_run = relationship('TestRun', back_populates='investigations')

    build_problem_id = Column(Integer,
                              ForeignKey('build_problem.id'),
                              nullable=True)
    build_problem = relationship('BuildProblem',
                                 back_populates='investigations')

    user_id = Column(Integer, ForeignKey('user.id'), nullable=False)
    user = relationship('User', back_populates='investigations')

    description = Column(String, nullable=False)
    created_timestamp = Column(Integer, nullable=False)

    def __init__(self,
                 item,
                 user: User,
                 description: str,
                 created_timestamp: int=None):
        '''
        Creates a new Investigation instance for a test run or build problem
        '''
        if isinstance(item, TestRun):
            self.test_run = item
        elif isinstance(item, BuildProblem):
            self.build_problem = item
        else:
            msg = ('An investigation can only be created for a test run or a '
                   'build problem, not {}'.format(item))
            raise AssignerError(msg)

        self.build = item.build
        self.user = user
        self.description = description
        self.created_timestamp = created_timestamp or int(time.time())

    @property
    def item(self):
        '''
        The test run or build problem under investigation
        '''
        return self.test_run or self.build_problem

    def __repr__(self):
        '''
        Converts the Investigation into a string
        '''
        return ('<Investigation {id} | {item} | {user} />'
                .format(id=self.id,
                        item=self.item,
                        user=self.user))
