#!/usr/bin/env python3
'''
The Build model.  A single finished build of a build type, along with the
failures it produced.
'''
import time
from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.orm import relationship

from investigation_assigner.schema.base import Base


class Build(Base):
    '''
    Schema representation of a build.  Acts as the parent of the test runs,
    build problems and changes that belong to it.
    '''
    __tablename__ = 'build'
    id = Column(Integer, primary_key=True)

    # the configuration that was built, i.e. "Unit Tests"
    build_type = Column(String(500), nullable=False)
    project = Column(String(500), nullable=False)
    build_number = Column(String(255), nullable=False)

    # personal builds run uncommitted changes of a single user and are never
    # auto-assigned
    is_personal = Column(Boolean, nullable=False, default=False)

    finish_timestamp = Column(Integer, nullable=False)

    test_runs = relationship('TestRun',
                             back_populates='build',
                             order_by='TestRun.id',
                             cascade='all, delete, delete-orphan')
    build_problems = relationship('BuildProblem',
                                  back_populates='build',
                                  order_by='BuildProblem.id',
                                  cascade='all, delete, delete-orphan')

    # the changes first detected by this build, i.e. the changes since the
    # last build
    changes = relationship('Change',
                           back_populates='build',
                           order_by='Change.id',
                           cascade='all, delete, delete-orphan')

    investigations = relationship('Investigation',
                                  back_populates='build',
                                  cascade='all, delete, delete-orphan')

    def __init__(self,
                 build_type: str,
                 project: str,
                 build_number: str,
                 is_personal: bool=False,
                 finish_timestamp: int=None):
        '''
        Creates a new Build instance
        '''
        if not finish_timestamp:
            finish_timestamp = int(time.time())

        self.build_type = build_type.strip()
        self.project = project.strip()
        self.build_number = str(build_number)
        self.is_personal = is_personal
        self.finish_timestamp = finish_timestamp

    @property
    def full_name(self):
        '''
        The project qualified name of the build type
        '''
        return '{project} :: {build_type}'.format(project=self.project,
                                                 build_type=self.build_type)

    def __repr__(self):
        '''
        Converts the build into a string
        '''
        return ('<Build {id} | {full_name} #{build_number} />'
                .format(id=self.id,
                        full_name=self.full_name,
                        build_number=self.build_number))
