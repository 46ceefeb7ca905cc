#!/usr/bin/env python3
'''
The BuildProblem model.  A failure of the build that is not a test, for example
a compilation error or a non-zero exit code.
'''
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from investigation_assigner.schema.base import Base


class BuildProblem(Base):
    '''
    Schema representation of a build problem
    '''
    __tablename__ = 'build_problem'
    id = Column(Integer, primary_key=True)

    # i.e. "compilationError" or "exitCode"
    problem_type = Column(String(255), nullable=False)
    identity = Column(String(500), nullable=False)
    description = Column(String, nullable=True)
    log_excerpt = Column(String, nullable=True)

    build_id = Column(Integer, ForeignKey('build.id'), nullable=False)
    build = relationship('Build', back_populates='build_problems')

    investigations = relationship('Investigation',
                                  back_populates='build_problem',
                                  cascade='all, delete, delete-orphan')

    def __init__(self,
                 build,
                 problem_type: str,
                 identity: str,
                 description: str=None,
                 log_excerpt: str=None):
        '''
        Creates a new BuildProblem instance
        '''
        self.build = build
        self.problem_type = problem_type
        self.identity = identity
        self.description = description
        self.log_excerpt = log_excerpt

    def __repr__(self):
        '''
        Converts the build problem into a string
        '''
        return ('<BuildProblem {id} | {problem_type} | {identity} />'
                .format(id=self.id,
                        problem_type=self.problem_type,
                        identity=self.identity))
