#!/usr/bin/env python3
'''
The Change model.  A VCS modification that was first picked up by a build.
'''
import time
from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from investigation_assigner.schema.base import Base


change_committer = Table(
    'change_committer',
    Base.metadata,
    Column('change_id', Integer, ForeignKey('change.id'), primary_key=True),
    Column('user_id', Integer, ForeignKey('user.id'), primary_key=True))


class Change(Base):
    '''
    Schema representation of a VCS change.  Stores who committed it and which
    files it touched.
    '''
    __tablename__ = 'change'
    id = Column(Integer, primary_key=True)

    # the revision in the VCS, i.e. the git sha
    version = Column(String(255), nullable=False)
    description = Column(String, nullable=False)
    timestamp = Column(Integer, nullable=False)

    # personal changes are not part of the VCS history
    is_personal = Column(Boolean, nullable=False, default=False)

    build_id = Column(Integer, ForeignKey('build.id'), nullable=False)
    build = relationship('Build', back_populates='changes')

    committers = relationship('User', secondary=change_committer)

    files = relationship('FileModification',
                         back_populates='change',
                         order_by='FileModification.position',
                         cascade='all, delete, delete-orphan')

    def __init__(self,
                 build,
                 version: str,
                 description: str='',
                 timestamp: int=None,
                 is_personal: bool=False):
        '''
        Creates a new Change instance
        '''
        if not timestamp:
            timestamp = int(time.time())

        self.build = build
        self.version = version
        self.description = description
        self.timestamp = timestamp
        self.is_personal = is_personal

    @property
    def relative_paths(self):
        '''
        The paths of the modified files, in the order they were recorded
        '''
        return [modification.relative_path for modification in self.files]

    def __repr__(self):
        '''
        Converts the change into a string
        '''
        return ('<Change {id} | {version} | files={num_files} />'
                .format(id=self.id,
                        version=self.version,
                        num_files=len(self.files)))
