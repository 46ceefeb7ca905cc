#!/usr/bin/env python3
'''
The FileModification model.  A single file touched by a change.
'''
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from investigation_assigner.schema.base import Base


class FileModification(Base):
    '''
    Schema representation of a modified file.  The path is relative to the VCS
    root and keeps whichever separator the VCS reported.
    '''
    __tablename__ = 'file_modification'
    id = Column(Integer, primary_key=True)

    # the order of the file inside of the change
    position = Column(Integer, nullable=False)
    relative_path = Column(String, nullable=False)

    change_id = Column(Integer, ForeignKey('change.id'), nullable=False)
    change = relationship('Change', back_populates='files')

    def __init__(self, change, relative_path: str, position: int=None):
        '''
        Creates a new FileModification instance
        '''
        if position is None:
            position = len(change.files)

        self.position = position
        self.relative_path = relative_path
        self.change = change

    def __repr__(self):
        '''
        Converts the file modification into a string
        '''
        return '<FileModification {path} />'.format(path=self.relative_path)
