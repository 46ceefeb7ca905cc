#!/usr/bin/env python3
'''
The User model.  A person who can commit changes and be made responsible for
an investigation.
'''
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from investigation_assigner.schema.base import Base


def normalize_username(username: str) -> str:
    '''
    Usernames are case insensitive, they are stored and looked up in lower case
    '''
    return username.strip().lower()


class User(Base):
    '''
    Schema representation of a build server user
    '''
    __tablename__ = 'user'
    id = Column(Integer, primary_key=True)
    username = Column(String(255), nullable=False, unique=True)
    name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)

    investigations = relationship('Investigation', back_populates='user')

    def __init__(self, username: str, name: str=None, email: str=None):
        '''
        Creates a new User instance
        '''
        self.username = normalize_username(username)
        self.name = name
        self.email = email

    def __repr__(self):
        '''
        Converts the user into a string
        '''
        return '<User {id} | {username} />'.format(id=self.id,
                                                   username=self.username)
