#!/usr/bin/env python3
'''
The declarative base that all of the models inherit from
'''
from sqlalchemy.orm import declarative_base

Base = declarative_base()
