#!/usr/bin/env python3
'''
Code for communicating with the investigation_assigner database
'''
from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from investigation_assigner.constants import DATABASE_URL
from investigation_assigner.schema import Base


# IAA_DATABASE_URL picks the database, by default a sqlite file in the working
# directory.  The tables are created on import.
engine = create_engine(DATABASE_URL)
Base.metadata.create_all(engine)
Session = sessionmaker(bind=engine)


@contextmanager
def session_manager():
    '''
    Yields a session that is committed when the block succeeds and rolled back
    when it raises
    '''
    session = Session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def get(session, sql_class, **kwargs):
    '''
    Returns the first row of sql_class matching the column filters, or None
    '''
    return session.query(sql_class).filter_by(**kwargs).first()


def get_all(session, sql_class, **kwargs):
    '''
    Returns every row of sql_class matching the column filters, oldest first
    '''
    return (session.query(sql_class)
            .filter_by(**kwargs)
            .order_by(sql_class.id)
            .all())


def create(session, sql_class, **kwargs):
    '''
    Adds a new sql_class row to the session.  It is written on the next flush.
    '''
    instance = sql_class(**kwargs)
    session.add(instance)
    return instance


def get_or_create(session, sql_class, **kwargs):
    '''
    Returns (instance, created).  created is True when no matching row existed
    '''
    instance = get(session, sql_class, **kwargs)
    if instance:
        return instance, False

    return create(session, sql_class, **kwargs), True


def delete(session, sql_instance):
    '''
    Removes the row from the database on the next flush
    '''
    session.delete(sql_instance)
