'''
Git utility methods
'''
from git import Repo
from git.diff import NULL_TREE

from investigation_assigner.db import create, get_or_create
from investigation_assigner.logger import logger
from investigation_assigner.schema import (Build,
                                          Change,
                                          FileModification,
                                          User,
                                          normalize_username)
from investigation_assigner.schema.aliases import ChangeList


def import_changes(session,
                   build: Build,
                   repo_path: str,
                   rev_range: str) -> ChangeList:
    '''
    Stores every commit of the revision range as a change of the build, i.e.
    the changes since the last build.

    @param build: the build that first picked up the commits
    @param repo_path: path to the git repository
    @param rev_range: git revision range, i.e. "v1.0..HEAD"
    @returns: the created changes, oldest first
    '''
    repo = Repo(repo_path)
    changes = []
    for commit in repo.iter_commits(rev_range, reverse=True):
        # the files of a merge commit were already changed by its parents
        if len(commit.parents) > 1:
            logger.info('Skipping merge commit {}'.format(commit.hexsha))
            continue

        committer = get_or_create_user(session,
                                       commit.author.name,
                                       commit.author.email)
        change = create(session,
                        Change,
                        build=build,
                        version=commit.hexsha,
                        description=commit.message.strip(),
                        timestamp=commit.committed_date)
        change.committers.append(committer)

        for relative_path in get_changed_files(commit):
            create(session,
                   FileModification,
                   change=change,
                   relative_path=relative_path)

        logger.info('Imported {} by {}'.format(change, committer))
        changes.append(change)

    return changes


def get_changed_files(commit):
    '''
    Returns the paths of the files changed by a commit, relative to the root of
    the repository
    '''
    if commit.parents:
        diffs = commit.parents[0].diff(commit)
    else:
        diffs = commit.diff(NULL_TREE)

    return [diff.b_path or diff.a_path for diff in diffs]


def get_username(name: str, email: str) -> str:
    '''
    Returns the username for a git author.  The local part of the email wins
    over the name, i.e. "jane.doe@example.com" -> "jane.doe"
    '''
    if email and '@' in email:
        return normalize_username(email.split('@')[0])
    return normalize_username(name)


def get_or_create_user(session, name: str, email: str) -> User:
    '''
    Returns the user that corresponds with a git author, creating it if needed
    '''
    user, created = get_or_create(session,
                                  User,
                                  username=get_username(name, email))
    if created:
        user.name = name
        user.email = email
        logger.info('Created user: {}'.format(user))

    return user
