'''
Blames the committer of a file that is mentioned in the text of a failure.

A failing test often prints the name of the file that broke it, either in the
assertion message or in the stacktrace.  If one of the files changed since the
last build shows up in that text, the person who changed it is a good guess.
'''
from typing import List

from investigation_assigner.constants import (BROKEN_FILE_DESCRIPTION,
                                              PATTERN_ANCESTOR_LEVELS,
                                              PATTERN_SEPARATORS,
                                              SMALL_PATTERN_THRESHOLD)
from investigation_assigner.heuristics.heuristic import Heuristic
from investigation_assigner.logger import logger
from investigation_assigner.resolution import (ResolutionContext,
                                               ResolutionResult,
                                               Responsibility)


class BrokenFileHeuristic(Heuristic):
    '''
    Looks for the files changed since the last build inside of the problem
    text of every test run and build problem
    '''
    name = 'Detect Broken File Heuristic'

    def __init__(self, build_server, problem_text_extractor):
        '''
        Create a BrokenFileHeuristic instance

        @param build_server: provides the changes since the last build
        @param problem_text_extractor: provides the text of a failure
        '''
        self.build_server = build_server
        self.problem_text_extractor = problem_text_extractor

    def find_responsible_user(
            self, context: ResolutionContext) -> ResolutionResult:
        '''
        Returns the responsibilities for every problem item whose text mentions
        a file changed by exactly one (not excluded) committer
        '''
        result = ResolutionResult()
        build = context.build

        changes = self.build_server.get_changes_since_last_build(build)
        if not changes:
            logger.debug('Build {}: no changes since the last build'
                         .format(build))
            return result

        candidates = [(change, get_change_patterns(change))
                      for change in changes]

        for item in context.items:
            problem_text = self.problem_text_extractor.get_problem_text(
                item, build)
            responsibility = self._find_responsibility(
                candidates, build, problem_text, context)
            if responsibility is not None:
                result.add_responsibility(item, responsibility)

        return result

    def _find_responsibility(self,
                             candidates,
                             build,
                             problem_text: str,
                             context: ResolutionContext):
        '''
        Returns the Responsibility for a single problem text, or None when
        nobody or more than one person could have broken it
        '''
        if not problem_text:
            return None

        responsible_user = None
        broken_file = None
        for change, file_patterns in candidates:
            found_broken_file = find_broken_file(file_patterns, problem_text)
            if found_broken_file is None:
                continue

            committers = [committer for committer in change.committers
                          if not context.is_excluded(committer)]
            if not committers:
                continue

            if len(committers) > 1:
                logger.debug('Build {}: change {} has more than one committer'
                             .format(build, change))
                return None

            found_user = committers[0]
            if responsible_user is not None and responsible_user != found_user:
                logger.debug('Build {}: there is more than one committer of '
                             'suspicious files since the last build'
                             .format(build))
                return None

            responsible_user = found_user
            broken_file = found_broken_file

        if responsible_user is None:
            return None

        description = BROKEN_FILE_DESCRIPTION.format(file_path=broken_file)
        return Responsibility(responsible_user, description)


def get_change_patterns(change):
    '''
    Returns a list of (relative_path, patterns) for the files of a change in
    the order that they were modified
    '''
    return [(relative_path, get_patterns(relative_path))
            for relative_path in change.relative_paths]


def find_broken_file(file_patterns, problem_text: str):
    '''
    Returns the first path whose patterns occur in the problem text, or None
    '''
    for relative_path, patterns in file_patterns:
        for pattern in patterns:
            if pattern in problem_text:
                return relative_path

    return None


def get_patterns(file_path: str) -> List[str]:
    '''
    Returns the strings that identify a file inside of a problem text.

    The file name is qualified by up to two parent directories so that
    "path1/path2/fileName" is not confused with "path3/path4/fileName", and
    joined with each of the supported separators ('.', '/' and '\\').  When the
    qualified name is still short it is replaced by the file name with its
    extension.

        get_patterns('server/investigations/BrokenFileHeuristic.java')
        --> ['server.investigations.BrokenFileHeuristic',
             'server/investigations/BrokenFileHeuristic',
             'server\\investigations\\BrokenFileHeuristic']
        get_patterns('src/main/Foo.java') --> ['Foo.java']

    @param file_path: the relative path of the modified file
    @returns: list of patterns without duplicates
    '''
    file_path = file_path.replace('\\', '/')
    file_name = _get_name(file_path)
    without_extension = _strip_extension(file_name)
    if not without_extension:
        return []

    parts = [without_extension]
    parent_path = _get_parent_path(file_path)
    level = 0
    while parent_path is not None and level < PATTERN_ANCESTOR_LEVELS:
        ancestor = _get_name(parent_path)
        # a leading slash leaves an empty ancestor behind
        if ancestor:
            parts.insert(0, ancestor)
        parent_path = _get_parent_path(parent_path)
        level += 1

    if is_small_pattern(parts):
        parts = [file_name]

    patterns = []
    for separator in PATTERN_SEPARATORS:
        pattern = separator.join(parts)
        if pattern not in patterns:
            patterns.append(pattern)

    return patterns


def is_small_pattern(parts: List[str]) -> bool:
    '''
    Whether the dotted pattern is too short to be trusted
    '''
    return len('.'.join(parts)) <= SMALL_PATTERN_THRESHOLD


def _get_name(path: str) -> str:
    return path.rsplit('/', 1)[-1]


def _strip_extension(file_name: str) -> str:
    # ".gitignore" has no name left once the extension is gone
    extension_index = file_name.rfind('.')
    if extension_index == -1:
        return file_name
    return file_name[:extension_index]


def _get_parent_path(path: str):
    '''
    Returns everything before the last slash, or None when there is no slash.
    Unlike os.path.dirname the parent of "abc" is None, not ''.
    '''
    last_slash = path.rfind('/')
    if last_slash == -1:
        return None
    return path[:last_slash]
