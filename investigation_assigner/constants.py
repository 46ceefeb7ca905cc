'''
The constants for the investigation auto-assigner
'''
import os


# Test run statuses
TEST_OUTPUT_SUCCESS = 'success'
TEST_OUTPUT_FAILURE = 'failure'
TEST_OUTPUT_SKIPPED = 'skipped'

########################################################
#                  Build Configuration                 #
########################################################
# the type of the build feature that enables auto-assignment for a build type
BUILD_FEATURE_TYPE = 'InvestigationsAutoAssigner'

# separator for the list of usernames that should never be blamed
USERS_TO_IGNORE_SEPARATOR = ','

########################################################
#                      Heuristics                      #
########################################################
# a derived file pattern this short is too likely to show up in unrelated text
SMALL_PATTERN_THRESHOLD = 15

# separators the problem text may use between a file and its parents
PATTERN_SEPARATORS = ('.', '/', '\\')

# the number of ancestor directories used to qualify a file pattern
PATTERN_ANCESTOR_LEVELS = 2

# problem text longer than this is cut before it is scanned
MAX_PROBLEM_TEXT_LENGTH = 100000

BROKEN_FILE_DESCRIPTION = (
    'changed the suspicious file "{file_path}" which probably broke the build')
ONE_COMMITTER_DESCRIPTION = (
    'is the only committer to the build since the last build')
DEFAULT_USER_DESCRIPTION = (
    'is the default responsible user for the build: {full_name} '
    '#{build_number}')

########################################################
#                      Statistics                      #
########################################################
STATISTICS_FILE_NAME = 'statistics.json'
STATISTICS_FILE_VERSION = '1.1'


########################################################
#                Environment Variables                 #
########################################################
DATABASE_URL = os.getenv('IAA_DATABASE_URL',
                         'sqlite:///investigations_auto_assigner.db')
DATA_DIR = os.getenv('IAA_DATA_DIR',
                     os.path.expanduser('~/.investigations_auto_assigner'))
SERVER_URL = os.getenv('IAA_SERVER_URL', 'http://localhost:8111')
SMTP_HOST = os.getenv('IAA_SMTP_HOST', 'localhost')
SMTP_PORT = int(os.getenv('IAA_SMTP_PORT', '25'))
EMAIL_SENDER = os.getenv('IAA_EMAIL_SENDER',
                         'investigations-auto-assigner@localhost')
