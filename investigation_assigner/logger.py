'''
investigation_assigner's logger.  The handler is only attached by the iaa
command line tool, applications that import the package configure logging
themselves.
'''

import logging
logger = logging.getLogger('investigation_assigner')
fh = logging.StreamHandler()
fh_formatter = logging.Formatter(
    fmt='%(asctime)s %(levelname)s %(filename)s:%(lineno)d - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S')
fh.setFormatter(fh_formatter)


def configure_logging(level=logging.INFO):
    '''
    Prints the log records to stderr.  Calling it again only changes the level.
    '''
    logger.setLevel(level=level)
    if fh not in logger.handlers:
        logger.addHandler(fh)
