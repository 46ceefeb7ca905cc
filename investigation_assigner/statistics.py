'''
Usage statistics of the auto-assigner, stored as a small JSON file
'''
import json
import os

from investigation_assigner.constants import (DATA_DIR,
                                              STATISTICS_FILE_NAME,
                                              STATISTICS_FILE_VERSION)
from investigation_assigner.errors import AssignerError
from investigation_assigner.logger import logger


class Statistics(object):
    '''
    The counters that are persisted between runs
    '''

    def __init__(self,
                 version: str=STATISTICS_FILE_VERSION,
                 shown_buttons_count: int=0,
                 clicked_buttons_count: int=0,
                 assigned_investigations_count: int=0,
                 wrong_investigations_count: int=0):
        self.version = version
        self.shown_buttons_count = shown_buttons_count
        self.clicked_buttons_count = clicked_buttons_count
        self.assigned_investigations_count = assigned_investigations_count
        self.wrong_investigations_count = wrong_investigations_count

    def to_dict(self) -> dict:
        return {
            'version': self.version,
            'shownButtonsCount': self.shown_buttons_count,
            'clickedButtonsCount': self.clicked_buttons_count,
            'assignedInvestigationsCount': self.assigned_investigations_count,
            'wrongInvestigationsCount': self.wrong_investigations_count,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Statistics':
        return cls(
            version=data.get('version'),
            shown_buttons_count=data.get('shownButtonsCount', 0),
            clicked_buttons_count=data.get('clickedButtonsCount', 0),
            assigned_investigations_count=data.get(
                'assignedInvestigationsCount', 0),
            wrong_investigations_count=data.get('wrongInvestigationsCount', 0))

    def __eq__(self, other):
        if not isinstance(other, Statistics):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return ('<Statistics {version} | shown={shown} | clicked={clicked} | '
                'assigned={assigned} | wrong={wrong} />'
                .format(version=self.version,
                        shown=self.shown_buttons_count,
                        clicked=self.clicked_buttons_count,
                        assigned=self.assigned_investigations_count,
                        wrong=self.wrong_investigations_count))


class StatisticsDao(object):
    '''
    Reads and writes the statistics file inside of the data directory
    '''

    def __init__(self, data_dir: str=DATA_DIR):
        self.data_dir = data_dir
        self.statistics_path = os.path.join(data_dir, STATISTICS_FILE_NAME)

    def read(self) -> Statistics:
        '''
        Returns the stored statistics.  A missing file or a file written by
        another version starts the counters from scratch.
        '''
        if not os.path.exists(self.statistics_path):
            return Statistics()

        try:
            with open(self.statistics_path) as statistics_file:
                data = json.load(statistics_file)
        except (IOError, ValueError) as e:
            msg = ('An error occurred while reading the statistics from {}: {}'
                   .format(self.statistics_path, e))
            raise AssignerError(msg)

        if not isinstance(data, dict) or (
                data.get('version') != STATISTICS_FILE_VERSION):
            logger.warning('Ignoring statistics file {} with an unknown '
                           'version'.format(self.statistics_path))
            return Statistics()

        return Statistics.from_dict(data)

    def write(self, statistics: Statistics):
        '''
        Overwrites the stored statistics
        '''
        try:
            if not os.path.exists(self.data_dir):
                os.makedirs(self.data_dir)

            with open(self.statistics_path, 'w') as statistics_file:
                json.dump(statistics.to_dict(), statistics_file)
        except IOError as e:
            msg = ('An error occurred while writing the statistics to {}: {}'
                   .format(self.statistics_path, e))
            raise AssignerError(msg)


class StatisticsReporter(object):
    '''
    Updates the statistics.  Every report reads the file, increments a counter
    and writes it back.
    '''

    def __init__(self, statistics_dao: StatisticsDao):
        self.statistics_dao = statistics_dao

    def report_shown_investigations(self, count: int=1):
        statistics = self.statistics_dao.read()
        statistics.shown_buttons_count += count
        self.statistics_dao.write(statistics)

    def report_clicked_button(self):
        statistics = self.statistics_dao.read()
        statistics.clicked_buttons_count += 1
        self.statistics_dao.write(statistics)

    def report_assigned_investigations(self, count: int):
        statistics = self.statistics_dao.read()
        statistics.assigned_investigations_count += count
        self.statistics_dao.write(statistics)

    def report_wrong_investigation(self, count: int=1):
        statistics = self.statistics_dao.read()
        statistics.wrong_investigations_count += count
        self.statistics_dao.write(statistics)

    def generate_report(self) -> str:
        '''
        Returns the statistics as a HTML fragment for the email report
        '''
        statistics = self.statistics_dao.read()
        return ('<p>Statistics: shown {shown}, assigned {assigned}, wrong '
                '{wrong} investigations.</p>'
                .format(shown=statistics.shown_buttons_count,
                        assigned=statistics.assigned_investigations_count,
                        wrong=statistics.wrong_investigations_count))
