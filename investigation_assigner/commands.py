#!/usr/bin/env python3
'''
The argparse subcommands
'''
from investigation_assigner.build_server import BuildServer
from investigation_assigner.cli import is_affirmative
from investigation_assigner.collection import create_results_from_junit_xml
from investigation_assigner.custom_parameters import CustomParameters
from investigation_assigner.db import delete, get, session_manager
from investigation_assigner.email_reporter import (EmailReporter,
                                                   SmtpEmailSender,
                                                   WebLinks)
from investigation_assigner.errors import UserError
from investigation_assigner.git_utils import import_changes
from investigation_assigner.logger import logger
from investigation_assigner.processing import (FailedBuildProcessor,
                                               create_responsible_user_finder)
from investigation_assigner.results_view import ResultsView
from investigation_assigner.schema import Investigation
from investigation_assigner.statistics import StatisticsDao, StatisticsReporter
from investigation_assigner.text_extractor import ProblemTextExtractor


def import_junit_command(build_id: int, output_file: str):
    '''
    Entry-point for the "iaa import-junit" command
    '''
    with session_manager() as session:
        build = BuildServer(session).get_build(build_id)
        create_results_from_junit_xml(session, build, output_file)


def import_changes_command(build_id: int, repo_path: str, rev_range: str):
    '''
    Entry-point for the "iaa import-changes" command
    '''
    with session_manager() as session:
        build = BuildServer(session).get_build(build_id)
        import_changes(session, build, repo_path, rev_range)


def assign_command(build_id: int, send_email: bool=False):
    '''
    Entry-point for the "iaa assign" command

    @param build_id: the failed build
    @param send_email: whether to email the report to the configured address
    '''
    statistics_reporter = StatisticsReporter(StatisticsDao())
    with session_manager() as session:
        build_server = BuildServer(session)
        custom_parameters = CustomParameters(session)
        build = build_server.get_build(build_id)
        statistics_reporter.report_clicked_button()

        email_reporter = None
        if send_email:
            email_reporter = EmailReporter(SmtpEmailSender(),
                                           WebLinks(),
                                           custom_parameters,
                                           statistics_reporter)

        finder = create_responsible_user_finder(build_server,
                                                custom_parameters,
                                                ProblemTextExtractor())
        processor = FailedBuildProcessor(session,
                                         finder,
                                         build_server,
                                         custom_parameters,
                                         statistics_reporter=statistics_reporter,
                                         email_reporter=email_reporter)
        processor.process(build)


def show_command(build_id: int):
    '''
    Entry-point for the "iaa show" command
    '''
    with session_manager() as session:
        build_server = BuildServer(session)
        build = build_server.get_build(build_id)
        view = ResultsView(StatisticsReporter(StatisticsDao()))
        view.render(build, build_server.get_investigations(build))


def reject_command(investigation_id: int, assume_yes: bool=False):
    '''
    Entry-point for the "iaa reject" command.  Removes an investigation that
    was assigned to the wrong person.
    '''
    with session_manager() as session:
        investigation = get(session, Investigation, id=investigation_id)
        if not investigation:
            msg = 'There is no investigation with the id {}'.format(
                investigation_id)
            raise UserError(msg)

        if not assume_yes:
            msg = ('Would you like to remove {}?\n(y/n)\n'
                   .format(investigation))
            if not is_affirmative(input(msg)):
                logger.info('No worries!')
                return

        logger.info('Removing {}'.format(investigation))
        delete(session, investigation)
        StatisticsReporter(StatisticsDao()).report_wrong_investigation()


def stats_command():
    '''
    Entry-point for the "iaa stats" command
    '''
    print(StatisticsReporter(StatisticsDao()).generate_report())
