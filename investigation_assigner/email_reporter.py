'''
Emails a report of the investigations that were assigned for a build
'''
from email.message import EmailMessage
import html
import smtplib

from investigation_assigner.constants import (EMAIL_SENDER,
                                              SERVER_URL,
                                              SMTP_HOST,
                                              SMTP_PORT)
from investigation_assigner.logger import logger
from investigation_assigner.resolution import ResolutionResult
from investigation_assigner.schema import Build, TestRun


class WebLinks(object):
    '''
    Builds the links into the build server's web UI
    '''

    def __init__(self, root_url: str=SERVER_URL):
        self.root_url = root_url.rstrip('/')

    def get_view_results_url(self, build: Build) -> str:
        return '{root}/viewLog.html?buildId={build_id}'.format(
            root=self.root_url, build_id=build.id)


class SmtpEmailSender(object):
    '''
    Sends emails through an SMTP server
    '''

    def __init__(self,
                 host: str=SMTP_HOST,
                 port: int=SMTP_PORT,
                 sender: str=EMAIL_SENDER):
        self.host = host
        self.port = port
        self.sender = sender

    def send(self, address: str, subject: str, plain_text: str, html_text=None):
        message = EmailMessage()
        message['From'] = self.sender
        message['To'] = address
        message['Subject'] = subject
        message.set_content(plain_text)
        if html_text:
            message.add_alternative(html_text, subtype='html')

        with smtplib.SMTP(self.host, self.port) as server:
            server.send_message(message)


class EmailReporter(object):
    '''
    Sends the responsibilities found for a build to the address configured in
    the build feature
    '''

    def __init__(self,
                 email_sender,
                 web_links: WebLinks,
                 custom_parameters,
                 statistics_reporter):
        self.email_sender = email_sender
        self.web_links = web_links
        self.custom_parameters = custom_parameters
        self.statistics_reporter = statistics_reporter

    def send_results(self, build: Build, result: ResolutionResult):
        '''
        Sends the report unless there is nothing to report or nobody to send it
        to
        '''
        address = self.custom_parameters.get_email_for_email_reporter(build)
        if not address:
            logger.debug('No email address is configured for {}'.format(build))
            return

        if result.is_empty():
            return

        subject = ('Investigations auto-assigner report for {build_type}#'
                   '{build_id}'.format(build_type=build.build_type,
                                       build_id=build.id))
        self.email_sender.send(address,
                               subject,
                               self.generate_plain_text(build, result),
                               self.generate_html(build, result))
        logger.info('Sent the report for {} to {}'.format(build, address))

    def generate_plain_text(self, build: Build, result: ResolutionResult):
        lines = ['Report for {}#{}. Found {} investigations:'
                 .format(build.build_type, build.id, len(result))]
        for index, (_, responsibility) in enumerate(result.items(), 1):
            lines.append('{index}. Investigation was assigned to {user} who '
                         '{description}.'
                         .format(index=index,
                                 user=responsibility.user.username,
                                 description=responsibility.description))

        return '\n'.join(lines)

    def generate_html(self, build: Build, result: ResolutionResult):
        '''
        Returns the HTML body of the report.  The entries follow the order of
        the result.
        '''
        build_url = self.web_links.get_view_results_url(build)
        entries = []
        for item, responsibility in result.items():
            entries.append(
                '<li><a href="{url}#{anchor}">Investigation</a> was assigned '
                'to {user} who {description}.</li>\n'
                .format(url=build_url,
                        anchor=_get_anchor(item),
                        user=html.escape(responsibility.user.username),
                        description=html.escape(responsibility.description,
                                                quote=False)))

        return ('<!DOCTYPE html>\n'
                '<html>\n'
                '<body>\n'
                '<h2>Report for <a href="{url}">{build_type}#{build_id}</a>. '
                'Found {count} investigations:</h2>\n'
                '<ol>\n'
                '{entries}'
                '</ol>\n'
                '{report}\n'
                '</body>\n'
                '</html>'
                .format(url=build_url,
                        build_type=html.escape(build.build_type),
                        build_id=build.id,
                        count=len(entries),
                        entries=''.join(entries),
                        report=self.statistics_reporter.generate_report()))


def _get_anchor(item) -> str:
    if isinstance(item, TestRun):
        return 'testNameId{}'.format(item.id)
    return 'buildProblemId{}'.format(item.id)
