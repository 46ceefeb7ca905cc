'''
Reads the test runs of a build from a JUnit XML report
'''
from junitparser import Error, Failure, JUnitXml, Skipped

from investigation_assigner.constants import (TEST_OUTPUT_SUCCESS,
                                              TEST_OUTPUT_FAILURE,
                                              TEST_OUTPUT_SKIPPED)
from investigation_assigner.db import create
from investigation_assigner.logger import logger
from investigation_assigner.schema import Build, TestRun
from investigation_assigner.schema.aliases import TestRunList


def create_results_from_junit_xml(session,
                                  build: Build,
                                  output_file: str) -> TestRunList:
    '''
    Gets results from a JUnitXML format file and stores a TestRun for each test
    case
    https://docs.pytest.org/en/latest/usage.html#creating-junitxml-format-files
    '''
    logger.info('Reading test runs for {} from {}'.format(build, output_file))
    xml_output = JUnitXml.fromfile(output_file)

    # a report can either be a single <testsuite> or a list of them
    if isinstance(xml_output, JUnitXml):
        test_suites = list(xml_output)
    else:
        test_suites = [xml_output]

    test_names = []
    test_runs = []
    for test_suite in test_suites:
        for test_case in test_suite:
            test_name = _get_test_name(test_case)

            # There can be duplicate test outputs for a test if both the test
            # and the test's teardown step fail.  Only the first one is kept.
            if test_name in test_names:
                logger.error('There was a duplicate test output for test: {}'
                             .format(test_name))
                continue

            test_names.append(test_name)

            status, message, text = _get_outcome(test_case)
            test_run = create(session,
                              TestRun,
                              build=build,
                              test_name=test_name,
                              status=status,
                              duration=test_case.time or 0.0,
                              failure_message=message,
                              stacktrace=text)
            test_runs.append(test_run)

    logger.info('Stored {} test runs for {}'.format(len(test_runs), build))
    return test_runs


def _get_test_name(test_case) -> str:
    '''
    Returns the class qualified name of the test case
    '''
    if test_case.classname:
        return '{}.{}'.format(test_case.classname, test_case.name)
    return test_case.name


def _get_outcome(test_case):
    '''
    Returns the status, message and text of a test case
    '''
    results = test_case.result
    # older junitparser versions return a single result instead of a list
    if results is None:
        results = []
    elif not isinstance(results, list):
        results = [results]

    for result in results:
        if isinstance(result, Skipped):
            return TEST_OUTPUT_SKIPPED, None, None

    for result in results:
        if isinstance(result, (Failure, Error)):
            return TEST_OUTPUT_FAILURE, result.message, result.text

    return TEST_OUTPUT_SUCCESS, None, None
