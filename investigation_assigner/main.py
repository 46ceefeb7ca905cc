#!/usr/bin/env python3
'''
The iaa command line tool
'''
import argparse
import logging
import sys

from investigation_assigner import commands
from investigation_assigner.errors import UserError
from investigation_assigner.logger import configure_logging, logger


def create_parser():
    '''
    Returns the argparse parser with a subcommand per command
    '''
    parser = argparse.ArgumentParser(
        prog='iaa',
        description='Assigns the investigations of failed builds')
    parser.add_argument('--debug',
                        action='store_true',
                        help='log what every heuristic decided')
    subparsers = parser.add_subparsers(dest='command')
    subparsers.required = True

    import_junit = subparsers.add_parser(
        'import-junit', help='store the test runs of a JUnit XML report')
    import_junit.add_argument('build_id', type=int)
    import_junit.add_argument('output_file')
    import_junit.set_defaults(
        func=lambda args: commands.import_junit_command(args.build_id,
                                                        args.output_file))

    import_changes = subparsers.add_parser(
        'import-changes', help='store the git commits that a build picked up')
    import_changes.add_argument('build_id', type=int)
    import_changes.add_argument('repo_path')
    import_changes.add_argument('rev_range', help='i.e. "v1.0..HEAD"')
    import_changes.set_defaults(
        func=lambda args: commands.import_changes_command(args.build_id,
                                                          args.repo_path,
                                                          args.rev_range))

    assign = subparsers.add_parser(
        'assign', help='assign the investigations of a failed build')
    assign.add_argument('build_id', type=int)
    assign.add_argument('--email',
                        action='store_true',
                        help='email the report to the configured address')
    assign.set_defaults(
        func=lambda args: commands.assign_command(args.build_id, args.email))

    show = subparsers.add_parser(
        'show', help='print the investigations of a build')
    show.add_argument('build_id', type=int)
    show.set_defaults(func=lambda args: commands.show_command(args.build_id))

    reject = subparsers.add_parser(
        'reject', help='remove an investigation assigned to the wrong person')
    reject.add_argument('investigation_id', type=int)
    reject.add_argument('--yes', action='store_true')
    reject.set_defaults(
        func=lambda args: commands.reject_command(args.investigation_id,
                                                  args.yes))

    stats = subparsers.add_parser('stats', help='print the usage statistics')
    stats.set_defaults(func=lambda args: commands.stats_command())

    return parser


def main(argv=None):
    args = create_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.debug else logging.INFO)
    try:
        args.func(args)
    except UserError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
