#!/usr/bin/env python
import argparse
import sys

from peewee import DatabaseError

from reportbook.book import ReportBook
from reportbook.config import load_config
from reportbook.errors import ReportBookError


COMMANDS = ('create-tables', 'drop-tables')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Report Book database maintenance.'
    )
    parser.add_argument(
        '-c', '--config',
        type=str,
        help='Config file',
        required=True
    )
    parser.add_argument(
        'command',
        choices=COMMANDS,
        help='Maintenance command to run'
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except (IOError, ReportBookError) as e:
        sys.stderr.write('Unable to load config: {}\n'.format(e))
        return 2

    try:
        book = ReportBook(config)
    except (IOError, DatabaseError, ReportBookError) as e:
        sys.stderr.write('Unable to open report book: {}\n'.format(e))
        return 2

    try:
        if args.command == 'create-tables':
            book.create_tables()
        else:
            book.drop_tables()
    finally:
        book.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
