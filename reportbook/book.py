import os
import logging
import logging.handlers

from reportbook.config import with_defaults
from reportbook.models import DatabaseConnectionManager, models
from reportbook.repository import ReportRepository
from reportbook.users import UserDirectory


class ReportBook(object):
    """Wires configuration, logging, database and repositories together."""

    def __init__(self, config):
        self.config = with_defaults(config)
        self.work_dir = self.config['reportbook']['work_dir'] or os.getcwd()
        self.debug = self.config['reportbook']['debug']
        self.log = self.setup_logging()

        DatabaseConnectionManager.initialize(
            dict(self.config['reportbook'], work_dir=self.work_dir))
        self.database = DatabaseConnectionManager.database

        self.users = UserDirectory()
        self.reports = ReportRepository(
            self.users,
            statuses=self.config['reports']['statuses'],
            default_status=self.config['reports']['default_status'],
        )

    def setup_logging(self):
        log = logging.getLogger('reportbook')

        if self.debug:
            log.setLevel(logging.DEBUG)
        else:
            log.setLevel(logging.INFO)

        log_file = os.path.join(
            self.work_dir, self.config['reportbook']['log_file'])
        log_max_size_mb = self.config['reportbook']['log_max_size_mb']
        log_max_files = self.config['reportbook']['log_max_files']

        # repeated instances in one process share the logger
        for handler in list(log.handlers):
            log.removeHandler(handler)
            handler.close()

        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=log_max_size_mb * 1024 * 1024,
            backupCount=log_max_files,
            encoding='utf-8',
        )
        formatter = logging.Formatter('%(asctime)s %(levelname)s %(message)s')
        handler.setFormatter(formatter)
        log.addHandler(handler)

        return log

    def create_tables(self):
        with self.database.atomic():
            self.database.create_tables(models, safe=True)
        self.log.info('Created tables at {}'.format(self.database.database))

    def drop_tables(self):
        with self.database.atomic():
            self.database.drop_tables(models, safe=True)
        self.log.info('Dropped tables at {}'.format(self.database.database))

    def close(self):
        self.log.info('Closing')
        DatabaseConnectionManager.close()
        for handler in list(self.log.handlers):
            self.log.removeHandler(handler)
            handler.close()
