import os
from datetime import datetime

from peewee import *


class DatabaseConnectionManager(object):
    database = SqliteDatabase(None)

    @classmethod
    def initialize(cls, config):
        db_file = config['db_file']
        if db_file != ':memory:':
            db_file = os.path.join(config.get('work_dir') or '', db_file)

        cls.database.init(db_file, pragmas={'foreign_keys': 1})
        cls.database.connect(reuse_if_open=True)

    @classmethod
    def close(cls):
        if not cls.database.is_closed():
            cls.database.close()


def utcnow():
    return datetime.utcnow()


class BaseModel(Model):
    """Base model for all the models."""
    id = AutoField()
    created_at = DateTimeField(default=utcnow)
    updated_at = DateTimeField(default=utcnow)

    def save(self, *args, **kwargs):
        self.updated_at = utcnow()
        return super(BaseModel, self).save(*args, **kwargs)

    class Meta:
        database = DatabaseConnectionManager.database
        only_save_dirty = True
