# coding=utf-8
import os

import yaml

from reportbook.errors import ValidationError
from reportbook.repository import DEFAULT_STATUS


DEFAULTS = {
    'reportbook': {
        'work_dir': None,
        'log_file': 'reportbook.log',
        'log_max_size_mb': 10,
        'log_max_files': 5,
        'debug': False,
    },
    'reports': {
        'default_status': DEFAULT_STATUS,
        'statuses': None,
    },
}


def with_defaults(config):
    """Returns a copy of config with missing optional keys filled in."""
    if not isinstance(config, dict):
        raise ValidationError('config must be a mapping')

    merged = dict(config)
    for section, defaults in DEFAULTS.items():
        values = merged.get(section) or {}
        if not isinstance(values, dict):
            raise ValidationError('must be a mapping', field=section)

        for key in values:
            if not isinstance(key, str):
                raise ValidationError(
                    'keys must be strings, got {!r}'.format(key),
                    field=section)

        merged[section] = dict(defaults, **values)

    if not merged['reportbook'].get('db_file'):
        raise ValidationError('is required', field='reportbook.db_file')

    statuses = merged['reports']['statuses']
    if statuses is not None:
        is_list = isinstance(statuses, (list, tuple))
        if not is_list or not all(isinstance(s, str) for s in statuses):
            raise ValidationError(
                'must be a list of strings', field='reports.statuses')

    return merged


def load_config(path):
    if not os.path.isabs(path):
        path = os.path.join(os.getcwd(), path)

    with open(path) as config_file:
        config = yaml.safe_load(config_file)

    return with_defaults(config)
