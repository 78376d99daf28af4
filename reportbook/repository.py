# coding=utf-8
import functools
import logging

from peewee import IntegrityError

from reportbook import fields, validators
from reportbook.errors import ConstraintError, NotFoundError, ValidationError
from reportbook.models import DatabaseConnectionManager, Report


log = logging.getLogger(__name__)

DEFAULT_STATUS = 'pending'


def logs_rejections(method):
    """Logs input rejected by a repository method before re-raising it."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except ValidationError as e:
            log.warning('Rejected {}: {}'.format(method.__name__, e))
            raise

    return wrapper


class ReportRepository(object):
    """CRUD access to reports and lookup of their owners.

    ``users`` is the user collaborator: anything with a
    ``get_user_by_id(user_id)`` method raising ``NotFoundError`` for unknown
    ids. ``statuses`` optionally restricts the accepted status values, it is
    owned by whoever defines the report workflow.
    """
    def __init__(self, users, statuses=None, default_status=DEFAULT_STATUS):
        self.users = users
        if isinstance(statuses, str):
            raise ValidationError(
                'must be a collection, not a string', field='statuses')

        self.statuses = frozenset(statuses) if statuses is not None else None
        self.default_status = validators.status(default_status, self.statuses)

    def _write_transaction(self):
        # serialises concurrent writers on sqlite
        return DatabaseConnectionManager.database.atomic(
            lock_type='IMMEDIATE')

    @logs_rejections
    def create(self, new_report):
        new_report = fields.as_new_report(new_report)

        user_id = validators.identifier(new_report.user_id, 'user_id')
        title = validators.required_text(
            new_report.title, 'title',
            max_length=validators.TITLE_MAX_LENGTH)
        description = validators.required_text(
            new_report.description, 'description')
        image_path = validators.optional_text(
            new_report.image_path, 'image_path',
            max_length=validators.IMAGE_PATH_MAX_LENGTH)
        latitude, longitude = validators.coordinates(
            new_report.latitude, new_report.longitude)

        if new_report.status is None:
            status = self.default_status
        else:
            status = validators.status(new_report.status, self.statuses)

        try:
            with self._write_transaction():
                try:
                    self.users.get_user_by_id(user_id)
                except NotFoundError:
                    raise ValidationError(
                        'does not reference an existing user',
                        field='user_id')

                report = Report.create(
                    user=user_id,
                    title=title,
                    description=description,
                    image_path=image_path,
                    latitude=latitude,
                    longitude=longitude,
                    status=status,
                )
        except IntegrityError as e:
            raise ConstraintError(str(e))

        log.info('Created report {} for user {}'.format(report.id, user_id))
        return report

    def get_by_id(self, report_id):
        report = None
        if validators.fits_storage(report_id):
            report = Report.get_or_none(Report.id == report_id)

        if report is None:
            log.debug('Report {} not found'.format(report_id))
            raise NotFoundError('Report', report_id)

        return report

    def _clean_changes(self, changes):
        values = dict()
        for name, value in changes.items():
            if name == 'title':
                value = validators.required_text(
                    value, name, max_length=validators.TITLE_MAX_LENGTH)
            elif name == 'description':
                value = validators.required_text(value, name)
            elif name == 'image_path':
                value = validators.optional_text(
                    value, name,
                    max_length=validators.IMAGE_PATH_MAX_LENGTH)
            elif name == 'status':
                value = validators.status(value, self.statuses)
            elif name == 'vote_count':
                value = validators.vote_count(value)

            values[name] = value

        return values

    @logs_rejections
    def update(self, report_id, changes):
        """Applies the given fields only, ``id`` and ``user_id`` stay put."""
        changes = fields.as_report_changes(changes)
        values = self._clean_changes(changes)

        try:
            with self._write_transaction():
                report = self.get_by_id(report_id)
                if not values:
                    return report

                # pair is checked against what the row will hold afterwards
                if 'latitude' in values or 'longitude' in values:
                    values['latitude'], values['longitude'] = (
                        validators.coordinates(
                            values.get('latitude', report.latitude),
                            values.get('longitude', report.longitude)))

                for name, value in values.items():
                    setattr(report, name, value)

                report.save()
        except IntegrityError as e:
            raise ConstraintError(str(e))

        log.info('Updated report {}: {}'.format(
            report_id, ', '.join(sorted(values))))
        return report

    def delete(self, report_id):
        if not validators.fits_storage(report_id):
            raise NotFoundError('Report', report_id)

        with self._write_transaction():
            deleted = Report.delete().where(Report.id == report_id).execute()

        if not deleted:
            raise NotFoundError('Report', report_id)

        log.info('Deleted report {}'.format(report_id))

    def get_owner(self, report_id):
        report = self.get_by_id(report_id)
        return self.users.get_user_by_id(report.user_id)

    def list_for_user(self, user_id):
        self.users.get_user_by_id(user_id)
        return list(
            Report.select()
            .where(Report.user == user_id)
            .order_by(Report.id)
        )
