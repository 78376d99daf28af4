# coding=utf-8
import collections
import collections.abc

from reportbook.errors import ValidationError


CREATE_FIELDS = (
    'user_id', 'title', 'description', 'image_path',
    'latitude', 'longitude', 'status',
)
REQUIRED_FIELDS = ('user_id', 'title', 'description')
UPDATE_FIELDS = (
    'title', 'description', 'image_path',
    'latitude', 'longitude', 'status', 'vote_count',
)
IMMUTABLE_FIELDS = ('id', 'user_id')


class NewReport(collections.namedtuple('NewReport', CREATE_FIELDS)):
    """Fields accepted when a report is submitted."""
    __slots__ = ()

    def __new__(cls, user_id, title, description, image_path=None,
                latitude=None, longitude=None, status=None):
        return super(NewReport, cls).__new__(
            cls, user_id, title, description, image_path,
            latitude, longitude, status)

    @classmethod
    def from_dict(cls, data):
        unknown = sorted(set(data) - set(cls._fields))
        if unknown:
            raise ValidationError(
                'is not accepted on create', field=unknown[0])

        for name in REQUIRED_FIELDS:
            if name not in data:
                raise ValidationError('is required', field=name)

        return cls(**data)


class ReportChanges(object):
    """Partial set of report fields for an update.

    Only fields passed in are recorded, so ``ReportChanges(image_path=None)``
    clears the image while ``ReportChanges()`` changes nothing.
    """
    def __init__(self, **fields):
        for name in fields:
            if name in IMMUTABLE_FIELDS:
                raise ValidationError('can not be changed', field=name)

            if name not in UPDATE_FIELDS:
                raise ValidationError('is not a report field', field=name)

        self._fields = dict(fields)

    @classmethod
    def from_dict(cls, data):
        return cls(**dict(data))

    def get(self, name, default=None):
        return self._fields.get(name, default)

    def items(self):
        return [
            (name, self._fields[name])
            for name in UPDATE_FIELDS if name in self._fields
        ]

    def __contains__(self, name):
        return name in self._fields

    def __len__(self):
        return len(self._fields)

    def __eq__(self, other):
        if not isinstance(other, ReportChanges):
            return NotImplemented

        return self._fields == other._fields

    def __repr__(self):
        return 'ReportChanges({})'.format(', '.join(
            '{}={!r}'.format(name, value) for name, value in self.items()))


def as_new_report(value):
    if isinstance(value, NewReport):
        return value

    if isinstance(value, collections.abc.Mapping):
        return NewReport.from_dict(value)

    raise ValidationError(
        'expected NewReport or mapping, got {}'.format(type(value).__name__))


def as_report_changes(value):
    if isinstance(value, ReportChanges):
        return value

    if isinstance(value, collections.abc.Mapping):
        return ReportChanges.from_dict(value)

    raise ValidationError(
        'expected ReportChanges or mapping, got {}'.format(
            type(value).__name__))
