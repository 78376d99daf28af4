# coding=utf-8
import numbers

from reportbook.errors import ConstraintError, ValidationError


TITLE_MAX_LENGTH = 255
IMAGE_PATH_MAX_LENGTH = 255
STATUS_MAX_LENGTH = 32

# sqlite INTEGER is a signed 64-bit value
INTEGER_MIN = -2 ** 63
INTEGER_MAX = 2 ** 63 - 1


def _is_number(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def identifier(value, field):
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError('must be an integer id', field=field)

    if not INTEGER_MIN <= value <= INTEGER_MAX:
        raise ValidationError('is out of range', field=field)

    return value


def fits_storage(value):
    """False for ints sqlite can not hold, no row can have such an id."""
    if isinstance(value, int):
        return INTEGER_MIN <= value <= INTEGER_MAX

    return True


def required_text(value, field, max_length=None):
    if not isinstance(value, str) or not value.strip():
        raise ValidationError('must not be blank', field=field)

    if max_length is not None and len(value) > max_length:
        raise ValidationError(
            'must be at most {} characters'.format(max_length), field=field)

    return value


def optional_text(value, field, max_length=None):
    if value is None:
        return None

    return required_text(value, field, max_length=max_length)


def coordinates(latitude, longitude):
    """Checks a latitude/longitude pair, both set or both unset."""
    if latitude is None and longitude is None:
        return None, None

    if latitude is None or longitude is None:
        raise ValidationError(
            'latitude and longitude must be given together',
            field='latitude' if latitude is None else 'longitude')

    if not _is_number(latitude) or not -90 <= latitude <= 90:
        raise ValidationError(
            'must be a number between -90 and 90', field='latitude')

    if not _is_number(longitude) or not -180 <= longitude <= 180:
        raise ValidationError(
            'must be a number between -180 and 180', field='longitude')

    return float(latitude), float(longitude)


def status(value, allowed=None):
    required_text(value, 'status', max_length=STATUS_MAX_LENGTH)
    if allowed is not None and value not in allowed:
        raise ValidationError(
            'must be one of {}'.format(', '.join(sorted(allowed))),
            field='status')

    return value


def vote_count(value):
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError('must be an integer', field='vote_count')

    if value < 0:
        raise ConstraintError('must not be negative', field='vote_count')

    if value > INTEGER_MAX:
        raise ConstraintError('is out of range', field='vote_count')

    return value
