# coding=utf-8


class ReportBookError(Exception):
    """Base error for everything raised by reportbook."""
    def __init__(self, message, field=None):
        super(ReportBookError, self).__init__(message)
        self.message = message
        self.field = field

    def __str__(self):
        if self.field is None:
            return self.message

        return '{}: {}'.format(self.field, self.message)


class ValidationError(ReportBookError):
    """Malformed or missing input."""


class NotFoundError(ReportBookError):
    """Referenced entity does not exist."""
    def __init__(self, entity, entity_id):
        super(NotFoundError, self).__init__(
            '{} {} does not exist'.format(entity, entity_id))
        self.entity = entity
        self.entity_id = entity_id


class ConstraintError(ValidationError):
    """Input would break a data invariant."""
