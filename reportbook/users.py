# coding=utf-8
import logging

from peewee import IntegrityError

from reportbook import validators
from reportbook.errors import ConstraintError, NotFoundError
from reportbook.models import DatabaseConnectionManager, User


log = logging.getLogger(__name__)


class UserDirectory(object):
    """Lookup and registration of report owners."""
    def get_user_by_id(self, user_id):
        user = None
        if validators.fits_storage(user_id):
            user = User.get_or_none(User.id == user_id)

        if user is None:
            raise NotFoundError('User', user_id)

        return user

    def create_user(self, full_name, email=None):
        validators.required_text(full_name, 'full_name', max_length=128)
        validators.optional_text(email, 'email', max_length=128)

        try:
            with DatabaseConnectionManager.database.atomic():
                user = User.create(full_name=full_name, email=email)
        except IntegrityError as e:
            raise ConstraintError(
                'is already registered ({})'.format(e), field='email')

        log.info('Registered user {}'.format(user.id))
        return user

    def delete_user(self, user_id):
        """Removes a user together with all of their reports."""
        if not validators.fits_storage(user_id):
            raise NotFoundError('User', user_id)

        with DatabaseConnectionManager.database.atomic():
            deleted = User.delete().where(User.id == user_id).execute()

        if not deleted:
            raise NotFoundError('User', user_id)

        log.info('Deleted user {} and their reports'.format(user_id))
