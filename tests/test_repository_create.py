from freezegun import freeze_time
from flexmock import flexmock

from reportbook.errors import ConstraintError, NotFoundError, ValidationError
from reportbook.models import Report
from reportbook.repository import ReportRepository
from tests.test_base import BaseTest


class CreateReportTest(BaseTest):
    def test_create(self):
        report = self.book.reports.create(self.new_report())

        self.assertIsNotNone(report.id)
        self.assertEqual(report.user_id, self.user.id)
        self.assertEqual(report.title, 'Pothole')
        self.assertEqual(report.description, 'Large pothole on Main St')
        self.assertIsNone(report.image_path)
        self.assertEqual(report.latitude, 40.1)
        self.assertEqual(report.longitude, -74.2)
        self.assertEqual(report.status, 'pending')
        self.assertEqual(report.vote_count, 0)

    def test_create_from_dict(self):
        report = self.book.reports.create({
            'user_id': self.user.id,
            'title': 'Broken light',
            'description': 'Street light is out',
            'image_path': 'uploads/light.jpg',
        })

        self.assertEqual(report.image_path, 'uploads/light.jpg')
        self.assertIsNone(report.latitude)
        self.assertIsNone(report.longitude)

    def test_create_issues_fresh_ids(self):
        first = self.book.reports.create(self.new_report())
        second = self.book.reports.create(self.new_report())
        self.book.reports.delete(second.id)
        third = self.book.reports.create(self.new_report())

        self.assertEqual(len({first.id, second.id, third.id}), 3)

    def test_create_round_trip(self):
        new_report = self.new_report(
            image_path='uploads/pothole.png', status='open')
        report = self.book.reports.create(new_report)

        stored = self.book.reports.get_by_id(report.id)
        self.assertEqual(stored, report)
        for name, value in new_report._asdict().items():
            self.assertEqual(getattr(stored, name), value, name)

    def test_create_sets_timestamps(self):
        with freeze_time('2024-05-01 10:00:00'):
            report = self.book.reports.create(self.new_report())

        stored = self.book.reports.get_by_id(report.id)
        self.assertEqual(str(stored.created_at), '2024-05-01 10:00:00')
        self.assertEqual(str(stored.updated_at), '2024-05-01 10:00:00')

    def test_create_blank_title(self):
        with self.assertRaises(ValidationError) as ctx:
            self.book.reports.create(self.new_report(title='  '))

        self.assertEqual(ctx.exception.field, 'title')
        self.assertEqual(Report.select().count(), 0)

    def test_create_blank_description(self):
        with self.assertRaises(ValidationError) as ctx:
            self.book.reports.create(self.new_report(description=''))

        self.assertEqual(ctx.exception.field, 'description')

    def test_create_title_too_long(self):
        self.assertRaises(
            ValidationError,
            self.book.reports.create, self.new_report(title='x' * 256))

    def test_create_missing_required_field(self):
        with self.assertRaises(ValidationError) as ctx:
            self.book.reports.create({
                'user_id': self.user.id,
                'title': 'Pothole',
            })

        self.assertEqual(ctx.exception.field, 'description')

    def test_create_rejects_vote_count(self):
        fields = self.new_report()._asdict()
        fields['vote_count'] = 10

        with self.assertRaises(ValidationError) as ctx:
            self.book.reports.create(fields)

        self.assertEqual(ctx.exception.field, 'vote_count')

    def test_create_unknown_user(self):
        with self.assertRaises(ValidationError) as ctx:
            self.book.reports.create(self.new_report(user_id=9999))

        self.assertEqual(ctx.exception.field, 'user_id')
        self.assertEqual(Report.select().count(), 0)

    def test_create_user_id_not_integer(self):
        self.assertRaises(
            ValidationError,
            self.book.reports.create, self.new_report(user_id='7'))

    def test_create_user_id_beyond_integer_range(self):
        with self.assertRaises(ValidationError) as ctx:
            self.book.reports.create(self.new_report(user_id=2 ** 63))

        self.assertEqual(ctx.exception.field, 'user_id')
        self.assertEqual(Report.select().count(), 0)

    def test_create_only_latitude(self):
        with self.assertRaises(ValidationError) as ctx:
            self.book.reports.create(self.new_report(longitude=None))

        self.assertEqual(ctx.exception.field, 'longitude')

    def test_create_latitude_out_of_range(self):
        self.assertRaises(
            ValidationError,
            self.book.reports.create, self.new_report(latitude=91))

    def test_create_longitude_out_of_range(self):
        self.assertRaises(
            ValidationError,
            self.book.reports.create, self.new_report(longitude=-180.5))

    def test_create_unexpected_input_type(self):
        self.assertRaises(
            ValidationError, self.book.reports.create, ['Pothole'])

    def test_create_status_not_allowed(self):
        reports = ReportRepository(
            self.book.users, statuses=['pending', 'resolved'])

        with self.assertRaises(ValidationError) as ctx:
            reports.create(self.new_report(status='archived'))

        self.assertEqual(ctx.exception.field, 'status')

    def test_statuses_string_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            ReportRepository(self.book.users, statuses='pending')

        self.assertEqual(ctx.exception.field, 'statuses')

    def test_create_uses_configured_default_status(self):
        reports = ReportRepository(self.book.users, default_status='new')
        report = reports.create(self.new_report())
        self.assertEqual(report.status, 'new')

    def test_default_status_must_be_allowed(self):
        self.assertRaises(
            ValidationError,
            ReportRepository, self.book.users,
            statuses=['resolved'], default_status='pending')

    def test_create_asks_user_collaborator(self):
        users = flexmock()
        (users
         .should_receive('get_user_by_id')
         .with_args(self.user.id)
         .and_return(self.user)
         .once())

        report = ReportRepository(users).create(self.new_report())
        self.assertEqual(report.user_id, self.user.id)

    def test_create_collaborator_not_found(self):
        users = flexmock()
        (users
         .should_receive('get_user_by_id')
         .and_raise(NotFoundError, 'User', self.user.id))

        self.assertRaises(
            ValidationError,
            ReportRepository(users).create, self.new_report())

    def test_create_logs_rejection(self):
        (flexmock(self.book.log.getChild('repository'))
         .should_receive('warning')
         .with_args(str)
         .once())

        self.assertRaises(
            ValidationError,
            self.book.reports.create, self.new_report(title=''))

    def test_create_integrity_error_is_constraint_error(self):
        # foreign key enforced by the database itself
        users = flexmock(get_user_by_id=lambda user_id: None)

        self.assertRaises(
            ConstraintError,
            ReportRepository(users).create, self.new_report(user_id=9999))
