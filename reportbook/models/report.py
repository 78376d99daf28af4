from playhouse.sqlite_ext import AutoIncrementField

from reportbook.models import base
from reportbook.models.user import User


class Report(base.BaseModel):
    """Issue reported by a user at a location."""
    id = AutoIncrementField()
    user = base.ForeignKeyField(
        User, column_name='user_id', backref='+', on_delete='CASCADE')
    title = base.CharField(max_length=255)
    description = base.TextField()
    image_path = base.CharField(max_length=255, null=True)
    latitude = base.FloatField(null=True)
    longitude = base.FloatField(null=True)
    status = base.CharField(max_length=32)
    vote_count = base.IntegerField(
        default=0, constraints=[base.Check('vote_count >= 0')])

    class Meta:
        table_name = 'reports'

    def as_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'title': self.title,
            'description': self.description,
            'image_path': self.image_path,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'status': self.status,
            'vote_count': self.vote_count,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }

    def __repr__(self):
        return '<Report id={} user_id={} status={}>'.format(
            self.id, self.user_id, self.status)
