from reportbook.models import base


class User(base.BaseModel):
    """Report owner."""
    full_name = base.CharField(max_length=128)
    email = base.CharField(max_length=128, unique=True, null=True)

    class Meta:
        table_name = 'users'

    def __repr__(self):
        return '<User id={} full_name={!r}>'.format(self.id, self.full_name)
