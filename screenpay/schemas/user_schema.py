from marshmallow import EXCLUDE, fields, post_load

from screenpay.extensions import ma
from screenpay.models.user_record import UserRecord
from screenpay.schemas.withdrawal_schema import WithdrawalSchema


class UserRecordSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    screenshots = fields.Integer(load_default=0)
    balance = fields.Float(load_default=0.0)
    withdraws = fields.List(fields.Nested(WithdrawalSchema), load_default=list)

    @post_load
    def make_user(self, data, **kwargs):
        return UserRecord(**data)


class DocumentSchema(ma.Schema):
    """Serialises the whole document. Loading goes user by user in JsonStore."""

    users = fields.Dict(keys=fields.String(), values=fields.Nested(UserRecordSchema))


class BalanceSchema(ma.Schema):
    """Public view of a user record for GET /api/balance."""

    username = fields.String()
    screenshots = fields.Integer()
    balance = fields.Float()
    withdraws = fields.List(fields.Nested(WithdrawalSchema))
