from marshmallow import EXCLUDE, fields, post_dump, post_load

from screenpay.extensions import ma
from screenpay.models.withdrawal import Withdrawal, PENDING
from screenpay.schemas.fields import Identifier, Text


class WithdrawalSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = Identifier(required=True)
    amount = fields.Float(required=True)
    status = Text(load_default=PENDING)
    requested_at = Text(data_key="requestedAt", allow_none=True, load_default=None)
    processed_at = Text(data_key="processedAt", allow_none=True, load_default=None)

    @post_load
    def make_withdrawal(self, data, **kwargs):
        return Withdrawal(**data)

    @post_dump
    def drop_unset_processed_at(self, data, **kwargs):
        if data.get("processedAt") is None:
            data.pop("processedAt", None)
        return data
