from marshmallow import fields, ValidationError


class Identifier(fields.String):
    """String identifier that also accepts integers.

    Older documents stored withdrawal ids as millisecond timestamps.
    """

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool):
            raise ValidationError("Not a valid identifier.")
        if isinstance(value, int):
            value = str(value)
        return super()._deserialize(value, attr, data, **kwargs)


class Text(fields.String):
    """String field that stringifies JSON scalars.

    Statuses were stored as whatever the admin sent, numbers included.
    """

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, (int, float)):
            value = str(value)
        return super()._deserialize(value, attr, data, **kwargs)
