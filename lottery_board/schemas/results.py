"""Marshmallow schemas for the results API."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, pre_load


class LotteryResultsSchema(Schema):
    """Serialize the results document."""

    consolation = fields.List(fields.String(), required=True)
    third = fields.List(fields.String(), required=True)
    second = fields.List(fields.String(), required=True)
    first = fields.List(fields.String(), required=True)
    special = fields.List(fields.String(), required=True)


class EntryRequestSchema(Schema):
    """Validate a single-number submission."""

    class Meta:
        unknown = EXCLUDE

    value = fields.String(required=True)

    @pre_load
    def _coerce_value(self, data, **kwargs):  # type: ignore[no-untyped-def]
        # Numbers typed into a JSON client arrive as ints; "528" and 528 are the same entry.
        value = data.get("value") if isinstance(data, dict) else None
        if isinstance(value, int) and not isinstance(value, bool):
            return {**data, "value": str(value)}
        return data
