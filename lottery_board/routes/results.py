"""Results API (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from lottery_board.errors import ValidationError
from lottery_board.schemas.results import EntryRequestSchema, LotteryResultsSchema
from lottery_board.services.results_service import parse_tier
from lottery_board.storage import get_results_service
from lottery_board.utils.responses import ok

results_bp = Blueprint("results", __name__)

_results_schema = LotteryResultsSchema()
_entry_schema = EntryRequestSchema()


@results_bp.get("/results")
def get_results():
    """Return the stored document, creating an empty one on first access."""

    return ok(get_results_service().read_document())


@results_bp.post("/results")
def replace_results():
    """Overwrite the stored document with the request body as-is."""

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")

    get_results_service().overwrite_document(payload)
    return ok({"ok": True})


@results_bp.post("/results/<tier>/entries")
def add_entry(tier: str):
    """Validate and append one number to a tier."""

    prize = parse_tier(tier)
    data = _entry_schema.load(request.get_json(silent=True) or {})

    outcome = get_results_service().submit_entry(prize, data["value"])
    return ok(_results_schema.dump(outcome.results.to_dict()), status_code=201, message=outcome.message)
