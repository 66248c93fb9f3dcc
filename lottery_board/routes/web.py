"""Web page routes: the entry form and the results board."""

from __future__ import annotations

import logging
import re

from flask import Blueprint, Response, flash, redirect, render_template, request, url_for

from lottery_board.errors import AppError
from lottery_board.models.results import TIER_ORDER, LotteryResults
from lottery_board.services.results_service import MSG_LOAD_FAILED, parse_tier
from lottery_board.storage import get_results_service

logger = logging.getLogger(__name__)

web_bp = Blueprint("web", __name__)

_NON_DIGITS = re.compile(r"\D")


def _render_board(
    inputs: dict[str, str] | None = None,
    message: str | None = None,
    toast: str | None = None,
    status_code: int = 200,
):
    service = get_results_service()
    try:
        results = service.load_results()
    except (OSError, ValueError):
        logger.exception("Failed to load results document")
        results = LotteryResults.empty()
        message = MSG_LOAD_FAILED

    html = render_template(
        "index.html",
        order=TIER_ORDER,
        meta=service.meta,
        results=results,
        can_input=service.can_input(results),
        visible=service.visible_tiers(results),
        inputs=inputs or {},
        message=message,
        toast=toast,
    )
    return html, status_code


@web_bp.get("/")
def index():
    return _render_board()


@web_bp.post("/entries/<tier>")
def submit_entry(tier: str):
    service = get_results_service()
    try:
        prize = parse_tier(tier)
    except AppError as exc:
        return _render_board(message=exc.message, status_code=exc.status_code)

    # Inputs only take digits, up to the tier's width.
    raw = request.form.get("value", "")
    value = _NON_DIGITS.sub("", raw)[: service.meta[prize].digits]

    try:
        outcome = service.submit_entry(prize, value)
    except AppError as exc:
        toast = exc.message if service.should_toast(prize, exc.message) else None
        return _render_board(
            inputs={prize.value: value},
            message=exc.message,
            toast=toast,
            status_code=exc.status_code,
        )

    flash(outcome.message)
    return redirect(url_for("web.index"))


@web_bp.get("/favicon.ico")
def favicon() -> Response:
    svg = """<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 64 64'>
    <defs>
        <radialGradient id='g' cx='35%' cy='30%' r='80%'>
        <stop offset='0%' stop-color='#facc15'/>
        <stop offset='55%' stop-color='#dc2626'/>
        <stop offset='100%' stop-color='#450a0a'/>
        </radialGradient>
    </defs>
    <circle cx='32' cy='32' r='28' fill='url(#g)'/>
    <circle cx='32' cy='32' r='28' fill='none' stroke='rgba(254,243,199,0.35)' stroke-width='2'/>
    <text x='32' y='39' text-anchor='middle' font-family='system-ui,Segoe UI,Arial' font-size='20' font-weight='800' fill='#fef3c7'>Tết</text>
</svg>"""

    return Response(svg, mimetype="image/svg+xml")
