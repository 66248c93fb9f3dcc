"""Health check routes."""

from __future__ import annotations

from flask import Blueprint, current_app

from lottery_board.models.results import Tier
from lottery_board.storage import get_results_service
from lottery_board.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Liveness plus the board variant this process serves."""

    service = get_results_service()
    repository = current_app.extensions["results_repository"]
    return ok(
        {
            "status": "ok",
            "consolation_max": service.meta[Tier.CONSOLATION].max,
            "show_toasts": service.show_toasts,
            "results_file_exists": repository.path.exists(),
        }
    )
