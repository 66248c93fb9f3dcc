"""Results storage wiring.

One repository/service pair per app, kept in ``app.extensions``.
"""

from __future__ import annotations

import os

from flask import Flask, current_app

from lottery_board.repositories.results_repository import JsonResultsRepository
from lottery_board.services.results_service import ResultsService


def results_path(app: Flask) -> str:
    return os.path.join(str(app.config["DATA_DIR"]), str(app.config["RESULTS_FILENAME"]))


def init_storage(app: Flask) -> None:
    """Create the results repository and service for ``app``."""

    repository = JsonResultsRepository(results_path(app))
    service = ResultsService(
        repository,
        consolation_max=int(app.config["CONSOLATION_MAX"]),
        show_toasts=bool(app.config["SHOW_TOASTS"]),
    )

    app.extensions["results_repository"] = repository
    app.extensions["results_service"] = service


def get_results_service() -> ResultsService:
    """Get the current app's results service."""

    service: ResultsService | None = current_app.extensions.get("results_service")
    if service is None:
        raise RuntimeError("Results storage not initialized")
    return service
