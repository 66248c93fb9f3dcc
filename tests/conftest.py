from __future__ import annotations

import pytest

from lottery_board import create_app
from lottery_board.repositories.results_repository import JsonResultsRepository
from lottery_board.services.results_service import ResultsService


@pytest.fixture()
def app(tmp_path):
    app = create_app(
        {
            "TESTING": True,
            "DATA_DIR": str(tmp_path / "data"),
            "RESULTS_FILENAME": "results.json",
            "CONSOLATION_MAX": 15,
            "SHOW_TOASTS": True,
            "SECRET_KEY": "test",
        }
    )
    yield app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def repository(tmp_path) -> JsonResultsRepository:
    return JsonResultsRepository(tmp_path / "store" / "results.json")


@pytest.fixture()
def service(repository) -> ResultsService:
    return ResultsService(repository, consolation_max=15, show_toasts=True)

