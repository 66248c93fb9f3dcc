"""Create (or reset) the results document.

Reads DATA_DIR / RESULTS_FILENAME from .env / environment. Without flags the
document is created with empty tiers only if it does not exist yet.

Usage:
  python scripts/init_results.py            # create if missing
  python scripts/init_results.py --reset    # wipe all tiers for a new event
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

from dotenv import load_dotenv

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from lottery_board import create_app
from lottery_board.repositories.results_repository import JsonResultsRepository

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Ensure the results document exists, optionally resetting it."""

    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--reset", action="store_true", help="overwrite the document with empty tiers")
    args = parser.parse_args(argv)

    load_dotenv()
    env_local = PROJECT_ROOT / ".env.local"
    if env_local.exists():
        load_dotenv(dotenv_path=env_local, override=True)

    app = create_app()
    repository: JsonResultsRepository = app.extensions["results_repository"]

    if args.reset:
        repository.reset()
        logger.info("Results document reset at %s", repository.path)
    else:
        repository.ensure_file()
        logger.info("Results document ready at %s", repository.path)

    print(f"Results document: {repository.path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
