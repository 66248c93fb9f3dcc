"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 1 -b 0.0.0.0:8000 wsgi:app

Keep a single worker: the results file has no cross-process locking.
"""

from lottery_board import create_app

app = create_app()
