"""
WSGI entry point: ``gunicorn -c gunicorn.conf.py wsgi:app``.

Logs go to stdout. The connection pool is released when the worker exits.
"""
import atexit
import logging
import os
import sys

logging.basicConfig(
    level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    stream=sys.stdout
)
logger = logging.getLogger(__name__)

from users_api import create_app  # noqa: E402  (logging must be configured first)

try:
    app = create_app()
except Exception:
    logger.critical("Users API failed to start", exc_info=True)
    raise

atexit.register(app.extensions['database'].close)


if __name__ == "__main__":
    app.run(
        host="0.0.0.0",
        port=int(os.environ.get("PORT", 5000)),
        debug=os.environ.get('FLASK_DEBUG', 'False').lower() == 'true',
    )
