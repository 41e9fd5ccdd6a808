"""
Main application entry point.
"""
import atexit
import logging
import os

from users_api import create_app

logging.basicConfig(
    level=logging.DEBUG if os.environ.get('FLASK_DEBUG', 'False').lower() == 'true' else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
)

app = create_app()
atexit.register(app.extensions['database'].close)


if __name__ == '__main__':
    # For development
    app.run(host='0.0.0.0', port=int(os.environ.get('PORT', 5000)), debug=True)
