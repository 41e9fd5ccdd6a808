"""
Service-level routes.
"""
from flask import Blueprint

from users_api.utils.responses import success_response

main_bp = Blueprint('main', __name__, url_prefix='/api')


@main_bp.route('/health')
def health():
    """Health check endpoint."""
    return success_response("API is running correctly")
