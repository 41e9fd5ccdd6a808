"""
JSON envelope helpers shared by every route and error handler.
"""
from flask import jsonify


def success_response(payload, status=200):
    """Wrap ``payload`` as ``{"success": true, "payload": ...}``."""
    return jsonify({'success': True, 'payload': payload}), status


def failure_response(reason, status=404):
    """Wrap ``reason`` as ``{"success": false, "reason": ...}``."""
    return jsonify({'success': False, 'reason': reason}), status


def not_found_at(path):
    """The catch-all reply for paths no route serves."""
    return failure_response(
        f"No resource found at {path}, please re-check the path and try again.",
        404,
    )
