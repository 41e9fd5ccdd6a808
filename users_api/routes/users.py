"""
Users API routes (HTTP).
"""
from flask import Blueprint, current_app, request

from users_api.utils.responses import failure_response, success_response
from users_api.utils.validators import ValidationError, extract_username

users_bp = Blueprint('users', __name__, url_prefix='/api/users')


def _user_service():
    return current_app.extensions['user_service']


def _no_user(user_id):
    return failure_response(f"No user with id {user_id} found", 404)


@users_bp.route('', methods=['GET'], strict_slashes=False)
def list_users():
    """
    List users, optionally filtered by ``?username=`` (case-insensitive
    exact match). No match is an empty list, not a 404.
    """
    username = request.args.get('username')
    return success_response(_user_service().list_users(username))


@users_bp.route('/<int:user_id>', methods=['GET'])
def get_user(user_id):
    user = _user_service().get_user_by_id(user_id)
    if user is None:
        return _no_user(user_id)
    return success_response(user)


@users_bp.route('', methods=['POST'], strict_slashes=False)
def create_user():
    """Create a user from a ``{"username": ...}`` JSON body."""
    payload = request.get_json(silent=True)
    try:
        username = extract_username(
            payload, max_length=current_app.config['MAX_USERNAME_LENGTH']
        )
    except ValidationError as e:
        return failure_response(str(e), 400)

    return success_response(_user_service().insert_user(username), 201)


@users_bp.route('/<int:user_id>', methods=['DELETE'])
def delete_user(user_id):
    user = _user_service().delete_user_by_id(user_id)
    if user is None:
        return _no_user(user_id)
    return success_response(user)
