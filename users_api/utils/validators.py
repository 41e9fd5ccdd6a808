"""
Validation utilities for incoming user data.
"""


class ValidationError(ValueError):
    """Raised when a request body cannot be turned into a user."""


def normalize_username(raw_username, max_length=64):
    """
    Normalize username strings while enforcing basic length + type checks.
    Returns None when the value is unusable.
    """
    if not isinstance(raw_username, str):
        return None
    username = raw_username.strip()
    if not username or len(username) > max_length:
        return None
    return username


def extract_username(payload, max_length=64):
    """
    Pull a valid username out of a POST /api/users body.

    Args:
        payload: The decoded JSON body
        max_length: Longest username accepted

    Returns:
        The stripped username

    Raises:
        ValidationError: If the body is not an object or the username is
            missing, not a string, blank, or too long
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object with a username")

    if 'username' not in payload:
        raise ValidationError("Missing required field: username")

    raw_username = payload['username']
    if not isinstance(raw_username, str):
        raise ValidationError("username must be a string")

    username = normalize_username(raw_username, max_length=max_length)
    if username is None:
        raise ValidationError(
            f"username must be between 1 and {max_length} characters"
        )
    return username
