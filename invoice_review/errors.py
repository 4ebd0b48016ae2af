"""Centralized error handling utilities.

Provides the application exception hierarchy and consistent JSON responses
for the HTTP routes.
"""

from flask import jsonify


# =============================================================================
# Custom Exceptions
# =============================================================================

class AppError(Exception):
    """Base application error."""
    def __init__(self, message):
        self.message = message
        super().__init__(message)


class ConfigurationError(AppError, ValueError):
    """Raised when an environment setting cannot be parsed."""


# =============================================================================
# JSON Response Helpers (for API routes)
# =============================================================================

def json_error(message, status_code=400):
    """Return a standardized JSON error response.

    Args:
        message: Error message string
        status_code: HTTP status code (default 400)

    Returns:
        Tuple of (response, status_code)
    """
    return jsonify({'error': message}), status_code


def json_success(data=None):
    """Return a standardized JSON success response.

    Args:
        data: Optional dict of additional response data

    Returns:
        JSON response with status='success' plus any additional data
    """
    response = {'status': 'success'}
    if data:
        response.update(data)
    return jsonify(response)
