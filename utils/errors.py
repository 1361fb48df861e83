"""
Errors Module - API exception taxonomy

Every exception here carries its HTTP status and renders to the
``{message, errors?}`` JSON body returned by the API error handler.
"""


class APIError(Exception):
    """Base class for errors surfaced to API clients"""

    status_code = 500
    default_message = 'Internal Server Error'

    def __init__(self, message=None, errors=None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    def to_dict(self):
        body = {'message': self.message}
        if self.errors is not None:
            body['errors'] = self.errors
        return body


class ValidationError(APIError):
    status_code = 400
    default_message = 'Invalid request data'


class AuthError(APIError):
    status_code = 401
    default_message = 'Unauthorized'


class NotFoundError(APIError):
    status_code = 404
    default_message = 'Not found'


class RateLimitError(APIError):
    status_code = 429
    default_message = 'Too many requests. Please try again later.'


class PersistenceError(APIError):
    status_code = 500
    default_message = 'Database operation failed'


__all__ = [
    'APIError',
    'ValidationError',
    'AuthError',
    'NotFoundError',
    'RateLimitError',
    'PersistenceError',
]
