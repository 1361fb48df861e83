"""
Decorators Module - Authentication and response decorators
"""

from functools import wraps
from flask import make_response
from flask_login import current_user

from .errors import AuthError


def login_required(f):
    """Decorator to require a valid admin session token"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            raise AuthError('Unauthorized')
        return f(*args, **kwargs)
    return decorated_function


def no_cache(f):
    """Decorator to stop clients and proxies from caching the response"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        response = make_response(f(*args, **kwargs))
        response.headers['Cache-Control'] = 'no-cache, no-store, must-revalidate'
        response.headers['Pragma'] = 'no-cache'
        response.headers['Expires'] = '0'
        return response
    return decorated_function
