"""
Utils Package - Centralized utility modules initialization
"""

from .errors import (
    APIError,
    ValidationError,
    AuthError,
    NotFoundError,
    RateLimitError,
    PersistenceError
)
from .decorators import login_required, no_cache
from .security import (
    get_client_ip,
    check_rate_limit,
    get_admin_credentials,
    verify_password,
    get_bearer_token,
    log_audit_event
)
from .sessions import SessionManager, AdminUser, get_session_manager
from .schemas import validate_payload, partial_schema
from .helpers import allowed_file, save_upload
from .notifications import notify_new_message, send_telegram_notification, get_telegram_credentials
from .seed import seed_database

__all__ = [
    # Errors
    'APIError',
    'ValidationError',
    'AuthError',
    'NotFoundError',
    'RateLimitError',
    'PersistenceError',

    # Decorators
    'login_required',
    'no_cache',

    # Security
    'get_client_ip',
    'check_rate_limit',
    'get_admin_credentials',
    'verify_password',
    'get_bearer_token',
    'log_audit_event',

    # Sessions
    'SessionManager',
    'AdminUser',
    'get_session_manager',

    # Schemas
    'validate_payload',
    'partial_schema',

    # Helpers
    'allowed_file',
    'save_upload',

    # Notifications
    'notify_new_message',
    'send_telegram_notification',
    'get_telegram_credentials',

    # Seeding
    'seed_database'
]
