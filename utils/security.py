"""
Security Module - Credentials, bearer tokens, client IP tracking and rate limiting
"""

import time
from flask import request, current_app
from werkzeug.security import generate_password_hash, check_password_hash


# Rate Limiting
RATE_LIMIT_REQUESTS = {}  # {ip: [(timestamp, endpoint), ...]}


def log_audit_event(event_type, username=None, details=''):
    """Log high-level audit events for administrative review"""
    current_app.logger.info(
        f"[audit] {event_type} ip={get_client_ip()} user={username or '-'} {details}".rstrip()
    )


def get_client_ip():
    """Get real client IP address"""
    forwarded = request.environ.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.environ.get('REMOTE_ADDR', 'unknown')


def check_rate_limit(endpoint='contact'):
    """Check if IP is within rate limit"""
    if not current_app.config.get('RATE_LIMIT_ENABLED', True):
        return True

    max_requests = current_app.config.get('CONTACT_RATE_LIMIT', 10)
    window = current_app.config.get('CONTACT_RATE_WINDOW', 60)
    client_ip = get_client_ip()
    current_time = time.time()

    # Clean old requests outside the window
    RATE_LIMIT_REQUESTS[client_ip] = [
        (ts, ep) for ts, ep in RATE_LIMIT_REQUESTS.get(client_ip, [])
        if current_time - ts < window
    ]

    endpoint_requests = [
        ep for ts, ep in RATE_LIMIT_REQUESTS[client_ip] if ep == endpoint
    ]
    if len(endpoint_requests) >= max_requests:
        return False

    RATE_LIMIT_REQUESTS[client_ip].append((current_time, endpoint))
    return True


def get_admin_credentials():
    """Load admin credentials from app config"""
    username = current_app.config.get('ADMIN_USERNAME')
    password = current_app.config.get('ADMIN_PASSWORD')
    if not username or not password:
        return {'username': None, 'password_hash': None}
    return {
        'username': username,
        'password_hash': generate_password_hash(password)
    }


def verify_password(password, password_hash):
    """Verify password against hash"""
    if not password or not password_hash:
        return False
    return check_password_hash(password_hash, password)


def get_bearer_token():
    """Extract the session token from an ``Authorization: Bearer`` header"""
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer':
        return None
    return token.strip() or None


__all__ = [
    'get_client_ip',
    'check_rate_limit',
    'get_admin_credentials',
    'verify_password',
    'get_bearer_token',
    'log_audit_event',
]
