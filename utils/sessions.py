"""
Sessions Module - In-memory admin session store

Tokens live only in process memory: a restart invalidates every session.
One SessionManager is created per application and kept in
``app.extensions['session_manager']``.
"""

import secrets
import threading
import time

from flask import current_app
from flask_login import UserMixin

from extensions import login_manager
from .security import get_bearer_token


class SessionManager:
    """Mapping of opaque bearer tokens to the time they were issued"""

    def __init__(self, ttl_seconds=None, clock=time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._tokens = {}
        self._lock = threading.Lock()

    def issue(self):
        """Mint a new token and register it as valid, dropping expired ones"""
        token = secrets.token_urlsafe(32)
        with self._lock:
            self._drop_expired()
            self._tokens[token] = self._clock()
        return token

    def revoke(self, token):
        """Forget a token. Returns True if it was known."""
        if not token:
            return False
        with self._lock:
            return self._tokens.pop(token, None) is not None

    def is_valid(self, token):
        if not token:
            return False
        with self._lock:
            issued_at = self._tokens.get(token)
            if issued_at is None:
                return False
            if self._expired(issued_at):
                del self._tokens[token]
                return False
            return True

    def prune(self):
        """Drop expired tokens and return how many were removed"""
        with self._lock:
            return self._drop_expired()

    def _drop_expired(self):
        # Caller holds the lock
        if self.ttl_seconds is None:
            return 0
        stale = [t for t, issued_at in self._tokens.items() if self._expired(issued_at)]
        for token in stale:
            del self._tokens[token]
        return len(stale)

    def _expired(self, issued_at):
        return self.ttl_seconds is not None and self._clock() - issued_at >= self.ttl_seconds

    def __len__(self):
        with self._lock:
            return len(self._tokens)


class AdminUser(UserMixin):
    """The single site administrator, identified by the session token in use"""

    def __init__(self, token):
        self.id = token
        self.username = current_app.config.get('ADMIN_USERNAME')


def get_session_manager():
    """Session manager bound to the current application"""
    return current_app.extensions['session_manager']


@login_manager.request_loader
def load_admin_from_request(request):
    """Resolve ``Authorization: Bearer <token>`` to the admin user"""
    token = get_bearer_token()
    if token and get_session_manager().is_valid(token):
        return AdminUser(token)
    return None


__all__ = ['SessionManager', 'AdminUser', 'get_session_manager']
