"""
Auth Routes - Bearer-token admin sessions
"""

from flask import request, jsonify
from utils.errors import AuthError
from utils.security import get_admin_credentials, verify_password, get_bearer_token, log_audit_event
from utils.sessions import get_session_manager
from . import auth_bp


@auth_bp.route('/login', methods=['POST'])
def login():
    """Exchange the admin credentials for a session token"""
    admin_credentials = get_admin_credentials()
    payload = request.get_json(silent=True) or {}
    username = payload.get('username') if isinstance(payload, dict) else None
    password = payload.get('password') if isinstance(payload, dict) else None

    if (admin_credentials.get('username')
            and username == admin_credentials['username']
            and isinstance(password, str)
            and verify_password(password, admin_credentials['password_hash'])):
        session_id = get_session_manager().issue()
        log_audit_event('admin_login', username=username)
        return jsonify({'message': 'Login successful', 'sessionId': session_id})

    log_audit_event('failed_login', username=username if isinstance(username, str) else None)
    raise AuthError('Invalid credentials')


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Revoke the supplied session token only"""
    token = get_bearer_token()
    if get_session_manager().revoke(token):
        log_audit_event('admin_logout')
    return jsonify({'message': 'Logout successful'})


@auth_bp.route('/status')
def status():
    """Report whether the supplied token is a live session"""
    if get_session_manager().is_valid(get_bearer_token()):
        return jsonify({'authenticated': True})
    return jsonify({'authenticated': False}), 401
