"""
Messages Blueprint - Contact form messages
Handles: Public submission, sender self-service, admin inbox
"""

from flask import Blueprint

messages_bp = Blueprint('messages', __name__, url_prefix='/api/messages')

from . import routes
