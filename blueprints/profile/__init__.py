"""
Profile Blueprint - The site owner's profile
Handles: Public read, admin upsert
"""

from flask import Blueprint

profile_bp = Blueprint('profile', __name__, url_prefix='/api/profile')

from . import routes
