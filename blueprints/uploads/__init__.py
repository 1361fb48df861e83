"""
Uploads Blueprint - Image uploads
Handles: Admin image upload, serving stored files
"""

from flask import Blueprint

uploads_bp = Blueprint('uploads', __name__)

from . import routes
