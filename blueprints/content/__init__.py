"""
Content Blueprint - Portfolio content CRUD
Handles: Articles, skills, experiences, education, activities, values, social links
"""

from flask import Blueprint

content_bp = Blueprint('content', __name__, url_prefix='/api')

from . import routes
