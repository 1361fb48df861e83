"""
Helpers Module - Utility functions for common operations
"""

import os
import uuid
from datetime import datetime
from flask import current_app
from werkzeug.utils import secure_filename


def allowed_file(filename):
    """Check if file extension is allowed"""
    allowed_extensions = current_app.config.get('ALLOWED_EXTENSIONS', {'png', 'jpg', 'jpeg', 'gif', 'webp'})
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in allowed_extensions


def save_upload(file):
    """
    Store an uploaded image under UPLOAD_FOLDER

    Args:
        file (FileStorage): The uploaded file; its name must already pass allowed_file()

    Returns:
        str: Public URL path of the stored file, e.g. ``/uploads/image_...png``
    """
    stem, extension = file.filename.rsplit('.', 1)
    stem = secure_filename(stem)[:40] or 'image'
    stored_name = f"{stem}_{datetime.now().strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}.{extension.lower()}"

    upload_folder = current_app.config.get('UPLOAD_FOLDER', 'uploads')
    os.makedirs(upload_folder, exist_ok=True)
    file.save(os.path.join(upload_folder, stored_name))

    url_prefix = current_app.config.get('UPLOAD_URL_PREFIX', '/uploads').rstrip('/')
    return f"{url_prefix}/{stored_name}"


__all__ = ['allowed_file', 'save_upload']
