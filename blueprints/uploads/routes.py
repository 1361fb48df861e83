"""
Upload Routes - Admin image uploads and public file serving
"""

from flask import request, jsonify, current_app, send_from_directory
from utils.decorators import login_required
from utils.errors import ValidationError
from utils.helpers import allowed_file, save_upload
from . import uploads_bp


@uploads_bp.route('/api/upload', methods=['POST'])
@login_required
def upload_image():
    """Store one image from the multipart ``image`` field"""
    file = request.files.get('image')
    if not file or not file.filename:
        raise ValidationError('No file uploaded', errors=[{'field': 'image', 'message': 'Field required'}])
    if not allowed_file(file.filename):
        raise ValidationError(
            'Invalid file type',
            errors=[{'field': 'image', 'message': 'Allowed types: ' + ', '.join(
                sorted(current_app.config.get('ALLOWED_EXTENSIONS', [])))}]
        )

    image_url = save_upload(file)
    current_app.logger.info(f"Stored upload {image_url}")
    return jsonify({'imageUrl': image_url})


@uploads_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    """Serve a previously uploaded file"""
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
