"""
Profile Routes - Singleton profile read and upsert
"""

from flask import request, jsonify, current_app
from utils import repository
from utils.decorators import login_required
from utils.schemas import validate_payload, ProfileSchema, ProfileUpdateSchema
from . import profile_bp


@profile_bp.route('', methods=['GET'])
def get_profile():
    """Public profile, or null before one has been saved"""
    profile = repository.profile.get()
    return jsonify(profile.to_dict() if profile else None)


@profile_bp.route('', methods=['PUT'])
@login_required
def update_profile():
    """Create the profile on first write, update it in place afterwards"""
    payload = request.get_json(silent=True)
    # The first write must carry every required field
    schema = ProfileUpdateSchema if repository.profile.get() else ProfileSchema
    fields = validate_payload(schema, payload, 'profile')
    profile = repository.profile.upsert(fields)
    current_app.logger.info(f"Profile {profile.id} saved")
    return jsonify(profile.to_dict())
