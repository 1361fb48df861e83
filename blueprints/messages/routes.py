"""
Messages Routes - Contact form inbox
Handles: Public submission, sender history and deletion, admin read/delete
"""

from flask import request, jsonify, current_app
from utils import repository
from utils.decorators import login_required, no_cache
from utils.errors import RateLimitError, ValidationError
from utils.notifications import notify_new_message
from utils.schemas import validate_payload, MessageSchema, SenderSchema
from utils.security import check_rate_limit, get_client_ip
from . import messages_bp


@messages_bp.route('', methods=['GET'])
@login_required
@no_cache
def list_messages():
    """Admin inbox, oldest first"""
    return jsonify([message.to_dict() for message in repository.messages.list()])


@messages_bp.route('/sender/<path:email>', methods=['GET'])
@no_cache
def sender_messages(email):
    """Messages sent from one address"""
    return jsonify([message.to_dict() for message in repository.messages.list_by_email(email)])


@messages_bp.route('', methods=['POST'])
def create_message():
    """Public contact form submission"""
    fields = validate_payload(MessageSchema, request.get_json(silent=True), 'message')

    if not check_rate_limit('contact'):
        current_app.logger.warning(f"Contact rate limit hit from {get_client_ip()}")
        raise RateLimitError()

    message = repository.messages.create(fields)
    current_app.logger.info(f"New contact message {message.id} from {get_client_ip()}")
    notify_new_message(message)
    return jsonify(message.to_dict()), 201


@messages_bp.route('/<int:message_id>/read', methods=['PUT'])
@login_required
def mark_read(message_id):
    repository.messages.mark_read(message_id)
    return jsonify({'message': 'Message marked as read'})


@messages_bp.route('/<int:message_id>', methods=['DELETE'])
@login_required
def delete_message(message_id):
    """Admin deletion"""
    repository.messages.delete(message_id)
    current_app.logger.info(f"Deleted message {message_id}")
    return jsonify({'message': 'Message deleted successfully'})


@messages_bp.route('/<int:message_id>/sender', methods=['DELETE'])
def delete_own_message(message_id):
    """Self-service deletion, allowed only for the address the message came from"""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict) or not payload.get('email'):
        raise ValidationError('Email is required', errors=[{'field': 'email', 'message': 'Field required'}])
    fields = validate_payload(SenderSchema, payload, 'sender')
    repository.messages.delete_by_sender(message_id, fields['email'])
    current_app.logger.info(f"Message {message_id} deleted by its sender")
    return jsonify({'message': 'Message deleted successfully'})
