"""
Notifications Module - Telegram alerts for new contact messages
"""

import html
import threading
import requests
from flask import current_app


TELEGRAM_API_URL = 'https://api.telegram.org/bot{token}/sendMessage'


def get_telegram_credentials():
    """Admin Telegram bot credentials from app config, or None if incomplete"""
    bot_token = current_app.config.get('ADMIN_TELEGRAM_BOT_TOKEN')
    chat_id = current_app.config.get('ADMIN_TELEGRAM_CHAT_ID')
    if not bot_token or not chat_id:
        return None
    return {'bot_token': bot_token, 'chat_id': chat_id}


def send_telegram_notification(message_text, credentials, logger):
    """
    Send a Telegram message synchronously

    Args:
        message_text (str): Message body (HTML parse mode)
        credentials (dict): ``bot_token`` and ``chat_id``
        logger: Logger to report failures on

    Returns:
        bool: Success status
    """
    try:
        response = requests.post(
            TELEGRAM_API_URL.format(token=credentials['bot_token']),
            json={
                'chat_id': credentials['chat_id'],
                'text': message_text,
                'parse_mode': 'HTML'
            },
            timeout=10
        )
        response.raise_for_status()
        return True
    except requests.exceptions.RequestException as e:
        logger.error(f"Telegram notification failed: {str(e)}")
        return False


def format_message_notification(message):
    """Telegram body announcing a new contact form message"""
    return (
        "📬 <b>New contact message</b>\n\n"
        f"<b>From:</b> {html.escape(message.name)} ({html.escape(message.email)})\n"
        f"<b>Subject:</b> {html.escape(message.subject)}\n\n"
        f"{html.escape(message.message[:1000])}"
    )


def notify_new_message(message):
    """
    Announce a new contact message to the admin in a background thread.
    Does nothing when Telegram is not configured.

    Returns:
        threading.Thread | None: The worker thread, if one was started
    """
    credentials = get_telegram_credentials()
    if not credentials:
        return None

    text = format_message_notification(message)
    logger = current_app.logger
    thread = threading.Thread(
        target=send_telegram_notification,
        args=(text, credentials, logger),
        daemon=True
    )
    thread.start()
    return thread


__all__ = [
    'get_telegram_credentials',
    'send_telegram_notification',
    'format_message_notification',
    'notify_new_message',
]
