import logging
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import Settings
from .constants import ENDPOINTS, FALLBACK_MESSAGE, HEALTH_MESSAGE, INTERNAL_ERROR
from .dispatcher import NotificationDispatcher
from .formatters import format_iso_timestamp
from .services import build_sms_sender

logger = logging.getLogger(__name__)

_UNSET = object()


def create_app(settings: Optional[Settings] = None, sender=_UNSET):
    """
    Builds the Flask app. Settings default to the process environment and the
    sender defaults to a Twilio client built from them; tests pass both in.
    """
    settings = settings or Settings.from_env()
    if sender is _UNSET:
        sender = build_sms_sender(settings)

    app = Flask(__name__)
    app.config['MAX_CONTENT_LENGTH'] = settings.max_content_length
    CORS(app, send_wildcard=True)

    dispatcher = NotificationDispatcher(settings, sender)

    @app.route('/', methods=['GET'])
    def health():
        try:
            return jsonify({
                'message': HEALTH_MESSAGE,
                'timestamp': format_iso_timestamp(),
                'status': 'ok',
                'hasCredentials': settings.has_credentials,
            })
        except Exception as e:
            logger.exception("Health check failed")
            return jsonify({'error': INTERNAL_ERROR, 'details': str(e)}), 500

    @app.route('/webhook', methods=['POST'])
    def webhook():
        # An empty body is an empty event; malformed JSON raises BadRequest before the dispatcher runs
        data = request.get_json() if request.is_json and request.get_data() else {}
        try:
            logger.info(f"Received webhook ({request.content_length or 0} bytes)")
            return jsonify(dispatcher.handle_event(data))
        except Exception as e:
            logger.error(f"Webhook error: {e}")
            return jsonify({'error': INTERNAL_ERROR, 'details': str(e)}), 500

    @app.route('/test-sms', methods=['GET'])
    def test_sms():
        try:
            sid = dispatcher.send_test_message()
            return jsonify({'success': True, 'messageSid': sid})
        except Exception as e:
            logger.error(f"Test SMS failed: {e}")
            return jsonify({'error': str(e)}), 500

    @app.route('/<path:path>', methods=['GET'])
    def fallback(path):
        return jsonify({'message': FALLBACK_MESSAGE, 'endpoints': dict(ENDPOINTS)})

    @app.errorhandler(Exception)
    def handle_error(e):
        if isinstance(e, HTTPException):
            return jsonify({'error': e.name, 'details': e.description}), e.code
        logger.exception("Unhandled error")
        return jsonify({'error': INTERNAL_ERROR, 'details': str(e)}), 500

    return app
