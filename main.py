from webhook_sms.config import Settings
from webhook_sms.controller import create_app
from webhook_sms.logs import configure_logging

settings = Settings.from_env()
logger = configure_logging("DEBUG" if settings.debug else settings.log_level)

app = create_app(settings)

if __name__ == '__main__':
    logger.info(f"Server running on port {settings.port}")
    logger.info("Webhook endpoint: /webhook")
    logger.info("Test endpoint: /test-sms")
    app.run(host='0.0.0.0', port=settings.port, debug=settings.debug, use_reloader=False)
