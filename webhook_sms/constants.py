# Event discriminators
EVENT_CANDIDATE_CREATED = "candidate_created"
EVENT_CANDIDATE_UPDATED = "candidate_updated"
EVENT_FIELDS = ("type", "event")

# Placeholders used when the webhook body lacks a field
DEFAULT_CANDIDATE_NAME = "New candidate"
DEFAULT_JOB_TITLE = "Unknown position"

# SMS templates
CANDIDATE_HEADER = "🔔 New candidate applied!"
TEST_MESSAGE = "Test message from your Teamtailor-Twilio integration! 🎉"

# Response messages
HEALTH_MESSAGE = "Teamtailor-Twilio webhook is running!"
FALLBACK_MESSAGE = "Teamtailor-Twilio webhook server"
NOT_CONFIGURED_MESSAGE = "SMS not configured - webhook received but no SMS sent"
CANDIDATE_UPDATED_MESSAGE = "Candidate updated event received"
NO_ACTION_MESSAGE = "Webhook received but no action configured for this event type"
INTERNAL_ERROR = "Internal server error"

ENDPOINTS = {
    "health": "GET /",
    "webhook": "POST /webhook",
    "test": "GET /test-sms",
}

# Environment defaults
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SMS_TIMEOUT_SECONDS = 10
DEFAULT_MAX_CONTENT_LENGTH = 100 * 1024
