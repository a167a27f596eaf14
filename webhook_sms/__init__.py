"""Teamtailor webhook -> Twilio SMS relay.

Modules:
- constants: literal values, message templates and environment defaults
- config: Settings read once from the environment
- logs: console logging setup
- parsing: tolerant extraction of candidate fields from the webhook body
- formatters: SMS body and timestamp formatting
- services: outbound SMS capability (Twilio)
- dispatcher: decides whether/how to notify for each event
- controller: Flask app creation and endpoints
"""
