import logging
from abc import ABC, abstractmethod
from typing import Optional

import requests
from twilio.base.exceptions import TwilioException
from twilio.http.http_client import TwilioHttpClient
from twilio.rest import Client as TwilioClient

from .config import Settings

logger = logging.getLogger(__name__)


class SmsSendError(Exception):
    """Outbound SMS failed (network, authentication, invalid recipient...)."""


class SmsNotConfiguredError(Exception):
    """Outbound messaging credentials are missing."""


class SmsSender(ABC):
    """Narrow outbound-messaging capability: one send, one message identifier."""

    @abstractmethod
    def send(self, body: str, from_: Optional[str], to: Optional[str]) -> str:
        """Sends one SMS and returns its message identifier; raises SmsSendError on failure."""


class TwilioSmsSender(SmsSender):
    def __init__(self, client: TwilioClient):
        self.client = client

    def send(self, body: str, from_: Optional[str], to: Optional[str]) -> str:
        try:
            message = self.client.messages.create(body=body, from_=from_, to=to)
        except TwilioException as exc:
            logger.error(f"Twilio rejected message to {to}: {exc}")
            raise SmsSendError(str(exc)) from exc
        except requests.RequestException as exc:
            logger.error(f"Network error while sending SMS to {to}: {exc}")
            raise SmsSendError(str(exc)) from exc

        logger.info(f"SMS sent successfully: {message.sid}")
        return message.sid


def build_sms_sender(settings: Settings) -> Optional[SmsSender]:
    """
    Returns a Twilio-backed sender, or None when the account SID / auth token are missing.
    A missing sender turns the webhook into a no-op acknowledgement instead of failing.
    """
    if not settings.has_credentials:
        logger.warning("Twilio credentials not configured; SMS sending is disabled")
        return None

    if not settings.from_number or not settings.to_number:
        logger.warning("TWILIO_PHONE_NUMBER or RECRUITER_PHONE_NUMBER is not set; sends will be rejected")

    http_client = TwilioHttpClient(timeout=settings.sms_timeout_seconds)
    client = TwilioClient(settings.account_sid, settings.auth_token, http_client=http_client)
    logger.info("Twilio client initialized successfully")
    return TwilioSmsSender(client)
