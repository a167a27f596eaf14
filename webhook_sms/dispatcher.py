import json
import logging
from typing import Any, Dict, Optional

from .config import Settings
from .constants import (
    CANDIDATE_UPDATED_MESSAGE,
    NO_ACTION_MESSAGE,
    NOT_CONFIGURED_MESSAGE,
    TEST_MESSAGE,
)
from .formatters import format_candidate_message
from .parsing import event_type, extract_candidate_info, is_candidate_created, is_candidate_updated
from .services import SmsNotConfiguredError, SmsSender

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """
    Decides, per webhook event, whether a recruiter SMS should be sent.

    There is no retry and no dedupe: a failed send raises SmsSendError to the
    caller, and the same payload delivered twice is sent twice.
    """

    def __init__(self, settings: Settings, sender: Optional[SmsSender]):
        self.settings = settings
        self.sender = sender

    @property
    def enabled(self) -> bool:
        return self.sender is not None

    def handle_event(self, event: Any) -> Dict[str, Any]:
        if self.settings.debug:
            logger.debug(f"Received webhook: {json.dumps(event, indent=2, default=str)}")

        if not self.enabled:
            logger.info("SMS not configured; skipping notification")
            return {"success": True, "message": NOT_CONFIGURED_MESSAGE}

        if is_candidate_created(event):
            return self._notify_candidate_created(event)

        if is_candidate_updated(event):
            logger.info("Candidate updated - no SMS sent")
            return {"success": True, "message": CANDIDATE_UPDATED_MESSAGE}

        logger.info(f"Event received but no action taken: {event_type(event)}")
        return {"success": True, "message": NO_ACTION_MESSAGE}

    def _notify_candidate_created(self, event: Any) -> Dict[str, Any]:
        info = extract_candidate_info(event)
        body = format_candidate_message(info)
        sid = self.sender.send(body, self.settings.from_number, self.settings.to_number)
        return {
            "success": True,
            "messageSid": sid,
            "candidate": info.name,
            "job": info.job_title,
        }

    def send_test_message(self) -> str:
        if not self.enabled:
            raise SmsNotConfiguredError("Twilio credentials are not configured")
        return self.sender.send(TEST_MESSAGE, self.settings.from_number, self.settings.to_number)
