import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_CONTENT_LENGTH,
    DEFAULT_PORT,
    DEFAULT_SMS_TIMEOUT_SECONDS,
)


def _get_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Invalid {name}='{raw}'. Must be an integer.") from None


def _get_bool(environ: Mapping[str, str], name: str, default: bool = False) -> bool:
    raw = environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() == "true"


def _get_str(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = (environ.get(name) or "").strip()
    return value or None


@dataclass(frozen=True)
class Settings:
    """Process configuration, read once at startup and never mutated."""

    account_sid: Optional[str] = None
    auth_token: Optional[str] = None
    from_number: Optional[str] = None
    to_number: Optional[str] = None
    port: int = DEFAULT_PORT
    debug: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    sms_timeout_seconds: int = DEFAULT_SMS_TIMEOUT_SECONDS
    max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH

    @property
    def has_credentials(self) -> bool:
        return bool(self.account_sid and self.auth_token)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            account_sid=_get_str(env, "TWILIO_ACCOUNT_SID"),
            auth_token=_get_str(env, "TWILIO_AUTH_TOKEN"),
            from_number=_get_str(env, "TWILIO_PHONE_NUMBER"),
            to_number=_get_str(env, "RECRUITER_PHONE_NUMBER"),
            port=_get_int(env, "PORT", DEFAULT_PORT),
            debug=_get_bool(env, "DEBUG_MODE"),
            log_level=(env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper(),
            sms_timeout_seconds=_get_int(env, "SMS_TIMEOUT_SECONDS", DEFAULT_SMS_TIMEOUT_SECONDS),
            max_content_length=_get_int(env, "MAX_CONTENT_LENGTH", DEFAULT_MAX_CONTENT_LENGTH),
        )
