from dataclasses import dataclass
from typing import Any, Optional

from .constants import (
    DEFAULT_CANDIDATE_NAME,
    DEFAULT_JOB_TITLE,
    EVENT_CANDIDATE_CREATED,
    EVENT_CANDIDATE_UPDATED,
    EVENT_FIELDS,
)


@dataclass(frozen=True)
class CandidateInfo:
    name: Any
    job_title: Any
    email: Any = ""


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _dig(data: Any, *path: str) -> Any:
    """Follows nested keys, returning None as soon as a level is not a dict."""
    current = data
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def event_type(event: Any) -> Optional[Any]:
    body = _as_dict(event)
    for field in EVENT_FIELDS:
        if body.get(field):
            return body[field]
    return None


def is_event(event: Any, name: str) -> bool:
    # type and event are checked independently: either one may carry the value
    body = _as_dict(event)
    return any(body.get(field) == name for field in EVENT_FIELDS)


def is_candidate_created(event: Any) -> bool:
    return is_event(event, EVENT_CANDIDATE_CREATED)


def is_candidate_updated(event: Any) -> bool:
    return is_event(event, EVENT_CANDIDATE_UPDATED)


def extract_candidate_info(event: Any) -> CandidateInfo:
    """
    Builds a CandidateInfo from a Teamtailor webhook body.

    Fallback order:
      name      -> data.attributes.name, data.attributes.first_name, "New candidate"
      email     -> data.attributes.email, ""
      job_title -> data.relationships.job.data.attributes.title, "Unknown position"

    Missing or malformed levels never raise. Values are not type checked.
    """
    attributes = _as_dict(_dig(event, "data", "attributes"))

    name = attributes.get("name") or attributes.get("first_name") or DEFAULT_CANDIDATE_NAME
    email = attributes.get("email") or ""
    job_title = _dig(event, "data", "relationships", "job", "data", "attributes", "title") or DEFAULT_JOB_TITLE

    return CandidateInfo(name=name, job_title=job_title, email=email)
