from datetime import datetime, timezone
from typing import Optional

from .constants import CANDIDATE_HEADER
from .parsing import CandidateInfo


def format_local_timestamp(now: Optional[datetime] = None) -> str:
    """Local time as M/D/YYYY, h:MM:SS AM|PM (no zero padding on month/day/hour)."""
    now = now or datetime.now()
    hour = now.hour % 12 or 12
    meridiem = "AM" if now.hour < 12 else "PM"
    return f"{now.month}/{now.day}/{now.year}, {hour}:{now:%M:%S} {meridiem}"


def format_iso_timestamp(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_candidate_message(info: CandidateInfo, now: Optional[datetime] = None) -> str:
    lines = [
        CANDIDATE_HEADER,
        "",
        f"Name: {info.name}",
        f"Position: {info.job_title}",
    ]
    if info.email:
        lines.append(f"Email: {info.email}")
    lines.extend([
        "",
        f"Time: {format_local_timestamp(now)}",
    ])
    return "\n".join(lines)
