import logging
import os
from datetime import datetime, timezone
from typing import Any, Optional

from slidestudio.config import settings

logger = logging.getLogger(__name__)

ENTRY_SEPARATOR = "-----------------------------------"


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """UTC ISO-8601 with milliseconds and a trailing Z, e.g. 2026-01-06T09:15:02.113Z"""
    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _text(value: Any) -> str:
    """Render a request value the way it was sent; booleans stay JSON literals."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_feedback_entry(slide_id: Any, filename: Any, feedback: str, timestamp: Optional[datetime] = None) -> str:
    return (
        f"[{iso_timestamp(timestamp)}] Slide: {_text(filename)} (ID: {_text(slide_id)})\n"
        f"Feedback: {feedback}\n"
        f"{ENTRY_SEPARATOR}\n"
    )


def append_feedback(slide_id: Any, filename: Any, feedback: str) -> str:
    """Append one feedback block to the shared log. Returns the log path."""
    os.makedirs(settings.FEEDBACK_DIR, exist_ok=True)
    path = settings.feedback_log_path
    entry = format_feedback_entry(slide_id, filename, feedback)

    with open(path, "a", encoding="utf-8") as f:
        f.write(entry)

    logger.info(f"Feedback recorded for {filename} (ID: {slide_id})")
    return path
