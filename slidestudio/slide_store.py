import logging
import os
import re
import uuid
from collections import OrderedDict
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from slidestudio.config import settings
from slidestudio.exceptions import SlideStorageError

logger = logging.getLogger(__name__)

SLIDES_URL_PREFIX = "/generated-slides"

# "Slide 3: Revenue Growth" -> ("3", "Revenue Growth")
TITLE_PATTERN = re.compile(r"(?:Slide\s+(\d+)[:.]?\s*)?([^:\n]+)", re.IGNORECASE)
LEADING_DECORATION_PATTERN = re.compile(r"^[#\s*>-]*")
SLIDE_NUMBER_PATTERN = re.compile(r"(?:-|^)slide-(\d+)", re.IGNORECASE)

MAX_TITLE_LENGTH = 40


def _short_id(length: int) -> str:
    return uuid.uuid4().hex[:length]


def sanitize_title(raw_title: str) -> str:
    """Lowercase slug of alphanumerics and hyphens, at most 40 characters."""
    text = re.sub(r"[^a-z0-9\s-]", "", raw_title, flags=re.IGNORECASE).strip()
    text = re.sub(r"\s+", "-", text)
    return text.lower()[:MAX_TITLE_LENGTH]


def derive_slide_filename(prompt: str) -> str:
    """Build ``slide-<n>-<title>-<id>.png`` from the user's original prompt.

    The slide number becomes ``x`` when the prompt has no ``Slide N`` marker.
    Prompts without any usable title get a random ``slide-x-<id>.png`` name.
    """
    candidate = LEADING_DECORATION_PATTERN.sub("", prompt or "")
    match = TITLE_PATTERN.search(candidate)
    if match:
        slide_number = match.group(1) or "x"
        sanitized = sanitize_title(match.group(2).strip())
        if sanitized:
            return f"slide-{slide_number}-{sanitized}-{_short_id(6)}.png"

    return f"slide-x-{_short_id(8)}.png"


def today_partition() -> str:
    """Date folder for files generated now (UTC, YYYY-MM-DD)."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")


def save_slide_image(data: bytes, filename: str, date: Optional[str] = None) -> str:
    """Write image bytes under the date partition and return their public URL."""
    date = date or today_partition()
    directory = os.path.join(settings.slides_root, date)

    try:
        os.makedirs(directory, exist_ok=True)
        with open(os.path.join(directory, filename), "wb") as f:
            f.write(data)
    except OSError as e:
        raise SlideStorageError(f"Failed to write slide {filename}: {e}", original_error=e)

    logger.info(f"Saved slide image {date}/{filename} ({len(data)} bytes)")
    return f"{SLIDES_URL_PREFIX}/{date}/{filename}"


def _date_folders(root: str) -> List[str]:
    return sorted(
        (name for name in os.listdir(root) if os.path.isdir(os.path.join(root, name))),
        reverse=True,
    )


def list_slide_files() -> Tuple[List[str], str]:
    """List PNG files of the gallery's date folder.

    Prefers the configured date when that folder exists, otherwise the
    lexicographically latest one. Returns ``(files, base_path)``.
    """
    root = settings.slides_root
    if not os.path.isdir(root):
        return [], ""

    folders = _date_folders(root)
    if not folders:
        return [], ""

    preferred = settings.PREFERRED_SLIDE_DATE
    date = preferred if preferred in folders else folders[0]

    directory = os.path.join(root, date)
    files = sorted(name for name in os.listdir(directory) if name.endswith(".png"))
    return files, f"{SLIDES_URL_PREFIX}/{date}"


def parse_slide_number(filename: str) -> Optional[int]:
    match = SLIDE_NUMBER_PATTERN.search(filename)
    return int(match.group(1)) if match else None


def group_slide_files(files: List[str]) -> Dict[int, List[str]]:
    """Group filenames by embedded slide number, keeping listing order.

    Files without a slide number are left out.
    """
    groups: Dict[int, List[str]] = OrderedDict()
    for filename in files:
        number = parse_slide_number(filename)
        if number is None:
            continue
        groups.setdefault(number, []).append(filename)
    return groups
