"""Text and date formatting helpers shared by page loaders and calculators."""

import math
import re
import unicodedata
from datetime import date, datetime
from typing import Union

WORDS_PER_MINUTE = 200

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE_RE = re.compile(r"^(\d{3})(\d{3})(\d{4})$")


def format_date(value: Union[str, date, datetime]) -> str:
    """Return *value* as a long US-style date, e.g. ``January 15, 2025``."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return f"{value:%B} {value.day}, {value.year}"


def calculate_reading_time(content: str) -> int:
    """Minutes needed to read *content* at 200 words per minute, rounded up."""
    words = len(content.split())
    return math.ceil(words / WORDS_PER_MINUTE)


def slugify(text: str) -> str:
    """Lowercase, ASCII-only, hyphen-separated slug for *text*."""
    slug = unicodedata.normalize("NFKD", text)
    slug = slug.encode("ascii", "ignore").decode("ascii")
    slug = slug.lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[\s_-]+", "-", slug)
    return slug.strip("-")


def truncate(text: str, length: int) -> str:
    """Cut *text* to *length* characters, adding an ellipsis when shortened."""
    if len(text) <= length:
        return text
    return text[:length].strip() + "..."


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email))


def format_phone_number(phone: str) -> str:
    """Format a 10-digit US number as ``(555) 123-4567``; anything else is returned as-is."""
    digits = re.sub(r"\D", "", phone)
    match = _PHONE_RE.match(digits)
    if match:
        return f"({match.group(1)}) {match.group(2)}-{match.group(3)}"
    return phone
