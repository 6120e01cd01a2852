"""
Pure text helpers used when authoring articles and pins.

Nothing in here touches the database or the request; every function takes
plain values and returns plain values.
"""
import html
import math
import re
import time
import unicodedata

WORDS_PER_MINUTE = 120
MIN_READING_TIME = 3
EXCERPT_LENGTH = 200

DEFAULT_SUBTITLE = "Matéria interativa publicada pela Habitare."
DEFAULT_HELPER_TEXT = "Conteúdo curado pelo estúdio Habitare."

_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")
_HTML_TAG = re.compile(r"<[^>]*>")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _timestamp_ms() -> int:
    return int(time.time() * 1000)


def slugify(value: str | None = "", fallback_prefix: str = "item") -> str:
    """
    Turn a title or name into a URL-safe slug.

    "Casa Observatório na Mata" -> "casa-observatorio-na-mata". When nothing
    alphanumeric survives, a time-based placeholder is returned instead.
    """
    normalized = unicodedata.normalize("NFD", str(value or ""))
    slug = _COMBINING_MARKS.sub("", normalized).lower()
    slug = _NON_ALPHANUMERIC.sub("-", slug).strip("-")
    return slug or f"{fallback_prefix}-{_timestamp_ms()}"


def placeholder_slug(prefix: str) -> str:
    return f"{prefix}-{_timestamp_ms()}"


def strip_html(markup: str | None) -> str:
    if not markup:
        return ""
    return html.unescape(_HTML_TAG.sub("", markup)).strip()


def calculate_reading_time(text: str) -> int:
    words = len(text.split())
    return max(MIN_READING_TIME, math.ceil(words / WORDS_PER_MINUTE))


def extract_subtitle(text: str, fallback: str | None = DEFAULT_SUBTITLE) -> str | None:
    """First sentence of the text."""
    first = text.split(".")[0].strip()
    return first or fallback


def extract_helper_text(text: str, fallback: str = DEFAULT_HELPER_TEXT) -> str:
    """Second and third sentences, used below the highlight stat."""
    parts = [part.strip() for part in text.split(".")[1:3]]
    helper = ". ".join(part for part in parts if part)
    return helper or fallback


def build_excerpt(text: str, length: int = EXCERPT_LENGTH) -> str:
    return text[:length]


def clean_text(value, default: str = "") -> str:
    if value is None:
        return default
    return str(value).strip() or default


def to_number(value, fallback: int = 0) -> int:
    """Leading integer of value ("10abc" -> 10), else fallback."""
    if isinstance(value, bool):
        return fallback
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value)) if value is not None else None
    return int(match.group(1)) if match else fallback


def clamp_percent(value) -> float:
    """Coerce to a number and keep it inside [0, 100]. Garbage becomes 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return min(max(number, 0.0), 100.0)
