# formatters.py
import re
from decimal import ROUND_HALF_UP, Decimal

_SLUG_RE = re.compile(r"[^a-z0-9]+")

_VIEW_SUFFIXES = (
    (1e9, "B"),
    (1e6, "M"),
    (1e3, "K"),
)

def _one_decimal(value: float) -> str:
    # Rounds the exact binary value half-up, the way Number.toFixed(1) does.
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

def format_views(n: int) -> str:
    """Turns a raw view count into e.g. '1.2M views'."""
    for threshold, suffix in _VIEW_SUFFIXES:
        if n >= threshold:
            return f"{_one_decimal(n / threshold)}{suffix} views"
    return f"{n} views"

def time_ago(days: int) -> str:
    """Turns an age in days into a relative timestamp."""
    if days < 1:
        return "Today"
    if days == 1:
        return "1 day ago"
    if days < 30:
        return f"{days} days ago"
    if days < 365:
        return f"{days // 30} months ago"
    return f"{days // 365} years ago"

def slugify(text: str) -> str:
    return _SLUG_RE.sub("-", text.lower()).strip("-")

def format_duration(minutes: int, seconds: int) -> str:
    return f"{minutes}:{seconds:02d}"
