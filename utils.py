# utils.py  (2026-10-12)
from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Any, Pattern
from urllib.parse import SplitResult, parse_qs, urlsplit, urlunsplit

# ─────────────────────────── constants ────────────────────────────
LOG_NO_PARAM   = "logNo"
LOG_NO_PATTERN = re.compile(r"^\d{6,}$")
# ──────────────────────────────────────────────────────────────────

# ─────────────────────── feed field coercion ──────────────────────
def as_text(value: Any) -> str:
    """Flatten a parsed feed field (str / number / list / node dict) to text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (list, tuple)):
        return " ".join(as_text(v) for v in value)
    if isinstance(value, dict):
        if "#text" in value:
            return as_text(value["#text"])
        if "__cdata" in value:
            return as_text(value["__cdata"])
        return ""
    return ""

# ───────────────────────── URL helpers ────────────────────────────
def split_url(url: str):
    """urlsplit() that returns None for anything that isn't scheme://host/..."""
    try:
        parts = urlsplit(url)
        parts.port                    # raises on a garbage port
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None
    return parts


def normalize_url(url: str) -> str:
    """Drop the #fragment. Unparseable input comes back untouched."""
    parts = split_url(url)
    if parts is None:
        return url
    return urlunsplit(parts._replace(fragment=""))

# ───────────────────── document identifiers ───────────────────────
@dataclass(frozen=True)
class IdentifierPolicy:
    """How a post URL carries its id: a query param, else a numeric last segment."""

    query_param: str = LOG_NO_PARAM
    path_pattern: Pattern[str] = field(default=LOG_NO_PATTERN)

    def extract(self, url: str) -> str | None:
        parts = split_url(url)
        if parts is None:
            return None
        return self.extract_parts(parts)

    def extract_parts(self, parts: SplitResult) -> str | None:
        """Same as extract() for a URL already run through split_url()."""
        values = parse_qs(parts.query, keep_blank_values=True).get(self.query_param)
        if values:
            q = values[0].strip()
            if q:
                return q
        segments = [s for s in parts.path.split("/") if s]
        if segments and self.path_pattern.fullmatch(segments[-1]):
            return segments[-1]
        return None


NAVER_POLICY = IdentifierPolicy()


def extract_identifier(url: str, policy: IdentifierPolicy = NAVER_POLICY) -> str | None:
    return policy.extract(url)
