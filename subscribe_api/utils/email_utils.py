import json, re
from typing import Any

# "looks like local@domain.tld", not RFC 5322
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# digits, +, space, -, ( and ) survive
_PHONE_STRIP_RE = re.compile(r"[^0-9+ \-()]")

REASON_MAX_LEN = 280

def is_valid_email(email: str) -> bool:
    return bool(email) and EMAIL_RE.fullmatch(email) is not None

def clean_text(value: Any) -> str:
    """Coerce an optional JSON value to a trimmed string ('' for missing/null)."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return "true" if value else "false"
    # numbers, lists and objects keep their JSON spelling
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))

def truncate_reason(reason: str) -> str:
    return reason[:REASON_MAX_LEN]

def sanitize_phone(phone: str) -> str:
    return _PHONE_STRIP_RE.sub("", phone or "")

__all__ = ["EMAIL_RE", "REASON_MAX_LEN", "is_valid_email", "clean_text", "truncate_reason", "sanitize_phone"]
