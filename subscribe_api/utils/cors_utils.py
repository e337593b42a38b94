import re
from typing import Dict, List

_SPLIT_RE = re.compile(r"[,\s]+")

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Max-Age": "86400",
}

def parse_allowed_origins(raw: str) -> List[str]:
    """Comma- or whitespace-separated allow-list; empty items dropped."""
    raw = (raw or "").strip()
    return [o for o in _SPLIT_RE.split(raw) if o] if raw else []

def pick_cors_origin(request_origin: str, allow_list: List[str]) -> str:
    """Origin to echo back, or '' to omit the header entirely."""
    if not allow_list:
        return ""
    if "*" in allow_list:
        return "*"
    return request_origin if request_origin and request_origin in allow_list else ""

def origin_headers(origin: str) -> Dict[str, str]:
    if not origin:
        return {}
    return {"Access-Control-Allow-Origin": origin, "Vary": "Origin"}

def preflight_headers(origin: str) -> Dict[str, str]:
    return {**PREFLIGHT_HEADERS, **origin_headers(origin)}

__all__ = ["parse_allowed_origins", "pick_cors_origin", "origin_headers", "preflight_headers"]
