import json, math, time, requests
from typing import Optional, Dict, Any, Union
from subscribe_api.metrics import REQ_LATENCY, REQUESTS_TOTAL, REQUEST_ERRORS
from subscribe_api.config import DEFAULT_REQUEST_TIMEOUT

def timed_post(url: str, target: str, json_body: Any,
               headers: Optional[Dict[str, str]] = None,
               timeout: float = DEFAULT_REQUEST_TIMEOUT) -> requests.Response:
    """POST with latency/status metrics. Network errors are counted and re-raised."""
    t0 = time.perf_counter()
    try:
        resp = requests.post(url, json=json_body, headers=headers, timeout=timeout)
    except requests.RequestException:
        REQ_LATENCY.labels(target).observe(time.perf_counter() - t0)
        REQUEST_ERRORS.labels(target).inc()
        raise
    REQ_LATENCY.labels(target).observe(time.perf_counter() - t0)
    REQUESTS_TOTAL.labels(target, str(resp.status_code)).inc()
    return resp

def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")

def _finite_or_null(text: str) -> Optional[float]:
    # 1e400 overflows to inf, which cannot be rendered back as JSON
    value = float(text)
    return value if math.isfinite(value) else None

def loads_strict(raw: Union[str, bytes]) -> Any:
    """json.loads without NaN/Infinity. Raises ValueError (or RecursionError on deep nesting)."""
    return json.loads(raw, parse_constant=_reject_constant, parse_float=_finite_or_null)

def json_or_none(resp: requests.Response) -> Any:
    try:
        return loads_strict(resp.text)
    except (ValueError, RecursionError):
        return None
