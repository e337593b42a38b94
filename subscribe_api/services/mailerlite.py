import logging
from typing import Any, Dict

from subscribe_api.config import Settings
from subscribe_api.errors import ServerConfigError, UpstreamError
from subscribe_api.models.schema import SubscriptionRequest
from subscribe_api.utils.http_utils import timed_post, json_or_none

logger = logging.getLogger(__name__)

def build_payload(sub: SubscriptionRequest, group_id: str) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"email": sub.email}
    fields = sub.extra_fields()
    if fields:
        payload["fields"] = fields
    payload["groups"] = [group_id]
    return payload

def _auth_headers(api_key: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "Authorization": f"Bearer {api_key}",
    }

def require_api_key(settings: Settings) -> str:
    if not settings.mailerlite_api_key:
        logger.error("MAILERLITE_API_KEY is not configured")
        raise ServerConfigError()
    return settings.mailerlite_api_key

def upsert_subscriber(settings: Settings, sub: SubscriptionRequest) -> None:
    """Create-or-update the subscriber and add them to the configured group.

    Raises UpstreamError when MailerLite answers with a non-2xx status.
    Network errors propagate as requests exceptions.
    """
    api_key = require_api_key(settings)
    resp = timed_post(
        f"{settings.mailerlite_api_url}/subscribers",
        "mailerlite_subscribers",
        build_payload(sub, settings.mailerlite_group_id),
        headers=_auth_headers(api_key),
        timeout=settings.request_timeout,
    )
    data = json_or_none(resp)

    if not 200 <= resp.status_code < 300:
        data = data if isinstance(data, dict) else {}
        message = data.get("message")
        logger.warning("MailerLite rejected subscriber (status=%s): %s", resp.status_code, message)
        extra = {"errors": data["errors"]} if "errors" in data else {}
        raise UpstreamError(
            message if isinstance(message, str) else None,
            status_code=resp.status_code,
            **extra,
        )
